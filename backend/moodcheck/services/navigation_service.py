"""
Route table and role-based navigation guard for the client views.
"""
from typing import Iterable, List, Optional, Tuple
from urllib.parse import urlencode
from moodcheck.services.auth_service import AuthSession, ROLE_ADMIN, ROLE_USER

HOME_PATH = "/"
LOGIN_PATH = "/FireLogin"


class RouteSpec:
    """A client view and who may open it."""

    def __init__(
        self,
        path: str,
        name: str,
        roles: Iterable[str] = (),
        requires_auth: bool = False,
        public: bool = False
    ):
        self.path = path
        self.name = name
        self.roles: Tuple[str, ...] = tuple(roles)
        self.requires_auth = requires_auth
        self.public = public


ROUTES: List[RouteSpec] = [
    RouteSpec("/", "Home"),
    RouteSpec("/reflect", "Reflect"),
    RouteSpec("/connect", "Connect"),

    # Role protected
    RouteSpec("/results", "Results", roles=[ROLE_ADMIN], requires_auth=True),
    RouteSpec("/reviews", "Reviews", roles=[ROLE_USER], requires_auth=True),
    RouteSpec("/my-reviews", "MyReviews", roles=[ROLE_USER], requires_auth=True),
    RouteSpec("/my-account", "MyAccount", roles=[ROLE_USER], requires_auth=True),
    RouteSpec("/reviews-admin", "ReviewsAdmin", roles=[ROLE_ADMIN], requires_auth=True),
    RouteSpec("/admin", "Admin", roles=[ROLE_ADMIN], requires_auth=True),

    # Auth pages
    RouteSpec("/FireLogin", "FireLogin", public=True),
    RouteSpec("/FireRegister", "FireRegister", public=True),
]

_ROUTES_BY_PATH = {route.path: route for route in ROUTES}


class NavigationResult:
    """Outcome of a navigation attempt: allowed, or redirected elsewhere."""

    def __init__(self, path: str, allowed: bool, redirect: Optional[str] = None, route: Optional[RouteSpec] = None):
        self.path = path
        self.allowed = allowed
        self.redirect = redirect
        self.route = route


def find_route(path: str) -> Optional[RouteSpec]:
    # Client paths, not URLs: "//admin" must not be read as a host
    route_path = path.split("?", 1)[0].split("#", 1)[0] or HOME_PATH
    if route_path != HOME_PATH:
        route_path = route_path.rstrip("/")
    return _ROUTES_BY_PATH.get(route_path)


def resolve_navigation(path: str, session: Optional[AuthSession]) -> NavigationResult:
    """
    Decide whether ``session`` may open ``path``.

    Unknown paths fall through to home. A protected view without a session
    goes to the login page (carrying the requested path); a session whose
    role is not allowed goes home.
    """
    route = find_route(path)
    if route is None:
        return NavigationResult(path, allowed=False, redirect=HOME_PATH)
    if route.public:
        return NavigationResult(path, allowed=True, route=route)
    if route.requires_auth and session is None:
        redirect = f"{LOGIN_PATH}?{urlencode({'redirect': path})}"
        return NavigationResult(path, allowed=False, redirect=redirect, route=route)
    if route.roles and (session is None or session.role not in route.roles):
        return NavigationResult(path, allowed=False, redirect=HOME_PATH, route=route)
    return NavigationResult(path, allowed=True, route=route)
