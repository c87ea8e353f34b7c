"""
Pydantic schemas for the route table and navigation checks.
"""
from pydantic import BaseModel
from typing import List, Optional


class RouteResponse(BaseModel):
    """Schema for one entry of the route table."""
    path: str
    name: str
    roles: List[str]
    requires_auth: bool
    public: bool

    class Config:
        from_attributes = True


class NavigationResponse(BaseModel):
    """Schema for a navigation decision."""
    path: str
    allowed: bool
    redirect: Optional[str] = None
    route: Optional[RouteResponse] = None

    class Config:
        from_attributes = True
