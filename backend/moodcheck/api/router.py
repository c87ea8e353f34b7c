"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from moodcheck.api.routes import (
    auth, users, reflections, stats, reviews, navigation
)

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(reflections.router)
api_router.include_router(stats.router)
api_router.include_router(reviews.router)
api_router.include_router(navigation.router)
