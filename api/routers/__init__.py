"""
Router package for the workout engine service.

This package contains all API routers organized by domain:
- health: Health check and cache administration endpoints
- workouts: Workout generation, classification and exercise swaps
"""

from api.routers.health import router as health_router
from api.routers.workouts import router as workouts_router

__all__ = [
    "health_router",
    "workouts_router",
]
