"""
Router package for the workout template exercises service.

This package contains all API routers organized by domain:
- health: Health check endpoint
- template_exercises: Load, replace and duplicate template entries
- entries: Draft entry validation
- exercises: Exercise catalog lookup
"""

from api.routers.entries import router as entries_router
from api.routers.exercises import router as exercises_router
from api.routers.health import router as health_router
from api.routers.template_exercises import router as template_exercises_router

__all__ = [
    "entries_router",
    "exercises_router",
    "health_router",
    "template_exercises_router",
]
