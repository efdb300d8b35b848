from .donors import router as donors_router
from .hospitals import router as hospitals_router
from .dashboard import router as dashboard_router
from .matching import router as matching_router

__all__ = [
    'donors_router',
    'hospitals_router',
    'dashboard_router',
    'matching_router'
]
