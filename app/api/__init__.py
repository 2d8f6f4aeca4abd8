"""API layer module.

Contains FastAPI routers and request/response schemas.
"""

from app.api.customizations import router as customizations_router
from app.api.designs import router as designs_router
from app.api.garments import router as garments_router
from app.api.health import router as health_router
from app.api.options import router as options_router

__all__ = [
    "customizations_router",
    "designs_router",
    "garments_router",
    "health_router",
    "options_router",
]
