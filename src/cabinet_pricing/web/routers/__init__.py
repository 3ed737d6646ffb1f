"""API routers for the REST API."""

from cabinet_pricing.web.routers.cabinets import router as cabinets_router
from cabinet_pricing.web.routers.quotes import router as quotes_router

__all__ = [
    "cabinets_router",
    "quotes_router",
]
