"""Routers package - API endpoint routers."""

from .health import router as health_router
from .portfolio import router as portfolio_router

__all__ = [
    "health_router",
    "portfolio_router",
]
