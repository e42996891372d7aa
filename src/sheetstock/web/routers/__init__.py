"""API routers for the REST API."""

from sheetstock.web.routers.cuts import router as cuts_router
from sheetstock.web.routers.inventory import router as inventory_router
from sheetstock.web.routers.summary import router as summary_router

__all__ = [
    "cuts_router",
    "inventory_router",
    "summary_router",
]
