"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sheetstock.application.factory import ServiceFactory, get_factory
from sheetstock.web.exceptions import register_exception_handlers
from sheetstock.web.routers import cuts_router, inventory_router, summary_router


def create_app(factory: ServiceFactory | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        factory: Services to serve. Defaults to the JSON store described by
            the default configuration.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title="Sheet Stock API",
        description="REST API for sheet stock inventory and cut allocation",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.factory = factory if factory is not None else get_factory()

    # CORS middleware for browser access
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(inventory_router, prefix="/api/v1")
    app.include_router(cuts_router, prefix="/api/v1")
    app.include_router(summary_router, prefix="/api/v1")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app
