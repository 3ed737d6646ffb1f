"""FastAPI application factory.

Run with ``uvicorn cabinet_pricing.web.app:app``.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cabinet_pricing import __version__
from cabinet_pricing.web.exceptions import register_exception_handlers
from cabinet_pricing.web.routers import cabinets_router, quotes_router


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title="Cabinet Pricing API",
        description="REST API for quoting furniture cabinets and projects",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(quotes_router, prefix="/api/v1")
    app.include_router(cabinets_router, prefix="/api/v1")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


# Application instance for ASGI servers (uvicorn)
app = create_app()
