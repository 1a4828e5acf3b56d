"""FastAPI application entry point."""
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.logging_config import configure_logging
from app.models import ErrorResponse
from app.routers import health_router, portfolio_router

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()
    logger.info(
        "app_starting",
        app_name=settings.app_name,
        version=settings.app_version,
        environment="DEBUG" if settings.debug else "PRODUCTION",
    )
    yield
    logger.info("app_stopping", app_name=settings.app_name)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="""
        ## Partner Portfolio Scoring API

        AI-readiness scoring for partner portfolio companies.

        ### Features:
        - Six-dimension fit score (0-100) per portfolio company
        - Recommendation: Exec Bootcamp, Literacy Sprint, Diagnostic or Not now
        - Risk flags for missing sponsors and inaccessible data
        - Portfolio summary with top candidates
        - Partner plan: qualified leads, co-delivery pre-work, heatmap
        """,
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json"
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(portfolio_router)

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(
            "unhandled_exception",
            path=request.url.path,
            error=str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(detail="Internal server error", error=str(exc)).model_dump(),
        )

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
