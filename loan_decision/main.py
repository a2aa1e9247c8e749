"""
Loan Decision Gateway - Main Application Entry Point

A loan eligibility service that decides which loan amount and repayment
period can be offered to an applicant.

Run locally with:
    loan-decision-gateway
or:
    uvicorn loan_decision.main:app --port 8080
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import structlog
import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from loan_decision.core.config import Settings, settings as default_settings
from loan_decision.core.logging import setup_logging
from loan_decision.core.metrics import get_metrics, get_metrics_content_type
from loan_decision.presentation.api import api_router
from loan_decision.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    register_exception_handlers,
)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    app_settings: Settings = app.state.settings
    setup_logging(app_settings.log_level, app_settings.log_format)
    logger.info(
        "application_started",
        version=app_settings.app_version,
        metrics_enabled=app_settings.metrics_enabled,
    )

    yield

    logger.info("application_stopped")


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Middleware order (outermost first): request context, access logging,
    CORS. The request ID is therefore bound before anything is logged.
    """
    app_settings = app_settings or default_settings

    app = FastAPI(
        title="Loan Decision Gateway",
        description="Decides which loan amount and period can be offered to an applicant.",
        version=app_settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = app_settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_allow_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestContextMiddleware)

    register_exception_handlers(app)
    app.include_router(api_router)

    if app_settings.metrics_enabled:
        @app.get("/metrics", include_in_schema=False)
        async def metrics() -> Response:
            return Response(content=get_metrics(), media_type=get_metrics_content_type())

    @app.get("/", include_in_schema=False)
    async def root() -> RedirectResponse:
        return RedirectResponse(url="/docs")

    return app


app = create_app()


def run() -> None:
    """Console script entry point."""
    uvicorn.run(
        "loan_decision.main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.debug,
    )


if __name__ == "__main__":
    run()
