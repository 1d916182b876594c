"""
Milk Subscription Service - FastAPI Application
Subscribe to a delivery plan, list subscriptions and project pauses.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from milk_subscriptions.api.routes import health, subscriptions
from milk_subscriptions.config import Settings, get_settings
from milk_subscriptions.core.exceptions import AppError
from milk_subscriptions.services.subscription_service import SubscriptionService

logger = logging.getLogger(__name__)

MALFORMED_BODY = "Malformed request body."


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle startup and shutdown events."""
    app_settings: Settings = app.state.settings
    logger.info(f"Server running on port {app_settings.port}")
    logger.info(f"API running on {app_settings.app_env} environment")
    yield
    logger.info("Shutting down Milk Subscription API...")


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(f"Rejected malformed body on {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"message": MALFORMED_BODY})


def create_app(
    service: SubscriptionService | None = None,
    app_settings: Settings | None = None,
) -> FastAPI:
    app_settings = app_settings or get_settings()
    app = FastAPI(
        title=app_settings.app_name,
        description="Milk delivery subscription API",
        version="1.0.0",
        debug=app_settings.app_debug,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.subscription_service = service or SubscriptionService(
        calendar_tz=app_settings.calendar_tz
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    @app.get("/")
    async def root() -> dict:
        return {
            "name": app_settings.app_name,
            "environment": app_settings.app_env,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    app.include_router(health.router, tags=["Health"])
    app.include_router(subscriptions.router, tags=["Subscriptions"])
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app on the configured host and port."""
    app_settings = get_settings()
    logging.basicConfig(
        level=app_settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host=app_settings.host, port=app_settings.port, log_level=app_settings.log_level.lower())


if __name__ == "__main__":
    run()
