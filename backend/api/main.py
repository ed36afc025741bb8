"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, backend.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.configs import get_settings
from backend.boundary.db import get_async_engine
from backend.observability import configure_logging
from backend.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware
from backend.api.deps.dependencies import get_service_cache
from backend.api import api_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    # Startup
    logger.info(
        "Starting Rosetta API",
        extra={"environment": settings.environment, "aws_region": settings.aws.region},
    )

    yield

    # Shutdown
    get_service_cache().clear()
    await get_async_engine().dispose()
    logger.info("Service cache cleared, database pool disposed")


async def api_response_exception_handler(request: Request, exc: HTTPException):
    """Render structured HTTPException details as the response body itself."""
    if isinstance(exc.detail, dict):
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.detail,
            headers=exc.headers,
        )
    return await http_exception_handler(request, exc)


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()

    app = FastAPI(
        title="Rosetta Translation API",
        description="Personal translation assistant: translate, speak, read, transcribe and save",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware (last added runs first)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_exception_handler(HTTPException, api_response_exception_handler)

    # All routers live under /api
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "backend.api.main:app",
        host=settings.app_host,
        port=settings.app_port,
    )
