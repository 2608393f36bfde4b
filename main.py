"""
FastAPI Application - Review Service
"""

# Load environment variables from .env file FIRST before any other imports
from dotenv import load_dotenv
load_dotenv()

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from review_service.api import health, home, reactions, reviews
from review_service.core.config import config
from review_service.core.errors import (
    ErrorResponse,
    error_response_handler,
    http_exception_handler,
    request_validation_handler,
)
from review_service.core.logger import logger
from review_service.core.rate_limit import limiter
from review_service.core.telemetry import instrument_app
from review_service.db.mongodb import connect_to_mongo, close_mongo_connection
from review_service.middleware import CorrelationIdMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info("Starting Review Service...")
    await connect_to_mongo()

    logger.info(
        "Review Service started successfully",
        metadata={
            "service_name": config.service_name,
            "version": config.service_version,
            "environment": config.environment,
            "port": config.port
        }
    )

    yield

    logger.info("Shutting down Review Service...")
    await close_mongo_connection()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Review Service",
        description="Anonymous media reviews with threaded replies and reactions",
        version=config.service_version,
        lifespan=lifespan
    )

    instrument_app(app)

    app.state.limiter = limiter

    app.add_exception_handler(ErrorResponse, error_response_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    app.add_middleware(CorrelationIdMiddleware)

    app.include_router(home.router, tags=["home"])
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(reviews.router, prefix="/api/reviews", tags=["reviews"])
    app.include_router(reactions.router, prefix="/api/reactions", tags=["reactions"])

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info(
        f"Starting {config.service_name} on port {config.port}",
        metadata={
            "service_name": config.service_name,
            "version": config.service_version,
            "environment": config.environment,
            "port": config.port
        }
    )

    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.environment == "development"
    )
