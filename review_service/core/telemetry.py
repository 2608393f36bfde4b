"""
OpenTelemetry instrumentation for FastAPI and the MongoDB driver

Creates spans for inbound requests and database operations. Export is
configured outside the service (OTEL_* environment variables / collector).
"""

from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.pymongo import PymongoInstrumentor

from review_service.core.logger import logger


def instrument_app(app):
    """
    Instrument FastAPI application with OpenTelemetry for automatic span creation.

    Args:
        app: FastAPI application instance
    """
    try:
        FastAPIInstrumentor.instrument_app(app)
        logger.info("FastAPI instrumented with OpenTelemetry")

        # Motor runs on top of PyMongo, so this covers every store call
        PymongoInstrumentor().instrument()
        logger.info("PyMongo instrumented with OpenTelemetry")

    except Exception as e:
        logger.error(f"Failed to instrument application: {e}", error=e)
