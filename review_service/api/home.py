"""
Home/Root API endpoints
Service information and welcome endpoints
"""

import time
from datetime import datetime

from fastapi import APIRouter

from review_service.api.health import start_time
from review_service.core.config import config

router = APIRouter()


@router.get("/")
async def root():
    """
    Root endpoint - Service information.
    """
    return {
        "service": config.service_name,
        "version": config.service_version,
        "environment": config.environment,
        "message": "Review Service is running",
        "status": "operational"
    }


@router.get("/version")
def get_version():
    return {
        "version": config.service_version,
    }


@router.get("/info")
def get_service_info():
    """
    Get comprehensive service information.
    Useful for service discovery and debugging.
    """
    return {
        "service": config.service_name,
        "version": config.service_version,
        "api_version": config.api_version,
        "environment": config.environment,
        "uptime_seconds": round(time.time() - start_time, 2),
        "configuration": {
            "log_level": config.log_level,
            "rate_limit_enabled": config.rate_limit_enabled,
            "review_rate_limit": config.review_rate_limit,
            "reply_rate_limit": config.reply_rate_limit,
        },
        "timestamp": datetime.now().isoformat(),
    }
