"""
Health and operational API endpoints
"""

import time
from datetime import datetime

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from review_service.core.config import config
from review_service.core.logger import logger
from review_service.db.mongodb import db

router = APIRouter()

# Track service start time
start_time = time.time()


@router.get("/health")
def health_check():
    """Basic health check endpoint"""
    return {
        "status": "healthy",
        "service": config.service_name,
        "timestamp": datetime.now().isoformat(),
        "version": config.api_version,
    }


@router.get("/health/live")
def liveness_check():
    """Liveness probe - the process is up and serving requests"""
    return {
        "status": "alive",
        "service": config.service_name,
        "uptime_seconds": round(time.time() - start_time, 2),
    }


@router.get("/health/ready")
async def readiness_check():
    """Readiness probe - check that MongoDB answers a ping"""
    check = {"name": "mongodb", "status": "healthy"}
    try:
        if db.client is None:
            raise RuntimeError("not connected")
        start = time.time()
        await db.client.admin.command("ping")
        check["response_time_ms"] = round((time.time() - start) * 1000, 2)
    except (PyMongoError, RuntimeError) as e:
        logger.warning(
            "Readiness check failed",
            metadata={"event": "readiness_check_failed", "check": "mongodb", "reason": str(e)}
        )
        check["status"] = "unhealthy"

    if check["status"] == "healthy":
        return {
            "status": "ready",
            "service": config.service_name,
            "timestamp": datetime.now().isoformat(),
            "checks": [check],
        }

    return JSONResponse(
        status_code=503,
        content={
            "status": "not ready",
            "service": config.service_name,
            "timestamp": datetime.now().isoformat(),
            "checks": [check],
        },
    )
