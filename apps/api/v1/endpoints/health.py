"""
Health check endpoints.

Used for monitoring and load balancer health checks.
"""
import platform
from datetime import datetime, timezone

from fastapi import APIRouter


router = APIRouter()


@router.get("/health")
async def health_check() -> dict:
    """Health check endpoint.

    Returns:
        Health status
    """
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": "farmer-connect",
        "version": "1.0.0",
        "python_version": platform.python_version(),
    }
