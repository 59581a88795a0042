"""
Health check router for liveness and readiness probes.
"""
from fastapi import APIRouter, status

from app.database.connections import get_mongo_client, get_search_client

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Basic health check",
)
async def health_check():
    """
    Basic health check endpoint.
    Returns 200 if the API is running.
    """
    return {"status": "healthy"}


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness check with dependencies",
)
async def readiness_check():
    """
    Readiness check that verifies store and search connections.
    Elasticsearch is reported as disabled when no URL is configured.
    """
    checks = {
        "api": "healthy",
        "mongodb": "unknown",
        "elasticsearch": "unknown",
    }

    # Check MongoDB
    try:
        client = await get_mongo_client()
        await client.admin.command("ping")
        checks["mongodb"] = "healthy"
    except Exception as e:
        checks["mongodb"] = f"unhealthy: {str(e)}"

    # Check Elasticsearch
    try:
        search = await get_search_client()
        if search is None:
            checks["elasticsearch"] = "disabled"
        elif await search.ping():
            checks["elasticsearch"] = "healthy"
        else:
            checks["elasticsearch"] = "unhealthy: ping failed"
    except Exception as e:
        checks["elasticsearch"] = f"unhealthy: {str(e)}"

    # Search is optional, so a disabled index does not degrade readiness
    all_healthy = all(v in ("healthy", "disabled") for v in checks.values())

    return {
        "status": "healthy" if all_healthy else "degraded",
        "checks": checks,
    }
