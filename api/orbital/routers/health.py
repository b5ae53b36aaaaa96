"""
Health Check Endpoints
"""
from fastapi import APIRouter, Depends, Request

from orbital.utils.redis import NoOpCache
from orbital.utils.store import EntityStore, get_store

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic health check"""
    return {"status": "healthy", "service": "orbital-api"}


@router.get("/health/ready")
async def readiness_check(
    request: Request,
    store: EntityStore = Depends(get_store),
):
    """
    Readiness check - reports store contents and cache reachability
    """
    checks = {
        "store": True,
        "records": store.counts(),
    }

    # Redis is optional; without it catalog caching is simply off
    cache = request.app.state.cache
    if isinstance(cache, NoOpCache):
        checks["cache"] = "disabled"
    else:
        try:
            await cache.ping()
            checks["cache"] = "ok"
        except Exception as e:
            checks["cache"] = "unavailable"
            checks["cache_error"] = str(e)

    return {
        "status": "ready" if checks["cache"] != "unavailable" else "degraded",
        "checks": checks
    }


@router.get("/health/live")
async def liveness_check():
    """Liveness check - is the service running"""
    return {"status": "alive"}
