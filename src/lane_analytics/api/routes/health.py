"""Health and cache maintenance endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...config import settings
from ...data.aggregate_source import StoreFailure
from ...db.supabase import get_supabase_client
from ...services import analytics

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't touch the aggregate store."""
    return {"status": "ok"}


@router.get("/health/store", status_code=status.HTTP_200_OK)
def health_store() -> dict:
    """Report aggregate store status and warm the lane cache."""
    service = analytics.get_analytics_service()
    payload = {
        "backend": settings.aggregate_backend,
        "cache_populated": service.cache.is_populated,
    }
    if settings.aggregate_backend == "supabase" and get_supabase_client() is None:
        return {
            **payload,
            "configured": False,
            "message": "Supabase not configured. Set LANES_SUPABASE_URL and LANES_SUPABASE_KEY environment variables.",
        }

    try:
        lanes = service.get_lanes()
    except StoreFailure as exc:
        return {
            **payload,
            "configured": True,
            "connected": False,
            "error": str(exc),
        }
    return {
        **payload,
        "configured": True,
        "connected": True,
        "cache_populated": True,
        "lane_count": len(lanes),
    }


@router.post("/cache/invalidate", status_code=status.HTTP_200_OK)
def invalidate_cache() -> dict:
    """Drop cached lane metrics; the next request reloads from the store."""
    analytics.get_analytics_service().invalidate()
    return {"status": "invalidated"}
