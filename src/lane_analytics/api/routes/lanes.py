"""Lane listing, lookup, and similarity endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, Path, Query, status

from ...config import settings
from ...schemas.lanes import LaneModel, SimilarLanesResponse
from ...services import analytics
from ...services.outputs.formatter import lane_to_dict

router = APIRouter(tags=["lanes"])


@router.get("/lanes", response_model=List[LaneModel], status_code=status.HTTP_200_OK)
def list_lanes(limit: int | None = Query(default=None, ge=1, le=100_000)) -> List[LaneModel]:
    lanes = analytics.get_analytics_service().get_lanes(limit or settings.default_lane_limit)
    return [LaneModel(**lane_to_dict(lane)) for lane in lanes]


@router.get("/lanes/{origin}/{dest}", response_model=LaneModel, status_code=status.HTTP_200_OK)
def get_lane(
    origin: str = Path(..., description="Origin ZIP3 or location name"),
    dest: str = Path(..., description="Destination ZIP3 or location name"),
) -> LaneModel:
    lane = analytics.get_analytics_service().get_lane_profile(origin, dest)
    if lane is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Lane not found: {origin} -> {dest}",
        )
    return LaneModel(**lane_to_dict(lane))


@router.get("/search/similar", response_model=SimilarLanesResponse, status_code=status.HTTP_200_OK)
def find_similar(
    lane: str = Query(..., min_length=1, description="Route label, origin, or destination to match"),
    limit: int | None = Query(default=None, ge=1, le=1000),
) -> SimilarLanesResponse:
    result = analytics.get_analytics_service().find_similar_lanes(lane, limit or settings.default_similar_limit)
    return SimilarLanesResponse(
        target_lane=LaneModel(**lane_to_dict(result.target_lane)) if result.target_lane else None,
        similar_lanes=[LaneModel(**lane_to_dict(item)) for item in result.similar_lanes],
        shared_playbook=result.shared_playbook,
    )
