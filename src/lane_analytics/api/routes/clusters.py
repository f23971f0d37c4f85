"""Cluster summary and playbook endpoints."""

from __future__ import annotations

from dataclasses import asdict
from typing import List

from fastapi import APIRouter, HTTPException, Path, Query, status

from ...config import settings
from ...schemas.clusters import ClusterModel, PlaybookModel
from ...schemas.lanes import LaneModel
from ...services import analytics
from ...services.outputs.formatter import lane_to_dict

router = APIRouter(prefix="/clusters", tags=["clusters"])


@router.get("", response_model=List[ClusterModel], status_code=status.HTTP_200_OK)
def list_clusters() -> List[ClusterModel]:
    return [ClusterModel(**asdict(cluster)) for cluster in analytics.get_analytics_service().get_clusters()]


@router.get("/{cluster_id}/lanes", response_model=List[LaneModel], status_code=status.HTTP_200_OK)
def list_cluster_lanes(
    cluster_id: int = Path(..., ge=1, le=5),
    limit: int | None = Query(default=None, ge=1, le=10_000),
) -> List[LaneModel]:
    lanes = analytics.get_analytics_service().get_lanes_in_cluster(
        cluster_id, limit or settings.default_cluster_lane_limit
    )
    return [LaneModel(**lane_to_dict(lane)) for lane in lanes]


@router.get("/{cluster_id}/playbook", response_model=PlaybookModel, status_code=status.HTTP_200_OK)
def get_cluster_playbook(cluster_id: int = Path(...)) -> PlaybookModel:
    playbook = analytics.get_analytics_service().get_playbook(cluster_id)
    if playbook is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Cluster {cluster_id} not found. Valid IDs: 1-5",
        )
    return PlaybookModel(**asdict(playbook))
