"""Lane API schemas."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel


class LaneModel(BaseModel):
    origin_zip: str
    dest_zip: str
    route: str
    volume: int
    avg_delay: float
    transit_variance: float
    early_rate: float
    on_time_rate: float
    late_rate: float
    cluster_id: int
    cluster_name: str


class SimilarLanesResponse(BaseModel):
    target_lane: LaneModel | None = None
    similar_lanes: List[LaneModel]
    shared_playbook: str
