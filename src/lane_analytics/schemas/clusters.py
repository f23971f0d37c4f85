"""Cluster and playbook API schemas."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel


class ClusterModel(BaseModel):
    id: int
    name: str
    description: str
    lane_count: int
    total_volume: int
    avg_delay: float
    avg_late_rate: float


class PlaybookModel(BaseModel):
    cluster_id: int
    cluster_name: str
    description: str
    actions: List[str]
