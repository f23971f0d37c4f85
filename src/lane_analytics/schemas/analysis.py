"""Network analysis API schemas."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel

from .lanes import LaneModel


class FrictionZoneModel(BaseModel):
    dest_zip: str
    location: str
    friction_score: float
    late_rate: float
    transit_variance: float
    volume: int
    lane_count: int


class FrictionZonesResponse(BaseModel):
    zones: List[FrictionZoneModel]
    recommendations: List[str]


class TerminalModel(BaseModel):
    origin_zip: str
    terminal: str
    performance_score: float
    on_time_rate: float
    late_rate: float
    early_rate: float
    volume: int
    lane_count: int


class TerminalsResponse(BaseModel):
    total_terminals: int
    total_volume: int
    average_score: float
    top_performers: List[TerminalModel]
    needs_improvement: List[TerminalModel]
    recommendations: List[str]


class EarlyDestinationModel(BaseModel):
    dest_zip: str
    location: str
    early_rate: float
    avg_days_early: float
    early_shipments: int
    volume: int


class EarlyAnalysisResponse(BaseModel):
    total_shipments: int
    early_shipments: int
    early_rate: float
    top_destinations: List[EarlyDestinationModel]
    recommendations: List[str]


class ClusterBreakdownModel(BaseModel):
    cluster_id: int
    cluster: str
    lane_count: int
    volume: int


class RegionalResponse(BaseModel):
    region: str
    total_lanes: int
    total_volume: int
    avg_late_rate: float
    avg_early_rate: float
    avg_delay: float
    cluster_breakdown: List[ClusterBreakdownModel]
    highest_friction_lanes: List[LaneModel]


class StatsResponse(BaseModel):
    total_shipments: int
    total_lanes: int
    total_carriers: int
    total_locations: int
    overall_on_time_rate: float
    overall_late_rate: float
    overall_early_rate: float
