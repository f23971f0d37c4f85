"""Network analysis endpoints: stats, regions, friction, terminals, early deliveries."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, HTTPException, Path, Query, status

from ...config import settings
from ...schemas.analysis import (
    ClusterBreakdownModel,
    EarlyAnalysisResponse,
    FrictionZoneModel,
    FrictionZonesResponse,
    RegionalResponse,
    StatsResponse,
    TerminalModel,
    TerminalsResponse,
)
from ...schemas.lanes import LaneModel
from ...services import analytics
from ...services.analytics.friction import FRICTION_RECOMMENDATIONS
from ...services.outputs.formatter import lane_to_dict

router = APIRouter(tags=["analysis"])


@router.get("/stats", response_model=StatsResponse, status_code=status.HTTP_200_OK)
def get_stats() -> StatsResponse:
    return StatsResponse(**asdict(analytics.get_analytics_service().get_stats()))


@router.get("/regions/{region}", response_model=RegionalResponse, status_code=status.HTTP_200_OK)
def get_region(region: str = Path(..., description="ZIP3 prefix or location name, e.g. '750' or 'DFW'")) -> RegionalResponse:
    performance = analytics.get_analytics_service().get_regional_performance(region)
    if performance is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No lanes found for region '{region}'. Try a ZIP3 like '750' or location like 'DFW'.",
        )
    return RegionalResponse(
        region=performance.region,
        total_lanes=performance.total_lanes,
        total_volume=performance.total_volume,
        avg_late_rate=performance.avg_late_rate,
        avg_early_rate=performance.avg_early_rate,
        avg_delay=performance.avg_delay,
        cluster_breakdown=[ClusterBreakdownModel(**asdict(item)) for item in performance.cluster_breakdown],
        highest_friction_lanes=[LaneModel(**lane_to_dict(lane)) for lane in performance.highest_friction_lanes],
    )


@router.get("/analysis/friction", response_model=FrictionZonesResponse, status_code=status.HTTP_200_OK)
def get_friction_zones(limit: int | None = Query(default=None, ge=1, le=1000)) -> FrictionZonesResponse:
    zones = analytics.get_analytics_service().get_friction_zones(limit or settings.default_friction_limit)
    return FrictionZonesResponse(
        zones=[FrictionZoneModel(**asdict(zone)) for zone in zones],
        recommendations=list(FRICTION_RECOMMENDATIONS),
    )


@router.get("/analysis/terminals", response_model=TerminalsResponse, status_code=status.HTTP_200_OK)
def get_terminals(limit: int | None = Query(default=None, ge=1, le=1000)) -> TerminalsResponse:
    report = analytics.get_analytics_service().get_terminal_performance(limit or settings.default_terminal_limit)
    return TerminalsResponse(
        total_terminals=report.total_terminals,
        total_volume=report.total_volume,
        average_score=report.average_score,
        top_performers=[TerminalModel(**asdict(item)) for item in report.top_performers],
        needs_improvement=[TerminalModel(**asdict(item)) for item in report.needs_improvement],
        recommendations=report.recommendations,
    )


@router.get("/analysis/early", response_model=EarlyAnalysisResponse, status_code=status.HTTP_200_OK)
def get_early_analysis() -> EarlyAnalysisResponse:
    return EarlyAnalysisResponse.model_validate(asdict(analytics.get_analytics_service().get_early_analysis()))
