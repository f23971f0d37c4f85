"""Regional rollup for lanes touching a ZIP3 or location name."""

from __future__ import annotations

from typing import Optional, Sequence

from ...models.domain import ClusterBreakdown, LaneMetrics, RegionalPerformance
from ..lanes.classifier import CLUSTER_IDS, CLUSTER_NAMES
from ..outputs.formatter import as_percent, round_metric, safe_ratio
from .search import lane_matches

HIGHEST_FRICTION_LANES = 5


def regional_performance(
    lanes: Sequence[LaneMetrics],
    region: str,
    *,
    min_lane_volume: int = 10,
    top_n: int = HIGHEST_FRICTION_LANES,
) -> Optional[RegionalPerformance]:
    regional = [lane for lane in lanes if lane_matches(lane, region)]
    if not regional:
        return None

    total_lanes = len(regional)
    breakdown = [
        ClusterBreakdown(
            cluster_id=cluster_id,
            cluster=CLUSTER_NAMES[cluster_id],
            lane_count=sum(1 for lane in regional if lane.cluster_id == cluster_id),
            volume=sum(lane.volume for lane in regional if lane.cluster_id == cluster_id),
        )
        for cluster_id in CLUSTER_IDS
    ]

    problem_lanes = [lane for lane in regional if lane.volume >= min_lane_volume]
    problem_lanes.sort(key=lambda lane: lane.late_rate, reverse=True)

    return RegionalPerformance(
        region=region,
        total_lanes=total_lanes,
        total_volume=sum(lane.volume for lane in regional),
        avg_late_rate=as_percent(safe_ratio(sum(lane.late_rate for lane in regional), total_lanes)),
        avg_early_rate=as_percent(safe_ratio(sum(lane.early_rate for lane in regional), total_lanes)),
        avg_delay=round_metric(safe_ratio(sum(lane.avg_delay for lane in regional), total_lanes)),
        cluster_breakdown=breakdown,
        highest_friction_lanes=problem_lanes[:top_n],
    )
