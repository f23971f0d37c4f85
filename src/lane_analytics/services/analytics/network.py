"""Network-wide totals."""

from __future__ import annotations

from typing import Sequence

from ...models.domain import LaneMetrics, Stats
from ..outputs.formatter import as_percent, safe_ratio


def network_stats(
    lanes: Sequence[LaneMetrics],
    *,
    total_carriers: int,
    total_locations: int,
) -> Stats:
    total_volume = sum(lane.volume for lane in lanes)
    early = sum(lane.early_rate * lane.volume for lane in lanes)
    on_time = sum(lane.on_time_rate * lane.volume for lane in lanes)
    late = sum(lane.late_rate * lane.volume for lane in lanes)
    return Stats(
        total_shipments=total_volume,
        total_lanes=len(lanes),
        total_carriers=total_carriers,
        total_locations=total_locations,
        overall_on_time_rate=as_percent(safe_ratio(on_time, total_volume)),
        overall_late_rate=as_percent(safe_ratio(late, total_volume)),
        overall_early_rate=as_percent(safe_ratio(early, total_volume)),
    )
