"""Origin terminal scoring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ...data.locations import LocationLookup
from ...models.domain import LaneMetrics, TerminalPerformance, TerminalReport
from ..outputs.formatter import as_percent, round_half_up, safe_ratio

TERMINAL_RECOMMENDATIONS: tuple[str, ...] = (
    "Terminals scoring below 70 may need capacity review",
    "Consider load balancing from low-performers to high-performers",
    "Review carrier mix at underperforming terminals",
)


@dataclass(slots=True)
class _OriginTotals:
    volume: int = 0
    weighted_late: float = 0.0
    weighted_early: float = 0.0
    weighted_on_time: float = 0.0
    lane_count: int = 0


def performance_score(late_rate: float) -> float:
    return round_half_up((1.0 - late_rate) * 100)


def score_terminals(
    lanes: Sequence[LaneMetrics],
    limit: int,
    *,
    locations: LocationLookup,
    min_volume: int = 50,
) -> TerminalReport:
    totals: dict[str, _OriginTotals] = {}
    for lane in lanes:
        entry = totals.setdefault(lane.origin_zip, _OriginTotals())
        entry.volume += lane.volume
        entry.weighted_late += lane.late_rate * lane.volume
        entry.weighted_early += lane.early_rate * lane.volume
        entry.weighted_on_time += lane.on_time_rate * lane.volume
        entry.lane_count += 1

    terminals: list[TerminalPerformance] = []
    for origin_zip, entry in totals.items():
        if entry.volume < min_volume:
            continue
        late_rate = safe_ratio(entry.weighted_late, entry.volume)
        terminals.append(
            TerminalPerformance(
                origin_zip=origin_zip,
                terminal=locations.resolve(origin_zip),
                performance_score=performance_score(late_rate),
                on_time_rate=as_percent(safe_ratio(entry.weighted_on_time, entry.volume)),
                late_rate=as_percent(late_rate),
                early_rate=as_percent(safe_ratio(entry.weighted_early, entry.volume)),
                volume=entry.volume,
                lane_count=entry.lane_count,
            )
        )

    average_score = safe_ratio(sum(t.performance_score for t in terminals), len(terminals))
    size = max(limit, 0)
    best = sorted(terminals, key=lambda t: (-t.performance_score, t.origin_zip))[:size]
    worst = sorted(terminals, key=lambda t: (t.performance_score, t.origin_zip))[:size]

    return TerminalReport(
        top_performers=best,
        needs_improvement=worst,
        average_score=round_half_up(average_score, 1),
        total_volume=sum(t.volume for t in terminals),
        total_terminals=len(terminals),
        recommendations=list(TERMINAL_RECOMMENDATIONS),
    )
