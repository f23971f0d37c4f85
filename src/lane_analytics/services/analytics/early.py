"""Early delivery analysis by destination."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ...data.locations import LocationLookup
from ...models.domain import EarlyAnalysis, EarlyDestination, LaneMetrics
from ..outputs.formatter import as_percent, round_half_up, safe_ratio

EARLY_RECOMMENDATIONS: tuple[str, ...] = (
    "Consider hold-until policies for Early & Stable lanes to reduce storage costs",
    "Destinations with high early rates may benefit from tighter SLA windows",
    "Review carrier contracts - early deliveries may indicate over-provisioned transit times",
)


@dataclass(slots=True)
class _EarlyTotals:
    volume: int = 0
    early_shipments: int = 0
    days_early_weighted: float = 0.0
    days_early_volume: int = 0


def early_shipments(lane: LaneMetrics) -> int:
    """Early count recovered from the rate, rounded so ``0.29 * 100`` gives 29."""

    return int(round_half_up(lane.early_rate * lane.volume))


def analyze_early_deliveries(
    lanes: Sequence[LaneMetrics],
    *,
    locations: LocationLookup,
    top_n: int = 10,
) -> EarlyAnalysis:
    """Network early rate plus the destinations receiving the most early freight.

    ``avg_days_early`` is the volume-weighted mean of how early the
    destination's early-running lanes (negative mean delay) arrive.
    """

    total_volume = 0
    total_early = 0
    totals: dict[str, _EarlyTotals] = {}
    for lane in lanes:
        early = early_shipments(lane)
        total_volume += lane.volume
        total_early += early

        entry = totals.setdefault(lane.dest_zip, _EarlyTotals())
        entry.volume += lane.volume
        entry.early_shipments += early
        if lane.avg_delay < 0:
            entry.days_early_weighted += abs(lane.avg_delay) * lane.volume
            entry.days_early_volume += lane.volume

    ranked = sorted(totals.items(), key=lambda item: (-item[1].early_shipments, item[0]))
    top_destinations = [
        EarlyDestination(
            dest_zip=dest_zip,
            location=locations.resolve(dest_zip),
            early_rate=as_percent(safe_ratio(entry.early_shipments, entry.volume)),
            avg_days_early=round_half_up(safe_ratio(entry.days_early_weighted, entry.days_early_volume), 1),
            early_shipments=entry.early_shipments,
            volume=entry.volume,
        )
        for dest_zip, entry in ranked[: max(top_n, 0)]
    ]

    return EarlyAnalysis(
        total_shipments=total_volume,
        early_shipments=total_early,
        early_rate=as_percent(safe_ratio(total_early, total_volume)),
        top_destinations=top_destinations,
        recommendations=list(EARLY_RECOMMENDATIONS),
    )
