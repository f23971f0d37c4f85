"""Destination friction ranking."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ...data.locations import LocationLookup
from ...models.domain import FrictionZone, LaneMetrics
from ..outputs.formatter import as_percent, round_half_up, round_metric, safe_ratio

FRICTION_RECOMMENDATIONS: tuple[str, ...] = (
    "High-friction zones may need carrier renegotiation",
    "Consider alternative routing or pre-positioning inventory",
    "Increase SLA buffer for these destinations",
)


@dataclass(slots=True)
class _DestinationTotals:
    volume: int = 0
    weighted_late: float = 0.0
    weighted_variance: float = 0.0
    lane_count: int = 0


def friction_score(late_rate: float, transit_variance: float) -> float:
    """``late_rate * 100 + transit_variance * 10`` to one decimal.

    The score is not divided by ten, so a fully late lane with variance 2.0 scores 120.0.
    """

    return round_half_up(late_rate * 100 + transit_variance * 10, 1)


def rank_friction_zones(
    lanes: Sequence[LaneMetrics],
    limit: int,
    *,
    locations: LocationLookup,
    min_volume: int = 100,
) -> list[FrictionZone]:
    """Score destinations by volume-weighted lateness and transit variance.

    Destinations below ``min_volume`` shipments are left out entirely.
    """

    totals: dict[str, _DestinationTotals] = {}
    for lane in lanes:
        entry = totals.setdefault(lane.dest_zip, _DestinationTotals())
        entry.volume += lane.volume
        entry.weighted_late += lane.late_rate * lane.volume
        entry.weighted_variance += lane.transit_variance * lane.volume
        entry.lane_count += 1

    zones: list[FrictionZone] = []
    for dest_zip, entry in totals.items():
        if entry.volume < min_volume:
            continue
        late_rate = safe_ratio(entry.weighted_late, entry.volume)
        variance = safe_ratio(entry.weighted_variance, entry.volume)
        zones.append(
            FrictionZone(
                dest_zip=dest_zip,
                location=locations.resolve(dest_zip),
                friction_score=friction_score(late_rate, variance),
                late_rate=as_percent(late_rate),
                transit_variance=round_metric(variance),
                volume=entry.volume,
                lane_count=entry.lane_count,
            )
        )

    zones.sort(key=lambda zone: (-zone.friction_score, zone.dest_zip))
    return zones[: max(limit, 0)]
