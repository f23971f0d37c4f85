"""Turn raw lane aggregates into rates and classified lane metrics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ...data.locations import LocationLookup, format_route
from ...models.domain import LaneAggregate, LaneMetrics
from .classifier import classify


@dataclass(slots=True, frozen=True)
class LaneRates:
    early_rate: float
    on_time_rate: float
    late_rate: float


def derive_rates(aggregate: LaneAggregate) -> LaneRates:
    """Express outcome counts as fractions of volume; an empty lane has zero rates."""

    if aggregate.volume <= 0:
        return LaneRates(0.0, 0.0, 0.0)
    volume = float(aggregate.volume)
    return LaneRates(
        early_rate=aggregate.early_count / volume,
        on_time_rate=aggregate.ontime_count / volume,
        late_rate=aggregate.late_count / volume,
    )


def build_lane_metrics(aggregate: LaneAggregate, locations: LocationLookup) -> LaneMetrics:
    rates = derive_rates(aggregate)
    cluster_id, cluster_name = classify(
        aggregate.avg_delay,
        aggregate.transit_variance,
        rates.early_rate,
        rates.on_time_rate,
        rates.late_rate,
        aggregate.volume,
    )
    return LaneMetrics(
        origin_zip=aggregate.origin_zip,
        dest_zip=aggregate.dest_zip,
        route=format_route(aggregate.origin_zip, aggregate.dest_zip, locations),
        volume=aggregate.volume,
        avg_delay=aggregate.avg_delay,
        transit_variance=aggregate.transit_variance,
        early_rate=rates.early_rate,
        on_time_rate=rates.on_time_rate,
        late_rate=rates.late_rate,
        cluster_id=cluster_id,
        cluster_name=cluster_name,
    )


def derive_lanes(aggregates: Iterable[LaneAggregate], locations: LocationLookup) -> list[LaneMetrics]:
    """Derive every lane, keeping the store's grouping order."""

    return [build_lane_metrics(aggregate, locations) for aggregate in aggregates]
