"""Presentation rounding shared by every adapter."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

from ...models.domain import LaneMetrics


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going away from zero (``6.25`` -> ``6.3``, ``-0.25`` -> ``-0.3``)."""

    if not math.isfinite(value):
        return 0.0
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def safe_ratio(numerator: float, denominator: float) -> float:
    """Divide, returning 0.0 for empty groups instead of NaN/Inf."""

    if not denominator:
        return 0.0
    value = numerator / denominator
    return value if math.isfinite(value) else 0.0


def as_percent(rate: float) -> float:
    """Fraction in [0, 1] to a percentage with one decimal."""

    return round_half_up(rate * 100, 1)


def round_metric(value: float) -> float:
    """Delay and variance figures keep two decimals."""

    return round_half_up(value, 2)


def lane_to_dict(lane: LaneMetrics) -> dict:
    return {
        "origin_zip": lane.origin_zip,
        "dest_zip": lane.dest_zip,
        "route": lane.route,
        "volume": lane.volume,
        "avg_delay": round_metric(lane.avg_delay),
        "transit_variance": round_metric(lane.transit_variance),
        "early_rate": as_percent(lane.early_rate),
        "on_time_rate": as_percent(lane.on_time_rate),
        "late_rate": as_percent(lane.late_rate),
        "cluster_id": lane.cluster_id,
        "cluster_name": lane.cluster_name,
    }
