"""Ordered decision rules assigning each lane to a behavioral cluster.

Rules are evaluated top to bottom and the first match wins, so a lane that is
both late and jittery lands in "Systematically Late". The last rule always
matches.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

EARLY_AND_STABLE = 1
ON_TIME_AND_RELIABLE = 2
HIGH_JITTER = 3
SYSTEMATICALLY_LATE = 4
LOW_VOLUME_MIXED = 5

CLUSTER_NAMES: dict[int, str] = {
    EARLY_AND_STABLE: "Early & Stable",
    ON_TIME_AND_RELIABLE: "On-Time & Reliable",
    HIGH_JITTER: "High-Jitter",
    SYSTEMATICALLY_LATE: "Systematically Late",
    LOW_VOLUME_MIXED: "Low Volume / Mixed",
}

CLUSTER_IDS: tuple[int, ...] = tuple(sorted(CLUSTER_NAMES))


@dataclass(slots=True, frozen=True)
class LaneSignals:
    avg_delay: float
    transit_variance: float
    early_rate: float
    on_time_rate: float
    late_rate: float
    volume: int


@dataclass(slots=True, frozen=True)
class ClusterRule:
    label: str
    matches: Callable[[LaneSignals], bool]
    cluster_id: int

    @property
    def cluster_name(self) -> str:
        return CLUSTER_NAMES[self.cluster_id]


CLUSTER_RULES: tuple[ClusterRule, ...] = (
    ClusterRule("low_volume", lambda s: s.volume < 20, LOW_VOLUME_MIXED),
    ClusterRule(
        "early_and_stable",
        lambda s: s.avg_delay < -0.3 and s.transit_variance < 2.0 and s.early_rate > 0.3,
        EARLY_AND_STABLE,
    ),
    ClusterRule("systematically_late", lambda s: s.late_rate > 0.45, SYSTEMATICALLY_LATE),
    ClusterRule("high_jitter", lambda s: s.transit_variance > 3.5, HIGH_JITTER),
    ClusterRule(
        "on_time_and_reliable",
        lambda s: s.on_time_rate > 0.55 and s.transit_variance < 2.5,
        ON_TIME_AND_RELIABLE,
    ),
    ClusterRule("mixed", lambda s: True, LOW_VOLUME_MIXED),
)


def first_matching_rule(signals: LaneSignals) -> ClusterRule:
    for rule in CLUSTER_RULES:
        if rule.matches(signals):
            return rule
    raise AssertionError("fallback rule must always match")


def classify(
    avg_delay: float,
    transit_variance: float,
    early_rate: float,
    on_time_rate: float,
    late_rate: float,
    volume: int,
) -> tuple[int, str]:
    """Return ``(cluster_id, cluster_name)`` for a lane's derived metrics."""

    rule = first_matching_rule(
        LaneSignals(
            avg_delay=avg_delay,
            transit_variance=transit_variance,
            early_rate=early_rate,
            on_time_rate=on_time_rate,
            late_rate=late_rate,
            volume=volume,
        )
    )
    return rule.cluster_id, rule.cluster_name
