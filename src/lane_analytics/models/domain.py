"""Domain models for lane aggregates, derived metrics, and analytics results."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(slots=True, frozen=True)
class LaneAggregate:
    """Raw per-lane shipment counts as produced by the aggregate store."""

    origin_zip: str
    dest_zip: str
    volume: int
    avg_delay: float
    transit_variance: float
    early_count: int
    ontime_count: int
    late_count: int


@dataclass(slots=True, frozen=True)
class LaneMetrics:
    """Derived, classified view of a lane shared read-only by every view."""

    origin_zip: str
    dest_zip: str
    route: str
    volume: int
    avg_delay: float
    transit_variance: float
    early_rate: float
    on_time_rate: float
    late_rate: float
    cluster_id: int
    cluster_name: str


@dataclass(slots=True, frozen=True)
class Playbook:
    cluster_id: int
    cluster_name: str
    description: str
    actions: tuple[str, ...]


@dataclass(slots=True)
class Cluster:
    id: int
    name: str
    description: str
    lane_count: int
    total_volume: int
    avg_delay: float
    avg_late_rate: float


@dataclass(slots=True)
class ClusterBreakdown:
    cluster_id: int
    cluster: str
    lane_count: int
    volume: int


@dataclass(slots=True)
class RegionalPerformance:
    region: str
    total_lanes: int
    total_volume: int
    avg_late_rate: float
    avg_early_rate: float
    avg_delay: float
    cluster_breakdown: list[ClusterBreakdown]
    highest_friction_lanes: list[LaneMetrics]


@dataclass(slots=True)
class SimilarLanesResult:
    target_lane: Optional[LaneMetrics] = None
    similar_lanes: list[LaneMetrics] = field(default_factory=list)
    shared_playbook: str = ""


@dataclass(slots=True)
class FrictionZone:
    """Destination ranked by delivery difficulty."""

    dest_zip: str
    location: str
    friction_score: float
    late_rate: float
    transit_variance: float
    volume: int
    lane_count: int


@dataclass(slots=True)
class TerminalPerformance:
    """Origin terminal scored on outbound on-time performance."""

    origin_zip: str
    terminal: str
    performance_score: float
    on_time_rate: float
    late_rate: float
    early_rate: float
    volume: int
    lane_count: int


@dataclass(slots=True)
class TerminalReport:
    top_performers: list[TerminalPerformance]
    needs_improvement: list[TerminalPerformance]
    average_score: float
    total_volume: int
    total_terminals: int
    recommendations: list[str] = field(default_factory=list)


@dataclass(slots=True)
class EarlyDestination:
    dest_zip: str
    location: str
    early_rate: float
    avg_days_early: float
    early_shipments: int
    volume: int


@dataclass(slots=True)
class EarlyAnalysis:
    total_shipments: int
    early_shipments: int
    early_rate: float
    top_destinations: list[EarlyDestination]
    recommendations: list[str] = field(default_factory=list)


@dataclass(slots=True)
class Stats:
    total_shipments: int
    total_lanes: int
    total_carriers: int
    total_locations: int
    overall_on_time_rate: float
    overall_late_rate: float
    overall_early_rate: float
