"""Analytics facade shared by every presentation layer."""

from __future__ import annotations

import functools
from typing import Optional

from ...config import Settings, settings as default_settings
from ...data.aggregate_source import AggregateSource, build_aggregate_source
from ...data.locations import LocationDirectory, LocationLookup
from ...models.domain import (
    Cluster,
    EarlyAnalysis,
    FrictionZone,
    LaneMetrics,
    Playbook,
    RegionalPerformance,
    SimilarLanesResult,
    Stats,
    TerminalReport,
)
from ..lanes import playbooks
from ..lanes.cache import LaneSnapshot, MetricsCache
from ..lanes.rates import derive_lanes
from .clusters import lanes_in_cluster, summarize_clusters
from .early import analyze_early_deliveries
from .friction import rank_friction_zones
from .network import network_stats
from .regional import regional_performance
from .search import find_lane_profile, find_similar_lanes
from .terminals import score_terminals


class AnalyticsService:
    """Read-only lane analytics over a cached, classified lane list.

    Only the first call after construction or :meth:`invalidate` touches the
    aggregate store; every view is computed from the cached snapshot.
    """

    def __init__(
        self,
        source: AggregateSource,
        locations: LocationLookup,
        config: Optional[Settings] = None,
    ) -> None:
        self.source = source
        self.locations = locations
        self.config = config or default_settings
        self.cache = MetricsCache(self._load_lanes)

    def _load_lanes(self) -> list[LaneMetrics]:
        return derive_lanes(self.source.fetch_lane_aggregates(), self.locations)

    def invalidate(self) -> None:
        self.cache.invalidate()

    def _snapshot(self) -> LaneSnapshot:
        return self.cache.get_or_populate()

    def get_lanes(self, limit: Optional[int] = None) -> list[LaneMetrics]:
        lanes = self._snapshot()
        if limit is not None:
            return list(lanes[: max(limit, 0)])
        return list(lanes)

    def get_clusters(self) -> list[Cluster]:
        return summarize_clusters(self._snapshot())

    def get_lanes_in_cluster(self, cluster_id: int, limit: int) -> list[LaneMetrics]:
        return lanes_in_cluster(self._snapshot(), cluster_id, limit)

    def get_lane_profile(self, origin_query: str, dest_query: str) -> Optional[LaneMetrics]:
        return find_lane_profile(self._snapshot(), origin_query, dest_query)

    def get_playbook(self, cluster_id: int) -> Optional[Playbook]:
        return playbooks.get_playbook(cluster_id)

    def find_similar_lanes(self, pattern: str, limit: int) -> SimilarLanesResult:
        return find_similar_lanes(self._snapshot(), pattern, limit)

    def get_regional_performance(self, region: str) -> Optional[RegionalPerformance]:
        return regional_performance(
            self._snapshot(),
            region,
            min_lane_volume=self.config.regional_min_lane_volume,
        )

    def get_friction_zones(self, limit: int) -> list[FrictionZone]:
        return rank_friction_zones(
            self._snapshot(),
            limit,
            locations=self.locations,
            min_volume=self.config.friction_min_volume,
        )

    def get_terminal_performance(self, limit: int) -> TerminalReport:
        return score_terminals(
            self._snapshot(),
            limit,
            locations=self.locations,
            min_volume=self.config.terminal_min_volume,
        )

    def get_early_analysis(self) -> EarlyAnalysis:
        return analyze_early_deliveries(
            self._snapshot(),
            locations=self.locations,
            top_n=self.config.early_top_destinations,
        )

    def get_stats(self) -> Stats:
        return network_stats(
            self._snapshot(),
            total_carriers=self.config.total_carriers,
            total_locations=self.config.total_locations,
        )


@functools.lru_cache(maxsize=1)
def get_analytics_service() -> AnalyticsService:
    """Process-wide service built from the active settings."""

    return AnalyticsService(
        source=build_aggregate_source(default_settings),
        locations=LocationDirectory.from_settings(),
        config=default_settings,
    )
