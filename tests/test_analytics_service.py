import pytest

from lane_analytics.config import Settings
from lane_analytics.data.aggregate_source import StoreFailure
from lane_analytics.data.locations import LocationDirectory
from lane_analytics.models.domain import LaneAggregate
from lane_analytics.services.analytics.service import AnalyticsService


def _aggregate(origin: str, dest: str, volume: int, early: int, ontime: int, late: int, avg_delay: float = 0.0, variance: float = 1.0) -> LaneAggregate:
    return LaneAggregate(
        origin_zip=origin,
        dest_zip=dest,
        volume=volume,
        avg_delay=avg_delay,
        transit_variance=variance,
        early_count=early,
        ontime_count=ontime,
        late_count=late,
    )


class StubSource:
    def __init__(self, aggregates, error: Exception | None = None) -> None:
        self.aggregates = aggregates
        self.error = error
        self.fetches = 0

    def fetch_lane_aggregates(self):
        self.fetches += 1
        if self.error is not None:
            raise self.error
        return list(self.aggregates)


AGGREGATES = [
    _aggregate("750", "786", 100, 50, 40, 10, avg_delay=-0.8),
    _aggregate("750", "150", 200, 10, 80, 110, avg_delay=1.2, variance=2.0),
    _aggregate("606", "786", 150, 15, 120, 15, avg_delay=0.1),
    _aggregate("900", "150", 10, 2, 5, 3),
]


@pytest.fixture
def service() -> AnalyticsService:
    return AnalyticsService(
        source=StubSource(AGGREGATES),
        locations=LocationDirectory(),
        config=Settings(friction_min_volume=100, terminal_min_volume=50),
    )


def test_views_share_a_single_store_fetch(service: AnalyticsService) -> None:
    service.get_lanes()
    service.get_clusters()
    service.get_friction_zones(10)
    service.get_terminal_performance(5)
    service.get_early_analysis()
    service.get_stats()

    assert service.source.fetches == 1


def test_lanes_are_classified(service: AnalyticsService) -> None:
    lanes = service.get_lanes()

    assert [lane.cluster_id for lane in lanes] == [1, 4, 2, 5]
    assert lanes[0].route == "DFW→AUS"
    assert len(service.get_lanes(limit=2)) == 2


def test_invalidate_reloads_from_store(service: AnalyticsService) -> None:
    service.get_stats()
    service.invalidate()
    service.get_stats()

    assert service.source.fetches == 2


def test_store_failure_propagates_and_is_retried() -> None:
    source = StubSource(AGGREGATES, error=StoreFailure("store down"))
    service = AnalyticsService(source=source, locations=LocationDirectory())

    with pytest.raises(StoreFailure):
        service.get_clusters()

    source.error = None
    assert len(service.get_lanes()) == 4
    assert source.fetches == 2


def test_stats_use_configured_network_totals() -> None:
    service = AnalyticsService(
        source=StubSource(AGGREGATES),
        locations=LocationDirectory(),
        config=Settings(total_carriers=12, total_locations=34),
    )

    stats = service.get_stats()

    assert stats.total_shipments == 460
    assert stats.total_carriers == 12
    assert stats.total_locations == 34


def test_playbook_lookup_does_not_touch_store(service: AnalyticsService) -> None:
    assert service.get_playbook(1).cluster_name == "Early & Stable"
    assert service.get_playbook(7) is None
    assert service.source.fetches == 0
