from lane_analytics.data.locations import LocationDirectory
from lane_analytics.models.domain import LaneAggregate, LaneMetrics
from lane_analytics.services.analytics.clusters import lanes_in_cluster, summarize_clusters
from lane_analytics.services.analytics.network import network_stats
from lane_analytics.services.lanes.classifier import CLUSTER_NAMES
from lane_analytics.services.lanes.playbooks import get_playbook, list_playbooks
from lane_analytics.services.lanes.rates import derive_lanes


def _lane(origin: str, dest: str, volume: int, cluster_id: int, avg_delay: float = 0.0, late: float = 0.1) -> LaneMetrics:
    return LaneMetrics(
        origin_zip=origin,
        dest_zip=dest,
        route=f"{origin}→{dest}",
        volume=volume,
        avg_delay=avg_delay,
        transit_variance=1.0,
        early_rate=0.1,
        on_time_rate=1.0 - 0.1 - late,
        late_rate=late,
        cluster_id=cluster_id,
        cluster_name=CLUSTER_NAMES[cluster_id],
    )


def test_summary_covers_every_cluster() -> None:
    lanes = [
        _lane("750", "786", 100, 4, avg_delay=1.0, late=0.5),
        _lane("606", "900", 300, 4, avg_delay=2.0, late=0.7),
        _lane("150", "786", 50, 2),
    ]

    clusters = summarize_clusters(lanes)

    assert [cluster.id for cluster in clusters] == [1, 2, 3, 4, 5]
    late = clusters[3]
    assert late.name == "Systematically Late"
    assert late.lane_count == 2
    assert late.total_volume == 400
    assert late.avg_delay == 1.5
    assert late.avg_late_rate == 60.0


def test_empty_cluster_reports_zero_means() -> None:
    clusters = summarize_clusters([_lane("150", "786", 50, 2)])

    early = clusters[0]
    assert early.lane_count == 0
    assert early.total_volume == 0
    assert early.avg_delay == 0.0
    assert early.avg_late_rate == 0.0


def test_lanes_in_cluster_sorted_by_volume_and_limited() -> None:
    lanes = [
        _lane("750", "786", 100, 3),
        _lane("606", "900", 300, 3),
        _lane("150", "786", 200, 3),
        _lane("900", "150", 999, 1),
    ]

    members = lanes_in_cluster(lanes, 3, limit=2)

    assert [lane.volume for lane in members] == [300, 200]


def test_playbook_catalog() -> None:
    assert len(list_playbooks()) == 5
    playbook = get_playbook(4)
    assert playbook is not None
    assert playbook.cluster_name == "Systematically Late"
    assert len(playbook.actions) == 4
    assert get_playbook(6) is None
    assert get_playbook(0) is None


def test_clusters_partition_lanes_and_volume() -> None:
    aggregates = [
        LaneAggregate("750", "786", 100, -0.8, 1.0, 50, 40, 10),
        LaneAggregate("750", "150", 200, 1.2, 2.0, 10, 80, 110),
        LaneAggregate("606", "786", 150, 0.1, 1.0, 15, 120, 15),
        LaneAggregate("900", "150", 10, 0.0, 1.0, 2, 5, 3),
        LaneAggregate("606", "900", 60, 0.3, 3.0, 6, 30, 24),
    ]
    lanes = derive_lanes(aggregates, LocationDirectory())

    clusters = summarize_clusters(lanes)
    stats = network_stats(lanes, total_carriers=0, total_locations=0)

    assert {lane.cluster_id for lane in lanes} == {1, 2, 4, 5}
    assert clusters[2].lane_count == 0
    assert sum(cluster.lane_count for cluster in clusters) == len(lanes)
    assert sum(cluster.total_volume for cluster in clusters) == stats.total_shipments == 520
