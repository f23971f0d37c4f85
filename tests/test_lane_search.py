from lane_analytics.models.domain import LaneMetrics
from lane_analytics.services.analytics.search import find_lane_profile, find_similar_lanes, lane_matches


def _lane(origin: str, dest: str, route: str, volume: int, cluster_id: int) -> LaneMetrics:
    return LaneMetrics(
        origin_zip=origin,
        dest_zip=dest,
        route=route,
        volume=volume,
        avg_delay=0.0,
        transit_variance=1.0,
        early_rate=0.1,
        on_time_rate=0.8,
        late_rate=0.1,
        cluster_id=cluster_id,
        cluster_name="Cluster",
    )


LANES = [
    _lane("750", "786", "DFW→AUS", 100, 2),
    _lane("606", "900", "CHI→LAX", 400, 2),
    _lane("750", "150", "DFW→PIT", 50, 4),
    _lane("150", "786", "PIT→AUS", 250, 2),
]


def test_match_is_case_insensitive_on_route_and_codes() -> None:
    assert lane_matches(LANES[0], "dfw")
    assert lane_matches(LANES[0], "786")
    assert not lane_matches(LANES[0], "LAX")


def test_lane_profile_requires_both_sides() -> None:
    lane = find_lane_profile(LANES, "dfw", "pit")

    assert lane is not None
    assert (lane.origin_zip, lane.dest_zip) == ("750", "150")
    assert find_lane_profile(LANES, "CHI", "PIT") is None


def test_similar_lanes_share_target_cluster() -> None:
    result = find_similar_lanes(LANES, "DFW", limit=10)

    assert result.target_lane is LANES[0]
    assert [lane.route for lane in result.similar_lanes] == ["CHI→LAX", "PIT→AUS"]
    assert result.shared_playbook == "Cluster"


def test_similar_lanes_limit() -> None:
    result = find_similar_lanes(LANES, "DFW→AUS", limit=1)

    assert [lane.route for lane in result.similar_lanes] == ["CHI→LAX"]


def test_no_match_returns_empty_result() -> None:
    result = find_similar_lanes(LANES, "ZZZ999", limit=10)

    assert result.target_lane is None
    assert result.similar_lanes == []
