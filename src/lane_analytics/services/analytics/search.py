"""Free-text lane lookup and same-cluster neighbour search."""

from __future__ import annotations

from typing import Optional, Sequence

from ...models.domain import LaneMetrics, SimilarLanesResult


def _contains(haystack: str, needle: str) -> bool:
    return needle in haystack.lower()


def lane_matches(lane: LaneMetrics, query: str) -> bool:
    """Case-insensitive substring match on route label, origin, or destination."""

    needle = query.lower()
    return (
        _contains(lane.route, needle)
        or _contains(lane.origin_zip, needle)
        or _contains(lane.dest_zip, needle)
    )


def find_lane_profile(
    lanes: Sequence[LaneMetrics],
    origin_query: str,
    dest_query: str,
) -> Optional[LaneMetrics]:
    origin_needle = origin_query.lower()
    dest_needle = dest_query.lower()
    for lane in lanes:
        origin_hit = _contains(lane.origin_zip, origin_needle) or _contains(lane.route, origin_needle)
        dest_hit = _contains(lane.dest_zip, dest_needle) or _contains(lane.route, dest_needle)
        if origin_hit and dest_hit:
            return lane
    return None


def find_similar_lanes(lanes: Sequence[LaneMetrics], pattern: str, limit: int) -> SimilarLanesResult:
    """Lanes sharing the cluster of the first lane matching ``pattern``.

    The target is the first match in store order. No match is an empty result.
    """

    target = next((lane for lane in lanes if lane_matches(lane, pattern)), None)
    if target is None:
        return SimilarLanesResult()

    similar = [
        lane
        for lane in lanes
        if lane.cluster_id == target.cluster_id
        and not (lane.origin_zip == target.origin_zip and lane.dest_zip == target.dest_zip)
    ]
    similar.sort(key=lambda lane: lane.volume, reverse=True)
    return SimilarLanesResult(
        target_lane=target,
        similar_lanes=similar[: max(limit, 0)],
        shared_playbook=target.cluster_name,
    )
