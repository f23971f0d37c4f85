"""Per-cluster rollups over the cached lane list."""

from __future__ import annotations

from typing import Sequence

from ...models.domain import Cluster, LaneMetrics
from ..lanes.playbooks import list_playbooks
from ..outputs.formatter import as_percent, round_metric, safe_ratio


def summarize_clusters(lanes: Sequence[LaneMetrics]) -> list[Cluster]:
    """One entry per catalog cluster, including clusters with no lanes."""

    clusters: list[Cluster] = []
    for playbook in list_playbooks():
        members = [lane for lane in lanes if lane.cluster_id == playbook.cluster_id]
        lane_count = len(members)
        clusters.append(
            Cluster(
                id=playbook.cluster_id,
                name=playbook.cluster_name,
                description=playbook.description,
                lane_count=lane_count,
                total_volume=sum(lane.volume for lane in members),
                avg_delay=round_metric(safe_ratio(sum(lane.avg_delay for lane in members), lane_count)),
                avg_late_rate=as_percent(safe_ratio(sum(lane.late_rate for lane in members), lane_count)),
            )
        )
    return clusters


def lanes_in_cluster(lanes: Sequence[LaneMetrics], cluster_id: int, limit: int) -> list[LaneMetrics]:
    members = [lane for lane in lanes if lane.cluster_id == cluster_id]
    members.sort(key=lambda lane: lane.volume, reverse=True)
    return members[: max(limit, 0)]
