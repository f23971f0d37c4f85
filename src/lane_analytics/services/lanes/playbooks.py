"""Static catalog of cluster definitions and their operational playbooks."""

from __future__ import annotations

from typing import Optional

from ...models.domain import Playbook
from .classifier import (
    CLUSTER_NAMES,
    EARLY_AND_STABLE,
    HIGH_JITTER,
    LOW_VOLUME_MIXED,
    ON_TIME_AND_RELIABLE,
    SYSTEMATICALLY_LATE,
)

PLAYBOOKS: tuple[Playbook, ...] = (
    Playbook(
        cluster_id=EARLY_AND_STABLE,
        cluster_name=CLUSTER_NAMES[EARLY_AND_STABLE],
        description="Consistently arrive 0.5-2 days early with low variance",
        actions=(
            "Implement hold-until policies at local depot",
            "Offer tight customer delivery windows",
            "Consider tightening SLA promises (reduce buffer)",
            "Use for premium time-slot offerings",
        ),
    ),
    Playbook(
        cluster_id=ON_TIME_AND_RELIABLE,
        cluster_name=CLUSTER_NAMES[ON_TIME_AND_RELIABLE],
        description="High on-time rate with predictable transit",
        actions=(
            "Maintain current operations - these are your best lanes",
            "Use as benchmark for other lanes",
            "Suitable for guaranteed delivery promises",
            "Monitor for degradation, protect capacity",
        ),
    ),
    Playbook(
        cluster_id=HIGH_JITTER,
        cluster_name=CLUSTER_NAMES[HIGH_JITTER],
        description="Average is OK but high variance - unpredictable",
        actions=(
            "Add buffer days to customer promises",
            "Avoid 'guaranteed by noon' commitments",
            "Route to lockers/pickup points to handle timing uncertainty",
            "Investigate root cause: carrier issues? weather corridors?",
        ),
    ),
    Playbook(
        cluster_id=SYSTEMATICALLY_LATE,
        cluster_name=CLUSTER_NAMES[SYSTEMATICALLY_LATE],
        description="Consistently miss SLA - structural problem",
        actions=(
            "Downgrade promise (next-day to 2-day) for these lanes",
            "Negotiate with carriers or switch providers",
            "Consider pre-positioning inventory closer to destination",
            "Flag for carrier performance review",
        ),
    ),
    Playbook(
        cluster_id=LOW_VOLUME_MIXED,
        cluster_name=CLUSTER_NAMES[LOW_VOLUME_MIXED],
        description="Insufficient data or mixed patterns",
        actions=(
            "Apply conservative SLA buffers",
            "Monitor as volume grows",
            "Consider consolidating with similar lanes",
            "Default to standard operating procedures",
        ),
    ),
)

_PLAYBOOKS_BY_ID: dict[int, Playbook] = {playbook.cluster_id: playbook for playbook in PLAYBOOKS}


def list_playbooks() -> tuple[Playbook, ...]:
    return PLAYBOOKS


def get_playbook(cluster_id: int) -> Optional[Playbook]:
    return _PLAYBOOKS_BY_ID.get(cluster_id)
