"""Lane derivation: rates, cluster rules, playbooks, and the metrics cache."""

from .cache import MetricsCache
from .classifier import CLUSTER_IDS, CLUSTER_NAMES, CLUSTER_RULES, classify
from .playbooks import get_playbook, list_playbooks
from .rates import derive_lanes, derive_rates

__all__ = [
    "MetricsCache",
    "CLUSTER_IDS",
    "CLUSTER_NAMES",
    "CLUSTER_RULES",
    "classify",
    "get_playbook",
    "list_playbooks",
    "derive_lanes",
    "derive_rates",
]
