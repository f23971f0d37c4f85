"""Output formatting helpers."""

from .formatter import as_percent, lane_to_dict, round_half_up, round_metric, safe_ratio

__all__ = ["as_percent", "lane_to_dict", "round_half_up", "round_metric", "safe_ratio"]
