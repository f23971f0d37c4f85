import pytest

from lane_analytics.services.lanes.classifier import (
    CLUSTER_IDS,
    CLUSTER_NAMES,
    CLUSTER_RULES,
    EARLY_AND_STABLE,
    HIGH_JITTER,
    LOW_VOLUME_MIXED,
    ON_TIME_AND_RELIABLE,
    SYSTEMATICALLY_LATE,
    classify,
)


def test_early_and_stable_lane() -> None:
    assert classify(-0.5, 1.0, 0.4, 0.3, 0.1, 30) == (EARLY_AND_STABLE, "Early & Stable")


def test_late_rule_fires_before_variance_checks() -> None:
    assert classify(0.2, 1.0, 0.2, 0.3, 0.5, 30) == (SYSTEMATICALLY_LATE, "Systematically Late")
    assert classify(0.2, 6.0, 0.0, 0.4, 0.6, 500)[0] == SYSTEMATICALLY_LATE


def test_low_volume_wins_over_everything() -> None:
    assert classify(-0.5, 1.0, 0.9, 0.1, 0.0, 10) == (LOW_VOLUME_MIXED, "Low Volume / Mixed")
    assert classify(3.0, 9.0, 0.0, 0.0, 1.0, 19)[0] == LOW_VOLUME_MIXED


def test_volume_of_twenty_is_classified_normally() -> None:
    assert classify(-0.5, 1.0, 0.4, 0.3, 0.1, 20)[0] == EARLY_AND_STABLE


def test_high_jitter_lane() -> None:
    assert classify(0.1, 4.0, 0.1, 0.6, 0.3, 100) == (HIGH_JITTER, "High-Jitter")


def test_on_time_and_reliable_lane() -> None:
    assert classify(0.0, 1.0, 0.1, 0.8, 0.1, 100) == (ON_TIME_AND_RELIABLE, "On-Time & Reliable")


def test_unmatched_lane_falls_back_to_mixed() -> None:
    assert classify(0.0, 3.0, 0.1, 0.5, 0.4, 100)[0] == LOW_VOLUME_MIXED


@pytest.mark.parametrize(
    "args, expected",
    [
        # late_rate must exceed 0.45
        ((0.0, 1.0, 0.0, 0.55, 0.45, 100), LOW_VOLUME_MIXED),
        # early lanes need variance strictly below 2.0
        ((-0.5, 2.0, 0.4, 0.5, 0.1, 100), LOW_VOLUME_MIXED),
        # on-time rate must exceed 0.55
        ((0.0, 1.0, 0.2, 0.55, 0.25, 100), LOW_VOLUME_MIXED),
        ((0.0, 3.5, 0.2, 0.7, 0.1, 100), LOW_VOLUME_MIXED),
    ],
)
def test_thresholds_are_strict(args, expected) -> None:
    assert classify(*args)[0] == expected


def test_rules_are_ordered_and_end_with_catch_all() -> None:
    labels = [rule.label for rule in CLUSTER_RULES]
    assert labels == [
        "low_volume",
        "early_and_stable",
        "systematically_late",
        "high_jitter",
        "on_time_and_reliable",
        "mixed",
    ]
    assert CLUSTER_RULES[-1].cluster_id == LOW_VOLUME_MIXED


def test_every_cluster_id_has_a_name() -> None:
    assert CLUSTER_IDS == (1, 2, 3, 4, 5)
    assert set(CLUSTER_NAMES) == set(CLUSTER_IDS)
