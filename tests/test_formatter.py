import math

from lane_analytics.services.outputs.formatter import as_percent, round_half_up, round_metric, safe_ratio


def test_percent_rounds_halves_up() -> None:
    assert as_percent(5 / 80) == 6.3
    assert as_percent(0.125) == 12.5
    assert as_percent(1.0) == 100.0


def test_metric_rounds_halves_away_from_zero() -> None:
    assert round_metric(0.125) == 0.13
    assert round_metric(-0.125) == -0.13
    assert round_metric(1.0) == 1.0


def test_round_half_up_whole_numbers() -> None:
    assert round_half_up(62.5) == 63.0
    assert round_half_up(2.5) == 3.0
    assert round_half_up(-2.5) == -3.0
    assert round_half_up(89.99999999999999) == 90.0


def test_non_finite_values_become_zero() -> None:
    assert round_half_up(math.nan, 1) == 0.0
    assert round_half_up(math.inf) == 0.0
    assert safe_ratio(1.0, 0) == 0.0
