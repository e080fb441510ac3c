import pytest

from matching.scorer import KEYWORD_WEIGHT, SEMANTIC_WEIGHT, composite_score, round_score


def test_weights_sum_to_one():
    assert SEMANTIC_WEIGHT + KEYWORD_WEIGHT == pytest.approx(1.0)


def test_perfect_inputs_score_100():
    assert composite_score(1.0, 100.0) == 100.0


def test_zero_inputs_score_0():
    assert composite_score(0.0, 0.0) == 0.0


def test_weighted_blend():
    # 0.5 * 100 * 0.6 + 50 * 0.4
    assert composite_score(0.5, 50.0) == 50.0
    assert composite_score(0.0, 100.0) == 40.0
    assert composite_score(1.0, 0.0) == 60.0


@pytest.mark.parametrize("value, expected", [
    (64.995, 65.0),
    (64.994, 64.99),
    (0.125, 0.13),
    (2.675, 2.68),
    (84.99, 84.99),
    (33.333333, 33.33),
    (100.0, 100.0),
])
def test_round_score_half_away_from_zero(value, expected):
    assert round_score(value) == expected


@pytest.mark.parametrize("sim, overlap", [
    (0.0, 0.0), (0.123456, 33.3333), (0.54772, 60.0), (0.999999, 99.9999), (1.0, 100.0),
])
def test_score_in_range_with_two_decimals(sim, overlap):
    score = composite_score(sim, overlap)
    assert 0.0 <= score <= 100.0
    assert round(score, 2) == score
