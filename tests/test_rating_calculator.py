import math

import pytest

from pyscout.config import default_club_weights
from pyscout.models import AttributeWeight, CategoryWeights, ClubRatingWeights, PlayerRecord, PositionKey
from pyscout.rating import (
    category_value,
    compute_weighted_rating,
    format_rating,
    get_club_rating,
    player_metric,
    round_rating,
)


def _player(**overrides) -> PlayerRecord:
    data = {"player_id": "p1", "name": "Test Player", "positions": ["CM"]}
    data.update(overrides)
    return PlayerRecord(**data)


def test_weighted_average_of_present_metrics():
    player = _player(general_rating=8.0, potential_rating=6.0)
    rating = compute_weighted_rating(player, [("general", 0.7), ("potential", 0.3)])
    assert rating == pytest.approx(7.4)


def test_weights_are_normalised_by_metrics_present():
    player = _player(general_rating=60.0, metrics={"xg_90": 90.0})
    rating = compute_weighted_rating(player, [("general", 1.0), ("goals_90", 5.0), ("xg_90", 3.0)])
    assert rating == pytest.approx((60.0 * 1.0 + 90.0 * 3.0) / 4.0)


def test_absent_metrics_fall_back_to_general_rating():
    player = _player(general_rating=71.0)
    assert compute_weighted_rating(player, [("goals_90", 1.0), ("xg_90", 2.0)]) == pytest.approx(71.0)


def test_no_metrics_and_no_general_rating_is_none():
    player = _player()
    assert compute_weighted_rating(player, [("goals_90", 1.0)]) is None
    assert compute_weighted_rating(player, []) is None


def test_non_finite_metric_is_treated_as_absent():
    player = _player(general_rating=50.0, metrics={"xg_90": float("nan")})
    rating = compute_weighted_rating(player, [("general", 1.0), ("xg_90", 1.0)])
    assert rating is not None
    assert math.isfinite(rating)
    assert rating == pytest.approx(50.0)


def test_zero_weights_are_ignored():
    player = _player(general_rating=50.0, potential_rating=90.0)
    assert compute_weighted_rating(player, [("general", 1.0), ("potential", 0.0)]) == pytest.approx(50.0)


def test_category_weights_read_their_metric():
    player = _player(general_rating=40.0, metrics={"finishing": 80.0})
    weights = [
        CategoryWeights(id="general", label="Overall", weight=1),
        CategoryWeights(id="goalscoring", label="Goalscoring", weight=1, metric="finishing"),
    ]
    assert compute_weighted_rating(player, weights) == pytest.approx(60.0)


def test_player_metric_lookups():
    player = _player(general_rating=70.0, age=24, market_value=5_000_000.0)
    assert player_metric(player, "general") == 70.0
    assert player_metric(player, "potential") == 70.0
    assert player_metric(player, "age_factor") == pytest.approx(2.0)
    assert player_metric(player, "market_value") == 5_000_000.0
    assert player_metric(player, "xg_90") is None
    assert player_metric(_player(age=31), "age_factor") == 0.0
    assert player_metric(_player(), "age_factor") is None


def test_club_rating_without_weights_uses_general_rating():
    player = _player(general_rating=66.0)
    assert get_club_rating(player, None) == pytest.approx(66.0)
    assert get_club_rating(_player(), None) is None


def test_club_rating_missing_position_row_falls_back():
    weights = ClubRatingWeights(
        club_name="Test FC",
        weights={PositionKey.F: [CategoryWeights(id="potential", label="Potential", weight=1)]},
    )
    player = _player(positions=["CB"], general_rating=64.0, potential_rating=80.0)
    assert get_club_rating(player, weights) == pytest.approx(64.0)


def test_club_rating_uses_slot_over_listed_position():
    weights = ClubRatingWeights(
        club_name="Test FC",
        weights={
            PositionKey.CB: [CategoryWeights(id="general", label="Overall", weight=1)],
            PositionKey.F: [CategoryWeights(id="potential", label="Potential", weight=1)],
        },
    )
    player = _player(positions=["ST"], general_rating=60.0, potential_rating=80.0)
    assert get_club_rating(player, weights) == pytest.approx(80.0)
    assert get_club_rating(player, weights, position="CB1") == pytest.approx(60.0)


def test_default_weights_blend_headline_ratings():
    player = _player(positions=["CB"], general_rating=80.0, potential_rating=90.0)
    rating = get_club_rating(player, default_club_weights("Test FC"))
    assert rating == pytest.approx((80.0 * 100 + 90.0 * 35) / 135)


def test_default_weights_are_independent_copies():
    first = default_club_weights("A")
    second = default_club_weights("B")
    first.weights[PositionKey.CB][0].weight = 1
    assert second.weights[PositionKey.CB][0].weight == 100


@pytest.mark.parametrize(
    "value,expected",
    [(7.25, 7.3), (7.35, 7.4), (7.249, 7.2), (-7.25, -7.3), (8.0, 8.0)],
)
def test_round_rating_half_away_from_zero(value, expected):
    assert round_rating(value) == expected


def test_format_rating():
    assert format_rating(None) == "N/A"
    assert format_rating(72.46) == "72.5"
    assert format_rating(70) == "70.0"


def test_category_without_its_metric_uses_attribute_breakdown():
    category = CategoryWeights(
        id="defending",
        label="Defending",
        weight=1,
        attributes=[
            AttributeWeight(id="tackles_90", label="Tackles /90", weight=60),
            AttributeWeight(id="interceptions_90", label="Interceptions /90", weight=40),
            AttributeWeight(id="blocks_90", label="Blocks /90", weight=20),
        ],
    )
    player = _player(general_rating=50.0, metrics={"tackles_90": 90.0, "interceptions_90": 40.0})
    assert category_value(player, category) == pytest.approx(70.0)
    weights = [CategoryWeights(id="general", label="Overall", weight=1), category]
    assert compute_weighted_rating(player, weights) == pytest.approx(60.0)


def test_category_metric_beats_attribute_breakdown():
    category = CategoryWeights(
        id="defending",
        label="Defending",
        weight=1,
        attributes=[AttributeWeight(id="tackles_90", label="Tackles /90", weight=100)],
    )
    player = _player(metrics={"defending": 55.0, "tackles_90": 90.0})
    assert category_value(player, category) == pytest.approx(55.0)
    assert category_value(_player(), category) is None


def test_attribute_columns_move_default_centre_back_rating():
    weights = default_club_weights("Test FC")
    baseline = _player(positions=["CB"], general_rating=70.0)
    tackler = _player(positions=["CB"], general_rating=70.0, metrics={"tackles_90": 95.0})
    assert get_club_rating(baseline, weights) == pytest.approx(70.0)
    assert get_club_rating(tackler, weights) > get_club_rating(baseline, weights)
