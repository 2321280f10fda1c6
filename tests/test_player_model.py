import pytest
from pydantic import ValidationError

from pyscout.models import PlayerRecord


def test_player_record_is_frozen():
    record = PlayerRecord(
        player_id="p1",
        name="Test Player",
        club="Chelsea",
        positions=["CB", "RB"],
        general_rating=78.0,
    )

    assert record.player_id == "p1"
    assert record.primary_position == "CB"
    assert record.metrics == {}

    with pytest.raises((TypeError, ValidationError)):
        record.player_id = "p2"  # type: ignore[attr-defined]


def test_player_record_requires_identifier():
    with pytest.raises(ValidationError):
        PlayerRecord(player_id="", name="Nobody")


def test_primary_position_missing():
    record = PlayerRecord(player_id="p1", name="Test Player")
    assert record.primary_position is None
