"""Pydantic records shared by every layer."""

from .player import PlayerRecord
from .position import POSITION_LABELS, PositionKey
from .squad import PositionAssignment, SlotAssignment, SquadRating
from .weights import AttributeWeight, CategoryWeights, ClubRatingWeights

__all__ = [
    "AttributeWeight",
    "CategoryWeights",
    "ClubRatingWeights",
    "POSITION_LABELS",
    "PlayerRecord",
    "PositionAssignment",
    "PositionKey",
    "SlotAssignment",
    "SquadRating",
]
