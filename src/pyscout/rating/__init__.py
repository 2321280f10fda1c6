"""Player and squad rating computations."""

from .calculator import (
    category_value,
    compute_weighted_rating,
    format_rating,
    get_club_rating,
    player_metric,
    round_rating,
)
from .squad import RATING_BUCKETS, aggregate_squad_rating
from .service import SquadRatingService

__all__ = [
    "RATING_BUCKETS",
    "SquadRatingService",
    "aggregate_squad_rating",
    "category_value",
    "compute_weighted_rating",
    "format_rating",
    "get_club_rating",
    "player_metric",
    "round_rating",
]
