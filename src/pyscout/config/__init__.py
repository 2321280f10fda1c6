"""Configuration helpers for positions, formations and rating weights."""

from .formations import DEFAULT_FORMATION, FormationRules, get_formation, iter_formations
from .positions import DEFAULT_POSITION_KEY, is_known_position, normalize_position, resolve_position_key
from .weights import DEFAULT_POSITION_WEIGHTS, default_club_weights

__all__ = [
    "DEFAULT_FORMATION",
    "DEFAULT_POSITION_KEY",
    "DEFAULT_POSITION_WEIGHTS",
    "FormationRules",
    "default_club_weights",
    "get_formation",
    "is_known_position",
    "iter_formations",
    "normalize_position",
    "resolve_position_key",
]
