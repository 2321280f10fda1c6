"""Weighted club rating for a single player."""

from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional, Tuple, Union

from pyscout.config.positions import resolve_position_key
from pyscout.models import CategoryWeights, ClubRatingWeights, PlayerRecord


logger = logging.getLogger(__name__)

AGE_PEAK = 28
AGE_FACTOR_PER_YEAR = 0.5

WeightEntry = Union[CategoryWeights, Tuple[str, float]]


def _finite(value: object) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def player_metric(player: PlayerRecord, metric: str) -> Optional[float]:
    """Return the player's value for ``metric`` or ``None`` when absent.

    ``potential`` is not skipped when missing: it takes the general rating
    instead, so a player without a potential grade is rated as if their
    potential matched their current level.
    """

    if metric == "general":
        return _finite(player.general_rating)
    if metric == "potential":
        potential = _finite(player.potential_rating)
        return potential if potential is not None else _finite(player.general_rating)
    if metric == "age_factor":
        if player.age is None:
            return None
        return max(0.0, (AGE_PEAK - player.age) * AGE_FACTOR_PER_YEAR)
    if metric == "market_value":
        return _finite(player.market_value)
    return _finite(player.metrics.get(metric))


def category_value(player: PlayerRecord, category: CategoryWeights) -> Optional[float]:
    """Value of one category for ``player``.

    A metric named after the category wins. Otherwise the category's
    attributes are averaged by their weights over the ones the player has.
    """

    value = player_metric(player, category.metric_name)
    if value is not None:
        return value

    numerator = 0.0
    denominator = 0.0
    for attribute in category.attributes:
        if attribute.weight <= 0:
            continue
        attribute_value = player_metric(player, attribute.id)
        if attribute_value is None:
            continue
        numerator += attribute_value * attribute.weight
        denominator += attribute.weight
    if denominator <= 0:
        return None
    return numerator / denominator


def _weighted_values(
    player: PlayerRecord, weights: Iterable[WeightEntry]
) -> Iterable[Tuple[Optional[float], object]]:
    for entry in weights:
        if isinstance(entry, CategoryWeights):
            yield category_value(player, entry), entry.weight
        else:
            metric, weight = entry
            yield player_metric(player, metric), weight


def compute_weighted_rating(player: PlayerRecord, weights: Iterable[WeightEntry]) -> Optional[float]:
    """Weighted average of the configured metrics the player actually has.

    Metrics the player lacks are skipped and the result is normalised by the
    weights that were used. With nothing usable the player's general rating
    (or ``None``) is returned.
    """

    numerator = 0.0
    denominator = 0.0
    for value, raw_weight in _weighted_values(player, weights):
        weight = _finite(raw_weight)
        if weight is None or weight <= 0:
            continue
        if value is None:
            continue
        numerator += value * weight
        denominator += weight

    if denominator <= 0:
        return _finite(player.general_rating)
    return numerator / denominator


def get_club_rating(
    player: PlayerRecord,
    club_weights: Optional[ClubRatingWeights],
    *,
    position: Optional[str] = None,
) -> Optional[float]:
    """Rate ``player`` against the club's table for ``position``.

    ``position`` is normally a formation slot; without one the player's
    primary position decides which weights apply.
    """

    if club_weights is None:
        return _finite(player.general_rating)

    key = resolve_position_key(position if position is not None else player.primary_position)
    weights = club_weights.for_position(key)
    if not weights:
        logger.debug("No %s weights for club %s; using general rating", key.value, club_weights.club_name)
        return _finite(player.general_rating)
    return compute_weighted_rating(player, weights)


def round_rating(value: float) -> float:
    """Round to one decimal place, halves away from zero."""

    return float(Decimal(repr(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def format_rating(value: Optional[float]) -> str:
    if value is None:
        return "N/A"
    return f"{round_rating(value):.1f}"
