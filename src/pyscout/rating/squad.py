"""Squad rating aggregation over formation slot assignments."""

from __future__ import annotations

import logging
from collections import defaultdict
from statistics import fmean
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from pyscout.config.positions import resolve_position_key
from pyscout.models import ClubRatingWeights, PlayerRecord, PositionAssignment, PositionKey, SquadRating

from .calculator import get_club_rating, round_rating


logger = logging.getLogger(__name__)

# Specific bucket first, then the broader buckets it also feeds.
RATING_BUCKETS: Mapping[PositionKey, Tuple[str, ...]] = {
    PositionKey.GK: ("keeper",),
    PositionKey.CB: ("centre_back", "defender"),
    PositionKey.LB: ("left_back", "defender"),
    PositionKey.RB: ("right_back", "defender"),
    PositionKey.DM: ("centre_midfielder", "midfielder"),
    PositionKey.CM: ("centre_midfielder", "midfielder"),
    PositionKey.AM: ("attacker",),
    PositionKey.W: ("winger",),
    PositionKey.F: ("forward",),
}

BUCKET_FIELDS: Tuple[str, ...] = (
    "keeper",
    "defender",
    "centre_back",
    "left_back",
    "right_back",
    "midfielder",
    "centre_midfielder",
    "attacker",
    "forward",
    "winger",
)


def _as_assignment(entry: PositionAssignment | Tuple[str, str]) -> PositionAssignment:
    if isinstance(entry, PositionAssignment):
        return entry
    position, player_id = entry
    return PositionAssignment(position=position, player_id=player_id)


def aggregate_squad_rating(
    assignments: Iterable[PositionAssignment | Tuple[str, str]],
    roster: Sequence[PlayerRecord],
    club_weights: Optional[ClubRatingWeights],
) -> Optional[SquadRating]:
    """Average assigned players' club ratings per position bucket.

    Each player is rated for the slot they fill, not for their listed
    position. Returns ``None`` when there is nothing to aggregate (no
    assignments, no roster, or no assignment matched a roster player);
    buckets that received no rating are reported as ``0.0``.
    """

    resolved = [_as_assignment(entry) for entry in assignments]
    if not resolved or not roster:
        return None

    players_by_id: Dict[str, PlayerRecord] = {player.player_id: player for player in roster}
    buckets: Dict[str, List[float]] = defaultdict(list)
    ratings: List[float] = []
    matched = 0

    for assignment in resolved:
        player = players_by_id.get(assignment.player_id)
        if player is None:
            logger.warning(
                "Skipping %s assignment: player %s not in roster",
                assignment.position,
                assignment.player_id,
            )
            continue
        matched += 1
        rating = get_club_rating(player, club_weights, position=assignment.position)
        if rating is None:
            logger.debug("No rating available for player %s", player.player_id)
            continue
        ratings.append(rating)
        for bucket in RATING_BUCKETS[resolve_position_key(assignment.position)]:
            buckets[bucket].append(rating)

    if matched == 0:
        return None

    values = {field: round_rating(fmean(buckets[field])) if buckets[field] else 0.0 for field in BUCKET_FIELDS}
    overall = round_rating(fmean(ratings)) if ratings else 0.0
    return SquadRating(average_starter_rating=overall, **values)
