"""Rating service wiring the stores to the squad aggregator."""

from __future__ import annotations

import logging
from typing import Optional

from pyscout.models import PlayerRecord, SquadRating
from pyscout.persistence.interfaces import PlayerRepository, RatingWeightsStore, SquadConfigurationStore

from .calculator import get_club_rating
from .squad import aggregate_squad_rating


logger = logging.getLogger("uvicorn.error")


class SquadRatingService:
    """Reads players, weights and assignments and hands them to the aggregator.

    Store failures are not retried here; they propagate to the caller.
    """

    def __init__(
        self,
        players: PlayerRepository,
        weights: RatingWeightsStore,
        squads: SquadConfigurationStore,
    ) -> None:
        self._players = players
        self._weights = weights
        self._squads = squads

    def player_rating(self, player_id: str, club_name: str, *, position: Optional[str] = None) -> Optional[float]:
        player = self._players.fetch_player(player_id)
        if player is None:
            raise KeyError(player_id)
        return get_club_rating(player, self._weights.fetch_weights(club_name), position=position)

    def squad_rating(self, squad_id: str, club_name: str) -> Optional[SquadRating]:
        assignments = self._squads.fetch_assignments(squad_id)
        if not assignments:
            logger.info("Squad %s has no assignments; nothing to rate", squad_id)
            return None
        roster: list[PlayerRecord] = self._players.fetch_players()
        club_weights = self._weights.fetch_weights(club_name)
        rating = aggregate_squad_rating(assignments, roster, club_weights)
        if rating is not None:
            logger.info(
                "Rated squad %s for %s: %.1f across %s assignments",
                squad_id,
                club_name,
                rating.average_starter_rating,
                len(assignments),
            )
        return rating
