"""Read interfaces the rating service depends on."""

from __future__ import annotations

from typing import List, Optional, Protocol

from pyscout.models import ClubRatingWeights, PlayerRecord, PositionAssignment


class PlayerRepository(Protocol):
    def fetch_players(self) -> List[PlayerRecord]: ...

    def fetch_player(self, player_id: str) -> Optional[PlayerRecord]: ...


class RatingWeightsStore(Protocol):
    def fetch_weights(self, club_name: str) -> ClubRatingWeights:
        """Return the club's table, or the built-in defaults when none is saved."""
        ...


class SquadConfigurationStore(Protocol):
    def fetch_assignments(self, squad_id: str) -> List[PositionAssignment]: ...
