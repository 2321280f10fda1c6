from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field

from pyscout.models import CategoryWeights, ClubRatingWeights, PlayerRecord, PositionAssignment, PositionKey, SquadRating


class PositionResolveResponse(BaseModel):
    position: str | None
    normalized: str
    position_key: PositionKey
    label: str
    known: bool


class PlayerRatingRequest(BaseModel):
    player: PlayerRecord
    club_name: str | None = None
    position: str | None = None
    weights: List[CategoryWeights] | None = None


class PlayerRatingResponse(BaseModel):
    player_id: str
    position_key: PositionKey
    rating: float | None
    display: str


class SquadRatingRequest(BaseModel):
    assignments: List[PositionAssignment] = Field(default_factory=list)
    roster: List[PlayerRecord] = Field(default_factory=list)
    club_name: str | None = None
    weights: ClubRatingWeights | None = None


class SquadRatingResponse(BaseModel):
    squad_id: str | None = None
    club_name: str
    rating: SquadRating | None


class WeightsUpdateRequest(BaseModel):
    weights: Dict[PositionKey, List[CategoryWeights]]
    league_adjustments: bool = True
