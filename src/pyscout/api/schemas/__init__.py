"""Pydantic models for API I/O."""

from .rating import (
    PlayerRatingRequest,
    PlayerRatingResponse,
    PositionResolveResponse,
    SquadRatingRequest,
    SquadRatingResponse,
    WeightsUpdateRequest,
)
from .squad import FormationResponse, FormationSlotResponse, LineupRequest, LineupResponse

__all__ = [
    "FormationResponse",
    "FormationSlotResponse",
    "LineupRequest",
    "LineupResponse",
    "PlayerRatingRequest",
    "PlayerRatingResponse",
    "PositionResolveResponse",
    "SquadRatingRequest",
    "SquadRatingResponse",
    "WeightsUpdateRequest",
]
