"""Squad assignment and aggregated rating records."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from .position import PositionKey


class PositionAssignment(BaseModel):
    """A formation slot label mapped to the player filling it."""

    position: str = Field(..., min_length=1)
    player_id: str = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)


class SlotAssignment(BaseModel):
    slot: str
    position_key: PositionKey
    active_player_id: Optional[str] = None
    alternate_player_ids: List[str] = Field(default_factory=list)


class SquadRating(BaseModel):
    """Per-bucket averages plus the overall starter rating.

    Field aliases keep the bucket names the squad views already consume.
    """

    average_starter_rating: float = 0.0
    keeper: float = Field(default=0.0, alias="KeeperRating")
    defender: float = Field(default=0.0, alias="DefenderRating")
    centre_back: float = Field(default=0.0, alias="CentreBackRating")
    left_back: float = Field(default=0.0, alias="LeftBackRating")
    right_back: float = Field(default=0.0, alias="RightBackRating")
    midfielder: float = Field(default=0.0, alias="MidfielderRating")
    centre_midfielder: float = Field(default=0.0, alias="CentreMidfielderRating")
    attacker: float = Field(default=0.0, alias="AttackerRating")
    forward: float = Field(default=0.0, alias="ForwardRating")
    winger: float = Field(default=0.0, alias="WingerRating")

    model_config = ConfigDict(populate_by_name=True)
