from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from pyscout.models import PlayerRecord, PositionAssignment, SlotAssignment


class FormationSlotResponse(BaseModel):
    slot: str
    eligible_positions: List[str]


class FormationResponse(BaseModel):
    name: str
    slots: List[FormationSlotResponse]


class LineupRequest(BaseModel):
    formation: str | None = None
    roster: List[PlayerRecord] = Field(default_factory=list)
    assignments: List[PositionAssignment] = Field(default_factory=list)
    club_name: str | None = None
    excluded_player_ids: List[str] = Field(default_factory=list)
    max_alternates: int | None = Field(default=None, ge=0, le=50)


class LineupResponse(BaseModel):
    formation: str
    slots: List[SlotAssignment]
