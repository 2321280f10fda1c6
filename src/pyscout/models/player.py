"""Canonical player models shared across ingestion, rating and API layers."""

from __future__ import annotations

from datetime import date
from typing import Dict, List, Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class PlayerRecord(BaseModel):
    """Normalized player payload read from the player repository."""

    player_id: str = Field(..., min_length=1)
    name: str
    club: str = ""
    age: Optional[int] = Field(default=None, ge=0)
    positions: List[str] = Field(default_factory=list)
    nationality: Optional[str] = None
    contract_status: Optional[str] = None
    contract_expiry: Optional[date] = None
    general_rating: Optional[float] = None
    potential_rating: Optional[float] = None
    market_value: Optional[float] = Field(default=None, ge=0.0)
    metrics: Dict[str, float] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @property
    def primary_position(self) -> Optional[str]:
        return self.positions[0] if self.positions else None
