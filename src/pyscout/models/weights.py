"""Rating weight records configured per club and position."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .position import PositionKey


class AttributeWeight(BaseModel):
    id: str
    label: str
    weight: float = Field(..., ge=0.0)


class CategoryWeights(BaseModel):
    """One weighted category; ``metric`` names the player value it reads."""

    id: str
    label: str
    weight: float = Field(..., ge=0.0)
    tooltip: Optional[str] = None
    attributes: List[AttributeWeight] = Field(default_factory=list)
    metric: Optional[str] = None

    @property
    def metric_name(self) -> str:
        return self.metric or self.id


class ClubRatingWeights(BaseModel):
    club_name: str = Field(..., min_length=1)
    weights: Dict[PositionKey, List[CategoryWeights]] = Field(default_factory=dict)
    league_adjustments: bool = True
    updated_at: Optional[datetime] = None

    def for_position(self, key: PositionKey) -> List[CategoryWeights]:
        return self.weights.get(key, [])
