"""Persist and load club rating weight profiles."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from pyscout.models import ClubRatingWeights


@dataclass
class WeightsProfile:
    weights: ClubRatingWeights

    @classmethod
    def load(cls, path: Path, *, club_name: str | None = None) -> "WeightsProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        if "weights" not in data:
            data = {"weights": data}
        if club_name:
            data["club_name"] = club_name
        data.setdefault("club_name", path.stem)
        return cls(weights=ClubRatingWeights.model_validate(data))

    def save(self, path: Path) -> None:
        payload = self.weights.model_dump(mode="json", exclude={"updated_at"})
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
