"""Runtime settings read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from pyscout.config.formations import DEFAULT_FORMATION, get_formation


logger = logging.getLogger(__name__)

_DB_PATH_ENV = "PYSCOUT_DB_PATH"
_CLUB_ENV = "PYSCOUT_CLUB"
_FORMATION_ENV = "PYSCOUT_FORMATION"

DEFAULT_DB_PATH = Path("pyscout.sqlite")
DEFAULT_CLUB = "Chelsea"


def _env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


@dataclass(frozen=True)
class Settings:
    db_path: Path | str
    club_name: str
    formation: str

    @classmethod
    def from_env(cls) -> "Settings":
        db_raw = os.getenv(_DB_PATH_ENV)
        db_path: Path | str
        if db_raw and db_raw.startswith("file:"):
            db_path = db_raw
        elif db_raw:
            db_path = Path(db_raw)
        else:
            db_path = DEFAULT_DB_PATH

        formation = _env_str(_FORMATION_ENV, DEFAULT_FORMATION)
        try:
            get_formation(formation)
        except KeyError:
            logger.warning("Unknown formation for %s: %s; using default %s", _FORMATION_ENV, formation, DEFAULT_FORMATION)
            formation = DEFAULT_FORMATION

        return cls(
            db_path=db_path,
            club_name=_env_str(_CLUB_ENV, DEFAULT_CLUB),
            formation=formation,
        )
