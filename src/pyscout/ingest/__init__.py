"""Input adapters that normalize roster and squad files."""

from .roster import (
    DEFAULT_ROSTER_MAPPING,
    load_assignments_csv,
    load_players_csv,
    row_to_record,
    split_positions,
)

__all__ = [
    "DEFAULT_ROSTER_MAPPING",
    "load_assignments_csv",
    "load_players_csv",
    "row_to_record",
    "split_positions",
]
