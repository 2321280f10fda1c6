"""Free-text position abbreviations resolved to canonical rating keys."""

from __future__ import annotations

import re
from typing import Dict, Mapping, Optional, Tuple

from pyscout.models.position import PositionKey


DEFAULT_POSITION_KEY = PositionKey.CM

_POSITION_ALIAS_GROUPS: Dict[PositionKey, Tuple[str, ...]] = {
    PositionKey.GK: ("GK", "G", "GOALKEEPER"),
    PositionKey.CB: ("CB", "DC", "LCB", "RCB", "CD"),
    PositionKey.RB: ("RB", "RWB", "DR", "WBR"),
    PositionKey.LB: ("LB", "LWB", "DL", "WBL"),
    PositionKey.DM: ("CDM", "DM", "DMC", "LDM", "RDM"),
    PositionKey.CM: ("CM", "MC", "LCM", "RCM"),
    PositionKey.AM: ("CAM", "AM", "AMC", "LAM", "RAM"),
    PositionKey.W: ("W", "LW", "RW", "LM", "RM", "ML", "MR", "AML", "AMR"),
    PositionKey.F: ("ST", "CF", "SS", "F", "FW", "LS", "RS", "LF", "RF"),
}

_SLOT_INDEX_RE = re.compile(r"\d+$")


def _build_lookup() -> dict[str, PositionKey]:
    lookup: dict[str, PositionKey] = {}
    for key, aliases in _POSITION_ALIAS_GROUPS.items():
        for alias in aliases:
            if alias in lookup:
                raise ValueError(f"Position alias {alias!r} mapped twice")
            lookup[alias] = key
    return lookup


POSITION_LOOKUP: Mapping[str, PositionKey] = _build_lookup()


def normalize_position(position: Optional[str]) -> str:
    """Upper-case the abbreviation and drop any slot index (``CB2`` -> ``CB``)."""

    if not position:
        return ""
    token = position.strip().upper().replace(" ", "")
    return _SLOT_INDEX_RE.sub("", token)


def is_known_position(position: Optional[str]) -> bool:
    return normalize_position(position) in POSITION_LOOKUP


def resolve_position_key(position: Optional[str]) -> PositionKey:
    """Map a position or slot label to exactly one ``PositionKey``.

    Resolution is a single table lookup, so the answer never depends on rule
    order. Empty or unrecognised input resolves to central midfield.
    """

    return POSITION_LOOKUP.get(normalize_position(position), DEFAULT_POSITION_KEY)
