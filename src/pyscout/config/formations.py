"""Formation slot layouts and the player positions eligible for each slot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, Mapping, Tuple


@dataclass(frozen=True)
class FormationRules:
    name: str
    slot_order: Tuple[str, ...]
    slot_positions: Mapping[str, FrozenSet[str]]

    def eligible_positions(self, slot: str) -> FrozenSet[str]:
        return self.slot_positions.get(slot, frozenset())


_GK = frozenset({"GK"})
_CB = frozenset({"CB"})
_LB = frozenset({"LB", "LWB"})
_RB = frozenset({"RB", "RWB"})
_DM = frozenset({"CM", "CDM"})
_CM = frozenset({"CM", "CAM"})
_AM = frozenset({"CAM", "CM"})
_LW = frozenset({"W", "LW", "LM"})
_RW = frozenset({"W", "RW", "RM"})
_LM = frozenset({"LM", "W", "LW"})
_RM = frozenset({"RM", "W", "RW"})
_ST = frozenset({"F", "FW", "ST", "CF"})


_FORMATIONS: Dict[str, FormationRules] = {
    "4-3-3": FormationRules(
        name="4-3-3",
        slot_order=("GK", "LB", "CB1", "CB2", "RB", "CDM", "CM1", "CM2", "LW", "ST", "RW"),
        slot_positions={
            "GK": _GK,
            "LB": _LB,
            "CB1": _CB,
            "CB2": _CB,
            "RB": _RB,
            "CDM": _DM,
            "CM1": _CM,
            "CM2": _CM,
            "LW": _LW,
            "ST": _ST,
            "RW": _RW,
        },
    ),
    "4-2-3-1": FormationRules(
        name="4-2-3-1",
        slot_order=("GK", "LB", "CB1", "CB2", "RB", "CDM1", "CDM2", "LW", "CAM", "RW", "ST"),
        slot_positions={
            "GK": _GK,
            "LB": _LB,
            "CB1": _CB,
            "CB2": _CB,
            "RB": _RB,
            "CDM1": _DM,
            "CDM2": _DM,
            "LW": _LW,
            "CAM": _AM,
            "RW": _RW,
            "ST": _ST,
        },
    ),
    "3-5-2": FormationRules(
        name="3-5-2",
        slot_order=("GK", "CB1", "CB2", "CB3", "LWB", "CM1", "CM2", "CM3", "RWB", "ST1", "ST2"),
        slot_positions={
            "GK": _GK,
            "CB1": _CB,
            "CB2": _CB,
            "CB3": _CB,
            "LWB": frozenset({"LWB", "LB"}),
            "CM1": _CM,
            "CM2": _CM,
            "CM3": _CM,
            "RWB": frozenset({"RWB", "RB"}),
            "ST1": _ST,
            "ST2": _ST,
        },
    ),
    "4-4-2": FormationRules(
        name="4-4-2",
        slot_order=("GK", "LB", "CB1", "CB2", "RB", "LM", "CM1", "CM2", "RM", "ST1", "ST2"),
        slot_positions={
            "GK": _GK,
            "LB": _LB,
            "CB1": _CB,
            "CB2": _CB,
            "RB": _RB,
            "LM": _LM,
            "CM1": _CM,
            "CM2": _CM,
            "RM": _RM,
            "ST1": _ST,
            "ST2": _ST,
        },
    ),
}

DEFAULT_FORMATION = "4-3-3"


def iter_formations() -> Iterable[FormationRules]:
    """Return an iterator of all configured formations."""

    return _FORMATIONS.values()


def get_formation(name: str) -> FormationRules:
    """Fetch a formation by name, raising KeyError if missing."""

    key = name.strip()
    if key not in _FORMATIONS:
        raise KeyError(f"No formation configured for {name!r}")
    return _FORMATIONS[key]
