"""Canonical football roles used to key rating weights."""

from __future__ import annotations

from enum import Enum


class PositionKey(str, Enum):
    GK = "GK"
    CB = "CB"
    RB = "RB"
    LB = "LB"
    DM = "DM"
    CM = "CM"
    AM = "AM"
    W = "W"
    F = "F"


POSITION_LABELS: dict[PositionKey, str] = {
    PositionKey.GK: "Goalkeeper",
    PositionKey.CB: "Centre Back",
    PositionKey.RB: "Right Back",
    PositionKey.LB: "Left Back",
    PositionKey.DM: "Defensive Midfield",
    PositionKey.CM: "Central Midfield",
    PositionKey.AM: "Attacking Midfield",
    PositionKey.W: "Winger",
    PositionKey.F: "Forward",
}
