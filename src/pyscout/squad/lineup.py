"""Fill formation slots with an active player and ranked alternates."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from pyscout.config.formations import FormationRules
from pyscout.config.positions import resolve_position_key
from pyscout.models import ClubRatingWeights, PlayerRecord, PositionAssignment, SlotAssignment
from pyscout.rating.calculator import get_club_rating


logger = logging.getLogger(__name__)


def _is_eligible(player: PlayerRecord, allowed: Iterable[str]) -> bool:
    allowed_upper = {position.upper() for position in allowed}
    return any(position.strip().upper() in allowed_upper for position in player.positions)


def _ranked(
    candidates: Iterable[PlayerRecord],
    slot: str,
    club_weights: Optional[ClubRatingWeights],
) -> List[PlayerRecord]:
    scored: List[Tuple[Optional[float], PlayerRecord]] = [
        (get_club_rating(player, club_weights, position=slot), player) for player in candidates
    ]
    scored.sort(key=lambda item: (item[0] is None, -(item[0] or 0.0), item[1].name, item[1].player_id))
    return [player for _, player in scored]


def _match_slot(formation: FormationRules, label: str, taken: Dict[str, str]) -> Optional[str]:
    """First open slot for ``label``: the slot itself, else one of the same position key."""

    if label in formation.slot_positions:
        return None if label in taken else label
    key = resolve_position_key(label)
    for slot in formation.slot_order:
        if slot not in taken and resolve_position_key(slot) is key:
            return slot
    return None


def build_slot_assignments(
    formation: FormationRules,
    roster: Sequence[PlayerRecord],
    assignments: Iterable[PositionAssignment] = (),
    club_weights: Optional[ClubRatingWeights] = None,
    *,
    excluded_player_ids: Iterable[str] = (),
    max_alternates: Optional[int] = None,
) -> List[SlotAssignment]:
    """Return one ``SlotAssignment`` per formation slot, in formation order.

    Explicit assignments win; a label that is not a slot of the formation
    (``CB``, ``RWB``) takes the first open slot with the same position key.
    A player is placed at most once and excluded players never are. Slots
    without an assignment take the best-rated eligible player not already
    used. Alternates are every other eligible player that is not active
    elsewhere or excluded (e.g. first-team players when building a shadow
    squad).
    """

    players_by_id: Dict[str, PlayerRecord] = {player.player_id: player for player in roster}
    excluded: Set[str] = set(excluded_player_ids)

    explicit: Dict[str, str] = {}
    pending: List[PositionAssignment] = []
    for assignment in assignments:
        if assignment.player_id not in players_by_id:
            logger.warning(
                "Ignoring %s assignment: player %s not in roster",
                assignment.position,
                assignment.player_id,
            )
            continue
        pending.append(assignment)

    # Exact slot labels claim their slot before plain labels are placed.
    exact = [assignment for assignment in pending if assignment.position in formation.slot_positions]
    loose = [assignment for assignment in pending if assignment.position not in formation.slot_positions]
    for assignment in exact + loose:
        if assignment.player_id in excluded:
            logger.warning("Ignoring %s assignment: player %s is excluded", assignment.position, assignment.player_id)
            continue
        if assignment.player_id in explicit.values():
            logger.warning(
                "Ignoring %s assignment: player %s already assigned",
                assignment.position,
                assignment.player_id,
            )
            continue
        slot = _match_slot(formation, assignment.position, explicit)
        if slot is None:
            logger.warning("Ignoring assignment to unavailable %s slot %s", formation.name, assignment.position)
            continue
        explicit[slot] = assignment.player_id

    used: Set[str] = set(explicit.values()) | excluded
    active: Dict[str, Optional[str]] = {}
    for slot in formation.slot_order:
        if slot in explicit:
            active[slot] = explicit[slot]
            continue
        eligible = [
            player
            for player in roster
            if player.player_id not in used and _is_eligible(player, formation.eligible_positions(slot))
        ]
        ranked = _ranked(eligible, slot, club_weights)
        if ranked:
            active[slot] = ranked[0].player_id
            used.add(ranked[0].player_id)
        else:
            active[slot] = None

    active_ids = {player_id for player_id in active.values() if player_id}
    result: List[SlotAssignment] = []
    for slot in formation.slot_order:
        eligible = [
            player
            for player in roster
            if player.player_id not in active_ids
            and player.player_id not in excluded
            and _is_eligible(player, formation.eligible_positions(slot))
        ]
        alternates = [player.player_id for player in _ranked(eligible, slot, club_weights)]
        if max_alternates is not None:
            alternates = alternates[: max(0, max_alternates)]
        result.append(
            SlotAssignment(
                slot=slot,
                position_key=resolve_position_key(slot),
                active_player_id=active[slot],
                alternate_player_ids=alternates,
            )
        )
    return result
