"""Command-line interface for rating squads from roster files."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pyscout.config import default_club_weights, get_formation, iter_formations
from pyscout.config_loader import WeightsProfile
from pyscout.ingest import load_assignments_csv, load_players_csv
from pyscout.models import POSITION_LABELS
from pyscout.rating import aggregate_squad_rating, format_rating, get_club_rating
from pyscout.settings import Settings
from pyscout.squad import build_slot_assignments


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    settings = Settings.from_env()
    parser = argparse.ArgumentParser(description="Compute club ratings for a squad configuration")
    parser.add_argument("roster", type=Path, help="Path to roster CSV")
    parser.add_argument("assignments", type=Path, nargs="?", default=None, help="Optional position,player_id CSV")
    parser.add_argument("--club", default=settings.club_name, help="Club whose weights apply")
    parser.add_argument("--weights", type=Path, default=None, help="Club weights JSON (defaults to built-in table)")
    parser.add_argument("--save-weights", type=Path, default=None, help="Write the weights in use to JSON")
    parser.add_argument(
        "--formation",
        default=settings.formation,
        choices=[formation.name for formation in iter_formations()],
        help="Formation used to fill unassigned slots",
    )
    parser.add_argument(
        "--roster-column",
        action="append",
        default=[],
        help="Mapping for roster CSV columns (e.g., name=First Name|Last Name)",
    )
    parser.add_argument("--alternates", type=int, default=3, help="Alternates listed per slot")
    parser.add_argument("--output", type=Path, default=None, help="Write the JSON result to this path")
    parser.add_argument("--verbose", action="store_true", help="Log skipped assignments and fallbacks")
    return parser.parse_args(argv)


def _parse_mapping(entries: list[str]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid mapping entry '{entry}', expected key=value")
        key, value = entry.split("=", 1)
        mapping[key.strip()] = value.strip()
    return mapping


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    roster = load_players_csv(args.roster, mapping=_parse_mapping(args.roster_column) or None)
    if args.weights:
        club_weights = WeightsProfile.load(args.weights, club_name=args.club).weights
    else:
        club_weights = default_club_weights(args.club)
    if args.save_weights:
        WeightsProfile(club_weights).save(args.save_weights)
        print(f"Saved weights profile to {args.save_weights}", file=sys.stderr)

    formation = get_formation(args.formation)
    explicit = load_assignments_csv(args.assignments) if args.assignments else []
    slots = build_slot_assignments(
        formation,
        roster,
        explicit,
        club_weights,
        max_alternates=args.alternates,
    )
    players_by_id = {player.player_id: player for player in roster}
    starters = [(slot.slot, slot.active_player_id) for slot in slots if slot.active_player_id]
    rating = aggregate_squad_rating(starters, roster, club_weights)

    lineup_payload = []
    for slot in slots:
        player = players_by_id.get(slot.active_player_id or "")
        rating_value = get_club_rating(player, club_weights, position=slot.slot) if player else None
        lineup_payload.append(
            {
                "slot": slot.slot,
                "role": POSITION_LABELS[slot.position_key],
                "player_id": slot.active_player_id,
                "name": player.name if player else None,
                "club_rating": format_rating(rating_value),
                "alternates": slot.alternate_player_ids,
            }
        )

    payload = {
        "club": club_weights.club_name,
        "formation": formation.name,
        "lineup": lineup_payload,
        "rating": rating.model_dump(by_alias=True) if rating else None,
    }
    text = json.dumps(payload, indent=2)
    if args.output:
        args.output.write_text(text, encoding="utf-8")
        print(f"Wrote squad rating to {args.output}", file=sys.stderr)
    else:
        print(text)

    if rating is None:
        print("No assigned players matched the roster; squad rating not computed", file=sys.stderr)
    else:
        print(f"Average starter rating: {format_rating(rating.average_starter_rating)}", file=sys.stderr)


if __name__ == "__main__":
    main()
