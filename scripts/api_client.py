"""Lightweight REST client for the pyscout API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx

from pyscout.ingest import load_assignments_csv, load_players_csv


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the pyscout REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("roster", type=Path, nargs="?", help="Roster CSV")
    parser.add_argument("assignments", type=Path, nargs="?", help="Assignments CSV (position,player_id)")
    parser.add_argument("--club", default=None, help="Club whose weights apply")
    parser.add_argument("--resolve", metavar="POSITION", help="Resolve a position abbreviation and exit")
    parser.add_argument("--get-weights", metavar="CLUB", help="Fetch a club's rating weights and exit")
    parser.add_argument("--squad", metavar="SQUAD_ID", help="Rate a saved squad for --club and exit")
    parser.add_argument("--lineup", action="store_true", help="Request slot alternates instead of a rating")
    parser.add_argument("--formation", default=None, help="Formation for --lineup")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.resolve is not None:
            resp = client.get("/positions/resolve", params={"position": args.resolve})
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return
        if args.get_weights:
            resp = client.get(f"/clubs/{args.get_weights}/weights")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return
        if args.squad:
            if not args.club:
                raise SystemExit("--club is required with --squad")
            resp = client.get(f"/clubs/{args.club}/squads/{args.squad}/rating")
            if resp.status_code == 404:
                raise SystemExit(f"squad {args.squad} not found")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if args.roster is None or args.assignments is None:
            raise SystemExit("roster and assignments files are required unless using --resolve/--get-weights/--squad")

        roster = [player.model_dump(mode="json") for player in load_players_csv(args.roster)]
        assignments = [assignment.model_dump() for assignment in load_assignments_csv(args.assignments)]
        body = {"roster": roster, "assignments": assignments, "club_name": args.club}

        if args.lineup:
            body["formation"] = args.formation
            resp = client.post("/squads/lineup", json=body)
        else:
            resp = client.post("/squads/rating", json=body)
        resp.raise_for_status()
        print(json.dumps(resp.json(), indent=2))


if __name__ == "__main__":
    main()
