"""Helpers to load roster and squad assignment CSVs into canonical records."""

from __future__ import annotations

import csv
import logging
import re
from datetime import date
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence

from pydantic import ValidationError

from pyscout.config.positions import is_known_position
from pyscout.models import PlayerRecord, PositionAssignment


logger = logging.getLogger(__name__)

DEFAULT_ROSTER_MAPPING: Dict[str, str] = {
    "player_id": "player_id",
    "name": "name",
    "club": "club",
    "age": "age",
    "positions": "positions",
    "nationality": "nationality",
    "contract_status": "contract_status",
    "contract_expiry": "contract_expiry",
    "general_rating": "general_rating",
    "potential_rating": "potential_rating",
    "market_value": "market_value",
}

_POSITION_SPLIT_RE = re.compile(r"[/,;\s]+")
_NUMBER_CLEAN_RE = re.compile(r"[£$€,%\s]")


def _parse_spec(mapping: Mapping[str, str], key: str) -> Optional[str | Sequence[str]]:
    spec = mapping.get(key)
    if spec is None:
        return None
    if "|" in spec:
        return tuple(part.strip() for part in spec.split("|"))
    return spec


def _extract(row: Mapping[str, str], spec: Optional[str | Sequence[str]]) -> Optional[str]:
    if spec is None:
        return None
    if isinstance(spec, str):
        value = row.get(spec)
        if value is None:
            return None
        value = value.strip()
        return value or None
    parts = [row.get(col, "").strip() for col in spec if row.get(col)]
    return " ".join(parts) if parts else None


def parse_number(raw: Optional[str]) -> Optional[float]:
    if raw is None:
        return None
    cleaned = _NUMBER_CLEAN_RE.sub("", raw)
    if not cleaned or cleaned in {"-", "N/A", "NA"}:
        return None
    return float(cleaned)


def split_positions(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [token.upper() for token in _POSITION_SPLIT_RE.split(raw.strip()) if token]


def row_to_record(row: Mapping[str, str], mapping: Mapping[str, str]) -> PlayerRecord:
    """Build a ``PlayerRecord``; unmapped numeric columns land in ``metrics``."""

    values = {key: _extract(row, _parse_spec(mapping, key)) for key in DEFAULT_ROSTER_MAPPING}
    mapped_columns = set()
    for spec in mapping.values():
        mapped_columns.update(part.strip() for part in spec.split("|"))

    metrics: Dict[str, float] = {}
    for column, raw in row.items():
        if column is None or column in mapped_columns or raw is None:
            continue
        try:
            value = parse_number(raw)
        except ValueError:
            continue
        if value is not None:
            metrics[column.strip()] = value

    age = parse_number(values["age"])
    expiry = values["contract_expiry"]
    positions = split_positions(values["positions"])
    for position in positions:
        if not is_known_position(position):
            logger.warning("Unknown position %r for player %s", position, values["player_id"])

    return PlayerRecord(
        player_id=values["player_id"] or "",
        name=values["name"] or "",
        club=values["club"] or "",
        age=int(age) if age is not None else None,
        positions=positions,
        nationality=values["nationality"],
        contract_status=values["contract_status"],
        contract_expiry=date.fromisoformat(expiry) if expiry else None,
        general_rating=parse_number(values["general_rating"]),
        potential_rating=parse_number(values["potential_rating"]),
        market_value=parse_number(values["market_value"]),
        metrics=metrics,
    )


def load_players_csv(path: Path, mapping: Optional[Mapping[str, str]] = None) -> List[PlayerRecord]:
    """Load a roster CSV; ``mapping`` overrides the default column names."""

    resolved = DEFAULT_ROSTER_MAPPING | dict(mapping or {})
    records: List[PlayerRecord] = []
    seen: set[str] = set()
    with path.open(newline="", encoding="utf-8-sig") as handle:
        reader = csv.DictReader(handle)
        for line_number, row in enumerate(reader, start=2):
            try:
                record = row_to_record(row, resolved)
            except (ValidationError, ValueError) as exc:
                raise ValueError(f"{path.name} row {line_number}: {exc}") from exc
            if record.player_id in seen:
                logger.warning("Duplicate player id %s in %s; keeping first", record.player_id, path.name)
                continue
            seen.add(record.player_id)
            records.append(record)
    logger.info("Loaded %s players from %s", len(records), path.name)
    return records


def load_assignments_csv(path: Path) -> List[PositionAssignment]:
    """Load ``position,player_id`` rows describing a squad configuration."""

    assignments: List[PositionAssignment] = []
    with path.open(newline="", encoding="utf-8-sig") as handle:
        reader = csv.DictReader(handle)
        missing = {"position", "player_id"} - set(reader.fieldnames or [])
        if missing:
            raise ValueError(f"{path.name} is missing columns: {', '.join(sorted(missing))}")
        for line_number, row in enumerate(reader, start=2):
            try:
                assignments.append(
                    PositionAssignment(
                        position=(row.get("position") or "").strip(),
                        player_id=(row.get("player_id") or "").strip(),
                    )
                )
            except ValidationError as exc:
                raise ValueError(f"{path.name} row {line_number}: {exc}") from exc
    return assignments
