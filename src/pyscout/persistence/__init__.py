"""Persistence layer for players, club rating weights and squad assignments."""

from __future__ import annotations

import json
import sqlite3
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List, Optional

from pyscout.config.weights import default_club_weights
from pyscout.models import ClubRatingWeights, PlayerRecord, PositionAssignment

from .interfaces import PlayerRepository, RatingWeightsStore, SquadConfigurationStore


__all__ = [
    "PlayerRepository",
    "RatingWeightsStore",
    "ScoutStore",
    "SquadConfigurationStore",
    "SquadRecord",
    "StoreError",
]


class StoreError(RuntimeError):
    """Raised when the backing database cannot serve a request."""


@dataclass
class SquadRecord:
    squad_id: str
    club_name: str
    name: str
    formation: str
    squad_type: str
    created_at: datetime
    updated_at: datetime


class ScoutStore:
    """SQLite-backed store implementing the player, weights and squad interfaces."""

    def __init__(self, db_path: Path | str):
        self._use_uri = False
        self.db_path: Path | str
        if isinstance(db_path, str) and db_path.startswith("file:"):
            self.db_path = db_path
            self._use_uri = True
        else:
            self.db_path = Path(db_path)
        self._ensure_schema()

    def _connect(self) -> sqlite3.Connection:
        try:
            if isinstance(self.db_path, Path):
                self.db_path.parent.mkdir(parents=True, exist_ok=True)
                conn = sqlite3.connect(self.db_path)
            else:
                conn = sqlite3.connect(self.db_path, uri=self._use_uri)
        except (OSError, sqlite3.Error) as exc:
            raise StoreError(f"Unable to open database {self.db_path}: {exc}") from exc
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_schema(self) -> None:
        conn = self._connect()
        try:
            with conn:
                self._create_schema(conn)
        except sqlite3.Error as exc:
            raise StoreError(f"Unable to create schema: {exc}") from exc
        finally:
            conn.close()

    def _create_schema(self, conn: sqlite3.Connection) -> None:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS players (
                id TEXT PRIMARY KEY,
                name TEXT NOT NULL,
                club TEXT NOT NULL,
                record_json TEXT NOT NULL,
                updated_at TEXT NOT NULL
            )
            """
        )
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS club_rating_weights (
                club_name TEXT PRIMARY KEY,
                weights_json TEXT NOT NULL,
                league_adjustments INTEGER NOT NULL,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL
            )
            """
        )
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS squads (
                id TEXT PRIMARY KEY,
                club_name TEXT NOT NULL,
                name TEXT NOT NULL,
                formation TEXT NOT NULL,
                squad_type TEXT NOT NULL,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL
            )
            """
        )
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS player_position_assignments (
                squad_id TEXT NOT NULL,
                position TEXT NOT NULL,
                player_id TEXT NOT NULL,
                sort_order INTEGER NOT NULL,
                PRIMARY KEY (squad_id, position)
            )
            """
        )

    def _execute(self, sql: str, params: tuple = ()) -> List[sqlite3.Row]:
        conn = self._connect()
        try:
            with conn:
                return conn.execute(sql, params).fetchall()
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc
        finally:
            conn.close()

    # Players

    def save_players(self, players: Iterable[PlayerRecord]) -> int:
        now = datetime.now(timezone.utc).isoformat()
        rows = [
            (player.player_id, player.name, player.club, player.model_dump_json(), now)
            for player in players
        ]
        conn = self._connect()
        try:
            with conn:
                conn.executemany(
                    """
                    INSERT INTO players (id, name, club, record_json, updated_at)
                    VALUES (?, ?, ?, ?, ?)
                    ON CONFLICT(id) DO UPDATE SET
                        name = excluded.name,
                        club = excluded.club,
                        record_json = excluded.record_json,
                        updated_at = excluded.updated_at
                    """,
                    rows,
                )
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc
        finally:
            conn.close()
        return len(rows)

    def fetch_players(self) -> List[PlayerRecord]:
        rows = self._execute("SELECT record_json FROM players ORDER BY name, id")
        return [PlayerRecord.model_validate_json(row["record_json"]) for row in rows]

    def fetch_player(self, player_id: str) -> Optional[PlayerRecord]:
        rows = self._execute("SELECT record_json FROM players WHERE id = ?", (player_id,))
        if not rows:
            return None
        return PlayerRecord.model_validate_json(rows[0]["record_json"])

    # Club rating weights

    def save_weights(self, weights: ClubRatingWeights) -> ClubRatingWeights:
        now = datetime.now(timezone.utc)
        payload = json.dumps(weights.model_dump(mode="json")["weights"])
        self._execute(
            """
            INSERT INTO club_rating_weights (club_name, weights_json, league_adjustments, created_at, updated_at)
            VALUES (?, ?, ?, ?, ?)
            ON CONFLICT(club_name) DO UPDATE SET
                weights_json = excluded.weights_json,
                league_adjustments = excluded.league_adjustments,
                updated_at = excluded.updated_at
            """,
            (weights.club_name, payload, int(weights.league_adjustments), now.isoformat(), now.isoformat()),
        )
        return weights.model_copy(update={"updated_at": now})

    def get_saved_weights(self, club_name: str) -> Optional[ClubRatingWeights]:
        rows = self._execute("SELECT * FROM club_rating_weights WHERE club_name = ?", (club_name,))
        if not rows:
            return None
        row = rows[0]
        return ClubRatingWeights(
            club_name=row["club_name"],
            weights=json.loads(row["weights_json"]),
            league_adjustments=bool(row["league_adjustments"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )

    def fetch_weights(self, club_name: str) -> ClubRatingWeights:
        saved = self.get_saved_weights(club_name)
        if saved is None:
            return default_club_weights(club_name)
        return saved

    # Squads

    def save_squad(
        self,
        *,
        squad_id: str,
        club_name: str,
        name: str,
        formation: str,
        squad_type: str = "first-team",
        assignments: Iterable[PositionAssignment] = (),
    ) -> SquadRecord:
        now = datetime.now(timezone.utc).isoformat()
        conn = self._connect()
        try:
            with conn:
                existing = conn.execute("SELECT created_at FROM squads WHERE id = ?", (squad_id,)).fetchone()
                created_at = existing["created_at"] if existing else now
                conn.execute(
                    """
                    INSERT INTO squads (id, club_name, name, formation, squad_type, created_at, updated_at)
                    VALUES (?, ?, ?, ?, ?, ?, ?)
                    ON CONFLICT(id) DO UPDATE SET
                        club_name = excluded.club_name,
                        name = excluded.name,
                        formation = excluded.formation,
                        squad_type = excluded.squad_type,
                        updated_at = excluded.updated_at
                    """,
                    (squad_id, club_name, name, formation, squad_type, created_at, now),
                )
                conn.execute("DELETE FROM player_position_assignments WHERE squad_id = ?", (squad_id,))
                conn.executemany(
                    """
                    INSERT INTO player_position_assignments (squad_id, position, player_id, sort_order)
                    VALUES (?, ?, ?, ?)
                    """,
                    [
                        (squad_id, assignment.position, assignment.player_id, index)
                        for index, assignment in enumerate(assignments)
                    ],
                )
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc
        finally:
            conn.close()
        squad = self.get_squad(squad_id)
        if squad is None:
            raise StoreError(f"Squad {squad_id} was not persisted")
        return squad

    def get_squad(self, squad_id: str) -> Optional[SquadRecord]:
        rows = self._execute("SELECT * FROM squads WHERE id = ?", (squad_id,))
        if not rows:
            return None
        return self._row_to_squad(rows[0])

    def list_squads(self, club_name: str) -> List[SquadRecord]:
        rows = self._execute(
            "SELECT * FROM squads WHERE club_name = ? ORDER BY created_at DESC",
            (club_name,),
        )
        return [self._row_to_squad(row) for row in rows]

    def fetch_assignments(self, squad_id: str) -> List[PositionAssignment]:
        rows = self._execute(
            """
            SELECT position, player_id FROM player_position_assignments
            WHERE squad_id = ?
            ORDER BY sort_order
            """,
            (squad_id,),
        )
        return [PositionAssignment(position=row["position"], player_id=row["player_id"]) for row in rows]

    def _row_to_squad(self, row: sqlite3.Row) -> SquadRecord:
        return SquadRecord(
            squad_id=row["id"],
            club_name=row["club_name"],
            name=row["name"],
            formation=row["formation"],
            squad_type=row["squad_type"],
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )

