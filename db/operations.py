"""
Database operations for the career simulator: save slots and the leaderboard.
"""
from __future__ import annotations

import json
import logging
import sqlite3
from typing import Any, Sequence

from .schema import get_connection, init_db
from .serialize import dumps, loads
from models import LeaderboardEntry, SeasonLog
from models.constants import LEADERBOARD_TOP_N
from simulation.career import CareerSave
from simulation.scoring import merge_leaderboard, refresh_entry_totals

logger = logging.getLogger(__name__)


class SqliteCareerRepository:
    """CareerRepository backed by one row of the careers table.
    Pass ``conn`` to share a connection (tests, the web app); otherwise each call opens its own."""

    def __init__(self, slot: str = "default", conn: sqlite3.Connection | None = None) -> None:
        self.slot = slot
        self.conn = conn

    def _connect(self) -> tuple[sqlite3.Connection, bool]:
        if self.conn is not None:
            return self.conn, False
        conn = get_connection()
        init_db(conn)
        return conn, True

    def load(self) -> CareerSave | None:
        conn, close = self._connect()
        try:
            row = conn.execute("SELECT payload FROM careers WHERE slot = ?", (self.slot,)).fetchone()
            if row is None:
                return None
            return loads(row["payload"])
        finally:
            if close:
                conn.close()

    def save(self, save: CareerSave) -> None:
        conn, close = self._connect()
        try:
            conn.execute(
                """
                INSERT INTO careers (slot, player_name, season, payload, retired, updated_at)
                VALUES (?, ?, ?, ?, ?, datetime('now'))
                ON CONFLICT(slot) DO UPDATE SET
                    player_name = excluded.player_name,
                    season = excluded.season,
                    payload = excluded.payload,
                    retired = excluded.retired,
                    updated_at = excluded.updated_at
                """,
                (self.slot, save.state.name, save.state.current_season, dumps(save), int(save.state.retired)),
            )
            conn.commit()
            logger.debug("saved slot %s (%s, season %d)", self.slot, save.state.name, save.state.current_season)
        finally:
            if close:
                conn.close()

    def delete(self) -> None:
        conn, close = self._connect()
        try:
            conn.execute("DELETE FROM careers WHERE slot = ?", (self.slot,))
            conn.commit()
        finally:
            if close:
                conn.close()


def list_careers(conn: sqlite3.Connection | None = None) -> list[dict[str, Any]]:
    """Slot summaries, most recently updated first."""
    close = False
    if conn is None:
        conn = get_connection()
        init_db(conn)
        close = True
    try:
        rows = conn.execute(
            "SELECT slot, player_name, season, retired, updated_at FROM careers ORDER BY updated_at DESC, slot"
        ).fetchall()
        return [
            {
                "slot": r["slot"],
                "player_name": r["player_name"],
                "season": r["season"],
                "retired": bool(r["retired"]),
                "updated_at": r["updated_at"],
            }
            for r in rows
        ]
    finally:
        if close:
            conn.close()


# ---------------------------------------------------------------------------
# Leaderboard
# ---------------------------------------------------------------------------

def load_leaderboard(conn: sqlite3.Connection | None = None) -> list[LeaderboardEntry]:
    """All stored entries, best score first."""
    close = False
    if conn is None:
        conn = get_connection()
        init_db(conn)
        close = True
    try:
        rows = conn.execute("SELECT payload FROM high_scores ORDER BY score DESC, name").fetchall()
        return [LeaderboardEntry.from_dict(json.loads(r["payload"])) for r in rows]
    finally:
        if close:
            conn.close()


def store_leaderboard(entries: Sequence[LeaderboardEntry], conn: sqlite3.Connection | None = None) -> None:
    """Replace the stored leaderboard with ``entries``."""
    close = False
    if conn is None:
        conn = get_connection()
        init_db(conn)
        close = True
    try:
        conn.execute("DELETE FROM high_scores")
        conn.executemany(
            "INSERT INTO high_scores (name, score, payload) VALUES (?, ?, ?)",
            [(e.name, e.score, json.dumps(e.to_dict())) for e in entries],
        )
        conn.commit()
    finally:
        if close:
            conn.close()


def submit_score(
    entry: LeaderboardEntry,
    conn: sqlite3.Connection | None = None,
    top_n: int = LEADERBOARD_TOP_N,
) -> list[LeaderboardEntry]:
    """Merge a retired career into the stored leaderboard and return the new board."""
    board = merge_leaderboard(load_leaderboard(conn), entry, top_n)
    store_leaderboard(board, conn)
    logger.info("leaderboard updated with %s (score %d); %d entries", entry.name, entry.score, len(board))
    return board


def backfill_leaderboard(
    player_name: str,
    history: Sequence[SeasonLog],
    conn: sqlite3.Connection | None = None,
) -> bool:
    """Recompute a stored entry's matches/goals/assists/clean sheets from its career history.
    Returns False when the player has no entry."""
    board = load_leaderboard(conn)
    updated = False
    for i, entry in enumerate(board):
        if entry.name == player_name:
            board[i] = refresh_entry_totals(entry, history)
            updated = True
    if updated:
        store_leaderboard(board, conn)
    return updated
