"""
SQLite schema for the career simulator.
One DB file holds every save slot plus the shared leaderboard.
"""
import sqlite3
from pathlib import Path

# Save path (relative to project root)
DB_DIR = "data"
DB_FILENAME = "careers.db"


def get_db_path() -> Path:
    """Return absolute path to the save DB file."""
    root = Path(__file__).resolve().parent.parent
    return root / DB_DIR / DB_FILENAME


def _ensure_db_dir(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def get_connection(path: Path | str | None = None) -> sqlite3.Connection:
    """Open a connection to the save DB. Creates dir and file if needed.
    timeout: seconds to wait for lock (avoids 'database is locked' under concurrent requests).
    """
    db_path = Path(path) if path is not None else get_db_path()
    _ensure_db_dir(db_path)
    conn = sqlite3.connect(str(db_path), timeout=15.0)
    conn.row_factory = sqlite3.Row
    return conn


def init_db(conn: sqlite3.Connection | None = None) -> None:
    """Create all tables if they do not exist."""
    close = False
    if conn is None:
        conn = get_connection()
        close = True
    try:
        conn.executescript("""
            CREATE TABLE IF NOT EXISTS careers (
                slot TEXT PRIMARY KEY,
                player_name TEXT NOT NULL,
                season INTEGER NOT NULL,
                payload TEXT NOT NULL,
                retired INTEGER NOT NULL DEFAULT 0,
                updated_at TEXT DEFAULT (datetime('now'))
            );

            CREATE TABLE IF NOT EXISTS high_scores (
                name TEXT PRIMARY KEY,
                score INTEGER NOT NULL,
                payload TEXT NOT NULL
            );
        """)
        conn.commit()
    finally:
        if close:
            conn.close()

