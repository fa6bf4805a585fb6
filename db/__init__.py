"""
Persistence for the football career simulator (SQLite).
"""
from .schema import get_connection, get_db_path, init_db
from .serialize import save_from_dict, save_to_dict
from .operations import (
    SqliteCareerRepository,
    list_careers,
    load_leaderboard,
    store_leaderboard,
    submit_score,
    backfill_leaderboard,
)

__all__ = [
    "get_connection",
    "get_db_path",
    "init_db",
    "save_from_dict",
    "save_to_dict",
    "SqliteCareerRepository",
    "list_careers",
    "load_leaderboard",
    "store_leaderboard",
    "submit_score",
    "backfill_leaderboard",
]
