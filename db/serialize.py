"""
Flat, JSON-compatible form of a career save.
Dataclasses become dicts and tuples become lists; save_from_dict is the exact inverse of save_to_dict.
"""
from __future__ import annotations

import json
from typing import Any

from models import PlayerState, SeasonLog, Team
from models.errors import PersistenceError
from simulation.career import CareerSave

SAVE_FORMAT_VERSION = 1


def save_to_dict(save: CareerSave) -> dict[str, Any]:
    return {
        "version": SAVE_FORMAT_VERSION,
        "state": save.state.to_dict(),
        "history": [log.to_dict() for log in save.history],
        "world_teams": [team.to_dict() for team in save.world_teams],
        "tactic": save.tactic,
    }


def save_from_dict(data: dict[str, Any]) -> CareerSave:
    """Rebuild a save. Raises PersistenceError if the payload is not a save this version can read."""
    version = data.get("version")
    if version != SAVE_FORMAT_VERSION:
        raise PersistenceError(f"unsupported save format version {version!r}")
    try:
        return CareerSave(
            state=PlayerState.from_dict(data["state"]),
            history=[SeasonLog.from_dict(d) for d in data.get("history", [])],
            world_teams=[Team.from_dict(d) for d in data.get("world_teams", [])],
            tactic=data.get("tactic", "Balanced"),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise PersistenceError(f"corrupt save: {exc}") from exc


def dumps(save: CareerSave) -> str:
    return json.dumps(save_to_dict(save), separators=(",", ":"))


def loads(payload: str) -> CareerSave:
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as exc:
        raise PersistenceError(f"save payload is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise PersistenceError("save payload must be a JSON object")
    return save_from_dict(data)
