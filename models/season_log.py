"""
Season log DTOs for the career history.
History is an ordered, append-only list of SeasonLog entries; index 0 is the
pre-career baseline ("joined academy"). Entries are frozen: helpers return new
lists and new entries instead of editing in place.
"""
from dataclasses import dataclass, field, replace
from typing import Dict, Any, Sequence

from .constants import COMPETITION_TYPES
from .team import Team


@dataclass(frozen=True)
class CareerEvent:
    type: str
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "description": self.description}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CareerEvent":
        return cls(type=data.get("type", ""), description=data.get("description", ""))


@dataclass(frozen=True)
class CompetitionRecord:
    """Player's numbers in one competition (type: League, Cup, Continental, International)."""

    competition: str
    type: str
    matches: int = 0
    goals: int = 0
    assists: int = 0
    clean_sheets: int = 0
    rating: float = 0.0

    def __post_init__(self) -> None:
        if self.type not in COMPETITION_TYPES:
            raise ValueError(f"competition type must be one of {COMPETITION_TYPES}, got {self.type!r}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "competition": self.competition,
            "type": self.type,
            "matches": self.matches,
            "goals": self.goals,
            "assists": self.assists,
            "clean_sheets": self.clean_sheets,
            "rating": self.rating,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CompetitionRecord":
        return cls(
            competition=data.get("competition", ""),
            type=data.get("type", ""),
            matches=data.get("matches", 0),
            goals=data.get("goals", 0),
            assists=data.get("assists", 0),
            clean_sheets=data.get("clean_sheets", 0),
            rating=data.get("rating", 0.0),
        )

    @property
    def is_friendly(self) -> bool:
        return self.type == "International" and self.competition.strip().lower() == "friendly"


@dataclass(frozen=True)
class SeasonStats:
    """Club totals for the season (international numbers live in the competition list)."""

    matches: int = 0
    goals: int = 0
    assists: int = 0
    clean_sheets: int = 0
    average_rating: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "matches": self.matches,
            "goals": self.goals,
            "assists": self.assists,
            "clean_sheets": self.clean_sheets,
            "average_rating": self.average_rating,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SeasonStats":
        return cls(
            matches=data.get("matches", 0),
            goals=data.get("goals", 0),
            assists=data.get("assists", 0),
            clean_sheets=data.get("clean_sheets", 0),
            average_rating=data.get("average_rating", 0.0),
        )


@dataclass(frozen=True)
class SeasonLog:
    season: int
    age: int
    team: Team
    stats: SeasonStats = field(default_factory=SeasonStats)
    competitions: tuple[CompetitionRecord, ...] = ()
    events: tuple[CareerEvent, ...] = ()
    trophies: tuple[str, ...] = ()
    awards: tuple[str, ...] = ()
    overall: int = 0
    market_value: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "season": self.season,
            "age": self.age,
            "team": self.team.to_dict(),
            "stats": self.stats.to_dict(),
            "competitions": [c.to_dict() for c in self.competitions],
            "events": [e.to_dict() for e in self.events],
            "trophies": list(self.trophies),
            "awards": list(self.awards),
            "overall": self.overall,
            "market_value": self.market_value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SeasonLog":
        return cls(
            season=data.get("season", 0),
            age=data.get("age", 0),
            team=Team.from_dict(data.get("team") or {}),
            stats=SeasonStats.from_dict(data.get("stats") or {}),
            competitions=tuple(CompetitionRecord.from_dict(c) for c in data.get("competitions", [])),
            events=tuple(CareerEvent.from_dict(e) for e in data.get("events", [])),
            trophies=tuple(data.get("trophies", [])),
            awards=tuple(data.get("awards", [])),
            overall=data.get("overall", 0),
            market_value=data.get("market_value", 0.0),
        )


def append_event(history: Sequence[SeasonLog], season_index: int, event: CareerEvent) -> list[SeasonLog]:
    """Return a new history with ``event`` added to the entry at ``season_index``.
    Negative indexes count from the end (-1 = current season). The input is not modified."""
    if not history:
        raise IndexError("cannot append an event to an empty history")
    new_history = list(history)
    entry = new_history[season_index]
    new_history[season_index] = replace(entry, events=entry.events + (event,))
    return new_history


def append_season(history: Sequence[SeasonLog], log: SeasonLog) -> list[SeasonLog]:
    return list(history) + [log]


def real_contribution(log: SeasonLog) -> Dict[str, int]:
    """What a season adds to career totals: club numbers unless the team is a youth side,
    plus international competition numbers except friendlies."""
    out = {"matches": 0, "goals": 0, "assists": 0, "clean_sheets": 0}
    if not log.team.is_youth:
        out["matches"] += log.stats.matches
        out["goals"] += log.stats.goals
        out["assists"] += log.stats.assists
        out["clean_sheets"] += log.stats.clean_sheets
    for comp in log.competitions:
        if comp.type != "International" or comp.is_friendly:
            continue
        out["matches"] += comp.matches
        out["goals"] += comp.goals
        out["assists"] += comp.assists
        out["clean_sheets"] += comp.clean_sheets
    return out
