"""
Trophy and award records.
One int counter per competition / award key; weighted_sum is the only place that totals them.
"""
from dataclasses import dataclass, fields
from typing import Dict, Any, Mapping


@dataclass
class Trophies:
    league: int = 0
    cup: int = 0
    super_cup: int = 0
    champions_league: int = 0
    europa_league: int = 0
    conference_league: int = 0
    libertadores: int = 0
    copa_sudamericana: int = 0
    club_world_cup: int = 0
    world_cup: int = 0
    continental_cup: int = 0
    nations_league: int = 0
    youth_league: int = 0
    youth_cup: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Trophies":
        return cls(**{f.name: int(data.get(f.name, 0)) for f in fields(cls)})

    def add(self, key: str, count: int = 1) -> None:
        if not hasattr(self, key):
            raise KeyError(f"unknown trophy {key!r}")
        setattr(self, key, getattr(self, key) + count)


@dataclass
class Awards:
    world_player_award: int = 0
    continental_player_award: int = 0
    league_player_of_year: int = 0
    top_scorer_award: int = 0
    top_assister_award: int = 0
    best_goalkeeper_award: int = 0
    young_player_award: int = 0
    team_of_the_year: int = 0
    goal_of_the_year: int = 0
    world_cup_best_player: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Awards":
        return cls(**{f.name: int(data.get(f.name, 0)) for f in fields(cls)})

    def add(self, key: str, count: int = 1) -> None:
        if not hasattr(self, key):
            raise KeyError(f"unknown award {key!r}")
        setattr(self, key, getattr(self, key) + count)


def weighted_sum(record: Trophies | Awards, weight_table: Mapping[str, float] | None = None) -> float:
    """Sum of counters times weight. Keys missing from the table weigh 0.
    With no table every counter weighs 1 (plain count)."""
    total = 0
    for f in fields(record):
        count = getattr(record, f.name)
        if weight_table is None:
            total += count
        else:
            total += count * weight_table.get(f.name, 0)
    return total
