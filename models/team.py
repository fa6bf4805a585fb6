"""
Team DTO for the football career simulator.
Teams have a country, league tier (1 = top flight), reputation, and training facilities.
"""
from dataclasses import dataclass
from typing import Dict, Any, Iterable, Optional

from .constants import INFRASTRUCTURE_BY_LEAGUE_TIER, LEAGUE_TIERS, REPUTATION_STARS


@dataclass
class Team:
    """A club (or youth side) in the world registry."""

    name: str = ""
    country: str = ""
    confederation: str = "UEFA"
    league_tier: int = 1
    reputation: int = 50  # 0-100
    is_youth: bool = False
    parent_club: str | None = None  # youth side -> senior club name
    squad_strength: int = 60  # average overall of the first team
    training_facilities: int = 0  # 1-5; 0 = derive from league tier

    def __post_init__(self) -> None:
        if self.league_tier not in LEAGUE_TIERS:
            raise ValueError(f"league_tier must be one of {LEAGUE_TIERS}, got {self.league_tier}")
        if not 0 <= self.reputation <= 100:
            raise ValueError(f"reputation must be between 0 and 100, got {self.reputation}")
        if self.training_facilities == 0:
            self.training_facilities = INFRASTRUCTURE_BY_LEAGUE_TIER[self.league_tier]
        if not 1 <= self.training_facilities <= 5:
            raise ValueError(f"training_facilities must be between 1 and 5, got {self.training_facilities}")

    @property
    def stars(self) -> float:
        for threshold, stars in REPUTATION_STARS:
            if self.reputation >= threshold:
                return stars
        return 0.5

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "name": self.name,
            "country": self.country,
            "confederation": self.confederation,
            "league_tier": self.league_tier,
            "reputation": self.reputation,
            "is_youth": self.is_youth,
            "squad_strength": self.squad_strength,
            "training_facilities": self.training_facilities,
        }
        if self.parent_club is not None:
            d["parent_club"] = self.parent_club
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Team":
        return cls(
            name=data.get("name", ""),
            country=data.get("country", ""),
            confederation=data.get("confederation", "UEFA"),
            league_tier=data.get("league_tier", 1),
            reputation=data.get("reputation", 50),
            is_youth=data.get("is_youth", False),
            parent_club=data.get("parent_club"),
            squad_strength=data.get("squad_strength", 60),
            training_facilities=data.get("training_facilities", 0),
        )


def find_team(world_teams: Iterable[Team], name: str) -> Optional[Team]:
    """Return the team with this name, or None if it is not in the registry."""
    for team in world_teams:
        if team.name == name:
            return team
    return None
