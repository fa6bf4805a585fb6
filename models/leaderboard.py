"""
Leaderboard entry DTO: one retired career's headline numbers.
"""
from dataclasses import dataclass
from typing import Dict, Any


@dataclass
class LeaderboardEntry:
    name: str
    score: int
    final_overall: int = 0
    peak_overall: int = 0
    tier: str = ""
    trophies: int = 0
    awards: int = 0
    matches: int = 0
    goals: int = 0
    assists: int = 0
    clean_sheets: int = 0
    position: str = ""
    nationality: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "score": self.score,
            "final_overall": self.final_overall,
            "peak_overall": self.peak_overall,
            "tier": self.tier,
            "trophies": self.trophies,
            "awards": self.awards,
            "matches": self.matches,
            "goals": self.goals,
            "assists": self.assists,
            "clean_sheets": self.clean_sheets,
            "position": self.position,
            "nationality": self.nationality,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LeaderboardEntry":
        return cls(
            name=data.get("name", ""),
            score=data.get("score", 0),
            final_overall=data.get("final_overall", 0),
            peak_overall=data.get("peak_overall", 0),
            tier=data.get("tier", ""),
            trophies=data.get("trophies", 0),
            awards=data.get("awards", 0),
            matches=data.get("matches", 0),
            goals=data.get("goals", 0),
            assists=data.get("assists", 0),
            clean_sheets=data.get("clean_sheets", 0),
            position=data.get("position", ""),
            nationality=data.get("nationality", ""),
        )
