"""
Player state DTO for the football career simulator.
All skill attributes 1-99; overall is computed from them for the player's position.
This is the aggregate every engine reads and writes: attributes, finances, contract,
training configuration, transfer state, and accumulated honours.
"""
from dataclasses import dataclass, field
from typing import Dict, Any

from .constants import (
    AGENT_TIERS,
    ALL_ATTRIBUTES,
    ATTRIBUTE_MIN,
    ATTRIBUTE_MAX,
    CAREER_ENDING_INJURY,
    CAREER_MODES,
    EVENT_FLAGS,
    INTENSITY_LEVELS,
    MORALE_LEVELS,
    PERSONALITIES,
    POSITIONS,
    SEASON_FOCUSES,
    SQUAD_STATUSES,
    TRAINER_TIERS,
)
from .honours import Trophies, Awards
from .offer import Offer
from .ratings import compute_overall_at_position
from .team import Team

# Seasons a flag stays active after the season it was issued in
FLAG_LIFETIME_SEASONS = 1


@dataclass(frozen=True)
class EventFlag:
    flag: str
    issued_season: int

    def to_dict(self) -> Dict[str, Any]:
        return {"flag": self.flag, "issued_season": self.issued_season}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EventFlag":
        return cls(flag=data["flag"], issued_season=data["issued_season"])


def is_active(flag: EventFlag, current_season: int) -> bool:
    """True during the season of issue and the one after it."""
    age = current_season - flag.issued_season
    return 0 <= age <= FLAG_LIFETIME_SEASONS


@dataclass
class PlayerState:
    """The simulated athlete. Mutated by the training engine, then the season simulator."""

    name: str = ""
    age: int = 16
    position: str = "ST"
    nationality: str = ""
    # Outfield attributes
    pace: int = 50
    shooting: int = 50
    passing: int = 50
    dribbling: int = 50
    defending: int = 50
    physical: int = 50
    # Goalkeeping attributes (low for outfield players)
    diving: int = 10
    handling: int = 10
    reflexes: int = 10
    positioning: int = 10
    overall: int = 0  # cached, recomputed from attributes
    potential: int = 70
    peak_overall: int = 0
    # Career totals (non-decreasing)
    total_matches: int = 0
    total_goals: int = 0
    total_assists: int = 0
    total_clean_sheets: int = 0
    # Status
    morale: str = "Normal"
    team_chemistry: int = 50  # 0-100
    club_approval: int = 50  # 0-100
    contract_length: int = 3  # years remaining
    wage: int = 1000  # weekly
    bank_balance: int = 0
    reputation: int = 10  # 0-100
    market_value: float = 0.0  # millions
    squad_status: str = "Prospect"
    promised_squad_status: str | None = None
    personality: str = "Professional"
    traits: list[str] = field(default_factory=list)
    agent: str = "Rookie"
    years_at_club: int = 0
    seasons_with_low_playing_time: int = 0
    injury_type: str | None = None
    injury_seasons: int = 0  # seasons still affected
    retirement_age: int = 35
    # Club
    team: Team = field(default_factory=Team)
    parent_team: Team | None = None  # set while on loan
    loan_seasons_remaining: int = 0
    pending_loan_return: bool = False
    has_made_senior_debut: bool = False
    # Training configuration
    training_focuses: list[str] = field(default_factory=list)
    training_intensity: str = "medium"
    trainer_tier: str | None = None
    career_mode: str = "tactical"
    season_focus: str | None = None  # scoring, playmaking, consistency, titles
    # Transient season-stamped signals
    event_flags: list[EventFlag] = field(default_factory=list)
    # Honours
    trophies: Trophies = field(default_factory=Trophies)
    awards: Awards = field(default_factory=Awards)
    # Transfer state
    transfer_offers: list[Offer] = field(default_factory=list)
    is_forced_to_move: bool = False
    agitating_for_transfer: bool = False
    # Lifecycle
    current_season: int = 1  # season about to be played; 1 = first professional season
    retired: bool = False

    def __post_init__(self) -> None:
        if self.position not in POSITIONS:
            raise ValueError(f"position must be one of {POSITIONS}, got {self.position!r}")
        if self.morale not in MORALE_LEVELS:
            raise ValueError(f"morale must be one of {MORALE_LEVELS}, got {self.morale!r}")
        if self.personality not in PERSONALITIES:
            raise ValueError(f"personality must be one of {PERSONALITIES}, got {self.personality!r}")
        if self.career_mode not in CAREER_MODES:
            raise ValueError(f"career_mode must be one of {CAREER_MODES}, got {self.career_mode!r}")
        if self.squad_status not in SQUAD_STATUSES:
            raise ValueError(f"squad_status must be one of {SQUAD_STATUSES}, got {self.squad_status!r}")
        if self.promised_squad_status is not None and self.promised_squad_status not in SQUAD_STATUSES:
            raise ValueError(f"unknown promised squad status {self.promised_squad_status!r}")
        if self.agent not in AGENT_TIERS:
            raise ValueError(f"agent must be one of {AGENT_TIERS}, got {self.agent!r}")
        if self.season_focus is not None and self.season_focus not in SEASON_FOCUSES:
            raise ValueError(f"season_focus must be one of {SEASON_FOCUSES}, got {self.season_focus!r}")
        if self.training_intensity not in INTENSITY_LEVELS:
            raise ValueError(f"training_intensity must be one of {INTENSITY_LEVELS}, got {self.training_intensity!r}")
        if self.trainer_tier is not None and self.trainer_tier not in TRAINER_TIERS:
            raise ValueError(f"unknown trainer tier {self.trainer_tier!r}")
        for key in ALL_ATTRIBUTES:
            val = getattr(self, key)
            if not ATTRIBUTE_MIN <= val <= ATTRIBUTE_MAX:
                raise ValueError(f"{key} must be between {ATTRIBUTE_MIN} and {ATTRIBUTE_MAX}, got {val}")
        for key in ("team_chemistry", "club_approval", "reputation"):
            val = getattr(self, key)
            if not 0 <= val <= 100:
                raise ValueError(f"{key} must be between 0 and 100, got {val}")
        if self.bank_balance < 0:
            raise ValueError(f"bank_balance must be >= 0, got {self.bank_balance}")
        if self.contract_length < 0:
            raise ValueError(f"contract_length must be >= 0, got {self.contract_length}")
        self.recompute_overall()

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "retired" and not value and getattr(self, "retired", False):
            raise ValueError("a retired player cannot come out of retirement")
        super().__setattr__(name, value)

    # ------------------------------------------------------------------
    # Attributes
    # ------------------------------------------------------------------

    @property
    def is_goalkeeper(self) -> bool:
        return self.position == "GK"

    def attributes(self) -> Dict[str, int]:
        return {key: getattr(self, key) for key in ALL_ATTRIBUTES}

    def set_attribute(self, key: str, value: int) -> int:
        """Set one attribute clamped to 1-99; returns the stored value."""
        if key not in ALL_ATTRIBUTES:
            raise KeyError(f"unknown attribute {key!r}")
        clamped = max(ATTRIBUTE_MIN, min(ATTRIBUTE_MAX, int(value)))
        setattr(self, key, clamped)
        return clamped

    def recompute_overall(self) -> int:
        self.overall = compute_overall_at_position(self.attributes(), self.position)
        self.peak_overall = max(self.peak_overall, self.overall)
        return self.overall

    # ------------------------------------------------------------------
    # Morale / status helpers
    # ------------------------------------------------------------------

    def update_morale(self, direction: str, steps: int = 1) -> str:
        """Move morale up or down ``steps`` levels along MORALE_LEVELS (clamped)."""
        idx = MORALE_LEVELS.index(self.morale)
        if direction == "up":
            idx = min(len(MORALE_LEVELS) - 1, idx + steps)
        elif direction == "down":
            idx = max(0, idx - steps)
        else:
            raise ValueError(f"direction must be 'up' or 'down', got {direction!r}")
        self.morale = MORALE_LEVELS[idx]
        return self.morale

    def adjust_chemistry(self, delta: int) -> None:
        self.team_chemistry = max(0, min(100, self.team_chemistry + delta))

    def adjust_approval(self, delta: int) -> None:
        self.club_approval = max(0, min(100, self.club_approval + delta))

    def has_trait(self, trait: str) -> bool:
        return trait in self.traits

    @property
    def has_career_ending_injury(self) -> bool:
        return self.injury_type == CAREER_ENDING_INJURY

    # ------------------------------------------------------------------
    # Event flags
    # ------------------------------------------------------------------

    def raise_flag(self, flag: str, season: int) -> None:
        if flag not in EVENT_FLAGS:
            raise ValueError(f"unknown event flag {flag!r}")
        self.event_flags = [f for f in self.event_flags if f.flag != flag]
        self.event_flags.append(EventFlag(flag=flag, issued_season=season))

    def has_flag(self, flag: str, current_season: int | None = None) -> bool:
        season = self.current_season if current_season is None else current_season
        return any(f.flag == flag and is_active(f, season) for f in self.event_flags)

    def active_flags(self, current_season: int) -> list[EventFlag]:
        return [f for f in self.event_flags if is_active(f, current_season)]

    def retire(self) -> None:
        self.retired = True

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "name": self.name,
            "age": self.age,
            "position": self.position,
            "nationality": self.nationality,
            "overall": self.overall,
            "potential": self.potential,
            "peak_overall": self.peak_overall,
            "total_matches": self.total_matches,
            "total_goals": self.total_goals,
            "total_assists": self.total_assists,
            "total_clean_sheets": self.total_clean_sheets,
            "morale": self.morale,
            "team_chemistry": self.team_chemistry,
            "club_approval": self.club_approval,
            "contract_length": self.contract_length,
            "wage": self.wage,
            "bank_balance": self.bank_balance,
            "reputation": self.reputation,
            "market_value": self.market_value,
            "squad_status": self.squad_status,
            "promised_squad_status": self.promised_squad_status,
            "personality": self.personality,
            "traits": list(self.traits),
            "agent": self.agent,
            "years_at_club": self.years_at_club,
            "seasons_with_low_playing_time": self.seasons_with_low_playing_time,
            "injury_type": self.injury_type,
            "injury_seasons": self.injury_seasons,
            "retirement_age": self.retirement_age,
            "team": self.team.to_dict(),
            "parent_team": self.parent_team.to_dict() if self.parent_team is not None else None,
            "loan_seasons_remaining": self.loan_seasons_remaining,
            "pending_loan_return": self.pending_loan_return,
            "has_made_senior_debut": self.has_made_senior_debut,
            "training_focuses": list(self.training_focuses),
            "training_intensity": self.training_intensity,
            "trainer_tier": self.trainer_tier,
            "career_mode": self.career_mode,
            "season_focus": self.season_focus,
            "event_flags": [f.to_dict() for f in self.event_flags],
            "trophies": self.trophies.to_dict(),
            "awards": self.awards.to_dict(),
            "transfer_offers": [o.to_dict() for o in self.transfer_offers],
            "is_forced_to_move": self.is_forced_to_move,
            "agitating_for_transfer": self.agitating_for_transfer,
            "current_season": self.current_season,
            "retired": self.retired,
        }
        d.update(self.attributes())
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlayerState":
        parent = data.get("parent_team")
        attrs = {key: data[key] for key in ALL_ATTRIBUTES if key in data}
        return cls(
            name=data.get("name", ""),
            age=data.get("age", 16),
            position=data.get("position", "ST"),
            nationality=data.get("nationality", ""),
            potential=data.get("potential", 70),
            peak_overall=data.get("peak_overall", 0),
            total_matches=data.get("total_matches", 0),
            total_goals=data.get("total_goals", 0),
            total_assists=data.get("total_assists", 0),
            total_clean_sheets=data.get("total_clean_sheets", 0),
            morale=data.get("morale", "Normal"),
            team_chemistry=data.get("team_chemistry", 50),
            club_approval=data.get("club_approval", 50),
            contract_length=data.get("contract_length", 3),
            wage=data.get("wage", 1000),
            bank_balance=data.get("bank_balance", 0),
            reputation=data.get("reputation", 10),
            market_value=data.get("market_value", 0.0),
            squad_status=data.get("squad_status", "Prospect"),
            promised_squad_status=data.get("promised_squad_status"),
            personality=data.get("personality", "Professional"),
            traits=list(data.get("traits", [])),
            agent=data.get("agent", "Rookie"),
            years_at_club=data.get("years_at_club", 0),
            seasons_with_low_playing_time=data.get("seasons_with_low_playing_time", 0),
            injury_type=data.get("injury_type"),
            injury_seasons=data.get("injury_seasons", 0),
            retirement_age=data.get("retirement_age", 35),
            team=Team.from_dict(data.get("team") or {}),
            parent_team=Team.from_dict(parent) if parent else None,
            loan_seasons_remaining=data.get("loan_seasons_remaining", 0),
            pending_loan_return=data.get("pending_loan_return", False),
            has_made_senior_debut=data.get("has_made_senior_debut", False),
            training_focuses=list(data.get("training_focuses", [])),
            training_intensity=data.get("training_intensity", "medium"),
            trainer_tier=data.get("trainer_tier"),
            career_mode=data.get("career_mode", "tactical"),
            season_focus=data.get("season_focus"),
            event_flags=[EventFlag.from_dict(f) for f in data.get("event_flags", [])],
            trophies=Trophies.from_dict(data.get("trophies") or {}),
            awards=Awards.from_dict(data.get("awards") or {}),
            transfer_offers=[Offer.from_dict(o) for o in data.get("transfer_offers", [])],
            is_forced_to_move=data.get("is_forced_to_move", False),
            agitating_for_transfer=data.get("agitating_for_transfer", False),
            current_season=data.get("current_season", 1),
            retired=data.get("retired", False),
            **attrs,
        )
