"""
Data models for the football career simulator.
"""
from .errors import (
    CareerError,
    ValidationError,
    TrainingError,
    InsufficientFundsError,
    SlotLimitError,
    IneligibleTrainingError,
    NegotiationRequired,
    RetiredPlayerError,
    SimulationError,
    PersistenceError,
)
from .honours import Trophies, Awards, weighted_sum
from .leaderboard import LeaderboardEntry
from .offer import Offer
from .player import PlayerState, EventFlag, is_active
from .season_log import (
    CareerEvent,
    CompetitionRecord,
    SeasonStats,
    SeasonLog,
    append_event,
    append_season,
    real_contribution,
)
from .team import Team, find_team
from .training import TrainingType, PersonalTrainer, TrainingSession, TrainingResult

__all__ = [
    "CareerError",
    "ValidationError",
    "TrainingError",
    "InsufficientFundsError",
    "SlotLimitError",
    "IneligibleTrainingError",
    "NegotiationRequired",
    "RetiredPlayerError",
    "SimulationError",
    "PersistenceError",
    "Trophies",
    "Awards",
    "weighted_sum",
    "LeaderboardEntry",
    "Offer",
    "PlayerState",
    "EventFlag",
    "is_active",
    "CareerEvent",
    "CompetitionRecord",
    "SeasonStats",
    "SeasonLog",
    "append_event",
    "append_season",
    "real_contribution",
    "Team",
    "find_team",
    "TrainingType",
    "PersonalTrainer",
    "TrainingSession",
    "TrainingResult",
]
