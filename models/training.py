"""
Training DTOs: catalogue entries, personal trainers, planned sessions, and results.
Catalogue data lives in models.constants (TRAINING_TYPES, TRAINER_TIERS); these wrap it.
"""
from dataclasses import dataclass, field
from typing import Dict, Any

from .constants import TRAINING_TYPES, TRAINER_TIERS, INTENSITY_LEVELS

RESULT_BANDS = ("excellent", "good", "neutral", "poor")


@dataclass(frozen=True)
class TrainingType:
    id: str
    category: str
    primary: tuple[str, ...]
    secondary: tuple[str, ...]
    penalty: tuple[str, ...]
    cost_multiplier: float
    duration_weeks: int
    positions: tuple[str, ...]

    def is_eligible(self, position: str) -> bool:
        return position in self.positions


def get_training_type(focus: str) -> TrainingType | None:
    row = TRAINING_TYPES.get(focus)
    if row is None:
        return None
    category, primary, secondary, penalty, cost_mult, duration, positions = row
    return TrainingType(
        id=focus,
        category=category,
        primary=primary,
        secondary=secondary,
        penalty=penalty,
        cost_multiplier=cost_mult,
        duration_weeks=duration,
        positions=positions,
    )


@dataclass(frozen=True)
class PersonalTrainer:
    tier: str
    cost_per_week: int
    effectiveness_bonus: float
    specialties: tuple[str, ...]
    injury_reduction: float
    extra_slot: int


def get_trainer(tier: str | None) -> PersonalTrainer | None:
    if tier is None:
        return None
    row = TRAINER_TIERS.get(tier)
    if row is None:
        return None
    return PersonalTrainer(
        tier=tier,
        cost_per_week=row["cost_per_week"],
        effectiveness_bonus=row["effectiveness_bonus"],
        specialties=tuple(row["specialties"]),
        injury_reduction=row["injury_reduction"],
        extra_slot=row["extra_slot"],
    )


@dataclass(frozen=True)
class TrainingSession:
    """One selected focus for the coming season; session_index is its position among
    the concurrently selected sessions (0 = first, full weight)."""

    focus: str
    intensity: str = "medium"
    trainer: PersonalTrainer | None = None
    duration_weeks: int = 4
    started_season: int = 1
    session_index: int = 0

    def __post_init__(self) -> None:
        if self.intensity not in INTENSITY_LEVELS:
            raise ValueError(f"intensity must be one of {INTENSITY_LEVELS}, got {self.intensity!r}")
        if self.session_index < 0:
            raise ValueError(f"session_index must be >= 0, got {self.session_index}")


@dataclass(frozen=True)
class TrainingResult:
    focus: str
    deltas: Dict[str, int] = field(default_factory=dict)
    cost_total: int = 0
    classification: str = "neutral"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "focus": self.focus,
            "deltas": dict(self.deltas),
            "cost_total": self.cost_total,
            "classification": self.classification,
        }
