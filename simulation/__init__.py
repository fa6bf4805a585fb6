"""
Simulation engines for the football career simulator.
Training, season simulation, transfer offers, scoring, and the season-cycle orchestration.
"""
from .training import (
    TrainingContext,
    TrainingOutcome,
    apply_training,
    run_training,
    plan_sessions,
    cost_of,
    effectiveness_of,
    execute,
    apply,
    max_slots,
    decide_auto_training,
)
from .season import SeasonOutcome, simulate_season
from .transfers import generate_offers, accept_offer, stay_at_club, renew_contract
from .scoring import score_career, career_tier, real_totals, build_leaderboard_entry, merge_leaderboard
from .career import (
    CareerRepository,
    CareerSave,
    CycleResult,
    start_career,
    next_season,
    check_retirement,
)
from .randomness import seed_rng

__all__ = [
    "TrainingContext",
    "TrainingOutcome",
    "apply_training",
    "run_training",
    "plan_sessions",
    "cost_of",
    "effectiveness_of",
    "execute",
    "apply",
    "max_slots",
    "decide_auto_training",
    "SeasonOutcome",
    "simulate_season",
    "generate_offers",
    "accept_offer",
    "stay_at_club",
    "renew_contract",
    "score_career",
    "career_tier",
    "real_totals",
    "build_leaderboard_entry",
    "merge_leaderboard",
    "CareerRepository",
    "CareerSave",
    "CycleResult",
    "start_career",
    "next_season",
    "check_retirement",
    "seed_rng",
]
