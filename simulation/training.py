"""
Training engine for the football career simulator.

Turns a set of selected training focuses into attribute deltas and a money cost:
  * cost is deterministic (weekly wage share x type x intensity + trainer fee);
    the first professional season is club-funded (cost 0).
  * effectiveness multiplies age, club infrastructure, personal trainer, agent,
    morale, personality, intensity, and a diminishing-returns factor indexed by
    the session's position among the concurrently selected sessions.
  * execution samples bounded variance from an injected RNG and classifies the
    outcome (excellent / good / neutral / poor) against the expected gain.
Selections are validated before anything is mutated; nothing is auto-trimmed.
"""
from __future__ import annotations

import copy
import logging
import math
import random
from dataclasses import dataclass, field
from typing import Any, Sequence

from models.constants import (
    AGE_FACTOR_FLOOR,
    AGE_FACTOR_TABLE,
    AGENT_TRAINING_BONUS,
    BASE_TRAINING_SLOTS,
    CLUB_TRAINING_ID,
    FLAG_HIGH_INTENSITY_TRAINING,
    INFRASTRUCTURE_BONUS_TABLE,
    INTENSITY_LEVELS,
    INTENSITY_MODIFIERS,
    MAX_TRAINING_SLOTS,
    MORALE_TRAINING_FACTOR,
    MULTI_SESSION_PENALTY,
    PERSONALITY_TRAINING_FACTOR,
    POSITION_OVERALL_WEIGHTS,
    TRAINER_TIER_ORDER,
    TRAINING_BASE_COST_MAX,
    TRAINING_BASE_COST_MIN,
    TRAINING_BASE_COST_WAGE_SHARE,
    TRAINING_CATEGORY_MULTIPLIERS,
    TRAINING_TYPES,
)
from models.errors import (
    IneligibleTrainingError,
    InsufficientFundsError,
    SlotLimitError,
    TrainingError,
)
from models.player import PlayerState
from models.training import (
    TrainingResult,
    TrainingSession,
    TrainingType,
    get_trainer,
    get_training_type,
)
from .randomness import clamp, gauss_clamped

logger = logging.getLogger(__name__)

# Trainer bonus is damped before it joins the other percentage bonuses
TRAINER_BONUS_WEIGHT = 0.7
TRAINER_SPECIALTY_BONUS = 1.08
EFFECTIVENESS_CAP = 1.8

# Per-attribute gain ranges before effectiveness
PRIMARY_GAIN_RANGE = (0.8, 1.8)
SECONDARY_GAIN_RANGE = (0.3, 1.0)

# Variance multiplier: gauss(1.0, 0.25) clamped
VARIANCE_SIGMA = 0.25
VARIANCE_BOUNDS = (0.1, 2.5)

# Penalty stats on hard sessions
PENALTY_INTENSITIES = ("high", "extreme")
PENALTY_CHANCE = 0.3
PENALTY_RANGE = (0.5, 1.5)

# actual / expected gain -> narrative band
RESULT_THRESHOLDS: tuple[tuple[float, str], ...] = (
    (1.25, "excellent"),
    (1.10, "good"),
    (1.00, "neutral"),
)

# Auto-training (dynamic career mode)
AUTO_TRAINING_MIN_BALANCE = 5000
AUTO_TRAINING_SPEND_SHARE = 0.8
AUTO_TRAINER_WEEKS_RESERVE = 8

INHERIT = "inherit"


@dataclass
class TrainingContext:
    """Caller-supplied training options. intensity None and trainer_tier INHERIT fall back to
    the player's configuration; trainer_tier None means no personal trainer."""

    intensity: str | None = None
    trainer_tier: str | None = INHERIT
    infrastructure_level: int | None = None


@dataclass
class TrainingOutcome:
    state: PlayerState
    results: list[TrainingResult] = field(default_factory=list)

    @property
    def cost_total(self) -> int:
        return sum(r.cost_total for r in self.results)


# ---------------------------------------------------------------------------
# Factors
# ---------------------------------------------------------------------------

def age_factor(age: int) -> float:
    for upper, factor in AGE_FACTOR_TABLE:
        if age <= upper:
            return factor
    return AGE_FACTOR_FLOOR


def infrastructure_bonus(level: float) -> float:
    for threshold, bonus in INFRASTRUCTURE_BONUS_TABLE:
        if level >= threshold:
            return bonus
    return 0.0


def infrastructure_level(state: PlayerState, context: TrainingContext | None = None) -> int:
    if context is not None and context.infrastructure_level is not None:
        return context.infrastructure_level
    return state.team.training_facilities


def max_slots(infrastructure: int, trainer_tier: str | None) -> int:
    """Concurrent training slots: 2-4 from facilities, +1 for an elite or world-class trainer, max 5."""
    level = int(clamp(infrastructure, 1, 5))
    base = BASE_TRAINING_SLOTS[level]
    trainer = get_trainer(trainer_tier)
    bonus = trainer.extra_slot if trainer is not None else 0
    return min(base + bonus, MAX_TRAINING_SLOTS)


def resolve_trainer_tier(state: PlayerState, context: TrainingContext | None) -> str | None:
    if context is None or context.trainer_tier == INHERIT:
        return state.trainer_tier
    return context.trainer_tier


def is_first_professional_season(state: PlayerState) -> bool:
    return state.current_season <= 1


def _session_penalty(session_index: int) -> float:
    if session_index < len(MULTI_SESSION_PENALTY):
        return MULTI_SESSION_PENALTY[session_index]
    return MULTI_SESSION_PENALTY[-1]


def _require_type(focus: str) -> TrainingType:
    ttype = get_training_type(focus)
    if ttype is None:
        raise TrainingError(f"unknown training type {focus!r}")
    return ttype


# ---------------------------------------------------------------------------
# Planning
# ---------------------------------------------------------------------------

def plan_sessions(
    state: PlayerState,
    selections: Sequence[str],
    context: TrainingContext | None = None,
) -> list[TrainingSession]:
    """Validate the selected focuses and turn them into ordered sessions.
    Raises TrainingError / IneligibleTrainingError / SlotLimitError; never truncates."""
    context = context or TrainingContext()
    intensity = context.intensity or state.training_intensity
    if intensity not in INTENSITY_LEVELS:
        raise TrainingError(f"unknown intensity {intensity!r}")
    trainer_tier = resolve_trainer_tier(state, context)
    trainer = get_trainer(trainer_tier)
    if trainer_tier is not None and trainer is None:
        raise TrainingError(f"unknown trainer tier {trainer_tier!r}")

    if len(set(selections)) != len(selections):
        raise TrainingError("each training focus can only be selected once")
    for focus in selections:
        ttype = _require_type(focus)
        if not ttype.is_eligible(state.position):
            raise IneligibleTrainingError(focus, state.position)

    limit = max_slots(infrastructure_level(state, context), trainer_tier)
    if len(selections) > limit:
        raise SlotLimitError(len(selections), limit)

    sessions: list[TrainingSession] = []
    for idx, focus in enumerate(selections):
        ttype = _require_type(focus)
        sessions.append(TrainingSession(
            focus=focus,
            intensity=intensity,
            trainer=trainer,
            duration_weeks=ttype.duration_weeks,
            started_season=state.current_season,
            session_index=idx,
        ))
    return sessions


# ---------------------------------------------------------------------------
# Cost / effectiveness
# ---------------------------------------------------------------------------

def cost_of(state: PlayerState, session: TrainingSession) -> int:
    """Money cost of one session. Deterministic; 0 in the first professional season."""
    if is_first_professional_season(state):
        return 0
    ttype = _require_type(session.focus)
    base = clamp(round(state.wage * TRAINING_BASE_COST_WAGE_SHARE), TRAINING_BASE_COST_MIN, TRAINING_BASE_COST_MAX)
    cost = base * ttype.cost_multiplier * INTENSITY_MODIFIERS[session.intensity]["cost"]
    if session.trainer is not None:
        cost += session.trainer.cost_per_week * session.duration_weeks
    return int(round(cost))


def base_effectiveness(state: PlayerState, session: TrainingSession, infrastructure: int | None = None) -> float:
    """Effectiveness before the multi-session penalty (capped)."""
    level = infrastructure if infrastructure is not None else state.team.training_facilities
    bonus = infrastructure_bonus(level)
    if session.trainer is not None:
        bonus += session.trainer.effectiveness_bonus * TRAINER_BONUS_WEIGHT
    bonus += AGENT_TRAINING_BONUS.get(state.agent, 0.0)

    factor = age_factor(state.age) * (1.0 + bonus)
    factor *= MORALE_TRAINING_FACTOR.get(state.morale, 1.0)
    factor *= PERSONALITY_TRAINING_FACTOR.get(state.personality, 1.0)
    factor *= INTENSITY_MODIFIERS[session.intensity]["effectiveness"]
    if session.trainer is not None and session.focus in session.trainer.specialties:
        factor *= TRAINER_SPECIALTY_BONUS
    return min(EFFECTIVENESS_CAP, factor)


def effectiveness_of(state: PlayerState, session: TrainingSession, infrastructure: int | None = None) -> float:
    """Effectiveness of a session including the diminishing-returns factor for its slot."""
    return base_effectiveness(state, session, infrastructure) * _session_penalty(session.session_index)


def _attribute_level_factor(current: int) -> float:
    if current >= 91:
        return 0.10
    if current >= 81:
        return 0.40
    if current >= 61:
        return 0.70
    return 1.0


def _round_gain(raw: float, rng: random.Random) -> int:
    """Floor plus a probabilistic extra point for the fractional part."""
    whole = math.floor(raw)
    if rng.random() < raw - whole:
        whole += 1
    return whole


def expected_gain(state: PlayerState, session: TrainingSession, infrastructure: int | None = None) -> float:
    """Mean total attribute gain of a session (before rounding and penalties)."""
    ttype = _require_type(session.focus)
    eff = effectiveness_of(state, session, infrastructure)
    cat = TRAINING_CATEGORY_MULTIPLIERS[ttype.category]
    attrs = state.attributes()
    total = 0.0
    for attr in ttype.primary:
        total += sum(PRIMARY_GAIN_RANGE) / 2 * eff * cat * _attribute_level_factor(attrs[attr])
    for attr in ttype.secondary:
        total += sum(SECONDARY_GAIN_RANGE) / 2 * eff * cat * _attribute_level_factor(attrs[attr])
    return total


def classify(actual: float, expected: float) -> str:
    if expected <= 0:
        return "neutral"
    ratio = actual / expected
    for threshold, band in RESULT_THRESHOLDS:
        if ratio >= threshold:
            return band
    return "poor"


# ---------------------------------------------------------------------------
# Execute / apply
# ---------------------------------------------------------------------------

def execute(
    state: PlayerState,
    session: TrainingSession,
    rng: random.Random,
    infrastructure: int | None = None,
) -> TrainingResult:
    """Roll one session's attribute deltas. Does not mutate ``state``."""
    ttype = _require_type(session.focus)
    eff = effectiveness_of(state, session, infrastructure)
    cat = TRAINING_CATEGORY_MULTIPLIERS[ttype.category]
    variance = gauss_clamped(rng, 1.0, VARIANCE_SIGMA, *VARIANCE_BOUNDS)
    attrs = state.attributes()

    deltas: dict[str, int] = {}
    actual = 0.0
    for attrs_group, gain_range in ((ttype.primary, PRIMARY_GAIN_RANGE), (ttype.secondary, SECONDARY_GAIN_RANGE)):
        for attr in attrs_group:
            raw = rng.uniform(*gain_range) * eff * cat * variance * _attribute_level_factor(attrs[attr])
            actual += raw
            gain = _round_gain(raw, rng)
            if gain:
                deltas[attr] = deltas.get(attr, 0) + gain

    if session.intensity in PENALTY_INTENSITIES:
        for attr in ttype.penalty:
            if rng.random() < PENALTY_CHANCE:
                loss = max(1, round(rng.uniform(*PENALTY_RANGE)))
                deltas[attr] = deltas.get(attr, 0) - loss

    expected = expected_gain(state, session, infrastructure)
    result = TrainingResult(
        focus=session.focus,
        deltas={k: v for k, v in deltas.items() if v != 0},
        cost_total=cost_of(state, session),
        classification=classify(actual, expected),
    )
    logger.debug("training %s (slot %d, eff %.2f): %s", session.focus, session.session_index, eff, result.deltas)
    return result


def apply(state: PlayerState, result: TrainingResult) -> PlayerState:
    """Debit the cost and apply the deltas (attributes clamped 1-99).
    Raises InsufficientFundsError before touching anything if the balance cannot cover it."""
    if result.cost_total > state.bank_balance:
        raise InsufficientFundsError(result.cost_total, state.bank_balance)
    for attr, delta in result.deltas.items():
        state.set_attribute(attr, getattr(state, attr) + delta)
    state.bank_balance -= result.cost_total
    state.recompute_overall()
    return state


def run_training(
    state: PlayerState,
    selections: Sequence[str],
    context: TrainingContext | None = None,
    rng: random.Random | None = None,
) -> TrainingOutcome:
    """Plan, price, execute, and apply a full selection on a copy of ``state``.
    All-or-nothing: on any error the input state is untouched."""
    rng = rng or random.Random()
    context = context or TrainingContext()
    sessions = plan_sessions(state, selections, context)
    total_cost = sum(cost_of(state, s) for s in sessions)
    if total_cost > state.bank_balance:
        raise InsufficientFundsError(total_cost, state.bank_balance)

    level = infrastructure_level(state, context)
    new_state = copy.deepcopy(state)
    results: list[TrainingResult] = []
    for session in sessions:
        result = execute(new_state, session, rng, level)
        apply(new_state, result)
        results.append(result)

    if sessions:
        new_state.training_focuses = list(selections)
        new_state.training_intensity = sessions[0].intensity
        new_state.trainer_tier = sessions[0].trainer.tier if sessions[0].trainer is not None else None
        if sessions[0].intensity in PENALTY_INTENSITIES:
            new_state.raise_flag(FLAG_HIGH_INTENSITY_TRAINING, new_state.current_season)
    logger.info(
        "training applied for %s: %d session(s), cost %d, balance %d -> %d",
        state.name, len(sessions), total_cost, state.bank_balance, new_state.bank_balance,
    )
    return TrainingOutcome(state=new_state, results=results)


def apply_training(
    state: PlayerState,
    selections: Sequence[str],
    context: TrainingContext | None = None,
    rng: random.Random | None = None,
) -> PlayerState:
    """Boundary entry point: returns the trained state; the input is never mutated."""
    return run_training(state, selections, context, rng).state


# ---------------------------------------------------------------------------
# Dynamic career mode
# ---------------------------------------------------------------------------

def _focus_value(state: PlayerState, ttype: TrainingType) -> float:
    """How much a focus feeds the overall at the player's position."""
    weights = POSITION_OVERALL_WEIGHTS[state.position]
    value = sum(weights.get(a, 0.0) for a in ttype.primary)
    value += 0.5 * sum(weights.get(a, 0.0) for a in ttype.secondary)
    return value


def _auto_intensity(state: PlayerState, rng: random.Random) -> str:
    score = 50
    if state.age < 21:
        score += 20
    elif state.age < 25:
        score += 10
    elif state.age > 32:
        score -= 20

    if state.personality == "Ambitious":
        score += 15
    elif state.personality == "Professional":
        score += 10
    elif state.personality == "Lazy":
        score -= 20

    if state.morale == "Very High":
        score += 10
    elif state.morale in ("Low", "Very Low"):
        score -= 10

    score += rng.randint(-15, 14)
    if score >= 70:
        return "extreme"
    if score >= 50:
        return "high"
    if score >= 30:
        return "medium"
    return "low"


def decide_auto_training(
    state: PlayerState,
    rng: random.Random,
    context: TrainingContext | None = None,
) -> tuple[list[str], TrainingContext]:
    """Pick focuses, intensity, and trainer for a dynamic-mode career.
    The returned selection always fits the slot limit and 80% of the bank balance."""
    balance = state.bank_balance
    level = infrastructure_level(state, context)
    club_only = ([CLUB_TRAINING_ID], TrainingContext(intensity="medium", trainer_tier=None, infrastructure_level=level))
    first_season = is_first_professional_season(state)
    if balance < AUTO_TRAINING_MIN_BALANCE and not first_season:
        return club_only

    trainer_tier = None
    for tier in TRAINER_TIER_ORDER:
        trainer = get_trainer(tier)
        if balance > trainer.cost_per_week * AUTO_TRAINER_WEEKS_RESERVE:
            trainer_tier = tier

    intensity = _auto_intensity(state, rng)
    budget = balance * AUTO_TRAINING_SPEND_SHARE

    candidates = []
    for focus in TRAINING_TYPES:
        if focus == CLUB_TRAINING_ID:
            continue
        ttype = get_training_type(focus)
        if ttype.is_eligible(state.position):
            candidates.append((_focus_value(state, ttype) + rng.uniform(0.0, 0.15), focus))
    candidates.sort(reverse=True)

    for tier in ([trainer_tier, None] if trainer_tier is not None else [None]):
        ctx = TrainingContext(intensity=intensity, trainer_tier=tier, infrastructure_level=level)
        limit = max_slots(level, tier)
        chosen: list[str] = []
        spent = 0
        for _, focus in candidates:
            if len(chosen) >= limit:
                break
            session = TrainingSession(
                focus=focus,
                intensity=intensity,
                trainer=get_trainer(tier),
                duration_weeks=get_training_type(focus).duration_weeks,
                started_season=state.current_season,
                session_index=len(chosen),
            )
            price = cost_of(state, session)
            if spent + price > budget:
                break
            chosen.append(focus)
            spent += price
        if chosen:
            logger.debug("auto training for %s: %s (%s, trainer=%s)", state.name, chosen, intensity, tier)
            return chosen, ctx
    return club_only


def summarize_results(results: Sequence[TrainingResult]) -> dict[str, Any]:
    """Totals for display: summed deltas, total cost, and best band reached."""
    totals: dict[str, int] = {}
    for r in results:
        for attr, delta in r.deltas.items():
            totals[attr] = totals.get(attr, 0) + delta
    order = ["excellent", "good", "neutral", "poor"]
    best = min((order.index(r.classification) for r in results), default=2)
    return {
        "deltas": totals,
        "cost_total": sum(r.cost_total for r in results),
        "best": order[best],
        "sessions": len(results),
    }
