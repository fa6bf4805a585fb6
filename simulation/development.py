"""
Natural player development over a season (separate from paid training).
Moves attributes toward the player's potential while young and erodes them with age.
Growth scales with headroom (potential - overall), playing time, and club facilities.
"""
from __future__ import annotations

import random

from models.constants import GOALKEEPER_ATTRIBUTES, OUTFIELD_ATTRIBUTES
from models.player import PlayerState

# Base development rate per season: delta scales with headroom / 99 so growth is smooth.
# A 17-year-old with 25 headroom and regular minutes gains ~2-3 points per key attribute.
BASE_RATE = 9.0

# Age at which decline starts, and decline per season per year past it
DECLINE_START_AGE = 30
DECLINE_PER_YEAR = 0.55
# Pace and physical fade faster than technique
FAST_DECLINE_ATTRIBUTES = ("pace", "physical", "reflexes", "diving")
FAST_DECLINE_MULTIPLIER = 1.6


# Facilities 1-5 -> 0.8 to 1.2
def _facility_factor(training_facilities: int) -> float:
    return 0.8 + 0.1 * (max(1, min(5, training_facilities)) - 1)


# Share of team matches played -> 0.5 to 1.2
def _minutes_factor(playing_share: float) -> float:
    return 0.5 + 0.7 * max(0.0, min(1.0, playing_share))


def _growth_age_factor(age: int) -> float:
    if age <= 19:
        return 1.2
    if age <= 23:
        return 1.0
    if age <= 27:
        return 0.5
    if age <= 29:
        return 0.2
    return 0.0


def _trained_attributes(state: PlayerState) -> tuple[str, ...]:
    if state.is_goalkeeper:
        return GOALKEEPER_ATTRIBUTES
    return OUTFIELD_ATTRIBUTES


def run_season_development(
    state: PlayerState,
    playing_share: float,
    rng: random.Random,
) -> dict[str, int]:
    """
    Apply one season of natural development to ``state`` (mutates it).
    playing_share: matches played / team matches (0-1).
    Returns the applied deltas, e.g. {"pace": 2, "shooting": 1}.
    """
    headroom = max(0, state.potential - state.overall)
    growth = _growth_age_factor(state.age)
    facility_mult = _facility_factor(state.team.training_facilities)
    minutes_mult = _minutes_factor(playing_share)
    years_past_peak = max(0, state.age - DECLINE_START_AGE)

    changes: dict[str, int] = {}
    for attr in _trained_attributes(state):
        current = getattr(state, attr)
        delta_f = 0.0
        if headroom > 0 and growth > 0:
            delta_f += (
                BASE_RATE
                * (headroom / 99.0)
                * growth
                * facility_mult
                * minutes_mult
                * rng.uniform(0.6, 1.4)
            )
        if years_past_peak > 0:
            decline = DECLINE_PER_YEAR * years_past_peak * rng.uniform(0.5, 1.5)
            if attr in FAST_DECLINE_ATTRIBUTES:
                decline *= FAST_DECLINE_MULTIPLIER
            delta_f -= decline
        delta_int = round(delta_f)
        if delta_int == 0:
            continue
        stored = state.set_attribute(attr, current + delta_int)
        if stored != current:
            changes[attr] = stored - current

    if changes:
        state.recompute_overall()
    return changes

