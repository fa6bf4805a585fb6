"""
Career scoring and the leaderboard.
score_career is a pure function of (state, history); calling it again gives the same number.
"""
from __future__ import annotations

from typing import Sequence

from models.constants import (
    AWARD_SCORE_WEIGHTS,
    CAREER_START_AGE,
    CAREER_TIER_DEFAULT,
    CAREER_TIERS,
    LEADERBOARD_CRITERIA,
    LEADERBOARD_TOP_N,
    TROPHY_SCORE_WEIGHTS,
)
from models.honours import weighted_sum
from models.leaderboard import LeaderboardEntry
from models.player import PlayerState
from models.season_log import SeasonLog, real_contribution

# Score weights
OVERALL_WEIGHT = 50
POTENTIAL_WEIGHT = 20
GOAL_WEIGHT = 15
ASSIST_WEIGHT = 10
MATCH_WEIGHT = 2
REPUTATION_WEIGHT = 10
MARKET_VALUE_WEIGHT = 5
LONGEVITY_WEIGHT = 50


def score_career(state: PlayerState, history: Sequence[SeasonLog]) -> int:
    """
    Weighted career score:
    overall*50 + potential*20 + goals*15 + assists*10 + matches*2
    + trophies by prestige + awards by prestige
    + reputation*10 + market value*5 + (age - 14)*50.
    ``history`` is accepted for the boundary contract; the totals already live on the state.
    """
    # Fractional terms are rounded individually; integer terms move the score exactly
    return (
        state.overall * OVERALL_WEIGHT
        + state.potential * POTENTIAL_WEIGHT
        + state.total_goals * GOAL_WEIGHT
        + state.total_assists * ASSIST_WEIGHT
        + state.total_matches * MATCH_WEIGHT
        + int(round(weighted_sum(state.trophies, TROPHY_SCORE_WEIGHTS)))
        + int(round(weighted_sum(state.awards, AWARD_SCORE_WEIGHTS)))
        + state.reputation * REPUTATION_WEIGHT
        + int(round(state.market_value * MARKET_VALUE_WEIGHT))
        + (state.age - CAREER_START_AGE) * LONGEVITY_WEIGHT
    )


def career_tier(state: PlayerState, history: Sequence[SeasonLog], score: int | None = None) -> str:
    """Best band whose score threshold is beaten or whose peak overall is reached."""
    if score is None:
        score = score_career(state, history)
    peak = max([state.peak_overall, state.overall] + [log.overall for log in history])
    for label, min_score, min_peak in CAREER_TIERS:
        if score > min_score or peak >= min_peak:
            return label
    return CAREER_TIER_DEFAULT


def real_totals(history: Sequence[SeasonLog]) -> dict[str, int]:
    """Career totals from history: senior club seasons plus competitive internationals.
    Entry 0 (the academy baseline) never counts."""
    totals = {"matches": 0, "goals": 0, "assists": 0, "clean_sheets": 0}
    for log in history[1:]:
        for key, value in real_contribution(log).items():
            totals[key] += value
    return totals


def build_leaderboard_entry(
    state: PlayerState,
    history: Sequence[SeasonLog],
    score: int | None = None,
) -> LeaderboardEntry:
    if score is None:
        score = score_career(state, history)
    totals = real_totals(history)
    return LeaderboardEntry(
        name=state.name,
        score=score,
        final_overall=state.overall,
        peak_overall=max(state.peak_overall, state.overall),
        tier=career_tier(state, history, score),
        trophies=int(weighted_sum(state.trophies)),
        awards=int(weighted_sum(state.awards)),
        matches=totals["matches"],
        goals=totals["goals"],
        assists=totals["assists"],
        clean_sheets=totals["clean_sheets"],
        position=state.position,
        nationality=state.nationality,
    )


def merge_leaderboard(
    entries: Sequence[LeaderboardEntry],
    entry: LeaderboardEntry,
    top_n: int = LEADERBOARD_TOP_N,
) -> list[LeaderboardEntry]:
    """Add ``entry`` (replacing any entry with the same name) and keep the union of the
    top ``top_n`` for every criterion. Result is sorted by score, best first."""
    pool = [e for e in entries if e.name != entry.name] + [entry]
    kept: dict[str, LeaderboardEntry] = {}
    for criterion in LEADERBOARD_CRITERIA:
        ranked = sorted(pool, key=lambda e: getattr(e, criterion), reverse=True)
        for e in ranked[:top_n]:
            kept.setdefault(e.name, e)
    return sorted(kept.values(), key=lambda e: e.score, reverse=True)


def refresh_entry_totals(entry: LeaderboardEntry, history: Sequence[SeasonLog]) -> LeaderboardEntry:
    """Back-fill: recompute an entry's matches/goals/assists/clean sheets from history
    with the same filter used at submission."""
    totals = real_totals(history)
    return LeaderboardEntry(**{**entry.to_dict(), **totals})
