"""
Career orchestration: one season cycle from training to offers.

next_season runs training -> season -> totals -> history -> retirement -> offers on
copies of the save and only returns the new save when every step succeeded. It is
the one place that catches unexpected errors: they are logged and re-raised as
SimulationError, and the caller's save is left exactly as it was.
"""
from __future__ import annotations

import copy
import logging
import random
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Protocol, Sequence

from models.constants import (
    INJURY_PRONE_TRAIT,
    MORALE_LEVELS,
    SEASON_SAVINGS_RATE,
    TACTICS,
    WEEKS_PER_YEAR,
)
from models.errors import CareerError, RetiredPlayerError, SimulationError, ValidationError
from models.leaderboard import LeaderboardEntry
from models.player import PlayerState
from models.season_log import CareerEvent, SeasonLog, append_event, append_season, real_contribution
from models.team import Team, find_team
from models.training import TrainingResult
from .events import Localize, default_localize
from .randomness import chance, clamp
from .scoring import build_leaderboard_entry, score_career
from .season import simulate_season
from .training import TrainingContext, decide_auto_training, run_training
from .transfers import generate_offers, prune_stale_offers

logger = logging.getLogger(__name__)

# Retirement target age adjustments and caps
GK_EXTRA_YEARS = 5
CB_CDM_EXTRA_YEARS = 3
OVERALL_EXTRA_YEARS = ((92, 3), (88, 2), (85, 1))
PROFESSIONAL_EXTRA_YEARS = 1
INJURY_PRONE_YEARS = -2
MAX_RETIREMENT_AGE_GK = 47
MAX_RETIREMENT_AGE_OUTFIELD = 43
# Nobody walks away voluntarily before this age
MIN_VOLUNTARY_RETIREMENT_AGE = 30
MAX_RETIREMENT_CHANCE = 0.98

# Years relative to target age -> base chance ("hockey stick")
RETIREMENT_CHANCE_BY_DELTA = {-3: 0.015, -2: 0.04, -1: 0.12, 0: 0.40, 1: 0.80}
RETIREMENT_CHANCE_EARLY = 0.005
RETIREMENT_CHANCE_LATE = 1.0


class CareerRepository(Protocol):
    """Where saves live. Engines never touch storage; only next_season and the web layer call this."""

    def load(self) -> Optional["CareerSave"]:
        ...

    def save(self, save: "CareerSave") -> None:
        ...


@dataclass
class CareerSave:
    state: PlayerState
    history: list[SeasonLog] = field(default_factory=list)
    world_teams: list[Team] = field(default_factory=list)
    tactic: str = "Balanced"

    def __post_init__(self) -> None:
        if self.tactic not in TACTICS:
            raise ValueError(f"tactic must be one of {TACTICS}, got {self.tactic!r}")


@dataclass
class CycleResult:
    """What one call to next_season produced."""

    save: CareerSave
    season_log: SeasonLog
    training: list[TrainingResult] = field(default_factory=list)
    offers_generated: bool = False
    retired: bool = False
    score: int | None = None
    leaderboard_entry: LeaderboardEntry | None = None


def start_career(
    name: str,
    position: str,
    nationality: str,
    team_name: str,
    world_teams: Sequence[Team],
    rng: random.Random | None = None,
    personality: str | None = None,
    career_mode: str = "tactical",
    tactic: str = "Balanced",
    localize: Localize | None = None,
) -> CareerSave:
    """New save: a 16-year-old at ``team_name`` (usually a youth side) with the academy baseline log."""
    from generation.generate import create_player

    team = find_team(world_teams, team_name)
    if team is None:
        raise ValidationError(f"unknown team {team_name!r}")
    state, history = create_player(
        name=name,
        position=position,
        nationality=nationality,
        team=team,
        rng=rng or random.Random(),
        personality=personality,
        career_mode=career_mode,
        localize=localize or default_localize,
    )
    logger.info("career started: %s (%s) at %s", name, position, team.name)
    return CareerSave(state=state, history=history, world_teams=copy.deepcopy(list(world_teams)), tactic=tactic)


def season_finances(state: PlayerState) -> int:
    """Money banked from one season's wages."""
    return int(round(state.wage * WEEKS_PER_YEAR * SEASON_SAVINGS_RATE))


def accumulate_totals(state: PlayerState, season_log: SeasonLog) -> dict[str, int]:
    """Add the season's real contribution to the career totals (mutates state)."""
    contribution = real_contribution(season_log)
    state.total_matches += contribution["matches"]
    state.total_goals += contribution["goals"]
    state.total_assists += contribution["assists"]
    state.total_clean_sheets += contribution["clean_sheets"]
    return contribution


# ---------------------------------------------------------------------------
# Retirement
# ---------------------------------------------------------------------------

def retirement_target_age(state: PlayerState) -> int:
    target = state.retirement_age
    if state.position == "GK":
        target += GK_EXTRA_YEARS
    elif state.position in ("CB", "CDM"):
        target += CB_CDM_EXTRA_YEARS
    for min_overall, extra in OVERALL_EXTRA_YEARS:
        if state.overall >= min_overall:
            target += extra
            break
    if state.personality == "Professional":
        target += PROFESSIONAL_EXTRA_YEARS
    if state.has_trait(INJURY_PRONE_TRAIT):
        target += INJURY_PRONE_YEARS
    cap = MAX_RETIREMENT_AGE_GK if state.position == "GK" else MAX_RETIREMENT_AGE_OUTFIELD
    return min(target, cap)


def retirement_chance(state: PlayerState, season_log: SeasonLog) -> float:
    delta = state.age - retirement_target_age(state)
    if delta <= -4:
        p = RETIREMENT_CHANCE_EARLY
    else:
        p = RETIREMENT_CHANCE_BY_DELTA.get(delta, RETIREMENT_CHANCE_LATE)

    # Reducers
    if state.is_goalkeeper:
        condition = state.reflexes
    else:
        condition = (state.pace + state.physical) / 2
    if condition >= 90:
        p *= 0.4
    elif condition >= 80:
        p *= 0.7
    if state.morale == MORALE_LEVELS[-1]:
        p *= 0.8
    if delta <= 0 and (state.trophies.league > 0 or state.awards.world_player_award > 0):
        p *= 0.7

    # Accelerators
    matches = season_log.stats.matches
    if matches < 5:
        p *= 1.8
    elif matches < 15:
        p *= 1.3
    rating = season_log.stats.average_rating
    if rating < 6.2:
        p *= 1.5
    elif rating < 6.6:
        p *= 1.2
    if state.is_goalkeeper:
        if state.reflexes < 60:
            p *= 1.4
    elif state.pace < 50:
        p *= 1.4
    if state.squad_status == "Surplus":
        p *= 1.3

    if delta <= -2 and state.injury_type is None:
        p = min(p, 0.02)
    return clamp(p, 0.0, MAX_RETIREMENT_CHANCE)


def check_retirement(state: PlayerState, season_log: SeasonLog, rng: random.Random) -> bool:
    """True when the player retires after this season. A career-ending injury always does."""
    if state.has_career_ending_injury:
        return True
    if state.age < MIN_VOLUNTARY_RETIREMENT_AGE:
        return False
    return chance(rng, retirement_chance(state, season_log))


# ---------------------------------------------------------------------------
# Season cycle
# ---------------------------------------------------------------------------

def _check_contract_resolved(state: PlayerState) -> None:
    # An expired contract with offers on the table must be settled before playing on;
    # with no offers the season starts in free agency.
    if state.contract_length <= 0 and state.parent_team is None and state.transfer_offers:
        raise ValidationError(
            f"{state.name}'s contract has expired: accept an offer or renew before the next season"
        )


def _train(
    state: PlayerState,
    rng: random.Random,
    context: TrainingContext | None,
) -> tuple[PlayerState, list[TrainingResult]]:
    if state.career_mode == "dynamic":
        focuses, ctx = decide_auto_training(state, rng, context)
    else:
        focuses, ctx = list(state.training_focuses), context
    if not focuses:
        return state, []
    outcome = run_training(state, focuses, ctx, rng)
    return outcome.state, outcome.results


def next_season(
    save: CareerSave,
    rng: random.Random | None = None,
    repository: CareerRepository | None = None,
    context: TrainingContext | None = None,
    localize: Localize | None = None,
    on_retire: Callable[[LeaderboardEntry], Any] | None = None,
) -> CycleResult:
    """
    Run one full season cycle and return the new save.

    Validation problems (retired player, unresolved expired contract, bad training
    selection) raise their CareerError unchanged. Anything else is logged and raised
    as SimulationError. In both cases ``save`` is untouched and nothing is persisted.
    ``on_retire`` receives the leaderboard entry; its return value is ignored.
    """
    if save.state.retired:
        raise RetiredPlayerError(f"{save.state.name} is retired; the career is over")
    _check_contract_resolved(save.state)
    rng = rng or random.Random()
    localize = localize or default_localize

    try:
        state = copy.deepcopy(save.state)
        state.transfer_offers = prune_stale_offers(state.transfer_offers, save.world_teams)
        state, training = _train(state, rng, context)

        outcome = simulate_season(state, save.tactic, save.world_teams, localize, rng)
        state = outcome.state
        world_teams = outcome.world_teams
        log = outcome.season_log

        accumulate_totals(state, log)
        state.bank_balance += season_finances(state)
        history = append_season(save.history, log)

        retired, score, entry, offers_generated = False, None, None, False
        if check_retirement(state, log, rng):
            state.retire()
            state.transfer_offers = []
            history = append_event(
                history, -1,
                CareerEvent("retirement", localize("events.retired", age=state.age, seasons=len(history) - 1)),
            )
            score = score_career(state, history)
            entry = build_leaderboard_entry(state, history, score)
            retired = True
            logger.info("%s retired at %d with score %d (%s)", state.name, state.age, score, entry.tier)
        else:
            state.transfer_offers = generate_offers(
                state, outcome.agitating_for_transfer, outcome.is_forced_to_move, world_teams, rng,
            )
            offers_generated = True

        result = CycleResult(
            save=CareerSave(state=state, history=history, world_teams=world_teams, tactic=save.tactic),
            season_log=history[-1],
            training=training,
            offers_generated=offers_generated,
            retired=retired,
            score=score,
            leaderboard_entry=entry,
        )
        if repository is not None:
            repository.save(result.save)
    except CareerError:
        raise
    except Exception as exc:
        logger.exception("season cycle aborted for %s", save.state.name)
        raise SimulationError(f"season {save.state.current_season} could not be simulated: {exc}") from exc

    if result.leaderboard_entry is not None and on_retire is not None:
        try:
            on_retire(result.leaderboard_entry)
        except Exception:
            logger.exception("leaderboard hook failed for %s", state.name)
    return result
