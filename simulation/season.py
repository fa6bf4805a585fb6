"""
Season simulator for the football career simulator.

Simulates one full season for the player as a single atomic step:

1. **Context**: age and contract tick, loan returns, free agency, squad status,
   injuries, and the share of team matches the player gets.
2. **Competitions**: league, cup, continental, and national-team numbers
   (matches, goals, assists, clean sheets, rating), driven by the player's
   overall, position, tactic, morale, and the strength of the opposition.
3. **Team outcomes**: league standings among registry rivals, cup runs,
   trophies, and individual awards.
4. **Status**: morale, chemistry, approval, playing-time escalation, and the
   two transfer-pressure signals (agitating / forced to move).
5. **World feedback**: reputations drift and league tiers promote/relegate.

The inputs are never mutated: the simulator works on deep copies and returns
the new state, the season log, the two signals, and the new registry.
Retirement is decided by the caller after totals are accumulated.
"""
from __future__ import annotations

import copy
import logging
import math
import random
from dataclasses import dataclass, field, replace
from typing import Any, Sequence

from models.constants import (
    ASSIST_RATE_BY_POSITION,
    CALL_UP_OVERALL,
    CAREER_ENDING_INJURY,
    CLEAN_SHEET_POSITIONS,
    CONTINENTAL_TROPHY_BY_CONFEDERATION,
    FLAG_HIGH_INTENSITY_TRAINING,
    FLAG_MANAGER_CONFLICT,
    FLAG_TEAMMATE_CONFLICT,
    FLAG_WANTS_TRANSFER,
    GOAL_RATE_BY_POSITION,
    INJURY_PRONE_TRAIT,
    KEY_PLAYER_THRESHOLDS,
    LEAGUE_MATCHES_BY_TIER,
    MORALE_LEVELS,
    NATION_CONFEDERATION,
    NATION_CONFEDERATION_DEFAULT,
    NATION_STRENGTH,
    NATION_STRENGTH_DEFAULT,
    PLAYING_SHARE_BY_STATUS,
    SECONDARY_CONTINENTAL_TROPHY_BY_CONFEDERATION,
    TACTIC_MODIFIERS,
    TACTICS,
)
from models.errors import RetiredPlayerError, ValidationError
from models.player import PlayerState
from models.season_log import (
    CareerEvent,
    CompetitionRecord,
    SeasonLog,
    SeasonStats,
    real_contribution,
)
from models.team import Team, find_team
from models.training import get_trainer
from .development import run_season_development
from .events import AWARD_NAMES, TROPHY_NAMES, Localize, default_localize
from .randomness import chance, clamp

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Tuning constants
# ---------------------------------------------------------------------------

YOUTH_LEAGUE_MATCHES = 30
CONTINENTAL_REPUTATION = 75
LOW_PLAYING_SHARE = 0.35
LOW_PLAYING_TIME_MIN_AGE = 20
FORCED_OUT_APPROVAL = 15

# Injury model
BASE_INJURY_RISK = 0.08
INJURY_RISK_PER_YEAR_OVER_28 = 0.01
HIGH_INTENSITY_INJURY_RISK = 0.06
INJURY_PRONE_RISK = 0.08
MAJOR_INJURY_SHARE = 0.3
CAREER_ENDING_MIN_AGE = 30
CAREER_ENDING_RISK = 0.004

# Senior promotion out of a youth side
SENIOR_PROMOTION_AGE = 19
SENIOR_PROMOTION_MARGIN = 8

# Competitive international schedule by season (mod 4)
WORLD_CUP_CYCLE = 0
CONTINENTAL_CUP_CYCLE = 2

GOAL_MILESTONES = (50, 100, 200, 300, 400, 500, 600, 700)
MATCH_MILESTONES = (100, 250, 500, 750, 1000)

MORALE_CHEMISTRY_OFFSET = (-6, -3, 0, 3, 6)
MORALE_GOAL_FACTOR = (0.85, 0.93, 1.0, 1.04, 1.08)

FOCUS_GOAL_BOOST = 1.06
FOCUS_ASSIST_BOOST = 1.06
FOCUS_RATING_BOOST = 0.08


@dataclass
class SeasonOutcome:
    state: PlayerState
    season_log: SeasonLog
    agitating_for_transfer: bool
    is_forced_to_move: bool
    world_teams: list[Team]
    development: dict[str, int] = field(default_factory=dict)


@dataclass
class _CompetitionPlan:
    name: str
    type: str
    team_matches: int
    difficulty: float  # opposition strength the player faces
    factor: float = 1.0  # scoring environment multiplier


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _team_strength(team: Team) -> float:
    return team.squad_strength * 0.7 + team.reputation * 0.3


def _league_rivals(team: Team, world_teams: Sequence[Team]) -> list[Team]:
    return [
        t for t in world_teams
        if t.country == team.country and t.league_tier == team.league_tier and t.is_youth == team.is_youth
    ]


def expected_squad_status(player: PlayerState, team: Team) -> str:
    if team.is_youth:
        return "Prospect"
    key = KEY_PLAYER_THRESHOLDS.get(team.stars, 59)
    diff = player.overall - key
    if diff >= 0:
        if player.years_at_club >= 5 and (player.personality == "Leader" or diff >= 3):
            return "Captain"
        return "Key Player"
    if diff >= -5:
        return "Rotation"
    if player.age <= 21:
        return "Prospect"
    if diff >= -10:
        return "Reserve"
    return "Surplus"


def _morale_index(player: PlayerState) -> int:
    return MORALE_LEVELS.index(player.morale)


def _poisson_like(rng: random.Random, mean: float) -> int:
    """Non-negative integer with the given mean and sqrt(mean) spread."""
    if mean <= 0:
        return 0
    return max(0, round(rng.gauss(mean, math.sqrt(mean))))


def _nation_strength(nationality: str) -> int:
    return NATION_STRENGTH.get(nationality, NATION_STRENGTH_DEFAULT)


def _market_value(overall: int, age: int, contract_length: int) -> float:
    base = max(0, overall - 45) ** 3 / 1000.0
    if age <= 21:
        base *= 1.4
    elif age <= 25:
        base *= 1.2
    elif age <= 29:
        base *= 1.0
    elif age <= 32:
        base *= 0.6
    else:
        base *= 0.3
    if contract_length <= 0:
        base *= 0.3
    elif contract_length == 1:
        base *= 0.6
    elif contract_length == 2:
        base *= 0.85
    return round(base, 1)


def _crossed(before: int, after: int, milestones: Sequence[int]) -> list[int]:
    return [m for m in milestones if before < m <= after]


# ---------------------------------------------------------------------------
# Simulation
# ---------------------------------------------------------------------------

class _Season:
    """One season in flight. Owns the copies it mutates."""

    def __init__(
        self,
        player: PlayerState,
        tactic: str,
        world_teams: list[Team],
        localize: Localize,
        rng: random.Random,
    ) -> None:
        self.player = player
        self.tactic = tactic
        self.teams = world_teams
        self.localize = localize
        self.rng = rng
        self.season = player.current_season
        self.events: list[CareerEvent] = []
        self.trophies: list[str] = []
        self.awards: list[str] = []
        self.competitions: list[CompetitionRecord] = []
        self.agitating = False
        self.forced = False
        self.injury_share_lost = 0.0
        self.playing_share = 0.0

    def emit(self, event_type: str, key: str, **params: Any) -> None:
        self.events.append(CareerEvent(type=event_type, description=self.localize(key, **params)))

    # -- context -------------------------------------------------------

    def prepare(self) -> None:
        p = self.player
        # Conflicts reset every season; other flags lapse by age
        p.event_flags = [
            f for f in p.active_flags(self.season)
            if f.flag not in (FLAG_MANAGER_CONFLICT, FLAG_TEAMMATE_CONFLICT)
        ]
        p.transfer_offers = []
        p.agitating_for_transfer = False
        p.is_forced_to_move = False
        if p.injury_type != CAREER_ENDING_INJURY:
            p.injury_type = None
            p.injury_seasons = 0

        if p.pending_loan_return and p.parent_team is not None:
            parent = find_team(self.teams, p.parent_team.name) or p.parent_team
            p.team = replace(parent)
            p.parent_team = None
            p.pending_loan_return = False
            p.loan_seasons_remaining = 0
            self.emit("loan_return", "events.loan_return", team=p.team.name)

        if p.contract_length <= 0 and p.parent_team is None:
            self._sign_as_free_agent()

        registry_team = find_team(self.teams, p.team.name)
        if registry_team is not None:
            p.team = replace(registry_team)

        if p.team.is_youth and self._ready_for_senior_football():
            senior = find_team(self.teams, p.team.parent_club or "")
            if senior is not None:
                p.team = replace(senior)
                p.has_made_senior_debut = True
                p.years_at_club = 0
                self.emit("senior_debut", "events.senior_debut", team=senior.name)

        p.age += 1
        p.years_at_club += 1
        if p.contract_length > 0:
            p.contract_length -= 1

        status = expected_squad_status(p, p.team)
        if status != p.squad_status:
            p.squad_status = status
            self.emit("squad_status", "events.squad_status", status=status)
        if not p.team.is_youth:
            p.has_made_senior_debut = True

    def _ready_for_senior_football(self) -> bool:
        p = self.player
        senior = find_team(self.teams, p.team.parent_club or "")
        if senior is None:
            return False
        return p.age + 1 >= SENIOR_PROMOTION_AGE or p.overall >= senior.squad_strength - SENIOR_PROMOTION_MARGIN

    def _sign_as_free_agent(self) -> None:
        p = self.player
        pool = [t for t in self.teams if not t.is_youth and t.league_tier >= 4 and t.name != p.team.name]
        same_country = [t for t in pool if t.country == p.team.country]
        pool = same_country or pool
        if not pool:
            return
        team = pool[self.rng.randrange(len(pool))]
        p.team = replace(team)
        p.contract_length = 1
        p.years_at_club = 0
        p.wage = max(1000, round(p.wage * 0.5))
        self.emit("transfer", "events.free_agent_signed", team=team.name)

    def roll_injury(self) -> None:
        p = self.player
        risk = BASE_INJURY_RISK + max(0, p.age - 28) * INJURY_RISK_PER_YEAR_OVER_28
        if p.has_flag(FLAG_HIGH_INTENSITY_TRAINING, self.season):
            risk += HIGH_INTENSITY_INJURY_RISK
        if p.has_trait(INJURY_PRONE_TRAIT):
            risk += INJURY_PRONE_RISK
        trainer = get_trainer(p.trainer_tier)
        if trainer is not None:
            risk *= 1.0 - trainer.injury_reduction

        if p.age >= CAREER_ENDING_MIN_AGE:
            ending_risk = CAREER_ENDING_RISK * (2 if p.has_trait(INJURY_PRONE_TRAIT) else 1)
            if chance(self.rng, ending_risk):
                p.injury_type = CAREER_ENDING_INJURY
                p.injury_seasons = 99
                self.injury_share_lost = self.rng.uniform(0.2, 0.8)
                self.emit("injury", "events.career_ending_injury")
                return

        if not chance(self.rng, risk):
            return
        league_matches = LEAGUE_MATCHES_BY_TIER[p.team.league_tier]
        if chance(self.rng, MAJOR_INJURY_SHARE):
            severity, missed = "major", self.rng.randint(10, 25)
            p.injury_seasons = 1
        else:
            severity, missed = "minor", self.rng.randint(2, 6)
        p.injury_type = severity.capitalize()
        self.injury_share_lost = min(0.9, missed / max(1, league_matches))
        self.emit("injury", "events.injury", severity=severity, matches=missed)

    def compute_playing_share(self) -> None:
        p = self.player
        share = PLAYING_SHARE_BY_STATUS.get(p.squad_status, 0.5)
        share += (_morale_index(p) - 2) * 0.03
        share += (p.team_chemistry - 50) / 500.0
        share += self.rng.gauss(0.0, 0.06)
        share = clamp(share, 0.0, 1.0) * (1.0 - self.injury_share_lost)
        self.playing_share = clamp(share, 0.0, 1.0)

    # -- competitions --------------------------------------------------

    def plan_competitions(self) -> list[_CompetitionPlan]:
        p = self.player
        team = p.team
        rivals = _league_rivals(team, self.teams)
        opposition = (
            sum(t.squad_strength for t in rivals if t.name != team.name) / max(1, len(rivals) - 1)
            if len(rivals) > 1 else team.squad_strength
        )
        plans: list[_CompetitionPlan] = []
        if team.is_youth:
            plans.append(_CompetitionPlan("Youth League", "League", YOUTH_LEAGUE_MATCHES, opposition))
            plans.append(_CompetitionPlan("Youth Cup", "Cup", self.rng.randint(2, 6), opposition))
            return plans
        plans.append(_CompetitionPlan("League", "League", LEAGUE_MATCHES_BY_TIER[team.league_tier], opposition))
        plans.append(_CompetitionPlan("Cup", "Cup", self.rng.randint(1, 6), opposition - 3))
        if team.league_tier == 1 and team.reputation >= CONTINENTAL_REPUTATION:
            key = CONTINENTAL_TROPHY_BY_CONFEDERATION.get(team.confederation)
            if key is None:
                return plans
            name = "Champions League" if key == "champions_league" else "Copa Libertadores"
            plans.append(_CompetitionPlan(name, "Continental", self.rng.randint(6, 13), opposition + 6, 0.85))
        elif (
            team.league_tier <= 2
            and team.reputation >= CONTINENTAL_REPUTATION - 10
            and team.confederation in SECONDARY_CONTINENTAL_TROPHY_BY_CONFEDERATION
        ):
            key = SECONDARY_CONTINENTAL_TROPHY_BY_CONFEDERATION[team.confederation]
            name = "Europa League" if key == "europa_league" else "Copa Sudamericana"
            plans.append(_CompetitionPlan(name, "Continental", self.rng.randint(6, 13), opposition + 2, 0.9))
        return plans

    def play_competition(self, plan: _CompetitionPlan, share: float) -> CompetitionRecord:
        p = self.player
        goal_mult, assist_mult, cs_mult = TACTIC_MODIFIERS[self.tactic]
        matches = max(0, min(plan.team_matches, round(plan.team_matches * share + self.rng.gauss(0, 1))))
        if matches == 0:
            return CompetitionRecord(competition=plan.name, type=plan.type)

        quality = (p.overall / 75.0) ** 3
        edge = clamp(1.0 + (p.overall - plan.difficulty) / 40.0, 0.4, 2.0)
        morale = MORALE_GOAL_FACTOR[_morale_index(p)]
        goal_focus = FOCUS_GOAL_BOOST if p.season_focus == "scoring" else 1.0
        assist_focus = FOCUS_ASSIST_BOOST if p.season_focus == "playmaking" else 1.0

        goal_mean = matches * GOAL_RATE_BY_POSITION[p.position] * quality * edge * plan.factor * goal_mult * morale * goal_focus
        assist_mean = matches * ASSIST_RATE_BY_POSITION[p.position] * quality * edge * plan.factor * assist_mult * morale * assist_focus
        goals = _poisson_like(self.rng, goal_mean)
        assists = _poisson_like(self.rng, assist_mean)

        clean_sheets = 0
        if p.position in CLEAN_SHEET_POSITIONS:
            cs_rate = clamp(0.25 + (p.overall - plan.difficulty) / 100.0, 0.05, 0.6) * cs_mult
            clean_sheets = min(matches, _poisson_like(self.rng, matches * cs_rate))

        rating = 6.0 + (p.overall - 60) / 20.0
        rating += (goals + assists * 0.6) / matches * 1.2
        if p.position == "GK":
            rating += clean_sheets / matches * 1.5
        if p.season_focus == "consistency":
            rating += FOCUS_RATING_BOOST
        rating += self.rng.gauss(0.0, 0.25)
        rating = round(clamp(rating, 4.5, 9.8), 2)
        return CompetitionRecord(
            competition=plan.name,
            type=plan.type,
            matches=matches,
            goals=goals,
            assists=assists,
            clean_sheets=clean_sheets,
            rating=rating,
        )

    def play_club_season(self) -> list[_CompetitionPlan]:
        plans = self.plan_competitions()
        for plan in plans:
            self.competitions.append(self.play_competition(plan, self.playing_share))
        return plans

    def play_international(self) -> None:
        p = self.player
        if p.team.is_youth or p.overall < CALL_UP_OVERALL or not p.nationality:
            return
        nation = _nation_strength(p.nationality)
        share = clamp(0.4 + (p.overall - nation) / 20.0, 0.1, 1.0) * (1.0 - self.injury_share_lost)
        friendly = _CompetitionPlan("Friendly", "International", self.rng.randint(2, 5), nation - 5, 0.9)
        self.competitions.append(self.play_competition(friendly, share))

        cycle = self.season % 4
        confed = NATION_CONFEDERATION.get(p.nationality, NATION_CONFEDERATION_DEFAULT)
        if cycle == WORLD_CUP_CYCLE:
            name, key, win_p = "World Cup", "world_cup", clamp((nation - 70) / 80.0, 0.01, 0.2)
        elif cycle == CONTINENTAL_CUP_CYCLE:
            name, key, win_p = "Continental Cup", "continental_cup", clamp((nation - 65) / 70.0, 0.02, 0.3)
        elif confed == "UEFA":
            name, key, win_p = "Nations League", "nations_league", clamp((nation - 70) / 90.0, 0.01, 0.2)
        else:
            return
        won = chance(self.rng, win_p)
        team_matches = 7 if won else self.rng.randint(3, 6)
        plan = _CompetitionPlan(name, "International", team_matches, nation, 0.85)
        record = self.play_competition(plan, share)
        if record.matches == 0:
            return
        self.competitions.append(record)
        self.emit("international", "events.call_up", country=p.nationality, competition=name)
        if won:
            p.trophies.add(key)
            self.trophies.append(key)
            self.emit("trophy", "events.international_trophy", trophy=TROPHY_NAMES[key], country=p.nationality)
            if key == "world_cup" and record.rating >= 7.5 and chance(self.rng, 0.5):
                self._give_award("world_cup_best_player")

    # -- team outcomes -------------------------------------------------

    def decide_team_outcomes(self, plans: Sequence[_CompetitionPlan]) -> list[Team]:
        """Standings for the player's league plus cup/continental runs.
        Returns the league table (best first) for world feedback."""
        p = self.player
        team = p.team
        rivals = _league_rivals(team, self.teams)
        if all(t.name != team.name for t in rivals):
            rivals = rivals + [team]
        contribution = (p.overall - team.squad_strength) * self.playing_share * 0.15
        tactic_edge = 0.5 if self.tactic in ("Possession", "High Press") else 0.0
        chemistry_edge = (p.team_chemistry - 50) / 50.0

        def season_strength(t: Team) -> float:
            strength = _team_strength(t) + self.rng.gauss(0.0, 4.0)
            if t.name == team.name:
                strength += contribution + tactic_edge + chemistry_edge
            return strength

        table = sorted(rivals, key=season_strength, reverse=True)
        own_strength = _team_strength(team) + contribution
        won_any_club = False

        if table and table[0].name == team.name:
            key = "youth_league" if team.is_youth else "league"
            self._win_club_trophy(key)
            won_any_club = True

        for plan in plans:
            if plan.type == "Cup":
                win_p = clamp(0.02 + (own_strength - 60) / 150.0, 0.01, 0.35) / (1 if team.is_youth else team.league_tier)
                if chance(self.rng, win_p):
                    self._win_club_trophy("youth_cup" if team.is_youth else "cup")
                    won_any_club = True
            elif plan.type == "Continental":
                win_p = clamp((own_strength - 70) / 100.0, 0.01, 0.3)
                if chance(self.rng, win_p):
                    if plan.name == "Champions League":
                        key = "champions_league"
                    elif plan.name == "Copa Libertadores":
                        key = "libertadores"
                    elif plan.name == "Europa League":
                        key = "europa_league"
                    else:
                        key = "copa_sudamericana"
                    self._win_club_trophy(key)
                    won_any_club = True
                    if key in ("champions_league", "libertadores") and chance(self.rng, 0.5):
                        self._win_club_trophy("club_world_cup")

        if won_any_club:
            p.adjust_chemistry(self.rng.randint(5, 10))
            p.adjust_approval(5)
        return table

    def _win_club_trophy(self, key: str) -> None:
        self.player.trophies.add(key)
        self.trophies.append(key)
        self.emit("trophy", "events.trophy", trophy=TROPHY_NAMES.get(key, key), team=self.player.team.name)

    def _give_award(self, key: str) -> None:
        self.player.awards.add(key)
        self.awards.append(key)
        self.emit("award", "events.award", award=AWARD_NAMES.get(key, key))

    def decide_awards(self, average_rating: float) -> None:
        p = self.player
        if p.team.is_youth:
            return
        league = next((c for c in self.competitions if c.type == "League"), None)
        if league is None or league.matches == 0:
            return
        tier = p.team.league_tier
        if league.goals >= self.rng.gauss(22.0, 3.0):
            self._give_award("top_scorer_award")
        if league.assists >= self.rng.gauss(14.0, 2.0):
            self._give_award("top_assister_award")
        if p.position == "GK" and tier <= 2 and league.clean_sheets >= self.rng.gauss(16.0, 2.0):
            self._give_award("best_goalkeeper_award")
        if p.age <= 21 and tier <= 2 and league.matches >= 20 and average_rating >= 7.3:
            self._give_award("young_player_award")
        if league.matches >= 25 and average_rating >= 7.8:
            self._give_award("league_player_of_year")
        if tier == 1 and average_rating >= 7.5:
            self._give_award("team_of_the_year")
        if league.goals >= 10 and chance(self.rng, 0.03):
            self._give_award("goal_of_the_year")
        big_wins = sum(1 for t in self.trophies if t in ("champions_league", "libertadores", "world_cup"))
        if big_wins and average_rating >= 7.6 and p.overall >= 85:
            self._give_award("continental_player_award")
        if p.overall >= 88:
            world_p = clamp((p.overall - 87) * 0.08 + big_wins * 0.15 + (average_rating - 7.5) * 0.3, 0.0, 0.8)
            if chance(self.rng, world_p):
                self._give_award("world_player_award")

    # -- status --------------------------------------------------------

    def update_relationships(self, average_rating: float) -> None:
        p = self.player
        years = p.years_at_club
        if years <= 1:
            gain = self.rng.randint(10, 15)
        elif years <= 4:
            gain = self.rng.randint(5, 10)
        else:
            gain = self.rng.randint(2, 7)
        p.adjust_chemistry(gain + MORALE_CHEMISTRY_OFFSET[_morale_index(p)])

        if average_rating >= 7.2:
            p.adjust_approval(5)
        elif 0 < average_rating < 6.3:
            p.adjust_approval(-5)
        if p.season_focus == "titles":
            p.adjust_approval(1)
        if average_rating >= 7.5 or self.trophies:
            p.update_morale("up")

    def handle_playing_time(self) -> None:
        p = self.player
        team_name = p.team.name
        low = (
            not p.team.is_youth
            and p.age >= LOW_PLAYING_TIME_MIN_AGE
            and self.playing_share < LOW_PLAYING_SHARE
            and self.injury_share_lost < 0.5
        )
        if low:
            p.seasons_with_low_playing_time += 1
        else:
            p.seasons_with_low_playing_time = 0

        n = p.seasons_with_low_playing_time
        if n == 1:
            p.update_morale("down")
            p.adjust_approval(-10)
            self.emit("playing_time", "events.low_playing_time", team=team_name)
        elif n == 2:
            self.agitating = True
            p.update_morale("down", 2)
            p.adjust_approval(-20)
            self.emit("playing_time", "events.low_playing_time", team=team_name)
            if chance(self.rng, 0.5):
                self.forced = True
        elif n >= 3:
            self.agitating = True
            self.forced = True
            p.morale = MORALE_LEVELS[0]
            p.adjust_approval(-30)
            self.emit("playing_time", "events.low_playing_time", team=team_name)

        if p.personality == "Ambitious" and p.overall >= 82 and p.team.league_tier >= 2 and chance(self.rng, 0.5):
            self.agitating = True

        if p.personality == "Temperamental" and _morale_index(p) <= 1 and chance(self.rng, 0.55):
            p.raise_flag(FLAG_MANAGER_CONFLICT, self.season)
            p.adjust_approval(-10)
            self.emit("conflict", "events.manager_conflict", team=team_name)

        teammate_p = 0.12 if p.personality == "Temperamental" else 0.04
        if chance(self.rng, teammate_p):
            p.raise_flag(FLAG_TEAMMATE_CONFLICT, self.season)
            p.adjust_chemistry(-10)
            self.emit("conflict", "events.teammate_conflict", team=team_name)

        # Last season's transfer request carries over while morale stays low
        if p.has_flag(FLAG_WANTS_TRANSFER, self.season) and _morale_index(p) <= 1:
            self.agitating = True

        if p.club_approval <= FORCED_OUT_APPROVAL and not p.team.is_youth:
            if not self.forced:
                self.emit("forced_out", "events.forced_out", team=team_name)
            self.forced = True

        if self.agitating:
            p.raise_flag(FLAG_WANTS_TRANSFER, self.season)
            self.emit("agitating", "events.agitating", team=team_name)

    def handle_contract(self) -> None:
        p = self.player
        if p.contract_length > 0:
            return
        # A loanee's contract belongs to the parent club
        club = p.parent_team or p.team
        status_bonus = {
            "Captain": 0.15, "Key Player": 0.15, "Rotation": 0.05,
            "Prospect": 0.0, "Reserve": -0.15, "Surplus": -0.35,
        }.get(p.squad_status, 0.0)
        prob = 0.55 + p.club_approval / 200.0 + status_bonus - 0.02 * (club.stars - 2.5)
        prob = clamp(prob, 0.0, 0.95)
        if not self.agitating and not self.forced and chance(self.rng, prob):
            years = self.rng.randint(1, 2) if p.age > 31 else self.rng.randint(2, 4)
            raise_pct = 1.25 if p.squad_status in ("Key Player", "Captain") else 1.03
            p.contract_length = years
            p.wage = int(round(p.wage * raise_pct))
            self.emit("contract", "events.contract_renewed", team=club.name, years=years)
        else:
            self.forced = True
            if p.parent_team is not None:
                self._end_loan()
            self.emit("contract_expired", "events.contract_expired", team=club.name)

    def _end_loan(self) -> None:
        """Send a loanee back to the parent club now so offers can be made this window."""
        p = self.player
        parent = find_team(self.teams, p.parent_team.name) or p.parent_team
        p.team = replace(parent)
        p.parent_team = None
        p.pending_loan_return = False
        p.loan_seasons_remaining = 0
        self.emit("loan_return", "events.loan_return", team=parent.name)

    def advance_loan(self) -> None:
        p = self.player
        if p.parent_team is None:
            return
        p.loan_seasons_remaining = max(0, p.loan_seasons_remaining - 1)
        if p.loan_seasons_remaining == 0:
            p.pending_loan_return = True

    def emit_milestones(self, contribution: dict[str, int]) -> None:
        p = self.player
        for count in _crossed(p.total_goals, p.total_goals + contribution["goals"], GOAL_MILESTONES):
            self.emit("milestone", "events.milestone_goals", count=count)
        for count in _crossed(p.total_matches, p.total_matches + contribution["matches"], MATCH_MILESTONES):
            self.emit("milestone", "events.milestone_matches", count=count)

    # -- world feedback ------------------------------------------------

    def apply_world_feedback(self, table: Sequence[Team]) -> None:
        """Reputation drift for the player's league and promotion/relegation of its ends."""
        p = self.player
        size = len(table)
        if size == 0:
            return
        moves = 2 if size >= 6 else 1
        trophy_teams = {p.team.name} if self.trophies else set()
        for pos, t in enumerate(table):
            registry_team = find_team(self.teams, t.name)
            if registry_team is None:
                continue
            if pos == 0:
                delta = 3
            elif pos < 4:
                delta = 1
            elif pos >= size - 3:
                delta = -1
            elif pos >= size // 2 and chance(self.rng, 0.3):
                delta = -1
            else:
                delta = 0
            if t.name in trophy_teams and pos != 0:
                delta += 1
            registry_team.reputation = int(clamp(registry_team.reputation + delta, 0, 100))

            if registry_team.is_youth or size < 4:
                continue
            if pos < moves and registry_team.league_tier > 1:
                registry_team.league_tier -= 1
                if registry_team.name == p.team.name:
                    self.emit("team", "events.promotion", team=registry_team.name, tier=registry_team.league_tier)
            elif pos >= size - moves and registry_team.league_tier < 5:
                registry_team.league_tier += 1
                if registry_team.name == p.team.name:
                    self.emit("team", "events.relegation", team=registry_team.name, tier=registry_team.league_tier)

    # -- driver --------------------------------------------------------

    def run(self) -> SeasonOutcome:
        p = self.player
        self.prepare()
        team_snapshot = replace(p.team)
        self.roll_injury()
        self.compute_playing_share()

        plans = self.play_club_season()
        self.play_international()
        table = self.decide_team_outcomes(plans)

        club = [c for c in self.competitions if c.type != "International"]
        club_matches = sum(c.matches for c in club)
        average_rating = (
            round(sum(c.rating * c.matches for c in club) / club_matches, 2) if club_matches else 0.0
        )
        stats = SeasonStats(
            matches=club_matches,
            goals=sum(c.goals for c in club),
            assists=sum(c.assists for c in club),
            clean_sheets=sum(c.clean_sheets for c in club),
            average_rating=average_rating,
        )

        self.decide_awards(average_rating)
        self.update_relationships(average_rating)
        self.handle_playing_time()
        self.handle_contract()
        self.advance_loan()

        development = run_season_development(p, self.playing_share, self.rng)
        p.potential = max(p.potential, p.overall)

        honours = len(self.trophies) * 2 + len(self.awards) * 3
        rep_delta = (p.overall - 60) / 8.0 + (3 - team_snapshot.league_tier) * 0.5 + honours
        if average_rating:
            rep_delta += average_rating - 6.8
        if p.age > 33:
            rep_delta -= p.age - 33
        p.reputation = int(clamp(round(p.reputation + rep_delta), 0, 100))
        p.market_value = _market_value(p.overall, p.age, p.contract_length)

        self.apply_world_feedback(table)
        registry_team = find_team(self.teams, p.team.name)
        if registry_team is not None:
            p.team = replace(registry_team)

        log = SeasonLog(
            season=self.season,
            age=p.age,
            team=team_snapshot,
            stats=stats,
            competitions=tuple(self.competitions),
            events=(),
            trophies=tuple(self.trophies),
            awards=tuple(self.awards),
            overall=p.overall,
            market_value=p.market_value,
        )
        self.emit_milestones(real_contribution(log))
        log = replace(log, events=tuple(self.events))

        p.agitating_for_transfer = self.agitating
        p.is_forced_to_move = self.forced
        p.current_season = self.season + 1
        return SeasonOutcome(
            state=p,
            season_log=log,
            agitating_for_transfer=self.agitating,
            is_forced_to_move=self.forced,
            world_teams=self.teams,
            development=development,
        )


def simulate_season(
    state: PlayerState,
    tactic: str,
    world_teams: Sequence[Team],
    localize: Localize | None = None,
    rng: random.Random | None = None,
) -> SeasonOutcome:
    """
    Simulate one season. ``state`` and ``world_teams`` are not modified; the outcome
    carries the new state, the season log, both transfer-pressure signals, and the
    updated team registry. ``localize(key, **params)`` only renders event text.
    """
    if state.retired:
        raise RetiredPlayerError(f"{state.name} is retired; no further seasons can be simulated")
    if tactic not in TACTICS:
        raise ValidationError(f"tactic must be one of {TACTICS}, got {tactic!r}")
    rng = rng or random.Random()
    season = _Season(
        player=copy.deepcopy(state),
        tactic=tactic,
        world_teams=copy.deepcopy(list(world_teams)),
        localize=localize or default_localize,
        rng=rng,
    )
    outcome = season.run()
    logger.info(
        "season %d simulated for %s at %s: %d matches, %d goals, %d assists (agitating=%s, forced=%s)",
        outcome.season_log.season,
        state.name,
        outcome.season_log.team.name,
        outcome.season_log.stats.matches,
        outcome.season_log.stats.goals,
        outcome.season_log.stats.assists,
        outcome.agitating_for_transfer,
        outcome.is_forced_to_move,
    )
    return outcome
