"""
Transfer offers, acceptance, and staying at the club.

Offers are generated after a season is committed. Volume and quality scale with
the two pressure signals: a player who is agitating or forced out sees more
offers, and clubs drop their interest threshold. Accepting or staying returns a
new state and a new history; inputs are never mutated.
"""
from __future__ import annotations

import copy
import logging
import random
from typing import Sequence

from models.constants import (
    INJURY_PRONE_TRAIT,
    KEY_PLAYER_THRESHOLDS,
    ONE_CLUB_TRAIT,
    TRANSFER_OFFER_MAX_AGE,
    WAGE_BANDS_BY_TIER,
    WAGE_MAX,
    WAGE_MIN,
)
from models.errors import NegotiationRequired, RetiredPlayerError, ValidationError
from models.offer import Offer
from models.player import PlayerState
from models.season_log import CareerEvent, SeasonLog, append_event
from models.team import Team, find_team
from .events import Localize, default_localize
from .randomness import chance, clamp
from .season import expected_squad_status

logger = logging.getLogger(__name__)

# Where a role sits inside the destination tier's wage band (0 = bottom, 1 = top)
ROLE_WAGE_POSITION = {
    "Captain": 1.0,
    "Key Player": 0.85,
    "Rotation": 0.5,
    "Prospect": 0.2,
    "Reserve": 0.25,
    "Surplus": 0.1,
}
# Role order used by wage floors (higher index = bigger role)
ROLE_ORDER = ["Surplus", "Reserve", "Prospect", "Rotation", "Key Player", "Captain"]

AGENT_WAGE_BONUS = {"Super Agent": 1.18, "Good": 1.10, "Average": 1.05, "Rookie": 1.0}

# Wage floors relative to the current wage
FLOOR_MOVING_DOWN = 0.7
FLOOR_SAME_TIER = 1.0
FLOOR_MOVING_UP = 1.2

INTEREST_THRESHOLD = 45
DESPERATE_OFFERS_MEAN = 6.0
DESPERATE_OFFERS_SIGMA = 1.5
MAX_CALM_OFFERS = 5

LOAN_MAX_AGE = 23
LOAN_ELITE_OVERALL = 80

# Ambitious players resent turning down a wage this much higher than their own
BETTER_OFFER_WAGE_RATIO = 1.5

RENEWAL_MAX_YEARS = 5


# ---------------------------------------------------------------------------
# Valuation helpers
# ---------------------------------------------------------------------------

def desirability(state: PlayerState) -> float:
    """0-100: how much the market wants this player."""
    score = (state.overall - 50) * 1.6 + state.reputation * 0.3
    if state.age <= 23:
        score += max(0, state.potential - state.overall) * 0.6
    if state.age > 30:
        score -= (state.age - 30) * 4
    if state.has_trait(INJURY_PRONE_TRAIT):
        score -= 5
    return clamp(score, 0.0, 100.0)


def key_player_threshold(team: Team) -> int:
    return KEY_PLAYER_THRESHOLDS.get(team.stars, 59)


def club_wage(team: Team, status: str, overall: int) -> int:
    """Weekly wage a club pays for a role: position inside the tier band, scaled by
    club reputation and by how far the player is above the club's key-player level."""
    low, high = WAGE_BANDS_BY_TIER[team.league_tier]
    base = low + (high - low) * ROLE_WAGE_POSITION.get(status, 0.5)
    base *= 0.6 + team.reputation / 125.0
    base *= clamp(1.0 + (overall - key_player_threshold(team)) / 50.0, 0.5, 1.5)
    return int(clamp(round(base), WAGE_MIN, WAGE_MAX))


def wage_floor(state: PlayerState, team: Team, status: str) -> int:
    """Lowest wage a permanent move can offer without being a downgrade."""
    current_role = ROLE_ORDER.index(state.squad_status) if state.squad_status in ROLE_ORDER else 0
    lateral_or_up = ROLE_ORDER.index(status) >= current_role
    if lateral_or_up and team.league_tier < state.team.league_tier:
        return round(state.wage * FLOOR_MOVING_UP)
    if lateral_or_up and team.league_tier == state.team.league_tier:
        return round(state.wage * FLOOR_SAME_TIER)
    return round(state.wage * FLOOR_MOVING_DOWN)


def contract_years_for_age(age: int, rng: random.Random) -> int:
    if age >= 34:
        return rng.randint(1, 2)
    if age >= 31:
        return rng.randint(2, 3)
    if age >= 28:
        return rng.randint(3, 4)
    if age <= 21:
        return rng.randint(4, 5)
    return rng.randint(3, 5)


def _offer_status(state: PlayerState, team: Team) -> str:
    status = expected_squad_status(state, team)
    # Nobody arrives as captain
    return "Key Player" if status == "Captain" else status


def _eligible_teams(state: PlayerState, world_teams: Sequence[Team], desperate: bool) -> list[Team]:
    out = []
    parent_name = state.parent_team.name if state.parent_team is not None else None
    for team in world_teams:
        if team.name == state.team.name or team.name == parent_name:
            continue
        if team.is_youth and (state.has_made_senior_debut or state.age >= 20):
            continue
        if not desperate:
            # Clubs do not chase players well below their level, and calm players do not drop two tiers
            if state.overall < key_player_threshold(team) - 12:
                continue
            if team.league_tier > state.team.league_tier + 1:
                continue
        out.append(team)
    return out


def _interest(state: PlayerState, team: Team, market: float, rng: random.Random) -> float:
    fit = clamp(100 - abs(state.overall - key_player_threshold(team)) * 5, 0, 100)
    interest = 30 + team.reputation * 0.2 + market * 0.4 + fit * 0.3 + rng.gauss(0, 8)
    return clamp(interest, 5, 98)


def _transfer_fee(state: PlayerState, team: Team, market: float, desperate: bool, rng: random.Random) -> float:
    fee = max(state.market_value, 0.1)
    fee *= 1 + (market - 50) / 200.0
    fee *= 0.85 + team.reputation / 200.0
    if state.contract_length <= 1:
        fee *= 0.7
    if state.seasons_with_low_playing_time >= 2:
        fee *= 0.75
    if desperate:
        fee *= 0.6
    fee *= rng.uniform(0.85, 1.2)
    return round(fee, 1)


def prune_stale_offers(offers: Sequence[Offer], world_teams: Sequence[Team]) -> list[Offer]:
    """Drop offers whose club is no longer in the registry."""
    return [o for o in offers if find_team(world_teams, o.team_name) is not None]


# ---------------------------------------------------------------------------
# Offer generation
# ---------------------------------------------------------------------------

def generate_offers(
    state: PlayerState,
    agitating: bool,
    forced: bool,
    world_teams: Sequence[Team],
    rng: random.Random,
) -> list[Offer]:
    """
    Build this window's offers. Calm players may get none; agitating or forced players
    get roughly six, ranked by club interest with the interest threshold dropped.
    A forced player gets at least one offer whenever any club is eligible.
    """
    if state.retired:
        raise RetiredPlayerError(f"{state.name} is retired; no offers can be generated")
    if state.age > TRANSFER_OFFER_MAX_AGE or state.has_career_ending_injury or state.pending_loan_return:
        return []

    desperate = agitating or forced
    market = desirability(state)
    if not desperate and not chance(rng, clamp(20 + market * 0.6, 10, 85) / 100.0):
        return []

    teams = _eligible_teams(state, world_teams, desperate)
    if not teams:
        logger.debug("no eligible clubs for %s (desperate=%s)", state.name, desperate)
        return []

    ranked = sorted(
        ((_interest(state, t, market, rng), t) for t in teams),
        key=lambda pair: pair[0],
        reverse=True,
    )
    if desperate:
        count = max(1, round(rng.gauss(DESPERATE_OFFERS_MEAN, DESPERATE_OFFERS_SIGMA)))
    else:
        ranked = [pair for pair in ranked if pair[0] > INTEREST_THRESHOLD]
        count = int(clamp(market // 25 + rng.randint(0, 2), 1, MAX_CALM_OFFERS))

    offers: list[Offer] = []
    can_loan = (
        not desperate
        and state.age <= LOAN_MAX_AGE
        and state.overall < LOAN_ELITE_OVERALL
        and state.contract_length > 1
        and state.parent_team is None
    )
    for _, team in ranked[:count]:
        status = _offer_status(state, team)
        loan_p = (0.65 if team.reputation >= 85 and status == "Prospect" else 0.35) if can_loan else 0.0
        if chance(rng, loan_p):
            if team.reputation >= 80:
                contribution = 100
            elif team.reputation >= 60:
                contribution = rng.randint(80, 100)
            else:
                contribution = rng.randint(50, 90)
            offers.append(Offer(
                kind="loan",
                team_name=team.name,
                wage=state.wage,
                loan_duration=rng.randint(1, min(2, state.contract_length - 1)) if state.age < 20 else 1,
                wage_contribution=contribution,
                expected_status=status,
                issued_season=state.current_season,
            ))
            continue

        wage = club_wage(team, status, state.overall)
        wage *= AGENT_WAGE_BONUS.get(state.agent, 1.0) * rng.uniform(0.95, 1.08)
        floor = wage_floor(state, team, status)
        if wage < floor and not desperate and team.reputation < 60:
            # Small clubs cannot match the player's current terms
            continue
        wage = int(clamp(round(max(wage, floor)), WAGE_MIN, WAGE_MAX))
        offers.append(Offer(
            kind="transfer",
            team_name=team.name,
            wage=wage,
            contract_length=contract_years_for_age(state.age, rng),
            expected_status=status,
            transfer_fee=_transfer_fee(state, team, market, desperate, rng),
            issued_season=state.current_season,
        ))

    offers = prune_stale_offers(offers, world_teams)
    logger.info(
        "%d offer(s) for %s (agitating=%s, forced=%s)", len(offers), state.name, agitating, forced,
    )
    return offers


# ---------------------------------------------------------------------------
# Decisions
# ---------------------------------------------------------------------------

def _record(history: Sequence[SeasonLog], event: CareerEvent) -> list[SeasonLog]:
    if not history:
        return list(history)
    return append_event(history, -1, event)


def accept_offer(
    state: PlayerState,
    offer: Offer,
    world_teams: Sequence[Team],
    history: Sequence[SeasonLog],
    localize: Localize | None = None,
) -> tuple[PlayerState, list[SeasonLog]]:
    """Move to the offering club. Clears pending offers and the forced-to-move signal."""
    if state.retired:
        raise RetiredPlayerError(f"{state.name} is retired")
    team = find_team(world_teams, offer.team_name)
    if team is None:
        raise ValidationError(f"club {offer.team_name!r} is no longer in the registry")
    if offer.kind == "loan" and offer.loan_duration >= state.contract_length:
        raise ValidationError(
            f"a {offer.loan_duration}-season loan must end before the contract's "
            f"{state.contract_length} remaining season(s)"
        )
    localize = localize or default_localize
    new = copy.deepcopy(state)
    registered = copy.deepcopy(team)

    if offer.kind == "loan":
        # A player already on loan keeps the original parent club
        new.parent_team = new.parent_team or new.team
        new.team = registered
        new.loan_seasons_remaining = offer.loan_duration
        event = CareerEvent("loan", localize("events.loaned", team=team.name, duration=offer.loan_duration))
    else:
        conversion = state.parent_team is not None and state.team.name == team.name
        new.team = registered
        new.parent_team = None
        new.loan_seasons_remaining = 0
        new.wage = offer.wage
        new.contract_length = offer.contract_length
        key = "events.loan_conversion" if conversion else "events.transferred"
        event = CareerEvent(
            "transfer",
            localize(key, team=team.name, years=offer.contract_length, fee=f"{offer.transfer_fee:.1f}"),
        )

    new.pending_loan_return = False
    new.squad_status = offer.expected_status
    new.promised_squad_status = "Key Player" if offer.expected_status == "Key Player" else None
    new.team_chemistry = 40
    new.club_approval = 60
    new.years_at_club = 0
    new.seasons_with_low_playing_time = 0
    new.has_made_senior_debut = new.has_made_senior_debut or not team.is_youth
    new.transfer_offers = []
    new.is_forced_to_move = False
    new.agitating_for_transfer = False

    logger.info("%s accepted a %s offer from %s", state.name, offer.kind, team.name)
    return new, _record(history, event)


def _is_strictly_better(state: PlayerState, offer: Offer, world_teams: Sequence[Team]) -> bool:
    if offer.wage > state.wage * BETTER_OFFER_WAGE_RATIO:
        return True
    team = find_team(world_teams, offer.team_name)
    return team is not None and team.league_tier < state.team.league_tier


def stay_at_club(
    state: PlayerState,
    history: Sequence[SeasonLog],
    negotiated_wage: int | None = None,
    negotiated_years: int | None = None,
    world_teams: Sequence[Team] = (),
    localize: Localize | None = None,
) -> tuple[PlayerState, list[SeasonLog]]:
    """
    Turn down the pending offers and stay.

    With one year or less left (and not on loan) the stay needs negotiated terms;
    NegotiationRequired is raised without them. Morale and chemistry follow fixed
    personality rules: an Ambitious player who ignores a strictly better offer
    drops one morale step; One-Club Man gains two steps and +20 chemistry, Loyal
    one step and +10.
    """
    if state.retired:
        raise RetiredPlayerError(f"{state.name} is retired")
    localize = localize or default_localize
    on_loan = state.parent_team is not None
    if state.contract_length <= 1 and not on_loan:
        if negotiated_wage is None or negotiated_years is None:
            raise NegotiationRequired(
                f"{state.name} has {state.contract_length} year(s) left; negotiate a wage and length to stay"
            )
        new = renew_contract(state, negotiated_wage, negotiated_years)
    else:
        new = copy.deepcopy(state)

    if new.personality == "Ambitious" and any(_is_strictly_better(state, o, world_teams) for o in state.transfer_offers):
        new.update_morale("down")
    if new.has_trait(ONE_CLUB_TRAIT):
        new.update_morale("up", 2)
        new.adjust_chemistry(20)
    elif new.personality == "Loyal":
        new.update_morale("up")
        new.adjust_chemistry(10)

    new.transfer_offers = []
    new.agitating_for_transfer = False
    event = CareerEvent("stay", localize("events.stayed", team=state.team.name))
    return new, _record(history, event)


def renew_contract(
    state: PlayerState,
    negotiated_wage: int | None = None,
    negotiated_years: int | None = None,
) -> PlayerState:
    """New terms with the current club. Without negotiated values the club's standard
    renewal applies: a small raise over the role's wage and an age-based length."""
    if state.retired:
        raise RetiredPlayerError(f"{state.name} is retired")
    if state.parent_team is not None:
        raise ValidationError("a player on loan cannot renew with the borrowing club")
    if negotiated_years is None:
        if state.age >= 34:
            negotiated_years = 1
        elif state.age > 31:
            negotiated_years = 2
        else:
            negotiated_years = 3
    if negotiated_wage is None:
        negotiated_wage = max(round(state.wage * 1.02), club_wage(state.team, state.squad_status, state.overall))
    if not 1 <= negotiated_years <= RENEWAL_MAX_YEARS:
        raise ValidationError(f"contract length must be 1-{RENEWAL_MAX_YEARS} years, got {negotiated_years}")
    if not WAGE_MIN <= negotiated_wage <= WAGE_MAX:
        raise ValidationError(f"wage must be between {WAGE_MIN} and {WAGE_MAX}, got {negotiated_wage}")

    new = copy.deepcopy(state)
    new.contract_length = negotiated_years
    new.wage = int(negotiated_wage)
    new.is_forced_to_move = False
    logger.info("%s renewed with %s: %d years at %d/week", state.name, state.team.name, negotiated_years, negotiated_wage)
    return new
