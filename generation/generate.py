"""
Generate the world (clubs and academy sides per country and tier) and new players.
Uses an injected random.Random for reproducibility: the same seed gives the same world.

Procedural logic:
- Each country has 3-5 league tiers of CLUBS_PER_LEAGUE clubs with [City] [Suffix] names.
- Reputation and squad strength are drawn from the tier's range, scaled by the country's league strength.
- Tier 1-2 clubs get an academy side (is_youth) that plays in the country's youth league.
- New players start at 16 with attributes shaped by the position's overall weights.
"""
from __future__ import annotations

import random
from dataclasses import replace
from itertools import product

from models import CareerEvent, PlayerState, SeasonLog, Team
from models.constants import (
    CLUB_COUNTRIES,
    CLUB_NAME_SUFFIXES,
    CLUBS_PER_LEAGUE,
    GOALKEEPER_ATTRIBUTES,
    INJURY_PRONE_TRAIT,
    OUTFIELD_ATTRIBUTES,
    PERSONALITIES,
    POSITION_OVERALL_WEIGHTS,
    POSITIONS,
    STARTING_AGE,
    TIER_REPUTATION_RANGE,
    TIER_SQUAD_STRENGTH_RANGE,
    YOUTH_ACADEMY_MAX_TIER,
    YOUTH_SUFFIX,
)

# New player: overall around 50, attributes spread by position weight
START_OVERALL_RANGE = (46, 58)
START_POTENTIAL_RANGE = (70, 94)
ATTRIBUTE_WEIGHT_SPREAD = 60
ATTRIBUTE_NOISE = 5
START_ATTRIBUTE_BOUNDS = (20, 80)
OFF_POSITION_RANGE = (25, 45)  # outfield skills of a goalkeeper

INJURY_PRONE_CHANCE = 0.1
RETIREMENT_AGE_RANGE = (33, 37)
ACADEMY_WAGE = 1000
ACADEMY_CONTRACT_YEARS = 3


def _unique_club_names(cities: tuple[str, ...], n: int, rng: random.Random, taken: set[str]) -> list[str]:
    """Generate n unique [City] [Suffix] club names not already in ``taken``."""
    pairs = list(product(cities, CLUB_NAME_SUFFIXES))
    rng.shuffle(pairs)
    names = []
    for city, suffix in pairs:
        name = f"{city} {suffix}"
        if name in taken:
            continue
        taken.add(name)
        names.append(name)
        if len(names) == n:
            break
    return names


def _scaled(lo: int, hi: int, strength: float, rng: random.Random) -> int:
    return max(1, min(99, round(rng.randint(lo, hi) * (0.85 + 0.15 * strength))))


def _academy_for(club: Team, rng: random.Random) -> Team:
    return Team(
        name=f"{club.name} {YOUTH_SUFFIX}",
        country=club.country,
        confederation=club.confederation,
        league_tier=1,
        reputation=max(0, club.reputation - 15),
        is_youth=True,
        parent_club=club.name,
        squad_strength=max(40, club.squad_strength - rng.randint(14, 20)),
        training_facilities=club.training_facilities,
    )


def generate_world_teams(rng: random.Random, countries: list[str] | None = None) -> list[Team]:
    """All clubs and academy sides. ``countries`` limits the world to a subset of CLUB_COUNTRIES."""
    selected = countries or list(CLUB_COUNTRIES)
    teams: list[Team] = []
    taken: set[str] = set()
    for country in selected:
        if country not in CLUB_COUNTRIES:
            raise ValueError(f"unknown country {country!r}")
        confederation, strength, tiers, cities = CLUB_COUNTRIES[country]
        for tier in range(1, tiers + 1):
            rep_lo, rep_hi = TIER_REPUTATION_RANGE[tier]
            str_lo, str_hi = TIER_SQUAD_STRENGTH_RANGE[tier]
            for name in _unique_club_names(cities, CLUBS_PER_LEAGUE, rng, taken):
                club = Team(
                    name=name,
                    country=country,
                    confederation=confederation,
                    league_tier=tier,
                    reputation=_scaled(rep_lo, rep_hi, strength, rng),
                    squad_strength=_scaled(str_lo, str_hi, strength, rng),
                )
                teams.append(club)
                if tier <= YOUTH_ACADEMY_MAX_TIER:
                    teams.append(_academy_for(club, rng))
    return teams


# --- New player ---

def _starting_attributes(position: str, rng: random.Random) -> dict[str, int]:
    """Attributes around a target overall; the position's heavy-weight attributes sit above it."""
    target = rng.randint(*START_OVERALL_RANGE)
    weights = POSITION_OVERALL_WEIGHTS[position]
    lo, hi = START_ATTRIBUTE_BOUNDS
    attrs: dict[str, int] = {}
    rated = GOALKEEPER_ATTRIBUTES if position == "GK" else OUTFIELD_ATTRIBUTES
    avg_weight = 1.0 / len(rated)
    for attr in rated:
        value = target + (weights.get(attr, 0.0) - avg_weight) * ATTRIBUTE_WEIGHT_SPREAD + rng.gauss(0, ATTRIBUTE_NOISE)
        attrs[attr] = int(max(lo, min(hi, round(value))))
    if position == "GK":
        for attr in OUTFIELD_ATTRIBUTES:
            attrs[attr] = rng.randint(*OFF_POSITION_RANGE)
    return attrs


def create_player(
    name: str,
    position: str,
    nationality: str,
    team: Team,
    rng: random.Random,
    personality: str | None = None,
    career_mode: str = "tactical",
    localize=None,
) -> tuple[PlayerState, list[SeasonLog]]:
    """
    A 16-year-old academy player plus the career history, whose entry 0 is the
    "joined academy" baseline. Raises ValueError for an unknown position or personality.
    """
    if position not in POSITIONS:
        raise ValueError(f"position must be one of {POSITIONS}, got {position!r}")
    if personality is None:
        personality = rng.choice(PERSONALITIES)
    elif personality not in PERSONALITIES:
        raise ValueError(f"personality must be one of {PERSONALITIES}, got {personality!r}")
    if not name.strip():
        raise ValueError("player name must not be empty")

    attrs = _starting_attributes(position, rng)
    traits = [INJURY_PRONE_TRAIT] if rng.random() < INJURY_PRONE_CHANCE else []
    state = PlayerState(
        name=name.strip(),
        age=STARTING_AGE,
        position=position,
        nationality=nationality,
        potential=rng.randint(*START_POTENTIAL_RANGE),
        personality=personality,
        traits=traits,
        retirement_age=rng.randint(*RETIREMENT_AGE_RANGE),
        team=replace(team),
        has_made_senior_debut=not team.is_youth,
        squad_status="Prospect",
        contract_length=ACADEMY_CONTRACT_YEARS,
        wage=ACADEMY_WAGE,
        reputation=5,
        career_mode=career_mode,
        **attrs,
    )
    state.potential = max(state.potential, state.overall)

    text = localize("events.joined_academy", team=team.name) if localize else f"Joined the {team.name} academy."
    baseline = SeasonLog(
        season=0,
        age=state.age,
        team=replace(team),
        events=(CareerEvent(type="academy", description=text),),
        overall=state.overall,
    )
    return state, [baseline]
