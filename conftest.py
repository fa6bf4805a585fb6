"""
Shared fixtures: a small hand-built world and a mid-career striker.
"""
import random

import pytest

from models import PlayerState, SeasonLog, Team, CareerEvent
from simulation import CareerSave


def make_world() -> list[Team]:
    teams = [
        Team(name="Northbridge Rovers", country="England", league_tier=1, reputation=82, squad_strength=78),
        Team(name="Eastport City", country="England", league_tier=1, reputation=76, squad_strength=74),
        Team(name="Kingsford United", country="England", league_tier=1, reputation=70, squad_strength=72),
        Team(name="Westmoor Athletic", country="England", league_tier=1, reputation=66, squad_strength=70),
        Team(name="Hallam FC", country="England", league_tier=2, reputation=62, squad_strength=68),
        Team(name="Brookside Albion", country="England", league_tier=2, reputation=58, squad_strength=66),
        Team(name="Castleton Town", country="England", league_tier=4, reputation=44, squad_strength=56),
        Team(name="Millbrook Wanderers", country="England", league_tier=4, reputation=40, squad_strength=54),
        Team(
            name="Northbridge Rovers U19", country="England", league_tier=1, reputation=67,
            is_youth=True, parent_club="Northbridge Rovers", squad_strength=62,
        ),
    ]
    return teams


def make_player(**overrides) -> PlayerState:
    world = make_world()
    fields = dict(
        name="Sam Carter",
        age=22,
        position="ST",
        nationality="England",
        pace=72,
        shooting=74,
        passing=62,
        dribbling=70,
        defending=30,
        physical=66,
        potential=84,
        team=world[1],
        has_made_senior_debut=True,
        squad_status="Rotation",
        contract_length=3,
        wage=20000,
        bank_balance=500000,
        reputation=40,
        current_season=4,
    )
    fields.update(overrides)
    return PlayerState(**fields)


def make_history(team: Team, seasons: int = 0) -> list[SeasonLog]:
    history = [SeasonLog(season=0, age=16, team=team, events=(CareerEvent("academy", "Joined the academy."),))]
    for i in range(1, seasons + 1):
        history.append(SeasonLog(season=i, age=16 + i, team=team))
    return history


@pytest.fixture
def world() -> list[Team]:
    return make_world()


@pytest.fixture
def player() -> PlayerState:
    return make_player()


@pytest.fixture
def save(world) -> CareerSave:
    state = make_player(team=world[1])
    return CareerSave(state=state, history=make_history(world[1], seasons=3), world_teams=world)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
