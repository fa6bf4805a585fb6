"""
Season simulator tests: purity, reproducibility, and the context rules applied before a season is played.
"""
import random

import pytest

from models import RetiredPlayerError, Team, ValidationError
from models.constants import FLAG_MANAGER_CONFLICT, FLAG_WANTS_TRANSFER
from simulation.season import expected_squad_status, simulate_season
from conftest import make_player, make_world


def test_simulate_does_not_mutate_inputs(player, world):
    state_before = player.to_dict()
    world_before = [t.to_dict() for t in world]
    simulate_season(player, "Balanced", world, rng=random.Random(7))
    assert player.to_dict() == state_before
    assert [t.to_dict() for t in world] == world_before


def test_simulate_is_reproducible(player, world):
    a = simulate_season(player, "Attacking", world, rng=random.Random(11))
    b = simulate_season(player, "Attacking", world, rng=random.Random(11))
    assert a.season_log == b.season_log
    assert a.state.to_dict() == b.state.to_dict()
    assert [t.to_dict() for t in a.world_teams] == [t.to_dict() for t in b.world_teams]


def test_season_advances_clock_and_contract(player, world):
    out = simulate_season(player, "Balanced", world, rng=random.Random(3))
    assert out.state.age == player.age + 1
    assert out.state.current_season == player.current_season + 1
    assert out.season_log.season == player.current_season
    assert out.season_log.age == out.state.age
    assert out.state.contract_length in (player.contract_length - 1, 2, 3, 4)


def test_club_stats_are_sum_of_club_competitions(player, world):
    out = simulate_season(player, "Balanced", world, rng=random.Random(5))
    club = [c for c in out.season_log.competitions if c.type != "International"]
    assert out.season_log.stats.matches == sum(c.matches for c in club)
    assert out.season_log.stats.goals == sum(c.goals for c in club)
    assert out.season_log.overall == out.state.overall


def test_signals_mirror_state(player, world):
    out = simulate_season(player, "Balanced", world, rng=random.Random(8))
    assert out.state.agitating_for_transfer == out.agitating_for_transfer
    assert out.state.is_forced_to_move == out.is_forced_to_move


def test_retired_player_cannot_play(player, world):
    player.retire()
    with pytest.raises(RetiredPlayerError):
        simulate_season(player, "Balanced", world, rng=random.Random(1))


def test_unknown_tactic_rejected(player, world):
    with pytest.raises(ValidationError):
        simulate_season(player, "Parking The Bus", world, rng=random.Random(1))


def test_youth_player_promoted_at_nineteen(world):
    youth = make_player(age=18, team=world[-1], has_made_senior_debut=False, squad_status="Prospect")
    out = simulate_season(youth, "Balanced", world, rng=random.Random(2))
    assert out.season_log.team.name == "Northbridge Rovers"
    assert out.state.has_made_senior_debut
    assert any(e.type == "senior_debut" for e in out.season_log.events)


def test_youth_season_has_no_internationals(world):
    youth = make_player(age=16, team=world[-1], has_made_senior_debut=False, squad_status="Prospect",
                        pace=40, shooting=42, passing=38, dribbling=40, physical=40)
    out = simulate_season(youth, "Balanced", world, rng=random.Random(4))
    assert out.season_log.team.is_youth
    assert all(c.type != "International" for c in out.season_log.competitions)


def test_expired_contract_without_offers_signs_free_agent_deal(world):
    p = make_player(contract_length=0, age=29)
    out = simulate_season(p, "Balanced", world, rng=random.Random(6))
    assert out.season_log.team.name in ("Castleton Town", "Millbrook Wanderers")
    signing = next(e for e in out.season_log.events if e.type == "transfer")
    assert "free agent" in signing.description
    assert out.season_log.team.name in signing.description


def test_pending_loan_return_goes_back_to_parent(world):
    p = make_player(team=world[4], parent_team=world[0], pending_loan_return=True, loan_seasons_remaining=0)
    out = simulate_season(p, "Balanced", world, rng=random.Random(9))
    assert out.season_log.team.name == "Northbridge Rovers"
    assert out.state.parent_team is None
    assert not out.state.pending_loan_return


def test_loan_ends_after_its_duration(world):
    p = make_player(team=world[4], parent_team=world[0], loan_seasons_remaining=1)
    out = simulate_season(p, "Balanced", world, rng=random.Random(10))
    assert out.state.loan_seasons_remaining == 0
    assert out.state.pending_loan_return


def test_stale_flags_lapse_and_conflicts_reset(world):
    p = make_player(current_season=6)
    p.raise_flag(FLAG_WANTS_TRANSFER, 2)
    p.raise_flag(FLAG_MANAGER_CONFLICT, 6)
    out = simulate_season(p, "Balanced", world, rng=random.Random(12))
    assert all(f.issued_season == 6 for f in out.state.event_flags)


def test_no_continental_football_outside_known_confederations():
    far = Team(name="Harbour City", country="Japan", confederation="AFC", league_tier=1, reputation=90, squad_strength=80)
    rival = Team(name="Bay United", country="Japan", confederation="AFC", league_tier=1, reputation=70, squad_strength=72)
    p = make_player(team=far, nationality="Japan")
    out = simulate_season(p, "Balanced", [far, rival], rng=random.Random(13))
    assert all(c.type != "Continental" for c in out.season_log.competitions)


def test_expected_squad_status():
    world = make_world()
    star = make_player(pace=95, shooting=95, passing=90, dribbling=95, physical=90)
    assert expected_squad_status(star, world[6]) == "Key Player"
    assert expected_squad_status(star, world[-1]) == "Prospect"
    weak = make_player(age=27, pace=40, shooting=40, passing=40, dribbling=40, physical=40)
    assert expected_squad_status(weak, world[0]) == "Surplus"


@pytest.mark.parametrize("seed", range(8))
def test_contract_expiring_during_loan_is_settled_with_parent_club(world, seed):
    p = make_player(age=18, team=world[4], parent_team=world[1], contract_length=1, loan_seasons_remaining=1)
    out = simulate_season(p, "Balanced", world, rng=random.Random(seed))
    s = out.state
    types = [e.type for e in out.season_log.events]
    assert out.season_log.team.name == "Hallam FC"
    if s.contract_length == 0:
        assert out.is_forced_to_move
        assert s.team.name == "Eastport City"
        assert s.parent_team is None
        assert not s.pending_loan_return
        assert "contract_expired" in types and "loan_return" in types
    else:
        assert "contract" in types
        assert s.parent_team.name == "Eastport City"
        assert s.pending_loan_return
