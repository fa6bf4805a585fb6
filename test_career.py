"""
Season-cycle tests: next_season ordering, atomicity, retirement, and career start.
"""
import random

import pytest

import simulation.career as career
from db.serialize import save_to_dict
from generation import generate_world_teams
from models import (
    CareerEvent,
    RetiredPlayerError,
    SimulationError,
    SlotLimitError,
    ValidationError,
    Offer,
    SeasonLog,
    SeasonStats,
)
from models.constants import CAREER_ENDING_INJURY
from simulation import CareerSave, next_season, start_career
from simulation.career import (
    accumulate_totals,
    check_retirement,
    retirement_chance,
    retirement_target_age,
    season_finances,
)
from simulation.transfers import generate_offers, stay_at_club
from conftest import make_history, make_player


class MemoryRepository:
    def __init__(self):
        self.saved = []

    def load(self):
        return self.saved[-1] if self.saved else None

    def save(self, save):
        self.saved.append(save)


def test_start_career_in_generated_world():
    world = generate_world_teams(random.Random(5), countries=["England"])
    academy = next(t for t in world if t.is_youth)
    save = start_career("Alex Moreno", "CAM", "England", academy.name, world, rng=random.Random(5))
    assert save.state.age == 16
    assert save.state.team.name == academy.name
    assert save.state.current_season == 1
    assert len(save.history) == 1
    assert save.history[0].season == 0
    assert save.history[0].events[0].type == "academy"
    assert save.tactic == "Balanced"


def test_start_career_rejects_unknown_team():
    world = generate_world_teams(random.Random(5), countries=["Portugal"])
    with pytest.raises(ValidationError):
        start_career("Alex Moreno", "CAM", "Portugal", "Nowhere FC", world)


def test_next_season_returns_new_save_and_leaves_input(save):
    before = save_to_dict(save)
    repo = MemoryRepository()
    result = next_season(save, rng=random.Random(21), repository=repo)

    assert save_to_dict(save) == before
    new = result.save
    assert len(new.history) == len(save.history) + 1
    assert new.history[-1] == result.season_log
    assert new.state.current_season == save.state.current_season + 1
    assert new.state.total_matches >= save.state.total_matches
    assert new.state.total_goals >= save.state.total_goals
    assert result.offers_generated
    assert not result.retired
    assert repo.saved == [new]


def test_next_season_is_reproducible(save):
    a = next_season(save, rng=random.Random(99))
    b = next_season(save, rng=random.Random(99))
    assert save_to_dict(a.save) == save_to_dict(b.save)


def test_totals_come_from_real_contribution(save):
    result = next_season(save, rng=random.Random(4))
    contribution = career.real_contribution(result.season_log)
    assert result.save.state.total_matches == save.state.total_matches + contribution["matches"]
    assert result.save.state.total_goals == save.state.total_goals + contribution["goals"]


def test_first_season_training_is_free(world):
    p = make_player(current_season=1, bank_balance=0, training_focuses=["sprints", "shooting"])
    s = CareerSave(state=p, history=make_history(p.team), world_teams=world)
    result = next_season(s, rng=random.Random(8))
    assert [r.cost_total for r in result.training] == [0, 0]


def test_retired_save_cannot_advance(save):
    save.state.retire()
    with pytest.raises(RetiredPlayerError):
        next_season(save, rng=random.Random(1))


def test_bad_training_selection_propagates_unchanged(world):
    p = make_player(team=world[6], training_focuses=["sprints", "shooting", "gym"])
    s = CareerSave(state=p, history=make_history(p.team), world_teams=world)
    before = save_to_dict(s)
    repo = MemoryRepository()
    with pytest.raises(SlotLimitError):
        next_season(s, rng=random.Random(1), repository=repo)
    assert save_to_dict(s) == before
    assert repo.saved == []


def test_unexpected_failure_becomes_simulation_error(save, monkeypatch):
    def broken(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(career, "simulate_season", broken)
    before = save_to_dict(save)
    repo = MemoryRepository()
    with pytest.raises(SimulationError) as exc:
        next_season(save, rng=random.Random(1), repository=repo)
    assert isinstance(exc.value.__cause__, RuntimeError)
    assert save_to_dict(save) == before
    assert repo.saved == []


def test_expired_contract_with_pending_offers_must_be_resolved(save):
    save.state.contract_length = 0
    save.state.transfer_offers = [Offer(kind="transfer", team_name="Hallam FC", wage=30000, contract_length=2)]
    with pytest.raises(ValidationError):
        next_season(save, rng=random.Random(1))


def test_retirement_scores_and_stops_offers(save, monkeypatch):
    monkeypatch.setattr(career, "check_retirement", lambda state, log, rng: True)
    submitted = []
    result = next_season(save, rng=random.Random(2), on_retire=submitted.append)

    assert result.retired
    assert result.save.state.retired
    assert result.save.state.transfer_offers == []
    assert not result.offers_generated
    assert result.score is not None
    assert submitted == [result.leaderboard_entry]
    assert result.season_log.events[-1].type == "retirement"
    with pytest.raises(RetiredPlayerError):
        generate_offers(result.save.state, False, True, result.save.world_teams, random.Random(1))
    with pytest.raises(RetiredPlayerError):
        next_season(result.save, rng=random.Random(3))


def test_failing_leaderboard_hook_does_not_lose_the_season(save, monkeypatch):
    monkeypatch.setattr(career, "check_retirement", lambda state, log, rng: True)

    def hook(entry):
        raise OSError("disk full")

    result = next_season(save, rng=random.Random(2), on_retire=hook)
    assert result.retired


def test_career_ending_injury_forces_retirement(player):
    player.injury_type = CAREER_ENDING_INJURY
    log = SeasonLog(season=1, age=player.age, team=player.team)
    assert check_retirement(player, log, random.Random(1))


def test_young_players_never_retire_voluntarily(player):
    log = SeasonLog(season=1, age=player.age, team=player.team)
    assert not any(check_retirement(player, log, random.Random(seed)) for seed in range(50))


def test_retirement_target_age_adjustments():
    gk = make_player(position="GK", personality="Reserved", retirement_age=35, diving=60, handling=60, reflexes=60, positioning=60)
    assert retirement_target_age(gk) == 40
    cb = make_player(position="CB", personality="Reserved", retirement_age=35)
    assert retirement_target_age(cb) == 38
    capped = make_player(position="GK", retirement_age=45, diving=60, handling=60, reflexes=60, positioning=60)
    assert retirement_target_age(capped) == 47


def test_retirement_chance_rises_past_target():
    young = make_player(age=30, retirement_age=35)
    old = make_player(age=38, retirement_age=35)
    log = SeasonLog(season=1, age=30, team=young.team, stats=SeasonStats(matches=30, average_rating=7.0))
    assert retirement_chance(young, log) < retirement_chance(old, log) <= 0.98


def test_accumulate_totals_and_finances(player, world):
    log = SeasonLog(season=4, age=23, team=world[0], stats=SeasonStats(matches=30, goals=12, assists=5))
    accumulate_totals(player, log)
    assert (player.total_matches, player.total_goals, player.total_assists) == (30, 12, 5)
    assert season_finances(player) == round(20000 * 52 * 0.40)


def test_history_events_are_never_rewritten(save):
    first = next_season(save, rng=random.Random(30)).save
    second = next_season(first, rng=random.Random(31)).save
    assert second.history[:len(first.history)] == first.history
    assert all(isinstance(e, CareerEvent) for log in second.history for e in log.events)


@pytest.mark.parametrize("seed", range(6))
def test_contract_ending_with_loan_brings_offers_not_free_agency(world, seed):
    p = make_player(age=18, team=world[4], parent_team=world[1], contract_length=1, loan_seasons_remaining=1)
    s = CareerSave(state=p, history=make_history(world[4], 3), world_teams=world)
    result = next_season(s, rng=random.Random(seed))
    new = result.save.state
    if new.contract_length > 0:
        assert new.parent_team.name == "Eastport City"
        return
    assert new.team.name == "Eastport City"
    assert new.transfer_offers
    with pytest.raises(ValidationError):
        next_season(result.save, rng=random.Random(seed))
    stayed, _ = stay_at_club(new, result.save.history, 22000, 2, world_teams=world)
    assert stayed.team.name == "Eastport City"
    assert stayed.contract_length == 2
