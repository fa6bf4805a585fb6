"""
Training engine tests: slot limits, cost, effectiveness ordering, and all-or-nothing application.
"""
import random

import pytest

from models import IneligibleTrainingError, InsufficientFundsError, SlotLimitError, TrainingError
from models.training import TrainingResult
from simulation.training import (
    CLUB_TRAINING_ID,
    TrainingContext,
    apply,
    classify,
    cost_of,
    decide_auto_training,
    effectiveness_of,
    max_slots,
    plan_sessions,
    run_training,
)
from conftest import make_player, make_world


def _lower_league_player(**overrides):
    world = make_world()
    return make_player(team=world[6], **overrides)  # tier 4: facilities 2


def test_max_slots_by_facilities_and_trainer():
    assert max_slots(1, None) == 2
    assert max_slots(2, None) == 2
    assert max_slots(3, None) == 3
    assert max_slots(5, None) == 4
    assert max_slots(3, "elite") == 4
    assert max_slots(5, "worldClass") == 5
    assert max_slots(5, "basic") == 4


def test_third_focus_rejected_with_two_slots():
    p = _lower_league_player()
    before = p.to_dict()
    with pytest.raises(SlotLimitError) as exc:
        run_training(p, ["sprints", "shooting", "gym"], TrainingContext(trainer_tier=None), random.Random(1))
    assert exc.value.max_slots == 2
    assert p.to_dict() == before


def test_context_infrastructure_overrides_club():
    p = _lower_league_player()
    sessions = plan_sessions(p, ["sprints", "shooting", "gym"], TrainingContext(infrastructure_level=5))
    assert [s.session_index for s in sessions] == [0, 1, 2]


def test_ineligible_focus_rejected():
    gk = make_player(position="GK", diving=60, handling=60, reflexes=62, positioning=58)
    with pytest.raises(IneligibleTrainingError):
        plan_sessions(gk, ["shooting"])


def test_duplicate_and_unknown_focus_rejected():
    p = make_player()
    with pytest.raises(TrainingError):
        plan_sessions(p, ["sprints", "sprints"])
    with pytest.raises(TrainingError):
        plan_sessions(p, ["juggling"])


def test_first_professional_season_is_free():
    p = make_player(current_season=1, bank_balance=0)
    sessions = plan_sessions(p, ["sprints", "shooting"], TrainingContext(trainer_tier="elite"))
    assert all(cost_of(p, s) == 0 for s in sessions)
    outcome = run_training(p, ["sprints", "shooting"], TrainingContext(trainer_tier="elite"), random.Random(3))
    assert outcome.cost_total == 0
    assert outcome.state.bank_balance == 0


def test_cost_is_deterministic_and_includes_trainer_fee():
    p = make_player(current_season=5)
    plain = plan_sessions(p, ["sprints"], TrainingContext(trainer_tier=None))[0]
    coached = plan_sessions(p, ["sprints"], TrainingContext(trainer_tier="basic"))[0]
    assert cost_of(p, plain) == cost_of(p, plain)
    assert cost_of(p, coached) == cost_of(p, plain) + 2000 * coached.duration_weeks


def test_unaffordable_training_leaves_state_unchanged():
    p = make_player(current_season=3, bank_balance=0)
    before = p.to_dict()
    with pytest.raises(InsufficientFundsError):
        run_training(p, ["sprints"], TrainingContext(trainer_tier="worldClass"), random.Random(2))
    assert p.to_dict() == before


def test_marginal_effectiveness_strictly_decreasing():
    p = make_player()
    sessions = plan_sessions(p, ["sprints", "endurance", "agility", "gym"], TrainingContext(trainer_tier=None))
    effs = [effectiveness_of(p, s, 5) for s in sessions]
    assert all(a > b for a, b in zip(effs, effs[1:]))


def test_run_training_is_pure_and_reproducible():
    p = make_player()
    before = p.to_dict()
    a = run_training(p, ["sprints", "shooting"], TrainingContext(), random.Random(42))
    b = run_training(p, ["sprints", "shooting"], TrainingContext(), random.Random(42))
    assert p.to_dict() == before
    assert a.state.to_dict() == b.state.to_dict()
    assert a.state.training_focuses == ["sprints", "shooting"]
    assert a.state.bank_balance == p.bank_balance - a.cost_total


def test_extreme_intensity_raises_flag():
    p = make_player()
    out = run_training(p, ["sprints"], TrainingContext(intensity="extreme"), random.Random(5))
    assert out.state.has_flag("high_intensity_training")


def test_apply_clamps_attributes():
    p = make_player(shooting=98, bank_balance=100)
    apply(p, TrainingResult(focus="shooting", deltas={"shooting": 5, "defending": -40}, cost_total=100))
    assert p.shooting == 99
    assert p.defending == 1
    assert p.bank_balance == 0


def test_apply_checks_funds_before_mutating():
    p = make_player(bank_balance=10)
    with pytest.raises(InsufficientFundsError):
        apply(p, TrainingResult(focus="sprints", deltas={"pace": 3}, cost_total=11))
    assert p.pace == 72


def test_classify_bands():
    assert classify(1.3, 1.0) == "excellent"
    assert classify(1.15, 1.0) == "good"
    assert classify(1.0, 1.0) == "neutral"
    assert classify(0.5, 1.0) == "poor"
    assert classify(1.0, 0.0) == "neutral"


def test_auto_training_fits_slots_and_budget():
    p = make_player(current_season=6, bank_balance=400000)
    focuses, ctx = decide_auto_training(p, random.Random(9))
    sessions = plan_sessions(p, focuses, ctx)
    assert len(sessions) <= max_slots(p.team.training_facilities, ctx.trainer_tier)
    assert sum(cost_of(p, s) for s in sessions) <= p.bank_balance * 0.8


def test_auto_training_falls_back_to_club_training_when_broke():
    p = make_player(current_season=6, bank_balance=100)
    focuses, ctx = decide_auto_training(p, random.Random(9))
    assert focuses == [CLUB_TRAINING_ID]
    assert ctx.trainer_tier is None
