"""
Career score, tier, real totals, and leaderboard merging.
"""
import pytest

from models import CompetitionRecord, LeaderboardEntry, SeasonLog, SeasonStats
from simulation.scoring import (
    build_leaderboard_entry,
    career_tier,
    merge_leaderboard,
    real_totals,
    refresh_entry_totals,
    score_career,
)
from conftest import make_history, make_player, make_world

_WEAK = dict(pace=40, shooting=40, passing=40, dribbling=40, defending=40, physical=40,
             potential=50, reputation=0, age=16)


def test_each_goal_adds_fifteen(player):
    history = make_history(player.team, 2)
    base = score_career(player, history)
    player.total_goals += 1
    assert score_career(player, history) - base == 15


@pytest.mark.parametrize("market_value", [0.1, 0.3, 2.5, 12.7])
def test_goal_adds_fifteen_with_fractional_market_value(market_value):
    p = make_player(market_value=market_value)
    history = make_history(p.team, 1)
    base = score_career(p, history)
    p.total_goals += 1
    assert score_career(p, history) - base == 15
    p.total_assists += 1
    assert score_career(p, history) - base == 25


def test_score_weights():
    p = make_player()
    h = make_history(p.team)
    base = score_career(p, h)
    p.trophies.add("league")
    assert score_career(p, h) - base == 1000
    p.awards.add("world_player_award")
    assert score_career(p, h) - base == 7000
    p.age += 1
    assert score_career(p, h) - base == 7050


def test_score_is_pure(player):
    history = make_history(player.team, 3)
    before = player.to_dict()
    assert score_career(player, history) == score_career(player, history)
    assert player.to_dict() == before


def test_weak_career_is_journeyman():
    p = make_player(**_WEAK)
    assert score_career(p, []) == 40 * 50 + 50 * 20 + 2 * 50
    assert career_tier(p, []) == "Journeyman"


def test_peak_overall_alone_reaches_a_tier():
    p = make_player(peak_overall=90, **_WEAK)
    assert career_tier(p, []) == "Legend"


def test_real_totals_skip_baseline_youth_and_friendlies():
    world = make_world()
    senior, youth = world[0], world[-1]
    baseline = SeasonLog(season=0, age=16, team=senior, stats=SeasonStats(matches=10, goals=10))
    youth_season = SeasonLog(season=1, age=17, team=youth, stats=SeasonStats(matches=30, goals=25))
    senior_season = SeasonLog(
        season=2, age=18, team=senior,
        stats=SeasonStats(matches=20, goals=6, assists=3),
        competitions=(
            CompetitionRecord("Friendly", "International", matches=2, goals=2),
            CompetitionRecord("Nations League", "International", matches=4, goals=1),
        ),
    )
    totals = real_totals([baseline, youth_season, senior_season])
    assert totals == {"matches": 24, "goals": 7, "assists": 3, "clean_sheets": 0}


def test_leaderboard_entry_counts_honours(player):
    player.trophies.add("league", 2)
    player.awards.add("team_of_the_year")
    entry = build_leaderboard_entry(player, make_history(player.team, 1))
    assert entry.trophies == 2
    assert entry.awards == 1
    assert entry.name == player.name
    assert entry.score == score_career(player, make_history(player.team, 1))


def _entry(name, score, **stats):
    return LeaderboardEntry(name=name, score=score, **stats)


def test_merge_keeps_union_of_top_per_criterion():
    everywhere = _entry("A", 100, goals=1, assists=1, matches=1, clean_sheets=1, trophies=1, awards=1)
    scorer = _entry("C", 10, goals=500)
    newcomer = _entry("D", 50)
    board = merge_leaderboard([everywhere, scorer], newcomer, top_n=1)
    assert [e.name for e in board] == ["A", "C"]


def test_merge_replaces_same_name_and_sorts():
    board = merge_leaderboard([_entry("A", 100), _entry("B", 80)], _entry("A", 50))
    assert [(e.name, e.score) for e in board] == [("B", 80), ("A", 50)]


def test_refresh_entry_totals(player):
    world = make_world()
    history = make_history(world[0]) + [
        SeasonLog(season=1, age=17, team=world[0], stats=SeasonStats(matches=30, goals=9, assists=4)),
    ]
    stale = _entry(player.name, 1234, goals=999)
    fresh = refresh_entry_totals(stale, history)
    assert (fresh.matches, fresh.goals, fresh.assists) == (30, 9, 4)
    assert fresh.score == 1234
