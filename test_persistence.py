"""
Persistence tests: save serialization, the SQLite repository, and the stored leaderboard.
Each test uses its own temp DB so the real save is never touched.
"""
import json
import random

import pytest

from db.operations import (
    SqliteCareerRepository,
    backfill_leaderboard,
    list_careers,
    load_leaderboard,
    submit_score,
)
from db.schema import get_connection, init_db
from db.serialize import dumps, loads, save_from_dict, save_to_dict
from models import CompetitionRecord, LeaderboardEntry, Offer, PersistenceError, SeasonLog, SeasonStats
from simulation import next_season
from conftest import make_history


@pytest.fixture
def conn(tmp_path):
    c = get_connection(tmp_path / "test_careers.db")
    init_db(c)
    yield c
    c.close()


def _rich_save(save):
    save.state.raise_flag("wants_transfer", save.state.current_season)
    save.state.trophies.add("cup")
    save.state.awards.add("young_player_award")
    save.state.transfer_offers = [
        Offer(kind="loan", team_name="Hallam FC", wage=20000, loan_duration=1, wage_contribution=80),
    ]
    save.history.append(SeasonLog(
        season=4, age=22, team=save.state.team,
        stats=SeasonStats(matches=31, goals=11, assists=6, average_rating=7.1),
        competitions=(CompetitionRecord("League", "League", matches=31, goals=11, assists=6, rating=7.1),),
        trophies=("cup",),
        awards=("young_player_award",),
    ))
    return save


def test_save_round_trip(save):
    save = _rich_save(save)
    assert save_from_dict(save_to_dict(save)) == save
    assert loads(dumps(save)) == save


def test_serialized_form_is_plain_json(save):
    data = json.loads(dumps(_rich_save(save)))
    assert data["version"] == 1
    assert isinstance(data["history"][-1]["competitions"], list)
    assert data["state"]["event_flags"][0]["issued_season"] == save.state.current_season


def test_unreadable_saves_raise_persistence_error(save):
    with pytest.raises(PersistenceError):
        loads("{not json")
    with pytest.raises(PersistenceError):
        loads("[1, 2]")
    data = save_to_dict(save)
    data["version"] = 99
    with pytest.raises(PersistenceError):
        save_from_dict(data)
    data = save_to_dict(save)
    del data["state"]
    with pytest.raises(PersistenceError):
        save_from_dict(data)


def test_repository_save_and_load(conn, save):
    repo = SqliteCareerRepository("slot-a", conn)
    assert repo.load() is None
    repo.save(save)
    assert repo.load() == save

    save.tactic = "Counter"
    repo.save(save)
    assert repo.load().tactic == "Counter"
    assert conn.execute("SELECT COUNT(*) FROM careers").fetchone()[0] == 1

    repo.delete()
    assert repo.load() is None


def test_slots_are_independent(conn, save):
    SqliteCareerRepository("one", conn).save(save)
    assert SqliteCareerRepository("two", conn).load() is None
    slots = list_careers(conn)
    assert [s["slot"] for s in slots] == ["one"]
    assert slots[0]["player_name"] == save.state.name
    assert slots[0]["retired"] is False


def test_next_season_persists_through_repository(conn, save):
    repo = SqliteCareerRepository("cycle", conn)
    result = next_season(save, rng=random.Random(17), repository=repo)
    assert repo.load() == result.save


def test_init_db_creates_careers_with_retired_column(conn, save):
    cols = {row[1] for row in conn.execute("PRAGMA table_info(careers)").fetchall()}
    assert {"slot", "player_name", "season", "payload", "retired", "updated_at"} <= cols
    save.state.retire()
    SqliteCareerRepository("done", conn).save(save)
    assert list_careers(conn)[0]["retired"] is True
    init_db(conn)
    assert len(list_careers(conn)) == 1


def test_submit_score_and_load_leaderboard(conn):
    submit_score(LeaderboardEntry(name="A", score=9000, goals=100), conn)
    submit_score(LeaderboardEntry(name="B", score=12000, goals=40), conn)
    board = submit_score(LeaderboardEntry(name="A", score=15000, goals=120), conn)
    assert [(e.name, e.score) for e in board] == [("A", 15000), ("B", 12000)]
    assert load_leaderboard(conn) == board


def test_backfill_recomputes_totals(conn, world):
    submit_score(LeaderboardEntry(name="Sam Carter", score=8000, matches=1, goals=999), conn)
    history = make_history(world[0]) + [
        SeasonLog(season=1, age=17, team=world[0], stats=SeasonStats(matches=28, goals=7, assists=2)),
        SeasonLog(season=2, age=18, team=world[-1], stats=SeasonStats(matches=30, goals=30)),
    ]
    assert backfill_leaderboard("Sam Carter", history, conn)
    entry = load_leaderboard(conn)[0]
    assert (entry.matches, entry.goals, entry.assists) == (28, 7, 2)
    assert not backfill_leaderboard("Nobody", history, conn)
