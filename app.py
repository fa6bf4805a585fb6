"""
Football career simulator: Flask app.
JSON API for creating a career, configuring training and tactics, simulating seasons,
and answering transfer offers. Saves live in SQLite (db/); one save slot per session.
"""
import logging
import random
import threading

from flask import Flask, abort, jsonify, request, session

from db import (
    SqliteCareerRepository,
    get_connection,
    init_db,
    list_careers,
    load_leaderboard,
    submit_score,
)
from generation import generate_world_teams
from models import CareerError, NegotiationRequired, PersistenceError, RetiredPlayerError, SimulationError, ValidationError
from models.constants import CAREER_MODES, CLUB_COUNTRIES, INTENSITY_LEVELS, TACTICS
from simulation import (
    CareerSave,
    TrainingContext,
    accept_offer,
    next_season,
    plan_sessions,
    renew_contract,
    start_career,
    stay_at_club,
)
from simulation.randomness import season_rng, seed_rng, stable_hash
from simulation.scoring import score_career
from simulation.training import max_slots, summarize_results

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = "dev-secret-change-in-production"

DEFAULT_SLOT = "default"

# Serialize season cycles so a double-click cannot simulate the same season twice
_season_lock = threading.Lock()


def _payload() -> dict:
    """Request body as a dict (JSON or form)."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def _parse_seed(raw) -> int | None:
    if raw is None or str(raw).strip() == "":
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        return stable_hash(str(raw))  # allow string seeds (hashed)


def _optional_int(data: dict, key: str) -> int | None:
    raw = data.get(key)
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValidationError(f"{key} must be an integer, got {raw!r}")


def _repository() -> SqliteCareerRepository:
    return SqliteCareerRepository(session.get("slot", DEFAULT_SLOT))


def _require_save(repo: SqliteCareerRepository) -> CareerSave:
    save = repo.load()
    if save is None:
        abort(404, description="No career in this slot")
    return save


def _career_view(save: CareerSave) -> dict:
    state = save.state
    return {
        "player": state.to_dict(),
        "tactic": save.tactic,
        "max_training_slots": max_slots(state.team.training_facilities, state.trainer_tier),
        "history": [log.to_dict() for log in save.history],
        "offers": [o.to_dict() for o in state.transfer_offers],
        "score": score_career(state, save.history),
    }


def _pick_starting_team(world_teams, nationality: str, rng: random.Random) -> str:
    """An academy side in the player's country if there is one, otherwise any academy side."""
    youth = [t for t in world_teams if t.is_youth]
    local = [t for t in youth if t.country == nationality]
    return rng.choice(local or youth).name


@app.errorhandler(ValidationError)
def _validation_error(exc: ValidationError):
    body = {"error": str(exc)}
    if isinstance(exc, NegotiationRequired):
        body["negotiation_required"] = True
    return jsonify(body), 400


@app.errorhandler(RetiredPlayerError)
def _retired_error(exc: RetiredPlayerError):
    return jsonify({"error": str(exc), "retired": True}), 409


@app.errorhandler(SimulationError)
@app.errorhandler(PersistenceError)
def _server_error(exc: CareerError):
    return jsonify({"error": str(exc)}), 500


@app.errorhandler(404)
def _not_found(exc):
    return jsonify({"error": exc.description}), 404


@app.route("/")
def index():
    """Saved careers and the world's countries (for the creation form)."""
    return jsonify({"careers": list_careers(), "countries": sorted(CLUB_COUNTRIES)})


@app.route("/api/career", methods=["POST"])
def create_career():
    """Generate a world from the seed and start a 16-year-old in an academy side."""
    data = _payload()
    seed = _parse_seed(data.get("seed"))
    rng = seed_rng(seed)
    world_teams = generate_world_teams(rng)
    nationality = (data.get("nationality") or "England").strip()
    team_name = (data.get("team") or "").strip() or _pick_starting_team(world_teams, nationality, rng)
    try:
        save = start_career(
            name=(data.get("name") or "").strip(),
            position=data.get("position") or "ST",
            nationality=nationality,
            team_name=team_name,
            world_teams=world_teams,
            rng=rng,
            personality=data.get("personality") or None,
            career_mode=data.get("career_mode") or "tactical",
            tactic=data.get("tactic") or "Balanced",
        )
    except ValueError as e:
        raise ValidationError(str(e)) from e

    session["slot"] = (data.get("slot") or DEFAULT_SLOT).strip()
    session["seed"] = seed if seed is not None else random.getrandbits(32)
    repo = _repository()
    repo.save(save)
    logger.info("new career in slot %s: %s at %s", repo.slot, save.state.name, team_name)
    return jsonify(_career_view(save)), 201


@app.route("/api/career", methods=["GET"])
def get_career():
    return jsonify(_career_view(_require_save(_repository())))


@app.route("/api/career/slot", methods=["POST"])
def select_slot():
    """Switch the session to another saved career."""
    slot = (_payload().get("slot") or "").strip()
    if not slot:
        raise ValidationError("Missing slot")
    repo = SqliteCareerRepository(slot)
    save = _require_save(repo)
    session["slot"] = slot
    return jsonify(_career_view(save))


@app.route("/api/career/training", methods=["POST"])
def set_training():
    """Store the training selection for next season. Rejected outright if it does not fit the slots."""
    data = _payload()
    focuses = data.get("focuses") or []
    if isinstance(focuses, str):
        focuses = [f for f in focuses.split(",") if f]
    intensity = data.get("intensity") or None
    if intensity is not None and intensity not in INTENSITY_LEVELS:
        raise ValidationError(f"intensity must be one of {INTENSITY_LEVELS}")
    trainer_tier = data.get("trainer_tier") or None

    repo = _repository()
    save = _require_save(repo)
    if save.state.retired:
        raise RetiredPlayerError(f"{save.state.name} is retired")
    ctx = TrainingContext(intensity=intensity, trainer_tier=trainer_tier)
    plan_sessions(save.state, focuses, ctx)

    save.state.training_focuses = list(focuses)
    save.state.training_intensity = intensity or save.state.training_intensity
    save.state.trainer_tier = trainer_tier
    repo.save(save)
    return jsonify(_career_view(save))


@app.route("/api/career/tactic", methods=["POST"])
def set_tactic():
    tactic = _payload().get("tactic")
    if tactic not in TACTICS:
        raise ValidationError(f"tactic must be one of {TACTICS}")
    repo = _repository()
    save = _require_save(repo)
    save.tactic = tactic
    repo.save(save)
    return jsonify({"ok": True, "tactic": tactic})


@app.route("/api/career/mode", methods=["POST"])
def set_career_mode():
    mode = _payload().get("career_mode")
    if mode not in CAREER_MODES:
        raise ValidationError(f"career_mode must be one of {CAREER_MODES}")
    repo = _repository()
    save = _require_save(repo)
    save.state.career_mode = mode
    repo.save(save)
    return jsonify({"ok": True, "career_mode": mode})


@app.route("/api/season/next", methods=["POST"])
def sim_season():
    """Run one season cycle. Retired careers are submitted to the leaderboard."""
    repo = _repository()
    _season_lock.acquire()
    try:
        save = _require_save(repo)
        seed = session.get("seed")
        rng = season_rng(seed, save.state.current_season, "cycle") if seed is not None else random.Random()
        result = next_season(save, rng=rng, repository=repo, on_retire=submit_score)
    finally:
        _season_lock.release()

    body = _career_view(result.save)
    body["season"] = result.season_log.to_dict()
    body["training"] = summarize_results(result.training)
    body["retired"] = result.retired
    if result.leaderboard_entry is not None:
        body["leaderboard_entry"] = result.leaderboard_entry.to_dict()
    return jsonify(body)


@app.route("/api/offers/<int:index>/accept", methods=["POST"])
def accept(index: int):
    repo = _repository()
    save = _require_save(repo)
    offers = save.state.transfer_offers
    if not 0 <= index < len(offers):
        abort(404, description="Offer not found")
    state, history = accept_offer(save.state, offers[index], save.world_teams, save.history)
    save = CareerSave(state=state, history=history, world_teams=save.world_teams, tactic=save.tactic)
    repo.save(save)
    return jsonify(_career_view(save))


@app.route("/api/career/stay", methods=["POST"])
def stay():
    """Turn down all offers. With a year or less left, send wage and years to negotiate."""
    data = _payload()
    repo = _repository()
    save = _require_save(repo)
    state, history = stay_at_club(
        save.state,
        save.history,
        negotiated_wage=_optional_int(data, "wage"),
        negotiated_years=_optional_int(data, "years"),
        world_teams=save.world_teams,
    )
    save = CareerSave(state=state, history=history, world_teams=save.world_teams, tactic=save.tactic)
    repo.save(save)
    return jsonify(_career_view(save))


@app.route("/api/career/renew", methods=["POST"])
def renew():
    data = _payload()
    repo = _repository()
    save = _require_save(repo)
    save.state = renew_contract(save.state, _optional_int(data, "wage"), _optional_int(data, "years"))
    repo.save(save)
    return jsonify(_career_view(save))


@app.route("/api/teams")
def api_teams():
    """Clubs in the current save's world, optionally filtered by country and tier."""
    save = _require_save(_repository())
    country = request.args.get("country")
    tier = request.args.get("tier", type=int)
    teams = [
        t.to_dict() for t in save.world_teams
        if (country is None or t.country == country) and (tier is None or t.league_tier == tier)
    ]
    return jsonify({"teams": teams})


@app.route("/api/leaderboard")
def api_leaderboard():
    return jsonify({"entries": [e.to_dict() for e in load_leaderboard()]})


def _init_storage() -> None:
    conn = get_connection()
    try:
        init_db(conn)
    finally:
        conn.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    _init_storage()
    app.run(debug=True, port=5000)
