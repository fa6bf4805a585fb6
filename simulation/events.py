"""
Career event text.
Engines emit events by key; ``localize(key, **params)`` turns a key into display text.
Callers may inject their own localize function; it is never used for control flow.
"""
from __future__ import annotations

from typing import Any, Callable

Localize = Callable[..., str]

EVENT_TEMPLATES: dict[str, str] = {
    "events.loan_return": "Returned to {team} after a loan spell.",
    "events.free_agent_signed": "Signed a one-year deal with {team} as a free agent.",
    "events.senior_debut": "Promoted to the senior squad at {team}.",
    "events.squad_status": "Squad status changed to {status}.",
    "events.injury": "Suffered a {severity} injury and missed {matches} matches.",
    "events.career_ending_injury": "Suffered a career-ending injury.",
    "events.trophy": "Won the {trophy} with {team}.",
    "events.international_trophy": "Won the {trophy} with {country}.",
    "events.award": "Received the {award} award.",
    "events.milestone_goals": "Reached {count} career goals.",
    "events.milestone_matches": "Reached {count} career appearances.",
    "events.low_playing_time": "Frustrated by a lack of playing time at {team}.",
    "events.agitating": "Agitating for a move away from {team}.",
    "events.forced_out": "{team} made it clear there is no future at the club.",
    "events.manager_conflict": "Clashed with the manager at {team}.",
    "events.teammate_conflict": "Fell out with a teammate at {team}.",
    "events.contract_renewed": "Extended the contract with {team} for {years} years.",
    "events.contract_expired": "Contract with {team} expired.",
    "events.promotion": "{team} won promotion to tier {tier}.",
    "events.relegation": "{team} were relegated to tier {tier}.",
    "events.call_up": "Called up by {country} for the {competition}.",
    "events.transferred": "Signed for {team} on a {years}-year contract (fee {fee}M).",
    "events.loaned": "Joined {team} on a {duration}-season loan.",
    "events.loan_conversion": "Loan move to {team} made permanent (fee {fee}M).",
    "events.stayed": "Chose to stay at {team}.",
    "events.turned_down_offer": "Turned down a move to {team}.",
    "events.retired": "Retired at {age} after {seasons} seasons.",
    "events.joined_academy": "Joined the {team} academy.",
}

TROPHY_NAMES: dict[str, str] = {
    "league": "League",
    "cup": "Cup",
    "champions_league": "Champions League",
    "europa_league": "Europa League",
    "libertadores": "Copa Libertadores",
    "copa_sudamericana": "Copa Sudamericana",
    "club_world_cup": "Club World Cup",
    "world_cup": "World Cup",
    "continental_cup": "Continental Cup",
    "nations_league": "Nations League",
    "youth_league": "Youth League",
    "youth_cup": "Youth Cup",
}

AWARD_NAMES: dict[str, str] = {
    "world_player_award": "World Player of the Year",
    "continental_player_award": "Continental Player of the Year",
    "league_player_of_year": "League Player of the Year",
    "top_scorer_award": "League Top Scorer",
    "top_assister_award": "League Top Assister",
    "best_goalkeeper_award": "Best Goalkeeper",
    "young_player_award": "Young Player of the Year",
    "team_of_the_year": "Team of the Year",
    "goal_of_the_year": "Goal of the Year",
    "world_cup_best_player": "World Cup Best Player",
}


def default_localize(key: str, **params: Any) -> str:
    template = EVENT_TEMPLATES.get(key)
    if template is None:
        return key
    return template.format(**params)

