"""
Transfer tests: offer generation under pressure, accepting, staying, and renewing.
"""
import random

import pytest

from models import NegotiationRequired, Offer, RetiredPlayerError, ValidationError
from models.constants import ONE_CLUB_TRAIT
from simulation.transfers import (
    accept_offer,
    generate_offers,
    prune_stale_offers,
    renew_contract,
    stay_at_club,
)
from conftest import make_history, make_player


def _transfer(team_name="Hallam FC", wage=30000, years=3):
    return Offer(kind="transfer", team_name=team_name, wage=wage, contract_length=years, expected_status="Key Player")


def _loan(team_name="Hallam FC", duration=1):
    return Offer(kind="loan", team_name=team_name, wage=20000, loan_duration=duration, expected_status="Rotation")


@pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
def test_forced_player_always_gets_an_offer(world, seed):
    p = make_player(team=world[0], squad_status="Surplus")
    offers = generate_offers(p, agitating=False, forced=True, world_teams=world, rng=random.Random(seed))
    assert offers
    names = {t.name for t in world}
    assert all(o.team_name in names and o.team_name != p.team.name for o in offers)
    assert all(o.kind == "transfer" for o in offers)


def test_no_offers_for_retired_player(world):
    p = make_player()
    p.retire()
    with pytest.raises(RetiredPlayerError):
        generate_offers(p, False, True, world, random.Random(1))


def test_no_offers_past_max_age_or_on_loan_return(world):
    assert generate_offers(make_player(age=36), True, True, world, random.Random(1)) == []
    returning = make_player(team=world[4], parent_team=world[0], pending_loan_return=True)
    assert generate_offers(returning, True, True, world, random.Random(1)) == []


def test_senior_player_gets_no_youth_offers(world):
    p = make_player(team=world[6])
    for seed in range(5):
        offers = generate_offers(p, True, True, world, random.Random(seed))
        assert all(not o.team_name.endswith("U19") for o in offers)


def test_prune_stale_offers(world):
    offers = [_transfer(), _transfer(team_name="Gone FC")]
    assert [o.team_name for o in prune_stale_offers(offers, world)] == ["Hallam FC"]


def test_accept_transfer(world):
    p = make_player(is_forced_to_move=True, agitating_for_transfer=True)
    p.transfer_offers = [_transfer(), _loan(team_name="Brookside Albion")]
    history = make_history(p.team, seasons=2)
    before = p.to_dict()

    new, new_history = accept_offer(p, p.transfer_offers[0], world, history)
    assert new.team.name == "Hallam FC"
    assert new.wage == 30000
    assert new.contract_length == 3
    assert new.transfer_offers == []
    assert not new.is_forced_to_move
    assert not new.agitating_for_transfer
    assert new.team_chemistry == 40
    assert new.club_approval == 60
    assert new.promised_squad_status == "Key Player"
    assert new_history[-1].events[-1].type == "transfer"
    assert len(history[-1].events) == 0
    assert p.to_dict() == before


def test_accept_loan_keeps_parent_and_wage(world):
    p = make_player()
    new, _ = accept_offer(p, _loan(duration=2), world, make_history(p.team, 1))
    assert new.team.name == "Hallam FC"
    assert new.parent_team.name == p.team.name
    assert new.loan_seasons_remaining == 2
    assert new.wage == p.wage
    assert new.contract_length == p.contract_length


def test_loan_cannot_outlast_contract(world):
    p = make_player(age=18, contract_length=2)
    with pytest.raises(ValidationError):
        accept_offer(p, _loan(duration=2), world, make_history(p.team, 1))
    new, _ = accept_offer(p, _loan(duration=1), world, make_history(p.team, 1))
    assert new.loan_seasons_remaining == 1


@pytest.mark.parametrize("seed", range(10))
def test_generated_loans_end_before_the_contract(world, seed):
    p = make_player(age=18, contract_length=2, reputation=60)
    for offer in generate_offers(p, False, False, world, random.Random(seed)):
        if offer.kind == "loan":
            assert offer.loan_duration < p.contract_length


def test_second_loan_keeps_original_parent(world):
    p = make_player(team=world[4], parent_team=world[1], loan_seasons_remaining=1)
    new, _ = accept_offer(p, _loan(team_name="Brookside Albion"), world, make_history(p.team, 1))
    assert new.parent_team.name == "Eastport City"


def test_accept_offer_from_removed_club_fails(world):
    p = make_player()
    with pytest.raises(ValidationError):
        accept_offer(p, _transfer(team_name="Gone FC"), world, make_history(p.team, 1))


def test_stay_with_one_year_left_requires_terms(world):
    p = make_player(contract_length=1)
    p.transfer_offers = [_transfer()]
    with pytest.raises(NegotiationRequired):
        stay_at_club(p, make_history(p.team, 1), world_teams=world)


def test_stay_on_loan_needs_no_terms(world):
    p = make_player(team=world[4], parent_team=world[1], contract_length=1, loan_seasons_remaining=1)
    new, _ = stay_at_club(p, make_history(p.team, 1), world_teams=world)
    assert new.contract_length == 1


def test_ambitious_player_turning_down_better_offer_loses_morale(world):
    p = make_player(personality="Ambitious", contract_length=1, morale="Normal")
    p.transfer_offers = [_transfer(team_name="Northbridge Rovers", wage=45000)]
    new, history = stay_at_club(p, make_history(p.team, 1), 25000, 3, world_teams=world)
    assert new.morale == "Low"
    assert new.contract_length == 3
    assert new.wage == 25000
    assert new.transfer_offers == []
    assert history[-1].events[-1].type == "stay"


def test_loyal_and_one_club_players_grow_happier(world):
    loyal = make_player(personality="Loyal", morale="Normal", team_chemistry=50)
    new, _ = stay_at_club(loyal, make_history(loyal.team, 1), world_teams=world)
    assert new.morale == "High"
    assert new.team_chemistry == 60

    one_club = make_player(personality="Reserved", traits=[ONE_CLUB_TRAIT], morale="Normal", team_chemistry=50)
    new, _ = stay_at_club(one_club, make_history(one_club.team, 1), world_teams=world)
    assert new.morale == "Very High"
    assert new.team_chemistry == 70


def test_renew_contract(world):
    p = make_player(is_forced_to_move=True)
    new = renew_contract(p, 30000, 4)
    assert (new.wage, new.contract_length) == (30000, 4)
    assert not new.is_forced_to_move
    assert p.is_forced_to_move


def test_renew_rejects_bad_terms_and_loans(world):
    p = make_player()
    with pytest.raises(ValidationError):
        renew_contract(p, 30000, 9)
    with pytest.raises(ValidationError):
        renew_contract(p, 10, 2)
    on_loan = make_player(team=world[4], parent_team=world[1])
    with pytest.raises(ValidationError):
        renew_contract(on_loan)


def test_default_renewal_is_a_raise(world):
    p = make_player(age=33)
    new = renew_contract(p)
    assert new.contract_length == 2
    assert new.wage >= p.wage
