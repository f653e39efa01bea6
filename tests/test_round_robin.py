import itertools

import pytest
from conftest import pair_key, record_all

from rookpairing.constants import STATUS_ONGOING
from rookpairing.controllers import RoundManager
from rookpairing.exceptions import IncompleteRoundException, RoundLimitReachedException
from rookpairing.pairing.round_robin import (
    advance_seating,
    initial_seating,
    round_robin_round_count,
    seat_pairs,
)


def _play_out(controller):
    controller.start()
    record_all(controller)
    while True:
        try:
            controller.generate_next_round()
        except RoundLimitReachedException:
            return
        record_all(controller)


def test_seat_pairs_and_rotation():
    seating = ["a", "b", "c", "d", "e", None]
    assert seat_pairs(seating) == [("a", "b"), ("c", None), ("d", "e")]
    assert advance_seating(seating) == ["a", None, "b", "c", "d", "e"]


def test_four_players_meet_everyone_once(make_controller):
    controller = make_controller(mode="round-robin", names=("Ann", "Ben", "Cal", "Dee"))
    _play_out(controller)
    tournament = controller.tournament

    assert len(tournament.rounds) == 3
    pairs = [pair_key(m) for r in tournament.rounds for m in r.matches]
    expected = {frozenset(p) for p in itertools.combinations(tournament.players, 2)}
    assert len(pairs) == 6
    assert set(pairs) == expected
    assert all(p.matches_played == 3 for p in tournament.players.values())


def test_odd_field_gives_each_player_one_bye(make_controller):
    controller = make_controller(
        mode="round-robin", names=("Ann", "Ben", "Cal", "Dee", "Eve")
    )
    _play_out(controller)
    tournament = controller.tournament

    assert len(tournament.rounds) == 5
    for round_data in tournament.rounds:
        assert sum(1 for m in round_data.matches if m.is_bye) == 1
        assert len(round_data.matches) == 3
    real_pairs = {pair_key(m) for r in tournament.rounds for m in r.matches if not m.is_bye}
    assert len(real_pairs) == 10
    assert all(tournament.bye_count(pid) == 1 for pid in tournament.players)


def test_configured_limit_below_cycle_wins(make_controller):
    controller = make_controller(
        mode="round-robin", names=("Ann", "Ben", "Cal", "Dee"), num_rounds=2
    )
    assert RoundManager.round_limit(controller.tournament) == 2
    _play_out(controller)
    assert len(controller.tournament.rounds) == 2


def test_configured_limit_above_cycle_is_capped(make_controller):
    controller = make_controller(mode="round-robin", names=("Ann", "Ben", "Cal"), num_rounds=10)
    assert round_robin_round_count(controller.tournament) == 3
    assert RoundManager.round_limit(controller.tournament) == 3


def test_next_round_waits_for_results(make_controller):
    controller = make_controller(mode="round-robin", names=("Ann", "Ben", "Cal", "Dee"))
    controller.start()
    with pytest.raises(IncompleteRoundException):
        controller.generate_next_round()


def test_seating_is_fixed_by_first_round(make_controller):
    controller = make_controller(mode="round-robin", names=("Ann", "Ben", "Cal", "Dee"))
    controller.start()
    tournament = controller.tournament
    assert tournament.rr_seating is not None
    original = initial_seating(list(tournament.players.values()))
    assert tournament.rr_seating == advance_seating(original)

    late = controller.add_player("Late")
    record_all(controller)
    result = controller.generate_next_round()

    assert late.id not in result.round_data.player_ids()
    assert round_robin_round_count(tournament) == 3


def test_teammates_are_paired_with_a_warning(make_controller):
    controller = make_controller(mode="round-robin", is_team_tournament=True)
    red = controller.add_team("Red")
    blue = controller.add_team("Blue")
    for name, team in (("Ann", red), ("Ben", red), ("Cal", blue), ("Dee", blue)):
        controller.add_player(name, team_id=team.id)
    controller.tournament.status = STATUS_ONGOING

    result = controller.generate_next_round()

    # seat 0 meets seat 1 in round 1: Ann and Ben are both on Red
    assert len(result.round_data.matches) == 2
    assert any("same team" in w for w in result.warnings)
    assert controller.tournament.current_round is result.round_data
