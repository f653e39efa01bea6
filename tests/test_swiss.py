import random

import pytest
from conftest import pair_key, record_all

from rookpairing.constants import RESULT_BYE_WIN, STATUS_ONGOING
from rookpairing.controllers import ScoreLedger
from rookpairing.exceptions import InsufficientParticipantsException, PairingException
from rookpairing.models import Tournament
from rookpairing.pairing import create_swiss_pairings


def _by_name(tournament):
    return {p.name: p for p in tournament.players.values()}


def _pairs(round_data):
    return {pair_key(m) for m in round_data.matches if not m.is_bye}


@pytest.fixture
def five_rated(make_controller):
    controller = make_controller(
        names=("A", "B", "C", "D", "E"),
        ratings=(2000, 1900, 1800, 1700, 1600),
    )
    controller.tournament.status = STATUS_ONGOING
    return controller


def test_start_pairs_every_player_once(make_controller):
    controller = make_controller(names=("Ann", "Ben", "Cal", "Dee", "Eve", "Fay"))
    assert controller.start()

    round_data = controller.tournament.current_round
    seated = round_data.player_ids()
    assert round_data.round_number == 1
    assert len(round_data.matches) == 3
    assert sorted(seated) == sorted(controller.tournament.players)
    assert [m.board_number for m in round_data.matches] == [1, 2, 3]


def test_points_pairing_gives_bye_to_first_in_order(five_rated):
    result = five_rated.generate_next_round("points")
    players = _by_name(five_rated.tournament)
    boards = result.round_data.matches

    assert boards[0].is_bye
    assert result.bye_match is boards[0]
    assert boards[0].player1_id == players["A"].id
    assert boards[0].result == RESULT_BYE_WIN
    assert players["A"].score == 1.0
    assert pair_key(boards[1]) == {players["B"].id, players["C"].id}
    assert pair_key(boards[2]) == {players["D"].id, players["E"].id}
    assert result.is_complete


def test_auto_pairing_avoids_rematches_and_reports_unpaired(five_rated):
    five_rated.generate_next_round("points")
    record_all(five_rated)
    players = _by_name(five_rated.tournament)

    result = five_rated.generate_next_round("auto")
    boards = result.round_data.matches

    # A already had a bye, C is the lowest scorer without one
    assert boards[0].is_bye
    assert boards[0].player1_id == players["C"].id
    assert pair_key(boards[1]) == {players["A"].id, players["B"].id}
    # D and E met in round 1 and nobody else is left for them
    assert result.unpaired_ids == [players["D"].id, players["E"].id]
    assert len(result.warnings) == 2
    assert "remain unpaired" in result.warnings[0]
    assert five_rated.tournament.current_round is result.round_data


def test_bye_rotates_through_three_players(make_controller):
    controller = make_controller(names=("Xan", "Yul", "Zed"), seed=7)
    controller.start()
    tournament = controller.tournament

    for _ in range(2):
        record_all(controller)
        controller.generate_next_round()
    record_all(controller)

    bye_receivers = [
        m.player1_id for r in tournament.rounds for m in r.matches if m.is_bye
    ]
    assert sorted(bye_receivers) == sorted(tournament.players)
    met = {pair_key(m) for r in tournament.rounds for m in r.matches if not m.is_bye}
    assert len(met) == 3
    for player in tournament.players.values():
        assert tournament.bye_count(player.id) == 1
        assert player.matches_played == 3


def test_second_round_has_no_rematches(make_controller):
    controller = make_controller(names=("Ann", "Ben", "Cal", "Dee"), seed=3)
    controller.start()
    first = _pairs(controller.tournament.current_round)
    record_all(controller, winner="player2")

    result = controller.generate_next_round()

    assert result.is_complete
    assert not first & _pairs(result.round_data)


def test_five_player_event_from_start(make_controller):
    controller = make_controller(
        names=("A", "B", "C", "D", "E"),
        ratings=(2000, 1900, 1800, 1700, 1600),
        seed=11,
    )
    assert controller.start()
    tournament = controller.tournament
    first = tournament.current_round

    byes = [m for m in first.matches if m.is_bye]
    assert len(first.matches) == 3
    assert len(byes) == 1
    assert sorted(first.player_ids()) == sorted(tournament.players)

    record_all(controller)
    assert first.is_completed
    result = controller.generate_next_round()
    second = result.round_data

    assert tournament.current_round is second
    (bye,) = [m for m in second.matches if m.is_bye]
    assert bye.player1_id != byes[0].player1_id
    assert not _pairs(first) & _pairs(second)
    assert sorted(second.player_ids() + result.unpaired_ids) == sorted(tournament.players)


@pytest.mark.parametrize("size", [5, 7, 9])
@pytest.mark.parametrize("seed", [1, 2, 3])
def test_byes_stay_balanced_over_many_rounds(make_controller, size, seed):
    names = [f"P{i}" for i in range(1, size + 1)]
    controller = make_controller(names=names, seed=seed)
    controller.start()
    tournament = controller.tournament

    for _ in range(size):
        record_all(controller)
        counts = [tournament.bye_count(pid) for pid in tournament.players]
        assert max(counts) - min(counts) <= 1
        controller.generate_next_round()

    met = [pair_key(m) for r in tournament.rounds for m in r.matches if not m.is_bye]
    assert len(met) == len(set(met))


def test_no_possible_pairing_leaves_round_unappended(make_controller):
    controller = make_controller(names=("Ann", "Ben"))
    controller.start()
    record_all(controller)

    result = controller.generate_next_round()

    assert result.round_data.matches == []
    assert len(controller.tournament.rounds) == 1
    assert result.warnings[-1] == "No pairings could be made for round 2"


def test_team_tournament_keeps_teammates_apart(make_controller):
    for seed in range(5):
        controller = make_controller(is_team_tournament=True, seed=seed)
        red = controller.add_team("Red")
        blue = controller.add_team("Blue")
        for name, team in (("Ann", red), ("Ben", red), ("Cal", blue), ("Dee", blue)):
            controller.add_player(name, team_id=team.id)
        controller.start()

        tournament = controller.tournament
        for match in tournament.current_round.matches:
            player1 = tournament.get_player(match.player1_id)
            player2 = tournament.get_player(match.player2_id)
            assert player1.team_id != player2.team_id


def test_unknown_pairing_type_is_rejected():
    tournament = Tournament.create("Open", "swiss")
    tournament.add_player("Ann")
    tournament.add_player("Ben")
    with pytest.raises(PairingException):
        create_swiss_pairings(tournament, 1, "dutch", ScoreLedger(), random.Random(1))


def test_single_active_player_cannot_be_paired():
    tournament = Tournament.create("Open", "swiss")
    tournament.add_player("Ann")
    with pytest.raises(InsufficientParticipantsException):
        create_swiss_pairings(tournament, 1, "auto", ScoreLedger(), random.Random(1))
