import pytest
from conftest import pair_key, record_all

from rookpairing.constants import STATUS_ONGOING
from rookpairing.exceptions import (
    IncompleteRoundException,
    InvalidPairingException,
    PlayerNotFoundException,
    RoundLimitReachedException,
)


@pytest.fixture
def second_round(make_controller):
    """Round 2 of a five-player Swiss where D and E were left unpaired.

    Board 1 is C's bye and board 2 is A against B.
    """
    controller = make_controller(
        names=("A", "B", "C", "D", "E"),
        ratings=(2000, 1900, 1800, 1700, 1600),
    )
    controller.tournament.status = STATUS_ONGOING
    controller.generate_next_round("points")
    record_all(controller)
    controller.generate_next_round("auto")
    players = {p.name: p for p in controller.tournament.players.values()}
    return controller, players


def test_repeat_pairing_is_allowed_with_warning(second_round):
    controller, players = second_round
    match, warnings = controller.add_manual_pair(players["D"].id, players["E"].id)

    round_data = controller.tournament.current_round
    assert round_data.round_number == 2
    assert match in round_data.matches
    assert match.board_number == 3
    assert match.is_pending
    assert warnings == ["D and E have already played each other"]


def test_idle_bye_player_can_be_paired(second_round):
    controller, players = second_round
    match, warnings = controller.add_manual_pair(players["C"].id, players["D"].id)

    assert pair_key(match) == {players["C"].id, players["D"].id}
    assert warnings == []


def test_players_in_pending_match_are_rejected(second_round):
    controller, players = second_round
    with pytest.raises(InvalidPairingException, match="already paired"):
        controller.add_manual_pair(players["B"].id, players["A"].id)
    with pytest.raises(InvalidPairingException, match="already playing"):
        controller.add_manual_pair(players["A"].id, players["D"].id)
    assert len(controller.tournament.current_round.matches) == 2


def test_invalid_players_are_rejected(second_round):
    controller, players = second_round
    with pytest.raises(InvalidPairingException):
        controller.add_manual_pair(players["D"].id, players["D"].id)
    with pytest.raises(PlayerNotFoundException):
        controller.add_manual_pair(players["D"].id, "ghost")


def test_completed_round_opens_a_new_one(make_controller):
    controller = make_controller(names=("Ann", "Ben", "Cal", "Dee"))
    controller.start()
    record_all(controller)
    tournament = controller.tournament
    ids = list(tournament.players)

    match, _ = controller.add_manual_pair(ids[0], ids[1])

    assert len(tournament.rounds) == 2
    assert tournament.current_round.round_number == 2
    assert tournament.current_round.matches == [match]
    assert match.board_number == 1
    with pytest.raises(IncompleteRoundException):
        controller.generate_next_round()


def test_new_round_respects_round_limit(make_controller):
    controller = make_controller(names=("Ann", "Ben"), num_rounds=1)
    controller.start()
    record_all(controller)
    ids = list(controller.tournament.players)

    with pytest.raises(RoundLimitReachedException):
        controller.add_manual_pair(ids[0], ids[1])
    assert len(controller.tournament.rounds) == 1


def test_eliminated_players_cannot_be_paired(make_controller):
    controller = make_controller(mode="cup", names=("Ann", "Ben", "Cal", "Dee"))
    controller.start()
    record_all(controller)
    tournament = controller.tournament
    out = next(p for p in tournament.players.values() if p.eliminated)
    still_in = next(p for p in tournament.players.values() if not p.eliminated)

    with pytest.raises(InvalidPairingException, match="eliminated"):
        controller.add_manual_pair(still_in.id, out.id)


def test_teammates_cannot_be_paired_by_hand(make_controller):
    controller = make_controller(is_team_tournament=True)
    red = controller.add_team("Red")
    blue = controller.add_team("Blue")
    ann = controller.add_player("Ann", team_id=red.id)
    ben = controller.add_player("Ben", team_id=red.id)
    controller.add_player("Cal", team_id=blue.id)
    controller.add_player("Dee", team_id=blue.id)
    controller.start()
    record_all(controller)

    with pytest.raises(InvalidPairingException, match="same team"):
        controller.add_manual_pair(ann.id, ben.id)
