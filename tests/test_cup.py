import pytest
from conftest import record_all

from rookpairing.constants import (
    RESULT_ELIMINATED_BYE,
    RESULT_FORFEIT_WIN,
    RESULT_WIN,
    STATUS_ONGOING,
)
from rookpairing.controllers import EliminationCascade
from rookpairing.exceptions import (
    InsufficientParticipantsException,
    InvalidResultException,
    WinnerDecidedException,
)
from rookpairing.models import Match, RoundData
from rookpairing.pairing.common import add_match


@pytest.fixture
def cup(make_controller):
    """Ongoing cup with an empty hand-built round for Ann, Ben, Cal and Dee."""
    controller = make_controller(mode="cup", names=("Ann", "Ben", "Cal", "Dee"))
    tournament = controller.tournament
    tournament.status = STATUS_ONGOING
    tournament.rounds.append(RoundData(round_number=1))
    players = {p.name: p for p in tournament.players.values()}
    return controller, players


def test_knockout_until_a_winner_is_decided(make_controller):
    names = ("Ann", "Ben", "Cal", "Dee", "Eve", "Fay", "Gus", "Hal")
    controller = make_controller(mode="cup", names=names, seed=99)
    controller.start()
    tournament = controller.tournament

    boards_per_round = []
    while True:
        boards_per_round.append(len(tournament.current_round.matches))
        record_all(controller)
        try:
            controller.generate_next_round()
        except WinnerDecidedException as e:
            winner_id = e.winner_id
            break

    assert boards_per_round == [4, 2, 1]
    active = tournament.get_player_list(active_only=True)
    assert [p.id for p in active] == [winner_id]

    assert controller.end()
    assert tournament.leaderboard[0].player_id == winner_id
    assert tournament.leaderboard[0].score == 3.0


def test_odd_field_bye_goes_to_top_scorer(make_controller):
    controller = make_controller(mode="cup", names=("Ann", "Ben", "Cal"), seed=5)
    controller.start()
    tournament = controller.tournament
    first = tournament.current_round

    bye = next(m for m in first.matches if m.is_bye)
    assert bye.board_number == 1
    assert tournament.get_player(bye.player1_id).score == 1.0

    record_all(controller)
    result = controller.generate_next_round()

    assert len(result.round_data.matches) == 1
    assert not result.round_data.matches[0].is_bye
    assert len(tournament.get_player_list(active_only=True)) == 2


def test_loser_forfeits_other_open_match(cup):
    controller, players = cup
    round_data = controller.tournament.current_round
    ann_ben = add_match(round_data, players["Ann"], players["Ben"])
    ann_cal = add_match(round_data, players["Ann"], players["Cal"])

    controller.record_result(ann_ben.id, winner_id=players["Ben"].id)

    assert players["Ann"].eliminated
    assert ann_cal.result == RESULT_FORFEIT_WIN
    assert ann_cal.winner_id == players["Cal"].id
    assert players["Cal"].score == 1.0
    assert players["Cal"].wins == 1
    assert players["Ann"].losses == 1
    assert players["Cal"].matches_played == 0
    assert round_data.is_completed


def test_loser_bye_is_voided(cup):
    controller, players = cup
    round_data = controller.tournament.current_round
    ann_ben = add_match(round_data, players["Ann"], players["Ben"])
    bye = Match(player1_id=players["Ann"].id, player2_id=None, board_number=2)
    round_data.matches.append(bye)

    controller.record_result(ann_ben.id, winner_id=players["Ben"].id)

    assert bye.result == RESULT_ELIMINATED_BYE
    assert bye.winner_id is None
    assert players["Ann"].score == 0.0
    assert players["Ann"].wins == 0


def test_draw_eliminates_nobody(cup):
    controller, players = cup
    match = add_match(controller.tournament.current_round, players["Ann"], players["Ben"])

    controller.record_result(match.id, draw=True)

    assert not players["Ann"].eliminated
    assert not players["Ben"].eliminated


def test_correction_reinstates_previous_loser(cup):
    controller, players = cup
    round_data = controller.tournament.current_round
    match = add_match(round_data, players["Ann"], players["Ben"])
    add_match(round_data, players["Cal"], players["Dee"])

    controller.record_result(match.id, winner_id=players["Ann"].id)
    assert players["Ben"].eliminated

    controller.record_result(match.id, winner_id=players["Ben"].id)

    assert not players["Ben"].eliminated
    assert players["Ann"].eliminated
    assert (players["Ann"].score, players["Ben"].score) == (0.0, 1.0)


def test_forfeited_board_cannot_score_for_the_eliminated_player(cup):
    controller, players = cup
    round_data = controller.tournament.current_round
    ann_ben = add_match(round_data, players["Ann"], players["Ben"])
    ben_dee = add_match(round_data, players["Ben"], players["Dee"])

    controller.record_result(ann_ben.id, winner_id=players["Ann"].id)
    assert ben_dee.result == RESULT_FORFEIT_WIN

    with pytest.raises(InvalidResultException, match="already eliminated"):
        controller.record_result(ben_dee.id, winner_id=players["Ben"].id)
    with pytest.raises(InvalidResultException, match="already eliminated"):
        controller.record_result(ben_dee.id, draw=True)

    assert ben_dee.result == RESULT_FORFEIT_WIN
    assert ben_dee.winner_id == players["Dee"].id
    assert players["Ben"].score == 0.0
    assert players["Ben"].eliminated
    assert not players["Dee"].eliminated
    assert players["Dee"].score == 1.0


def test_loser_of_the_board_itself_may_win_it_on_correction(cup):
    controller, players = cup
    round_data = controller.tournament.current_round
    ann_ben = add_match(round_data, players["Ann"], players["Ben"])
    ben_dee = add_match(round_data, players["Ben"], players["Dee"])
    controller.record_result(ann_ben.id, winner_id=players["Ann"].id)

    controller.record_result(ann_ben.id, winner_id=players["Ben"].id)

    assert not players["Ben"].eliminated
    assert players["Ann"].eliminated
    # the forfeit awarded by the first cascade stands
    assert ben_dee.winner_id == players["Dee"].id


def test_only_real_losses_block_reinstatement(cup):
    controller, players = cup
    tournament = controller.tournament
    earlier = RoundData(round_number=1)
    lost = add_match(earlier, players["Cal"], players["Ben"])
    lost.result, lost.winner_id = RESULT_WIN, players["Cal"].id
    forfeited = add_match(earlier, players["Dee"], players["Ann"])
    forfeited.result, forfeited.winner_id = RESULT_FORFEIT_WIN, players["Dee"].id
    tournament.rounds.insert(0, earlier)

    source = Match(player1_id=players["Ann"].id, player2_id=players["Ben"].id, board_number=1)
    cascade = EliminationCascade(controller.ledger)

    assert EliminationCascade.has_lost_elsewhere(tournament, players["Ben"].id, source)
    assert not EliminationCascade.has_lost_elsewhere(tournament, players["Ann"].id, source)

    players["Ben"].eliminated = True
    players["Ann"].eliminated = True
    assert not cascade.reinstate(tournament, players["Ben"], source)
    assert cascade.reinstate(tournament, players["Ann"], source)
    assert not players["Ann"].eliminated


def test_nobody_left_to_pair(make_controller):
    controller = make_controller(mode="cup", names=("Ann", "Ben"))
    controller.start()
    for player in controller.tournament.players.values():
        player.eliminated = True
    record_all(controller)

    with pytest.raises(InsufficientParticipantsException) as excinfo:
        controller.generate_next_round()
    assert not isinstance(excinfo.value, WinnerDecidedException)
