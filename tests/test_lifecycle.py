import pytest
from conftest import record_all

from rookpairing.constants import STATUS_COMPLETED, STATUS_ONGOING, STATUS_PENDING
from rookpairing.exceptions import (
    IncompleteRoundException,
    InsufficientParticipantsException,
    MatchNotFoundException,
    PairingException,
    RoundLimitReachedException,
    TournamentStateException,
)


def test_new_tournament_is_pending(make_controller):
    controller = make_controller(names=("Ann", "Ben"))
    tournament = controller.tournament

    assert tournament.status == STATUS_PENDING
    assert tournament.id == "id-1"
    assert list(tournament.players) == ["id-2", "id-3"]
    assert tournament.rounds == []


def test_start_creates_round_one(make_controller):
    controller = make_controller(names=("Ann", "Ben", "Cal", "Dee"))

    assert controller.start() is True
    assert controller.tournament.status == STATUS_ONGOING
    assert len(controller.tournament.rounds) == 1
    assert controller.start() is False
    assert len(controller.tournament.rounds) == 1


def test_start_needs_two_players(make_controller):
    controller = make_controller(names=("Ann",))
    with pytest.raises(InsufficientParticipantsException):
        controller.start()
    assert controller.tournament.status == STATUS_PENDING


def test_team_tournament_needs_two_teams(make_controller):
    controller = make_controller(is_team_tournament=True)
    red = controller.add_team("Red")
    controller.add_player("Ann", team_id=red.id)
    controller.add_player("Ben", team_id=red.id)

    with pytest.raises(InsufficientParticipantsException):
        controller.start()
    assert controller.tournament.status == STATUS_PENDING


def test_failed_first_round_restores_pending(make_controller, monkeypatch):
    controller = make_controller(names=("Ann", "Ben"))

    def broken(tournament, pairing_type):
        raise PairingException("boom")

    monkeypatch.setattr(controller.round_manager, "generate_next_round", broken)

    with pytest.raises(PairingException):
        controller.start()
    assert controller.tournament.status == STATUS_PENDING
    assert controller.tournament.rounds == []


def test_rounds_need_an_ongoing_tournament(make_controller):
    controller = make_controller(names=("Ann", "Ben"))
    with pytest.raises(TournamentStateException):
        controller.generate_next_round()


def test_configured_round_limit(make_controller):
    controller = make_controller(names=("Ann", "Ben", "Cal", "Dee"), num_rounds=1)
    controller.start()
    record_all(controller)

    with pytest.raises(RoundLimitReachedException):
        controller.generate_next_round()


def test_results_only_for_matches_in_open_round(make_controller):
    controller = make_controller(names=("Ann", "Ben"))
    controller.start()
    with pytest.raises(MatchNotFoundException):
        controller.record_result("no-such-match", winner_id="id-2")


def test_results_need_an_ongoing_tournament(make_controller):
    controller = make_controller(names=("Ann", "Ben"))
    with pytest.raises(TournamentStateException):
        controller.record_result("anything", draw=True)


def test_end_rules(make_controller):
    controller = make_controller(names=("Ann", "Ben", "Cal", "Dee"))
    with pytest.raises(TournamentStateException):
        controller.end()

    controller.start()
    with pytest.raises(IncompleteRoundException):
        controller.end()
    assert controller.tournament.status == STATUS_ONGOING


def test_end_freezes_standings(make_controller):
    controller = make_controller(names=("Ann", "Ben", "Cal", "Dee"))
    controller.start()
    record_all(controller)
    tournament = controller.tournament

    assert controller.end() is True
    assert tournament.status == STATUS_COMPLETED
    assert tournament.completed_at is not None
    assert tournament.current_round.completed_at is not None
    assert [e.rank for e in tournament.leaderboard] == [1, 2, 3, 4]

    frozen = controller.standings()
    some_player = next(iter(tournament.players.values()))
    some_player.score += 10
    assert controller.standings() == frozen

    assert controller.end() is False


def test_completed_tournament_is_read_only(make_controller):
    controller = make_controller(names=("Ann", "Ben"))
    controller.start()
    record_all(controller)
    controller.end()

    with pytest.raises(TournamentStateException):
        controller.generate_next_round()
    with pytest.raises(TournamentStateException):
        controller.add_player("Late")
    with pytest.raises(TournamentStateException):
        controller.add_manual_pair("id-2", "id-3")


def test_listeners_hear_every_change(make_controller):
    seen = []
    controller = make_controller(names=("Ann", "Ben"), listeners=[seen.append])
    assert len(seen) == 3

    controller.start()
    record_all(controller)
    assert len(seen) == 5

    # both players already met, so no round is appended and nobody is told
    controller.generate_next_round()
    assert len(seen) == 5

    controller.end()
    assert len(seen) == 6
    assert all(t is controller.tournament for t in seen)


def test_removed_listener_is_not_called(make_controller):
    seen = []
    controller = make_controller()
    controller.add_listener(seen.append)
    controller.add_player("Ann")
    controller.remove_listener(seen.append)
    controller.add_player("Ben")
    assert len(seen) == 1
