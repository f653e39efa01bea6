import pytest
from conftest import record_all

from rookpairing.exceptions import (
    DuplicateNameException,
    TeamNotFoundException,
    ValidationException,
)


def test_names_are_trimmed_and_unique_ignoring_case(make_controller):
    controller = make_controller()
    player = controller.add_player("  Magnus  ", rating=2850)
    assert player.name == "Magnus"

    with pytest.raises(DuplicateNameException):
        controller.add_player("MAGNUS")
    with pytest.raises(ValidationException):
        controller.add_player("   ")


@pytest.mark.parametrize("rating", [-1, 4001, "strong"])
def test_bad_ratings_are_rejected(make_controller, rating):
    controller = make_controller()
    with pytest.raises(ValidationException):
        controller.add_player("Ann", rating=rating)
    assert controller.tournament.players == {}


def test_edit_player_keeps_omitted_fields(make_controller):
    controller = make_controller(names=("Ann", "Ben"), ratings=(1500, 1600))
    ann_id = next(iter(controller.tournament.players))

    player = controller.edit_player(ann_id, rating=1550)
    assert (player.name, player.rating) == ("Ann", 1550)

    player = controller.edit_player(ann_id, name="Anna")
    assert (player.name, player.rating) == ("Anna", 1550)

    # renaming to your own name in a different case is fine
    controller.edit_player(ann_id, name="ANNA")
    with pytest.raises(DuplicateNameException):
        controller.edit_player(ann_id, name="ben")


def test_paired_players_cannot_be_removed(make_controller):
    controller = make_controller(names=("Ann", "Ben"))
    late = controller.add_player("Cal")
    controller.remove_player(late.id)
    assert late.id not in controller.tournament.players

    controller.start()
    ann_id = next(iter(controller.tournament.players))
    with pytest.raises(ValidationException):
        controller.remove_player(ann_id)


def test_team_management(make_controller):
    controller = make_controller(is_team_tournament=True)
    red = controller.add_team("Red")
    blue = controller.add_team("Blue")

    with pytest.raises(DuplicateNameException):
        controller.add_team("red")
    with pytest.raises(DuplicateNameException):
        controller.rename_team(blue.id, "RED")
    assert controller.rename_team(blue.id, "Navy").name == "Navy"

    ann = controller.add_player("Ann", team_id=red.id)
    with pytest.raises(ValidationException, match="player\\(s\\) assigned"):
        controller.remove_team(red.id)

    controller.edit_player(ann.id, team_id=blue.id)
    controller.remove_team(red.id)
    assert list(controller.tournament.teams) == [blue.id]
    with pytest.raises(TeamNotFoundException):
        controller.add_player("Ben", team_id=red.id)


def test_teams_need_team_mode(make_controller):
    controller = make_controller()
    with pytest.raises(ValidationException):
        controller.add_team("Red")


def test_player_can_leave_their_team(make_controller):
    controller = make_controller(is_team_tournament=True)
    red = controller.add_team("Red")
    ann = controller.add_player("Ann", team_id=red.id)

    controller.edit_player(ann.id, team_id=None)

    assert ann.team_id is None


def test_roster_is_open_while_ongoing(make_controller):
    controller = make_controller(names=("Ann", "Ben", "Cal", "Dee"))
    controller.start()
    record_all(controller)

    late = controller.add_player("Eve")
    result = controller.generate_next_round()

    assert late.id in result.round_data.player_ids()
