"""Command-line interface for Rook Pairing.

Every subcommand loads a tournament from the JSON store, runs one operation
through the TournamentController and lets the controller's change listener
save the result. Run without arguments for an interactive shell.
"""

# Rook Pairing
# Copyright (C) 2025  Rook Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import logging
import random
import shlex
import sys
from typing import List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from rookpairing import __version__
from rookpairing.constants import (
    APP_NAME,
    PAIRING_AUTO,
    SWISS_PAIRING_TYPES,
    TOURNAMENT_MODES,
)
from rookpairing.controllers import TournamentController
from rookpairing.exceptions import (
    PlayerNotFoundException,
    RookPairingException,
    TeamNotFoundException,
    TournamentNotFoundException,
    ValidationException,
)
from rookpairing.models import Player, RoundData, Team, Tournament
from rookpairing.persistence import JsonTournamentStore
from rookpairing.utils import setup_logger

logger = setup_logger(__name__)


# ANSI color codes for terminal output
class Colors:
    OKBLUE = "\033[94m"
    OKCYAN = "\033[96m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


# Command definitions with their options, used for help and completion
COMMANDS = {
    "create": {
        "description": "Create a tournament",
        "options": {
            "<name>": "Tournament name",
            "--mode": "swiss, round-robin or cup (default: swiss)",
            "--rounds": "Fixed number of rounds",
            "--teams": "Team tournament",
            "--time-control": 'Free text such as "90+30"',
        },
    },
    "list": {"description": "List stored tournaments", "options": {}},
    "show": {
        "description": "Show players and rounds",
        "options": {"<tournament>": "Tournament id or name"},
    },
    "add-team": {
        "description": "Add a team to a team tournament",
        "options": {"<tournament>": "Tournament id or name", "<name>": "Team name"},
    },
    "rename-team": {
        "description": "Rename a team",
        "options": {
            "<tournament>": "Tournament id or name",
            "<team>": "Team id or name",
            "<name>": "New team name",
        },
    },
    "remove-team": {
        "description": "Remove a team with no players",
        "options": {"<tournament>": "Tournament id or name", "<team>": "Team id or name"},
    },
    "add-player": {
        "description": "Add a player",
        "options": {
            "<tournament>": "Tournament id or name",
            "<name>": "Player name",
            "--rating": "Rating (0-4000)",
            "--team": "Team id or name",
        },
    },
    "edit-player": {
        "description": "Change a player's name, rating or team",
        "options": {
            "<tournament>": "Tournament id or name",
            "<player>": "Player id or name",
            "--name": "New name",
            "--rating": "New rating (0-4000)",
            "--no-rating": "Clear the rating",
            "--team": "Team id or name",
            "--no-team": "Take the player off their team",
        },
    },
    "remove-player": {
        "description": "Remove a player who has not been paired",
        "options": {"<tournament>": "Tournament id or name", "<player>": "Player id or name"},
    },
    "start": {
        "description": "Start the tournament and pair round 1",
        "options": {"<tournament>": "Tournament id or name", "--seed": "Random seed"},
    },
    "next-round": {
        "description": "Pair the next round",
        "options": {
            "<tournament>": "Tournament id or name",
            "--type": "Swiss ordering: random, points or auto (default: auto)",
            "--seed": "Random seed",
        },
    },
    "manual-pair": {
        "description": "Pair two idle players in the open round",
        "options": {
            "<tournament>": "Tournament id or name",
            "<player1>": "Player id or name",
            "<player2>": "Player id or name",
        },
    },
    "result": {
        "description": "Record or correct a result in the open round",
        "options": {
            "<tournament>": "Tournament id or name",
            "<board>": "Board number",
            "<winner>": "Winning player id or name",
            "--draw": "Record a draw instead of a winner",
        },
    },
    "standings": {
        "description": "Show standings",
        "options": {"<tournament>": "Tournament id or name"},
    },
    "end": {
        "description": "End the tournament and freeze standings",
        "options": {"<tournament>": "Tournament id or name"},
    },
    "import": {
        "description": "Import a tournament JSON document",
        "options": {"<file>": "Path to the JSON file"},
    },
    "help": {
        "description": "List commands, or explain one",
        "options": {"<command>": "Command to explain"},
    },
    "exit": {"description": "Leave the interactive shell", "options": {}},
}


EXIT_WORDS = ("exit", "quit", "q")
HELP_WORDS = ("help", "/help", "?")


def print_banner():
    print(
        f"\n{Colors.OKBLUE}{Colors.BOLD}{APP_NAME} {__version__}{Colors.ENDC}\n"
        "Swiss, Round Robin and Cup tournaments from the terminal.\n\n"
        f"{Colors.BOLD}help{Colors.ENDC} lists the commands, "
        f"{Colors.BOLD}help <command>{Colors.ENDC} explains one, "
        f"{Colors.BOLD}exit{Colors.ENDC} leaves.\n"
    )


def print_help(command: Optional[str] = None):
    """Print the command overview, or the arguments of a single command."""
    if command is None or command not in COMMANDS:
        if command is not None:
            print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print(f"\n{Colors.BOLD}Commands{Colors.ENDC}")
        width = max(len(name) for name in COMMANDS) + 2
        for name, info in COMMANDS.items():
            print(f"  {Colors.OKGREEN}{name:{width}}{Colors.ENDC}{info['description']}")
        print()
        return

    info = COMMANDS[command]
    print(f"\n{Colors.BOLD}{command}{Colors.ENDC}: {info['description']}")
    for argument, description in info["options"].items():
        print(f"  {Colors.OKCYAN}{argument:18}{Colors.ENDC}{description}")
    print()


def create_completer() -> NestedCompleter:
    """Complete command names (with or without a leading slash) and their flags."""
    completions = {}
    for name, info in COMMANDS.items():
        flags = sorted(arg for arg in info["options"] if arg.startswith("--"))
        flag_completer = WordCompleter(flags) if flags else None
        completions[name] = completions[f"/{name}"] = flag_completer
    completions["/help"] = WordCompleter(sorted(COMMANDS))
    completions["help"] = WordCompleter(sorted(COMMANDS))
    return NestedCompleter.from_nested_dict(completions)


# ========== Lookups ==========


def find_tournament(store: JsonTournamentStore, ref: str) -> Tournament:
    """Load a tournament by id, falling back to a case-insensitive name match."""
    if store.exists(ref):
        return store.load(ref)
    matches = [t for t in store.list() if t.name.casefold() == ref.casefold()]
    if len(matches) > 1:
        raise ValidationException(
            f'Several tournaments are named "{ref}"; use the id instead'
        )
    if not matches:
        raise TournamentNotFoundException(f"Tournament not found: {ref}")
    return matches[0]


def find_player(tournament: Tournament, ref: str) -> Player:
    if ref in tournament.players:
        return tournament.players[ref]
    for player in tournament.players.values():
        if player.name.casefold() == ref.casefold():
            return player
    raise PlayerNotFoundException(f"Player not found: {ref}")


def find_team(tournament: Tournament, ref: str) -> Team:
    if ref in tournament.teams:
        return tournament.teams[ref]
    for team in tournament.teams.values():
        if team.name.casefold() == ref.casefold():
            return team
    raise TeamNotFoundException(f"Team not found: {ref}")


def open_controller(
    store: JsonTournamentStore, ref: str, seed: Optional[int] = None
) -> TournamentController:
    """Load a tournament and wire its controller to save on every change."""
    tournament = find_tournament(store, ref)
    return TournamentController(
        tournament, listeners=[store.save], rng=random.Random(seed)
    )


# ========== Output ==========


def format_score(score: float) -> str:
    return f"{score:g}"


def print_round(tournament: Tournament, round_data: RoundData):
    status = "completed" if round_data.is_completed else "open"
    print(f"\n{Colors.BOLD}Round {round_data.round_number}{Colors.ENDC} ({status})")
    for match in sorted(round_data.matches, key=lambda m: m.board_number):
        player1 = tournament.players.get(match.player1_id)
        name1 = player1.name if player1 else match.player1_id
        if match.is_bye:
            print(f"  Board {match.board_number:>2}: {name1} - BYE [{match.result}]")
            continue
        player2 = tournament.players.get(match.player2_id)
        name2 = player2.name if player2 else match.player2_id
        if match.result is None:
            outcome = f"{Colors.WARNING}pending{Colors.ENDC}"
        elif match.is_draw:
            outcome = "draw"
        else:
            winner = tournament.players.get(match.winner_id)
            outcome = f"{match.result}: {winner.name if winner else match.winner_id}"
        print(f"  Board {match.board_number:>2}: {name1} vs {name2} [{outcome}]")


def print_standings(controller: TournamentController):
    tournament = controller.tournament
    print(f"\n{Colors.BOLD}Standings - {tournament.name}{Colors.ENDC}")
    print(f"  {'#':>3}  {'Player':24} {'Pts':>5} {'W':>3} {'D':>3} {'L':>3} {'GP':>3}  Rating")
    for entry in controller.standings():
        rating = entry.rating if entry.rating is not None else "-"
        marker = " (out)" if entry.eliminated else ""
        print(
            f"  {entry.rank:>3}  {entry.name:24} {format_score(entry.score):>5} "
            f"{entry.wins:>3} {entry.draws:>3} {entry.losses:>3} "
            f"{entry.matches_played:>3}  {rating}{marker}"
        )
    print()


def print_warnings(warnings: List[str]):
    for warning in warnings:
        print(f"{Colors.WARNING}Warning: {warning}{Colors.ENDC}")


# ========== Commands ==========


def run_create_command(args: argparse.Namespace, store: JsonTournamentStore) -> int:
    controller = TournamentController.create(
        args.name,
        mode=args.mode,
        num_rounds=args.rounds,
        is_team_tournament=args.teams,
        time_control=args.time_control,
        listeners=[store.save],
    )
    tournament = controller.tournament
    print(
        f"{Colors.OKGREEN}Created {tournament.name} ({tournament.mode}) "
        f"with id {tournament.id}{Colors.ENDC}"
    )
    return 0


def run_list_command(args: argparse.Namespace, store: JsonTournamentStore) -> int:
    tournaments = store.list()
    if not tournaments:
        print("No tournaments stored yet.")
        return 0
    for tournament in tournaments:
        print(
            f"  {tournament.id}  {tournament.name:30} {tournament.mode:12} "
            f"{tournament.status:10} {len(tournament.players)} players, "
            f"{len(tournament.rounds)} rounds"
        )
    return 0


def run_show_command(args: argparse.Namespace, store: JsonTournamentStore) -> int:
    tournament = find_tournament(store, args.tournament)
    limit = tournament.num_rounds if tournament.num_rounds is not None else "unlimited"
    print(f"\n{Colors.BOLD}{tournament.name}{Colors.ENDC} [{tournament.id}]")
    print(f"  Mode: {tournament.mode}   Status: {tournament.status}   Rounds: {limit}")
    if tournament.config.time_control:
        print(f"  Time control: {tournament.config.time_control}")

    if tournament.is_team_tournament:
        print(f"\n{Colors.BOLD}Teams{Colors.ENDC}")
        for team in tournament.teams.values():
            print(f"  {team.name} [{team.id}]")

    print(f"\n{Colors.BOLD}Players{Colors.ENDC}")
    for player in tournament.get_player_list():
        team = tournament.team_name(player.team_id)
        details = f", {team}" if team else ""
        marker = " (eliminated)" if player.eliminated else ""
        print(f"  {player}{details}{marker} [{player.id}]")

    for round_data in tournament.rounds:
        print_round(tournament, round_data)
    print()
    return 0


def run_add_team_command(args: argparse.Namespace, store: JsonTournamentStore) -> int:
    controller = open_controller(store, args.tournament)
    team = controller.add_team(args.name)
    print(f"{Colors.OKGREEN}Added team {team.name} [{team.id}]{Colors.ENDC}")
    return 0


def run_rename_team_command(args: argparse.Namespace, store: JsonTournamentStore) -> int:
    controller = open_controller(store, args.tournament)
    team = find_team(controller.tournament, args.team)
    old_name = team.name
    team = controller.rename_team(team.id, args.name)
    print(f"{Colors.OKGREEN}Renamed team {old_name} to {team.name}{Colors.ENDC}")
    return 0


def run_remove_team_command(args: argparse.Namespace, store: JsonTournamentStore) -> int:
    controller = open_controller(store, args.tournament)
    team = controller.remove_team(find_team(controller.tournament, args.team).id)
    print(f"{Colors.OKGREEN}Removed team {team.name}{Colors.ENDC}")
    return 0


def run_add_player_command(args: argparse.Namespace, store: JsonTournamentStore) -> int:
    controller = open_controller(store, args.tournament)
    team_id = find_team(controller.tournament, args.team).id if args.team else None
    player = controller.add_player(args.name, rating=args.rating, team_id=team_id)
    print(f"{Colors.OKGREEN}Added player {player} [{player.id}]{Colors.ENDC}")
    return 0


def run_edit_player_command(args: argparse.Namespace, store: JsonTournamentStore) -> int:
    controller = open_controller(store, args.tournament)
    tournament = controller.tournament
    player = find_player(tournament, args.player)

    changes = {}
    if args.name is not None:
        changes["name"] = args.name
    if args.no_rating:
        changes["rating"] = None
    elif args.rating is not None:
        changes["rating"] = args.rating
    if args.no_team:
        changes["team_id"] = None
    elif args.team is not None:
        changes["team_id"] = find_team(tournament, args.team).id
    if not changes:
        print(f"{Colors.WARNING}Nothing to change for {player.name}{Colors.ENDC}")
        return 0

    player = controller.edit_player(player.id, **changes)
    print(f"{Colors.OKGREEN}Updated player {player} [{player.id}]{Colors.ENDC}")
    return 0


def run_remove_player_command(args: argparse.Namespace, store: JsonTournamentStore) -> int:
    controller = open_controller(store, args.tournament)
    player = controller.remove_player(find_player(controller.tournament, args.player).id)
    print(f"{Colors.OKGREEN}Removed player {player.name}{Colors.ENDC}")
    return 0


def run_start_command(args: argparse.Namespace, store: JsonTournamentStore) -> int:
    controller = open_controller(store, args.tournament, seed=args.seed)
    if not controller.start():
        print(f"{Colors.WARNING}{controller.tournament.name} has already started{Colors.ENDC}")
        return 1
    print(f"{Colors.OKGREEN}{controller.tournament.name} started{Colors.ENDC}")
    print_round(controller.tournament, controller.tournament.current_round)
    return 0


def run_next_round_command(args: argparse.Namespace, store: JsonTournamentStore) -> int:
    controller = open_controller(store, args.tournament, seed=args.seed)
    result = controller.generate_next_round(args.type)
    print_warnings(result.warnings)
    if controller.tournament.current_round is not result.round_data:
        return 1
    print_round(controller.tournament, result.round_data)
    return 0


def run_manual_pair_command(args: argparse.Namespace, store: JsonTournamentStore) -> int:
    controller = open_controller(store, args.tournament)
    tournament = controller.tournament
    player1 = find_player(tournament, args.player1)
    player2 = find_player(tournament, args.player2)
    match, warnings = controller.add_manual_pair(player1.id, player2.id)
    print_warnings(warnings)
    print(
        f"{Colors.OKGREEN}Board {match.board_number}: {player1.name} vs "
        f"{player2.name}{Colors.ENDC}"
    )
    return 0


def run_result_command(args: argparse.Namespace, store: JsonTournamentStore) -> int:
    if args.draw == bool(args.winner):
        print(f"{Colors.FAIL}Error: give either a winner or --draw{Colors.ENDC}")
        return 1

    controller = open_controller(store, args.tournament)
    tournament = controller.tournament
    round_data = tournament.current_round
    match = round_data.find_board(args.board) if round_data else None
    if match is None:
        print(f"{Colors.FAIL}Error: no board {args.board} in the open round{Colors.ENDC}")
        return 1

    winner_id = find_player(tournament, args.winner).id if args.winner else None
    controller.record_result(match.id, winner_id=winner_id, draw=args.draw)
    print_round(tournament, round_data)
    return 0


def run_standings_command(args: argparse.Namespace, store: JsonTournamentStore) -> int:
    controller = TournamentController(find_tournament(store, args.tournament))
    print_standings(controller)
    return 0


def run_end_command(args: argparse.Namespace, store: JsonTournamentStore) -> int:
    controller = open_controller(store, args.tournament)
    if not controller.end():
        print(f"{Colors.WARNING}{controller.tournament.name} has already ended{Colors.ENDC}")
        return 1
    print_standings(controller)
    return 0


def run_import_command(args: argparse.Namespace, store: JsonTournamentStore) -> int:
    tournament = store.import_file(args.file)
    print(
        f"{Colors.OKGREEN}Imported {tournament.name} with id {tournament.id}{Colors.ENDC}"
    )
    return 0


def run_command(args: argparse.Namespace, store: JsonTournamentStore) -> int:
    """Run a parsed subcommand, reporting application errors."""
    try:
        return args.func(args, store)
    except RookPairingException as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        logger.debug("Command %s failed", args.command, exc_info=True)
        return 1


# ========== Parsers ==========


def create_main_parser() -> argparse.ArgumentParser:
    """Create main argument parser."""
    parser = argparse.ArgumentParser(
        prog="rook-pairing",
        description=f"{APP_NAME}: Swiss, Round Robin and Cup tournament manager",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive mode
  rook-pairing

  # Create a Swiss tournament and register players
  rook-pairing create "Club Open" --mode swiss --rounds 5
  rook-pairing add-player "Club Open" "Magnus" --rating 2850

  # Play it
  rook-pairing start "Club Open"
  rook-pairing result "Club Open" 1 Magnus
  rook-pairing next-round "Club Open"
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--store", help="Directory holding tournaments (default: $ROOK_PAIRING_HOME or ~/.rookpairing)"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument(
        "--interactive", "-i", action="store_true", help="Start in interactive mode"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    create_parser = subparsers.add_parser("create", help="Create a tournament")
    create_parser.add_argument("name")
    create_parser.add_argument("--mode", choices=TOURNAMENT_MODES, default="swiss")
    create_parser.add_argument("--rounds", type=int)
    create_parser.add_argument("--teams", action="store_true")
    create_parser.add_argument("--time-control")
    create_parser.set_defaults(func=run_create_command)

    list_parser = subparsers.add_parser("list", help="List stored tournaments")
    list_parser.set_defaults(func=run_list_command)

    show_parser = subparsers.add_parser("show", help="Show players and rounds")
    show_parser.add_argument("tournament")
    show_parser.set_defaults(func=run_show_command)

    team_parser = subparsers.add_parser("add-team", help="Add a team")
    team_parser.add_argument("tournament")
    team_parser.add_argument("name")
    team_parser.set_defaults(func=run_add_team_command)

    rename_team_parser = subparsers.add_parser("rename-team", help="Rename a team")
    rename_team_parser.add_argument("tournament")
    rename_team_parser.add_argument("team")
    rename_team_parser.add_argument("name")
    rename_team_parser.set_defaults(func=run_rename_team_command)

    remove_team_parser = subparsers.add_parser("remove-team", help="Remove a team")
    remove_team_parser.add_argument("tournament")
    remove_team_parser.add_argument("team")
    remove_team_parser.set_defaults(func=run_remove_team_command)

    player_parser = subparsers.add_parser("add-player", help="Add a player")
    player_parser.add_argument("tournament")
    player_parser.add_argument("name")
    player_parser.add_argument("--rating", type=int)
    player_parser.add_argument("--team")
    player_parser.set_defaults(func=run_add_player_command)

    edit_parser = subparsers.add_parser("edit-player", help="Edit a player")
    edit_parser.add_argument("tournament")
    edit_parser.add_argument("player")
    edit_parser.add_argument("--name")
    rating_group = edit_parser.add_mutually_exclusive_group()
    rating_group.add_argument("--rating", type=int)
    rating_group.add_argument("--no-rating", action="store_true")
    team_group = edit_parser.add_mutually_exclusive_group()
    team_group.add_argument("--team")
    team_group.add_argument("--no-team", action="store_true")
    edit_parser.set_defaults(func=run_edit_player_command)

    remove_parser = subparsers.add_parser("remove-player", help="Remove a player")
    remove_parser.add_argument("tournament")
    remove_parser.add_argument("player")
    remove_parser.set_defaults(func=run_remove_player_command)

    start_parser = subparsers.add_parser("start", help="Start the tournament")
    start_parser.add_argument("tournament")
    start_parser.add_argument("--seed", type=int)
    start_parser.set_defaults(func=run_start_command)

    next_parser = subparsers.add_parser("next-round", help="Pair the next round")
    next_parser.add_argument("tournament")
    next_parser.add_argument("--type", choices=SWISS_PAIRING_TYPES, default=PAIRING_AUTO)
    next_parser.add_argument("--seed", type=int)
    next_parser.set_defaults(func=run_next_round_command)

    manual_parser = subparsers.add_parser("manual-pair", help="Pair two players manually")
    manual_parser.add_argument("tournament")
    manual_parser.add_argument("player1")
    manual_parser.add_argument("player2")
    manual_parser.set_defaults(func=run_manual_pair_command)

    result_parser = subparsers.add_parser("result", help="Record a result")
    result_parser.add_argument("tournament")
    result_parser.add_argument("board", type=int)
    result_parser.add_argument("winner", nargs="?")
    result_parser.add_argument("--draw", action="store_true")
    result_parser.set_defaults(func=run_result_command)

    standings_parser = subparsers.add_parser("standings", help="Show standings")
    standings_parser.add_argument("tournament")
    standings_parser.set_defaults(func=run_standings_command)

    end_parser = subparsers.add_parser("end", help="End the tournament")
    end_parser.add_argument("tournament")
    end_parser.set_defaults(func=run_end_command)

    import_parser = subparsers.add_parser("import", help="Import a JSON document")
    import_parser.add_argument("file")
    import_parser.set_defaults(func=run_import_command)

    return parser


# ========== Modes ==========


def handle_shell_line(
    line: str, parser: argparse.ArgumentParser, store: JsonTournamentStore
) -> bool:
    """Run one line typed into the interactive shell.

    Returns:
        False when the user asked to leave, True otherwise
    """
    try:
        words = shlex.split(line)
    except ValueError as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        return True
    if not words:
        return True

    command = words[0].lstrip("/") or words[0]
    if words[0] in EXIT_WORDS or command == "exit":
        return False
    if words[0] in HELP_WORDS or command == "help":
        print_help(words[1].lstrip("/") if len(words) > 1 else None)
        return True
    if command not in COMMANDS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC} (try help)")
        return True

    try:
        args = parser.parse_args([command] + words[1:])
    except SystemExit:
        # argparse has already printed the usage error
        return True
    run_command(args, store)
    return True


def run_interactive_mode(store: JsonTournamentStore) -> int:
    """Read commands from a prompt_toolkit session until the user leaves."""
    print_banner()
    session = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=Style.from_dict({"prompt": "#00aa00 bold"}),
    )
    parser = create_main_parser()

    while True:
        try:
            line = session.prompt("rook-pairing> ")
        except KeyboardInterrupt:
            print(f"{Colors.WARNING}Type exit to leave{Colors.ENDC}")
            continue
        except EOFError:
            break
        if not handle_shell_line(line, parser, store):
            break

    print(f"{Colors.OKGREEN}Bye.{Colors.ENDC}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the rook-pairing CLI."""
    parser = create_main_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    if args.verbose:
        logging.getLogger("rookpairing").setLevel(logging.DEBUG)

    store = JsonTournamentStore(args.store)

    if args.interactive or args.command is None:
        return run_interactive_mode(store)

    return run_command(args, store)


if __name__ == "__main__":
    sys.exit(main())
