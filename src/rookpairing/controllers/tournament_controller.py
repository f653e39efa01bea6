"""Tournament lifecycle controller.

Drives a tournament through ``pending -> ongoing -> completed`` and is the
single entry point hosts use to mutate it. Every successful mutating call
notifies the registered change listeners; presentation and persistence hang
off those notifications.
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

import random
from typing import Iterable, List, Optional, Tuple

from rookpairing.constants import (
    MIN_PLAYERS_TO_START,
    MIN_TEAMS_TO_START,
    MODE_SWISS,
    PAIRING_AUTO,
    PAIRING_RANDOM,
    STATUS_COMPLETED,
    STATUS_ONGOING,
    STATUS_PENDING,
)
from rookpairing.controllers.result_recorder import ResultRecorder
from rookpairing.controllers.round_manager import RoundManager
from rookpairing.controllers.score_ledger import ScoreLedger
from rookpairing.controllers.standings import build_standings
from rookpairing.exceptions import (
    IncompleteRoundException,
    InsufficientParticipantsException,
    TournamentStateException,
)
from rookpairing.models import (
    Match,
    PairingResult,
    Player,
    StandingsEntry,
    Team,
    Tournament,
)
from rookpairing.models.tournament import UNCHANGED
from rookpairing.type_hints import ChangeListener, IdFactory, Mode, PairingType
from rookpairing.utils import generate_id, setup_logger, utc_now

logger = setup_logger(__name__)


class TournamentController:
    """Lifecycle state machine and mutation facade for one tournament.

    Args:
        tournament: The aggregate to drive
        listeners: Callables invoked with the tournament after each change
        id_factory: Mints ids for players and teams added through the controller
        rng: Random source for shuffled pairings
    """

    def __init__(
        self,
        tournament: Tournament,
        listeners: Optional[Iterable[ChangeListener]] = None,
        id_factory: IdFactory = generate_id,
        rng: Optional[random.Random] = None,
    ):
        self.tournament = tournament
        self.listeners: List[ChangeListener] = list(listeners or [])
        self.id_factory = id_factory

        self.ledger = ScoreLedger()
        self.round_manager = RoundManager(self.ledger, rng or random.Random())
        self.result_recorder = ResultRecorder(self.ledger)

    @classmethod
    def create(
        cls,
        name: str,
        mode: Mode = MODE_SWISS,
        num_rounds: Optional[int] = None,
        is_team_tournament: bool = False,
        time_control: Optional[str] = None,
        listeners: Optional[Iterable[ChangeListener]] = None,
        id_factory: IdFactory = generate_id,
        rng: Optional[random.Random] = None,
    ) -> "TournamentController":
        """Create a pending tournament and a controller for it."""
        tournament = Tournament.create(
            name,
            mode,
            num_rounds=num_rounds,
            is_team_tournament=is_team_tournament,
            time_control=time_control,
            tournament_id=id_factory(),
        )
        controller = cls(tournament, listeners=listeners, id_factory=id_factory, rng=rng)
        controller.notify_changed()
        return controller

    # ========== Notifications ==========

    def add_listener(self, listener: ChangeListener) -> None:
        if listener not in self.listeners:
            self.listeners.append(listener)

    def remove_listener(self, listener: ChangeListener) -> None:
        if listener in self.listeners:
            self.listeners.remove(listener)

    def notify_changed(self) -> None:
        """Tell every listener the tournament changed."""
        for listener in list(self.listeners):
            listener(self.tournament)

    # ========== Lifecycle ==========

    def start(self) -> bool:
        """Move a pending tournament to ongoing and pair round 1.

        Returns:
            True if the tournament was started, False if it already had been

        Raises:
            InsufficientParticipantsException: With fewer than two active
                players, or fewer than two teams in a team tournament
        """
        tournament = self.tournament
        if not tournament.is_pending:
            logger.warning(f"{tournament.name} has already been started ({tournament.status})")
            return False

        active = tournament.get_player_list(active_only=True)
        if len(active) < MIN_PLAYERS_TO_START:
            raise InsufficientParticipantsException(
                f"At least {MIN_PLAYERS_TO_START} players are needed to start "
                f"(currently {len(active)})"
            )
        if tournament.is_team_tournament and len(tournament.teams) < MIN_TEAMS_TO_START:
            raise InsufficientParticipantsException(
                f"At least {MIN_TEAMS_TO_START} teams are needed to start a team tournament"
            )

        tournament.status = STATUS_ONGOING
        try:
            result = self.round_manager.generate_next_round(tournament, PAIRING_RANDOM)
        except Exception:
            tournament.status = STATUS_PENDING
            raise

        logger.info(
            f"Started {tournament.name} with {len(active)} players; "
            f"round 1 has {len(result.round_data.matches)} board(s)"
        )
        tournament.touch()
        self.notify_changed()
        return True

    def end(self) -> bool:
        """Complete the tournament and freeze its final standings.

        Returns:
            True if the tournament was ended, False if it already was

        Raises:
            TournamentStateException: If the tournament has not started
            IncompleteRoundException: If the open round has unrecorded matches
        """
        tournament = self.tournament
        if tournament.is_completed:
            logger.warning(f"{tournament.name} has already ended")
            return False
        if tournament.is_pending:
            raise TournamentStateException(f"{tournament.name} has not started yet")

        last_round = tournament.current_round
        if last_round is not None and not last_round.is_fully_recorded:
            raise IncompleteRoundException(
                f"Record all results of round {last_round.round_number} before ending"
            )

        now = utc_now()
        if last_round is not None and last_round.completed_at is None:
            last_round.completed_at = now
        tournament.leaderboard = build_standings(tournament.get_player_list())
        tournament.status = STATUS_COMPLETED
        tournament.completed_at = now
        tournament.touch()

        leader = tournament.leaderboard[0].name if tournament.leaderboard else "nobody"
        logger.info(f"{tournament.name} completed; first place: {leader}")
        self.notify_changed()
        return True

    # ========== Rounds and Results ==========

    def generate_next_round(self, pairing_type: PairingType = PAIRING_AUTO) -> PairingResult:
        """Pair the next round. See ``RoundManager.generate_next_round``."""
        result = self.round_manager.generate_next_round(self.tournament, pairing_type)
        if self.tournament.current_round is result.round_data:
            self.notify_changed()
        return result

    def record_result(
        self, match_id: str, winner_id: Optional[str] = None, draw: bool = False
    ) -> Match:
        """Record or correct a result. See ``ResultRecorder.record_result``."""
        match = self.result_recorder.record_result(
            self.tournament, match_id, winner_id=winner_id, draw=draw
        )
        self.notify_changed()
        return match

    def add_manual_pair(self, player1_id: str, player2_id: str) -> Tuple[Match, List[str]]:
        """Seat two idle players against each other in the open round.

        Returns:
            The new match and warnings such as a repeat pairing
        """
        match, warnings = self.round_manager.add_manual_pair(
            self.tournament, player1_id, player2_id
        )
        self.notify_changed()
        return match, warnings

    def standings(self) -> List[StandingsEntry]:
        """Frozen standings once completed, live ones before."""
        if self.tournament.status == STATUS_COMPLETED and self.tournament.leaderboard:
            return list(self.tournament.leaderboard)
        return build_standings(self.tournament.get_player_list())

    # ========== Roster ==========

    def add_team(self, name: str) -> Team:
        team = self.tournament.add_team(name, team_id=self.id_factory())
        self.notify_changed()
        return team

    def rename_team(self, team_id: str, name: str) -> Team:
        team = self.tournament.rename_team(team_id, name)
        self.notify_changed()
        return team

    def remove_team(self, team_id: str) -> Team:
        team = self.tournament.remove_team(team_id)
        self.notify_changed()
        return team

    def add_player(
        self, name: str, rating: Optional[int] = None, team_id: Optional[str] = None
    ) -> Player:
        player = self.tournament.add_player(
            name, rating=rating, team_id=team_id, player_id=self.id_factory()
        )
        self.notify_changed()
        return player

    def edit_player(
        self, player_id: str, name=UNCHANGED, rating=UNCHANGED, team_id=UNCHANGED
    ) -> Player:
        player = self.tournament.edit_player(
            player_id, name=name, rating=rating, team_id=team_id
        )
        self.notify_changed()
        return player

    def remove_player(self, player_id: str) -> Player:
        player = self.tournament.remove_player(player_id)
        self.notify_changed()
        return player
