"""Round management for tournaments.

This module handles round-related operations: checking that a round may be
generated, dispatching to the pairing algorithm of the tournament's mode,
appending the result, and inserting manual pairings into the open round.
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
from typing import List, Optional, Tuple

from rookpairing.constants import PAIRING_AUTO
from rookpairing.controllers.score_ledger import ScoreLedger
from rookpairing.exceptions import (
    IncompleteRoundException,
    InvalidPairingException,
    RoundLimitReachedException,
    TournamentStateException,
)
from rookpairing.models import Match, PairingResult, RoundData, Tournament
from rookpairing.pairing import (
    create_cup_pairings,
    create_round_robin_pairings,
    create_swiss_pairings,
    round_robin_round_count,
)
from rookpairing.pairing.common import add_match
from rookpairing.type_hints import PairingType
from rookpairing.utils import setup_logger

logger = setup_logger(__name__)


class RoundManager:
    """Manages round progression and pairing generation for tournaments.

    This class is responsible for:
    - Enforcing when a new round may be created
    - Generating pairings with the tournament's pairing system
    - Appending rounds to the tournament
    - Adding manual pairings to the open round
    """

    def __init__(self, ledger: Optional[ScoreLedger] = None, rng: Optional[random.Random] = None):
        self.ledger = ledger or ScoreLedger()
        self.rng = rng or random.Random()

    @staticmethod
    def round_limit(tournament: Tournament) -> Optional[int]:
        """Maximum number of rounds, or None when unlimited.

        A round robin never runs longer than its full cycle.
        """
        limit = tournament.num_rounds
        if tournament.is_round_robin:
            cycle = round_robin_round_count(tournament)
            limit = cycle if limit is None else min(limit, cycle)
        return limit

    def _check_round_limit(self, tournament: Tournament) -> None:
        limit = self.round_limit(tournament)
        if limit is not None and len(tournament.rounds) >= limit:
            raise RoundLimitReachedException(
                f"All {limit} rounds of {tournament.name} have been played. "
                "End the tournament instead."
            )

    def check_can_generate(self, tournament: Tournament) -> None:
        """Raise if a new round may not be generated now.

        Raises:
            TournamentStateException: If the tournament is not ongoing
            IncompleteRoundException: If the previous round has unrecorded matches
            RoundLimitReachedException: If the round limit is exhausted
        """
        if not tournament.is_ongoing:
            raise TournamentStateException(
                f"Rounds can only be generated for an ongoing tournament "
                f"(status: {tournament.status})"
            )
        previous = tournament.current_round
        if previous is not None and not previous.is_fully_recorded:
            raise IncompleteRoundException(
                f"Record all results of round {previous.round_number} "
                f"({len(previous.pending_matches)} pending) before the next round"
            )
        self._check_round_limit(tournament)

    def generate_next_round(
        self, tournament: Tournament, pairing_type: PairingType = PAIRING_AUTO
    ) -> PairingResult:
        """Generate pairings for the next round.

        Args:
            tournament: Ongoing tournament
            pairing_type: Swiss ordering ("random", "points" or "auto");
                ignored for round robin and cup

        Returns:
            PairingResult; its round is appended to the tournament only if it
            holds at least one match (cup rounds are always appended)

        Raises:
            TournamentStateException: See ``check_can_generate``
            InsufficientParticipantsException: If too few players can be paired
            WinnerDecidedException: If a cup has a single player left
        """
        self.check_can_generate(tournament)
        round_number = len(tournament.rounds) + 1

        if tournament.is_round_robin:
            result = create_round_robin_pairings(tournament, round_number, self.ledger)
        elif tournament.is_cup:
            result = create_cup_pairings(tournament, round_number, self.ledger, self.rng)
        else:
            result = create_swiss_pairings(
                tournament, round_number, pairing_type, self.ledger, self.rng
            )

        round_data = result.round_data
        if round_data.matches or tournament.is_cup:
            tournament.rounds.append(round_data)
            tournament.touch()
            logger.info(
                f"Round {round_number} created with {len(round_data.matches)} board(s)"
            )
        else:
            message = f"No pairings could be made for round {round_number}"
            result.warn(message)
            logger.warning(message)
        return result

    # ========== Manual Pairing ==========

    def _open_round(self, tournament: Tournament) -> Tuple[RoundData, bool]:
        """The round manual pairings go into, creating one when none is open."""
        current = tournament.current_round
        if current is not None and not current.is_completed:
            return current, False
        self._check_round_limit(tournament)
        return RoundData(round_number=len(tournament.rounds) + 1), True

    def add_manual_pair(
        self, tournament: Tournament, player1_id: str, player2_id: str
    ) -> Tuple[Match, List[str]]:
        """Insert a single match between two idle players into the open round.

        Returns:
            The new match and any warnings (such as a repeat pairing)

        Raises:
            TournamentStateException: If the tournament is not ongoing
            PlayerNotFoundException: If either player is unknown
            InvalidPairingException: If the pair cannot be seated
            RoundLimitReachedException: If a new round is needed but not allowed
        """
        if not tournament.is_ongoing:
            raise TournamentStateException(
                f"Manual pairings need an ongoing tournament (status: {tournament.status})"
            )
        player1 = tournament.get_player(player1_id)
        player2 = tournament.get_player(player2_id)

        if player1.id == player2.id:
            raise InvalidPairingException("A player cannot be paired against themselves")
        for player in (player1, player2):
            if player.eliminated:
                raise InvalidPairingException(f"{player.name} has been eliminated")
        if tournament.share_team(player1, player2):
            raise InvalidPairingException(
                f"{player1.name} and {player2.name} play for the same team"
            )

        round_data, is_new = self._open_round(tournament)
        for match in round_data.matches:
            if match.involves(player1.id) and match.involves(player2.id):
                raise InvalidPairingException(
                    f"{player1.name} and {player2.name} are already paired "
                    f"in round {round_data.round_number}"
                )
            for player in (player1, player2):
                if match.is_pending and match.involves(player.id):
                    raise InvalidPairingException(
                        f"{player.name} is already playing on board {match.board_number}"
                    )

        warnings = []
        if player1.has_played(player2.id):
            message = f"{player1.name} and {player2.name} have already played each other"
            warnings.append(message)
            logger.warning(message)

        match = add_match(round_data, player1, player2)
        if is_new:
            tournament.rounds.append(round_data)
        tournament.touch()
        logger.info(
            f"Manual pairing in round {round_data.round_number}, board "
            f"{match.board_number}: {player1.name} vs {player2.name}"
        )
        return match, warnings
