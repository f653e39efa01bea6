"""Recording match results for the open round."""

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

from typing import Iterable, Optional

from rookpairing.controllers.elimination import EliminationCascade
from rookpairing.controllers.score_ledger import ScoreLedger
from rookpairing.exceptions import InvalidResultException, TournamentStateException
from rookpairing.models import Match, Player, RoundData, Tournament
from rookpairing.utils import setup_logger, utc_now

logger = setup_logger(__name__)


class ResultRecorder:
    """Handles recording and correcting match results.

    This class is responsible for:
    - Validating a reported outcome before anything changes
    - Applying it through the score ledger
    - Running the elimination cascade in cup tournaments
    - Stamping the round complete once every board is resolved
    """

    def __init__(
        self,
        ledger: Optional[ScoreLedger] = None,
        cascade: Optional[EliminationCascade] = None,
    ):
        self.ledger = ledger or ScoreLedger()
        self.cascade = cascade or EliminationCascade(self.ledger)

    def record_result(
        self,
        tournament: Tournament,
        match_id: str,
        winner_id: Optional[str] = None,
        draw: bool = False,
    ) -> Match:
        """Record or correct the outcome of a match in the open round.

        Args:
            tournament: Tournament the match belongs to
            match_id: Match in the most recent round
            winner_id: Winner of a decisive result
            draw: True for a draw

        Returns:
            The updated match

        Raises:
            TournamentStateException: If the tournament is not ongoing or has no round
            MatchNotFoundException: If the match is not in the open round
            InvalidResultException: If the outcome does not fit the match
        """
        if not tournament.is_ongoing:
            raise TournamentStateException(
                f"Results can only be recorded while the tournament is ongoing "
                f"(status: {tournament.status})"
            )
        round_data = tournament.current_round
        if round_data is None:
            raise TournamentStateException("No round has been generated yet")

        match = round_data.get_match(match_id)
        self.ledger.check_outcome(match, winner_id, draw)
        player1 = tournament.get_player(match.player1_id)
        player2 = tournament.get_player(match.player2_id)

        previous_loser_id = match.loser_id
        new_loser_id = None if draw else match.opponent_of(winner_id)

        if tournament.is_cup:
            scorers = (player1, player2) if draw else (tournament.get_player(winner_id),)
            self.check_still_in_cup(tournament, match, scorers)

        plan = None
        if tournament.is_cup and new_loser_id is not None:
            loser = tournament.get_player(new_loser_id)
            plan = self.cascade.plan(tournament, round_data, loser, match)

        self.ledger.apply_result(match, player1, player2, winner_id=winner_id, draw=draw)

        if tournament.is_cup:
            if previous_loser_id is not None and previous_loser_id != new_loser_id:
                self.cascade.reinstate(
                    tournament, tournament.get_player(previous_loser_id), match
                )
            if plan is not None:
                self.cascade.apply(plan)

        self.mark_round_completed(round_data)
        tournament.touch()

        outcome = "draw" if draw else f"win for {tournament.get_player(winner_id).name}"
        logger.info(
            f"Round {round_data.round_number} board {match.board_number}: "
            f"{player1.name} vs {player2.name}, {outcome}"
        )
        return match

    def check_still_in_cup(
        self, tournament: Tournament, match: Match, scorers: Iterable[Player]
    ) -> None:
        """Reject an outcome that would score for a player knocked out elsewhere.

        A player eliminated by this very board may win it on correction, since
        the same call reinstates them.

        Raises:
            InvalidResultException: If a scorer lost another real match
        """
        for player in scorers:
            if player.eliminated and self.cascade.has_lost_elsewhere(
                tournament, player.id, match
            ):
                raise InvalidResultException(
                    f"{player.name} is already eliminated and cannot score "
                    f"on board {match.board_number}"
                )

    @staticmethod
    def mark_round_completed(round_data: RoundData) -> bool:
        """Stamp ``completed_at`` once every match of the round is resolved.

        Returns:
            True if the round is complete after the call
        """
        if not all(match.is_resolved for match in round_data.matches):
            return False
        if round_data.completed_at is None:
            round_data.completed_at = utc_now()
            logger.info(f"Round {round_data.round_number} completed")
        return True
