"""Score ledger: the only place player counters and match outcomes change.

Each match keeps the outcome last applied to it. Recording a new outcome
applies the difference between the effect of the new outcome and the effect
of the stored one, both computed by the same pure function. Correcting a
result any number of times therefore never leaves residue behind.
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

from dataclasses import dataclass
from typing import Dict, Optional

from rookpairing.constants import (
    BYE_SCORE,
    DECISIVE_RESULTS,
    DRAW_SCORE,
    RESULT_BYE_WIN,
    RESULT_DRAW,
    RESULT_ELIMINATED_BYE,
    RESULT_FORFEIT_WIN,
    RESULT_WIN,
    WIN_SCORE,
)
from rookpairing.exceptions import InvalidResultException
from rookpairing.models import Match, Player
from rookpairing.utils import setup_logger, utc_now

logger = setup_logger(__name__)


@dataclass(frozen=True)
class StatLine:
    """Contribution of one outcome to one player's counters."""

    score: float = 0.0
    wins: int = 0
    losses: int = 0
    draws: int = 0

    def __sub__(self, other: "StatLine") -> "StatLine":
        return StatLine(
            self.score - other.score,
            self.wins - other.wins,
            self.losses - other.losses,
            self.draws - other.draws,
        )

    def __bool__(self) -> bool:
        return any((self.score, self.wins, self.losses, self.draws))


NO_CHANGE = StatLine()
WIN_LINE = StatLine(score=WIN_SCORE, wins=1)
LOSS_LINE = StatLine(losses=1)
DRAW_LINE = StatLine(score=DRAW_SCORE, draws=1)


def outcome_effect(
    player1_id: str,
    player2_id: Optional[str],
    result: Optional[str],
    winner_id: Optional[str],
) -> Dict[str, StatLine]:
    """Counter contribution of an outcome, per player id.

    An unresolved match and an ``eliminated-bye`` contribute nothing. A
    ``forfeit-win`` credits the winner only; the side that was knocked out
    elsewhere is not charged a second loss for a game it never played.
    """
    if result is None or result == RESULT_ELIMINATED_BYE:
        return {}

    if result == RESULT_DRAW:
        effect = {player1_id: DRAW_LINE}
        if player2_id is not None:
            effect[player2_id] = DRAW_LINE
        return effect

    if result in DECISIVE_RESULTS and winner_id is not None:
        effect = {winner_id: WIN_LINE}
        loser_id = player2_id if winner_id == player1_id else player1_id
        if loser_id is not None and result != RESULT_FORFEIT_WIN:
            effect[loser_id] = LOSS_LINE
        return effect

    raise InvalidResultException(f"Cannot score result {result!r} without a winner")


def outcome_delta(
    match: Match, new_result: Optional[str], new_winner_id: Optional[str]
) -> Dict[str, StatLine]:
    """Difference between the effect of a new outcome and the stored one."""
    old = outcome_effect(match.player1_id, match.player2_id, match.result, match.winner_id)
    new = outcome_effect(match.player1_id, match.player2_id, new_result, new_winner_id)

    delta: Dict[str, StatLine] = {}
    for player_id in list(old) + [pid for pid in new if pid not in old]:
        change = new.get(player_id, NO_CHANGE) - old.get(player_id, NO_CHANGE)
        if change:
            delta[player_id] = change
    return delta


class ScoreLedger:
    """Applies outcomes to matches and the players seated at them.

    The ledger mutates Match and Player records in place and never persists.
    Callers look players up (and fail) before asking the ledger to write, so
    a ledger call either completes or changes nothing.
    """

    @staticmethod
    def _apply_line(player: Player, change: StatLine) -> None:
        player.score += change.score
        player.wins = max(0, player.wins + change.wins)
        player.losses = max(0, player.losses + change.losses)
        player.draws = max(0, player.draws + change.draws)

    def _write_outcome(
        self,
        match: Match,
        players: Dict[str, Player],
        result: Optional[str],
        winner_id: Optional[str],
    ) -> Dict[str, StatLine]:
        delta = outcome_delta(match, result, winner_id)
        for player_id, change in delta.items():
            self._apply_line(players[player_id], change)
        match.result = result
        match.winner_id = winner_id
        match.end_time = utc_now()
        return delta

    @staticmethod
    def check_outcome(match: Match, winner_id: Optional[str], draw: bool) -> None:
        """Reject an outcome that cannot be recorded on ``match``.

        Raises:
            InvalidResultException: For byes, for both or neither of draw and
                winner, and for a winner who is not seated at the board
        """
        if match.is_bye:
            raise InvalidResultException(
                f"Board {match.board_number} is a bye and is resolved automatically"
            )
        if draw == (winner_id is not None):
            raise InvalidResultException("Report either a draw or a winner")
        if winner_id is not None and not match.involves(winner_id):
            raise InvalidResultException(
                f"Winner {winner_id} is not playing on board {match.board_number}"
            )

    def apply_result(
        self,
        match: Match,
        player1: Player,
        player2: Player,
        winner_id: Optional[str] = None,
        draw: bool = False,
    ) -> Dict[str, StatLine]:
        """Record (or correct) the outcome of a real match.

        Args:
            match: The match to resolve
            player1: Player seated as ``match.player1_id``
            player2: Player seated as ``match.player2_id``
            winner_id: Winner for a decisive result
            draw: True for a draw

        Returns:
            The counter changes applied, per player id

        Raises:
            InvalidResultException: If the outcome does not fit the match
        """
        self.check_outcome(match, winner_id, draw)
        if (player1.id, player2.id) != (match.player1_id, match.player2_id):
            raise InvalidResultException(
                f"Players do not match the pairing on board {match.board_number}"
            )

        new_result = RESULT_DRAW if draw else RESULT_WIN
        was_recorded = match.is_resolved
        players = {player1.id: player1, player2.id: player2}
        delta = self._write_outcome(match, players, new_result, winner_id)

        player1.add_past_opponent(player2.id)
        player2.add_past_opponent(player1.id)

        if not match.player1_counted:
            player1.matches_played += 1
            match.player1_counted = True
        if not match.player2_counted:
            player2.matches_played += 1
            match.player2_counted = True

        logger.debug(
            "%s board %s: %s vs %s -> %s",
            "Corrected" if was_recorded else "Recorded",
            match.board_number,
            player1.name,
            player2.name,
            "draw" if draw else players[winner_id].name,
        )
        return delta

    def award_bye(self, match: Match, player: Player) -> None:
        """Resolve a freshly created bye as a win for its recipient."""
        if not match.is_bye or match.player1_id != player.id:
            raise InvalidResultException(f"Board {match.board_number} is not a bye")
        if match.is_resolved:
            return

        self._write_outcome(match, {player.id: player}, RESULT_BYE_WIN, player.id)
        match.end_time = match.start_time
        if not match.player1_counted:
            player.matches_played += 1
        match.player1_counted = True
        match.player2_counted = True
        logger.debug("%s receives a bye (+%s)", player.name, BYE_SCORE)

    def award_forfeit(self, match: Match, winner: Player, loser: Player) -> None:
        """Resolve a real match as a forfeit win for ``winner``."""
        if match.is_bye or not (match.involves(winner.id) and match.involves(loser.id)):
            raise InvalidResultException(
                f"Cannot forfeit board {match.board_number} to {winner.name}"
            )
        players = {winner.id: winner, loser.id: loser}
        self._write_outcome(match, players, RESULT_FORFEIT_WIN, winner.id)
        logger.debug("%s wins board %s by forfeit", winner.name, match.board_number)

    def void_bye(self, match: Match, player: Player) -> None:
        """Resolve an unplayed bye of an eliminated player with no winner."""
        if not match.is_bye:
            raise InvalidResultException(f"Board {match.board_number} is not a bye")
        self._write_outcome(match, {player.id: player}, RESULT_ELIMINATED_BYE, None)
        logger.debug("Bye on board %s voided for %s", match.board_number, player.name)
