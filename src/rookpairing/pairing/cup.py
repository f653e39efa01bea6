"""Cup (single elimination) pairing."""

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
from typing import TYPE_CHECKING

from rookpairing.exceptions import (
    InsufficientParticipantsException,
    WinnerDecidedException,
)
from rookpairing.models import PairingResult, RoundData, Tournament
from rookpairing.pairing.common import add_bye, add_match
from rookpairing.utils import setup_logger

if TYPE_CHECKING:
    from rookpairing.controllers.score_ledger import ScoreLedger

logger = setup_logger(__name__)


def create_cup_pairings(
    tournament: Tournament,
    round_number: int,
    ledger: "ScoreLedger",
    rng: random.Random,
) -> PairingResult:
    """Draw the next knockout round among players still in the cup.

    The field is shuffled. With an odd field the highest scorer receives the
    bye, then the rest are paired in drawn order. Rematches are allowed and
    teammates may meet; the latter is reported as a warning.

    Raises:
        WinnerDecidedException: If a single player is left
        InsufficientParticipantsException: If nobody is left
    """
    remaining = tournament.get_player_list(active_only=True)
    if not remaining:
        raise InsufficientParticipantsException("No players left for Cup mode pairings.")
    if len(remaining) == 1:
        winner = remaining[0]
        raise WinnerDecidedException(
            winner.id,
            f"{winner.name} has won the cup. End the tournament.",
        )

    drawn = list(remaining)
    rng.shuffle(drawn)

    round_data = RoundData(round_number=round_number)
    result = PairingResult(round_data)

    if len(drawn) % 2:
        bye_player = max(drawn, key=lambda p: p.score)
        drawn.remove(bye_player)
        add_bye(round_data, bye_player, ledger)
        logger.info(f"Cup round {round_number}: bye for {bye_player.name}")

    for player1, player2 in zip(drawn[0::2], drawn[1::2]):
        if tournament.share_team(player1, player2):
            message = (
                f"Team players {player1.name} and {player2.name} were paired "
                "in Cup mode due to limited opponents."
            )
            result.warn(message)
            logger.warning(message)
        add_match(round_data, player1, player2)

    logger.info(
        f"Generated cup round {round_number}: {len(remaining)} players, "
        f"{len(round_data.matches)} board(s)"
    )
    return result
