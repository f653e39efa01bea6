"""Round Robin pairing using the circle method.

The seating is fixed when the first round is paired and stored on the
tournament. Seat 0 never moves; the other seats rotate by one position after
every round, so each seat meets every other seat exactly once over
``len(seating) - 1`` rounds. An odd field is padded with an empty seat, and
whoever faces the empty seat receives the round's bye.
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

from typing import TYPE_CHECKING, Dict, List, Sequence, Tuple

from rookpairing.constants import ROUND_ROBIN_BYE_SEAT
from rookpairing.exceptions import InsufficientParticipantsException
from rookpairing.models import PairingResult, Player, RoundData, Tournament
from rookpairing.pairing.common import add_bye, add_match
from rookpairing.type_hints import MaybePlayerId, Seating
from rookpairing.utils import setup_logger

if TYPE_CHECKING:
    from rookpairing.controllers.score_ledger import ScoreLedger

logger = setup_logger(__name__)


def initial_seating(players: Sequence[Player]) -> Seating:
    """Seat players in roster order, padding an odd field with an empty seat."""
    seating: Seating = [p.id for p in players]
    if len(seating) % 2:
        seating.append(ROUND_ROBIN_BYE_SEAT)
    return seating


def current_seating(tournament: Tournament) -> Seating:
    """The stored seating, or the one the first round would fix."""
    if tournament.rr_seating is not None:
        return list(tournament.rr_seating)
    return initial_seating(tournament.get_player_list(active_only=True))


def round_robin_round_count(tournament: Tournament) -> int:
    """Number of rounds needed for everyone to meet everyone once."""
    return max(len(current_seating(tournament)) - 1, 0)


def seat_pairs(seating: Seating) -> List[Tuple[MaybePlayerId, MaybePlayerId]]:
    """Pair the seats of the current rotation.

    Seat 0 meets the first rotating seat; rotating seat ``i`` meets rotating
    seat ``m - i`` for the remaining ``1 <= i < m / 2``.
    """
    fixed, rotating = seating[0], seating[1:]
    count = len(rotating)
    pairs = [(fixed, rotating[0])]
    for i in range(1, (count + 1) // 2):
        pairs.append((rotating[i], rotating[count - i]))
    return pairs


def advance_seating(seating: Seating) -> Seating:
    """Move the last rotating seat to the front of the rotation."""
    fixed, rotating = seating[0], seating[1:]
    return [fixed, rotating[-1]] + rotating[:-1]


def create_round_robin_pairings(
    tournament: Tournament,
    round_number: int,
    ledger: "ScoreLedger",
) -> PairingResult:
    """Pair the next round of the circle and advance the stored seating.

    Raises:
        InsufficientParticipantsException: If fewer than two players are seated
        PlayerNotFoundException: If the stored seating names an unknown player
    """
    seating = current_seating(tournament)
    seated: Dict[str, Player] = {
        pid: tournament.get_player(pid) for pid in seating if pid is not None
    }
    if len(seated) < 2:
        raise InsufficientParticipantsException(
            "Round Robin requires at least two active players."
        )

    round_data = RoundData(round_number=round_number)
    result = PairingResult(round_data)

    for seat1, seat2 in seat_pairs(seating):
        if seat1 is None and seat2 is None:
            continue
        if seat1 is None or seat2 is None:
            bye_player = seated[seat1 if seat2 is None else seat2]
            add_bye(round_data, bye_player, ledger)
            logger.info(f"Round {round_number}: bye for {bye_player.name}")
            continue

        player1, player2 = seated[seat1], seated[seat2]
        if tournament.share_team(player1, player2):
            message = (
                f"{player1.name} and {player2.name} play for the same team; "
                "they are paired anyway to keep the Round Robin schedule intact."
            )
            result.warn(message)
            logger.warning(message)
        add_match(round_data, player1, player2)

    tournament.rr_seating = advance_seating(seating)
    logger.info(
        f"Generated Round Robin round {round_number} of "
        f"{len(seating) - 1}: {len(round_data.matches)} board(s)"
    )
    return result
