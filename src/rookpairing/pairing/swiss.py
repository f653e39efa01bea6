"""Swiss-style pairing: random, points and auto orderings.

Players are ordered (shuffled, or by score), an odd player out receives a
bye, and the rest are paired greedily from the top of the list while
avoiding rematches and, in team tournaments, teammates. A player with no
legal opponent left stays unpaired for the round; that is reported on the
PairingResult and never resolved with a rematch.
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
from typing import TYPE_CHECKING, List, Optional

from rookpairing.constants import PAIRING_RANDOM, SWISS_PAIRING_TYPES
from rookpairing.exceptions import InsufficientParticipantsException, PairingException
from rookpairing.models import PairingResult, Player, RoundData, Tournament
from rookpairing.pairing.common import add_bye, add_match, points_order
from rookpairing.type_hints import PairingType
from rookpairing.utils import setup_logger

if TYPE_CHECKING:
    from rookpairing.controllers.score_ledger import ScoreLedger

logger = setup_logger(__name__)


def select_bye_player(tournament: Tournament, players: List[Player]) -> Player:
    """Pick the bye recipient: fewest earlier byes, then lowest score.

    Ties beyond that go to whoever comes first in ``players``.
    """
    return min(players, key=lambda p: (tournament.bye_count(p.id), p.score))


def is_legal_opponent(tournament: Tournament, player: Player, candidate: Player) -> bool:
    """No rematch, and no teammates in a team tournament."""
    if player.has_played(candidate.id):
        return False
    return not tournament.share_team(player, candidate)


def _find_opponent(
    tournament: Tournament, player: Player, candidates: List[Player]
) -> Optional[Player]:
    for candidate in candidates:
        if is_legal_opponent(tournament, player, candidate):
            return candidate
    return None


def create_swiss_pairings(
    tournament: Tournament,
    round_number: int,
    pairing_type: PairingType,
    ledger: "ScoreLedger",
    rng: random.Random,
) -> PairingResult:
    """Pair the active players of a Swiss tournament for one round.

    Args:
        tournament: Tournament to pair
        round_number: Number of the round being built
        pairing_type: "random", "points" or "auto"
        ledger: Score ledger used to award the bye
        rng: Random source for the "random" ordering

    Returns:
        PairingResult holding the new (not yet appended) round

    Raises:
        PairingException: If the pairing type is unknown
        InsufficientParticipantsException: If fewer than two players are active
    """
    if pairing_type not in SWISS_PAIRING_TYPES:
        raise PairingException(f"Unknown Swiss pairing type: {pairing_type}")

    active = tournament.get_player_list(active_only=True)
    if len(active) < 2:
        raise InsufficientParticipantsException(
            f"Round {round_number} needs at least two active players"
        )

    if pairing_type == PAIRING_RANDOM:
        ordered = list(active)
        rng.shuffle(ordered)
    else:
        ordered = points_order(active)

    round_data = RoundData(round_number=round_number)
    result = PairingResult(round_data)

    if len(ordered) % 2:
        bye_player = select_bye_player(tournament, ordered)
        ordered.remove(bye_player)
        add_bye(round_data, bye_player, ledger)
        logger.info(f"Round {round_number}: bye for {bye_player.name}")

    remaining = ordered
    while remaining:
        player = remaining.pop(0)
        opponent = _find_opponent(tournament, player, remaining)
        if opponent is None:
            result.unpaired_ids.append(player.id)
            message = (
                f"Could not find a valid opponent for {player.name} in round "
                f"{round_number}. Player will remain unpaired for this round."
            )
            result.warn(message)
            logger.warning(message)
            continue

        remaining.remove(opponent)
        match = add_match(round_data, player, opponent)
        logger.debug(
            f"Round {round_number} board {match.board_number}: "
            f"{player.name} vs {opponent.name}"
        )

    logger.info(
        f"Generated {pairing_type} pairings for round {round_number}: "
        f"{len(round_data.matches)} board(s), {len(result.unpaired_ids)} unpaired"
    )
    return result
