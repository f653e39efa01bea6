"""Helpers shared by the pairing algorithms."""

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

from typing import TYPE_CHECKING, Iterable, List

from rookpairing.models import Match, Player, RoundData

if TYPE_CHECKING:
    from rookpairing.controllers.score_ledger import ScoreLedger


def points_order(players: Iterable[Player]) -> List[Player]:
    """Order players by score desc, rating desc (absent as 0), name asc."""
    return sorted(players, key=lambda p: (-p.score, -p.sort_rating, p.name))


def add_match(round_data: RoundData, player1: Player, player2: Player) -> Match:
    """Seat two players on the next free board of ``round_data``."""
    match = Match(
        player1_id=player1.id,
        player2_id=player2.id,
        board_number=round_data.next_board_number,
        start_time=round_data.started_at,
    )
    round_data.matches.append(match)
    return match


def add_bye(round_data: RoundData, player: Player, ledger: "ScoreLedger") -> Match:
    """Give ``player`` a bye on the next free board and score it at once."""
    match = Match(
        player1_id=player.id,
        player2_id=None,
        board_number=round_data.next_board_number,
        start_time=round_data.started_at,
    )
    round_data.matches.append(match)
    ledger.award_bye(match, player)
    return match
