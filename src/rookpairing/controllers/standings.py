"""Ranking of players into standings.

Players are ordered by score, then rating (absent counts as 0), then name.
Rating is the only tie-break; no Buchholz-style statistic is kept.
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

from typing import Iterable, List

from rookpairing.models import Player, StandingsEntry
from rookpairing.pairing.common import points_order


def rank_players(players: Iterable[Player]) -> List[Player]:
    """Return players in standings order. The input is left untouched."""
    return points_order(players)


def build_standings(players: Iterable[Player]) -> List[StandingsEntry]:
    """Rank players and copy them into numbered standings rows."""
    return [
        StandingsEntry.from_player(rank, player)
        for rank, player in enumerate(rank_players(players), start=1)
    ]
