"""Frozen standings row."""

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

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from rookpairing.models.player import Player


@dataclass(frozen=True)
class StandingsEntry:
    """One line of a standings table, copied out of a Player."""

    rank: int
    player_id: str
    name: str
    score: float
    wins: int
    draws: int
    losses: int
    matches_played: int
    rating: Optional[int] = None
    team_id: Optional[str] = None
    eliminated: bool = False

    @classmethod
    def from_player(cls, rank: int, player: Player) -> "StandingsEntry":
        return cls(
            rank=rank,
            player_id=player.id,
            name=player.name,
            score=player.score,
            wins=player.wins,
            draws=player.draws,
            losses=player.losses,
            matches_played=player.matches_played,
            rating=player.rating,
            team_id=player.team_id,
            eliminated=player.eliminated,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StandingsEntry":
        return cls(
            rank=int(data["rank"]),
            player_id=data["player_id"],
            name=data["name"],
            score=float(data.get("score") or 0.0),
            wins=int(data.get("wins") or 0),
            draws=int(data.get("draws") or 0),
            losses=int(data.get("losses") or 0),
            matches_played=int(data.get("matches_played") or 0),
            rating=data.get("rating"),
            team_id=data.get("team_id"),
            eliminated=bool(data.get("eliminated", False)),
        )
