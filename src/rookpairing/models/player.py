"""A participant in a tournament."""

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

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from rookpairing.exceptions import ValidationException
from rookpairing.utils import generate_id, parse_iso, setup_logger, to_iso, utc_now

logger = setup_logger(__name__)


class Player:
    """Represents a player in the tournament.

    Counters are mutated only by the score ledger. ``score`` always equals
    ``wins * 1 + draws * 0.5``.

    Attributes:
        id: Unique identifier for the player
        name: Player's display name, unique case-insensitively
        rating: Optional numeric rating, used as the standings tie-break
        score: Current tournament score (half-integer)
        wins: Decisive results won, byes and forfeits included
        losses: Decisive results lost
        draws: Drawn results
        matches_played: Matches counted for this player, byes included
        team_id: Team reference in team tournaments
        eliminated: Knocked out of a cup
        past_opponents: Ordered, duplicate-free ids of players already met
        added_at: When the player joined the tournament
    """

    def __init__(
        self,
        name: str,
        rating: Optional[int] = None,
        team_id: Optional[str] = None,
        player_id: Optional[str] = None,
        added_at: Optional[datetime] = None,
    ) -> None:
        self.id: str = player_id or generate_id()

        # Core attributes
        self.name: str = name
        self.rating: Optional[int] = rating
        self.team_id: Optional[str] = team_id

        # Tournament participation status
        self.eliminated: bool = False

        # Counters
        self.score: float = 0.0
        self.wins: int = 0
        self.losses: int = 0
        self.draws: int = 0
        self.matches_played: int = 0

        self.past_opponents: List[str] = []
        self.added_at: datetime = added_at or utc_now()

    @property
    def is_active(self) -> bool:
        """Whether the player can still be paired."""
        return not self.eliminated

    @property
    def sort_rating(self) -> int:
        """Rating with an absent value treated as 0."""
        return self.rating or 0

    def has_played(self, opponent_id: Optional[str]) -> bool:
        """Check whether this player has already met ``opponent_id``."""
        return opponent_id is not None and opponent_id in self.past_opponents

    def add_past_opponent(self, opponent_id: str) -> bool:
        """Remember a real opponent once.

        Returns:
            True if the opponent was added, False if already present

        Raises:
            ValidationException: If a player is recorded against themselves
        """
        if opponent_id == self.id:
            raise ValidationException(f"{self.name} cannot be their own opponent")
        if opponent_id in self.past_opponents:
            return False
        self.past_opponents.append(opponent_id)
        return True

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player data to dictionary format."""
        return {
            "id": self.id,
            "name": self.name,
            "rating": self.rating,
            "team_id": self.team_id,
            "score": self.score,
            "wins": self.wins,
            "losses": self.losses,
            "draws": self.draws,
            "matches_played": self.matches_played,
            "eliminated": self.eliminated,
            "past_opponents": list(self.past_opponents),
            "added_at": to_iso(self.added_at),
        }

    @classmethod
    def from_dict(cls, player_data: Dict[str, Any]) -> "Player":
        """Create a Player instance from serialized dictionary data.

        Missing counters default to zero and a missing ``past_opponents``
        list to empty. Duplicate or self references in ``past_opponents``
        are dropped so the invariant holds after import.
        """
        try:
            name = player_data["name"]
        except KeyError:
            raise ValidationException("Player data is missing a name") from None

        player = cls(
            name=name,
            rating=player_data.get("rating"),
            team_id=player_data.get("team_id"),
            player_id=player_data.get("id"),
            added_at=parse_iso(player_data.get("added_at")),
        )
        player.score = float(player_data.get("score") or 0.0)
        player.wins = int(player_data.get("wins") or 0)
        player.losses = int(player_data.get("losses") or 0)
        player.draws = int(player_data.get("draws") or 0)
        player.matches_played = int(player_data.get("matches_played") or 0)
        player.eliminated = bool(player_data.get("eliminated", False))

        for opponent_id in player_data.get("past_opponents") or []:
            if not opponent_id or opponent_id == player.id:
                logger.warning("Dropping invalid past opponent for %s", player.name)
                continue
            if opponent_id not in player.past_opponents:
                player.past_opponents.append(opponent_id)
        return player

    def __repr__(self) -> str:
        return f"Player(name='{self.name}', rating={self.rating}, id='{self.id}')"

    def __str__(self) -> str:
        if self.rating is None:
            return self.name
        return f"{self.name} ({self.rating})"
