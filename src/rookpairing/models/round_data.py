"""Data model for tournament round."""

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

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from rookpairing.exceptions import MatchNotFoundException, ValidationException
from rookpairing.models.match import Match
from rookpairing.utils import parse_iso, to_iso, utc_now


@dataclass
class RoundData:
    """Container for all data related to a single tournament round.

    Attributes
    ----------
    round_number : int
        Round number (1-indexed), matching its position in the tournament.
    matches : list of Match
        Boards of the round, in board order.
    started_at : datetime
        When the round was created.
    completed_at : datetime or None
        Stamped once every match has been resolved.
    """

    round_number: int
    matches: List[Match] = field(default_factory=list)
    started_at: datetime = field(default_factory=utc_now)
    completed_at: Optional[datetime] = None

    @property
    def is_completed(self) -> bool:
        return self.completed_at is not None

    @property
    def is_fully_recorded(self) -> bool:
        """True when no real match is waiting for a result. Byes count as recorded."""
        return not any(match.is_pending for match in self.matches)

    @property
    def pending_matches(self) -> List[Match]:
        return [match for match in self.matches if match.is_pending]

    @property
    def next_board_number(self) -> int:
        if not self.matches:
            return 1
        return max(match.board_number for match in self.matches) + 1

    def get_match(self, match_id: str) -> Match:
        """Look up a match of this round.

        Raises:
            MatchNotFoundException: If the match is not part of the round
        """
        for match in self.matches:
            if match.id == match_id:
                return match
        raise MatchNotFoundException(
            f"Match {match_id} not found in round {self.round_number}"
        )

    def find_board(self, board_number: int) -> Optional[Match]:
        for match in self.matches:
            if match.board_number == board_number:
                return match
        return None

    def matches_for(self, player_id: str) -> List[Match]:
        return [match for match in self.matches if match.involves(player_id)]

    def player_ids(self) -> List[str]:
        """Every player seated in this round, in board order."""
        ids: List[str] = []
        for match in self.matches:
            ids.append(match.player1_id)
            if match.player2_id is not None:
                ids.append(match.player2_id)
        return ids

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round data to dictionary."""
        return {
            "round_number": self.round_number,
            "matches": [m.to_dict() for m in self.matches],
            "started_at": to_iso(self.started_at),
            "completed_at": to_iso(self.completed_at),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoundData":
        """Deserialize round data from dictionary."""
        if "round_number" not in data:
            raise ValidationException("Round data is missing round_number")
        return cls(
            round_number=int(data["round_number"]),
            matches=[Match.from_dict(m) for m in data.get("matches") or []],
            started_at=parse_iso(data.get("started_at")) or utc_now(),
            completed_at=parse_iso(data.get("completed_at")),
        )
