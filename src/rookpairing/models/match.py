"""Match data class."""

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
from typing import Any, Dict, Optional

from rookpairing.constants import DECISIVE_RESULTS, MATCH_RESULTS, RESULT_DRAW
from rookpairing.exceptions import ValidationException
from rookpairing.type_hints import ResultType
from rookpairing.utils import generate_id, parse_iso, to_iso, utc_now


@dataclass
class Match:
    """A single board in a round.

    ``result`` and ``winner_id`` hold the last outcome applied by the score
    ledger. Either the match is unresolved (``result`` is None) or exactly one
    of "a winner is set" and "the result is a draw" holds; an
    ``eliminated-bye`` is resolved with no winner.

    Attributes
    ----------
    player1_id : str
        First player, the recipient for a bye.
    player2_id : str or None
        Second player, None for a bye.
    board_number : int
        1-based board, unique within the round.
    result : str or None
        One of win, draw, bye-win, forfeit-win, eliminated-bye.
    winner_id : str or None
        Winner for decisive results.
    player1_counted, player2_counted : bool
        Whether each side's ``matches_played`` was already incremented.
    """

    player1_id: str
    player2_id: Optional[str]
    board_number: int
    id: str = field(default_factory=generate_id)
    result: Optional[ResultType] = None
    winner_id: Optional[str] = None
    start_time: datetime = field(default_factory=utc_now)
    end_time: Optional[datetime] = None
    player1_counted: bool = False
    player2_counted: bool = False

    @property
    def is_bye(self) -> bool:
        """A bye has no second player."""
        return self.player2_id is None

    @property
    def is_resolved(self) -> bool:
        """Whether an outcome has been applied."""
        return self.result is not None

    @property
    def is_pending(self) -> bool:
        """A real match still waiting for its result."""
        return not self.is_bye and not self.is_resolved

    @property
    def is_draw(self) -> bool:
        return self.result == RESULT_DRAW

    @property
    def loser_id(self) -> Optional[str]:
        """Loser of a decisive real match, None otherwise."""
        if self.is_bye or self.result not in DECISIVE_RESULTS:
            return None
        return self.opponent_of(self.winner_id)

    def involves(self, player_id: Optional[str]) -> bool:
        """Check whether ``player_id`` sits at this board."""
        return player_id is not None and player_id in (
            self.player1_id,
            self.player2_id,
        )

    def opponent_of(self, player_id: Optional[str]) -> Optional[str]:
        """Return the other side of the board (None for a bye)."""
        if player_id == self.player1_id:
            return self.player2_id
        if player_id == self.player2_id:
            return self.player1_id
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "id": self.id,
            "player1_id": self.player1_id,
            "player2_id": self.player2_id,
            "board_number": self.board_number,
            "result": self.result,
            "winner_id": self.winner_id,
            "start_time": to_iso(self.start_time),
            "end_time": to_iso(self.end_time),
            "player1_counted": self.player1_counted,
            "player2_counted": self.player2_counted,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary."""
        if not data.get("player1_id"):
            raise ValidationException("Match data requires player1_id")
        result = data.get("result")
        if result is not None and result not in MATCH_RESULTS:
            raise ValidationException(f"Unknown match result: {result!r}")
        return cls(
            player1_id=data["player1_id"],
            player2_id=data.get("player2_id"),
            board_number=int(data.get("board_number") or 0),
            id=data.get("id") or generate_id(),
            result=result,
            winner_id=data.get("winner_id"),
            start_time=parse_iso(data.get("start_time")) or utc_now(),
            end_time=parse_iso(data.get("end_time")),
            player1_counted=bool(data.get("player1_counted", False)),
            player2_counted=bool(data.get("player2_counted", False)),
        )
