"""TournamentConfig data class."""

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
from typing import Any, Dict, Optional

from rookpairing.constants import DEFAULT_TOURNAMENT_NAME, MODE_SWISS
from rookpairing.type_hints import Mode
from rookpairing.utils.validation import validate_tournament_settings


@dataclass
class TournamentConfig:
    """Tournament configuration settings.

    Attributes
    ----------
    name : str
        Tournament name.
    mode : str
        Format: "swiss", "round-robin" or "cup".
    num_rounds : int or None
        Fixed round limit, None for unlimited.
    is_team_tournament : bool
        Whether players are affiliated with teams.
    time_control : str or None
        Free text such as "90+30".
    """

    name: str
    mode: Mode = MODE_SWISS
    num_rounds: Optional[int] = None
    is_team_tournament: bool = False
    time_control: Optional[str] = None

    def __post_init__(self) -> None:
        validate_tournament_settings(self.name, self.mode, self.num_rounds)
        self.name = self.name.strip()
        if self.num_rounds is not None:
            self.num_rounds = int(self.num_rounds)
        if self.time_control is not None:
            self.time_control = self.time_control.strip() or None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "mode": self.mode,
            "num_rounds": self.num_rounds,
            "is_team_tournament": self.is_team_tournament,
            "time_control": self.time_control,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            name=data.get("name") or DEFAULT_TOURNAMENT_NAME,
            mode=data.get("mode", MODE_SWISS),
            num_rounds=data.get("num_rounds"),
            is_team_tournament=bool(data.get("is_team_tournament", False)),
            time_control=data.get("time_control"),
        )
