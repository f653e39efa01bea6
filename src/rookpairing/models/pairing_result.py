"""PairingResult data class."""

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
from typing import List, Optional

from rookpairing.models.match import Match
from rookpairing.models.round_data import RoundData


@dataclass
class PairingResult:
    """Result of a pairing computation for a single round."""

    round_data: RoundData
    unpaired_ids: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def bye_match(self) -> Optional[Match]:
        for match in self.round_data.matches:
            if match.is_bye:
                return match
        return None

    @property
    def is_complete(self) -> bool:
        """Whether every participant was seated."""
        return not self.unpaired_ids

    def warn(self, message: str) -> None:
        self.warnings.append(message)


#  LocalWords:  PairingResult
