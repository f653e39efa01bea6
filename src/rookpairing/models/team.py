"""Team data class."""

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
from typing import Any, Dict

from rookpairing.exceptions import ValidationException
from rookpairing.utils import generate_id, parse_iso, to_iso, utc_now


@dataclass
class Team:
    """A group players can be affiliated with in team tournaments.

    Attributes
    ----------
    name : str
        Team name, unique case-insensitively within a tournament.
    id : str
        Unique identifier.
    created_at : datetime
        When the team was added.
    """

    name: str
    id: str = field(default_factory=generate_id)
    created_at: datetime = field(default_factory=utc_now)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize team to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "created_at": to_iso(self.created_at),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Team":
        """Deserialize team from dictionary."""
        if not data.get("id") or not data.get("name"):
            raise ValidationException("Team data requires an id and a name")
        return cls(
            name=data["name"],
            id=data["id"],
            created_at=parse_iso(data.get("created_at")) or utc_now(),
        )
