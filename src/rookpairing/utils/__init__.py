"""Shared helpers: logging, identifiers and timestamps."""

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

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Optional

from dateutil import parser as date_parser

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_root_configured = False


def setup_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Return a module logger, configuring the package root logger once.

    Args:
        name: Logger name, normally ``__name__``
        level: Level applied to the package root logger on first use

    Returns:
        The named logger
    """
    global _root_configured
    if not _root_configured:
        root = logging.getLogger("rookpairing")
        if not root.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            root.addHandler(handler)
        root.setLevel(level)
        _root_configured = True
    return logging.getLogger(name)


def generate_id() -> str:
    """Mint a globally unique opaque identifier (random 128-bit UUID)."""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def to_iso(value: Optional[datetime]) -> Optional[str]:
    """Serialize a datetime to an ISO-8601 string, passing None through."""
    if value is None:
        return None
    return value.isoformat()


def parse_iso(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 string back into a datetime.

    Accepts datetimes unchanged and the ``Z`` suffix browsers write. Naive
    values are assumed to be UTC.

    Raises:
        ValueError: If the string is not a valid ISO-8601 timestamp
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        parsed = date_parser.isoparse(str(value))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


__all__ = [
    "setup_logger",
    "generate_id",
    "utc_now",
    "to_iso",
    "parse_iso",
]
