"""Exceptions for use in Rook Pairing"""

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

from typing import Optional


# ========== Base Application Exception ==========


class RookPairingException(Exception):
    """Base exception for all Rook Pairing errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Validation Exceptions ==========


class ValidationException(RookPairingException):
    """Raised when caller supplied data is invalid. Never auto-corrected."""

    pass


class DuplicateNameException(ValidationException):
    """Raised when a player or team name is already taken (case-insensitive)."""

    pass


class InvalidResultException(ValidationException):
    """Raised when a reported outcome does not fit the match."""

    pass


class InvalidPairingException(ValidationException):
    """Raised when a manual pairing cannot be added."""

    pass


class InsufficientParticipantsException(ValidationException):
    """Raised when there are too few active participants to start or pair."""

    pass


class WinnerDecidedException(InsufficientParticipantsException):
    """Raised when a cup has a single player left standing.

    The tournament should be ended rather than paired again.
    """

    def __init__(self, winner_id: Optional[str], message: Optional[str] = None):
        self.winner_id = winner_id
        super().__init__(
            message or "A winner has been decided. End the tournament instead."
        )


# ========== Tournament State Exceptions ==========


class TournamentStateException(RookPairingException):
    """Raised when tournament is in an invalid state for the requested operation."""

    pass


class IncompleteRoundException(TournamentStateException):
    """Raised when the open round still has unrecorded matches."""

    pass


class RoundLimitReachedException(TournamentStateException):
    """Raised when the configured (or round-robin) number of rounds is exhausted."""

    pass


# ========== Not Found Exceptions ==========


class NotFoundException(RookPairingException):
    """Base exception for references to entities that do not exist."""

    pass


class PlayerNotFoundException(NotFoundException):
    """Raised when a requested player cannot be found."""

    pass


class TeamNotFoundException(NotFoundException):
    """Raised when a requested team cannot be found."""

    pass


class MatchNotFoundException(NotFoundException):
    """Raised when a requested match is not part of the open round."""

    pass


class TournamentNotFoundException(NotFoundException):
    """Raised when a store holds no tournament with the requested id."""

    pass


# ========== Pairing Exceptions ==========


class PairingException(RookPairingException):
    """Raised when a pairing algorithm is asked for something it cannot do."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(RookPairingException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a stored tournament document cannot be read."""

    pass


class FileSaveException(ResourceException):
    """Raised when a tournament document cannot be written."""

    pass
