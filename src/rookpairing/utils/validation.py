"""Validation utilities for Rook Pairing.

Each ``validate_*`` function reports problems through a ValidationResult;
the ``*_strict`` variants raise ValidationException instead.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from rookpairing.constants import (
    MAX_NAME_LENGTH,
    MAX_RATING,
    MIN_RATING,
    TOURNAMENT_MODES,
)
from rookpairing.exceptions import DuplicateNameException, ValidationException


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of checking one user supplied value.

    ``sanitized_value`` holds the cleaned-up input when the check passed and
    ``error_message`` the text to show when it did not. A result is truthy
    when valid.
    """

    is_valid: bool
    error_message: Optional[str] = None
    sanitized_value: Optional[str] = None

    def __bool__(self) -> bool:
        return self.is_valid

    @classmethod
    def ok(cls, value: Optional[str] = None) -> "ValidationResult":
        return cls(True, sanitized_value=value)

    @classmethod
    def fail(cls, message: str) -> "ValidationResult":
        return cls(False, error_message=message)

    def raise_if_invalid(self) -> Optional[str]:
        """Return the sanitized value, or raise ValidationException."""
        if not self.is_valid:
            raise ValidationException(self.error_message)
        return self.sanitized_value


# ========== Names ==========


def validate_name(
    name: Optional[str], required: bool = True, label: str = "Name"
) -> ValidationResult:
    """Validate a player, team or tournament name.

    Args:
        name: Name to validate
        required: Whether an empty name is an error
        label: Noun used in the error message

    Returns:
        ValidationResult carrying the trimmed name
    """
    trimmed = (name or "").strip()
    if not trimmed:
        if required:
            return ValidationResult.fail(f"{label} cannot be empty")
        return ValidationResult.ok()
    if len(trimmed) > MAX_NAME_LENGTH:
        return ValidationResult.fail(f"{label} must be at most {MAX_NAME_LENGTH} characters")
    return ValidationResult.ok(trimmed)


def validate_name_strict(name: Optional[str], label: str = "Name") -> str:
    """Validate a required name and return it trimmed.

    Raises:
        ValidationException: If the name is empty or too long
    """
    return validate_name(name, required=True, label=label).raise_if_invalid()  # type: ignore[return-value]


def ensure_unique_name(
    name: str, existing: Iterable[str], label: str = "A player"
) -> None:
    """Reject ``name`` if it matches any of ``existing`` ignoring case.

    Raises:
        DuplicateNameException: If the name is already taken
    """
    folded = name.casefold()
    if any(other.casefold() == folded for other in existing):
        raise DuplicateNameException(f"{label} with this name already exists: {name}")


# ========== Numbers ==========


def _bounded_int(value, label: str, low: int, high: Optional[int]) -> ValidationResult:
    if value is None or value == "":
        return ValidationResult.ok()
    if isinstance(value, bool):
        return ValidationResult.fail(f"{label} must be a number: {value}")
    try:
        number = int(value)
    except (ValueError, TypeError):
        return ValidationResult.fail(f"{label} must be a number: {value}")
    if number < low or (high is not None and number > high):
        bounds = f"{low} or more" if high is None else f"between {low} and {high}"
        return ValidationResult.fail(f"{label} must be {bounds}: {number}")
    return ValidationResult.ok(str(number))


def validate_rating(
    rating: Optional[int], min_rating: int = MIN_RATING, max_rating: int = MAX_RATING
) -> ValidationResult:
    """Validate an optional player rating within ``[min_rating, max_rating]``."""
    return _bounded_int(rating, "Rating", min_rating, max_rating)


def validate_rating_strict(rating: Optional[int]) -> Optional[int]:
    """Validate a rating and return it as an int, or None when absent.

    Raises:
        ValidationException: If rating is invalid
    """
    value = validate_rating(rating).raise_if_invalid()
    return int(value) if value is not None else None


# ========== Tournament settings ==========


def validate_mode(mode: Optional[str]) -> ValidationResult:
    if mode not in TOURNAMENT_MODES:
        return ValidationResult.fail(
            f"Unknown tournament mode: {mode!r} "
            f"(expected one of {', '.join(TOURNAMENT_MODES)})"
        )
    return ValidationResult.ok(mode)


def validate_num_rounds(num_rounds: Optional[int]) -> ValidationResult:
    """Validate an optional round limit. None means unlimited."""
    return _bounded_int(num_rounds, "Number of rounds", 1, None)


def validate_tournament_settings(
    name: Optional[str], mode: Optional[str], num_rounds: Optional[int]
) -> None:
    """Validate everything needed to create a tournament.

    Raises:
        ValidationException: On the first invalid setting
    """
    for result in (
        validate_name(name, label="Tournament name"),
        validate_mode(mode),
        validate_num_rounds(num_rounds),
    ):
        result.raise_if_invalid()
