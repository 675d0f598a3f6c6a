"""Validation utilities for Tally Board.

This module provides reusable validation functions with consistent error handling.
"""

# Tally Board
# Copyright (C) 2025  Tally Board developers
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

from typing import Iterable, List, Optional

from tallyboard.constants import MIN_PARTICIPANTS


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value=None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Tournament Setup Validation ==========


def validate_tournament_name(name: Optional[str]) -> ValidationResult:
    """Validate a tournament name.

    Args:
        name: Name typed by the scorekeeper

    Returns:
        ValidationResult with the stripped name if valid

    Example:
        >>> validate_tournament_name("  Friday league ").sanitized_value
        'Friday league'
    """
    if not name or not name.strip():
        return ValidationResult(
            is_valid=False,
            error_message="Give the tournament a name",
        )
    return ValidationResult(is_valid=True, sanitized_value=name.strip())


def clean_participant_names(names: Iterable[Optional[str]]) -> List[str]:
    """Strip participant names and drop the blank entries."""
    return [n.strip() for n in names if n and n.strip()]


def validate_participants(names: Iterable[Optional[str]]) -> ValidationResult:
    """Validate the participant list for a new tournament.

    Blank rows are ignored; at least ``MIN_PARTICIPANTS`` named players remain.

    Args:
        names: Raw participant names, possibly with blanks

    Returns:
        ValidationResult with the cleaned list of names if valid
    """
    cleaned = clean_participant_names(names)
    if len(cleaned) < MIN_PARTICIPANTS:
        return ValidationResult(
            is_valid=False,
            error_message=f"Add at least {MIN_PARTICIPANTS} participants",
        )
    return ValidationResult(is_valid=True, sanitized_value=cleaned)
