"""Exceptions for use in Tally Board"""

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


# ========== Base Application Exception ==========


class TallyBoardException(Exception):
    """Base exception for all Tally Board errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Tournament Exceptions ==========


class TournamentException(TallyBoardException):
    """Base exception for tournament-related errors."""

    pass


class InvalidSetupException(TournamentException):
    """Raised when a new tournament cannot be created from the given setup.

    The message names the specific reason (missing name, too few participants).
    """

    pass


class TournamentStateException(TournamentException):
    """Raised when no tournament is loaded for the requested operation."""

    pass


# ========== Event Exceptions ==========


class EventException(TallyBoardException):
    """Base exception for scoring event errors."""

    pass


class InvalidEventException(EventException):
    """Raised when an event names a counter kind that does not exist."""

    pass


# ========== Document Exceptions ==========


class DocumentException(TallyBoardException):
    """Base exception for tournament document errors."""

    pass


class MalformedDocumentException(DocumentException):
    """Raised when a tournament document cannot be parsed or lacks required fields."""

    def __init__(self, message: str, path: str = "") -> None:
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


# ========== File/Resource Exceptions ==========


class ResourceException(TallyBoardException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass
