"""Archived results of finalized sessions."""

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

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from dateutil import parser as date_parser

from tallyboard.utils import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class HistoryResult:
    """One player's line in a finalized session.

    Attributes
    ----------
    name : str
        Player name at finalization time (a snapshot, not a live reference).
    session_points : int
        Points awarded for the session.
    goals : int
        Session goals.
    misses : int
        Session misses.
    """

    name: str
    session_points: int
    goals: int
    misses: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "pts": self.session_points,
            "goals": self.goals,
            "misses": self.misses,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HistoryResult":
        return cls(
            name=data["name"],
            session_points=data["pts"],
            goals=data["goals"],
            misses=data["misses"],
        )


@dataclass(frozen=True)
class HistoryEntry:
    """Immutable snapshot of a finalized session, best result first."""

    timestamp: str
    results: Tuple[HistoryResult, ...] = ()

    @property
    def total_points(self) -> int:
        return sum(r.session_points for r in self.results)

    @property
    def played_at(self) -> Optional[datetime]:
        """Parse the timestamp, tolerating formats written by older versions.

        Returns:
            The parsed datetime, or None if the timestamp is unreadable
        """
        try:
            return date_parser.parse(self.timestamp)
        except (ValueError, OverflowError):
            logger.warning("Unreadable session timestamp: %r", self.timestamp)
            return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.timestamp,
            "results": [r.to_dict() for r in self.results],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HistoryEntry":
        return cls(
            timestamp=data["date"],
            results=tuple(HistoryResult.from_dict(r) for r in data["results"]),
        )
