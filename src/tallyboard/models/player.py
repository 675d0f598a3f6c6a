"""Player record and per-session counters."""

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

from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any, Dict

from tallyboard.constants import COUNTER_KINDS


@dataclass
class SessionCounters:
    """Event counts for one player during the current session.

    Attributes
    ----------
    goals : int
        Shots that scored.
    misses : int
        Shots that missed.
    finals : int
        Finals won (higher is better).
    slaps : int
        Penalty slaps received (lower is better).
    """

    goals: int = 0
    misses: int = 0
    finals: int = 0
    slaps: int = 0

    @property
    def attempts(self) -> int:
        """Goals plus misses."""
        return self.goals + self.misses

    @property
    def accuracy(self) -> Fraction:
        """Exact share of attempts that scored, 0 without attempts."""
        if self.attempts == 0:
            return Fraction(0)
        return Fraction(self.goals, self.attempts)

    @property
    def percentage(self) -> float:
        """Accuracy as a percentage rounded to one decimal."""
        return round(float(self.accuracy) * 100, 1)

    @property
    def is_idle(self) -> bool:
        """True when nothing has been recorded this session."""
        return all(getattr(self, kind) == 0 for kind in COUNTER_KINDS)

    def increment(self, kind: str) -> None:
        setattr(self, kind, getattr(self, kind) + 1)

    def decrement(self, kind: str) -> bool:
        """Decrement a counter, never below zero.

        Returns:
            True if the counter changed
        """
        value = getattr(self, kind)
        if value <= 0:
            return False
        setattr(self, kind, value - 1)
        return True

    def reset(self) -> None:
        for kind in COUNTER_KINDS:
            setattr(self, kind, 0)

    def to_dict(self) -> Dict[str, int]:
        return {
            "goals": self.goals,
            "misses": self.misses,
            "finals": self.finals,
            "slaps": self.slaps,
        }


@dataclass
class Player:
    """A tournament participant with lifetime totals and session counters.

    The ``id`` is assigned once when the roster is created and is the only
    key used to look players up; names are free text and may repeat.

    Attributes
    ----------
    id : str
        Opaque unique identifier.
    name : str
        Display name.
    history_points : int
        Points earned in all finalized sessions.
    total_goals, total_misses, total_finals, total_slaps : int
        Counters accumulated over all finalized sessions.
    session : SessionCounters
        Counters for the session in progress.
    """

    id: str
    name: str
    history_points: int = 0
    total_goals: int = 0
    total_misses: int = 0
    total_finals: int = 0
    total_slaps: int = 0
    session: SessionCounters = field(default_factory=SessionCounters)

    # ========== Cumulative values (lifetime + current session) ==========

    @property
    def cumulative_goals(self) -> int:
        return self.total_goals + self.session.goals

    @property
    def cumulative_misses(self) -> int:
        return self.total_misses + self.session.misses

    @property
    def cumulative_finals(self) -> int:
        return self.total_finals + self.session.finals

    @property
    def cumulative_slaps(self) -> int:
        return self.total_slaps + self.session.slaps

    @property
    def cumulative_attempts(self) -> int:
        return self.cumulative_goals + self.cumulative_misses

    @property
    def cumulative_percentage(self) -> float:
        """Lifetime shooting percentage including the current session."""
        if self.cumulative_attempts == 0:
            return 0.0
        return round(self.cumulative_goals / self.cumulative_attempts * 100, 1)

    # ========== Session lifecycle ==========

    def commit_session(self, awarded_points: int) -> None:
        """Fold the session counters into lifetime totals and reset them."""
        self.history_points += awarded_points
        self.total_goals += self.session.goals
        self.total_misses += self.session.misses
        self.total_finals += self.session.finals
        self.total_slaps += self.session.slaps
        self.session.reset()

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the player using the document field names."""
        return {
            "id": self.id,
            "name": self.name,
            "historyPoints": self.history_points,
            "totalGoals": self.total_goals,
            "totalMisses": self.total_misses,
            "totalFinals": self.total_finals,
            "totalSlaps": self.total_slaps,
            "session": self.session.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """Rebuild a player from document fields.

        The stored session is never restored; a loaded player always starts
        with zeroed counters.
        """
        return cls(
            id=data["id"],
            name=data["name"],
            history_points=data["historyPoints"],
            total_goals=data["totalGoals"],
            total_misses=data["totalMisses"],
            total_finals=data["totalFinals"],
            total_slaps=data["totalSlaps"],
        )

    def __str__(self) -> str:
        return f"{self.name} ({self.history_points} pts)"
