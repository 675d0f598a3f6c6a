"""Ranking and point allocation for tournament sessions.

Two orderings exist:

Session ranking (decides the points handed out for a session):
- Shooting accuracy goals / (goals + misses), higher first
- Session goals, higher first
- Session slaps, fewer first
- Session finals, higher first

Live ranking (running leaderboard and final summary):
- Lifetime points plus the points the current session would award
- Cumulative slaps, fewer first
- Cumulative finals, higher first

Players equal on every key keep roster order.
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

import functools
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from tallyboard.constants import POINTS_BY_RANK, RANK_LIVE, RANK_SESSION
from tallyboard.models import Player
from tallyboard.type_hints import PointsMap, RankingMode


def points_for_rank(position: int) -> int:
    """Session points earned for a 0-based ranking position.

    Args:
        position: Index in the session ranking

    Returns:
        5, 4, 3, 2, 1 for the first five places and 0 afterwards

    Raises:
        ValueError: If position is negative
    """
    if position < 0:
        raise ValueError(f"Ranking position cannot be negative: {position}")
    if position < len(POINTS_BY_RANK):
        return POINTS_BY_RANK[position]
    return 0


@dataclass(frozen=True)
class LeaderboardRow:
    """One row of the live leaderboard."""

    position: int
    player_id: str
    name: str
    live_total: int
    session_points: int
    percentage: float
    goals: int
    misses: int
    attempts: int
    finals: int
    slaps: int


@dataclass(frozen=True)
class SummaryRow:
    """One row of the end-of-session summary, lifetime figures included."""

    position: int
    player_id: str
    name: str
    points: int
    percentage: float
    goals: int
    misses: int
    attempts: int
    finals: int
    slaps: int


class RankingEngine:
    """Orders players and derives session points.

    All methods are pure reads over the players they are given.
    """

    def rank(
        self,
        players: Sequence[Player],
        mode: RankingMode = RANK_SESSION,
        session_points: Optional[PointsMap] = None,
    ) -> List[Player]:
        """Order players best first.

        Args:
            players: Players in roster order
            mode: ``"session"`` or ``"live"``
            session_points: Precomputed session points for live ranking

        Returns:
            New list of players sorted by rank (best to worst)
        """
        if mode == RANK_SESSION:
            compare = self._compare_session
        elif mode == RANK_LIVE:
            points = (
                session_points
                if session_points is not None
                else self.session_points(players)
            )
            compare = functools.partial(self._compare_live, points=points)
        else:
            raise ValueError(f"Unknown ranking mode: {mode!r}")

        # sorted() keeps equal players in roster order, also with reverse=True
        return sorted(players, key=functools.cmp_to_key(compare), reverse=True)

    def session_ranking(self, players: Sequence[Player]) -> List[Player]:
        return self.rank(players, RANK_SESSION)

    def live_ranking(self, players: Sequence[Player]) -> List[Player]:
        return self.rank(players, RANK_LIVE)

    def session_points(self, players: Sequence[Player]) -> PointsMap:
        """Map every player id to the points the session currently awards.

        A session where nothing has been recorded awards no points at all,
        so closing an idle session leaves every total untouched.
        """
        if all(p.session.is_idle for p in players):
            return {p.id: 0 for p in players}

        return {
            player.id: points_for_rank(position)
            for position, player in enumerate(self.session_ranking(players))
        }

    # ========== Read models ==========

    def leaderboard(self, players: Sequence[Player]) -> List[LeaderboardRow]:
        """Rows for the running leaderboard, in live ranking order."""
        points = self.session_points(players)
        ranked = self.rank(players, RANK_LIVE, session_points=points)
        return [
            LeaderboardRow(
                position=index + 1,
                player_id=p.id,
                name=p.name,
                live_total=p.history_points + points[p.id],
                session_points=points[p.id],
                percentage=p.session.percentage,
                goals=p.session.goals,
                misses=p.session.misses,
                attempts=p.session.attempts,
                finals=p.session.finals,
                slaps=p.session.slaps,
            )
            for index, p in enumerate(ranked)
        ]

    def final_summary(self, players: Sequence[Player]) -> List[SummaryRow]:
        """Rows previewing the standings once the session is committed."""
        points = self.session_points(players)
        ranked = self.rank(players, RANK_LIVE, session_points=points)
        return [
            SummaryRow(
                position=index + 1,
                player_id=p.id,
                name=p.name,
                points=p.history_points + points[p.id],
                percentage=p.cumulative_percentage,
                goals=p.cumulative_goals,
                misses=p.cumulative_misses,
                attempts=p.cumulative_attempts,
                finals=p.cumulative_finals,
                slaps=p.cumulative_slaps,
            )
            for index, p in enumerate(ranked)
        ]

    # ========== Comparators ==========

    def _compare_session(self, p1: Player, p2: Player) -> int:
        """Compare two players for session order.

        Returns:
            1 if p1 ranks higher, -1 if p2 ranks higher, 0 if equal
        """
        s1, s2 = p1.session, p2.session

        if s1.accuracy != s2.accuracy:
            return 1 if s1.accuracy > s2.accuracy else -1

        if s1.goals != s2.goals:
            return 1 if s1.goals > s2.goals else -1

        # Slaps are a penalty
        if s1.slaps != s2.slaps:
            return 1 if s1.slaps < s2.slaps else -1

        if s1.finals != s2.finals:
            return 1 if s1.finals > s2.finals else -1

        return 0

    def _compare_live(self, p1: Player, p2: Player, points: Dict[str, int]) -> int:
        """Compare two players for leaderboard order.

        Returns:
            1 if p1 ranks higher, -1 if p2 ranks higher, 0 if equal
        """
        total1 = p1.history_points + points.get(p1.id, 0)
        total2 = p2.history_points + points.get(p2.id, 0)
        if total1 != total2:
            return 1 if total1 > total2 else -1

        if p1.cumulative_slaps != p2.cumulative_slaps:
            return 1 if p1.cumulative_slaps < p2.cumulative_slaps else -1

        if p1.cumulative_finals != p2.cumulative_finals:
            return 1 if p1.cumulative_finals > p2.cumulative_finals else -1

        return 0
