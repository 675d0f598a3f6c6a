"""Session finalization.

Commits the session in progress into lifetime totals and archives a
snapshot of its results.
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

from datetime import datetime
from typing import Callable, Optional

from tallyboard.constants import HISTORY_TIMESTAMP_SPEC
from tallyboard.models import HistoryEntry, HistoryResult
from tallyboard.tournament.ranking import RankingEngine
from tallyboard.tournament.tournament import Tournament
from tallyboard.utils import setup_logger

logger = setup_logger(__name__)


def _timestamp(clock: Optional[Callable[[], datetime]]) -> str:
    now = clock() if clock is not None else datetime.now()
    return now.isoformat(timespec=HISTORY_TIMESTAMP_SPEC)


def finalize_session(
    tournament: Tournament,
    ranking_engine: Optional[RankingEngine] = None,
    clock: Optional[Callable[[], datetime]] = None,
) -> HistoryEntry:
    """Close the current session.

    Awards session points by rank, adds them and the session counters to
    every player's lifetime totals, zeroes the counters and appends a
    history entry. Finalizing an idle session appends an all-zero entry and
    changes nothing else.

    Args:
        tournament: Tournament whose session is closed
        ranking_engine: Engine used to rank the session
        clock: Returns the finalization time, defaults to ``datetime.now``

    Returns:
        The archived history entry
    """
    engine = ranking_engine or RankingEngine()
    points = engine.session_points(tournament.players)
    ranked = engine.session_ranking(tournament.players)

    results = [
        HistoryResult(
            name=player.name,
            session_points=points[player.id],
            goals=player.session.goals,
            misses=player.session.misses,
        )
        for player in ranked
    ]
    # Best result first; equal points keep session ranking order
    results.sort(key=lambda r: r.session_points, reverse=True)
    entry = HistoryEntry(timestamp=_timestamp(clock), results=tuple(results))

    before = tournament.total_history_points
    for player in tournament.players:
        player.commit_session(points[player.id])
    tournament.append_history(entry)

    logger.info(
        f"Finalized session {len(tournament.session_history)} of "
        f"{tournament.name!r}: {entry.total_points} points awarded "
        f"({before} -> {tournament.total_history_points})"
    )
    return entry
