"""Tournament scoring engine for Tally Board.

Holds the tournament aggregate, the session event log, the ranking engine,
session finalization and document import/export.
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

from tallyboard.tournament.event_log import EventLog
from tallyboard.tournament.ranking import (
    LeaderboardRow,
    RankingEngine,
    SummaryRow,
    points_for_rank,
)
from tallyboard.tournament.session import finalize_session
from tallyboard.tournament.tournament import Tournament

__all__ = [
    "EventLog",
    "LeaderboardRow",
    "RankingEngine",
    "SummaryRow",
    "Tournament",
    "finalize_session",
    "points_for_rank",
]
