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

"""
Session controller.

This module owns the tournament being scored and exposes the commands the
view layers issue:
- Starting a tournament or importing a saved one
- Recording scoring events and undoing the last one
- Finalizing the session
- Exporting the document
and the read-only queries the views poll after every command.

The controller does not interact with Qt widgets or the terminal.
"""

from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from tallyboard.exceptions import TournamentStateException
from tallyboard.models import Event, HistoryEntry, Player
from tallyboard.tournament import (
    EventLog,
    LeaderboardRow,
    RankingEngine,
    SummaryRow,
    Tournament,
    finalize_session,
)
from tallyboard.tournament import document
from tallyboard.type_hints import PointsMap
from tallyboard.utils import setup_logger

logger = setup_logger(__name__)


class SessionController:
    """
    Controller for one scorekeeper's tournament.

    Holds at most one tournament. Starting or importing a tournament
    replaces it wholesale and begins a new session with an empty event log.

    Parameters
    ----------
    clock : callable, optional
        Returns the current time; used to timestamp finalized sessions
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self.tournament: Optional[Tournament] = None
        self.event_log = EventLog()
        self.ranking_engine = RankingEngine()
        self._clock = clock
        self._dirty = False

    # ========== State ==========

    @property
    def has_tournament(self) -> bool:
        return self.tournament is not None

    @property
    def can_undo(self) -> bool:
        return self.has_tournament and self.event_log.can_undo

    @property
    def is_dirty(self) -> bool:
        """Whether there are changes not yet written to a document."""
        return self._dirty

    def _require_tournament(self) -> Tournament:
        if self.tournament is None:
            logger.warning("Command issued with no tournament loaded")
            raise TournamentStateException("No tournament loaded")
        return self.tournament

    def _begin_session(self, tournament: Tournament) -> Tournament:
        if self.tournament is not None and self.tournament is not tournament:
            logger.info(
                f"Replacing tournament {self.tournament.name!r} "
                f"({len(self.event_log)} unsaved events dropped)"
            )
        tournament.reset_sessions()
        self.tournament = tournament
        self.event_log.clear()
        logger.info(f"Session started for {tournament.name!r}")
        return tournament

    # ========== Commands ==========

    def start_tournament(
        self, name: str, participant_names: Iterable[str]
    ) -> Tournament:
        """Create a new tournament and begin its first session.

        Raises:
            InvalidSetupException: With the reason the setup was rejected
        """
        tournament = self._begin_session(Tournament.create(name, participant_names))
        self._dirty = True
        return tournament

    def record(self, player_id: str, kind: str) -> Optional[Event]:
        """Record one scoring event; unknown players are ignored."""
        event = self.event_log.record(self._require_tournament(), player_id, kind)
        if event is not None:
            self._dirty = True
        return event

    def undo(self) -> Optional[Event]:
        """Revert the last recorded event, if any."""
        if self.tournament is None:
            return None
        event = self.event_log.undo(self.tournament)
        if event is not None:
            self._dirty = True
        return event

    def finalize(self) -> HistoryEntry:
        """Commit the session into lifetime totals and start a new one."""
        tournament = self._require_tournament()
        entry = finalize_session(tournament, self.ranking_engine, clock=self._clock)
        self.event_log.clear()
        self._dirty = True
        logger.info(
            f"Session finalized for {tournament.name!r}, "
            f"{len(tournament.session_history)} sessions archived"
        )
        return entry

    def import_document(self, data: Any) -> Tournament:
        """Replace the current tournament with a decoded document.

        Raises:
            MalformedDocumentException: Current state is left unchanged
        """
        tournament = self._begin_session(document.import_document(data))
        self._dirty = False
        return tournament

    def load_file(self, path: Union[str, Path]) -> Tournament:
        """Replace the current tournament with one read from disk.

        Raises:
            FileLoadException, MalformedDocumentException: State unchanged
        """
        tournament = self._begin_session(document.load_file(path))
        self._dirty = False
        return tournament

    def export_document(self) -> Dict[str, Any]:
        return document.export_document(self._require_tournament())

    def save_file(self, path: Union[str, Path, None] = None) -> Path:
        """Write the document, by default to ``<name>_fin.json``.

        Raises:
            FileSaveException: If writing fails
        """
        tournament = self._require_tournament()
        if path is None:
            path = document.default_export_filename(tournament)
        written = document.save_file(tournament, path)
        self._dirty = False
        return written

    # ========== Queries ==========

    def get_players(self) -> List[Player]:
        return list(self._require_tournament().players)

    def session_points(self) -> PointsMap:
        return self.ranking_engine.session_points(self._require_tournament().players)

    def get_session_ranking(self) -> List[Player]:
        return self.ranking_engine.session_ranking(self._require_tournament().players)

    def get_live_ranking(self) -> List[LeaderboardRow]:
        return self.ranking_engine.leaderboard(self._require_tournament().players)

    def get_final_summary(self) -> List[SummaryRow]:
        return self.ranking_engine.final_summary(self._require_tournament().players)

    def get_history(self) -> List[HistoryEntry]:
        return list(self._require_tournament().session_history)
