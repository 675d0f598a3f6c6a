"""Tournament aggregate: roster plus session history."""

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

from typing import Any, Dict, Iterable, List, Optional

from tallyboard.exceptions import InvalidSetupException
from tallyboard.models import HistoryEntry, Player
from tallyboard.utils import generate_id, setup_logger
from tallyboard.utils.validation import validate_participants, validate_tournament_name

logger = setup_logger(__name__)


class Tournament:
    """Root aggregate owning every player and every archived session.

    Players are kept in roster order, which is also the last tie-break of
    every ranking. The session history is append-only.
    """

    def __init__(
        self,
        name: str,
        players: List[Player],
        session_history: Optional[List[HistoryEntry]] = None,
    ) -> None:
        """Initialize a tournament.

        Args
        ----
        name: Tournament name
        players: Roster in insertion order
        session_history: Previously finalized sessions, oldest first
        """
        self.name = name
        self.players: List[Player] = list(players)
        self.session_history: List[HistoryEntry] = list(session_history or [])
        self._by_id: Dict[str, Player] = {p.id: p for p in self.players}

    @classmethod
    def create(cls, name: str, participant_names: Iterable[str]) -> "Tournament":
        """Start a fresh tournament.

        Args:
            name: Tournament name, surrounding whitespace is stripped
            participant_names: Names typed by the scorekeeper, blanks ignored

        Returns:
            The new tournament with zeroed totals

        Raises:
            InvalidSetupException: If the name is empty or fewer than two
                named participants remain
        """
        name_result = validate_tournament_name(name)
        if not name_result:
            raise InvalidSetupException(name_result.error_message)

        participants_result = validate_participants(participant_names)
        if not participants_result:
            raise InvalidSetupException(participants_result.error_message)

        players = [
            Player(id=generate_id(), name=player_name)
            for player_name in participants_result.sanitized_value
        ]
        tournament = cls(name_result.sanitized_value, players)
        logger.info(
            f"Created tournament {tournament.name!r} with {len(players)} players"
        )
        return tournament

    # ========== Player Management ==========

    def get_player(self, player_id: str) -> Optional[Player]:
        """Look a player up by id, None if unknown."""
        return self._by_id.get(player_id)

    @property
    def session_is_idle(self) -> bool:
        """True when no player has anything recorded this session."""
        return all(p.session.is_idle for p in self.players)

    def reset_sessions(self) -> None:
        """Zero every player's session counters."""
        for player in self.players:
            player.session.reset()

    # ========== History ==========

    def append_history(self, entry: HistoryEntry) -> None:
        self.session_history.append(entry)

    @property
    def total_history_points(self) -> int:
        return sum(p.history_points for p in self.players)

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament to the document layout.

        Returns:
            Dictionary containing all tournament data, pending session included
        """
        return {
            "tournamentName": self.name,
            "players": [p.to_dict() for p in self.players],
            "sessionHistory": [h.to_dict() for h in self.session_history],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tournament":
        """Deserialize a tournament from an already validated document.

        Session counters always start at zero.
        """
        players = [Player.from_dict(p) for p in data["players"]]
        history = [HistoryEntry.from_dict(h) for h in data.get("sessionHistory", [])]
        return cls(data["tournamentName"], players, history)

    def __repr__(self) -> str:
        return (
            f"Tournament(name={self.name!r}, players={len(self.players)}, "
            f"sessions={len(self.session_history)})"
        )
