"""Ordered log of scoring events with single-step undo."""

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

from typing import TYPE_CHECKING, List, Optional

from tallyboard.constants import COUNTER_KINDS
from tallyboard.exceptions import InvalidEventException
from tallyboard.models import Event
from tallyboard.utils import setup_logger

if TYPE_CHECKING:
    from tallyboard.tournament.tournament import Tournament

logger = setup_logger(__name__)


class EventLog:
    """Records scoring events for the session in progress.

    Each ``record`` increments a player's session counter and remembers the
    event; each ``undo`` reverts the most recent one. The log only lives for
    one session and is cleared whenever a new session begins.
    """

    def __init__(self) -> None:
        self._events: List[Event] = []

    def __len__(self) -> int:
        return len(self._events)

    @property
    def can_undo(self) -> bool:
        return bool(self._events)

    def record(
        self, tournament: "Tournament", player_id: str, counter_kind: str
    ) -> Optional[Event]:
        """Increment a player's session counter and log the event.

        Args:
            tournament: Tournament holding the player
            player_id: Id of the player who scored the event
            counter_kind: One of goals, misses, finals, slaps

        Returns:
            The recorded event, or None if the player is unknown

        Raises:
            InvalidEventException: If ``counter_kind`` is not a known counter
        """
        if counter_kind not in COUNTER_KINDS:
            raise InvalidEventException(f"Unknown counter kind: {counter_kind!r}")

        player = tournament.get_player(player_id)
        if player is None:
            logger.debug(f"Ignoring {counter_kind} for unknown player {player_id}")
            return None

        player.session.increment(counter_kind)
        event = Event(player_id=player_id, counter_kind=counter_kind)
        self._events.append(event)
        logger.debug(
            f"{player.name}: {counter_kind} -> {getattr(player.session, counter_kind)}"
        )
        return event

    def undo(self, tournament: "Tournament") -> Optional[Event]:
        """Revert the most recent event.

        Returns:
            The reverted event, or None if there was nothing to undo
        """
        if not self._events:
            logger.debug("Nothing to undo")
            return None

        event = self._events.pop()
        player = tournament.get_player(event.player_id)
        if player is None or not player.session.decrement(event.counter_kind):
            logger.warning(
                f"Undo of {event.counter_kind} for {event.player_id} "
                "left counters unchanged"
            )
        else:
            logger.debug(f"Undid {event.counter_kind} for {player.name}")
        return event

    def clear(self) -> None:
        self._events.clear()
