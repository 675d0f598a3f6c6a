"""Interactive console scorekeeper for Tally Board.

Runs a session from the terminal using the same controller as the desktop
window. Start it with ``--new NAME --player A --player B`` or
``--load FILE``.
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

import argparse
import shlex
import sys
from typing import List, Optional, Sequence

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from tallyboard import APP_NAME, APP_VERSION
from tallyboard.constants import (
    COUNTER_FINALS,
    COUNTER_GOALS,
    COUNTER_MISSES,
    COUNTER_SLAPS,
)
from tallyboard.controllers import SessionController
from tallyboard.exceptions import TallyBoardException
from tallyboard.models import Player
from tallyboard.utils import setup_logger

logger = setup_logger(__name__)


# ANSI color codes for terminal output
class Colors:
    HEADER = "\033[95m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


# Scoring commands and the counter each one increments
SCORING_COMMANDS = {
    "goal": COUNTER_GOALS,
    "miss": COUNTER_MISSES,
    "slap": COUNTER_SLAPS,
    "final": COUNTER_FINALS,
}

COMMANDS = {
    "goal": "goal <player>       Record a goal",
    "miss": "miss <player>       Record a miss",
    "slap": "slap <player>       Record a slap",
    "final": "final <player>      Record a final",
    "undo": "undo                Undo the last recorded event",
    "board": "board               Show the live leaderboard",
    "summary": "summary             Preview standings after this session",
    "history": "history             List finalized sessions",
    "save": "save [file]         Save without closing the session",
    "finalize": "finalize [file]     Close the session and save",
    "help": "help                Show this list",
    "quit": "quit                Leave (unsaved changes are lost)",
}

QUIT_COMMANDS = ("quit", "exit")


class QuitConsole(Exception):
    """Raised by the ``quit`` command to leave the prompt loop."""


class ConsoleApp:
    """Maps typed commands onto the session controller.

    ``execute`` returns the text to print, which keeps the command handling
    independent of the terminal.
    """

    def __init__(self, controller: SessionController):
        self.controller = controller

    def resolve_player(self, token: str) -> Optional[Player]:
        """Find a player by 1-based roster number or by unique name."""
        players = self.controller.get_players()
        if token.isdecimal():
            index = int(token) - 1
            return players[index] if 0 <= index < len(players) else None

        matches = [p for p in players if p.name.lower() == token.lower()]
        if len(matches) == 1:
            return matches[0]
        return None

    def execute(self, line: str) -> str:
        """Run one command line.

        Raises:
            QuitConsole: When the user asks to leave
        """
        try:
            parts = shlex.split(line)
        except ValueError as e:
            return f"Could not parse command: {e}"
        if not parts:
            return ""

        command, args = parts[0].lstrip("/").lower(), parts[1:]
        if command in QUIT_COMMANDS:
            raise QuitConsole()

        try:
            if command in SCORING_COMMANDS:
                return self._score(SCORING_COMMANDS[command], args)
            handler = getattr(self, f"_cmd_{command}", None)
            if handler is None:
                return f"Unknown command: {command}. Type 'help' for the list."
            return handler(args)
        except TallyBoardException as e:
            logger.warning(f"Command {command!r} failed: {e}")
            return f"Error: {e}"

    # ========== Commands ==========

    def _score(self, kind: str, args: List[str]) -> str:
        if len(args) != 1:
            return "Name one player, by number or name."
        player = self.resolve_player(args[0])
        if player is None:
            return f"No player matches {args[0]!r}."
        self.controller.record(player.id, kind)
        s = player.session
        return (
            f"{player.name}: {s.goals}G / {s.misses}M / {s.finals}F / {s.slaps}S"
        )

    def _cmd_undo(self, args: List[str]) -> str:
        event = self.controller.undo()
        if event is None:
            return "Nothing to undo."
        player = self.controller.tournament.get_player(event.player_id)
        name = player.name if player else event.player_id
        return f"Undid {event.counter_kind} for {name}."

    def _cmd_board(self, args: List[str]) -> str:
        lines = [
            f"{'#':>2}  {'Player':<16}{'Pts':>5}{'+S':>4}{'%':>7}{'G/M':>7}"
            f"{'Att':>5}{'Fin':>5}{'Slp':>5}"
        ]
        for row in self.controller.get_live_ranking():
            lines.append(
                f"{row.position:>2}  {row.name:<16}{row.live_total:>5}"
                f"{'+' + str(row.session_points):>4}{row.percentage:>6.1f}%"
                f"{f'{row.goals}/{row.misses}':>7}{row.attempts:>5}"
                f"{row.finals:>5}{row.slaps:>5}"
            )
        return "\n".join(lines)

    def _cmd_summary(self, args: List[str]) -> str:
        lines = [
            f"{'#':>2}  {'Player':<16}{'Pts':>5}{'%':>7}{'G/M':>9}"
            f"{'Att':>5}{'Fin':>5}{'Slp':>5}"
        ]
        for row in self.controller.get_final_summary():
            lines.append(
                f"{row.position:>2}  {row.name:<16}{row.points:>5}"
                f"{row.percentage:>6.1f}%{f'{row.goals}/{row.misses}':>9}"
                f"{row.attempts:>5}{row.finals:>5}{row.slaps:>5}"
            )
        return "\n".join(lines)

    def _cmd_history(self, args: List[str]) -> str:
        history = self.controller.get_history()
        if not history:
            return "No finalized sessions yet."
        lines = []
        for number, entry in enumerate(history, start=1):
            played_at = entry.played_at
            when = entry.timestamp
            if played_at is not None:
                when = played_at.strftime("%Y-%m-%d %H:%M")
            results = ", ".join(f"{r.name} +{r.session_points}" for r in entry.results)
            lines.append(f"Session {number} ({when}): {results}")
        return "\n".join(lines)

    def _cmd_save(self, args: List[str]) -> str:
        path = self.controller.save_file(args[0] if args else None)
        return f"Saved to {path}"

    def _cmd_finalize(self, args: List[str]) -> str:
        entry = self.controller.finalize()
        path = self.controller.save_file(args[0] if args else None)
        return f"Session closed, {entry.total_points} points awarded. Saved to {path}"

    def _cmd_help(self, args: List[str]) -> str:
        return "\n".join(COMMANDS.values())


def create_completer(controller: SessionController) -> WordCompleter:
    """Complete command names and player names."""
    words = list(COMMANDS) + [p.name for p in controller.get_players()]
    return WordCompleter(words, ignore_case=True)


def run_interactive(app: ConsoleApp) -> int:
    tournament = app.controller.tournament
    print(f"{Colors.HEADER}{Colors.BOLD}{APP_NAME} v{APP_VERSION}{Colors.ENDC}")
    print(f"Tournament: {tournament.name}")
    for number, player in enumerate(tournament.players, start=1):
        print(f"  {number}. {player.name}")
    print("Type 'help' for commands.")

    session = PromptSession(
        history=InMemoryHistory(),
        completer=create_completer(app.controller),
        style=Style.from_dict({"prompt": "ansigreen bold"}),
    )
    while True:
        try:
            line = session.prompt([("class:prompt", "tally> ")])
        except (EOFError, KeyboardInterrupt):
            break
        try:
            output = app.execute(line)
        except QuitConsole:
            break
        if output:
            print(output)

    if app.controller.is_dirty:
        print(f"{Colors.WARNING}Leaving with unsaved changes.{Colors.ENDC}")
    return 0


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tallyboard-console",
        description=f"{APP_NAME} console scorekeeper",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--load", metavar="FILE", help="Resume a saved tournament")
    source.add_argument("--new", metavar="NAME", help="Start a new tournament")
    parser.add_argument(
        "--player",
        action="append",
        default=[],
        metavar="NAME",
        help="Participant for --new (repeat for each player)",
    )
    parser.add_argument("--version", action="version", version=APP_VERSION)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    controller = SessionController()
    try:
        if args.load:
            controller.load_file(args.load)
        else:
            controller.start_tournament(args.new, args.player)
    except TallyBoardException as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}", file=sys.stderr)
        return 1

    return run_interactive(ConsoleApp(controller))


if __name__ == "__main__":
    sys.exit(main())
