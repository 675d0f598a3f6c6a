"""Tournament document import and export.

A document is the JSON object written when a session is finalized and read
back to resume the tournament later::

    {
      "tournamentName": "...",
      "players": [{"id", "name", "historyPoints", "totalGoals", "totalMisses",
                   "totalFinals", "totalSlaps", "session": {...}}],
      "sessionHistory": [{"date", "results": [{"name", "pts", "goals", "misses"}]}]
    }

Loading always discards the stored ``session`` counters. ``sessionHistory``
is optional for documents written before history was kept.
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

import json
import re
from pathlib import Path
from typing import Any, Dict, List, Union

from tallyboard.constants import EXPORT_FILE_SUFFIX, SAVE_FILE_EXTENSION
from tallyboard.exceptions import (
    FileLoadException,
    FileSaveException,
    MalformedDocumentException,
)
from tallyboard.tournament.tournament import Tournament
from tallyboard.utils import setup_logger

logger = setup_logger(__name__)

PLAYER_COUNTER_FIELDS = (
    "historyPoints",
    "totalGoals",
    "totalMisses",
    "totalFinals",
    "totalSlaps",
)
RESULT_COUNTER_FIELDS = ("pts", "goals", "misses")


# ========== Field validation ==========


def _require(data: Dict[str, Any], key: str, path: str) -> Any:
    if key not in data:
        raise MalformedDocumentException("missing required field", f"{path}{key}")
    return data[key]


def _require_str(data: Dict[str, Any], key: str, path: str) -> str:
    value = _require(data, key, path)
    if not isinstance(value, str):
        raise MalformedDocumentException("expected a string", f"{path}{key}")
    return value


def _require_count(data: Dict[str, Any], key: str, path: str) -> int:
    value = _require(data, key, path)
    # bool is an int subclass, reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedDocumentException("expected an integer", f"{path}{key}")
    if value < 0:
        raise MalformedDocumentException("cannot be negative", f"{path}{key}")
    return value


def _require_list(data: Dict[str, Any], key: str, path: str) -> List[Any]:
    value = _require(data, key, path)
    if not isinstance(value, list):
        raise MalformedDocumentException("expected a list", f"{path}{key}")
    return value


def _require_object(value: Any, path: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise MalformedDocumentException("expected an object", path)
    return value


def validate_document(data: Any) -> None:
    """Check that ``data`` has the shape of a tournament document.

    Args:
        data: Decoded JSON value

    Raises:
        MalformedDocumentException: Naming the first offending field
    """
    document = _require_object(data, "document")
    _require_str(document, "tournamentName", "")

    seen_ids = set()
    for index, raw in enumerate(_require_list(document, "players", "")):
        path = f"players[{index}]."
        player = _require_object(raw, path.rstrip("."))
        player_id = _require_str(player, "id", path)
        if player_id in seen_ids:
            raise MalformedDocumentException(
                f"duplicate player id {player_id!r}", f"{path}id"
            )
        seen_ids.add(player_id)
        _require_str(player, "name", path)
        for key in PLAYER_COUNTER_FIELDS:
            _require_count(player, key, path)

    if "sessionHistory" not in document:
        return

    for index, raw in enumerate(_require_list(document, "sessionHistory", "")):
        path = f"sessionHistory[{index}]."
        entry = _require_object(raw, path.rstrip("."))
        _require_str(entry, "date", path)
        for result_index, raw_result in enumerate(
            _require_list(entry, "results", path)
        ):
            result_path = f"{path}results[{result_index}]."
            result = _require_object(raw_result, result_path.rstrip("."))
            _require_str(result, "name", result_path)
            for key in RESULT_COUNTER_FIELDS:
                _require_count(result, key, result_path)


# ========== Import / Export ==========


def import_document(data: Any) -> Tournament:
    """Build a tournament from a decoded document.

    The document is validated completely before anything is built, so a
    malformed document never yields a partial tournament.

    Raises:
        MalformedDocumentException: If required fields are missing or invalid
    """
    validate_document(data)
    tournament = Tournament.from_dict(data)
    logger.info(
        f"Imported tournament {tournament.name!r}: {len(tournament.players)} players, "
        f"{len(tournament.session_history)} sessions"
    )
    return tournament


def export_document(tournament: Tournament) -> Dict[str, Any]:
    """Serialize the whole tournament, pending session counters included."""
    return tournament.to_dict()


def loads_document(text: Union[str, bytes]) -> Tournament:
    """Parse JSON text into a tournament.

    Raises:
        MalformedDocumentException: If the text is not JSON or not a document
    """
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as e:
        raise MalformedDocumentException(f"not valid JSON ({e})") from e
    return import_document(data)


def dumps_document(tournament: Tournament) -> str:
    return json.dumps(export_document(tournament), indent=4, ensure_ascii=False)


def default_export_filename(tournament: Tournament) -> str:
    """Suggested file name for a finalized tournament, e.g. ``Cup_fin.json``."""
    stem = re.sub(r'[\\/:*?"<>|]+', "_", tournament.name).strip() or "tournament"
    return f"{stem}{EXPORT_FILE_SUFFIX}{SAVE_FILE_EXTENSION}"


def load_file(path: Union[str, Path]) -> Tournament:
    """Read a tournament document from disk.

    Raises:
        FileLoadException: If the file cannot be read
        MalformedDocumentException: If its content is not a valid document
    """
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as e:
        raise FileLoadException(f"Could not read {path}: {e}") from e

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedDocumentException(f"not UTF-8 encoded ({e})") from e
    return loads_document(text)


def save_file(tournament: Tournament, path: Union[str, Path]) -> Path:
    """Write the tournament document to disk.

    Returns:
        The path written

    Raises:
        FileSaveException: If the file cannot be written
    """
    path = Path(path)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(dumps_document(tournament))
    except OSError as e:
        raise FileSaveException(f"Could not write {path}: {e}") from e
    logger.info(f"Saved tournament {tournament.name!r} to {path}")
    return path
