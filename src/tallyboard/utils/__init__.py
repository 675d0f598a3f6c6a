"""Shared helpers for Tally Board."""

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

import logging
import uuid

from tallyboard.constants import PLAYER_ID_PREFIX

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_configured = False


def setup_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Return a module logger, configuring the package root logger once.

    Args:
        name: Logger name, usually ``__name__``
        level: Level applied to the package root logger on first use

    Returns:
        The named logger
    """
    global _configured
    if not _configured:
        root = logging.getLogger("tallyboard")
        if not root.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            root.addHandler(handler)
        root.setLevel(level)
        _configured = True
    return logging.getLogger(name)


def generate_id(prefix: str = PLAYER_ID_PREFIX) -> str:
    """Generate an opaque unique id such as ``p3f9a01c2d4``."""
    return f"{prefix}{uuid.uuid4().hex[:12]}"
