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

# --- Constants ---
SAVE_FILE_EXTENSION = ".json"
SAVE_FILE_FILTER = f"Tally Board Files (*{SAVE_FILE_EXTENSION});;All Files (*)"
EXPORT_FILE_SUFFIX = "_fin"

# Session counter kinds, in the order buttons and columns are shown
COUNTER_GOALS = "goals"
COUNTER_MISSES = "misses"
COUNTER_SLAPS = "slaps"
COUNTER_FINALS = "finals"
COUNTER_KINDS = (COUNTER_GOALS, COUNTER_MISSES, COUNTER_SLAPS, COUNTER_FINALS)

# Display labels for the counter kinds
COUNTER_LABELS = {
    COUNTER_GOALS: "Goal",
    COUNTER_MISSES: "Miss",
    COUNTER_SLAPS: "Slap",
    COUNTER_FINALS: "Final",
}

# Session points awarded by ranking position (0-based). Positions past the
# end of the table earn nothing.
POINTS_BY_RANK = (5, 4, 3, 2, 1)

# Ranking modes
RANK_SESSION = "session"
RANK_LIVE = "live"

# Setup rules
MIN_PARTICIPANTS = 2

# Player ids look like "p3f9a01c2"
PLAYER_ID_PREFIX = "p"

# History timestamps
HISTORY_TIMESTAMP_SPEC = "seconds"
