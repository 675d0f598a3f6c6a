"""Launch the Tally Board desktop window."""

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

import sys

from PyQt6 import QtWidgets

from tallyboard import APP_NAME
from tallyboard.gui.mainwindow import TallyBoardMainWindow


def main() -> int:
    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    window = TallyBoardMainWindow()
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
