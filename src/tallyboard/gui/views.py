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
Views shown in the main window's stacked widget.

Each view only emits signals and renders rows handed to it; all scoring
goes through the session controller owned by the main window.
"""

from typing import List, Sequence

from PyQt6 import QtWidgets
from PyQt6.QtCore import Qt, pyqtSignal

from tallyboard.constants import COUNTER_KINDS, COUNTER_LABELS
from tallyboard.models import Player
from tallyboard.tournament import LeaderboardRow, SummaryRow


def _make_table(headers: Sequence[str]) -> QtWidgets.QTableWidget:
    table = QtWidgets.QTableWidget(0, len(headers))
    table.setHorizontalHeaderLabels(list(headers))
    table.verticalHeader().setVisible(False)
    table.setAlternatingRowColors(True)
    table.setEditTriggers(QtWidgets.QAbstractItemView.EditTrigger.NoEditTriggers)
    table.setSelectionBehavior(
        QtWidgets.QAbstractItemView.SelectionBehavior.SelectRows
    )
    header = table.horizontalHeader()
    header.setSectionResizeMode(QtWidgets.QHeaderView.ResizeMode.ResizeToContents)
    header.setSectionResizeMode(1, QtWidgets.QHeaderView.ResizeMode.Stretch)
    return table


def _fill_table(table: QtWidgets.QTableWidget, rows: List[List[str]]) -> None:
    table.setRowCount(len(rows))
    for r, values in enumerate(rows):
        for c, value in enumerate(values):
            item = QtWidgets.QTableWidgetItem(value)
            item.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
            table.setItem(r, c, item)


class MenuView(QtWidgets.QWidget):
    """Start screen: create a new tournament or load a saved one."""

    create_requested = pyqtSignal()
    load_requested = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QtWidgets.QVBoxLayout(self)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addStretch()

        title = QtWidgets.QLabel("Tally Board")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title.setStyleSheet("font-size: 22pt; font-weight: 700; margin-bottom: 24px;")
        layout.addWidget(title)

        self.btn_create = QtWidgets.QPushButton("New Tournament")
        self.btn_create.clicked.connect(self.create_requested.emit)
        layout.addWidget(self.btn_create)

        self.btn_load = QtWidgets.QPushButton("Load Tournament...")
        self.btn_load.clicked.connect(self.load_requested.emit)
        layout.addWidget(self.btn_load)

        layout.addStretch()


class SetupView(QtWidgets.QWidget):
    """Tournament name plus one input row per participant."""

    start_requested = pyqtSignal(str, list)
    back_requested = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QtWidgets.QVBoxLayout(self)

        form = QtWidgets.QFormLayout()
        self.name_edit = QtWidgets.QLineEdit()
        self.name_edit.setPlaceholderText("Tournament name")
        form.addRow("Name:", self.name_edit)
        layout.addLayout(form)

        self.participants_layout = QtWidgets.QVBoxLayout()
        layout.addLayout(self.participants_layout)
        self.participant_edits: List[QtWidgets.QLineEdit] = []

        btn_add = QtWidgets.QPushButton("Add Participant")
        btn_add.clicked.connect(self.add_participant_input)
        layout.addWidget(btn_add)
        layout.addStretch()

        buttons = QtWidgets.QHBoxLayout()
        btn_back = QtWidgets.QPushButton("Back")
        btn_back.clicked.connect(self.back_requested.emit)
        btn_start = QtWidgets.QPushButton("Start")
        btn_start.clicked.connect(self._on_start_clicked)
        buttons.addWidget(btn_back)
        buttons.addStretch()
        buttons.addWidget(btn_start)
        layout.addLayout(buttons)

        self.reset()

    def add_participant_input(self) -> None:
        edit = QtWidgets.QLineEdit()
        edit.setPlaceholderText("Participant name")
        self.participants_layout.addWidget(edit)
        self.participant_edits.append(edit)

    def reset(self) -> None:
        self.name_edit.clear()
        for edit in self.participant_edits:
            edit.deleteLater()
        self.participant_edits = []
        for _ in range(2):
            self.add_participant_input()

    def _on_start_clicked(self) -> None:
        names = [edit.text() for edit in self.participant_edits]
        self.start_requested.emit(self.name_edit.text(), names)


class PlayerCard(QtWidgets.QFrame):
    """Session counters and scoring buttons for one player."""

    action_requested = pyqtSignal(str, str)

    def __init__(self, player: Player, parent=None):
        super().__init__(parent)
        self.player_id = player.id
        self.setFrameShape(QtWidgets.QFrame.Shape.StyledPanel)

        layout = QtWidgets.QVBoxLayout(self)
        header = QtWidgets.QHBoxLayout()
        name = QtWidgets.QLabel(player.name)
        name.setStyleSheet("font-weight: 700;")
        header.addWidget(name)
        header.addStretch()
        self.lbl_stats = QtWidgets.QLabel()
        header.addWidget(self.lbl_stats)
        layout.addLayout(header)

        actions = QtWidgets.QHBoxLayout()
        for kind in COUNTER_KINDS:
            btn = QtWidgets.QPushButton(COUNTER_LABELS[kind].upper())
            btn.clicked.connect(
                lambda _checked=False, k=kind: self.action_requested.emit(
                    self.player_id, k
                )
            )
            actions.addWidget(btn)
        layout.addLayout(actions)
        self.update_stats(player)

    def update_stats(self, player: Player) -> None:
        s = player.session
        self.lbl_stats.setText(
            f"Session: {s.goals}G / {s.misses}M / {s.finals}F / {s.slaps}S"
        )


class GameView(QtWidgets.QWidget):
    """Live session: scoring controls and the running leaderboard."""

    action_requested = pyqtSignal(str, str)
    undo_requested = pyqtSignal()
    end_session_requested = pyqtSignal()

    LEADERBOARD_HEADERS = [
        "#", "Player", "Pts", "Session", "%", "G/M", "Att", "Fin", "Slp"
    ]

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QtWidgets.QVBoxLayout(self)

        self.lbl_title = QtWidgets.QLabel()
        self.lbl_title.setStyleSheet("font-size: 16pt; font-weight: 700;")
        layout.addWidget(self.lbl_title)

        self.tabs = QtWidgets.QTabWidget()
        controls = QtWidgets.QWidget()
        self.cards_layout = QtWidgets.QVBoxLayout(controls)
        self.cards_layout.setAlignment(Qt.AlignmentFlag.AlignTop)
        scroll = QtWidgets.QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(controls)
        self.tabs.addTab(scroll, "Controls")

        self.leaderboard = _make_table(self.LEADERBOARD_HEADERS)
        self.tabs.addTab(self.leaderboard, "Leaderboard")
        layout.addWidget(self.tabs, 1)

        footer = QtWidgets.QHBoxLayout()
        self.btn_undo = QtWidgets.QPushButton("Undo")
        self.btn_undo.setToolTip("Undo the last recorded event")
        self.btn_undo.clicked.connect(self.undo_requested.emit)
        footer.addWidget(self.btn_undo)
        footer.addStretch()
        btn_end = QtWidgets.QPushButton("End Session")
        btn_end.clicked.connect(self.end_session_requested.emit)
        footer.addWidget(btn_end)
        layout.addLayout(footer)

        self.cards: List[PlayerCard] = []

    def set_players(self, title: str, players: Sequence[Player]) -> None:
        self.lbl_title.setText(title)
        for card in self.cards:
            card.deleteLater()
        self.cards = []
        for player in players:
            card = PlayerCard(player)
            card.action_requested.connect(self.action_requested.emit)
            self.cards_layout.addWidget(card)
            self.cards.append(card)

    def refresh(
        self,
        players: Sequence[Player],
        rows: Sequence[LeaderboardRow],
        can_undo: bool,
    ) -> None:
        by_id = {p.id: p for p in players}
        for card in self.cards:
            card.update_stats(by_id[card.player_id])
        _fill_table(
            self.leaderboard,
            [
                [
                    str(r.position),
                    r.name,
                    str(r.live_total),
                    f"+{r.session_points}",
                    f"{r.percentage:.1f}%",
                    f"{r.goals}/{r.misses}",
                    str(r.attempts),
                    str(r.finals),
                    str(r.slaps),
                ]
                for r in rows
            ],
        )
        self.btn_undo.setEnabled(can_undo)


class SummaryView(QtWidgets.QWidget):
    """Standings as they will be once the session is committed."""

    confirm_requested = pyqtSignal()
    back_requested = pyqtSignal()

    SUMMARY_HEADERS = ["#", "Player", "Pts", "%", "G/M", "Att", "Fin", "Slp"]

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QtWidgets.QVBoxLayout(self)
        title = QtWidgets.QLabel("Session Summary")
        title.setStyleSheet("font-size: 16pt; font-weight: 700;")
        layout.addWidget(title)

        self.table = _make_table(self.SUMMARY_HEADERS)
        layout.addWidget(self.table, 1)

        buttons = QtWidgets.QHBoxLayout()
        btn_back = QtWidgets.QPushButton("Keep Playing")
        btn_back.clicked.connect(self.back_requested.emit)
        btn_confirm = QtWidgets.QPushButton("Finalize and Save")
        btn_confirm.clicked.connect(self.confirm_requested.emit)
        buttons.addWidget(btn_back)
        buttons.addStretch()
        buttons.addWidget(btn_confirm)
        layout.addLayout(buttons)

    def show_rows(self, rows: Sequence[SummaryRow]) -> None:
        _fill_table(
            self.table,
            [
                [
                    str(r.position),
                    r.name,
                    str(r.points),
                    f"{r.percentage:.1f}%",
                    f"{r.goals}/{r.misses}",
                    str(r.attempts),
                    str(r.finals),
                    str(r.slaps),
                ]
                for r in rows
            ],
        )
