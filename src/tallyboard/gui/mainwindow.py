"""Main GUI window for Tally Board."""

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
from pathlib import Path
from typing import List, Optional

from PyQt6 import QtWidgets
from PyQt6.QtGui import QAction, QCloseEvent
from PyQt6.QtWidgets import QMessageBox

from tallyboard import APP_NAME, APP_VERSION
from tallyboard.constants import SAVE_FILE_FILTER
from tallyboard.controllers import SessionController
from tallyboard.exceptions import (
    DocumentException,
    InvalidSetupException,
    ResourceException,
)
from tallyboard.gui.views import GameView, MenuView, SetupView, SummaryView
from tallyboard.tournament.document import default_export_filename
from tallyboard.utils import setup_logger

logger = setup_logger(__name__)


# --- Main Application Window ---
class TallyBoardMainWindow(QtWidgets.QMainWindow):
    """Main application window for Tally Board."""

    def __init__(self, controller: Optional[SessionController] = None) -> None:
        super().__init__()
        self.controller = controller or SessionController()
        self._setup_ui()
        self._update_ui_state()

    def _setup_ui(self):
        self.setWindowTitle(APP_NAME)
        self.setGeometry(100, 100, 900, 700)

        self.stacked_widget = QtWidgets.QStackedWidget()
        self.setCentralWidget(self.stacked_widget)

        self.menu_view = MenuView(self)
        self.setup_view = SetupView(self)
        self.game_view = GameView(self)
        self.summary_view = SummaryView(self)
        views = (self.menu_view, self.setup_view, self.game_view, self.summary_view)
        for view in views:
            self.stacked_widget.addWidget(view)

        self.menu_view.create_requested.connect(self.show_setup)
        self.menu_view.load_requested.connect(self.load_tournament)
        self.setup_view.back_requested.connect(self.show_menu)
        self.setup_view.start_requested.connect(self.start_tournament)
        self.game_view.action_requested.connect(self.on_action)
        self.game_view.undo_requested.connect(self.on_undo)
        self.game_view.end_session_requested.connect(self.show_summary)
        self.summary_view.back_requested.connect(self.show_game)
        self.summary_view.confirm_requested.connect(self.finalize_and_save)

        self._setup_menu()
        self.statusBar().showMessage("Ready - Create New or Load Tournament.")
        logging.info(f"{APP_NAME} v{APP_VERSION} started.")

    def _setup_menu(self):
        file_menu = self.menuBar().addMenu("&File")
        file_menu.addAction(
            self._create_action("&New Tournament...", self.show_setup, "Ctrl+N")
        )
        file_menu.addAction(
            self._create_action("&Open...", self.load_tournament, "Ctrl+O")
        )
        self.save_action = self._create_action(
            "&Save Snapshot...", self.save_snapshot, "Ctrl+S"
        )
        file_menu.addAction(self.save_action)
        file_menu.addSeparator()
        file_menu.addAction(self._create_action("E&xit", self.close, "Ctrl+Q"))

        edit_menu = self.menuBar().addMenu("&Edit")
        self.undo_action = self._create_action(
            "&Undo Last Event", self.on_undo, "Ctrl+Z"
        )
        edit_menu.addAction(self.undo_action)

    def _create_action(
        self, text: str, slot, shortcut: Optional[str] = None
    ) -> QAction:
        action = QAction(text, self)
        if shortcut:
            action.setShortcut(shortcut)
        action.triggered.connect(slot)
        return action

    def _update_ui_state(self):
        self.save_action.setEnabled(self.controller.has_tournament)
        self.undo_action.setEnabled(self.controller.can_undo)
        title = APP_NAME
        if self.controller.has_tournament:
            title = f"{self.controller.tournament.name} - {APP_NAME}"
            if self.controller.is_dirty:
                title += " *"
        self.setWindowTitle(title)

    # ========== Navigation ==========

    def show_menu(self):
        self.stacked_widget.setCurrentWidget(self.menu_view)

    def show_setup(self):
        if not self.check_discard_changes():
            return
        self.setup_view.reset()
        self.stacked_widget.setCurrentWidget(self.setup_view)

    def show_game(self):
        self.stacked_widget.setCurrentWidget(self.game_view)

    def show_summary(self):
        if not self.get_confirmation("Close the session and view the final results?"):
            return
        self.summary_view.show_rows(self.controller.get_final_summary())
        self.stacked_widget.setCurrentWidget(self.summary_view)

    # ========== Commands ==========

    def start_tournament(self, name: str, participant_names: List[str]):
        try:
            tournament = self.controller.start_tournament(name, participant_names)
        except InvalidSetupException as e:
            QMessageBox.warning(self, "New Tournament", str(e))
            return
        self._start_session()
        self.statusBar().showMessage(f"Started tournament: {tournament.name}")

    def load_tournament(self):
        if not self.check_discard_changes():
            return
        filename, _ = QtWidgets.QFileDialog.getOpenFileName(
            self, "Load Tournament", "", SAVE_FILE_FILTER
        )
        if not filename:
            return
        try:
            tournament = self.controller.load_file(filename)
        except (DocumentException, ResourceException) as e:
            logging.exception("Error loading tournament:")
            QMessageBox.critical(
                self, "Load Error", f"Could not load tournament file:\n{e}"
            )
            return
        self._start_session()
        self.statusBar().showMessage(f"Loaded tournament: {tournament.name}")

    def _start_session(self):
        tournament = self.controller.tournament
        self.game_view.set_players(tournament.name, tournament.players)
        self.refresh()
        self.show_game()

    def on_action(self, player_id: str, kind: str):
        self.controller.record(player_id, kind)
        self.refresh()

    def on_undo(self):
        event = self.controller.undo()
        if event is not None:
            self.statusBar().showMessage(f"Undid {event.counter_kind}")
        self.refresh()

    def finalize_and_save(self):
        entry = self.controller.finalize()
        self.refresh()
        self.statusBar().showMessage(
            f"Session closed: {entry.total_points} points awarded"
        )
        if self.save_tournament():
            self.show_menu()
        else:
            # Finalized but not written yet; stay on the game view so a
            # snapshot can still be saved from the File menu.
            self.show_game()

    def save_snapshot(self):
        if self.controller.has_tournament:
            self.save_tournament()

    def save_tournament(self) -> bool:
        default_name = default_export_filename(self.controller.tournament)
        filename, _ = QtWidgets.QFileDialog.getSaveFileName(
            self, "Save Tournament", default_name, SAVE_FILE_FILTER
        )
        if not filename:
            return False
        try:
            path = self.controller.save_file(filename)
        except ResourceException as e:
            logging.exception("Error saving tournament:")
            QMessageBox.critical(self, "Save Error", f"Could not save tournament:\n{e}")
            return False
        self.statusBar().showMessage(f"Tournament saved to {Path(path).name}")
        self._update_ui_state()
        return True

    def refresh(self):
        if self.controller.has_tournament:
            self.game_view.refresh(
                self.controller.get_players(),
                self.controller.get_live_ranking(),
                self.controller.can_undo,
            )
        self._update_ui_state()

    # ========== Dialogs ==========

    def check_discard_changes(self) -> bool:
        if not self.controller.is_dirty:
            return True
        return self.get_confirmation("You have unsaved changes. Discard them?")

    def get_confirmation(self, message: str) -> bool:
        reply = QMessageBox.question(
            self,
            APP_NAME,
            message,
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        return reply == QMessageBox.StandardButton.Yes

    def closeEvent(self, event: QCloseEvent):
        if self.check_discard_changes():
            logging.info(f"{APP_NAME} closing.")
            event.accept()
        else:
            event.ignore()
