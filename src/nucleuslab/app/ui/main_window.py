"""
Main Application Window
=======================
The primary GUI container that holds the toolbar, the side panels and the
nucleus preview.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects the global actions (Randomize, Reset) and every panel
   to the one Store instance.
"""
from __future__ import annotations

import logging
from datetime import datetime

from PySide6.QtCore import Qt, QObject, Signal, Slot
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import QMainWindow, QDockWidget, QPlainTextEdit, QToolBar, QLabel

from nucleuslab.app.state import Store
from nucleuslab.app.ui.panels import CompositionPanel, IsotopeCard, QuizPanel, StabilityCard
from nucleuslab.app.ui.workarea import WorkArea
from nucleuslab.config import VISIBLE_APP_NAME
from nucleuslab.model.quiz import Verdict, verdict_message
from nucleuslab.model.session import NucleusSnapshot


class Console(QPlainTextEdit):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setReadOnly(True)
        self.setPlaceholderText(self.tr("Log output will appear here…"))

    @Slot(str, str)
    def log(self, level: str, msg: str) -> None:
        self.appendPlainText(f"{datetime.now().strftime('%d.%m.%Y %H:%M:%S')} [{level}] {msg}")


class _LogBridge(QObject):
    message = Signal(str, str)


class ConsoleLogHandler(logging.Handler):
    """Forwards records of the package logger into the console dock."""
    def __init__(self, console: Console) -> None:
        super().__init__(level=logging.INFO)
        self._bridge = _LogBridge()
        self._bridge.message.connect(console.log)

    def emit(self, record: logging.LogRecord) -> None:
        self._bridge.message.emit(record.levelname.lower(), self.format(record))


class MainWindow(QMainWindow):
    def __init__(self, store: Store | None = None):
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1200, 760)

        # Global store
        self.store = store or Store()

        # ---- Central: panels | preview ----
        self.work_area = WorkArea(self)
        self.setCentralWidget(self.work_area)

        self.panels = [
            IsotopeCard(self.store, parent=self),
            StabilityCard(self.store, parent=self),
            CompositionPanel(self.store, parent=self),
            QuizPanel(self.store, parent=self),
        ]
        for p in self.panels:
            self.work_area.add_panel(p)
        self.work_area.finish_panels()

        self._create_actions()
        self._create_console()

        self.status_label = QLabel(self)
        self.statusBar().addPermanentWidget(self.status_label)

        self.store.changed.connect(self._on_changed)
        self.store.verdict_changed.connect(self._on_verdict)
        self._on_changed(self.store.snapshot())

    def _create_actions(self) -> None:
        toolbar = QToolBar(self.tr("Main"), self)
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        self.act_randomize = QAction(self.tr("Randomize"), self)
        self.act_randomize.setShortcut(QKeySequence("Ctrl+R"))
        self.act_randomize.triggered.connect(self.store.randomize)
        toolbar.addAction(self.act_randomize)

        self.act_reset = QAction(self.tr("Reset"), self)
        self.act_reset.setShortcut(QKeySequence("Ctrl+0"))
        self.act_reset.triggered.connect(self.store.reset)
        toolbar.addAction(self.act_reset)

    def _create_console(self) -> None:
        self.console = Console(self)
        dock = QDockWidget(self.tr("Console"), self)
        dock.setWidget(self.console)
        self.addDockWidget(Qt.DockWidgetArea.BottomDockWidgetArea, dock)

        self._log_handler = ConsoleLogHandler(self.console)
        self._log_handler.setFormatter(logging.Formatter("%(message)s"))
        logging.getLogger("nucleuslab").addHandler(self._log_handler)

    def _on_changed(self, snapshot: NucleusSnapshot) -> None:
        self.work_area.preview.set_snapshot(snapshot)
        self.status_label.setText(f"Z = {snapshot.z}   N = {snapshot.n}   A = {snapshot.a}")

    def _on_verdict(self, verdict: Verdict) -> None:
        self.statusBar().showMessage(self.tr(verdict_message(verdict)), 5000)

    def closeEvent(self, e):
        logging.getLogger("nucleuslab").removeHandler(self._log_handler)
        super().closeEvent(e)
