from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QSplitter, QScrollArea, QVBoxLayout

from nucleuslab.app.ui.preview import NucleusPreview


class WorkArea(QWidget):
    """The main work area with a splitter between the side panels column and the nucleus preview."""
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        v = QVBoxLayout(self)
        split = QSplitter(Qt.Orientation.Horizontal, self)
        split.setChildrenCollapsible(False)
        v.addWidget(split, 1)

        scroller = QScrollArea(split)
        scroller.setWidgetResizable(True)
        self.panel_column = QWidget(scroller)
        self.panel_layout = QVBoxLayout(self.panel_column)
        self.panel_layout.setContentsMargins(0, 0, 0, 0)
        scroller.setWidget(self.panel_column)

        self.preview = NucleusPreview(split)

        split.addWidget(scroller)
        split.addWidget(self.preview)
        split.setStretchFactor(0, 0)
        split.setStretchFactor(1, 1)
        split.setSizes([420, 620])

    def add_panel(self, panel: QWidget) -> None:
        """Append a panel to the left column."""
        self.panel_layout.addWidget(panel)

    def finish_panels(self) -> None:
        self.panel_layout.addStretch(1)
