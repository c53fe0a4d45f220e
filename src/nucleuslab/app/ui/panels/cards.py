from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QGroupBox, QLabel

from nucleuslab.app.state import Store
from nucleuslab.app.ui.panels.base import BasePanel
from nucleuslab.model.session import NucleusSnapshot


class IsotopeCard(BasePanel):
    """Isotope notation: element symbol with A (top) and Z (bottom) on the left."""
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        root = QVBoxLayout(self)
        group = QGroupBox(self.tr("Isotope Notation"), self)
        root.addWidget(group)
        row = QHBoxLayout(group)

        # A over Z, stacked left of the symbol
        indices = QVBoxLayout()
        self.label_a = QLabel(group)
        self.label_z = QLabel(group)
        for label in (self.label_a, self.label_z):
            label.setAlignment(Qt.AlignmentFlag.AlignRight)
            label.setStyleSheet("font-size: 10pt; font-weight: bold;")
            indices.addWidget(label)
        row.addLayout(indices)

        self.label_symbol = QLabel(group)
        self.label_symbol.setStyleSheet("font-size: 28pt; font-weight: 800;")
        row.addWidget(self.label_symbol)

        details = QVBoxLayout()
        self.label_name = QLabel(group)
        self.label_notation = QLabel(group)
        self.label_notation.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        details.addWidget(self.label_name)
        details.addWidget(self.label_notation)
        row.addLayout(details, 1)

        self.refresh(store.snapshot())

    def refresh(self, snapshot: NucleusSnapshot) -> None:
        self.label_a.setText(str(snapshot.a))
        self.label_z.setText(str(snapshot.z))
        self.label_symbol.setText(snapshot.element.symbol)
        self.label_name.setText(self.tr("Element: {name}").format(name=snapshot.element.name))
        self.label_notation.setText(
            self.tr("Notation: {notation}").format(notation=snapshot.isotope_notation)
        )


class StabilityCard(BasePanel):
    """Shows the stability hint for the current (Z, N)."""
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        root = QVBoxLayout(self)
        group = QGroupBox(self.tr("Stability Hint"), self)
        root.addWidget(group)
        inner = QVBoxLayout(group)
        self.label_hint = QLabel(group)
        self.label_hint.setWordWrap(True)
        inner.addWidget(self.label_hint)

        self.refresh(store.snapshot())

    def refresh(self, snapshot: NucleusSnapshot) -> None:
        text = snapshot.stability_hint
        self.label_hint.setText(text[:1].upper() + text[1:] + ".")
