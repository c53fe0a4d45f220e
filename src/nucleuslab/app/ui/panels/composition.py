from __future__ import annotations

from PySide6.QtCore import Qt, QSignalBlocker, Slot
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGroupBox, QGridLayout, QLabel, QSlider, QSpinBox,
)

from nucleuslab.app.state import Store
from nucleuslab.app.ui.panels.base import BasePanel
from nucleuslab.config import N_MAX, N_MIN, Z_MAX, Z_MIN
from nucleuslab.model.session import NucleusSnapshot


class CompositionPanel(BasePanel):
    """
    Panel for choosing the number of protons and neutrons.

    Each count has a slider and a spin box bound to the same range; both
    write through the store, and both are updated back from its snapshot.
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        root = QVBoxLayout(self)
        group = QGroupBox(self.tr("Nucleus Parameters"), self)
        root.addWidget(group)
        grid = QGridLayout(group)

        # Protons
        self.label_z = QLabel(group)
        self.slider_z = self._make_slider(Z_MIN, Z_MAX, group)
        self.spin_z = self._make_spin(Z_MIN, Z_MAX, group)
        self.label_element = QLabel(group)
        grid.addWidget(QLabel(self.tr("Protons Z"), group), 0, 0)
        grid.addWidget(self.label_z, 0, 1, Qt.AlignmentFlag.AlignRight)
        grid.addWidget(self.slider_z, 1, 0, 1, 2)
        grid.addWidget(self.spin_z, 2, 0)
        grid.addWidget(self.label_element, 2, 1)

        # Neutrons
        self.label_n = QLabel(group)
        self.slider_n = self._make_slider(N_MIN, N_MAX, group)
        self.spin_n = self._make_spin(N_MIN, N_MAX, group)
        self.label_a = QLabel(group)
        grid.addWidget(QLabel(self.tr("Neutrons N"), group), 3, 0)
        grid.addWidget(self.label_n, 3, 1, Qt.AlignmentFlag.AlignRight)
        grid.addWidget(self.slider_n, 4, 0, 1, 2)
        grid.addWidget(self.spin_n, 5, 0)
        grid.addWidget(self.label_a, 5, 1)

        # wiring
        self.slider_z.valueChanged.connect(self._on_z_changed)
        self.spin_z.valueChanged.connect(self._on_z_changed)
        self.slider_n.valueChanged.connect(self._on_n_changed)
        self.spin_n.valueChanged.connect(self._on_n_changed)

        root.addStretch()

        self.refresh(store.snapshot())

    def refresh(self, snapshot: NucleusSnapshot) -> None:
        for widget, value in (
            (self.slider_z, snapshot.z), (self.spin_z, snapshot.z),
            (self.slider_n, snapshot.n), (self.spin_n, snapshot.n),
        ):
            # programmatic updates must not loop back into the store
            with QSignalBlocker(widget):
                widget.setValue(value)

        self.label_z.setText(f"Z = {snapshot.z}")
        self.label_n.setText(f"N = {snapshot.n}")
        self.label_element.setText(
            self.tr("Element: {symbol} ({name})").format(
                symbol=snapshot.element.symbol, name=snapshot.element.name
            )
        )
        self.label_a.setText(self.tr("Mass number A = {a}").format(a=snapshot.a))

    @Slot(int)
    def _on_z_changed(self, value: int) -> None:
        self.store.set_protons(value)

    @Slot(int)
    def _on_n_changed(self, value: int) -> None:
        self.store.set_neutrons(value)

    @staticmethod
    def _make_slider(lower: int, upper: int, parent: QWidget) -> QSlider:
        slider = QSlider(Qt.Orientation.Horizontal, parent)
        slider.setRange(lower, upper)
        slider.setTickPosition(QSlider.TickPosition.TicksBelow)
        slider.setTickInterval(5)
        return slider

    @staticmethod
    def _make_spin(lower: int, upper: int, parent: QWidget) -> QSpinBox:
        spin = QSpinBox(parent)
        spin.setRange(lower, upper)
        spin.setMaximumWidth(90)
        return spin
