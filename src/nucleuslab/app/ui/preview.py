from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

import numpy as np
import pyqtgraph as pg
from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel

from nucleuslab.config import (
    GLOW_COLOR, NEUTRON_COLOR, NUCLEON_RADIUS, PREVIEW_HALF_EXTENT, PROTON_COLOR,
)
from nucleuslab.model.layout import Position, extent, positions_to_array

if TYPE_CHECKING:
    from nucleuslab.model.session import NucleusSnapshot


def frame_half_extent(total: int) -> float:
    """
    Half width of the square view for ``total`` nucleons.

    Never smaller than PREVIEW_HALF_EXTENT, so the nucleus keeps its scale
    while it grows; wider only when the outer ring would be clipped.
    """
    return max(PREVIEW_HALF_EXTENT, extent(total) + NUCLEON_RADIUS)


class NucleusPreview(QWidget):
    """
    pyqtgraph preview of the nucleus:
      - square view centred on the nucleus (no pan/zoom), widened for large layouts,
      - one scatter item per nucleon kind, sized in layout units,
      - a short legend below the plot.
    """
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        layout = QVBoxLayout(self)

        self.plot = pg.PlotWidget(self)
        self.plot.setAspectLocked(True)
        self.plot.hideAxis("left")
        self.plot.hideAxis("bottom")
        self.plot.setMouseEnabled(x=False, y=False)
        self.plot.hideButtons()
        self.plot.setMenuEnabled(False)
        # screen orientation: y grows downwards
        self.plot.getViewBox().invertY(True)
        self.half_extent = 0.0
        self._frame(PREVIEW_HALF_EXTENT)
        layout.addWidget(self.plot, 1)

        glow = pg.mkColor(GLOW_COLOR)
        glow.setAlpha(40)
        self._glow = pg.ScatterPlotItem(
            pos=np.zeros((1, 2)), size=2 * 160.0, pxMode=False,
            pen=pg.mkPen(None), brush=pg.mkBrush(glow),
        )
        self.plot.addItem(self._glow)

        self._protons = self._make_scatter(PROTON_COLOR)
        self._neutrons = self._make_scatter(NEUTRON_COLOR)
        self._labels: list[pg.TextItem] = []

        self.legend = QLabel(self)
        layout.addWidget(self.legend, 0)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def set_snapshot(self, snapshot: NucleusSnapshot) -> None:
        """Redraw protons and neutrons from the snapshot's layout."""
        protons = snapshot.protons
        neutrons = snapshot.neutrons

        self._protons.setData(pos=positions_to_array(protons))
        self._neutrons.setData(pos=positions_to_array(neutrons))
        self._frame(frame_half_extent(snapshot.a))

        self._clear_labels()
        self._add_labels(protons, "p⁺")
        self._add_labels(neutrons, "n")

        self.legend.setText(
            f"<span style='color:{PROTON_COLOR}'>●</span> Protons p⁺ ({snapshot.z}) &nbsp;&nbsp;"
            f"<span style='color:{NEUTRON_COLOR}'>●</span> Neutrons n ({snapshot.n}) &nbsp;&nbsp;"
            f"○ Total nucleons A = {snapshot.a}"
        )

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _frame(self, half_extent: float) -> None:
        if half_extent == self.half_extent:
            return
        self.half_extent = half_extent
        self.plot.setRange(
            xRange=(-half_extent, half_extent),
            yRange=(-half_extent, half_extent),
            padding=0.0,
        )

    def _make_scatter(self, color: str) -> pg.ScatterPlotItem:
        brush = pg.mkColor(color)
        brush.setAlphaF(0.9)
        item = pg.ScatterPlotItem(
            size=2 * NUCLEON_RADIUS, pxMode=False,
            pen=pg.mkPen("w", width=1), brush=pg.mkBrush(brush),
        )
        self.plot.addItem(item)
        return item

    def _add_labels(self, positions: Sequence[Position], text: str) -> None:
        for p in positions:
            label = pg.TextItem(text, color="w", anchor=(0.5, 0.5))
            label.setPos(p.x, p.y)
            self.plot.addItem(label)
            self._labels.append(label)

    def _clear_labels(self) -> None:
        for label in self._labels:
            self.plot.removeItem(label)
        self._labels.clear()
