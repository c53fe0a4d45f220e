from __future__ import annotations

from PySide6.QtWidgets import QWidget

from nucleuslab.app.state import Store
from nucleuslab.model.session import NucleusSnapshot


class BasePanel(QWidget):
    """Base class for left-side panels. Holds a reference to the global store."""
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self.store.changed.connect(self.refresh)

    def refresh(self, snapshot: NucleusSnapshot) -> None:
        """Update the widgets from a snapshot. Subclasses override."""
        raise NotImplementedError
