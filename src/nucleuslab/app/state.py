from __future__ import annotations

import logging
from typing import Any

from PySide6.QtCore import QObject, Signal

from nucleuslab.model.quiz import QuizMode, Verdict
from nucleuslab.model.session import NucleusSession, NucleusSnapshot

logger = logging.getLogger(__name__)


class Store(QObject):
    """
    Central state store with signals for panel/preview sync.

    Every user event goes through one of the methods below, which mutates the
    session and then emits ``changed`` with a fresh snapshot.
    """
    changed = Signal(object)
    verdict_changed = Signal(object)

    def __init__(self, session: NucleusSession | None = None) -> None:
        super().__init__()
        self.session = session or NucleusSession()
        self._snapshot = self.session.snapshot()

    def snapshot(self) -> NucleusSnapshot:
        """The snapshot emitted last."""
        return self._snapshot

    def set_protons(self, z: Any) -> None:
        self.session.set_protons(z)
        self._emit()

    def set_neutrons(self, n: Any) -> None:
        self.session.set_neutrons(n)
        self._emit()

    def reset(self) -> None:
        self.session.reset()
        self._emit()

    def randomize(self) -> None:
        self.session.randomize()
        self._emit()

    def set_quiz_mode(self, mode: QuizMode | str) -> None:
        self.session.set_quiz_mode(mode)
        self._emit()

    def set_answer_text(self, text: str) -> None:
        """Edit the answer buffer. Emits nothing: the line edit already shows the text."""
        self.session.set_answer_text(text)
        self._snapshot = self.session.snapshot()

    def submit_answer(self, text: str | None = None) -> Verdict | None:
        verdict = self.session.submit_answer(text)
        if verdict is None:
            return None
        self._emit()
        self.verdict_changed.emit(verdict)
        return verdict

    def _emit(self) -> None:
        self._snapshot = self.session.snapshot()
        logger.debug(f"State changed: Z={self._snapshot.z}, N={self._snapshot.n}, A={self._snapshot.a}")
        self.changed.emit(self._snapshot)
