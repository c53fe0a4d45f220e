from __future__ import annotations

from PySide6.QtCore import QSignalBlocker, Slot
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGroupBox, QLabel, QLineEdit, QPushButton, QButtonGroup,
)

from nucleuslab.app.state import Store
from nucleuslab.app.ui.panels.base import BasePanel
from nucleuslab.model.quiz import MODE_LABELS, QuizMode, Verdict, verdict_message
from nucleuslab.model.session import NucleusSnapshot

VERDICT_COLORS = {
    Verdict.CORRECT: "#059669",
    Verdict.INCORRECT: "#e11d48",
}


class QuizPanel(BasePanel):
    """
    Practice panel: pick what to solve for, type the answer, check it.

    Top: exclusive mode buttons (Off / Find A / Find N / Find Z).
    Below: task text, answer field, check button and verdict; hidden while off.
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        root = QVBoxLayout(self)
        group = QGroupBox(self.tr("Calculation Practice"), self)
        root.addWidget(group)
        inner = QVBoxLayout(group)

        # mode selector
        modes = QHBoxLayout()
        self.mode_group = QButtonGroup(self)
        self.mode_group.setExclusive(True)
        self._mode_buttons: dict[QuizMode, QPushButton] = {}
        for mode in QuizMode:
            button = QPushButton(self.tr(MODE_LABELS[mode]), group)
            button.setCheckable(True)
            self.mode_group.addButton(button)
            self._mode_buttons[mode] = button
            button.clicked.connect(lambda _=False, m=mode: self.store.set_quiz_mode(m))
            modes.addWidget(button)
        inner.addLayout(modes)

        # task area
        self.task = QWidget(group)
        task_layout = QVBoxLayout(self.task)
        task_layout.setContentsMargins(0, 0, 0, 0)
        self.label_prompt = QLabel(self.task)
        self.label_prompt.setWordWrap(True)
        task_layout.addWidget(self.label_prompt)

        answer_row = QHBoxLayout()
        self.answer_edit = QLineEdit(self.task)
        self.answer_edit.setPlaceholderText(self.tr("Your answer"))
        self.answer_edit.setMaximumWidth(140)
        self.check_button = QPushButton(self.tr("Check"), self.task)
        self.label_verdict = QLabel(self.task)
        answer_row.addWidget(self.answer_edit)
        answer_row.addWidget(self.check_button)
        answer_row.addWidget(self.label_verdict, 1)
        task_layout.addLayout(answer_row)
        inner.addWidget(self.task)

        # wiring
        self.answer_edit.textEdited.connect(self.store.set_answer_text)
        self.answer_edit.returnPressed.connect(self._on_check)
        self.check_button.clicked.connect(self._on_check)

        root.addStretch()

        self.refresh(store.snapshot())

    def refresh(self, snapshot: NucleusSnapshot) -> None:
        button = self._mode_buttons[snapshot.quiz_mode]
        with QSignalBlocker(button):
            button.setChecked(True)

        active = snapshot.quiz_mode != QuizMode.DISABLED
        self.task.setVisible(active)
        self.label_prompt.setText(snapshot.quiz_prompt)

        if self.answer_edit.text() != snapshot.answer:
            with QSignalBlocker(self.answer_edit):
                self.answer_edit.setText(snapshot.answer)

        color = VERDICT_COLORS.get(snapshot.verdict)
        self.label_verdict.setStyleSheet(f"color: {color}; font-weight: bold;" if color else "")
        self.label_verdict.setText(self.tr(verdict_message(snapshot.verdict)))

    @Slot()
    def _on_check(self) -> None:
        self.store.submit_answer(self.answer_edit.text())
