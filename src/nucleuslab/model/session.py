"""
Nucleus Session (Data Model)
============================
This module defines the central state of a running lab session.

Why is this file needed?
------------------------
1. State Management: It holds Z, N and the quiz state in one place and is
   the single source of truth the views read from.
2. Derivation: A, the element, the stability hint and the nucleon layout are
   recomputed from (Z, N) on every read, so nothing can go stale.
3. Decoupling: The Qt store forwards user events here; views only ever see
   the immutable NucleusSnapshot.

Classes:
    NucleusSnapshot: Everything a renderer needs for one frame.
    NucleusSession: The mutable session with its state transitions.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
import random
from numbers import Real
from typing import Any, Optional

from nucleuslab.config import (
    DEFAULT_N, DEFAULT_Z, N_MAX, N_MIN, RANDOM_DELTA_RANGE, RING_BASE_RADIUS, Z_MAX, Z_MIN,
)
from nucleuslab.model.elements import Element, element_identity, isotope_notation
from nucleuslab.model.layout import Position, layout, split_positions
from nucleuslab.model.quiz import QuizMode, Verdict, check_answer, coerce_mode, quiz_prompt, target_value
from nucleuslab.model.stability import stability_hint

logger = logging.getLogger(__name__)


def clamp_count(value: Any, lower: int, upper: int) -> int:
    """
    Clamp user input to an integer in [lower, upper].

    Strings are parsed as numbers. Anything non-numeric (or NaN) maps to the
    lower bound. Fractional values are truncated toward zero.
    """
    number: Optional[float]
    if isinstance(value, Real):
        try:
            number = float(value)
        except OverflowError:
            # beyond float range: clamps to the bound on its side
            number = math.inf if value > 0 else -math.inf
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            number = None
    else:
        try:
            number = float(value)
        except (TypeError, ValueError, OverflowError):
            number = None

    if number is None or math.isnan(number):
        logger.debug(f"Non-numeric input {value!r}, using lower bound {lower}.")
        return lower
    if number <= lower:
        return lower
    if number >= upper:
        return upper
    return int(number)


@dataclass(frozen=True)
class NucleusSnapshot:
    """Immutable view of a session, handed to the rendering layer."""
    z: int
    n: int
    a: int
    element: Element
    stability_hint: str
    positions: tuple[Position, ...]
    quiz_mode: QuizMode
    answer: str
    verdict: Verdict

    @property
    def protons(self) -> list[Position]:
        return split_positions(self.positions, self.z)[0]

    @property
    def neutrons(self) -> list[Position]:
        return split_positions(self.positions, self.z)[1]

    @property
    def isotope_notation(self) -> str:
        return isotope_notation(self.element.symbol, self.a, self.z)

    @property
    def quiz_prompt(self) -> str:
        return quiz_prompt(self.quiz_mode, self.z, self.n)


@dataclass
class NucleusSession:
    """
    Holds the state of one lab session: Z, N and the quiz.

    All mutators clamp their input and never raise on bad user input.
    """
    z: int = DEFAULT_Z
    n: int = DEFAULT_N
    quiz_mode: QuizMode = QuizMode.DISABLED
    answer: str = ""
    verdict: Verdict = Verdict.UNANSWERED
    ring_base_radius: float = RING_BASE_RADIUS
    rng: random.Random | None = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.z = clamp_count(self.z, Z_MIN, Z_MAX)
        self.n = clamp_count(self.n, N_MIN, N_MAX)
        self.quiz_mode = coerce_mode(self.quiz_mode)

    # ---- derived values ----

    @property
    def a(self) -> int:
        """Mass number."""
        return self.z + self.n

    @property
    def element(self) -> Element:
        return element_identity(self.z)

    @property
    def stability_hint(self) -> str:
        return stability_hint(self.z, self.n)

    @property
    def positions(self) -> list[Position]:
        return layout(self.a, self.ring_base_radius)

    @property
    def quiz_target(self) -> Optional[int]:
        return target_value(self.quiz_mode, self.z, self.n)

    def snapshot(self) -> NucleusSnapshot:
        return NucleusSnapshot(
            z=self.z,
            n=self.n,
            a=self.a,
            element=self.element,
            stability_hint=self.stability_hint,
            positions=tuple(self.positions),
            quiz_mode=self.quiz_mode,
            answer=self.answer,
            verdict=self.verdict,
        )

    # ---- composition ----

    def set_protons(self, z: Any) -> int:
        """Set Z (clamped to the configured range); a changed Z invalidates the verdict."""
        new_z = clamp_count(z, Z_MIN, Z_MAX)
        if new_z != self.z:
            self.z = new_z
            self.verdict = Verdict.UNANSWERED
        return self.z

    def set_neutrons(self, n: Any) -> int:
        """Set N (clamped to the configured range); a changed N invalidates the verdict."""
        new_n = clamp_count(n, N_MIN, N_MAX)
        if new_n != self.n:
            self.n = new_n
            self.verdict = Verdict.UNANSWERED
        return self.n

    def reset(self) -> None:
        """Return to the start-up configuration."""
        self.z = DEFAULT_Z
        self.n = DEFAULT_N
        self._clear_quiz(QuizMode.DISABLED)
        logger.info("Session has been reset.")

    def randomize(self) -> None:
        """Draw a random nucleus with N close to Z and switch the quiz off."""
        source = self.rng or random
        self.z = source.randint(Z_MIN, Z_MAX)
        delta = source.randint(*RANDOM_DELTA_RANGE)
        self.n = clamp_count(max(0, self.z + delta), N_MIN, N_MAX)
        self._clear_quiz(QuizMode.DISABLED)
        logger.info(f"Randomized nucleus: Z={self.z}, N={self.n}")

    # ---- quiz ----

    def set_quiz_mode(self, mode: QuizMode | str) -> QuizMode:
        """Select a practice mode. Always clears the answer and verdict."""
        self._clear_quiz(coerce_mode(mode))
        return self.quiz_mode

    def set_answer_text(self, text: str) -> None:
        self.answer = "" if text is None else str(text)

    def submit_answer(self, text: Optional[str] = None) -> Optional[Verdict]:
        """
        Check the answer against the active mode's target.

        Args:
            text: Replaces the answer buffer first when given.

        Returns:
            The verdict, or None when the quiz is disabled.
        """
        if self.quiz_mode == QuizMode.DISABLED:
            return None
        if text is not None:
            self.set_answer_text(text)
        self.verdict = check_answer(self.quiz_mode, self.z, self.n, self.answer)
        logger.debug(f"Answer {self.answer!r} for {self.quiz_mode}: {self.verdict}")
        return self.verdict

    def _clear_quiz(self, mode: QuizMode) -> None:
        self.quiz_mode = mode
        self.answer = ""
        self.verdict = Verdict.UNANSWERED
