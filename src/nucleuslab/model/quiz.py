"""Practice mode: solve for A, N or Z from the other two values."""
from __future__ import annotations

from enum import StrEnum
from typing import Optional

import math


class QuizMode(StrEnum):
    DISABLED = "disabled"
    FIND_A = "find_a"
    FIND_N = "find_n"
    FIND_Z = "find_z"


class Verdict(StrEnum):
    UNANSWERED = "unanswered"
    CORRECT = "correct"
    INCORRECT = "incorrect"


MODE_LABELS: dict[QuizMode, str] = {
    QuizMode.DISABLED: "Off",
    QuizMode.FIND_A: "Find A",
    QuizMode.FIND_N: "Find N",
    QuizMode.FIND_Z: "Find Z",
}

VERDICT_MESSAGES: dict[Verdict, str] = {
    Verdict.UNANSWERED: "",
    Verdict.CORRECT: "Correct!",
    Verdict.INCORRECT: "Check your calculation.",
}


def coerce_mode(mode: QuizMode | str) -> QuizMode:
    """Turn a mode or its string value into a QuizMode; unknown values disable the quiz."""
    try:
        return QuizMode(mode)
    except ValueError:
        return QuizMode.DISABLED


def parse_answer(text: Optional[str]) -> Optional[float]:
    """
    Parse a typed answer.

    Returns None for empty, non-numeric, NaN or infinite input, so that such
    answers can never equal a target.
    """
    if text is None:
        return None
    stripped = str(text).strip()
    if not stripped:
        return None
    try:
        value = float(stripped)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def target_value(mode: QuizMode, z: int, n: int) -> Optional[int]:
    """The value the learner has to find in the given mode."""
    match mode:
        case QuizMode.FIND_A:
            return z + n
        case QuizMode.FIND_N:
            return n
        case QuizMode.FIND_Z:
            return z
        case _:
            return None


def check_answer(mode: QuizMode, z: int, n: int, text: Optional[str]) -> Verdict:
    target = target_value(mode, z, n)
    value = parse_answer(text)
    if target is None or value is None:
        return Verdict.INCORRECT
    return Verdict.CORRECT if value == target else Verdict.INCORRECT


def quiz_prompt(mode: QuizMode, z: int, n: int) -> str:
    """Task text listing the two given values and the one to find."""
    a = z + n
    match mode:
        case QuizMode.FIND_A:
            return f"Given: Z = {z}, N = {n}. Find A."
        case QuizMode.FIND_N:
            return f"Given: Z = {z}, A = {a}. Find N."
        case QuizMode.FIND_Z:
            return f"Given: N = {n}, A = {a}. Find Z."
        case _:
            return ""


def verdict_message(verdict: Verdict) -> str:
    return VERDICT_MESSAGES[verdict]
