"""Tests for answer parsing, targets and task texts of the practice mode."""

import unittest

from nucleuslab.model.quiz import (
    QuizMode, Verdict, check_answer, coerce_mode, parse_answer, quiz_prompt, target_value,
    verdict_message,
)


class TestParseAnswer(unittest.TestCase):

    def test_numbers(self):
        self.assertEqual(parse_answer("12"), 12.0)
        self.assertEqual(parse_answer("  7 "), 7.0)
        self.assertEqual(parse_answer("1e1"), 10.0)

    def test_rejects_non_numbers(self):
        for text in ["", "   ", "abc", "12a", "nan", "inf", None]:
            self.assertIsNone(parse_answer(text), msg=repr(text))


class TestTargets(unittest.TestCase):

    def test_target_value(self):
        self.assertEqual(target_value(QuizMode.FIND_A, 6, 7), 13)
        self.assertEqual(target_value(QuizMode.FIND_N, 6, 7), 7)
        self.assertEqual(target_value(QuizMode.FIND_Z, 6, 7), 6)
        self.assertIsNone(target_value(QuizMode.DISABLED, 6, 7))

    def test_check_answer(self):
        self.assertEqual(check_answer(QuizMode.FIND_A, 6, 6, "12"), Verdict.CORRECT)
        self.assertEqual(check_answer(QuizMode.FIND_A, 6, 6, "12.5"), Verdict.INCORRECT)
        # an empty answer never matches, not even a target of zero
        self.assertEqual(check_answer(QuizMode.FIND_N, 1, 0, ""), Verdict.INCORRECT)
        self.assertEqual(check_answer(QuizMode.FIND_N, 1, 0, "0"), Verdict.CORRECT)

    def test_coerce_mode(self):
        self.assertEqual(coerce_mode("find_a"), QuizMode.FIND_A)
        self.assertEqual(coerce_mode(QuizMode.FIND_Z), QuizMode.FIND_Z)
        self.assertEqual(coerce_mode("none"), QuizMode.DISABLED)


class TestTexts(unittest.TestCase):

    def test_prompts_show_the_two_givens(self):
        self.assertEqual(quiz_prompt(QuizMode.FIND_A, 11, 12), "Given: Z = 11, N = 12. Find A.")
        self.assertEqual(quiz_prompt(QuizMode.FIND_N, 11, 12), "Given: Z = 11, A = 23. Find N.")
        self.assertEqual(quiz_prompt(QuizMode.FIND_Z, 11, 12), "Given: N = 12, A = 23. Find Z.")
        self.assertEqual(quiz_prompt(QuizMode.DISABLED, 11, 12), "")

    def test_verdict_messages(self):
        self.assertEqual(verdict_message(Verdict.CORRECT), "Correct!")
        self.assertEqual(verdict_message(Verdict.INCORRECT), "Check your calculation.")
        self.assertEqual(verdict_message(Verdict.UNANSWERED), "")


if __name__ == "__main__":
    unittest.main(verbosity=2)
