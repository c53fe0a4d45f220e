"""
Tests for the main window wiring: preview framing and verdict messages.

Runs on the offscreen Qt platform, so no display is needed.
"""

import logging
import os
import unittest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication

from nucleuslab.app.state import Store
from nucleuslab.app.ui.main_window import MainWindow
from nucleuslab.app.ui.preview import frame_half_extent
from nucleuslab.config import NUCLEON_RADIUS, PREVIEW_HALF_EXTENT
from nucleuslab.model.layout import extent
from nucleuslab.model.quiz import QuizMode


class TestPreviewFraming(unittest.TestCase):
    """The preview frame follows the outermost ring of the layout."""

    def test_small_nuclei_use_default_frame(self):
        self.assertEqual(frame_half_extent(0), PREVIEW_HALF_EXTENT)
        self.assertEqual(frame_half_extent(60), PREVIEW_HALF_EXTENT)

    def test_large_nucleus_widens_frame(self):
        total = 1000
        self.assertGreater(extent(total) + NUCLEON_RADIUS, PREVIEW_HALF_EXTENT)
        self.assertEqual(frame_half_extent(total), extent(total) + NUCLEON_RADIUS)


class TestMainWindow(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.app = QApplication.instance() or QApplication([])

    def setUp(self):
        self.store = Store()
        self.window = MainWindow(self.store)

    def tearDown(self):
        self.window.close()
        logging.getLogger("nucleuslab").removeHandler(self.window._log_handler)

    def test_preview_framed_from_snapshot(self):
        self.store.set_neutrons(40)
        self.assertEqual(
            self.window.work_area.preview.half_extent,
            frame_half_extent(self.store.snapshot().a),
        )

    def test_verdict_shown_in_status_bar(self):
        self.store.set_protons(6)
        self.store.set_neutrons(6)
        self.store.set_quiz_mode(QuizMode.FIND_A)
        self.store.submit_answer("12")
        self.assertEqual(self.window.statusBar().currentMessage(), "Correct!")
        self.store.submit_answer("abc")
        self.assertEqual(self.window.statusBar().currentMessage(), "Check your calculation.")


if __name__ == "__main__":
    unittest.main(verbosity=2)
