"""
Left-side panels of the main window.

Each panel reads the store's snapshot and forwards user input back to the store.
"""
from nucleuslab.app.ui.panels.cards import IsotopeCard, StabilityCard
from nucleuslab.app.ui.panels.composition import CompositionPanel
from nucleuslab.app.ui.panels.quiz import QuizPanel

__all__ = ["CompositionPanel", "IsotopeCard", "QuizPanel", "StabilityCard"]
