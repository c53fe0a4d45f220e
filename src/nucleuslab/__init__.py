"""Nucleus Lab: an interactive model of atomic nucleus composition."""

__version__ = "0.1.0"
