"""Rookery — a two-player chess rule engine with a small PyQt6 board."""

__version__ = "0.1.0"
