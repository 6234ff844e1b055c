"""Solvers for the first twelve puzzles of a 2021 programming advent calendar, one module per day."""

__version__ = "1.0.0"