"""Knightly — a chess rule engine: board state, legal moves, check and mate."""

__version__ = "0.1.0"
