"""Axiom Shift: a matrix-battle puzzle game with a pygame window."""

__version__ = "0.1.0"