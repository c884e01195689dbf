"""Solvers for a season of submarine-themed programming puzzles, one module and command per puzzle."""

__version__ = "1.0.0"