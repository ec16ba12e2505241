"""Memorize: a card-matching memory game."""

__version__ = "0.1.0"
