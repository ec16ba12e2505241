"""Game logic."""

from .engine import InvalidCardError, MemoryGame
from .view_model import EmojiMemoryGame

__all__ = [
    "EmojiMemoryGame",
    "InvalidCardError",
    "MemoryGame",
]
