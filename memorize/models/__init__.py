"""Game models."""

from .card import Card, ContentT

__all__ = [
    "Card",
    "ContentT",
]
