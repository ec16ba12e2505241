"""Card model."""

from typing import Generic, TypeVar

from pydantic import BaseModel

ContentT = TypeVar("ContentT")


class Card(BaseModel, Generic[ContentT]):
    """Single card in a memory game deck.

    Only ``is_face_up`` and ``is_matched`` change over a card's life.
    ``id`` and ``content`` are fixed when the deck is built.
    """

    id: int
    content: ContentT
    is_face_up: bool = False
    is_matched: bool = False

    @property
    def is_face_down(self) -> bool:
        """Check if this card is showing its back."""
        return not self.is_face_up

    @property
    def is_in_play(self) -> bool:
        """Check if this card can still take part in a match."""
        return not self.is_matched

    def __str__(self) -> str:
        if self.is_matched:
            return f"{self.content}*"
        if self.is_face_up:
            return str(self.content)
        return "##"

    def __repr__(self) -> str:
        return (
            f"Card(id={self.id}, content={self.content!r}, "
            f"face_up={self.is_face_up}, matched={self.is_matched})"
        )
