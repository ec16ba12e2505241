"""Matching game engine."""

from __future__ import annotations

import logging
import random
from typing import Callable, Generic

from memorize.models.card import Card, ContentT

logger = logging.getLogger(__name__)


class InvalidCardError(ValueError):
    """Raised when a chosen card is not part of the deck."""


class MemoryGame(Generic[ContentT]):
    """Deck of paired cards with single-selection matching rules.

    Content is only ever compared with ``==``.
    """

    def __init__(
        self,
        number_of_pairs: int,
        content_factory: Callable[[int], ContentT],
        rng: random.Random | None = None,
    ):
        """Build a deck of ``2 * number_of_pairs`` face-down cards.

        Args:
            number_of_pairs: Number of pairs (must be at least 1).
            content_factory: Maps a pair index to the content shared by the
                two cards of that pair. Called once per pair index.
            rng: Random source for shuffling (creates one if not provided).

        Raises:
            ValueError: If number_of_pairs is less than 1.
        """
        if number_of_pairs < 1:
            raise ValueError(f"number_of_pairs must be positive, got {number_of_pairs}")

        self._number_of_pairs = number_of_pairs
        self._rng = rng or random.Random()

        self._cards: list[Card[ContentT]] = []
        for pair_index in range(number_of_pairs):
            content = content_factory(pair_index)
            self._cards.append(Card(id=pair_index * 2, content=content))
            self._cards.append(Card(id=pair_index * 2 + 1, content=content))

    @property
    def cards(self) -> list[Card[ContentT]]:
        """Get the cards in rendering order."""
        return self._cards

    @property
    def number_of_pairs(self) -> int:
        """Get the number of pairs the deck was built with."""
        return self._number_of_pairs

    @property
    def is_complete(self) -> bool:
        """Check if every card has been matched."""
        return all(card.is_matched for card in self._cards)

    @property
    def index_of_the_one_and_only_face_up_card(self) -> int | None:
        """Get the index of the single unmatched face-up card.

        Returns:
            Index into ``cards``, or None when zero or several unmatched
            cards are face-up.
        """
        face_up = [
            index
            for index, card in enumerate(self._cards)
            if card.is_face_up and card.is_in_play
        ]
        return face_up[0] if len(face_up) == 1 else None

    def index_of(self, card: Card[ContentT]) -> int:
        """Find a card's position in the deck by its id.

        Raises:
            InvalidCardError: If no card in the deck has that id.
        """
        for index, candidate in enumerate(self._cards):
            if candidate.id == card.id:
                return index
        raise InvalidCardError(f"Card {card.id} is not in this deck")

    def choose(self, card: Card[ContentT]) -> None:
        """Turn a card face-up and resolve a match against the face-up card.

        Choosing a matched or already face-up card does nothing.

        Args:
            card: Card to choose (looked up by id).

        Raises:
            InvalidCardError: If the card is not in the deck.
        """
        chosen_index = self.index_of(card)
        chosen = self._cards[chosen_index]
        if chosen.is_matched or chosen.is_face_up:
            logger.debug(f"Ignoring choice of card {chosen.id}")
            return

        potential_match_index = self.index_of_the_one_and_only_face_up_card
        if potential_match_index is not None:
            potential_match = self._cards[potential_match_index]
            if chosen.content == potential_match.content:
                chosen.is_matched = True
                potential_match.is_matched = True
                logger.debug(f"Match: cards {potential_match.id} and {chosen.id}")
            else:
                potential_match.is_face_up = False
                logger.debug(f"Mismatch: cards {potential_match.id} and {chosen.id}")
        else:
            for other in self._cards:
                if other.is_in_play:
                    other.is_face_up = False
            logger.debug(f"First pick: card {chosen.id}")

        chosen.is_face_up = True

    def shuffle(self) -> None:
        """Randomly reorder the deck without touching any card."""
        self._rng.shuffle(self._cards)
        logger.debug("Deck shuffled")
