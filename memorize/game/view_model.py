"""Observable view model over the matching game engine."""

from __future__ import annotations

import logging
import random
from threading import RLock
from typing import Callable

from memorize.config import Config
from memorize.logging import GameLogger
from memorize.models.card import Card
from memorize.themes import get_theme, make_content_factory

from .engine import MemoryGame

logger = logging.getLogger(__name__)

Observer = Callable[[tuple[Card[str], ...]], None]


class EmojiMemoryGame:
    """Emoji-themed memory game exposed to a presentation layer.

    Every intent forwards to the engine and then notifies observers exactly
    once with a fresh snapshot of the cards. The engine makes every game
    decision; this class only builds decks and republishes state.
    """

    def __init__(
        self,
        theme: str | None = None,
        number_of_pairs: int | None = None,
        config: Config | None = None,
        game_logger: GameLogger | None = None,
        rng: random.Random | None = None,
    ):
        """Initialize the view model with a freshly built deck.

        Args:
            theme: Theme name (uses config if not specified)
            number_of_pairs: Pairs in the deck (uses config if not specified),
                capped at the number of emojis in the theme
            config: Configuration (uses defaults if not provided)
            game_logger: GameLogger instance for detailed logging
            rng: Random source for shuffling (seeded from config if not provided)

        Raises:
            ValueError: If the theme is unknown or number_of_pairs is below 1.
        """
        self.config = config or Config()
        self.game_logger = game_logger
        self._rng = rng or random.Random(self.config.game.seed)
        self._lock = RLock()
        self._observers: list[Observer] = []
        self._game_over_logged = False

        self._theme = theme or self.config.game.theme
        self._emojis = get_theme(self._theme)
        pairs = min(
            number_of_pairs
            if number_of_pairs is not None
            else self.config.game.number_of_pairs,
            self.max_pairs,
        )
        self._model = self._create_memory_game(pairs)

        if self.game_logger:
            self.game_logger.log_session_start(self._theme, pairs, self._model.cards)

    def _create_memory_game(self, number_of_pairs: int) -> MemoryGame[str]:
        logger.info(f"New {self._theme} game with {number_of_pairs} pairs")
        return MemoryGame(
            number_of_pairs,
            make_content_factory(self._emojis),
            rng=self._rng,
        )

    @property
    def cards(self) -> tuple[Card[str], ...]:
        """Get a detached snapshot of the cards in rendering order."""
        with self._lock:
            return tuple(card.model_copy(deep=True) for card in self._model.cards)

    @property
    def theme(self) -> str:
        """Get the current theme name."""
        return self._theme

    @property
    def number_of_pairs(self) -> int:
        """Get the number of pairs in the current deck."""
        return self._model.number_of_pairs

    @property
    def max_pairs(self) -> int:
        """Get the number of distinct emojis the theme can supply."""
        return len(self._emojis)

    @property
    def is_complete(self) -> bool:
        """Check if every pair has been matched."""
        with self._lock:
            return self._model.is_complete

    def add_observer(self, observer: Observer) -> None:
        """Register a callback that receives the cards after each intent."""
        self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        """Unregister a callback (does nothing if not registered)."""
        if observer in self._observers:
            self._observers.remove(observer)

    def _notify(self) -> None:
        snapshot = self.cards
        for observer in list(self._observers):
            observer(snapshot)

    # Intents

    def shuffle(self) -> None:
        """Shuffle the deck."""
        with self._lock:
            self._model.shuffle()
            if self.game_logger:
                self.game_logger.log_shuffle(self._model.cards)
            self._notify()

    def choose(self, card: Card[str]) -> None:
        """Choose a card.

        Raises:
            InvalidCardError: If the card is not in the deck. No observer is
                notified in that case.
        """
        with self._lock:
            self._model.choose(card)
            if self.game_logger:
                self.game_logger.log_choose(card, self._model.cards)
                if self._model.is_complete and not self._game_over_logged:
                    self.game_logger.log_game_end(self._model.number_of_pairs)
                    self._game_over_logged = True
            self._notify()

    def resize(self, number_of_pairs: int) -> None:
        """Rebuild and shuffle the deck with a different number of pairs.

        The pair count is clamped to the range the theme can supply.
        """
        pairs = max(1, min(number_of_pairs, self.max_pairs))
        with self._lock:
            self._replace_model(pairs, "resize")
            self._notify()

    def add_pair(self) -> None:
        """Grow the deck by one pair."""
        self.resize(self.number_of_pairs + 1)

    def remove_pair(self) -> None:
        """Shrink the deck by one pair."""
        self.resize(self.number_of_pairs - 1)

    def new_game(self, theme: str | None = None) -> None:
        """Start over with a shuffled deck, optionally switching theme.

        Raises:
            ValueError: If the theme is unknown.
        """
        emojis = get_theme(theme) if theme else self._emojis
        with self._lock:
            self._theme = theme or self._theme
            self._emojis = emojis
            self._replace_model(min(self.number_of_pairs, self.max_pairs), "new_game")
            self._notify()

    def _replace_model(self, number_of_pairs: int, event: str) -> None:
        self._model = self._create_memory_game(number_of_pairs)
        self._model.shuffle()
        self._game_over_logged = False
        if self.game_logger:
            self.game_logger.log_new_deck(
                event, self._theme, number_of_pairs, self._model.cards
            )
