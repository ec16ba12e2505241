"""Game logger for step-by-step game replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, TextIO

from pydantic import BaseModel

from memorize.models.card import Card

from .formatters import format_card, format_cards, format_deck


class GameLogConfig(BaseModel):
    """Configuration for game logging."""

    enabled: bool = False
    output_path: str = "game_log.jsonl"


class GameLogger:
    """Logger for game events in JSONL format.

    Each line in the output file is a JSON object representing one intent
    and the deck state right after it.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_session_start(
        self,
        theme: str,
        number_of_pairs: int,
        cards: Iterable[Card[Any]],
    ) -> None:
        """Log session start with the initial deck layout.

        Args:
            theme: Theme name.
            number_of_pairs: Number of pairs in the deck.
            cards: Cards in rendering order.
        """
        self._write({
            "type": "session_start",
            "timestamp": datetime.now().isoformat(),
            "theme": theme,
            "pairs": number_of_pairs,
            "deck": format_deck(cards),
        })

    def log_choose(self, card: Card[Any], cards: Iterable[Card[Any]]) -> None:
        """Log a choose intent.

        Args:
            card: Card as it was when chosen.
            cards: All cards after the engine resolved the choice.
        """
        self._write({
            "type": "choose",
            "card": format_card(card),
            "cards": format_cards(cards),
        })

    def log_shuffle(self, cards: Iterable[Card[Any]]) -> None:
        """Log a shuffle intent with the new card order."""
        self._write({
            "type": "shuffle",
            "order": [c.id for c in cards],
        })

    def log_new_deck(
        self,
        event: str,
        theme: str,
        number_of_pairs: int,
        cards: Iterable[Card[Any]],
    ) -> None:
        """Log a rebuilt deck.

        Args:
            event: "resize" or "new_game".
            theme: Theme name.
            number_of_pairs: Number of pairs in the new deck.
            cards: Cards in rendering order.
        """
        self._write({
            "type": event,
            "theme": theme,
            "pairs": number_of_pairs,
            "deck": format_deck(cards),
        })

    def log_game_end(self, number_of_pairs: int) -> None:
        """Log that every pair has been matched."""
        self._write({
            "type": "game_end",
            "timestamp": datetime.now().isoformat(),
            "pairs": number_of_pairs,
        })
