"""Logging utilities and game state display."""

import logging
import sys
from typing import TYPE_CHECKING, Sequence, TextIO

if TYPE_CHECKING:
    from memorize.models.card import Card


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


class GameDisplay:
    """Display the deck as text."""

    def __init__(
        self,
        show_content: bool = False,
        columns: int = 4,
        stream: TextIO | None = None,
    ):
        """Initialize display.

        Args:
            show_content: Whether to reveal face-down card content
            columns: Cards per row
            stream: Output stream (defaults to stdout)
        """
        self.show_content = show_content
        self.columns = max(1, columns)
        self.stream = stream or sys.stdout

    def _print(self, text: str = "") -> None:
        print(text, file=self.stream)

    def print_separator(self) -> None:
        """Print a separator line."""
        self._print("=" * 40)

    def format_cell(self, position: int, card: "Card[str]") -> str:
        """Format one card with its position."""
        if card.is_matched:
            face = "  "
        elif card.is_face_down and not self.show_content:
            face = "##"
        elif card.is_face_down:
            face = f"({card.content})"
        else:
            face = card.content
        return f"{position:>2}:{face}"

    def print_cards(self, cards: Sequence["Card[str]"]) -> None:
        """Print the deck as a grid of positions."""
        cells = [self.format_cell(i, card) for i, card in enumerate(cards)]
        for start in range(0, len(cells), self.columns):
            self._print("  ".join(cells[start:start + self.columns]))
        matched = sum(1 for card in cards if card.is_matched) // 2
        self._print(f"Matched pairs: {matched}/{len(cards) // 2}")

    def print_game_start(self, theme: str, number_of_pairs: int) -> None:
        """Print game start message."""
        self.print_separator()
        self._print(f"MEMORIZE: {theme} ({number_of_pairs} pairs)")
        self.print_separator()

    def print_help(self) -> None:
        """Print the list of commands."""
        self._print(
            "Commands: <position> choose, s shuffle, + add pair, "
            "- remove pair, n new game, q quit"
        )

    def print_error(self, message: str) -> None:
        """Print an input error."""
        self._print(f"  !! {message}")

    def print_game_end(self, number_of_pairs: int) -> None:
        """Print game end message."""
        self.print_separator()
        self._print(f"All {number_of_pairs} pairs matched!")
        self.print_separator()
