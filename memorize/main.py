"""Main entry point for the Memorize terminal game."""

import argparse
import logging
import random
import sys
from datetime import datetime
from pathlib import Path
from typing import Callable

from memorize.config import load_config
from memorize.game import EmojiMemoryGame
from memorize.logging import GameLogConfig, GameLogger
from memorize.themes import theme_names
from memorize.utils.logger import GameDisplay, setup_logging

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    """Parse a command-line integer that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def generate_log_filename(log_dir: str, theme: str, number_of_pairs: int) -> str:
    """Generate log filename with timestamp, theme and deck size.

    Format: {ISO timestamp}_{theme}_{pairs}.jsonl

    Args:
        log_dir: Directory for log files.
        theme: Theme name.
        number_of_pairs: Number of pairs in the deck.

    Returns:
        Full path to log file.
    """
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    filename = f"{timestamp}_{theme}_{number_of_pairs}.jsonl"
    return str(Path(log_dir) / filename)


def play(
    game: EmojiMemoryGame,
    display: GameDisplay,
    read: Callable[[str], str] = input,
) -> None:
    """Run the interactive loop until the deck is complete or input ends.

    Args:
        game: View model to drive.
        display: Display used for all output.
        read: Prompt function returning one line of input.
    """
    display.print_game_start(game.theme, game.number_of_pairs)
    display.print_help()
    display.print_cards(game.cards)
    game.add_observer(display.print_cards)

    try:
        while not game.is_complete:
            try:
                command = read("> ").strip().lower()
            except EOFError:
                return

            if command == "q":
                return
            elif command == "s":
                game.shuffle()
            elif command == "+":
                game.add_pair()
            elif command == "-":
                game.remove_pair()
            elif command == "n":
                game.new_game()
            elif command.isdigit():
                cards = game.cards
                position = int(command)
                if position >= len(cards):
                    display.print_error(f"No card at position {position}")
                    continue
                game.choose(cards[position])
            elif command:
                display.print_error(f"Unknown command: {command}")
                display.print_help()

        display.print_game_end(game.number_of_pairs)
    finally:
        game.remove_observer(display.print_cards)


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    parser = argparse.ArgumentParser(description="Memorize card-matching game")
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-n",
        "--pairs",
        type=positive_int,
        help="Number of pairs (overrides config)",
    )
    parser.add_argument(
        "-t",
        "--theme",
        choices=theme_names(),
        help="Emoji theme (overrides config)",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        help="Shuffle seed (overrides config)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--show-content",
        action="store_true",
        help="Show face-down card content in output",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Directory for game log files (filename auto-generated)",
    )

    args = parser.parse_args()

    # Load config
    config = load_config(args.config)

    # Apply command-line overrides
    if args.pairs is not None:
        config.game.number_of_pairs = args.pairs
    if args.theme:
        config.game.theme = args.theme
    if args.seed is not None:
        config.game.seed = args.seed
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.show_content:
        config.logging.show_content = True

    # Determine game log directory (CLI argument overrides config file)
    game_log_enabled = args.game_log is not None or config.game_log.enabled
    game_log_dir = str(args.game_log) if args.game_log else config.game_log.output_path

    setup_logging(config.logging.level)

    display = GameDisplay(show_content=config.logging.show_content)

    if game_log_enabled:
        log_path = generate_log_filename(
            game_log_dir, config.game.theme, config.game.number_of_pairs
        )
        game_log_config = GameLogConfig(enabled=True, output_path=log_path)
        print(f"Game log: {log_path}")
    else:
        game_log_config = GameLogConfig(enabled=False)

    try:
        with GameLogger(game_log_config) as game_logger:
            game = EmojiMemoryGame(
                config=config,
                game_logger=game_logger,
                rng=random.Random(config.game.seed),
            )
            game.shuffle()
            play(game, display)
        return 0

    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        return 1
    except Exception as e:
        logger.exception(f"Game error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
