"""Formatters for game log output."""

from typing import Any, Iterable

from memorize.models.card import Card

# State codes for log output
STATE_DOWN = "D"
STATE_UP = "U"
STATE_MATCHED = "M"


def format_state(card: Card[Any]) -> str:
    """Get the one-letter state code of a card."""
    if card.is_matched:
        return STATE_MATCHED
    if card.is_face_up:
        return STATE_UP
    return STATE_DOWN


def format_card(card: Card[Any]) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Card id followed by its state code (e.g., "3U" for card 3 face-up).
    """
    return f"{card.id}{format_state(card)}"


def format_cards(cards: Iterable[Card[Any]]) -> str:
    """Format cards to a comma-separated string in the given order.

    Returns:
        Comma-separated card strings (e.g., "0D,3U,1M").
        Empty string if no cards.
    """
    return ",".join(format_card(c) for c in cards)


def format_deck(cards: Iterable[Card[Any]]) -> list[dict[str, Any]]:
    """Format the deck layout as a list of id/content records."""
    return [{"id": c.id, "content": str(c.content)} for c in cards]
