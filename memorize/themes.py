"""Emoji themes and content factories."""

from typing import Callable, Sequence

# Shown when a theme runs out of distinct content
PLACEHOLDER = "⁉️"

THEMES: dict[str, tuple[str, ...]] = {
    "nature": (
        "⛰️", "🍃", "🦋", "🌊", "🌸", "🦔", "🏕️", "🐌", "🏝️",
        "🍄", "🐚", "🪺", "🪷", "🐝", "🌳", "🐬", "🪸", "🦚",
    ),
    "vehicles": (
        "✈️", "🚗", "🚝", "🚁", "🚇", "🚊", "🛵", "🚐", "🚜", "🛺",
    ),
}

DEFAULT_THEME = "nature"


def theme_names() -> list[str]:
    """Get available theme names in sorted order."""
    return sorted(THEMES)


def get_theme(name: str) -> tuple[str, ...]:
    """Look up a theme's emojis.

    Args:
        name: Theme name (e.g., "nature").

    Returns:
        Tuple of distinct emojis.

    Raises:
        ValueError: If the theme does not exist.
    """
    try:
        return THEMES[name]
    except KeyError:
        raise ValueError(
            f"Unknown theme {name!r} (available: {', '.join(theme_names())})"
        ) from None


def make_content_factory(
    emojis: Sequence[str],
    placeholder: str = PLACEHOLDER,
) -> Callable[[int], str]:
    """Build a content factory for MemoryGame.

    Args:
        emojis: Distinct emojis, one per pair index.
        placeholder: Content used for indices the emojis cannot cover.

    Returns:
        Function mapping a pair index to its content. Never raises.
    """

    def content_for(pair_index: int) -> str:
        if 0 <= pair_index < len(emojis):
            return emojis[pair_index]
        return placeholder

    return content_for
