"""Tests for the emoji memory game view model."""

import random

import pytest

from memorize.config import Config
from memorize.game import EmojiMemoryGame, InvalidCardError
from memorize.models.card import Card
from memorize.themes import PLACEHOLDER, THEMES


@pytest.fixture
def game():
    return EmojiMemoryGame(theme="vehicles", number_of_pairs=3, rng=random.Random(0))


@pytest.fixture
def notifications(game):
    received = []
    game.add_observer(received.append)
    return received


def find(game, card_id):
    return next(c for c in game.cards if c.id == card_id)


class TestConstruction:
    """Tests for building the view model."""

    def test_defaults_from_config(self):
        """Test that theme and pair count come from the default config."""
        game = EmojiMemoryGame()
        assert game.theme == "nature"
        assert game.number_of_pairs == 16
        assert len(game.cards) == 32

    def test_config_override(self):
        """Test that a custom config is honored."""
        config = Config()
        config.game.theme = "vehicles"
        config.game.number_of_pairs = 4
        game = EmojiMemoryGame(config=config)

        assert game.theme == "vehicles"
        assert len(game.cards) == 8

    def test_unknown_theme(self):
        """Test that an unknown theme is rejected."""
        with pytest.raises(ValueError):
            EmojiMemoryGame(theme="nope")

    def test_theme_content(self, game):
        """Test that cards carry the theme's emojis."""
        contents = {c.content for c in game.cards}
        assert contents == set(THEMES["vehicles"][:3])

    def test_pairs_capped_at_theme(self):
        """Test that the deck never asks the theme for more emojis than it has."""
        game = EmojiMemoryGame(theme="vehicles", number_of_pairs=12)
        assert game.number_of_pairs == len(THEMES["vehicles"])
        assert PLACEHOLDER not in {c.content for c in game.cards}

    def test_default_pairs_capped_at_small_theme(self):
        """Test that the configured pair count is capped for a small theme."""
        game = EmojiMemoryGame(theme="vehicles")
        contents = [c.content for c in game.cards]
        assert game.number_of_pairs == len(THEMES["vehicles"])
        assert all(contents.count(content) == 2 for content in contents)


class TestSnapshot:
    """Tests for the cards snapshot."""

    def test_snapshot_is_detached(self, game):
        """Test that editing a snapshot does not touch the engine."""
        cards = game.cards
        cards[0].is_face_up = True
        assert not game.cards[0].is_face_up

    def test_snapshot_is_tuple(self, game):
        """Test that the snapshot cannot be resized by callers."""
        assert isinstance(game.cards, tuple)


class TestIntents:
    """Tests for choose and shuffle intents."""

    def test_choose_forwards(self, game, notifications):
        """Test that choose flips the card and notifies once."""
        game.choose(find(game, 0))

        assert find(game, 0).is_face_up
        assert len(notifications) == 1
        assert next(c for c in notifications[0] if c.id == 0).is_face_up

    def test_choose_match(self, game, notifications):
        """Test that a pair chosen through the view model matches."""
        game.choose(find(game, 2))
        game.choose(find(game, 3))

        assert find(game, 2).is_matched
        assert find(game, 3).is_matched
        assert len(notifications) == 2

    def test_choose_unknown_card(self, game, notifications):
        """Test that a failed choose does not notify."""
        with pytest.raises(InvalidCardError):
            game.choose(Card(id=42, content="x"))
        assert notifications == []

    def test_choose_noop_still_notifies_once(self, game, notifications):
        """Test that every intent notifies exactly once."""
        card = find(game, 1)
        game.choose(card)
        game.choose(card)
        assert len(notifications) == 2

    def test_shuffle_notifies(self, game, notifications):
        """Test that shuffle notifies with all cards."""
        game.shuffle()
        assert len(notifications) == 1
        assert sorted(c.id for c in notifications[0]) == list(range(6))

    def test_shuffle_keeps_state(self, game):
        """Test that shuffle keeps card flags."""
        game.choose(find(game, 4))
        game.shuffle()
        assert find(game, 4).is_face_up

    def test_observer_sees_post_mutation_state(self, game):
        """Test that observers read consistent state from the view model."""
        seen = []
        game.add_observer(lambda cards: seen.append(find(game, 5).is_face_up))
        game.choose(find(game, 5))
        assert seen == [True]

    def test_remove_observer(self, game, notifications):
        """Test that removed observers are no longer called."""
        game.remove_observer(notifications.append)
        game.shuffle()
        assert notifications == []

    def test_remove_unknown_observer(self, game):
        """Test that removing an unregistered observer is harmless."""
        game.remove_observer(print)

    def test_is_complete(self, game):
        """Test completion after matching every pair."""
        for pair_index in range(3):
            game.choose(find(game, pair_index * 2))
            game.choose(find(game, pair_index * 2 + 1))
        assert game.is_complete


class TestDeckSize:
    """Tests for resize, add_pair, remove_pair and new_game."""

    def test_add_pair(self, game, notifications):
        """Test that adding a pair grows the deck."""
        game.add_pair()
        assert game.number_of_pairs == 4
        assert len(game.cards) == 8
        assert len(notifications) == 1

    def test_remove_pair(self, game):
        """Test that removing a pair shrinks the deck."""
        game.remove_pair()
        assert len(game.cards) == 4

    def test_resize_clamps_to_one(self, game):
        """Test that the deck never drops below one pair."""
        game.resize(0)
        assert game.number_of_pairs == 1
        game.remove_pair()
        assert game.number_of_pairs == 1

    def test_resize_clamps_to_theme(self, game):
        """Test that the deck never outgrows the theme."""
        game.resize(100)
        assert game.number_of_pairs == len(THEMES["vehicles"])
        assert PLACEHOLDER not in {c.content for c in game.cards}

    def test_resize_resets_cards(self, game):
        """Test that a resized deck starts face-down."""
        game.choose(find(game, 0))
        game.resize(3)
        assert not any(c.is_face_up for c in game.cards)

    def test_new_game_same_theme(self, game, notifications):
        """Test that a new game keeps theme and size."""
        game.choose(find(game, 0))
        game.new_game()

        assert game.theme == "vehicles"
        assert game.number_of_pairs == 3
        assert not any(c.is_face_up for c in game.cards)
        assert len(notifications) == 2

    def test_new_game_switch_theme(self, game):
        """Test switching theme."""
        game.new_game("nature")
        assert game.theme == "nature"
        assert {c.content for c in game.cards} <= set(THEMES["nature"])

    def test_new_game_unknown_theme(self, game):
        """Test that an unknown theme leaves the game untouched."""
        with pytest.raises(ValueError):
            game.new_game("nope")
        assert game.theme == "vehicles"

    def test_new_game_clamps_to_smaller_theme(self):
        """Test that switching to a smaller theme shrinks the deck."""
        game = EmojiMemoryGame(theme="nature", number_of_pairs=16)
        game.new_game("vehicles")
        assert game.number_of_pairs == len(THEMES["vehicles"])

    def test_zero_pairs_rejected(self):
        """Test that an explicit empty deck is rejected."""
        with pytest.raises(ValueError):
            EmojiMemoryGame(number_of_pairs=0)

    @pytest.mark.parametrize("theme", ["nature", "vehicles"])
    def test_add_pair_never_shrinks(self, theme):
        """Test that adding a pair to a default-sized deck never loses pairs."""
        game = EmojiMemoryGame(theme=theme)
        before = game.number_of_pairs
        game.add_pair()
        assert game.number_of_pairs >= before

    def test_new_game_keeps_default_size(self):
        """Test that a new game on a small theme keeps the deck size."""
        game = EmojiMemoryGame(theme="vehicles")
        before = game.number_of_pairs
        game.new_game()
        assert game.number_of_pairs == before
