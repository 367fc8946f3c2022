"""Tests for deck construction, shuffling and splitting."""

import pytest

from penaltywar.cards.schema import Rank, Suit
from penaltywar.simulation.deck import build_standard_deck, shuffle_deck, split_deck
from penaltywar.simulation.state import Card


def test_standard_deck_has_52_distinct_cards() -> None:
    """Every rank/suit pair appears exactly once."""
    deck = build_standard_deck()
    assert len(deck) == 52
    assert len(set(deck)) == 52
    assert set(deck) == {Card(r, s) for r in Rank for s in Suit}


def test_standard_deck_is_suit_major() -> None:
    """Ranks run two to ace within each suit."""
    deck = build_standard_deck()
    assert deck[0] == Card(Rank.TWO, Suit.SPADES)
    assert deck[12] == Card(Rank.ACE, Suit.SPADES)
    assert deck[13] == Card(Rank.TWO, Suit.HEARTS)
    assert deck[-1] == Card(Rank.ACE, Suit.DIAMONDS)


def test_shuffle_is_seed_deterministic() -> None:
    deck = build_standard_deck()
    assert shuffle_deck(deck, 7) == shuffle_deck(deck, 7)
    assert shuffle_deck(deck, 7) != shuffle_deck(deck, 8)


def test_shuffle_does_not_mutate_input() -> None:
    deck = build_standard_deck()
    original = list(deck)
    shuffled = shuffle_deck(deck, 3)
    assert deck == original
    assert sorted(map(str, shuffled)) == sorted(map(str, original))


def test_split_even_deck() -> None:
    """52 cards split 26/26, first half to player one."""
    deck = build_standard_deck()
    one, two = split_deck(deck)
    assert len(one) == 26
    assert len(two) == 26
    assert list(one) == deck[:26]
    assert list(two) == deck[26:]


def test_split_odd_deck_floors() -> None:
    """Odd counts give the smaller half to player one."""
    deck = build_standard_deck()[:5]
    one, two = split_deck(deck)
    assert len(one) == 2
    assert len(two) == 3


def test_split_explicit_point() -> None:
    deck = build_standard_deck()
    one, two = split_deck(deck, 10)
    assert len(one) == 10
    assert len(two) == 42


def test_split_rejects_out_of_range_point() -> None:
    deck = build_standard_deck()
    with pytest.raises(ValueError):
        split_deck(deck, 53)
    with pytest.raises(ValueError):
        split_deck(deck, -1)
