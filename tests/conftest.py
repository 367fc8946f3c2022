"""Shared test fixtures."""

import pytest

from penaltywar.cards.schema import Rank, Suit
from penaltywar.simulation.engine import GameStalledError, play_penalty_war_game
from penaltywar.simulation.state import Card

# Generous cap so a non-terminating deal cannot hang the suite
TEST_MAX_PLAYS = 100_000


def make_card(rank: str, suit: str = "S") -> Card:
    """Helper to create cards from display symbols."""
    return Card(rank=Rank(rank), suit=Suit(suit))


def make_cards(*symbols: str) -> list[Card]:
    """Helper to create spade cards from rank symbols, e.g. make_cards("J", "2")."""
    return [make_card(s) for s in symbols]


@pytest.fixture(scope="session")
def finished_seed() -> int:
    """First seed whose game ends within TEST_MAX_PLAYS."""
    for seed in range(50):
        try:
            play_penalty_war_game(seed=seed, max_plays=TEST_MAX_PLAYS)
        except GameStalledError:
            continue
        return seed
    pytest.fail("No seed in 0..49 finished")
