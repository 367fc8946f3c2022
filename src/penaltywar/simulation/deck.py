"""Standard deck construction, shuffling and dealing."""

import random
from collections import deque
from typing import Deque, List, Optional, Sequence, Tuple

from penaltywar.cards.schema import Rank, Suit
from penaltywar.simulation.state import Card


def build_standard_deck() -> List[Card]:
    """Create all 52 rank/suit combinations, suit by suit."""
    return [Card(rank=rank, suit=suit) for suit in Suit for rank in Rank]


def shuffle_deck(cards: Sequence[Card], seed: int) -> List[Card]:
    """Return a copy of cards shuffled deterministically from seed."""
    rng = random.Random(seed)
    shuffled = list(cards)
    rng.shuffle(shuffled)
    return shuffled


def split_deck(
    cards: Sequence[Card],
    point: Optional[int] = None,
) -> Tuple[Deque[Card], Deque[Card]]:
    """Cut cards into two queues.

    Args:
        cards: Ordered cards, top of the deck first
        point: Cut index (default: len(cards) // 2)

    Returns:
        (player one queue, player two queue)
    """
    if point is None:
        point = len(cards) // 2
    if not 0 <= point <= len(cards):
        raise ValueError(f"Split point {point} outside 0..{len(cards)}")
    return deque(cards[:point]), deque(cards[point:])
