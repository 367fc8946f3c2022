"""Game state representation."""

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Iterable, List

from penaltywar.cards.schema import Player, Rank, Suit


@dataclass(frozen=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank.value}{self.suit.value}"


@dataclass
class GameState:
    """Mutable state of one game.

    Each player owns a FIFO deck; the pile is shared and only holds cards
    while an exchange is in progress. Cards move between these three zones
    and are never created or destroyed once dealt.
    """

    player_one: Deque[Card]
    player_two: Deque[Card]
    pile: List[Card] = field(default_factory=list)
    current_player: Player = Player.ONE
    turn_count: int = 0
    plays: int = 0

    @classmethod
    def from_decks(
        cls,
        player_one: Iterable[Card],
        player_two: Iterable[Card],
    ) -> "GameState":
        """Create a fresh state from two ordered card sequences (top first)."""
        return cls(player_one=deque(player_one), player_two=deque(player_two))

    def deck_of(self, player: Player) -> Deque[Card]:
        """Return the live deck owned by player."""
        if player is Player.ONE:
            return self.player_one
        return self.player_two

    def play_top_card(self, player: Player) -> Card:
        """Move player's top card onto the pile and return it."""
        card = self.deck_of(player).popleft()
        self.pile.append(card)
        self.plays += 1
        return card

    def collect_pile(self, player: Player) -> tuple[Card, ...]:
        """Append the whole pile, in play order, to player's deck."""
        collected = tuple(self.pile)
        self.deck_of(player).extend(collected)
        self.pile.clear()
        return collected

    def total_cards(self) -> int:
        return len(self.player_one) + len(self.player_two) + len(self.pile)

    def all_cards(self) -> List[Card]:
        """Every card in play, in no particular order."""
        return [*self.player_one, *self.player_two, *self.pile]
