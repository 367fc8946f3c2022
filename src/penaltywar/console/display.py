"""Terminal narration of game events."""

from __future__ import annotations

from typing import Callable, Iterable

from penaltywar.cards.schema import Player
from penaltywar.simulation.events import (
    CardPlayed,
    GameEvent,
    GameOver,
    GameStarted,
    InitialDecks,
    PenaltyPhaseStarted,
    PileCollected,
    TurnCount,
)
from penaltywar.simulation.penalty import PENALTY_VALUES
from penaltywar.simulation.state import Card


# Outline suit glyphs
SUIT_SYMBOLS = {"S": "♤", "H": "♡", "C": "♧", "D": "♢"}

# Magnitude -> rank symbol that carries it
PENALTY_RUNES = {value: rank.value for rank, value in PENALTY_VALUES.items()}


def format_card(card: Card) -> str:
    """Format card with unicode suit symbol."""
    suit_symbol = SUIT_SYMBOLS.get(card.suit.value, card.suit.value)
    return f"{card.rank.value}{suit_symbol}"


def format_cards(cards: Iterable[Card]) -> str:
    return ", ".join(format_card(c) for c in cards)


class EventRenderer:
    """Writes a line-oriented account of the game as events arrive.

    With quiet=True only the start and end of the game are written.
    """

    def __init__(
        self,
        output_fn: Callable[[str], None] = print,
        quiet: bool = False,
    ) -> None:
        self.output_fn = output_fn
        self.quiet = quiet

    def emit(self, event: GameEvent) -> None:
        if isinstance(event, GameStarted):
            self.output_fn("\n=== Game Start ===")
        elif isinstance(event, GameOver):
            self.output_fn("\n=== Game Over ===")
            self.output_fn(f"WINNER: PLAYER {event.winner.number}")
        elif isinstance(event, TurnCount):
            self.output_fn(f"\nTURNS: {event.count}")
        elif self.quiet:
            return
        elif isinstance(event, InitialDecks):
            self._render_initial_decks(event)
        elif isinstance(event, CardPlayed):
            self.output_fn(
                f"\nPLAYER |{event.player.number}| →  {format_card(event.card)}"
            )
        elif isinstance(event, PenaltyPhaseStarted):
            rune = PENALTY_RUNES.get(event.magnitude, "?")
            self.output_fn(f"\nNEW PENALTY PHASE: [{rune} - {event.magnitude}]\n")
        elif isinstance(event, PileCollected):
            self.output_fn(
                f"\nPLAYER |{event.player.number}| ←  [{format_cards(event.cards)}]"
            )
            self.output_fn("\nEND PENALTY PHASE\n")

    def _render_initial_decks(self, event: InitialDecks) -> None:
        self.output_fn(f"\nINITIAL DECK ({len(event.full)}):")
        self.output_fn(f"[{format_cards(event.full)}]")
        for player, deck in (
            (Player.ONE, event.player_one),
            (Player.TWO, event.player_two),
        ):
            self.output_fn(f"\nPLAYER |{player.number}| INITIAL DECK ({len(deck)}):")
            self.output_fn(f"[{format_cards(deck)}]")
