"""Game events and the sinks that receive them.

The engine never formats text. It emits these events to an injected sink;
rendering, recording or discarding them is the sink's business.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Protocol, Type, TypeVar, Union

from penaltywar.cards.schema import Player
from penaltywar.simulation.state import Card


@dataclass(frozen=True)
class InitialDecks:
    """Shuffled deck and each player's share, before any play."""

    full: tuple[Card, ...]
    player_one: tuple[Card, ...]
    player_two: tuple[Card, ...]


@dataclass(frozen=True)
class GameStarted:
    pass


@dataclass(frozen=True)
class CardPlayed:
    player: Player
    card: Card


@dataclass(frozen=True)
class PenaltyPhaseStarted:
    """A penalty card was played; the opponent owes `magnitude` cards."""

    magnitude: int


@dataclass(frozen=True)
class PileCollected:
    player: Player
    cards: tuple[Card, ...]


@dataclass(frozen=True)
class GameOver:
    winner: Player


@dataclass(frozen=True)
class TurnCount:
    count: int


GameEvent = Union[
    InitialDecks,
    GameStarted,
    CardPlayed,
    PenaltyPhaseStarted,
    PileCollected,
    GameOver,
    TurnCount,
]

E = TypeVar("E")


class EventSink(Protocol):
    """Anything that accepts game events."""

    def emit(self, event: GameEvent) -> None:
        ...


class NullSink:
    """Discards every event."""

    def emit(self, event: GameEvent) -> None:
        pass


@dataclass
class RecordingSink:
    """Keeps every event in arrival order."""

    events: List[GameEvent] = field(default_factory=list)

    def emit(self, event: GameEvent) -> None:
        self.events.append(event)

    def of_type(self, event_type: Type[E]) -> List[E]:
        """Return recorded events of a single kind."""
        return [e for e in self.events if isinstance(e, event_type)]
