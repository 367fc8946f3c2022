"""Game simulation engine."""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from penaltywar.cards.schema import Player
from penaltywar.simulation.deck import build_standard_deck, shuffle_deck, split_deck
from penaltywar.simulation.events import (
    CardPlayed,
    EventSink,
    GameOver,
    GameStarted,
    InitialDecks,
    NullSink,
    TurnCount,
)
from penaltywar.simulation.penalty import penalty_of, resolve_penalty
from penaltywar.simulation.state import GameState

logger = logging.getLogger(__name__)


class GameStalledError(RuntimeError):
    """Game hit the play limit before either player ran out of cards."""

    def __init__(self, plays: int, seed: Optional[int] = None) -> None:
        self.plays = plays
        self.seed = seed
        where = f" (seed {seed})" if seed is not None else ""
        super().__init__(f"No winner after {plays} plays{where}")


@dataclass(frozen=True)
class GameResult:
    """Result of a simulated game."""

    winner: Player
    turn_count: int
    plays: int  # Cards played in total, penalty payments included
    seed: Optional[int] = None


def _exhaustion_winner(state: GameState) -> Optional[Player]:
    """Winner once a deck is empty after a move, else None.

    When both decks are empty player two is declared the winner.
    """
    if not state.player_one:
        return Player.TWO
    if not state.player_two:
        return Player.ONE
    return None


class GameEngine:
    """Plays penalty war games to completion."""

    def __init__(
        self,
        sink: Optional[EventSink] = None,
        max_plays: Optional[int] = None,
    ) -> None:
        """Initialize engine.

        Args:
            sink: Receives game events (default: discards them)
            max_plays: Raise GameStalledError once this many cards have been
                played without a winner. None never stops a game.
        """
        self.sink = sink if sink is not None else NullSink()
        self.max_plays = max_plays

    def run(self, state: GameState, seed: Optional[int] = None) -> GameResult:
        """Play from state until a winner is decided, mutating state."""
        self.sink.emit(GameStarted())
        winner = self._play(state, seed)

        logger.info(
            f"Player {winner.number} wins after {state.turn_count} turns "
            f"({state.plays} plays)"
        )
        self.sink.emit(GameOver(winner))
        self.sink.emit(TurnCount(state.turn_count))
        return GameResult(
            winner=winner,
            turn_count=state.turn_count,
            plays=state.plays,
            seed=seed,
        )

    def _play(self, state: GameState, seed: Optional[int]) -> Player:
        while True:
            current = state.current_player
            if not state.deck_of(current):
                return current.other()

            if self.max_plays is not None and state.plays >= self.max_plays:
                raise GameStalledError(state.plays, seed)

            card = state.play_top_card(current)
            self.sink.emit(CardPlayed(current, card))

            magnitude = penalty_of(card.rank)
            if magnitude is not None:
                winner = resolve_penalty(state, current, magnitude, self.sink)
                if winner is not None:
                    return winner
            else:
                state.current_player = current.other()
                state.turn_count += 1

            winner = _exhaustion_winner(state)
            if winner is not None:
                return winner

    def simulate_game(self, seed: int) -> GameResult:
        """Shuffle a standard deck with seed, deal it and play it out."""
        deck = shuffle_deck(build_standard_deck(), seed)
        player_one, player_two = split_deck(deck)
        self.sink.emit(InitialDecks(
            full=tuple(deck),
            player_one=tuple(player_one),
            player_two=tuple(player_two),
        ))

        state = GameState(player_one=player_one, player_two=player_two)
        return self.run(state, seed=seed)


def play_penalty_war_game(
    seed: int = 42,
    max_plays: Optional[int] = None,
) -> Dict[str, int]:
    """Play a complete game silently and return results."""
    result = GameEngine(max_plays=max_plays).simulate_game(seed)

    return {
        "winner": result.winner.number,
        "turns": result.turn_count,
        "plays": result.plays,
    }
