"""Property-based tests for the game engine."""

from collections import Counter

from hypothesis import given, reject, settings, strategies as st

from conftest import TEST_MAX_PLAYS
from penaltywar.simulation.deck import build_standard_deck, shuffle_deck, split_deck
from penaltywar.simulation.engine import GameEngine, GameResult, GameStalledError
from penaltywar.simulation.events import CardPlayed, GameEvent, RecordingSink
from penaltywar.simulation.state import GameState

seeds = st.integers(min_value=0, max_value=2**32 - 1)


class ConservationSink:
    """Checks card conservation every time an event is emitted."""

    def __init__(self, state: GameState) -> None:
        self.state = state
        self.expected = Counter(build_standard_deck())
        self.checks = 0

    def emit(self, event: GameEvent) -> None:
        assert self.state.total_cards() == 52
        assert Counter(self.state.all_cards()) == self.expected
        self.checks += 1


def play(engine: GameEngine, state: GameState, seed: int) -> GameResult:
    try:
        return engine.run(state, seed=seed)
    except GameStalledError:
        reject()


@settings(max_examples=25, deadline=None)
@given(seed=seeds)
def test_conservation_property(seed: int) -> None:
    """Property: no card is lost or duplicated at any observation point."""
    one, two = split_deck(shuffle_deck(build_standard_deck(), seed))
    state = GameState(player_one=one, player_two=two)
    sink = ConservationSink(state)

    play(GameEngine(sink=sink, max_plays=TEST_MAX_PLAYS), state, seed)

    assert sink.checks > 0
    assert state.total_cards() == 52


@settings(max_examples=25, deadline=None)
@given(seed=seeds)
def test_determinism_property(seed: int) -> None:
    """Property: same seed always produces the same events and winner."""
    sink1, sink2 = RecordingSink(), RecordingSink()
    try:
        result1 = GameEngine(sink=sink1, max_plays=TEST_MAX_PLAYS).simulate_game(seed)
    except GameStalledError:
        reject()
    result2 = GameEngine(sink=sink2, max_plays=TEST_MAX_PLAYS).simulate_game(seed)

    assert result1 == result2
    assert sink1.events == sink2.events


@settings(max_examples=25, deadline=None)
@given(seed=seeds)
def test_turn_count_property(seed: int) -> None:
    """Property: only a non-penalty play that passes the turn counts as a turn."""
    sink = RecordingSink()
    one, two = split_deck(shuffle_deck(build_standard_deck(), seed))
    state = GameState(player_one=one, player_two=two)

    result = play(GameEngine(sink=sink, max_plays=TEST_MAX_PLAYS), state, seed)

    plays = sink.of_type(CardPlayed)
    assert len(plays) == result.plays
    assert result.turn_count <= result.plays
    # Every counted turn hands play to the opponent
    assert state.current_player.value == 1 + result.turn_count % 2
