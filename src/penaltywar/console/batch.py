"""Batch simulation over consecutive seeds."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from penaltywar.cards.schema import Player
from penaltywar.simulation.engine import GameEngine, GameResult, GameStalledError

logger = logging.getLogger(__name__)

DEFAULT_MAX_PLAYS = 100_000


@dataclass
class BatchSummary:
    """Aggregate statistics for a batch of games."""

    games: int = 0
    player_one_wins: int = 0
    player_two_wins: int = 0
    stalled_seeds: List[int] = field(default_factory=list)
    total_turns: int = 0
    max_turns: int = 0
    total_plays: int = 0

    @property
    def finished(self) -> int:
        return self.player_one_wins + self.player_two_wins

    @property
    def stalled(self) -> int:
        return len(self.stalled_seeds)

    @property
    def avg_turns(self) -> float:
        return self.total_turns / self.finished if self.finished else 0.0

    @property
    def avg_plays(self) -> float:
        return self.total_plays / self.finished if self.finished else 0.0

    def record(self, result: GameResult) -> None:
        self.games += 1
        if result.winner is Player.ONE:
            self.player_one_wins += 1
        else:
            self.player_two_wins += 1
        self.total_turns += result.turn_count
        self.max_turns = max(self.max_turns, result.turn_count)
        self.total_plays += result.plays

    def record_stall(self, seed: int) -> None:
        self.games += 1
        self.stalled_seeds.append(seed)


def run_batch(
    num_games: int,
    base_seed: int = 0,
    max_plays: int = DEFAULT_MAX_PLAYS,
) -> BatchSummary:
    """Simulate games for seeds base_seed .. base_seed + num_games - 1.

    Games that hit max_plays are counted as stalled rather than aborting
    the batch.
    """
    if num_games < 1:
        raise ValueError(f"num_games must be positive, got {num_games}")

    engine = GameEngine(max_plays=max_plays)
    summary = BatchSummary()
    progress_every = max(1, num_games // 10)

    for seed in range(base_seed, base_seed + num_games):
        try:
            summary.record(engine.simulate_game(seed))
        except GameStalledError as e:
            logger.warning(str(e))
            summary.record_stall(seed)

        if summary.games % progress_every == 0:
            logger.info(f"  Simulated {summary.games}/{num_games} games")

    return summary


def format_summary(summary: BatchSummary) -> str:
    """Render summary as a small text report."""
    def pct(count: int) -> str:
        return f"{100.0 * count / summary.games:.1f}%"

    lines = [
        "=" * 40,
        "BATCH RESULTS",
        "=" * 40,
        f"Games:          {summary.games}",
        f"Player 1 wins:  {summary.player_one_wins} ({pct(summary.player_one_wins)})",
        f"Player 2 wins:  {summary.player_two_wins} ({pct(summary.player_two_wins)})",
        f"Avg turns:      {summary.avg_turns:.1f}",
        f"Max turns:      {summary.max_turns}",
        f"Avg plays:      {summary.avg_plays:.1f}",
    ]
    if summary.stalled:
        seeds = ", ".join(str(s) for s in summary.stalled_seeds)
        lines.append(f"Stalled:        {summary.stalled} (seeds: {seeds})")
    return "\n".join(lines)
