"""Single narrated game session."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Optional

from penaltywar.console.display import EventRenderer
from penaltywar.simulation.engine import GameEngine, GameResult


@dataclass
class SessionConfig:
    """Configuration for a game session."""

    seed: Optional[int] = None
    max_plays: Optional[int] = None
    quiet: bool = False

    def __post_init__(self):
        """Generate seed if not provided."""
        if self.seed is None:
            self.seed = random.randint(0, 2**64 - 1)


class GameSession:
    """Plays one game and narrates it."""

    def __init__(self, config: SessionConfig):
        self.config = config
        self.seed = config.seed

    def run(self, output_fn: Callable[[str], None] = print) -> GameResult:
        """Run the session.

        Args:
            output_fn: Function to output text (default: print)

        Returns:
            GameResult of the finished game
        """
        output_fn(f"SEED: {self.seed}")

        renderer = EventRenderer(output_fn=output_fn, quiet=self.config.quiet)
        engine = GameEngine(sink=renderer, max_plays=self.config.max_plays)
        return engine.simulate_game(self.seed)
