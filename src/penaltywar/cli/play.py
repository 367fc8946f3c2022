"""CLI command for playing a single narrated game."""

from __future__ import annotations

import logging
import sys

import click

from penaltywar.console.session import GameSession, SessionConfig
from penaltywar.simulation.engine import GameStalledError

logger = logging.getLogger(__name__)


@click.command()
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
@click.option(
    "--max-plays",
    type=int,
    default=None,
    help="Abort if no winner after this many cards (default: no limit)",
)
@click.option("-q", "--quiet", is_flag=True, help="Only show the start and the result")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(seed: int | None, max_plays: int | None, quiet: bool, verbose: bool):
    """Play one game of penalty war and narrate it.

    Without --seed a fresh seed is drawn and printed so the game can be replayed.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.WARNING)

    config = SessionConfig(seed=seed, max_plays=max_plays, quiet=quiet)
    session = GameSession(config)

    try:
        session.run(output_fn=click.echo)
    except GameStalledError as e:
        click.echo(f"\n{e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
