"""CLI command for simulating many games."""

from __future__ import annotations

import logging
import sys

import click

from penaltywar.console.batch import DEFAULT_MAX_PLAYS, format_summary, run_batch

logger = logging.getLogger(__name__)


@click.command()
@click.option("-n", "--games", type=int, default=100, help="Number of games to simulate")
@click.option("--seed", type=int, default=0, help="First seed; games use consecutive seeds")
@click.option(
    "--max-plays",
    type=int,
    default=DEFAULT_MAX_PLAYS,
    help="Count a game as stalled after this many cards",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(games: int, seed: int, max_plays: int, verbose: bool):
    """Simulate a batch of seeded games and print win statistics."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.WARNING)

    if games < 1:
        click.echo("--games must be at least 1", err=True)
        sys.exit(1)

    logger.info(f"Simulating {games} games from seed {seed}")
    summary = run_batch(games, base_seed=seed, max_plays=max_plays)
    click.echo(format_summary(summary))


if __name__ == "__main__":
    main()
