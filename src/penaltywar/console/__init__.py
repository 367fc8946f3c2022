"""Console collaborators: narration, single sessions and batch runs."""

from penaltywar.console.display import EventRenderer, format_card, format_cards
from penaltywar.console.session import GameSession, SessionConfig
from penaltywar.console.batch import BatchSummary, run_batch, format_summary

__all__ = [
    "EventRenderer",
    "format_card",
    "format_cards",
    "GameSession",
    "SessionConfig",
    "BatchSummary",
    "run_batch",
    "format_summary",
]
