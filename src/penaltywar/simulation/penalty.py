"""Penalty values and the penalty payment state machine."""

import logging
from typing import Dict, Optional

from penaltywar.cards.schema import Player, Rank
from penaltywar.simulation.events import (
    CardPlayed,
    EventSink,
    PenaltyPhaseStarted,
    PileCollected,
)
from penaltywar.simulation.state import GameState

logger = logging.getLogger(__name__)


# Cards the opponent must pay when each face card or ace is played
PENALTY_VALUES: Dict[Rank, int] = {
    Rank.JACK: 1,
    Rank.QUEEN: 2,
    Rank.KING: 3,
    Rank.ACE: 4,
}


def penalty_of(rank: Rank) -> Optional[int]:
    """Return the penalty magnitude for rank, or None for numeric ranks."""
    return PENALTY_VALUES.get(rank)


def resolve_penalty(
    state: GameState,
    initiator: Player,
    magnitude: int,
    sink: EventSink,
) -> Optional[Player]:
    """Run a penalty exchange until the pile is collected or a deck runs dry.

    The payer plays cards from the top of their deck. A penalty card played
    while paying swaps the roles: its player becomes the initiator and the
    other player owes the new magnitude from scratch. When the payer completes
    the required count, the initiator takes the whole pile.

    Args:
        state: Game state; the triggering card is already on the pile
        initiator: Player who played the triggering card
        magnitude: Cards owed for the triggering card
        sink: Receives play, penalty and collection events

    Returns:
        The game winner if the payer ran out of cards, else None once the
        pile has been collected.
    """
    payer = initiator.other()
    required = magnitude
    paid = 0

    logger.debug(f"Penalty {magnitude} by player {initiator.number}")
    sink.emit(PenaltyPhaseStarted(magnitude))

    while True:
        if not state.deck_of(payer):
            logger.debug(
                f"Player {payer.number} cannot pay ({paid}/{required}), "
                f"{len(state.pile)} cards abandoned on the pile"
            )
            return payer.other()

        card = state.play_top_card(payer)
        sink.emit(CardPlayed(payer, card))

        escalation = penalty_of(card.rank)
        if escalation is not None:
            logger.debug(f"Player {payer.number} escalates with {card} ({escalation})")
            initiator, payer = payer, initiator
            required = escalation
            paid = 0
            sink.emit(PenaltyPhaseStarted(escalation))
            continue

        paid += 1
        if paid == required:
            break

    logger.debug(f"Player {initiator.number} collects {len(state.pile)} cards")
    sink.emit(PileCollected(initiator, tuple(state.pile)))
    state.collect_pile(initiator)
    return None
