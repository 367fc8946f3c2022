"""Card and player enumerations."""

from __future__ import annotations

from enum import Enum


class Rank(Enum):
    """Playing card ranks, valued by their display symbol."""

    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"


class Suit(Enum):
    """Playing card suits (display only, no rule meaning)."""

    SPADES = "S"
    HEARTS = "H"
    CLUBS = "C"
    DIAMONDS = "D"


class Player(Enum):
    """The two seats at the table."""

    ONE = 1
    TWO = 2

    def other(self) -> "Player":
        """Return the opponent."""
        return Player.TWO if self is Player.ONE else Player.ONE

    @property
    def number(self) -> int:
        return self.value
