"""
Game enumerations.

Suits, ranks and engine states used throughout the blackjack engine.
"""

from enum import Enum
from typing import List


class Suit(Enum):
    """
    Card suit.

    The value is the single-letter code used in card ids such as "AH".
    """

    HEARTS = "H"
    SPADES = "S"
    CLUBS = "C"
    DIAMONDS = "D"


class Rank(Enum):
    """
    Card rank.

    The value is the rank label printed on the card. Blackjack values are
    exposed through ``points``: Ace counts 11 (reduced to 1 by the hand when
    needed), court cards count 10 and numeric ranks count their face value.
    """

    ACE = "A"
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

    @property
    def points(self) -> int:
        """Blackjack value of the rank."""
        if self is Rank.ACE:
            return 11
        if self in (Rank.JACK, Rank.QUEEN, Rank.KING):
            return 10
        return int(self.value)

    @classmethod
    def from_label(cls, label: str) -> "Rank":
        """
        Look up a rank by its printed label.

        Args:
            label: "A", "2".."10", "J", "Q" or "K" (case-insensitive, "T" means ten)

        Returns:
            Rank: the matching rank

        Raises:
            ValueError: when the label is not a rank
        """
        normalized = str(label).upper()
        if normalized == "T":
            normalized = "10"
        return cls(normalized)


class GameStatus(Enum):
    """Engine state: no round in progress, or a round being played."""

    IDLE = "idle"
    ACTIVE = "active"


def get_all_suits() -> List[Suit]:
    """Get all card suits.

    Returns:
        List of all Suit enum values.
    """
    return list(Suit)


def get_all_ranks() -> List[Rank]:
    """Get all card ranks.

    Returns:
        List of all Rank enum values, Ace first.
    """
    return list(Rank)
