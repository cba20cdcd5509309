"""
Core game objects for blackjack.

This package contains cards, the deck, hands, players, the per-object event
system, configuration and the exception hierarchy.
"""

from .enums import Suit, Rank, GameStatus, get_all_suits, get_all_ranks
from .exceptions import (
    BlackjackError,
    InvalidCardError,
    GameConfigError,
    UnknownPlayerError,
    GameInvariantError,
    DeckExhaustedError,
)
from .events import EventEmitter, EventType, GameEvent, EventListener
from .cards import Card, Deck
from .hand import Hand, BLACKJACK, ACE_REDUCTION
from .player import Player
from .config import GameConfig, setup_logging


# Convenience functions for common operations
def hand_value(cards: list) -> int:
    """Blackjack value of a list of cards.

    Args:
        cards: Card objects or short strings such as "AH".

    Returns:
        The hand value with aces reduced as needed.
    """
    hand = Hand()
    for card in cards:
        hand.add(card if isinstance(card, Card) else Card.from_str(card))
    return hand.value()


__all__ = [
    # Enums
    'Suit', 'Rank', 'GameStatus',

    # Core classes
    'Card', 'Deck', 'Hand', 'Player', 'GameConfig',

    # Constants
    'BLACKJACK', 'ACE_REDUCTION',

    # Events
    'EventEmitter', 'EventType', 'GameEvent', 'EventListener',

    # Exceptions
    'BlackjackError', 'InvalidCardError', 'GameConfigError', 'UnknownPlayerError',
    'GameInvariantError', 'DeckExhaustedError',

    # Convenience functions
    'hand_value', 'setup_logging',

    # Utility functions
    'get_all_suits', 'get_all_ranks',
]
