"""
Controller layer for the blackjack engine.

This package provides the game engine that drives the core objects and the
data transfer objects it hands to presentation layers.
"""

from .game_engine import GameEngine, TIE_REASON
from .dto import GameResult, CardSnapshot, PlayerSnapshot, GameSnapshot
from .decorators import requires_started, logged_action

__all__ = [
    'GameEngine', 'TIE_REASON',
    'GameResult', 'CardSnapshot', 'PlayerSnapshot', 'GameSnapshot',
    'requires_started', 'logged_action',
]
