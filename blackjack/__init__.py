"""
Blackjack game engine.

A rules engine for single-player blackjack against an automated dealer:
cards and deck, hand valuation, the deal/hit/stand state machine and the
dealer policy. Presentation layers observe the engine through per-object
events and drive it with deal(), hit() and stand().
"""

__version__ = "1.0.0"

from .core import GameConfig, setup_logging
from .controller import GameEngine, GameResult

__all__ = ['GameEngine', 'GameResult', 'GameConfig', 'setup_logging', '__version__']
