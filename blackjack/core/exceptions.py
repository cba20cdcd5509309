"""
Blackjack engine exceptions.

Caller errors are raised to the caller; invariant violations derive from
AssertionError and are never caught by the engine.
"""


class BlackjackError(Exception):
    """Base class for all blackjack engine errors."""
    pass


class InvalidCardError(BlackjackError, ValueError):
    """A card was built from something that is not a legal rank/suit."""
    pass


class GameConfigError(BlackjackError, ValueError):
    """Invalid game configuration."""
    pass


class UnknownPlayerError(BlackjackError, ValueError):
    """A player that is not seated at this engine was passed in."""
    pass


class GameInvariantError(BlackjackError, AssertionError):
    """An engine invariant no longer holds. Not recoverable."""
    pass


class DeckExhaustedError(GameInvariantError):
    """More cards were requested than the deck and discard pile hold together."""
    pass
