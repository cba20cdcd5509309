"""
Game configuration.

GameConfig holds the table settings for one engine; setup_logging configures
logging once for a host application.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .exceptions import GameConfigError

LOG_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class GameConfig:
    """
    Table settings.

    Attributes:
        dealer_name: display name of the house
        player_name: display name of the human player
        dealer_stands_on: lowest total the dealer stands on
        random_seed: seed for the deck's shuffles, None for a random seed
        event_history_size: engine events kept for inspection, 0 keeps none
        log_level: level name passed to setup_logging
        debug_mode: log every emitted event
    """

    dealer_name: str = "Dealer"
    player_name: str = "You"
    dealer_stands_on: int = 17
    random_seed: Optional[int] = None
    event_history_size: int = 0
    log_level: str = "INFO"
    debug_mode: bool = False

    def __post_init__(self):
        """Validate the settings."""
        if not self.dealer_name or not self.player_name:
            raise GameConfigError("Player names must not be empty")

        if self.dealer_name == self.player_name:
            raise GameConfigError(f"Dealer and player share the name {self.dealer_name!r}")

        if not 2 <= self.dealer_stands_on <= 21:
            raise GameConfigError(f"dealer_stands_on must be between 2 and 21: {self.dealer_stands_on}")

        if self.event_history_size < 0:
            raise GameConfigError(f"event_history_size must not be negative: {self.event_history_size}")

        self.log_level = self.log_level.upper()
        if self.log_level not in _VALID_LOG_LEVELS:
            raise GameConfigError(f"Unknown log level: {self.log_level}")

    @classmethod
    def default(cls) -> "GameConfig":
        return cls()

    @classmethod
    def from_env(cls) -> "GameConfig":
        """
        Build a config from BLACKJACK_* environment variables.

        BLACKJACK_DEALER_NAME, BLACKJACK_PLAYER_NAME, BLACKJACK_DEALER_STANDS_ON,
        BLACKJACK_SEED, BLACKJACK_EVENT_HISTORY, BLACKJACK_LOG_LEVEL and
        BLACKJACK_DEBUG (1/true/yes). Unset variables keep their defaults.
        """
        defaults = cls()
        seed = os.getenv("BLACKJACK_SEED")

        try:
            return cls(
                dealer_name=os.getenv("BLACKJACK_DEALER_NAME", defaults.dealer_name),
                player_name=os.getenv("BLACKJACK_PLAYER_NAME", defaults.player_name),
                dealer_stands_on=int(os.getenv("BLACKJACK_DEALER_STANDS_ON", defaults.dealer_stands_on)),
                random_seed=int(seed) if seed else None,
                event_history_size=int(os.getenv("BLACKJACK_EVENT_HISTORY", defaults.event_history_size)),
                log_level=os.getenv("BLACKJACK_LOG_LEVEL", defaults.log_level),
                debug_mode=os.getenv("BLACKJACK_DEBUG", "0").lower() in ("1", "true", "yes"),
            )
        except ValueError as e:
            if isinstance(e, GameConfigError):
                raise
            raise GameConfigError(f"Invalid BLACKJACK_* environment value: {e}") from e


def setup_logging(level: str = "INFO") -> None:
    """Call once at program start."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
