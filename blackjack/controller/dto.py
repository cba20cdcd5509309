"""Data transfer objects.

Immutable views of the engine handed to the presentation layer. Snapshots
are pydantic dataclasses so their fields are validated on construction.
Face-down cards carry no rank, suit or value.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from pydantic.dataclasses import dataclass as pydantic_dataclass
from pydantic import Field

from ..core import Card, GameStatus, Player


@dataclass(frozen=True)
class GameResult:
    """Outcome of a finished round.

    Attributes:
        winner: the winning player, None for a tie
        reason: human-readable explanation, e.g. "Dealer busted!"
    """

    winner: Optional[Player]
    reason: str

    @property
    def is_tie(self) -> bool:
        return self.winner is None

    @property
    def winner_name(self) -> Optional[str]:
        return self.winner.name if self.winner else None


@pydantic_dataclass(frozen=True)
class CardSnapshot:
    """A card as the table sees it."""
    visible: bool
    rank: Optional[str] = Field(None, description="Rank label, None when face down")
    suit: Optional[str] = Field(None, description="Suit code, None when face down")
    value: Optional[int] = Field(None, ge=2, le=11, description="Card value, None when face down")

    @classmethod
    def from_card(cls, card: Card) -> "CardSnapshot":
        if not card.visible:
            return cls(visible=False)
        return cls(visible=True, rank=card.rank.value, suit=card.suit.value, value=card.value)


@pydantic_dataclass(frozen=True)
class PlayerSnapshot:
    """A player as the table sees it."""
    name: str = Field(..., min_length=1)
    is_dealer: bool = Field(...)
    standing: bool = Field(...)
    cards: List[CardSnapshot] = Field(default_factory=list)
    value: Optional[int] = Field(None, ge=0, description="Hand value, None while a card is face down")

    @classmethod
    def from_player(cls, player: Player) -> "PlayerSnapshot":
        cards = [CardSnapshot.from_card(card) for card in player.hand]
        all_visible = all(card.visible for card in player.hand)
        return cls(
            name=player.name,
            is_dealer=player.is_dealer,
            standing=player.standing,
            cards=cards,
            value=player.hand_value() if all_visible else None,
        )


@pydantic_dataclass(frozen=True)
class GameSnapshot:
    """Full table state at one moment."""
    status: GameStatus = Field(...)
    player: PlayerSnapshot = Field(...)
    dealer: PlayerSnapshot = Field(...)
    cards_remaining: int = Field(..., ge=0, le=52)
    discard_size: int = Field(..., ge=0, le=52)
    winner: Optional[str] = Field(None, description="Winner name of the last finished round")
    reason: Optional[str] = Field(None, description="Outcome of the last finished round")
    timestamp: datetime = Field(default_factory=datetime.now)

    @property
    def started(self) -> bool:
        return self.status == GameStatus.ACTIVE
