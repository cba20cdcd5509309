"""
Blackjack player.

The dealer and the human are both Player instances. A Player owns one Hand
for its whole lifetime and re-broadcasts the hand's changes on its own
``events`` so observers can subscribe at a stable point.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Sequence, Union

from .cards import Card
from .events import EventEmitter, EventType, GameEvent
from .hand import Hand, BLACKJACK

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Player:
    """
    A seat at the table.

    Attributes:
        name: display name, e.g. "Dealer" or "You"
        is_dealer: True for the house
        hand: the owned hand, never replaced
        events: emits HAND_CHANGED and STANDING_CHANGED
    """

    name: str
    is_dealer: bool = False
    hand: Hand = field(init=False, repr=False)
    events: EventEmitter = field(init=False, repr=False)
    _standing: bool = field(init=False, default=False, repr=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Player name must not be empty")
        self.hand = Hand(owner=self)
        self.events = EventEmitter(source=self)
        self.hand.events.subscribe(EventType.HAND_CHANGED, self._on_hand_changed)

    def _on_hand_changed(self, event: GameEvent) -> None:
        self.events.emit_simple(EventType.HAND_CHANGED, player=self, **event.data)

    @property
    def standing(self) -> bool:
        return self._standing

    @standing.setter
    def standing(self, value: bool) -> None:
        value = bool(value)
        if value == self._standing:
            return
        self._standing = value
        self.events.emit_simple(EventType.STANDING_CHANGED, player=self, standing=value)

    def add_cards(self, cards: Union[Card, Sequence[Card]]) -> None:
        """
        Add one card or several cards to the hand.

        Anything that is not a Card is skipped.
        """
        if not isinstance(cards, (list, tuple)):
            cards = [cards]

        for card in cards:
            if isinstance(card, Card):
                self.hand.add(card)
            else:
                logger.debug(f"{self.name}: ignoring non-card {card!r}")

    def hand_value(self) -> int:
        return self.hand.value()

    def has_blackjack(self) -> bool:
        """Exactly two cards worth 21."""
        return len(self.hand) == 2 and self.hand.value() == BLACKJACK

    def is_bust(self) -> bool:
        return self.hand.is_bust()

    def show_hand(self) -> None:
        """Turn every card in the hand face up."""
        for card in self.hand:
            card.reveal()

    def reset_for_new_round(self) -> List[Card]:
        """
        Clear the hand and the standing flag.

        Returns:
            List[Card]: the cards that were in the hand
        """
        removed = self.hand.reset()
        self._standing = False
        return removed

    def __str__(self) -> str:
        cards = " ".join(str(card) if card.visible else "XX" for card in self.hand)
        status = ", standing" if self.standing else ""
        return f"{self.name}: [{cards}]{status}"

    def __repr__(self) -> str:
        return f"Player(name='{self.name}', is_dealer={self.is_dealer}, cards={len(self.hand)}, standing={self.standing})"
