"""
A player's hand and its blackjack value.
"""

from typing import Iterator, List, Optional, Tuple, Union

from .cards import Card
from .enums import Rank
from .events import EventEmitter, EventType

BLACKJACK = 21
ACE_REDUCTION = 10


class Hand:
    """
    Ordered cards held by one player.

    The hand is cleared in place between rounds so that anything subscribed
    to ``events`` stays attached. Every add, remove and reset is announced
    as HAND_CHANGED with an ``action`` of "add", "remove" or "reset".
    """

    def __init__(self, owner: Optional[object] = None) -> None:
        self._cards: List[Card] = []
        self.owner = owner
        self.events = EventEmitter(source=self)

    def add(self, card: Card) -> None:
        self._cards.append(card)
        self.events.emit_simple(EventType.HAND_CHANGED, action="add", card=card)

    def remove(self, card: Card) -> bool:
        """
        Remove a card from the hand.

        Returns:
            bool: False if the card was not in the hand
        """
        if card not in self._cards:
            return False
        self._cards.remove(card)
        self.events.emit_simple(EventType.HAND_CHANGED, action="remove", card=card)
        return True

    def reset(self) -> List[Card]:
        """
        Empty the hand.

        Returns:
            List[Card]: the cards that were held, in order
        """
        removed = self._cards[:]
        self._cards.clear()
        self.events.emit_simple(EventType.HAND_CHANGED, action="reset", cards=removed)
        return removed

    def _raw_value(self) -> int:
        return sum(card.value for card in self._cards)

    def value(self) -> int:
        """
        Blackjack value of the hand.

        Aces count 11; while the total is over 21 each Ace in turn is
        counted as 1 instead.

        Returns:
            int: the best total not exceeding 21 if one exists
        """
        total = self._raw_value()
        if total > BLACKJACK and self.contains(Rank.ACE):
            aces = sum(1 for card in self._cards if card.rank is Rank.ACE)
            while total > BLACKJACK and aces:
                total -= ACE_REDUCTION
                aces -= 1
        return total

    def is_soft(self) -> bool:
        """True when an Ace is still being counted as 11."""
        if not self.contains(Rank.ACE):
            return False
        reductions = (self._raw_value() - self.value()) // ACE_REDUCTION
        aces = sum(1 for card in self._cards if card.rank is Rank.ACE)
        return reductions < aces

    def is_bust(self) -> bool:
        return self.value() > BLACKJACK

    def contains(self, comparison: Union[Card, Rank, str]) -> bool:
        """
        Membership test.

        Args:
            comparison: a Card (matched by rank and suit), a Rank, or a rank
                label such as "A"

        Returns:
            bool: True if a matching card is held
        """
        if isinstance(comparison, Card):
            return any(card == comparison for card in self._cards)
        if isinstance(comparison, str):
            try:
                comparison = Rank.from_label(comparison)
            except ValueError:
                return False
        if isinstance(comparison, Rank):
            return any(card.rank is comparison for card in self._cards)
        return False

    @property
    def cards(self) -> Tuple[Card, ...]:
        return tuple(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(list(self._cards))

    def __contains__(self, card: object) -> bool:
        return self.contains(card)

    def __str__(self) -> str:
        return " ".join(str(card) for card in self._cards)

    def __repr__(self) -> str:
        return f"Hand([{', '.join(str(card) for card in self._cards)}], value={self.value()})"
