"""
Card and deck data structures.

Card is a value identified by its rank and suit whose only mutable state is
the face-up/face-down flag. Deck owns the undrawn pile and the discard pile
and reshuffles the discards back in when it runs dry.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from .enums import Suit, Rank, get_all_suits, get_all_ranks
from .events import EventEmitter, EventType
from .exceptions import InvalidCardError, DeckExhaustedError


@dataclass(eq=False)
class Card:
    """
    A single playing card.

    Rank, suit and value are fixed at construction. ``visible`` is the only
    attribute that may change; every change is announced on ``events`` as
    CARD_VISIBILITY_CHANGED.

    Examples:
        >>> card = Card(Rank.ACE, Suit.HEARTS)
        >>> card.id, card.value
        ('AH', 11)
    """

    rank: Rank
    suit: Suit
    visible: bool = True
    value: int = field(init=False)
    events: EventEmitter = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """
        Validate rank and suit and derive the card value.

        Raises:
            InvalidCardError: when rank or suit is not an enum member
        """
        if not isinstance(self.rank, Rank):
            raise InvalidCardError(f"rank must be a Rank, got {self.rank!r}")
        if not isinstance(self.suit, Suit):
            raise InvalidCardError(f"suit must be a Suit, got {self.suit!r}")
        object.__setattr__(self, "value", self.rank.points)
        object.__setattr__(self, "events", EventEmitter(source=self))
        object.__setattr__(self, "visible", bool(self.visible))

    def __setattr__(self, name: str, value) -> None:
        if name not in self.__dict__:
            # first assignment, made by __init__
            object.__setattr__(self, name, value)
        elif name == "visible":
            self._set_visible(value)
        else:
            raise AttributeError(f"Card.{name} is read-only")

    def _set_visible(self, visible: bool) -> None:
        visible = bool(visible)
        if visible == self.visible:
            return
        object.__setattr__(self, "visible", visible)
        self.events.emit_simple(EventType.CARD_VISIBILITY_CHANGED, card=self, visible=visible)

    @property
    def id(self) -> str:
        """Identity string: rank label followed by suit code, e.g. "10S"."""
        return f"{self.rank.value}{self.suit.value}"

    def flip(self) -> None:
        """Turn the card over."""
        self.visible = not self.visible

    def reveal(self) -> None:
        """Turn the card face up."""
        self.visible = True

    def hide(self) -> None:
        """Turn the card face down."""
        self.visible = False

    @classmethod
    def from_str(cls, card_str: str) -> "Card":
        """
        Build a face-up card from its short form.

        Args:
            card_str: rank label followed by suit code, such as "AH" or "10s"

        Returns:
            Card: the parsed card

        Raises:
            InvalidCardError: when the string does not name one of the 52 cards
        """
        if not isinstance(card_str, str) or len(card_str) < 2:
            raise InvalidCardError(f"Invalid card string: {card_str!r}")

        rank_str, suit_str = card_str[:-1], card_str[-1].upper()
        try:
            rank = Rank.from_label(rank_str)
            suit = Suit(suit_str)
        except ValueError as e:
            raise InvalidCardError(f"Invalid card string: {card_str!r}") from e
        return cls(rank, suit)

    def __str__(self) -> str:
        return self.id

    def __repr__(self) -> str:
        state = "" if self.visible else ", hidden"
        return f"Card({self.rank.name}, {self.suit.name}{state})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank == other.rank and self.suit == other.suit

    def __hash__(self) -> int:
        return hash((self.rank, self.suit))


class Deck:
    """
    A single 52-card deck with a discard pile.

    Cards are drawn from the top (the end of the internal list). When the
    undrawn pile runs out mid-draw the discard pile is folded back in and
    shuffled. Shuffles are announced on ``events`` as DECK_SHUFFLED.

    Examples:
        >>> deck = Deck(rng=random.Random(7))
        >>> deck.shuffle()
        >>> cards = deck.draw(2)
        >>> len(deck)
        50
    """

    def __init__(self, rng: Optional[random.Random] = None,
                 logger: Optional[logging.Logger] = None) -> None:
        """
        Build a full, unshuffled deck.

        Args:
            rng: random number generator used for shuffling
            logger: optional logger
        """
        self._rng = rng or random.Random()
        self._logger = logger or logging.getLogger(__name__)
        self._cards: List[Card] = [
            Card(rank, suit)
            for suit in get_all_suits()
            for rank in get_all_ranks()
        ]
        self._discarded: List[Card] = []
        self.events = EventEmitter(source=self, logger=self._logger)

    def shuffle(self) -> "Deck":
        """Shuffle the undrawn cards. The discard pile is left alone."""
        self._rng.shuffle(self._cards)
        self._logger.debug("Deck has been shuffled.")
        self.events.emit_simple(EventType.DECK_SHUFFLED, cards_remaining=len(self._cards))
        return self

    def draw(self, count: int = 1) -> List[Card]:
        """
        Take cards from the top of the deck.

        Args:
            count: number of cards to draw

        Returns:
            List[Card]: the drawn cards, in draw order

        Raises:
            ValueError: when count is negative
            DeckExhaustedError: when deck and discard pile together hold fewer
                than ``count`` cards
        """
        if count < 0:
            raise ValueError("Count must be non-negative")
        available = len(self._cards) + len(self._discarded)
        if count > available:
            raise DeckExhaustedError(
                f"Cannot draw {count} cards, only {available} left in deck and discard pile"
            )

        drawn = []
        for _ in range(count):
            if not self._cards:
                self._reclaim_discarded()
            drawn.append(self._cards.pop())
        return drawn

    def _reclaim_discarded(self) -> None:
        """Move the discard pile back into the deck and shuffle."""
        self._logger.info(f"Deck is empty, reshuffling {len(self._discarded)} discarded cards.")
        self._cards.extend(self._discarded)
        self._discarded = []
        self.shuffle()

    def discard(self, cards: Union[Card, Iterable[Card]]) -> None:
        """
        Put cards on the discard pile.

        Args:
            cards: a card or an iterable of cards
        """
        if isinstance(cards, Card):
            cards = [cards]
        self._discarded.extend(cards)

    def stack(self, cards: Iterable[Card]) -> None:
        """
        Move undrawn cards to the top so the next draws return them in order.

        Args:
            cards: cards to put on top; the first one is drawn first

        Raises:
            ValueError: when a card is not in the undrawn pile
        """
        cards = list(cards)
        for card in cards:
            if card not in self._cards:
                raise ValueError(f"{card} is not in the undrawn pile")
        picked = [self._cards.pop(self._cards.index(card)) for card in cards]
        self._cards.extend(reversed(picked))

    @property
    def cards_remaining(self) -> int:
        """Number of undrawn cards."""
        return len(self._cards)

    @property
    def discard_size(self) -> int:
        """Number of cards on the discard pile."""
        return len(self._discarded)

    @property
    def discarded(self) -> Tuple[Card, ...]:
        """The discard pile, oldest first."""
        return tuple(self._discarded)

    @property
    def is_empty(self) -> bool:
        """True when no undrawn cards are left."""
        return not self._cards

    def peek_top(self) -> Optional[Card]:
        """
        Look at the next card to be drawn without drawing it.

        Returns:
            Optional[Card]: the top card, or None if the deck is empty
        """
        return self._cards[-1] if self._cards else None

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(list(self._cards))

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __str__(self) -> str:
        return f"Deck({len(self._cards)} cards remaining)"

    def __repr__(self) -> str:
        return f"Deck(cards_remaining={len(self._cards)}, discarded={len(self._discarded)})"
