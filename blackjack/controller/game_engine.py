"""
Blackjack game engine.

GameEngine owns the deck and the two players and drives them through the
deal / hit / stand protocol. After every state change it evaluates the
table, plays the dealer's turn when the player has stood, and emits
GAME_ENDED once a round is decided. A presentation layer observes the engine
through ``events`` and the events of the deck, players and cards.
"""

import logging
import random
from typing import Optional, Tuple

from ..core import (
    Deck, Player, GameConfig, GameStatus, EventEmitter, EventType,
    UnknownPlayerError, BLACKJACK,
)
from .decorators import requires_started, logged_action
from .dto import GameResult, GameSnapshot, PlayerSnapshot

TIE_REASON = "There was a tie!"


class GameEngine:
    """Two-party blackjack engine: one human player against the dealer.

    The deck and both players are created once; ``deal()`` starts a fresh
    round on the same objects so observers stay attached. Commands return
    nothing; results are published as events and through ``last_result``.

    States:
        IDLE: no round in progress, hit/stand are ignored
        ACTIVE: a round is being played
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        deck: Optional[Deck] = None,
        logger: Optional[logging.Logger] = None
    ):
        """Set up the table.

        Args:
            config: table settings, defaults to GameConfig()
            deck: deck to play with; a new shuffled deck if None
            logger: logger, defaults to the module logger
        """
        self._config = config or GameConfig()
        if logger is None:
            logger = logging.getLogger(__name__)
            logger.setLevel(logging.DEBUG if self._config.debug_mode else self._config.log_level)
        self._logger = logger
        self._started = False
        self._last_result: Optional[GameResult] = None
        self.events = EventEmitter(
            source=self,
            logger=self._logger,
            max_history=self._config.event_history_size,
        )

        self.deck = deck if deck is not None else self._load_deck()
        self.dealer = Player(name=self._config.dealer_name, is_dealer=True)
        self.player = Player(name=self._config.player_name)
        self._logger.debug("loaded dealer and player.")

        if self._config.debug_mode:
            for event_type in EventType:
                self.events.subscribe(event_type, self._log_event)

    def _load_deck(self) -> Deck:
        deck = Deck(rng=random.Random(self._config.random_seed))
        deck.shuffle()
        self._logger.debug("loaded deck.")
        return deck

    def _log_event(self, event) -> None:
        self._logger.debug(f"event {event.event_type.value}: {event.data}")

    # === Queries ===

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def started(self) -> bool:
        return self._started

    @property
    def status(self) -> GameStatus:
        return GameStatus.ACTIVE if self._started else GameStatus.IDLE

    @property
    def players(self) -> Tuple[Player, Player]:
        """Both players in evaluation order, dealer first."""
        return (self.dealer, self.player)

    @property
    def last_result(self) -> Optional[GameResult]:
        """Outcome of the most recently finished round."""
        return self._last_result

    def other_player(self, player: Player) -> Player:
        self._check_seated(player)
        return self.player if player is self.dealer else self.dealer

    def get_snapshot(self) -> GameSnapshot:
        """Immutable view of the table for the presentation layer."""
        result = self._last_result
        return GameSnapshot(
            status=self.status,
            player=PlayerSnapshot.from_player(self.player),
            dealer=PlayerSnapshot.from_player(self.dealer),
            cards_remaining=self.deck.cards_remaining,
            discard_size=self.deck.discard_size,
            winner=result.winner_name if result else None,
            reason=result.reason if result else None,
        )

    # === Commands ===

    @logged_action("deal")
    def deal(self) -> None:
        """Start a new round, abandoning any round in progress.

        Both hands go to the discard pile, the dealer gets two cards with the
        second face down, the player gets two cards, then the table is
        evaluated (a blackjack can end the round straight away).
        """
        self._reset()

        dealer_cards = self.deck.draw(2)
        dealer_cards[1].flip()

        self.dealer.add_cards(dealer_cards)
        self.player.add_cards(self.deck.draw(2))

        self._started = True
        self._logger.info("Cards have been dealt.")
        self.events.emit_simple(EventType.GAME_STARTED, dealer=self.dealer, player=self.player)
        self.update()

    @requires_started
    @logged_action("hit")
    def hit(self, player: Player) -> None:
        """Give one card to ``player``. Ignored while no round is in progress."""
        self._check_seated(player)
        player.add_cards(self.deck.draw())
        self.update()

    @requires_started
    @logged_action("stand")
    def stand(self, player: Player) -> None:
        """Mark ``player`` as standing. Ignored while no round is in progress.

        When the human stands the dealer plays its turn.
        """
        self._check_seated(player)
        player.standing = True
        if player is self.player:
            self._logger.info(f"Standing: {player.name}")
            self.dealer_turn()
        self.update()

    @requires_started
    def dealer_turn(self) -> None:
        """Reveal the dealer's hand, then hit below the stand total or stand."""
        self.dealer.show_hand()

        if self.dealer.hand_value() < self._config.dealer_stands_on:
            self._logger.info("Dealer hits.")
            self.hit(self.dealer)
        else:
            self._logger.info("Dealer stands.")
            self.stand(self.dealer)

    # === Evaluation ===

    def update(self) -> None:
        """Evaluate the table and end the round once it is decided.

        A round that is not decided continues with the dealer's turn if the
        player is already standing.
        """
        if not self._started:
            return

        decided, winner, reason = self._evaluate()

        if decided:
            self._end_game(winner, reason)
        elif self.player.standing:
            self.dealer_turn()

    def _evaluate(self) -> Tuple[bool, Optional[Player], Optional[str]]:
        """Decide the round if possible.

        Returns:
            (decided, winner, reason); winner is None for a tie
        """
        if all(p.standing for p in self.players):
            player_value = self.player.hand_value()
            dealer_value = self.dealer.hand_value()
            if player_value == dealer_value:
                return True, None, TIE_REASON
            winner = max(self.players, key=lambda p: p.hand_value())
            return True, winner, f"{winner.name} won with a higher hand."

        for player in self.players:
            other = self.other_player(player)
            value = player.hand_value()

            if value > BLACKJACK:
                return True, other, f"{player.name} busted!"

            if value == BLACKJACK:
                if other.hand_value() != BLACKJACK:
                    if player.has_blackjack():
                        return True, player, f"{player.name} got a blackjack"
                    return True, player, f"{player.name} got {value}"
                if player.has_blackjack():
                    if other.has_blackjack():
                        return True, None, TIE_REASON
                    return True, player, f"{player.name} got a blackjack"
                # Both on 21 without this player holding a blackjack: left
                # for the other player's check or a later action.

        return False, None, None

    def _end_game(self, winner: Optional[Player], reason: str) -> None:
        self.dealer.show_hand()
        self._last_result = GameResult(winner=winner, reason=reason)
        self._logger.info(f"Game over. {reason}")
        self.events.emit_simple(EventType.GAME_ENDED, winner=winner, reason=reason)
        self._started = False

    def _reset(self) -> None:
        """Return both hands to the discard pile and clear standing flags."""
        self._started = False
        for player in self.players:
            player.show_hand()
            self.deck.discard(player.reset_for_new_round())

    def _check_seated(self, player: Player) -> None:
        if player is not self.player and player is not self.dealer:
            raise UnknownPlayerError(f"{player!r} is not seated at this table")

    def __repr__(self) -> str:
        return f"GameEngine(status={self.status.value}, dealer={self.dealer}, player={self.player})"
