from typing import Iterable

import numpy as np

from pontifex.engine.errors import InvalidDeck
from pontifex.engine.logger import get_logger

from .card import Card

logger = get_logger(__name__)


class Deck:
    """
    Class representing the cipher state: an ordered permutation of the 54
    card tokens. Position 0 is the top of the deck, position 53 the bottom.

    A deck is owned by exactly one keystream and is mutated in place as the
    keystream advances. Use copy() to start a second keystream from the
    same key.
    """
    _FULL_DECK = np.arange(Card.DECK_SIZE, dtype=np.int64)

    def __init__(self, permutation: Iterable[int]):
        try:
            tokens = list(permutation)
        except TypeError as e:
            raise InvalidDeck(f"Deck must be a sequence of integer tokens: {e}") from e
        bad = [t for t in tokens if not Deck.is_token(t)]
        if bad:
            raise InvalidDeck(f"Deck must be a sequence of integer tokens, got {bad[:3]!r}")
        try:
            cards = np.array(tokens, dtype=np.int64)
        except OverflowError as e:
            raise InvalidDeck(f"Card tokens out of range 0..53: {e}") from e
        Deck.validate(cards)
        self.cards = cards
        logger.debug("Deck created (%d cards)", len(cards))

    @classmethod
    def sorted(cls) -> "Deck":
        """Reference deck: tokens 0..53 in ascending order."""
        return cls(Deck.GetFullDeck())

    @staticmethod
    def GetFullDeck() -> list[int]:
        return Deck._FULL_DECK.tolist()

    @staticmethod
    def is_token(value) -> bool:
        if isinstance(value, (bool, np.bool_)):
            return False
        return isinstance(value, (int, np.integer))

    @staticmethod
    def validate(cards: np.ndarray) -> None:
        """
        Raise InvalidDeck unless cards holds each of 0..53 exactly once.
        """
        if cards.ndim != 1 or cards.size != Card.DECK_SIZE:
            raise InvalidDeck(f"Deck must hold {Card.DECK_SIZE} cards, got {cards.size}")

        out_of_range = cards[(cards < 0) | (cards >= Card.DECK_SIZE)]
        if out_of_range.size:
            raise InvalidDeck(f"Card tokens out of range 0..53: {out_of_range.tolist()}")

        counts = np.bincount(cards, minlength=Card.DECK_SIZE)
        if not np.all(counts == 1):
            duplicates = np.flatnonzero(counts > 1).tolist()
            missing = np.flatnonzero(counts == 0).tolist()
            raise InvalidDeck(f"Deck is not a permutation: duplicates={duplicates}, missing={missing}")

    def copy(self) -> "Deck":
        return type(self)(self.cards.copy())

    def replace(self, cards) -> None:
        """
        Overwrite the deck order in place with the result of a step.

        Raises InvalidDeck, leaving the deck untouched, unless cards is a
        permutation of the 54 tokens.
        """
        cards = np.asarray(cards)
        if cards.dtype.kind not in "iu":
            raise InvalidDeck(f"Deck must hold integer tokens, got dtype {cards.dtype}")
        cards = cards.astype(np.int64)
        Deck.validate(cards)
        self.cards[:] = cards

    def top(self) -> int:
        return int(self.cards[0])

    def bottom(self) -> int:
        return int(self.cards[-1])

    def position(self, card: int) -> int:
        return int(np.flatnonzero(self.cards == card)[0])

    def tolist(self) -> list[int]:
        return self.cards.tolist()

    def __len__(self):
        return len(self.cards)

    def __iter__(self):
        return iter(self.tolist())

    def __eq__(self, other):
        if not isinstance(other, Deck):
            return NotImplemented
        return np.array_equal(self.cards, other.cards)

    def __str__(self):
        return Card.print_pretty_cards(self.cards)

    def __repr__(self):
        return f"Deck({self.tolist()})"
