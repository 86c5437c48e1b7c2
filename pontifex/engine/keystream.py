"""
Keystream generation.

A KeystreamGenerator owns one Deck and advances it in place, one round of
steps 1-4 at a time, producing values lazily. Rounds whose output card is
a joker are discarded and another round is run before a value is returned.
"""

from typing import Iterable, Iterator

from pontifex.cards.card import Card
from pontifex.cards.deck import Deck

from .logger import get_logger
from .steps import run_steps, step5

logger = get_logger(__name__)


def advance(deck: Deck) -> int:
    """
    Run one round of steps 1-4 on deck in place and return the step 5
    output card, joker or not.
    """
    deck.replace(run_steps(deck.cards))
    return step5(deck.cards)


def next_keystream_value(deck: Deck) -> int:
    """
    Advance deck until a non-joker output card appears and return it.

    Returns:
        Keystream value in [0, 51]
    """
    while True:
        token = advance(deck)
        if not Card.is_joker(token):
            return token
        logger.debug("Discarding joker output")


def raw_outputs(deck: Deck, n: int) -> Iterator[int]:
    """
    Yield the unfiltered step 5 output of n rounds, jokers included.
    """
    for _ in range(n):
        yield advance(deck)


class KeystreamGenerator:
    """
    Unbounded iterator of keystream values over an owned deck.

    The generator is not rewindable: to replay a keystream build a new
    generator from a copy of the starting deck.
    """

    def __init__(self, deck: Deck):
        self.deck = deck
        self.produced = 0

    @classmethod
    def from_permutation(cls, permutation: Iterable[int]) -> "KeystreamGenerator":
        return cls(Deck(permutation))

    def __iter__(self):
        return self

    def __next__(self) -> int:
        value = next_keystream_value(self.deck)
        self.produced += 1
        return value

    def take(self, n: int) -> list[int]:
        """Return the next n keystream values."""
        return [next(self) for _ in range(n)]
