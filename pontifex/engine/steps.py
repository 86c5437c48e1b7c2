"""
Deck Steps - The five Solitaire deck transformations.

Each step is a pure function: it takes a sequence of card tokens and
returns a new array (steps 1-4) or a single token (step 5). Nothing here
mutates its input or logs.

Positions are taken relative to the length of the sequence, so the bottom
card is always the last one. For a full 54 card deck this is position 53.
"""

from typing import Sequence

import numpy as np

from pontifex.cards.card import Card

from .enums import Joker

JOKER_A = Joker.A.value
JOKER_B = Joker.B.value


def _as_array(deck: Sequence[int]) -> np.ndarray:
    return np.asarray(deck, dtype=np.int64)


def _position(cards: np.ndarray, card: int) -> int:
    return int(np.flatnonzero(cards == card)[0])


def step1(deck: Sequence[int]) -> np.ndarray:
    """
    Move Joker A down one card.

    From the bottom it wraps to just below the top card.
    """
    cards = _as_array(deck)
    bottom = len(cards) - 1
    i = _position(cards, JOKER_A)

    if i == bottom:
        rest = np.delete(cards, i)
        return np.insert(rest, 1, JOKER_A)

    out = cards.copy()
    out[i], out[i + 1] = out[i + 1], out[i]
    return out


def step2(deck: Sequence[int]) -> np.ndarray:
    """
    Move Joker B down two cards.

    From the bottom it lands below the second card; from one above the
    bottom it lands below the top card.
    """
    cards = _as_array(deck)
    bottom = len(cards) - 1
    i = _position(cards, JOKER_B)
    rest = np.delete(cards, i)

    if i == bottom:
        return np.insert(rest, 2, JOKER_B)
    if i == bottom - 1:
        return np.insert(rest, 1, JOKER_B)
    return np.insert(rest, i + 2, JOKER_B)


def step3(deck: Sequence[int]) -> np.ndarray:
    """
    Triple cut: swap the cards above the first joker with the cards below
    the second. The jokers and everything between them stay in order.
    """
    cards = _as_array(deck)
    a = _position(cards, JOKER_A)
    b = _position(cards, JOKER_B)
    first, last = min(a, b), max(a, b)

    before = cards[:first]
    middle = cards[first:last + 1]
    after = cards[last + 1:]
    return np.concatenate([after, middle, before])


def step4(deck: Sequence[int]) -> np.ndarray:
    """
    Count cut: move the top count_value(bottom) cards to sit just above the
    bottom card. The bottom card never moves.
    """
    cards = _as_array(deck)
    bottom = len(cards) - 1
    count = min(Card.count_value(int(cards[bottom])), bottom)

    return np.concatenate([cards[count:bottom], cards[:count], cards[bottom:]])


def step5(deck: Sequence[int]) -> int:
    """
    Output card: count down count_value(top) cards and return the card
    found there. Read only.
    """
    cards = _as_array(deck)
    count = Card.count_value(int(cards[0]))
    return int(cards[count])


STEPS = (step1, step2, step3, step4)


def run_steps(deck: Sequence[int]) -> np.ndarray:
    """Apply steps 1-4 in order and return the resulting deck order."""
    cards = _as_array(deck)
    for step in STEPS:
        cards = step(cards)
    return cards
