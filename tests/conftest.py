import random

import pytest

from pontifex.cards.deck import Deck


@pytest.fixture
def sorted_deck():
    return Deck.sorted()


@pytest.fixture
def shuffled_deck():
    def _make(seed: int) -> Deck:
        tokens = Deck.GetFullDeck()
        random.Random(seed).shuffle(tokens)
        return Deck(tokens)
    return _make
