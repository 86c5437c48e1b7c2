from typing import Iterable

from pontifex.engine.errors import InvalidDeck

from .card import Card
from .deck import Deck


class KeyedDeck(Deck):
    """
    Deck built from a written key: 54 card names in deck order, top first.
    Names use Card's notation ("AC", "TD", "JA", "JB").
    """

    def __init__(self, card_text_sequence: Iterable[str]):
        names = list(card_text_sequence)
        try:
            tokens = Card.hand_to_binary(names)
        except KeyError as e:
            raise InvalidDeck(f"Unknown card name in key: {e}") from e
        super().__init__(tokens)
        self.names = names

    def copy(self) -> Deck:
        return Deck(self.cards.copy())
