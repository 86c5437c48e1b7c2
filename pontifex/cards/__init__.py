from .card import Card
from .deck import Deck
from .keyed_deck import KeyedDeck

__all__ = ["Card", "Deck", "KeyedDeck"]
