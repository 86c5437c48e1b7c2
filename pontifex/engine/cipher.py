"""
Solitaire cipher - public entry points.

Module-level functions mirror the plain library surface: build a deck,
draw keystream values from it, and encrypt or decrypt A-Z text against
any keystream source. SolitaireCipher wraps one deck and one keystream for
a whole session.
"""

from typing import Iterable

from pontifex.cards.deck import Deck
from pontifex.cards.keyed_deck import KeyedDeck

from . import letters
from .keystream import KeystreamGenerator, next_keystream_value
from .logger import get_logger

logger = get_logger(__name__)

__all__ = [
    "SolitaireCipher",
    "decrypt",
    "encrypt",
    "new_deck",
    "new_sorted_deck",
    "next_keystream_value",
]


def new_sorted_deck() -> Deck:
    return Deck.sorted()


def new_deck(permutation: Iterable[int]) -> Deck:
    """Deck from 54 distinct tokens in [0, 53]; raises InvalidDeck otherwise."""
    return Deck(permutation)


def encrypt(plaintext: str, keystream: Iterable[int]) -> str:
    return letters.encrypt(plaintext, keystream)


def decrypt(ciphertext: str, keystream: Iterable[int]) -> str:
    return letters.decrypt(ciphertext, keystream)


class SolitaireCipher:
    """
    One cipher session.

    The session takes a private copy of the key deck, so the caller's deck
    is never advanced. Successive encrypt/decrypt calls continue the same
    keystream, as if all the text had been processed in one message.
    """

    def __init__(self, deck: Deck):
        self.key = deck.copy()
        self.keystream = KeystreamGenerator(deck.copy())

    @classmethod
    def from_cards(cls, card_text_sequence: Iterable[str]) -> "SolitaireCipher":
        return cls(KeyedDeck(card_text_sequence))

    @classmethod
    def sorted(cls) -> "SolitaireCipher":
        return cls(Deck.sorted())

    def encrypt(self, plaintext: str) -> str:
        ciphertext = letters.encrypt(plaintext, self.keystream)
        logger.debug("Encrypted %d letters, keystream position %d", len(plaintext), self.keystream.produced)
        return ciphertext

    def decrypt(self, ciphertext: str) -> str:
        plaintext = letters.decrypt(ciphertext, self.keystream)
        logger.debug("Decrypted %d letters, keystream position %d", len(ciphertext), self.keystream.produced)
        return plaintext

    def reset(self) -> None:
        """Restart the keystream from the key deck."""
        self.keystream = KeystreamGenerator(self.key.copy())
