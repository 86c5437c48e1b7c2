"""
Letter codec: uppercase letters as zero-based indices, and the mod 26
combination of letters with keystream values.

Keystream values are used raw (0..51), not reduced beforehand.
"""

from itertools import islice
from typing import Iterable

from .errors import InvalidLetter

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_LETTER_TO_INDEX = {c: i for i, c in enumerate(ALPHABET)}


def letter_to_index(letter: str) -> int:
    """'A'..'Z' -> 0..25. Anything else raises InvalidLetter."""
    try:
        return _LETTER_TO_INDEX[letter]
    except (KeyError, TypeError):
        raise InvalidLetter(letter) from None


def index_to_letter(index: int) -> str:
    """
    Inverse of letter_to_index. Indices wrap around the alphabet, so 26
    (produced by encrypt_letter when (p + k) mod 26 == 25) is 'A'.
    """
    return ALPHABET[index % 26]


def to_indices(text: str) -> list[int]:
    """Convert a whole string, reporting the position of a bad character."""
    indices = []
    for position, letter in enumerate(text):
        try:
            indices.append(letter_to_index(letter))
        except InvalidLetter:
            raise InvalidLetter(letter, position) from None
    return indices


def encrypt_letter(p: int, k: int) -> str:
    return index_to_letter(((p + k) % 26) + 1)


def decrypt_letter(c: int, k: int) -> str:
    return index_to_letter((c - k - 1) % 26)


def _take_keystream(keystream: Iterable[int], n: int) -> list[int]:
    values = list(islice(iter(keystream), n))
    if len(values) < n:
        raise ValueError(f"Keystream too short: need {n} values, got {len(values)}")
    return values


def encrypt(plaintext: str, keystream: Iterable[int]) -> str:
    """
    Encrypt plaintext (A-Z only) with one keystream value per letter.

    Only len(plaintext) values are drawn from keystream. The text is
    checked before any value is drawn.
    """
    letters = to_indices(plaintext)
    values = _take_keystream(keystream, len(letters))
    return "".join(encrypt_letter(p, k) for p, k in zip(letters, values))


def decrypt(ciphertext: str, keystream: Iterable[int]) -> str:
    """Inverse of encrypt, given the same keystream."""
    letters = to_indices(ciphertext)
    values = _take_keystream(keystream, len(letters))
    return "".join(decrypt_letter(c, k) for c, k in zip(letters, values))
