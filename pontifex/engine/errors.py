"""
Errors raised by deck construction and the letter codec.

Both are configuration/input errors reported straight to the caller.
Nothing in the cipher retries or recovers from them.
"""


class InvalidDeck(ValueError):
    """Initial deck is not a permutation of the tokens 0..53."""


class InvalidLetter(ValueError):
    """Text contains a character outside A-Z."""

    def __init__(self, char: str, position: int | None = None):
        self.char = char
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Invalid letter {char!r}{where}: expected A-Z")
