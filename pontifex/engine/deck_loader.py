import json
from pathlib import Path
from typing import Any

from pontifex.cards.deck import Deck
from pontifex.cards.keyed_deck import KeyedDeck


def load_deck_config(path: str | Path) -> dict[str, Any]:
    """
    Load and validate a deck file.

    A deck file is a JSON object with a "deck" list of 54 entries, either
    all integer tokens or all card names:

        {"name": "my key", "deck": ["AC", "2C", ..., "JA", "JB"]}

    Args:
        path: Path to JSON deck file

    Returns:
        The parsed config dict
    """
    with open(Path(path)) as f:
        raw = json.load(f)
    validate_deck_config(raw)
    return raw


def load_deck(path: str | Path) -> Deck:
    """
    Build the Deck described by a deck file.

    Raises:
        ValueError: If the file is malformed
        InvalidDeck: If the entries are not a permutation of the 54 cards
    """
    return deck_from_config(load_deck_config(path))


def deck_from_config(config: dict[str, Any]) -> Deck:
    entries = config["deck"]
    if all(isinstance(e, str) for e in entries):
        return KeyedDeck(entries)
    return Deck(entries)


def validate_deck_config(config: Any) -> bool:
    """
    Validate that a deck config has the expected structure.

    Permutation checks are left to Deck itself.

    Returns:
        True if valid, raises ValueError if invalid
    """
    if not isinstance(config, dict):
        raise ValueError("Deck config must be a JSON object")

    if "deck" not in config:
        raise ValueError("Deck config missing required field: deck")

    entries = config["deck"]
    if not isinstance(entries, list):
        raise ValueError("deck must be a list")

    all_ints = all(isinstance(e, int) and not isinstance(e, bool) for e in entries)
    all_strs = all(isinstance(e, str) for e in entries)
    if not (all_ints or all_strs):
        raise ValueError("deck entries must be all integers or all card names")

    return True
