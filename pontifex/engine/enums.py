from enum import Enum


class Suit(int, Enum):
    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3


class Joker(int, Enum):
    """
    The two jokers are distinct tokens. Joker A advances one place per
    round, Joker B two.
    """
    A = 52
    B = 53
