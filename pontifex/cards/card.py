from typing import Iterable, Sequence

from pontifex.engine.enums import Joker, Suit


class Card:
    """
    Static class that handles card token encoding.

    A card is a plain int in [0, 53]:

        token = suit * 13 + (rank - 1)

    with suits ordered Clubs, Diamonds, Hearts, Spades and ranks 1 (ace)
    through 13 (king). Tokens 52 and 53 are the two jokers. Cards are
    written as two characters, rank then suit ("AC", "TD", "KS"), and the
    jokers as "JA" and "JB".
    """

    STR_RANKS = 'A23456789TJQK'
    STR_SUITS = 'CDHS'
    CHAR_RANK_TO_INT_RANK = dict(zip(list(STR_RANKS), range(1, 14)))
    CHAR_SUIT_TO_INT_SUIT = dict(zip(list(STR_SUITS), [s.value for s in Suit]))

    JOKER_STRS = {
        'JA': Joker.A.value,
        'JB': Joker.B.value,
    }

    DECK_SIZE = 54

    @staticmethod
    def new(string: str) -> int:
        """
        Converts Card string to token.

        Raises KeyError for an unknown rank, suit or joker name.
        """
        string = string.strip().upper()
        if string in Card.JOKER_STRS:
            return Card.JOKER_STRS[string]
        if len(string) != 2:
            raise KeyError(string)

        rank_char, suit_char = string[0], string[1]
        rank = Card.CHAR_RANK_TO_INT_RANK[rank_char]
        suit = Card.CHAR_SUIT_TO_INT_SUIT[suit_char]
        return suit * 13 + (rank - 1)

    @staticmethod
    def int_to_str(card: int) -> str:
        if card == Joker.A.value:
            return 'JA'
        if card == Joker.B.value:
            return 'JB'
        return Card.STR_RANKS[Card.get_rank(card) - 1] + Card.STR_SUITS[Card.get_suit(card)]

    @staticmethod
    def get_suit(card: int) -> int:
        return card // 13

    @staticmethod
    def get_rank(card: int) -> int:
        return card % 13 + 1

    @staticmethod
    def is_joker(card: int) -> bool:
        return card >= Joker.A.value

    @staticmethod
    def count_value(card: int) -> int:
        """
        Classic face value used for cuts and output selection.

        Clubs count 1-13, diamonds 14-26, hearts 27-39, spades 40-52 and
        either joker 53.
        """
        return min(card, Joker.A.value) + 1

    @staticmethod
    def hand_to_binary(card_strs: Iterable[str]) -> list[int]:
        return [Card.new(c) for c in card_strs]

    @staticmethod
    def print_pretty_cards(card_ints: Sequence[int]) -> str:
        return ' '.join(Card.int_to_str(int(c)) for c in card_ints)
