import pytest

from pontifex.cards.deck import Deck
from pontifex.engine.steps import run_steps, step1, step2, step3, step4, step5


@pytest.mark.parametrize(
    "deck,expected",
    [
        ([0, 1, 52, 2, 3, 4, 5], [0, 1, 2, 52, 3, 4, 5]),
        ([0, 1, 2, 3, 52], [0, 52, 1, 2, 3]),
        ([52, 0, 1, 2, 3, 4, 5], [0, 52, 1, 2, 3, 4, 5]),
    ],
)
def test_step1_moves_joker_a_down_one(deck, expected):
    assert step1(deck).tolist() == expected


@pytest.mark.parametrize(
    "deck,expected",
    [
        ([0, 1, 2, 53, 3, 4, 5, 6], [0, 1, 2, 3, 4, 53, 5, 6]),
        ([0, 1, 2, 3, 4, 53], [0, 1, 53, 2, 3, 4]),
        ([0, 1, 2, 3, 53, 4], [0, 53, 1, 2, 3, 4]),
        ([53, 0, 1, 2, 3], [0, 1, 53, 2, 3]),
    ],
)
def test_step2_moves_joker_b_down_two(deck, expected):
    assert step2(deck).tolist() == expected


@pytest.mark.parametrize(
    "deck,expected",
    [
        ([0, 1, 2, 52, 3, 4, 5, 53, 6, 7], [6, 7, 52, 3, 4, 5, 53, 0, 1, 2]),
        ([0, 1, 2, 53, 3, 4, 5, 52, 6, 7], [6, 7, 53, 3, 4, 5, 52, 0, 1, 2]),
        ([52, 0, 1, 53], [52, 0, 1, 53]),
        ([53, 0, 1, 52, 2, 3], [2, 3, 53, 0, 1, 52]),
        ([0, 1, 53, 2, 52], [53, 2, 52, 0, 1]),
        ([0, 52, 53, 1, 2], [1, 2, 52, 53, 0]),
        ([0, 53, 52, 1], [1, 53, 52, 0]),
    ],
)
def test_step3_triple_cut(deck, expected):
    assert step3(deck).tolist() == expected


@pytest.mark.parametrize(
    "deck,expected",
    [
        (
            [7, 6, 53, 52, 1, 30, 31, 32, 4, 5, 11, 13, 21, 10, 8],
            [5, 11, 13, 21, 10, 7, 6, 53, 52, 1, 30, 31, 32, 4, 8],
        ),
        ([5, 6, 7, 8, 0], [6, 7, 8, 5, 0]),
        ([9, 8, 7, 6, 5, 4, 3], [5, 4, 9, 8, 7, 6, 3]),
        ([3, 1, 2, 53], [3, 1, 2, 53]),
    ],
)
def test_step4_count_cut(deck, expected):
    assert step4(deck).tolist() == expected


def test_step4_joker_on_bottom_leaves_full_deck_unchanged(sorted_deck):
    cards = sorted_deck.tolist()
    cards.remove(53)
    cards.append(53)
    assert step4(cards).tolist() == cards


def test_step4_keeps_bottom_card_fixed(shuffled_deck):
    deck = shuffled_deck(3)
    result = step4(deck.cards)
    assert result[-1] == deck.bottom()


def test_step5_reads_card_at_count_value_of_top():
    assert step5([2, 10, 11, 12, 13]) == 12
    assert step5([0, 40, 41]) == 40


def test_step5_joker_on_top_counts_fifty_three():
    cards = [53] + list(range(53))
    assert step5(cards) == cards[53]


def test_step5_does_not_mutate():
    cards = [2, 10, 11, 12, 13]
    step5(cards)
    assert cards == [2, 10, 11, 12, 13]


def test_steps_return_new_arrays(sorted_deck):
    before = sorted_deck.tolist()
    for step in (step1, step2, step3, step4):
        step(sorted_deck.cards)
    assert sorted_deck.tolist() == before


def test_run_steps_first_round_from_sorted_deck(sorted_deck):
    result = run_steps(sorted_deck.cards)
    assert result.tolist() == list(range(1, 54)) + [0]
    assert step5(result) == 3


@pytest.mark.parametrize("seed", range(10))
def test_steps_preserve_permutation(shuffled_deck, seed):
    cards = shuffled_deck(seed).cards
    for _ in range(25):
        for step in (step1, step2, step3, step4):
            cards = step(cards)
            assert len(cards) == 54
            assert sorted(cards.tolist()) == list(range(54))
    Deck(cards)
