"""Tests covering hand classification."""

from __future__ import annotations

import pytest

from spread.cards import Card, Rank
from spread.hands import Hand, all_equal, classify_hand, is_flush, is_full_house, is_straight


def _cards(*codes: str) -> list[Card]:
    return [Card.from_code(code) for code in codes]


def _ranks(*labels: str) -> list[Rank]:
    return [Rank(label) for label in labels]


def test_all_equal() -> None:
    assert all_equal([])
    assert all_equal([0])
    assert all_equal([0, 0])
    assert all_equal([1, 1, 1])
    assert not all_equal([1, 0])
    assert not all_equal([1, 1, 0])


@pytest.mark.parametrize(
    ("hand", "points"),
    [
        (Hand.PAIR, 1),
        (Hand.STRAIGHT_THREE, 2),
        (Hand.THREE_OF_A_KIND, 3),
        (Hand.STRAIGHT_FIVE, 5),
        (Hand.FULL_HOUSE, 7),
        (Hand.FLUSH, 9),
        (Hand.FOUR_OF_A_KIND, 10),
        (Hand.STRAIGHT_FLUSH, 15),
    ],
)
def test_hand_points(hand: Hand, points: int) -> None:
    assert hand.points == points


@pytest.mark.parametrize(
    ("ranks", "expected"),
    [
        (("A", "2", "3"), True),
        (("9", "10", "J", "Q"), True),
        (("10", "J", "Q"), True),
        (("J", "Q", "K", "A"), True),
        (("Q", "K", "A"), True),
        (("10", "J", "Q", "K", "A"), True),
        (("A", "2", "3", "4", "5"), True),
        (("A", "2", "5"), False),
        (("K", "A", "2"), False),
        (("J", "Q", "K", "A", "2"), False),
        (("2", "4", "6"), False),
    ],
)
def test_straight_rule(ranks: tuple[str, ...], expected: bool) -> None:
    assert is_straight(_ranks(*ranks)) is expected


def test_straight_rule_ignores_input_order() -> None:
    assert is_straight(_ranks("A", "K", "Q"))
    assert is_straight(_ranks("3", "A", "2"))


def test_flush_and_full_house_helpers() -> None:
    assert is_flush(_cards("2H", "5H", "9H"))
    assert not is_flush(_cards("2H", "5H", "9S"))
    assert is_full_house(_cards("3C", "3D", "3H", "8S", "8C"))
    assert not is_full_house(_cards("3C", "3D", "8H", "8S", "9C"))


@pytest.mark.parametrize(
    "codes",
    [
        ("2S", "2C"),
        ("9H", "10S", "JD"),
        ("5C", "5D", "5H", "5S"),
        ("2H", "5H", "9H", "JH", "KH"),
    ],
)
def test_single_row_is_never_a_hand(codes: tuple[str, ...]) -> None:
    assert classify_hand(_cards(*codes), rows=1) is None
    assert classify_hand(_cards(*codes), rows=0) is None


@pytest.mark.parametrize(
    ("codes", "expected"),
    [
        (("2S", "2C"), Hand.PAIR),
        (("2S", "3S"), None),
        (("7C", "7D", "7H"), Hand.THREE_OF_A_KIND),
        (("9H", "10S", "JD"), Hand.STRAIGHT_THREE),
        (("AS", "2D", "3C"), Hand.STRAIGHT_THREE),
        (("QS", "KD", "AC"), Hand.STRAIGHT_THREE),
        (("KS", "AD", "2C"), None),
        (("AS", "2D", "5C"), None),
        (("5S", "5D", "6C"), Hand.STRAIGHT_THREE),
        (("5S", "5D", "6C", "7H", "8S"), Hand.STRAIGHT_FIVE),
        (("5C", "5D", "5H", "5S"), Hand.FOUR_OF_A_KIND),
        (("5C", "6D", "7H", "8S"), None),
        (("3C", "3D", "3H", "8S", "8C"), Hand.FULL_HOUSE),
        (("10S", "JH", "QD", "KC", "AS"), Hand.STRAIGHT_FIVE),
        (("AS", "2H", "3D", "4C", "5S"), Hand.STRAIGHT_FIVE),
        (("2H", "5H", "9H", "JH", "KH"), Hand.FLUSH),
        (("9H", "10H", "JH", "QH", "KH"), Hand.STRAIGHT_FLUSH),
        (("10S", "JS", "QS", "KS", "AS"), Hand.STRAIGHT_FLUSH),
        (("KS", "AH", "2D", "3C", "4S"), None),
        (("2S", "2H", "9D", "9C", "KS"), None),
    ],
)
def test_classify_hand(codes: tuple[str, ...], expected: Hand | None) -> None:
    assert classify_hand(_cards(*codes), rows=2) == expected


@pytest.mark.parametrize("count", [0, 1, 6])
def test_other_sizes_are_never_hands(count: int) -> None:
    cards = _cards("2S", "2H", "2D", "2C", "3S", "3H")[:count]
    assert classify_hand(cards, rows=3) is None


def test_full_house_checked_before_flush_and_straight() -> None:
    cards = _cards("QC", "QD", "QH", "KS", "KC")
    assert classify_hand(cards, rows=3) is Hand.FULL_HOUSE
