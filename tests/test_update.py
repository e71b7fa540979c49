"""Tests driving the game through its message-based update function."""

from __future__ import annotations

import random

import pytest

from spread import deck, rules, state
from spread.board import Position, Spread
from spread.cards import Card
from spread.errors import EmptyStack, HandMismatch, TrashExhausted
from spread.hands import Hand
from spread.update import MakeMove, NewGame, ToggleStack, update


def p(code: str) -> Position:
    return Position.from_code(code)


def _game(layout: dict[str, list[str]], *, trashes: int = 2) -> state.Game:
    spread = Spread()
    for code, cards in layout.items():
        for card in cards:
            spread.push(p(code), Card.from_code(card))
    return state.Game(
        spread=spread,
        bonus_card=Card.from_code("AS"),
        trashes=rules.TrashCounter(balance=trashes),
    )


def _place(cards: list[Card], card: Card, index: int) -> None:
    current = cards.index(card)
    cards[current], cards[index] = cards[index], cards[current]


def test_toggle_adds_and_removes() -> None:
    game = _game({"tl": ["2S"]})
    update(ToggleStack(p("tl")), game)
    assert game.selected == {p("tl")}
    update(ToggleStack(p("tl")), game)
    assert game.selected == set()


def test_toggle_on_empty_stack_is_ignored() -> None:
    game = _game({"tl": ["2S"]})
    update(ToggleStack(p("br")), game)
    assert game.selected == set()


def test_make_move_without_selection_is_ignored() -> None:
    game = _game({"tl": ["2S"]})
    assert update(MakeMove(), game) is None
    assert game.spread.card_count() == 1
    assert game.trashes.balance == 2


def test_trash_spends_a_charge() -> None:
    game = _game({"tl": ["4C", "2S"]})
    update(ToggleStack(p("tl")), game)

    move = update(MakeMove(), game)

    assert move == rules.TrashMove(p("tl"))
    assert game.spread.stack(p("tl")) == [Card.from_code("4C")]
    assert game.trashes.balance == 1
    assert game.selected == set()
    assert game.points == 0


def test_trash_with_no_charges_changes_nothing() -> None:
    game = _game({"tl": ["4C", "2S"]}, trashes=0)
    update(ToggleStack(p("tl")), game)

    assert update(MakeMove(), game) is None

    assert game.spread.stack(p("tl")) == [Card.from_code("4C"), Card.from_code("2S")]
    assert game.trashes.balance == 0
    assert game.selected == {p("tl")}


def test_unscoring_selection_changes_nothing() -> None:
    game = _game({"tl": ["2S"], "bl": ["3H"]})
    update(ToggleStack(p("tl")), game)
    update(ToggleStack(p("bl")), game)

    assert update(MakeMove(), game) is None
    assert game.spread.card_count() == 2
    assert game.selected == {p("tl"), p("bl")}


def test_playing_a_hand_scores_and_restores_a_charge() -> None:
    game = _game({"tl": ["4C", "2S"], "bl": ["2H"]}, trashes=0)
    update(ToggleStack(p("tl")), game)
    update(ToggleStack(p("bl")), game)

    move = update(MakeMove(), game)

    assert move == rules.PlayHandMove(Hand.PAIR)
    assert game.spread.stack(p("tl")) == [Card.from_code("4C")]
    assert game.spread.stack(p("bl")) == []
    assert game.trashes.balance == 1
    assert game.points == 1
    assert game.selected == set()


def test_straight_flush_scores_fifteen() -> None:
    layout = {"tl": ["9H"], "tc": ["10H"], "mr": ["JH"], "bl": ["QH"], "bc": ["KH"]}
    game = _game(layout)
    for code in layout:
        update(ToggleStack(p(code)), game)

    update(MakeMove(), game)

    assert game.points == 15
    assert game.trashes.balance == 2
    assert game.is_cleared()


def test_seeded_pair_of_aces_end_to_end() -> None:
    cards = deck.new_shuffled_deck(random.Random(2024))
    ace_spades = Card.from_code("AS")
    ace_hearts = Card.from_code("AH")
    # Stack tops sit at the cumulative pile sizes from the end of the deck.
    _place(cards, ace_spades, -8)
    _place(cards, ace_hearts, -31)
    game = state.deal_new_game(state.SpreadConfig(), cards)
    assert game.spread.top(p("tl")) == ace_spades
    assert game.spread.top(p("ml")) == ace_hearts

    game.trashes.spend_one()
    update(ToggleStack(p("tl")), game)
    update(ToggleStack(p("ml")), game)
    update(MakeMove(), game)

    assert len(game.spread.stack(p("tl"))) == 7
    assert len(game.spread.stack(p("ml"))) == 6
    assert ace_spades not in game.remaining_cards()
    assert ace_hearts not in game.remaining_cards()
    assert game.trashes.balance == 2
    assert game.selected == set()


def test_new_game_replaces_everything() -> None:
    game = state.new_game(rng=random.Random(9))
    update(ToggleStack(p("tl")), game)
    update(MakeMove(), game)
    update(ToggleStack(p("bc")), game)
    game.points = 6

    update(NewGame(), game)

    assert game.selected == set()
    assert game.trashes.balance == 2
    assert game.points == 0
    assert game.spread.card_count() == 51
    assert len({*game.spread.cards(), game.bonus_card}) == 52


def test_new_game_is_deterministic_for_a_seed() -> None:
    first = state.new_game(rng=random.Random(1))
    second = state.new_game(rng=random.Random(1))
    update(NewGame(), first)
    update(NewGame(), second)
    assert first.spread == second.spread
    assert first.bonus_card == second.bonus_card


def test_hand_mismatch_is_a_fault(monkeypatch: pytest.MonkeyPatch) -> None:
    game = _game({"tl": ["2S"], "bl": ["2H"]})
    game.selected.update({p("tl"), p("bl")})
    monkeypatch.setattr(state.Game, "selected_move", lambda self: rules.PlayHandMove(Hand.FLUSH))

    with pytest.raises(HandMismatch):
        update(MakeMove(), game)


def test_trash_without_charges_is_a_fault(monkeypatch: pytest.MonkeyPatch) -> None:
    game = _game({"tl": ["2S"]}, trashes=0)
    game.selected.add(p("tl"))
    monkeypatch.setattr(state.Game, "selected_move", lambda self: rules.TrashMove(p("tl")))

    with pytest.raises(TrashExhausted):
        update(MakeMove(), game)
    assert game.spread.card_count() == 1


def test_trash_from_empty_stack_keeps_the_charge(monkeypatch: pytest.MonkeyPatch) -> None:
    game = _game({"tl": ["2S"]})
    monkeypatch.setattr(state.Game, "selected_move", lambda self: rules.TrashMove(p("br")))

    with pytest.raises(EmptyStack):
        update(MakeMove(), game)
    assert game.trashes.balance == 2
    assert game.spread.card_count() == 1
