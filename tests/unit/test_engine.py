"""Tests for turn resolution."""

import pytest
from collections import deque
from itertools import cycle

from wardeck.simulation.engine import TurnOutcome, resolve_turn
from wardeck.simulation.state import Card, Player, Suit, EmptyDeckError


def make_player(name: str, ranks: list[int]) -> Player:
    """Helper to create a player whose deck has the given ranks, top first."""
    suits = cycle(Suit)
    return Player(name, deque(Card(rank, next(suits)) for rank in ranks))


def ranks(player: Player) -> list[int]:
    return [card.rank for card in player]


class TestSimpleTurn:
    """Turns decided by the first pair of cards."""

    def test_higher_card_wins(self):
        a = make_player("A", [10, 4])
        b = make_player("B", [3, 6])

        result = resolve_turn(a, b)

        assert result.outcome == TurnOutcome.PLAYER_A_WINS
        assert result.winner is a
        assert ranks(a) == [4, 10, 3]
        assert ranks(b) == [6]

    def test_player_b_wins(self):
        a = make_player("A", [2])
        b = make_player("B", [14])

        result = resolve_turn(a, b)

        assert result.outcome == TurnOutcome.PLAYER_B_WINS
        assert ranks(b) == [2, 14]
        assert not a.has_cards

    def test_pile_order_is_a_then_b(self):
        """Winner receives cards in the order they were played."""
        a = make_player("A", [5])
        b = make_player("B", [9])

        result = resolve_turn(a, b)

        assert [c.rank for c in result.play_pile] == [5, 9]
        assert ranks(b) == [5, 9]

    def test_total_cards_conserved(self):
        a = make_player("A", [8, 2, 3])
        b = make_player("B", [7, 11])

        resolve_turn(a, b)

        assert len(a) == 4
        assert len(b) == 1
        assert len(a) + len(b) == 5

    def test_suit_does_not_break_ties(self):
        """Equal ranks start a war even with different suits."""
        a = Player("A", deque([Card(9, Suit.SPADE), Card(2, Suit.CLUB), Card(14, Suit.CLUB)]))
        b = Player("B", deque([Card(9, Suit.CLUB), Card(2, Suit.HEART), Card(3, Suit.HEART)]))

        result = resolve_turn(a, b)

        assert result.wars == 1
        assert result.winner is a

    def test_draw_from_empty_deck_raises(self):
        a = make_player("A", [])
        b = make_player("B", [5])

        with pytest.raises(EmptyDeckError):
            resolve_turn(a, b)


class TestWar:
    """Tie resolution."""

    def test_war_cascade_final_cards_decide(self):
        """Drawn ranks 7,7,7,7,3,9: the 3 vs 9 comparison wins all six cards."""
        a = make_player("A", [7, 7, 3])
        b = make_player("B", [7, 7, 9])

        result = resolve_turn(a, b)

        assert result.outcome == TurnOutcome.PLAYER_B_WINS
        assert result.wars == 1
        assert [c.rank for c in result.play_pile] == [7, 7, 7, 7, 3, 9]
        assert result.card_a.rank == 3
        assert result.card_b.rank == 9
        assert len(b) == 6
        assert not a.has_cards

    def test_face_down_cards_are_not_compared(self):
        """A high face-down card does not win the war."""
        a = make_player("A", [4, 14, 2])
        b = make_player("B", [4, 2, 8])

        result = resolve_turn(a, b)

        assert result.winner is b

    def test_war_of_wars(self):
        """Repeated ties keep going until the face-up cards differ."""
        a = make_player("A", [7, 2, 7, 4, 10, 13])
        b = make_player("B", [7, 3, 7, 5, 6])

        result = resolve_turn(a, b)

        assert result.wars == 2
        assert result.outcome == TurnOutcome.PLAYER_A_WINS
        assert result.cards_won == 10
        assert ranks(a) == [13, 7, 7, 2, 3, 7, 7, 4, 5, 10, 6]
        assert not b.has_cards

    def test_exactly_two_cards_is_enough_for_war(self):
        a = make_player("A", [4, 2, 9])
        b = make_player("B", [4, 3, 8])

        result = resolve_turn(a, b)

        assert result.outcome == TurnOutcome.PLAYER_A_WINS
        assert len(a) == 6


class TestForfeit:
    """Players who run short during a war."""

    def test_player_with_one_card_forfeits(self):
        """One card left at war: deck discarded, opponent collects the pile."""
        a = make_player("A", [5, 8])
        b = make_player("B", [5, 3, 4])

        result = resolve_turn(a, b)

        assert result.outcome == TurnOutcome.FORFEIT
        assert result.forfeited == [a]
        assert result.winner is b
        assert not a.has_cards
        assert ranks(b) == [3, 4, 5, 5]

    def test_player_out_of_cards_forfeits(self):
        a = make_player("A", [5, 9, 2])
        b = make_player("B", [5])

        result = resolve_turn(a, b)

        assert result.forfeited == [b]
        assert result.winner is a
        assert ranks(a) == [9, 2, 5, 5]

    def test_forfeit_mid_cascade(self):
        """Pile from earlier wars goes to the opponent too."""
        a = make_player("A", [6, 2, 6, 12])
        b = make_player("B", [6, 3, 6, 9, 10])

        result = resolve_turn(a, b)

        assert result.wars == 2
        assert result.forfeited == [a]
        assert len(result.play_pile) == 6
        assert ranks(b) == [9, 10, 6, 6, 2, 3, 6, 6]

    def test_both_players_forfeit(self):
        """Both short: both decks and the pile are discarded."""
        a = make_player("A", [5, 2])
        b = make_player("B", [5])

        result = resolve_turn(a, b)

        assert result.outcome == TurnOutcome.FORFEIT
        assert result.forfeited == [a, b]
        assert result.winner is None
        assert result.cards_won == 0
        assert not a.has_cards
        assert not b.has_cards
