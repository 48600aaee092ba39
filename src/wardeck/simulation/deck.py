"""Standard 52-card deck generation, shuffling and dealing."""

from __future__ import annotations

import random
from typing import MutableSequence

from wardeck.simulation.state import Card, Player, Suit, MIN_RANK, MAX_RANK


def generate_standard_deck() -> list[Card]:
    """Create all 52 cards in order, rank-major then suit."""
    cards: list[Card] = []
    for rank in range(MIN_RANK, MAX_RANK + 1):
        for suit in Suit:
            cards.append(Card(rank=rank, suit=suit))
    return cards


def shuffle(cards: MutableSequence[Card], rng: random.Random) -> None:
    """Shuffle ``cards`` in place (Fisher-Yates).

    Each position i is swapped with a uniformly chosen position in [i, n-1].
    """
    n = len(cards)
    for i in range(n):
        r = i + rng.randrange(n - i)
        cards[i], cards[r] = cards[r], cards[i]


def deal_alternating(cards: list[Card], player_a: Player, player_b: Player) -> None:
    """Deal even indices to ``player_a`` and odd indices to ``player_b``."""
    player_a.add_cards(cards[0::2])
    player_b.add_cards(cards[1::2])


def create_decks(player_a: Player, player_b: Player, rng: random.Random) -> None:
    """Give both players a fresh half of a shuffled standard deck."""
    player_a.discard_all()
    player_b.discard_all()

    cards = generate_standard_deck()
    shuffle(cards, rng)
    deal_alternating(cards, player_a, player_b)
