"""Card and player representation."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator


# Minimum cards a player needs on hand to engage the opponent in war
MIN_CARDS_FOR_WAR = 2

# Completed turns between each player's deck reshuffle
SHUFFLE_INTERVAL = 25

MIN_RANK = 2
MAX_RANK = 14

# Rank labels for face cards (aces high)
FACE_CARD_LABELS = {11: "J", 12: "Q", 13: "K", 14: "A"}


class EmptyDeckError(RuntimeError):
    """Draw attempted on a player with no cards."""

    pass


class Suit(Enum):
    """Playing card suits."""

    CLUB = "Club"
    DIAMOND = "Diamond"
    HEART = "Heart"
    SPADE = "Spade"


@dataclass(frozen=True)
class Card:
    """Immutable playing card.

    Only ``rank`` matters for winning a round; ``suit`` is for display.
    """

    rank: int
    suit: Suit

    def __post_init__(self) -> None:
        if not MIN_RANK <= self.rank <= MAX_RANK:
            raise ValueError(f"Card rank must be {MIN_RANK}-{MAX_RANK}, got {self.rank}")

    @property
    def label(self) -> str:
        """Rank as shown to players: digits for 2-10, J/Q/K/A above."""
        return FACE_CARD_LABELS.get(self.rank, str(self.rank))

    def __str__(self) -> str:
        return f"{self.label} {self.suit.value}"


@dataclass
class Player:
    """A named player holding a FIFO deck of cards."""

    name: str
    deck: deque[Card] = field(default_factory=deque)

    def __len__(self) -> int:
        return len(self.deck)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.deck)

    @property
    def card_count(self) -> int:
        """Number of cards held, which is also the player's score."""
        return len(self.deck)

    @property
    def has_cards(self) -> bool:
        return bool(self.deck)

    def has_enough_cards_for_war(self) -> bool:
        return len(self.deck) >= MIN_CARDS_FOR_WAR

    def draw(self) -> Card:
        """Remove and return the card on top of the deck."""
        if not self.deck:
            raise EmptyDeckError(f"{self.name} has no cards to draw")
        return self.deck.popleft()

    def add_cards(self, cards: Iterable[Card]) -> None:
        """Place cards on the bottom of the deck, keeping their order."""
        self.deck.extend(cards)

    def reload(self, cards: Iterable[Card]) -> None:
        """Replace the deck with ``cards`` in the given order."""
        self.deck = deque(cards)

    def discard_all(self) -> list[Card]:
        """Empty the deck, returning what was in it."""
        discarded = list(self.deck)
        self.deck.clear()
        return discarded
