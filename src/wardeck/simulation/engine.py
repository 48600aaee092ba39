"""Turn resolution, including war cascades and forfeits."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from wardeck.simulation.state import Card, Player

logger = logging.getLogger(__name__)


class TurnOutcome(Enum):
    """How a single turn ended."""

    PLAYER_A_WINS = "player_a_wins"
    PLAYER_B_WINS = "player_b_wins"
    FORFEIT = "forfeit"  # A player could not continue a war; game ends


@dataclass
class TurnResult:
    """Everything that happened during one resolved turn."""

    outcome: TurnOutcome
    card_a: Card  # Final active card for player A
    card_b: Card
    play_pile: list[Card] = field(default_factory=list)
    wars: int = 0
    winner: Optional[Player] = None
    forfeited: list[Player] = field(default_factory=list)

    @property
    def cards_won(self) -> int:
        """Cards handed to the winner (0 if nobody collected the pile)."""
        return len(self.play_pile) if self.winner is not None else 0


def resolve_turn(player_a: Player, player_b: Player) -> TurnResult:
    """Resolve one turn between two players, mutating their decks.

    Both players must hold at least one card. A tie on rank starts a war:
    each player puts one card face down and one face up, repeating until the
    face-up cards differ or a player runs short and forfeits.
    """
    play_pile: list[Card] = []

    card_a = player_a.draw()
    card_b = player_b.draw()
    play_pile.extend((card_a, card_b))

    wars = 0
    while card_a.rank == card_b.rank:
        wars += 1
        logger.debug(f"War #{wars}: {card_a} vs {card_b}")

        forfeited = [p for p in (player_a, player_b) if not p.has_enough_cards_for_war()]
        if forfeited:
            return _forfeit(player_a, player_b, forfeited, card_a, card_b, play_pile, wars)

        # Face down, then the new face-up cards
        play_pile.append(player_a.draw())
        play_pile.append(player_b.draw())
        card_a = player_a.draw()
        card_b = player_b.draw()
        play_pile.extend((card_a, card_b))

    if card_a.rank > card_b.rank:
        winner, outcome = player_a, TurnOutcome.PLAYER_A_WINS
    else:
        winner, outcome = player_b, TurnOutcome.PLAYER_B_WINS

    winner.add_cards(play_pile)

    return TurnResult(
        outcome=outcome,
        card_a=card_a,
        card_b=card_b,
        play_pile=play_pile,
        wars=wars,
        winner=winner,
    )


def _forfeit(
    player_a: Player,
    player_b: Player,
    forfeited: list[Player],
    card_a: Card,
    card_b: Card,
    play_pile: list[Card],
    wars: int,
) -> TurnResult:
    """End the turn with every short-handed player losing their deck."""
    for player in forfeited:
        logger.debug(f"{player.name} forfeits with {player.card_count} card(s) left")
        player.discard_all()

    winner: Optional[Player] = None
    if len(forfeited) == 1:
        winner = player_b if forfeited[0] is player_a else player_a
        winner.add_cards(play_pile)

    return TurnResult(
        outcome=TurnOutcome.FORFEIT,
        card_a=card_a,
        card_b=card_b,
        play_pile=play_pile,
        wars=wars,
        winner=winner,
        forfeited=forfeited,
    )
