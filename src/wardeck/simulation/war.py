"""War game loop: turn counting, periodic reshuffles and end-of-game."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Union

from wardeck.simulation.deck import create_decks, shuffle
from wardeck.simulation.engine import TurnResult, resolve_turn
from wardeck.simulation.state import Player, SHUFFLE_INTERVAL

logger = logging.getLogger(__name__)


class GameOverError(RuntimeError):
    """Turn requested after the game already ended."""

    pass


@dataclass(frozen=True)
class GameResult:
    """Final result of a game of War."""

    winner: Optional[Player]  # None for a draw; the leader if not finished
    turns: int
    scores: tuple[int, int]
    finished: bool = True  # False when stopped by a turn limit

    @property
    def is_draw(self) -> bool:
        return self.finished and self.winner is None


class WarGame:
    """A game of War between two named players.

    Decks are dealt at construction from a shuffled standard deck. Pass
    ``seed`` or an explicit ``rng`` for reproducible games.
    """

    def __init__(
        self,
        player1_name: str,
        player2_name: str,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        if not player1_name.strip() or not player2_name.strip():
            raise ValueError("Player names must not be empty")
        if player1_name.lower() == player2_name.lower():
            raise ValueError("Player names cannot be the same")

        self.rng = rng if rng is not None else random.Random(seed)
        self.player1 = Player(player1_name)
        self.player2 = Player(player2_name)
        self.total_turns = 0

        create_decks(self.player1, self.player2, self.rng)

    @property
    def players(self) -> tuple[Player, Player]:
        return (self.player1, self.player2)

    def play_one_turn(self) -> TurnResult:
        """Play the next turn, reshuffling decks every SHUFFLE_INTERVAL turns."""
        if self.is_game_over():
            raise GameOverError("Game is already over")

        self.total_turns += 1
        result = resolve_turn(self.player1, self.player2)

        if self.total_turns % SHUFFLE_INTERVAL == 0:
            self.reshuffle_decks()

        return result

    def reshuffle_decks(self) -> None:
        """Shuffle each player's remaining cards; contents and sizes are kept."""
        logger.debug(f"Reshuffling decks after turn {self.total_turns}")
        for player in self.players:
            cards = list(player.deck)
            shuffle(cards, self.rng)
            player.reload(cards)

    def is_game_over(self) -> bool:
        """Game ends once any player is out of cards."""
        return not self.player1.has_cards or not self.player2.has_cards

    def current_score(self) -> tuple[int, int]:
        return (self.player1.card_count, self.player2.card_count)

    def force_game_over(self) -> None:
        """End the game by discarding every card in play."""
        logger.info("Game ended early; discarding both decks")
        self.player1.discard_all()
        self.player2.discard_all()

    def run_to_completion(
        self,
        on_turn: Optional[Callable[[TurnResult], None]] = None,
        max_turns: Optional[int] = None,
    ) -> GameResult:
        """Play turns until the game is over.

        Args:
            on_turn: Called with each TurnResult (e.g. to print it)
            max_turns: Stop once total_turns reaches this, even if unfinished
        """
        while not self.is_game_over():
            if max_turns is not None and self.total_turns >= max_turns:
                logger.info(f"Stopping at turn limit {max_turns}")
                break
            result = self.play_one_turn()
            if on_turn is not None:
                on_turn(result)

        return self.compute_result()

    def compute_result(self) -> GameResult:
        """Player with more cards wins; equal counts are a draw."""
        p1_count, p2_count = self.current_score()

        winner: Optional[Player] = None
        if p1_count > p2_count:
            winner = self.player1
        elif p2_count > p1_count:
            winner = self.player2

        if self.is_game_over():
            logger.info(
                f"Game over after {self.total_turns} turns: "
                f"{winner.name if winner else 'draw'} ({p1_count}-{p2_count})"
            )

        return GameResult(
            winner=winner,
            turns=self.total_turns,
            scores=(p1_count, p2_count),
            finished=self.is_game_over(),
        )


def play_war_game(
    seed: int = 42,
    max_turns: Optional[int] = None,
    player1_name: str = "Player1",
    player2_name: str = "Player2",
) -> Dict[str, Union[int, str, None]]:
    """Play a complete War game without interaction and return results.

    ``winner`` is None for a draw and for a game stopped at ``max_turns``.
    """
    game = WarGame(player1_name, player2_name, seed=seed)
    result = game.run_to_completion(max_turns=max_turns)

    return {
        "winner": result.winner.name if result.winner and result.finished else None,
        "finished": result.finished,
        "turns": result.turns,
        "player1_cards": result.scores[0],
        "player2_cards": result.scores[1],
    }
