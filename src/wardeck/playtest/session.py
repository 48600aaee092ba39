"""Interactive War session driven by the text menu."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Optional

import click

from wardeck.playtest.display import (
    BANNER, TurnRenderer, invalid_choice_message, render_menu,
)
from wardeck.playtest.input import HumanPlayer
from wardeck.playtest.rules import RuleExplainer
from wardeck.simulation.engine import TurnResult
from wardeck.simulation.war import GameResult, WarGame

logger = logging.getLogger(__name__)


@dataclass
class SessionConfig:
    """Configuration for a War session."""

    seed: Optional[int] = None
    player1_name: Optional[str] = None  # Prompted when not given
    player2_name: Optional[str] = None
    batch: bool = False  # Skip the menu and play straight to the end
    show_rules: bool = False
    max_turns: Optional[int] = None  # Only applies to batch play

    def __post_init__(self):
        """Generate seed if not provided."""
        if self.seed is None:
            self.seed = random.randint(0, 2**32 - 1)


class PlaytestSession:
    """Runs one game of War through the in-game menu."""

    def __init__(
        self,
        config: SessionConfig,
        clear_fn: Callable[[], None] = click.clear,
    ):
        self.config = config
        self.seed = config.seed
        self.clear_fn = clear_fn

        self.renderer = TurnRenderer()
        self.explainer = RuleExplainer()
        self.human_input = HumanPlayer()

        self.game: Optional[WarGame] = None

    def prompt_player_names(
        self,
        output_fn: Callable[[str], None] = print,
        player1_name: Optional[str] = None,
        player2_name: Optional[str] = None,
    ) -> Optional[tuple[str, str]]:
        """Ask for the missing names until they are valid and distinct.

        Names already given are kept; only missing ones are prompted for.

        Returns:
            (player1_name, player2_name), or None if the user quit
        """
        given = (player1_name, player2_name)
        if all(given):
            return player1_name, player2_name

        while True:
            names: list[str] = []
            for number, name in enumerate(given, start=1):
                if not name:
                    name = self._prompt_one_name(number, output_fn)
                    if name is None:
                        return None
                names.append(name)

            if names[0].lower() == names[1].lower():
                output_fn("Player names cannot be the same. Try again.")
                continue
            return names[0], names[1]

    def _prompt_one_name(self, number: int, output_fn: Callable[[str], None]) -> Optional[str]:
        while True:
            result = self.human_input.get_name(f"Enter name for Player {number}:\n> ")
            if result.quit:
                return None
            if result.error:
                output_fn(result.error)
                continue
            return result.value

    def start_game(self, player1_name: str, player2_name: str) -> WarGame:
        self.game = WarGame(player1_name, player2_name, seed=self.seed)
        logger.debug(f"Started game {player1_name} vs {player2_name} with seed {self.seed}")
        return self.game

    def run(self, output_fn: Callable[[str], None] = print) -> Optional[GameResult]:
        """Run the session.

        Args:
            output_fn: Function to output text (default: print)

        Returns:
            GameResult, or None if the user quit before the game started
        """
        output_fn(BANNER)

        names = self.prompt_player_names(
            output_fn, self.config.player1_name, self.config.player2_name,
        )
        if names is None:
            return None

        game = self.start_game(*names)

        if self.config.show_rules:
            output_fn(self.explainer.explain_rules())

        if self.config.batch:
            result = game.run_to_completion(
                on_turn=lambda turn: self._show_turn(turn, output_fn),
                max_turns=self.config.max_turns,
            )
        else:
            result = self._menu_loop(game, output_fn)

        output_fn(self.renderer.render_result(result))
        return result

    def _menu_loop(self, game: WarGame, output_fn: Callable[[str], None]) -> GameResult:
        while not game.is_game_over():
            output_fn(render_menu())
            choice = self.human_input.get_choice()

            if choice.quit:
                game.force_game_over()
                break
            if choice.error:
                output_fn(invalid_choice_message())
                continue

            self.handle_choice(choice.value, output_fn)

        return game.compute_result()

    def handle_choice(self, choice: str, output_fn: Callable[[str], None] = print) -> None:
        """Apply one menu choice to the current game."""
        game = self.game
        if game is None:
            raise RuntimeError("No game in progress")

        if choice == "n":
            self._show_turn(game.play_one_turn(), output_fn)
        elif choice == "v":
            output_fn(self.renderer.render_score(game))
        elif choice == "f":
            game.run_to_completion(on_turn=lambda turn: self._show_turn(turn, output_fn))
        elif choice == "c":
            self.clear_fn()
        elif choice == "h":
            output_fn(self.explainer.explain_rules())
        elif choice == "q":
            game.force_game_over()
        else:
            output_fn(invalid_choice_message())

    def _show_turn(self, result: TurnResult, output_fn: Callable[[str], None]) -> None:
        if self.game is not None:
            output_fn(self.renderer.render_turn(self.game, result))
