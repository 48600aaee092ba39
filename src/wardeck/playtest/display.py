"""Terminal display for turns, scores, menus and results."""

from __future__ import annotations

from wardeck.simulation.engine import TurnOutcome, TurnResult
from wardeck.simulation.war import GameResult, WarGame


# Inserted before each block of output to keep a visual hierarchy
SEPARATOR = "-" * 45

BANNER = "\n".join([
    "+-------------------------------------------+",
    "|                    War                    |",
    "+-------------------------------------------+",
])

# Menu key -> description, in display order
MENU_OPTIONS = {
    "n": "Next turn",
    "v": "View score",
    "f": "Finish game in batch mode",
    "c": "Clear screen",
    "h": "Help",
    "q": "Quit",
}


def render_menu() -> str:
    """Render the in-game menu."""
    lines = [SEPARATOR, "Enter your choice: "]
    for key, description in MENU_OPTIONS.items():
        lines.append(f"{key.upper()}) {description}")
    return "\n".join(lines)


def invalid_choice_message() -> str:
    keys = ", ".join(f'"{k}"' for k in list(MENU_OPTIONS)[:-1])
    return f'Invalid input, please enter {keys}, or "{list(MENU_OPTIONS)[-1]}".'


class TurnRenderer:
    """Renders the outcome of turns and games."""

    def render_turn(self, game: WarGame, result: TurnResult) -> str:
        """Describe a resolved turn: wars, forfeits, round winner, cards played."""
        lines: list[str] = []
        p1, p2 = game.player1, game.player2

        for _ in range(result.wars):
            lines.append(SEPARATOR)
            lines.append("WAR!!!")

        if result.outcome is TurnOutcome.FORFEIT:
            for player in result.forfeited:
                lines.append(f"{player.name} doesn't have enough cards for war.")
            if result.winner is not None:
                lines.append(f"{result.winner.name} wins! (+{result.cards_won} cards)")
        else:
            lines.append(SEPARATOR)
            lines.append(f"{result.winner.name} wins the round! (+{result.cards_won} cards)")

        lines.append(f"{p1.name} played: {result.card_a}")
        lines.append(f"{p2.name} played: {result.card_b}")
        lines.append(f"Turns taken: {game.total_turns}")

        return "\n".join(lines)

    def render_score(self, game: WarGame) -> str:
        """Show how many cards each player holds."""
        lines = [SEPARATOR]
        for player in game.players:
            lines.append(f"{player.name} has {player.card_count} cards.")
        return "\n".join(lines)

    def render_result(self, result: GameResult) -> str:
        if not result.finished:
            p1_count, p2_count = result.scores
            return "\n".join([
                SEPARATOR,
                f"Turn limit reached after {result.turns} turns.",
                f"Cards held: {p1_count} - {p2_count}",
            ])

        if result.is_draw:
            return "\n".join([SEPARATOR, "GAME ENDED! IT'S A DRAW!"])

        return "\n".join([
            SEPARATOR,
            f"{result.winner.name} WINS!",
            f"{result.turns} turns taken",
        ])
