"""Rules and objectives of War, for the in-game help."""

from __future__ import annotations

from wardeck.playtest.display import SEPARATOR
from wardeck.simulation.state import MIN_CARDS_FOR_WAR


class RuleExplainer:
    """Explains the game rules."""

    def explain_rules(self) -> str:
        """Full rules text shown by the Help menu option."""
        lines: list[str] = [
            SEPARATOR,
            "War - Game Rules and Objectives",
            "Objective:",
            "\tBe the first player to obtain all 52 playing cards",
            "Game Rules:",
        ]
        lines.extend(f"\t{rule}" for rule in self._rules())
        lines.extend([
            "IMPORTANT!",
            "Most actions will be taken care of for you. All you have to do is issue "
            "a command from the menu and the game will handle the rest.",
            "Examples of this are shuffling and dealing the initial deck and drawing "
            "the next card to begin the next round.",
        ])
        return "\n".join(lines)

    def _rules(self) -> list[str]:
        return [
            "The deck is divided evenly between two players.",
            "Every turn, each player draws and plays the top card from their deck.",
            "The player who dealt the card with the higher value (Aces are high) wins the round.",
            "The winner collects all cards played that round and places them on the bottom of their deck.",
            "If the cards played by each player are of the same value, they are engaged in war!",
            "To engage in war, each player draws two cards from their deck and places them in the play area.",
            "The values of the last card drawn for each player are compared. The higher card wins.",
            "War repeats as many times as necessary if it results in yet another war.",
            "The winner of war collects all cards that have been played and places them on the bottom of their deck.",
            "There is one caveat to war, however.",
            f"To engage in war a player must have at least {MIN_CARDS_FOR_WAR} cards in their deck.",
            "A player without enough cards cannot partake in war and automatically forfeits the game.",
        ]
