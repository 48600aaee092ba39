"""Human input handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


# Non-alphanumeric characters (and space) disallowed in player names
DEFAULT_INVALID_CHARACTERS = (
    "!", "@", "#", "$", "%", "^", "&", "*", "(", ")", "_", "+", "-", "[", "]",
    "{", "}", "\\", "'", '"', ";", ":", "/", "?", ".", "<", ">", ",", "|", " ",
)

MIN_NAME_LENGTH = 1
MAX_NAME_LENGTH = 15


@dataclass
class InputResult:
    """Result of human input."""

    value: Optional[str] = None
    quit: bool = False
    error: Optional[str] = None


def validate_name(name: str, invalid_chars: tuple[str, ...] = DEFAULT_INVALID_CHARACTERS) -> Optional[str]:
    """Check a player name.

    Returns:
        An error message, or None if the name is acceptable
    """
    if any(c.isspace() or c in invalid_chars for c in name):
        shown = " ".join(c for c in invalid_chars if c != " ")
        return (
            "Whitespace and the following characters are not allowed: \n"
            f"{shown}\n"
            "Please try again"
        )

    if not MIN_NAME_LENGTH <= len(name) <= MAX_NAME_LENGTH:
        return f"Please provide a string between {MIN_NAME_LENGTH} and {MAX_NAME_LENGTH} characters."

    return None


class HumanPlayer:
    """Reads menu choices and player names from the terminal."""

    def get_choice(self, prompt: str = "> ") -> InputResult:
        """Read a menu choice; only the first character counts.

        Returns:
            InputResult with the lowercased choice, or quit on EOF/Ctrl-C
        """
        try:
            raw = input(prompt).strip().lower()
        except (EOFError, KeyboardInterrupt):
            return InputResult(quit=True)

        if not raw:
            return InputResult(error="No choice entered.")

        return InputResult(value=raw[0])

    def get_name(self, prompt: str) -> InputResult:
        """Read one player name and validate it."""
        try:
            raw = input(prompt).strip()
        except (EOFError, KeyboardInterrupt):
            return InputResult(quit=True)

        error = validate_name(raw)
        if error:
            return InputResult(error=error)

        return InputResult(value=raw)
