"""Interactive terminal play for War."""

from wardeck.playtest.display import TurnRenderer, render_menu, SEPARATOR, BANNER
from wardeck.playtest.rules import RuleExplainer
from wardeck.playtest.input import HumanPlayer, InputResult, validate_name
from wardeck.playtest.session import PlaytestSession, SessionConfig

__all__ = [
    "TurnRenderer",
    "render_menu",
    "SEPARATOR",
    "BANNER",
    "RuleExplainer",
    "HumanPlayer",
    "InputResult",
    "validate_name",
    "PlaytestSession",
    "SessionConfig",
]
