"""CLI command for playing War in the terminal."""

from __future__ import annotations

import logging
import sys

import click

from wardeck.playtest.input import validate_name
from wardeck.playtest.session import PlaytestSession, SessionConfig

logger = logging.getLogger(__name__)


@click.command()
@click.option("--player1", "player1_name", default=None, help="Name for Player 1 (prompts if not specified)")
@click.option("--player2", "player2_name", default=None, help="Name for Player 2 (prompts if not specified)")
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
@click.option("--batch", is_flag=True, help="Skip the menu and play the whole game")
@click.option("--max-turns", type=int, default=None, help="Turn limit for --batch runs")
@click.option("--show-rules/--no-rules", default=False, help="Display rules at start")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    player1_name: str | None,
    player2_name: str | None,
    seed: int | None,
    batch: bool,
    max_turns: int | None,
    show_rules: bool,
    verbose: bool,
):
    """Play a game of War between two players."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    for name in (player1_name, player2_name):
        if name is not None:
            error = validate_name(name)
            if error:
                click.echo(f"Invalid player name '{name}': {error}", err=True)
                sys.exit(1)

    if player1_name and player2_name and player1_name.lower() == player2_name.lower():
        click.echo("Player names cannot be the same.", err=True)
        sys.exit(1)

    config = SessionConfig(
        seed=seed,
        player1_name=player1_name,
        player2_name=player2_name,
        batch=batch,
        show_rules=show_rules,
        max_turns=max_turns,
    )
    session = PlaytestSession(config)

    try:
        result = session.run(output_fn=click.echo)
    except KeyboardInterrupt:
        click.echo("\n\nGame interrupted.")
        result = None

    if result is None:
        click.echo("No game played. Exiting.")
        return

    click.echo(f"Seed: {session.seed} (use --seed {session.seed} to replay)")


if __name__ == "__main__":
    main()
