"""CLI command for running many unattended War games."""

from __future__ import annotations

import json
import logging
import statistics
import time

import click

from wardeck.simulation.war import play_war_game

logger = logging.getLogger(__name__)


def simulate_games(num_games: int, base_seed: int, max_turns: int | None = None) -> dict:
    """Play ``num_games`` games with consecutive seeds and summarize them.

    Returns:
        Dict with win counts, draws, games stopped at the turn limit
        and turn statistics
    """
    wins = {"Player1": 0, "Player2": 0}
    draws = 0
    capped = 0
    turns: list[int] = []

    for i in range(num_games):
        result = play_war_game(seed=base_seed + i, max_turns=max_turns)
        turns.append(result["turns"])
        if not result["finished"]:
            capped += 1
        elif result["winner"] is None:
            draws += 1
        else:
            wins[result["winner"]] += 1

    return {
        "games": num_games,
        "player1_wins": wins["Player1"],
        "player2_wins": wins["Player2"],
        "draws": draws,
        "capped": capped,
        "min_turns": min(turns),
        "max_turns": max(turns),
        "mean_turns": statistics.mean(turns),
        "median_turns": statistics.median(turns),
    }


@click.command()
@click.option("-n", "--games", "num_games", type=click.IntRange(min=1), default=100, help="Number of games to play")
@click.option("--seed", type=int, default=0, help="Seed of the first game; later games use seed+1, seed+2, ...")
@click.option("--max-turns", type=int, default=None, help="Turn limit per game")
@click.option("--json", "as_json", is_flag=True, help="Print the summary as JSON")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(num_games: int, seed: int, max_turns: int | None, as_json: bool, verbose: bool):
    """Simulate many games of War and report turn statistics."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.WARNING)

    start = time.time()
    summary = simulate_games(num_games, seed, max_turns=max_turns)
    elapsed = time.time() - start
    logger.info(f"Simulated {num_games} games in {elapsed:.2f}s")

    if as_json:
        click.echo(json.dumps(summary, indent=2))
        return

    click.echo(f"Games played:  {summary['games']}")
    click.echo(f"Player 1 wins: {summary['player1_wins']}")
    click.echo(f"Player 2 wins: {summary['player2_wins']}")
    click.echo(f"Draws:         {summary['draws']}")
    click.echo(f"Turn limit:    {summary['capped']}")
    click.echo(
        f"Turns:         min {summary['min_turns']}, max {summary['max_turns']}, "
        f"mean {summary['mean_turns']:.1f}, median {summary['median_turns']}"
    )


if __name__ == "__main__":
    main()
