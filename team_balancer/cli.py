"""Command line interface for Team Balancer."""

import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional

import click
import yaml

from team_balancer.balancer import BalanceResult, TeamBalancer
from team_balancer.config import UNKNOWN_PLAYER_POLICIES, Config
from team_balancer.leaderboard import Leaderboard, parse_names
from team_balancer.validators import validate_leaderboard_csv, validate_player_names


def fail(message: str) -> NoReturn:
  click.secho(f"Error: {message}", fg="red")
  sys.exit(1)

def load_config(config_file: Optional[Path]) -> Config:
  """Load the config file if one was given, otherwise use the defaults."""
  config = Config()
  if config_file is not None:
    config.load_from_file(config_file)
  return config

def print_teams(result: BalanceResult) -> None:
  """Print every team with its members sorted by skill, then the final cost."""
  for team in result.partition:
    click.secho(f"\n{team.label}", fg="blue", bold=True)
    if not team.members:
      click.echo("  (empty team)")
    for player in sorted(team.members, key=lambda p: p.skill, reverse=True):
      click.echo(f"  {player.name} ({player.skill:.2f})")
    click.echo(f"  Average TrueSkill: {team.average_skill:.2f}")

  click.secho(
    f"\nDone. Optimized over {result.max_trials} trials "
    f"({result.swaps} swaps). Final cost: {result.cost:.4f} (target 0.0)",
    fg="green",
  )

def print_not_found(names: list[str]) -> None:
  if not names:
    return
  click.secho("\nPlayers not found in the leaderboard (not placed in teams):", fg="yellow")
  for name in sorted(names, key=str.lower):
    click.secho(f"  • {name}", fg="yellow")

@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
  """Team Balancer CLI for building balanced teams from a leaderboard."""
  logging.basicConfig(
    level=logging.DEBUG if verbose else logging.WARNING,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
  )

@cli.command()
@click.argument("leaderboard_file", type=click.Path(exists=True, path_type=Path))
@click.argument("names_file", type=click.Path(exists=True, path_type=Path))
@click.option("--teams", "team_count", type=int, help="Number of teams to build")
@click.option("--config", "config_file", type=click.Path(exists=True, path_type=Path),
              help="YAML configuration file")
@click.option("--trials", "max_trials", type=int, help="Maximum optimization trials")
@click.option("--seed", type=int, help="Random seed for reproducible teams")
@click.option("--unknown", type=click.Choice(UNKNOWN_PLAYER_POLICIES),
              help="Exclude unknown players or give them the default skill")
@click.option("--output", "output_file", type=click.Path(path_type=Path),
              help="Write teams to a .yaml or .csv file")
def build(leaderboard_file: Path, names_file: Path, team_count: Optional[int],
          config_file: Optional[Path], max_trials: Optional[int], seed: Optional[int],
          unknown: Optional[str], output_file: Optional[Path]):
  """Build balanced teams for the players listed in NAMES_FILE."""
  try:
    config = load_config(config_file)
  except (ValueError, yaml.YAMLError) as e:
    fail(f"Invalid configuration: {e}")

  # command line options win over the config file
  if team_count is not None:
    config.team_count = team_count
  if max_trials is not None:
    config.max_trials = max_trials
  if seed is not None:
    config.seed = seed
  if unknown is not None:
    config.unknown_players = unknown

  try:
    leaderboard = Leaderboard.from_csv(leaderboard_file)
    names = parse_names(names_file.read_text(encoding="utf-8"))
    validate_player_names(names)
  except ValueError as e:
    fail(str(e))

  click.secho(f"Loaded {len(leaderboard)} players from {leaderboard_file}", fg="blue")

  roster = leaderboard.resolve_roster(names, config.unknown_players, config.default_skill)
  if not roster.players:
    print_not_found(roster.not_found)
    fail("No players were found to divide into teams.")

  if len(roster.players) < config.team_count:
    click.secho(
      f"Only {len(roster.players)} players for {config.team_count} teams; some teams will be empty",
      fg="yellow",
    )

  balancer = TeamBalancer(config)
  try:
    result = balancer.balance(roster.players, config.team_count)
  except ValueError as e:
    fail(str(e))

  print_teams(result)
  print_not_found(roster.not_found)

  if output_file is not None:
    if output_file.suffix.lower() == ".csv":
      balancer.save_teams_csv(result, output_file)
    else:
      balancer.save_teams_yaml(result, output_file)
    click.secho(f"Teams written to {output_file}", fg="green")

@cli.command()
@click.argument("leaderboard_file", type=click.Path(exists=True, path_type=Path))
@click.option("--top", "count", type=click.IntRange(min=1), default=5, show_default=True,
              help="Number of players to show")
def leaderboard(leaderboard_file: Path, count: int):
  """Show the best-ranked players in LEADERBOARD_FILE."""
  try:
    board = Leaderboard.from_csv(leaderboard_file)
  except ValueError as e:
    fail(str(e))

  for entry in board.top(count):
    click.echo(f"{entry.rank}. {entry.name} (TrueSkill: {entry.skill:.2f})")

@cli.command()
@click.argument("leaderboard_file", type=click.Path(exists=True, path_type=Path))
def validate(leaderboard_file: Path):
  """Validate a leaderboard file."""
  try:
    validate_leaderboard_csv(leaderboard_file)
  except ValueError as e:
    click.secho(f"❌ {e}", fg="red")
    sys.exit(1)

  click.secho("✅ Leaderboard is valid!", fg="green")

if __name__ == "__main__":
  cli()
