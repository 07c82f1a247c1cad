"""Validation utilities for Team Balancer."""

import math
from pathlib import Path
from typing import Iterable

import pandas as pd


REQUIRED_LEADERBOARD_COLUMNS = ("name", "rank", "true_skill")


class InvalidConfigurationError(ValueError):
    """Raised when the balancer is asked to work with an impossible setup."""


def validate_team_count(team_count: int) -> None:
    """Validate the number of teams to build.

    Args:
        team_count: Requested number of teams

    Raises:
        InvalidConfigurationError: If the team count is not a positive integer
    """
    if isinstance(team_count, bool) or not isinstance(team_count, int):
        raise InvalidConfigurationError(f"Team count must be an integer, got {team_count!r}")

    if team_count < 1:
        raise InvalidConfigurationError(f"Team count must be at least 1, got {team_count}")


def validate_max_trials(max_trials: int) -> None:
    """Validate the optimizer's trial budget.

    Raises:
        InvalidConfigurationError: If the budget is negative or not an integer
    """
    if isinstance(max_trials, bool) or not isinstance(max_trials, int):
        raise InvalidConfigurationError(f"Maximum trials must be an integer, got {max_trials!r}")

    if max_trials < 0:
        raise InvalidConfigurationError(f"Maximum trials cannot be negative, got {max_trials}")


def validate_player_names(names: Iterable[str]) -> None:
    """Validate roster names before balancing.

    Args:
        names: Player names to validate

    Raises:
        ValueError: If no names are given or a name is invalid
    """
    names = list(names)
    if not names:
        raise ValueError("No players given")

    # Check for empty or whitespace-only names
    for name in names:
        if not name or not name.strip():
            raise ValueError("Player names cannot be empty or whitespace-only")

    # Check for very long names (likely data issue)
    for name in names:
        if len(name) > 100:
            raise ValueError(f"Player name too long (max 100 chars): '{name[:50]}...'")


def validate_leaderboard_csv(csv_path: Path) -> None:
    """Validate a leaderboard CSV file.

    Ensures the file can be used as a ratings source:
    - Has a header with the ``name``, ``rank`` and ``true_skill`` columns
    - Has at least 1 data row
    - Has at least one row with a name and numeric rank and skill

    Args:
        csv_path: Path to the CSV file to validate

    Raises:
        FileNotFoundError: If the CSV file doesn't exist
        ValueError: If the CSV structure or content is invalid
    """
    if not csv_path.exists():
        raise FileNotFoundError(f"Leaderboard file not found: {csv_path}")

    try:
        df = pd.read_csv(csv_path, skipinitialspace=True)
    except pd.errors.EmptyDataError:
        raise ValueError("Leaderboard CSV file is empty")
    except Exception as e:
        raise ValueError(f"Failed to read CSV file: {e}")

    df.columns = [str(column).strip() for column in df.columns]
    missing = [column for column in REQUIRED_LEADERBOARD_COLUMNS if column not in df.columns]
    if missing:
        raise ValueError(
            f"Leaderboard CSV is missing required columns: {missing}. "
            f"Expected columns {list(REQUIRED_LEADERBOARD_COLUMNS)}"
        )

    if df.shape[0] == 0:
        raise ValueError("Leaderboard CSV must contain at least 1 player row")

    names = df["name"].astype(str).str.strip()
    ranks = pd.to_numeric(df["rank"], errors="coerce")
    skills = pd.to_numeric(df["true_skill"], errors="coerce")
    infinite = [math.inf, -math.inf]
    usable = (
        df["name"].notna() & (names != "")
        & ranks.notna() & ~ranks.isin(infinite)
        & skills.notna() & ~skills.isin(infinite)
    )
    if not usable.any():
        raise ValueError("Leaderboard CSV contains no usable rows (name, finite numeric rank and true_skill)")
