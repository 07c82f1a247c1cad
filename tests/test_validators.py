"""Tests for the validators module."""

import tempfile
from pathlib import Path

import pandas as pd
import pytest

from team_balancer.validators import (
    InvalidConfigurationError,
    validate_leaderboard_csv,
    validate_max_trials,
    validate_player_names,
    validate_team_count,
)


def write_csv(df):
    with tempfile.NamedTemporaryFile(mode='w', suffix='.csv', delete=False) as f:
        df.to_csv(f.name, index=False)
        return Path(f.name)


class TestValidateLeaderboardCSV:
    """Test cases for leaderboard CSV validation."""

    def test_valid_csv(self):
        """Test validation of a valid leaderboard CSV."""
        csv_path = write_csv(pd.DataFrame({
            'name': ['John', 'Linda'],
            'rank': [1, 2],
            'true_skill': [30.5, 28.1],
            'games': [10, 12]
        }))

        try:
            validate_leaderboard_csv(csv_path)  # Should not raise
        finally:
            csv_path.unlink()

    def test_missing_columns(self):
        csv_path = write_csv(pd.DataFrame({'name': ['John'], 'rank': [1]}))

        try:
            with pytest.raises(ValueError, match="missing required columns"):
                validate_leaderboard_csv(csv_path)
        finally:
            csv_path.unlink()

    def test_no_usable_rows(self):
        csv_path = write_csv(pd.DataFrame({
            'name': ['John', 'Linda'],
            'rank': ['first', 'second'],
            'true_skill': [30.5, 28.1]
        }))

        try:
            with pytest.raises(ValueError, match="no usable rows"):
                validate_leaderboard_csv(csv_path)
        finally:
            csv_path.unlink()

    def test_only_infinite_skills(self):
        csv_path = write_csv(pd.DataFrame({
            'name': ['John', 'Linda'],
            'rank': [1, 2],
            'true_skill': ['inf', '-inf']
        }))

        try:
            with pytest.raises(ValueError, match="no usable rows"):
                validate_leaderboard_csv(csv_path)
        finally:
            csv_path.unlink()

    def test_header_only(self):
        with tempfile.NamedTemporaryFile(mode='w', suffix='.csv', delete=False) as f:
            f.write("name,rank,true_skill\n")
            csv_path = Path(f.name)

        try:
            with pytest.raises(ValueError, match="at least 1 player row"):
                validate_leaderboard_csv(csv_path)
        finally:
            csv_path.unlink()

    def test_empty_csv(self):
        """Test validation with empty CSV."""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.csv', delete=False) as f:
            f.write("")  # Empty file
            csv_path = Path(f.name)

        try:
            with pytest.raises(ValueError, match="empty"):
                validate_leaderboard_csv(csv_path)
        finally:
            csv_path.unlink()

    def test_missing_file(self):
        with pytest.raises(FileNotFoundError):
            validate_leaderboard_csv(Path('/nonexistent/leaderboard.csv'))


class TestValidatePlayerNames:
    """Test cases for player name validation."""

    def test_valid_names(self):
        validate_player_names(['Alice', 'Bob', 'Charlie'])  # Should not raise

    def test_no_names(self):
        with pytest.raises(ValueError, match="No players"):
            validate_player_names([])

    def test_whitespace_only_name(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            validate_player_names(['Alice', '   ', 'Bob'])

    def test_long_name(self):
        with pytest.raises(ValueError, match="too long"):
            validate_player_names(['x' * 101])


class TestValidateTeamCount:
    """Test cases for team count and trial budget validation."""

    def test_valid_team_count(self):
        validate_team_count(1)
        validate_team_count(8)

    @pytest.mark.parametrize("team_count", [0, -3])
    def test_team_count_too_small(self, team_count):
        with pytest.raises(InvalidConfigurationError, match="at least 1"):
            validate_team_count(team_count)

    @pytest.mark.parametrize("team_count", [2.0, "2", True])
    def test_team_count_not_integer(self, team_count):
        with pytest.raises(InvalidConfigurationError, match="integer"):
            validate_team_count(team_count)

    def test_invalid_configuration_is_value_error(self):
        with pytest.raises(ValueError):
            validate_team_count(0)

    def test_max_trials(self):
        validate_max_trials(0)
        with pytest.raises(InvalidConfigurationError, match="negative"):
            validate_max_trials(-1)
