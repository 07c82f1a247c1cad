"""Configuration management for Team Balancer."""

import math
from pathlib import Path
from typing import Optional

import yaml


DEFAULT_MAX_TRIALS = 20000
DEFAULT_SKILL = 15.0
UNKNOWN_PLAYER_POLICIES = ("exclude", "default")


class Config:
    """Configuration class for team balancing settings."""

    def __init__(self):
        """Initialize configuration with default values."""
        self.team_count: int = 2
        self.max_trials: int = DEFAULT_MAX_TRIALS
        self.seed: Optional[int] = None
        self.default_skill: float = DEFAULT_SKILL
        self.unknown_players: str = "exclude"

    def load_from_file(self, config_path: Path) -> None:
        """Load configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Raises:
            FileNotFoundError: If the config file doesn't exist
            yaml.YAMLError: If the YAML file is invalid
            ValueError: If the configuration structure is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f)

        if not isinstance(config_data, dict):
            raise ValueError("Configuration file must contain a YAML dictionary")

        teams_config = config_data.get('teams') or {}
        optimizer_config = config_data.get('optimizer') or {}
        players_config = config_data.get('players') or {}

        if 'count' in teams_config:
            count = teams_config['count']
            if isinstance(count, bool) or not isinstance(count, int) or count < 1:
                raise ValueError("teams.count must be a positive integer")
            self.team_count = count

        if 'max_trials' in optimizer_config:
            max_trials = optimizer_config['max_trials']
            if isinstance(max_trials, bool) or not isinstance(max_trials, int) or max_trials < 0:
                raise ValueError("optimizer.max_trials must be a non-negative integer")
            self.max_trials = max_trials

        if 'seed' in optimizer_config:
            seed = optimizer_config['seed']
            if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
                raise ValueError("optimizer.seed must be an integer or null")
            self.seed = seed

        if 'default_skill' in players_config:
            default_skill = players_config['default_skill']
            if (isinstance(default_skill, bool) or not isinstance(default_skill, (int, float))
                    or not math.isfinite(default_skill)):
                raise ValueError("players.default_skill must be a finite number")
            self.default_skill = float(default_skill)

        if 'unknown' in players_config:
            policy = players_config['unknown']
            if policy not in UNKNOWN_PLAYER_POLICIES:
                raise ValueError(
                    f"players.unknown must be one of {list(UNKNOWN_PLAYER_POLICIES)}"
                )
            self.unknown_players = policy

    def to_dict(self) -> dict:
        """Convert configuration to dictionary format.

        Returns:
            Dictionary representation of the configuration
        """
        return {
            'teams': {
                'count': self.team_count
            },
            'optimizer': {
                'max_trials': self.max_trials,
                'seed': self.seed
            },
            'players': {
                'default_skill': self.default_skill,
                'unknown': self.unknown_players
            }
        }

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to a YAML file.

        Args:
            config_path: Path where to save the configuration
        """
        config_dict = self.to_dict()

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(config_dict, f, default_flow_style=False, sort_keys=True)
