"""Core team balancing logic for Team Balancer.

Teams are built in two stages: a serpentine (snake) draft over the players
sorted by descending skill, followed by randomized hill climbing that swaps
pairs of players between teams whenever the swap strictly lowers the cost
(the standard deviation of the team averages).
"""

import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Sequence

import pandas as pd
import yaml

from .config import DEFAULT_MAX_TRIALS, Config
from .models import Partition, Player
from .stats import hypothetical_cost
from .validators import validate_max_trials, validate_team_count

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Swap:
    """A swap committed by the optimizer."""

    trial: int
    team_index1: int
    team_index2: int
    player1: Player  # moved from team_index1 to team_index2
    player2: Player  # moved from team_index2 to team_index1
    cost: float  # cost right after the swap


@dataclass
class BalanceResult:
    """Final teams plus the numbers describing how they were reached."""

    partition: Partition
    cost: float
    seeded_cost: float
    max_trials: int
    swaps: int


def seed(players: Sequence[Player], team_count: int) -> Partition:
    """Distribute players over teams with a serpentine draft.

    Players are sorted by descending skill (equal skills keep their input
    order) and dealt to teams in the order 1, 2, .., k, k, k-1, .., 1, 1, 2..

    Args:
        players: Players to distribute
        team_count: Number of teams to create

    Returns:
        A new partition with every player assigned exactly once

    Raises:
        InvalidConfigurationError: If team_count is less than 1
    """
    validate_team_count(team_count)

    partition = Partition.empty(team_count)
    sorted_players = sorted(players, key=lambda p: p.skill, reverse=True)

    team_index = 0
    direction = 1
    for player in sorted_players:
        partition[team_index].add(player)

        team_index += direction
        if team_index >= team_count:
            direction = -1
            team_index = team_count - 1
        elif team_index < 0:
            direction = 1
            team_index = 0

    logger.debug(
        "Seeded %d players into %d teams, cost %.4f",
        len(sorted_players), team_count, partition.cost()
    )
    return partition


def optimize(
    partition: Partition,
    max_trials: int = DEFAULT_MAX_TRIALS,
    rng: Optional[random.Random] = None,
    on_swap: Optional[Callable[[Swap], None]] = None,
) -> Partition:
    """Improve a partition in place by randomized hill climbing.

    Each trial picks two distinct teams and one member of each at random,
    and swaps them only if that strictly lowers the cost. The cost is
    therefore non-increasing across trials.

    Args:
        partition: Partition to improve; it is mutated and returned
        max_trials: Maximum number of trials to run
        rng: Random source; only ``randrange`` is used. Defaults to a fresh
            ``random.Random()``
        on_swap: Called with a :class:`Swap` after every committed swap

    Returns:
        The same partition object

    Raises:
        InvalidConfigurationError: If max_trials is negative
    """
    validate_max_trials(max_trials)
    if rng is None:
        rng = random.Random()

    team_count = len(partition)
    current_cost = partition.cost()
    swaps = 0

    for trial in range(max_trials):
        if current_cost == 0:
            break

        team_index1 = rng.randrange(team_count)
        team_index2 = rng.randrange(team_count)
        if team_index1 == team_index2:
            team_index2 = (team_index1 + 1) % team_count

        team1 = partition[team_index1]
        team2 = partition[team_index2]
        if not team1.members or not team2.members:
            continue

        player_index1 = rng.randrange(len(team1.members))
        player_index2 = rng.randrange(len(team2.members))
        player1 = team1.members[player_index1]
        player2 = team2.members[player_index2]

        new_cost = hypothetical_cost(partition, team_index1, team_index2, player1, player2)
        if new_cost < current_cost:
            team1.replace(player_index1, player2)
            team2.replace(player_index2, player1)
            current_cost = new_cost
            swaps += 1

            if on_swap is not None:
                on_swap(Swap(trial, team_index1, team_index2, player1, player2, new_cost))

    logger.debug("Optimization committed %d swaps, cost %.4f", swaps, current_cost)
    return partition


def balance_teams(
    players: Sequence[Player],
    team_count: int,
    max_trials: int = DEFAULT_MAX_TRIALS,
    rng: Optional[random.Random] = None,
) -> BalanceResult:
    """Split players into balanced teams.

    Args:
        players: Players to distribute
        team_count: Number of teams to create
        max_trials: Optimizer trial budget
        rng: Random source for the optimizer

    Returns:
        The balanced partition and its cost
    """
    validate_max_trials(max_trials)

    partition = seed(players, team_count)
    seeded_cost = partition.cost()

    swaps = 0

    def count_swap(swap: Swap) -> None:
        nonlocal swaps
        swaps += 1

    optimize(partition, max_trials, rng=rng, on_swap=count_swap)

    return BalanceResult(
        partition=partition,
        cost=partition.cost(),
        seeded_cost=seeded_cost,
        max_trials=max_trials,
        swaps=swaps,
    )


class TeamBalancer:
    """Main class for building balanced teams from rated players."""

    def __init__(self, config: Config):
        """Initialize the team balancer.

        Args:
            config: Configuration object with optimizer settings
        """
        self.config = config

    def balance(self, players: Sequence[Player], team_count: Optional[int] = None) -> BalanceResult:
        """Build balanced teams using the configured trial budget and seed.

        Args:
            players: Players to distribute
            team_count: Number of teams; defaults to ``config.team_count``

        Returns:
            The balanced partition and its cost

        Raises:
            InvalidConfigurationError: If the team count or trial budget is invalid
        """
        if team_count is None:
            team_count = self.config.team_count

        rng = random.Random(self.config.seed)
        result = balance_teams(players, team_count, self.config.max_trials, rng=rng)

        logger.info(
            "Balanced %d players into %d teams: cost %.4f -> %.4f after %d swaps",
            len(players), team_count, result.seeded_cost, result.cost, result.swaps
        )
        return result

    def get_balance_summary(self, result: BalanceResult) -> Dict[str, Any]:
        """Get a summary of the balancing results.

        Args:
            result: Result returned by :meth:`balance`

        Returns:
            Dictionary with team statistics
        """
        teams = {}
        team_sizes = {}
        average_skills = {}
        for team in result.partition:
            teams[team.label] = [player.name for player in team.members]
            team_sizes[team.label] = team.size
            average_skills[team.label] = round(team.average_skill, 2)

        return {
            'total_players': len(result.partition.players()),
            'teams': teams,
            'team_sizes': team_sizes,
            'average_skills': average_skills,
            'cost': round(result.cost, 4),
            'seeded_cost': round(result.seeded_cost, 4),
            'swaps': result.swaps
        }

    def save_teams_csv(self, result: BalanceResult, output_path: Path) -> None:
        """Save teams to CSV format, one row per player.

        Args:
            result: Result returned by :meth:`balance`
            output_path: Path where to save the teams CSV
        """
        rows = [
            {'team': team.label, 'name': player.name, 'skill': player.skill}
            for team in result.partition
            for player in team.members
        ]

        teams_df = pd.DataFrame(rows, columns=['team', 'name', 'skill'])
        teams_df.to_csv(output_path, index=False)

    def save_teams_yaml(self, result: BalanceResult, output_path: Path) -> None:
        """Save teams to YAML format with members grouped by team.

        Args:
            result: Result returned by :meth:`balance`
            output_path: Path where to save the teams YAML
        """
        yaml_data = {'cost': float(result.cost), 'teams': {}}
        for team in result.partition:
            members = sorted(team.members, key=lambda p: p.skill, reverse=True)
            yaml_data['teams'][team.label] = {
                'average_skill': float(team.average_skill),
                'players': [
                    {'name': player.name, 'skill': float(player.skill)}
                    for player in members
                ]
            }

        with open(output_path, 'w', encoding='utf-8') as f:
            yaml.dump(yaml_data, f, default_flow_style=False, sort_keys=False)
