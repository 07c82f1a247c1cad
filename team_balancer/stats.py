"""Cost and statistics helpers for Team Balancer."""

import math
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from .models import Partition, Player, Team


def average_skill(team: "Team") -> float:
    """Return the average skill of a team, or 0 for an empty team."""
    if not team.members:
        return 0.0
    return team.total_skill / len(team.members)


def standard_deviation(values: Sequence[float]) -> float:
    """Population standard deviation (divides by N) of a sequence of floats.

    Args:
        values: Numbers to measure

    Returns:
        The standard deviation, or 0 for an empty sequence
    """
    if not values:
        return 0.0

    mean = sum(values) / len(values)
    variance = sum((value - mean) ** 2 for value in values) / len(values)
    return math.sqrt(variance)


def cost(partition: "Partition") -> float:
    """Measure how unbalanced a partition is.

    The cost is the standard deviation of the per-team average skill, so a
    perfectly balanced partition scores 0 regardless of team sizes.
    """
    return standard_deviation(partition.averages())


def hypothetical_cost(
    partition: "Partition",
    team_index1: int,
    team_index2: int,
    outgoing: "Player",
    incoming: "Player",
) -> float:
    """Compute the cost the partition would have after swapping two players.

    ``outgoing`` leaves team ``team_index1`` for team ``team_index2`` and
    ``incoming`` travels the other way. Nothing is mutated; only the two
    affected averages are recomputed from the cached team totals.

    Args:
        partition: Current partition
        team_index1: Index of the team ``outgoing`` belongs to
        team_index2: Index of the team ``incoming`` belongs to
        outgoing: Player leaving the first team
        incoming: Player leaving the second team

    Returns:
        Standard deviation of the updated team averages
    """
    team1 = partition[team_index1]
    team2 = partition[team_index2]

    averages = partition.averages()
    # Team sizes do not change on a swap, only the totals
    averages[team_index1] = (team1.total_skill - outgoing.skill + incoming.skill) / len(team1.members)
    averages[team_index2] = (team2.total_skill - incoming.skill + outgoing.skill) / len(team2.members)

    return standard_deviation(averages)
