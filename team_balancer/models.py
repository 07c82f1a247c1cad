"""Data model for Team Balancer: players, teams and partitions."""

from dataclasses import dataclass, field
from typing import Iterator, List

from .stats import average_skill, cost


@dataclass(frozen=True)
class Player:
    """A rated player. Higher skill is better."""

    name: str
    skill: float

    def __repr__(self) -> str:
        return f"{self.name}({self.skill})"


@dataclass
class Team:
    """A labelled group of players with a cached skill total.

    ``total_skill`` always equals the sum of the members' skills; use
    :meth:`add` and :meth:`replace` rather than touching ``members``
    directly so the cache stays consistent.
    """

    label: str
    members: List[Player] = field(default_factory=list)
    total_skill: float = 0.0

    def add(self, player: Player) -> None:
        """Append a player to the team."""
        self.members.append(player)
        self.total_skill += player.skill

    def replace(self, index: int, player: Player) -> Player:
        """Put ``player`` into slot ``index`` and return the player it displaced."""
        outgoing = self.members[index]
        self.members[index] = player
        self.total_skill += player.skill - outgoing.skill
        return outgoing

    @property
    def average_skill(self) -> float:
        return average_skill(self)

    @property
    def size(self) -> int:
        return len(self.members)

    def __len__(self) -> int:
        return len(self.members)


class Partition:
    """An ordered sequence of teams covering a roster exactly once."""

    def __init__(self, teams: List[Team]):
        self.teams = teams

    @classmethod
    def empty(cls, team_count: int) -> "Partition":
        """Create ``team_count`` empty teams labelled ``Team 1`` .. ``Team k``."""
        return cls([Team(label=f"Team {i + 1}") for i in range(team_count)])

    def players(self) -> List[Player]:
        """Every player in the partition, team by team."""
        return [player for team in self.teams for player in team.members]

    def averages(self) -> List[float]:
        """Per-team average skill, in team order."""
        return [average_skill(team) for team in self.teams]

    def total_skill(self) -> float:
        return sum(team.total_skill for team in self.teams)

    def cost(self) -> float:
        return cost(self)

    def __len__(self) -> int:
        return len(self.teams)

    def __iter__(self) -> Iterator[Team]:
        return iter(self.teams)

    def __getitem__(self, index: int) -> Team:
        return self.teams[index]

    def __repr__(self) -> str:
        return f"Partition({self.teams!r})"
