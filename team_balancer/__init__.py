"""Team Balancer - A tool to split rated players into teams of equal strength."""

__version__ = "0.1.0"

from .balancer import BalanceResult, TeamBalancer, balance_teams, optimize, seed
from .config import Config
from .models import Partition, Player, Team
from .validators import InvalidConfigurationError

__all__ = [
    "BalanceResult",
    "Config",
    "InvalidConfigurationError",
    "Partition",
    "Player",
    "Team",
    "TeamBalancer",
    "balance_teams",
    "optimize",
    "seed",
]
