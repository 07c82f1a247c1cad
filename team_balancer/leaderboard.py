"""Ratings source for Team Balancer.

Loads a leaderboard CSV with ``name``, ``rank`` and ``true_skill`` columns
and turns a list of attending names into rated players.
"""

import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import pandas as pd

from .config import DEFAULT_SKILL, UNKNOWN_PLAYER_POLICIES
from .models import Player
from .validators import REQUIRED_LEADERBOARD_COLUMNS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LeaderboardEntry:
    name: str
    rank: int
    skill: float


@dataclass
class Roster:
    """Players ready for balancing, plus the names the leaderboard didn't know."""

    players: List[Player] = field(default_factory=list)
    not_found: List[str] = field(default_factory=list)


def parse_names(text: str) -> List[str]:
    """Split newline-separated roster text into names.

    Surrounding whitespace is trimmed and blank lines are dropped.
    """
    return [line.strip() for line in text.splitlines() if line.strip()]


class Leaderboard:
    """Player ratings keyed by lower-cased name."""

    def __init__(self, entries: Optional[Iterable[LeaderboardEntry]] = None):
        self._entries: Dict[str, LeaderboardEntry] = {}
        for entry in entries or []:
            self.add(entry)

    @classmethod
    def from_csv(cls, csv_path: Path) -> "Leaderboard":
        """Load a leaderboard from a CSV file.

        Rows without a name or with a non-numeric or infinite rank or skill
        are skipped.

        Args:
            csv_path: Path to the leaderboard CSV

        Returns:
            The loaded leaderboard

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the required columns are missing
        """
        if not csv_path.exists():
            raise FileNotFoundError(f"Leaderboard file not found: {csv_path}")

        df = pd.read_csv(csv_path, skipinitialspace=True)
        df.columns = [str(column).strip() for column in df.columns]
        return cls.from_dataframe(df)

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> "Leaderboard":
        """Build a leaderboard from a DataFrame with the leaderboard columns."""
        missing = [column for column in REQUIRED_LEADERBOARD_COLUMNS if column not in df.columns]
        if missing:
            raise ValueError(
                f"Leaderboard is missing required columns: {missing}. "
                f"Expected columns {list(REQUIRED_LEADERBOARD_COLUMNS)}"
            )

        names = df['name'].where(df['name'].notna(), '').astype(str).str.strip()
        ranks = pd.to_numeric(df['rank'], errors='coerce')
        skills = pd.to_numeric(df['true_skill'], errors='coerce')

        # inf parses as a number but cannot be balanced
        infinite = [math.inf, -math.inf]
        valid = (
            (names != '')
            & ranks.notna() & ~ranks.isin(infinite)
            & skills.notna() & ~skills.isin(infinite)
        )
        dropped = int((~valid).sum())
        if dropped:
            logger.debug("Skipped %d leaderboard rows with missing or invalid values", dropped)

        leaderboard = cls()
        for name, rank, skill in zip(names[valid], ranks[valid], skills[valid]):
            leaderboard.add(LeaderboardEntry(name=name, rank=int(rank), skill=float(skill)))

        logger.debug("Loaded %d leaderboard entries", len(leaderboard))
        return leaderboard

    def add(self, entry: LeaderboardEntry) -> None:
        """Add an entry; a later entry with the same name replaces an earlier one."""
        self._entries[entry.name.lower()] = entry

    def get(self, name: str) -> Optional[LeaderboardEntry]:
        """Look up a player by name, ignoring case."""
        return self._entries.get(name.strip().lower())

    def top(self, count: int = 5) -> List[LeaderboardEntry]:
        """The ``count`` best-ranked players, rank 1 first."""
        return sorted(self._entries.values(), key=lambda entry: entry.rank)[:count]

    def resolve_roster(
        self,
        names: Iterable[str],
        policy: str = "exclude",
        default_skill: float = DEFAULT_SKILL,
    ) -> Roster:
        """Turn attending names into rated players.

        Names are de-duplicated ignoring case; the first spelling wins.
        Known players take the leaderboard's spelling and skill. Unknown
        players are either reported in ``not_found`` (``"exclude"``) or
        given ``default_skill`` (``"default"``).

        Args:
            names: Names of the attending players
            policy: What to do with names missing from the leaderboard
            default_skill: Skill for unknown players under ``"default"``

        Returns:
            The roster to balance and the names that were not found

        Raises:
            ValueError: If the policy is unknown
        """
        if policy not in UNKNOWN_PLAYER_POLICIES:
            raise ValueError(
                f"Unknown player policy must be one of {list(UNKNOWN_PLAYER_POLICIES)}, got {policy!r}"
            )

        roster = Roster()
        seen = set()
        for name in names:
            name = name.strip()
            key = name.lower()
            if not name or key in seen:
                continue
            seen.add(key)

            entry = self._entries.get(key)
            if entry is not None:
                roster.players.append(Player(entry.name, entry.skill))
            elif policy == "default":
                roster.players.append(Player(name, default_skill))
            else:
                roster.not_found.append(name)

        return roster

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: str) -> bool:
        return name.strip().lower() in self._entries
