"""Tests for the models module."""

import dataclasses

import pytest

from team_balancer.models import Partition, Player, Team


class TestPlayer:
    """Test cases for the Player class."""

    def test_player_is_immutable(self):
        player = Player("Alice", 25.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            player.skill = 30.0


class TestTeam:
    """Test cases for the Team class."""

    def test_add_keeps_total(self):
        """Adding players keeps the cached total in sync."""
        team = Team(label="Team 1")
        team.add(Player("Alice", 25.0))
        team.add(Player("Bob", 15.5))

        assert team.total_skill == 40.5
        assert team.size == 2
        assert team.average_skill == 20.25

    def test_replace_updates_total(self):
        """Replacing a member adjusts the total by the skill difference."""
        team = Team(label="Team 1")
        team.add(Player("Alice", 25.0))
        team.add(Player("Bob", 15.0))

        outgoing = team.replace(1, Player("Carol", 10.0))

        assert outgoing == Player("Bob", 15.0)
        assert [p.name for p in team.members] == ["Alice", "Carol"]
        assert team.total_skill == 35.0


class TestPartition:
    """Test cases for the Partition class."""

    def test_empty_partition(self):
        partition = Partition.empty(3)

        assert len(partition) == 3
        assert [team.label for team in partition] == ["Team 1", "Team 2", "Team 3"]
        assert partition.players() == []
        assert partition.averages() == [0, 0, 0]
        assert partition.cost() == 0

    def test_players_and_totals(self):
        partition = Partition.empty(2)
        partition[0].add(Player("Alice", 10.0))
        partition[1].add(Player("Bob", 20.0))
        partition[1].add(Player("Carol", 30.0))

        assert [p.name for p in partition.players()] == ["Alice", "Bob", "Carol"]
        assert partition.averages() == [10.0, 25.0]
        assert partition.total_skill() == 60.0
        assert partition.cost() == 7.5
