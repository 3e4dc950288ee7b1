"""
Tests for the move selector and the baseline players.
"""

import random
from unittest.mock import Mock, patch

import pytest

from domain.constants import UP, DOWN, LEFT, RIGHT, DEFAULT_MOVE
from players.base import Player
from players.pathfinder_player import (
    PathfinderPlayer,
    MoveDecision,
    REASON_PATH,
    REASON_RANDOM_SAFE,
    REASON_DEFAULT,
)
from players.random_player import RandomPlayer


class TestPathfinderPlayer:
    """Tests for PathfinderPlayer decisions."""

    def test_straight_up_to_food(self, make_state):
        """11x11, food two cells above the head: go up."""
        state = make_state(you=[(5, 5), (5, 4)], food=[(5, 7)])
        decision = PathfinderPlayer(rng=random.Random(0)).decide(state)

        assert decision.move == UP
        assert decision.reason == REASON_PATH
        assert decision.suggested == [UP, UP]
        assert decision.plan.goal.y == 7

    def test_get_move_returns_label(self, make_state):
        state = make_state(you=[(5, 5), (5, 4)], food=[(5, 7)])
        assert PathfinderPlayer().get_move(state) == "up"

    def test_enclosed_returns_default(self, make_state):
        """Boxed in by our own body and the walls: submit the default move."""
        state = make_state(you=[(0, 0), (1, 0), (1, 1), (0, 1), (0, 2)], food=[(8, 8)])
        decision = PathfinderPlayer(rng=random.Random(0)).decide(state)

        assert decision.move == DEFAULT_MOVE == DOWN
        assert decision.reason == REASON_DEFAULT
        assert decision.safe_moves == []
        assert decision.plan is None

    def test_no_path_falls_back_to_safe_move(self, make_state):
        """With no reachable goal the move comes from the safe set only."""
        state = make_state(you=[(5, 5), (5, 4)], food=[(10, 10)], hazards=[(9, 10), (10, 9)])
        for seed in range(20):
            decision = PathfinderPlayer(rng=random.Random(seed)).decide(state)
            assert decision.plan is None
            assert decision.suggested == []
            assert decision.reason == REASON_RANDOM_SAFE
            assert decision.move in (UP, LEFT, RIGHT)

    def test_fallback_uses_injected_rng(self, make_state):
        state = make_state(you=[(5, 5), (5, 4)], food=[(10, 10)], hazards=[(9, 10), (10, 9)])
        rng = Mock()
        rng.choice.return_value = LEFT

        assert PathfinderPlayer(rng=rng).get_move(state) == LEFT
        rng.choice.assert_called_once_with([UP, LEFT, RIGHT])

    def test_same_seed_same_move(self, make_state):
        state = make_state(you=[(5, 5), (5, 4)], food=[(10, 10)], hazards=[(9, 10), (10, 9)])
        moves = {PathfinderPlayer(rng=random.Random(1234)).get_move(state) for _ in range(10)}
        assert len(moves) == 1

    def test_tail_chase_without_food(self, make_state):
        state = make_state(you=[(5, 5), (5, 4), (4, 4), (4, 5)])
        decision = PathfinderPlayer(rng=random.Random(0)).decide(state)

        assert decision.move == LEFT
        assert decision.reason == REASON_PATH
        assert decision.plan.kind == "tail"

    def test_equidistant_food_is_not_random(self, make_state):
        state = make_state(you=[(5, 5), (5, 4)], food=[(7, 5), (5, 7)])
        moves = {PathfinderPlayer(rng=random.Random(seed)).get_move(state) for seed in range(10)}
        assert moves == {RIGHT}

    def test_stateless_between_turns(self, make_state):
        player = PathfinderPlayer(rng=random.Random(0))
        up_state = make_state(you=[(5, 5), (5, 4)], food=[(5, 7)])
        left_state = make_state(you=[(5, 5), (5, 4)], food=[(2, 5)])

        assert player.get_move(up_state) == UP
        assert player.get_move(left_state) == LEFT
        assert player.get_move(up_state) == UP

    def test_logs_decision(self, make_state, caplog):
        state = make_state(you=[(5, 5), (5, 4)], food=[(5, 7)], turn=12)
        with caplog.at_level("INFO", logger="players.pathfinder_player"):
            PathfinderPlayer().get_move(state)

        assert "MOVE 12: up" in caplog.text
        assert "Logic took" in caplog.text


class TestSelection:
    """Tests for the selection rule in isolation."""

    def test_first_safe_suggestion_wins(self):
        decision = PathfinderPlayer()._select([LEFT, RIGHT], [UP, LEFT, RIGHT], None)
        assert decision == MoveDecision(LEFT, REASON_PATH, [LEFT, RIGHT], [UP, LEFT, RIGHT], None)

    def test_unsafe_suggestions_fall_back(self):
        rng = Mock()
        rng.choice.return_value = DOWN
        decision = PathfinderPlayer(rng=rng)._select([DOWN], [UP, UP], None)

        assert decision.move == DOWN
        assert decision.reason == REASON_RANDOM_SAFE

    def test_nothing_safe(self):
        decision = PathfinderPlayer()._select([], [UP], None)
        assert decision.move == DEFAULT_MOVE
        assert decision.reason == REASON_DEFAULT

    def test_timing_does_not_affect_choice(self, make_state):
        state = make_state(you=[(5, 5), (5, 4)], food=[(5, 7)])
        with patch("players.pathfinder_player.time.perf_counter_ns", side_effect=[0, 10 ** 12]):
            assert PathfinderPlayer().get_move(state) == UP


class TestRandomPlayer:
    """Tests for the random baseline."""

    def test_only_safe_moves(self, make_state):
        state = make_state(you=[(0, 5), (1, 5)])
        for seed in range(20):
            assert RandomPlayer(rng=random.Random(seed)).get_move(state) in (UP, DOWN)

    def test_enclosed_returns_default(self, make_state):
        state = make_state(you=[(0, 0), (1, 0), (1, 1), (0, 1), (0, 2)])
        assert RandomPlayer().get_move(state) == DEFAULT_MOVE


class TestPlayerBase:
    """Tests for the Player interface."""

    def test_get_move_not_implemented(self, make_state):
        with pytest.raises(NotImplementedError):
            Player().get_move(make_state(you=[(5, 5), (5, 4)]))

    def test_default_rng(self):
        assert isinstance(Player().rng, random.Random)
