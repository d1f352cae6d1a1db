"""Tests for the headless agent environment."""

import numpy as np  # type: ignore
import pytest

from snake_game.components import Direction, Position
from snake_game.config import Config
from snake_rl.env import ACTIONS, SnakeRLEnv, left_of, observe, right_of
from snake_rl.policies.greedy import dir_to_action

from conftest import add_food, place_snake


def walled_env(size=5):
    return SnakeRLEnv(config=Config(arena_width=size, arena_height=size, boundary="wall"))


class TestHelpers:
    """Tests for the geometry helpers."""

    @pytest.mark.parametrize("direction", list(Direction))
    def test_left_and_right_are_inverse_turns(self, direction):
        """Turning left then right faces the same way."""
        assert right_of(left_of(direction)) is direction
        assert left_of(left_of(direction)) is direction.opposite()

    def test_left_of_right_is_up(self):
        """With y pointing up, facing right your left hand points up."""
        assert left_of(Direction.RIGHT) is Direction.UP
        assert right_of(Direction.RIGHT) is Direction.DOWN


class TestSnakeRLEnv:
    """Tests for SnakeRLEnv."""

    def test_reset_returns_observation(self):
        """reset() gives a 9-float observation."""
        env = SnakeRLEnv()
        obs = env.reset()
        assert obs.shape == env.observation_space_shape == (9,)
        assert obs.dtype == np.float32
        assert env.action_space_n == len(ACTIONS) == 4

    def test_step_before_reset_is_an_error(self):
        """Stepping without an episode is a programming error."""
        with pytest.raises(AssertionError):
            SnakeRLEnv().step(0)

    def test_invalid_action_is_an_error(self):
        """Only actions 0..3 exist."""
        env = SnakeRLEnv()
        env.reset()
        with pytest.raises(AssertionError):
            env.step(7)

    def test_each_step_moves_exactly_one_cell(self):
        """A step feeds one move interval into the game."""
        env = SnakeRLEnv(seed_value=5)
        env.reset()
        for _ in range(3):
            heading = env.game.direction
            before = env.game.head_position
            env.step(dir_to_action(heading))
            assert env.game.head_position == before.step(heading)

    def test_eating_is_rewarded(self):
        """Eating adds eat_reward on top of the step penalty."""
        env = SnakeRLEnv()
        env.reset()
        place_snake(env.game.world, [(12, 12), (12, 11)], Direction.UP)
        add_food(env.game.world, (12, 13))

        _, reward, done, info = env.step(dir_to_action(Direction.UP))

        assert not done
        assert reward == pytest.approx(env.step_penalty + env.eat_reward)
        assert info["score"] == 1
        assert env.game.length == 3

    def test_moving_closer_is_shaped(self):
        """Getting nearer the food adds a small positive term."""
        env = SnakeRLEnv()
        env.reset()
        place_snake(env.game.world, [(12, 12), (12, 11)], Direction.UP)
        add_food(env.game.world, (12, 15))

        _, reward, _, _ = env.step(dir_to_action(Direction.UP))

        assert reward == pytest.approx(env.step_penalty + env.shaping_coef)

    def test_hitting_the_wall_ends_the_episode(self):
        """GAME_OVER terminates with death_reward."""
        env = walled_env()
        env.reset()
        place_snake(env.game.world, [(2, 2), (1, 2)], Direction.RIGHT)
        right = dir_to_action(Direction.RIGHT)

        assert env.step(right)[2] is False
        assert env.step(right)[2] is False
        _, reward, done, info = env.step(right)

        assert done is True
        assert reward == env.death_reward
        assert info == {"reason": "death", "score": 0}

    def test_terminal_observation_is_the_dying_state(self):
        """On death the observation shows the snake at the wall, not the respawned one."""
        env = walled_env()
        env.reset()
        place_snake(env.game.world, [(4, 2), (3, 2)], Direction.RIGHT)

        obs, _, done, _ = env.step(dir_to_action(Direction.RIGHT))

        assert done is True
        assert obs[:2].tolist() == [1.0, 0.5]
        assert obs[4:].tolist() == [1.0, 0.0, 1.0, 0.0, 0.0]
        assert env.game.head_position == Position(2, 2)


class TestObserve:
    """Tests for the observation vector."""

    def test_wall_ahead_is_dangerous(self):
        """Facing the wall flags danger ahead only."""
        env = walled_env()
        env.reset()
        place_snake(env.game.world, [(4, 2), (3, 2)], Direction.RIGHT)

        obs = observe(env.game)

        assert obs[:4].tolist() == [1.0, 0.5, 1.0, 0.5]  # no food: food features mirror the head
        assert obs[4:6].tolist() == [1.0, 0.0]
        assert obs[6:].tolist() == [1.0, 0.0, 0.0]

    def test_body_is_dangerous(self):
        """Body cells ahead or beside the head are flagged."""
        env = SnakeRLEnv()
        env.reset()
        place_snake(env.game.world, [(5, 5), (6, 5), (6, 4), (5, 4), (4, 4)], Direction.DOWN)
        assert observe(env.game)[6:].tolist() == [1.0, 1.0, 0.0]

    def test_nearest_food_is_reported(self):
        """The closest of several foods is observed."""
        env = walled_env()
        env.reset()
        place_snake(env.game.world, [(2, 2), (1, 2)], Direction.RIGHT)
        add_food(env.game.world, (0, 0))
        add_food(env.game.world, (3, 3))
        obs = observe(env.game)
        assert obs[2:4].tolist() == [0.75, 0.75]
        assert env.game.food_positions()[1] == Position(3, 3)
