# src/snake_rl/__init__.py
"""Headless, Gym-like environment over the snake_game core."""

from snake_rl.env import ACTIONS, SnakeRLEnv

__all__ = ["ACTIONS", "SnakeRLEnv"]
