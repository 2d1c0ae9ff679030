"""Gymnasium environments for the Tetris engine."""

from __future__ import annotations

from gymnasium.envs.registration import register

from .tetris_env import TetrisEnv

register(
    id="Tetris-20x10-v0",
    entry_point="tetris_engine.env.tetris_env:TetrisEnv",
)

__all__ = ["TetrisEnv"]
