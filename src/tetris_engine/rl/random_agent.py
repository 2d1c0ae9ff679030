from __future__ import annotations

import argparse
import logging
from typing import Optional

import gymnasium as gym

import tetris_engine.env  # noqa: F401


logger = logging.getLogger(__name__)


def run_random(steps: int = 200, seed: Optional[int] = None, gravity_every: int = 1) -> float:
    env = gym.make("Tetris-20x10-v0", gravity_every=gravity_every)
    env.action_space.seed(seed)
    obs, info = env.reset(seed=seed)
    total_reward = 0.0
    games = 0
    for _ in range(steps):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total_reward += float(reward)
        if terminated or truncated:
            games += 1
            logger.info("Game %d finished: score %d, lines %d", games, info["score"], info["lines_cleared_total"])
            obs, info = env.reset()
    env.close()
    logger.info("Random agent total reward over %d steps: %.2f", steps, total_reward)
    return total_reward


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play the Tetris environment with random actions")
    p.add_argument("--steps", type=int, default=200)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--gravity-every", type=int, default=1)
    p.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def main(argv: Optional[list] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    total = run_random(args.steps, args.seed, args.gravity_every)
    print(f"Random agent total reward: {total:.2f}")


if __name__ == "__main__":  # pragma: no cover
    main()
