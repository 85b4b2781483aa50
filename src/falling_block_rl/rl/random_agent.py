from __future__ import annotations

import argparse
from typing import Optional

import gymnasium as gym

import falling_block_rl.env  # noqa: F401


def run_random(steps: int = 2000, seed: Optional[int] = None) -> int:
    env = gym.make("FallingBlock-10x20-v0")
    obs, info = env.reset(seed=seed)
    env.action_space.seed(seed)
    episodes = 0
    pieces_locked = 0
    for _ in range(steps):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        if terminated or truncated:
            episodes += 1
            pieces_locked += info["pieces_locked"]
            obs, info = env.reset()
    pieces_locked += info["pieces_locked"]
    env.close()
    print(f"Random agent: {episodes} finished episodes, {pieces_locked} pieces locked")
    return pieces_locked


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser()
    p.add_argument("--steps", type=int, default=2000)
    p.add_argument("--seed", type=int, default=None)
    return p


if __name__ == "__main__":  # pragma: no cover
    args = build_parser().parse_args()
    run_random(args.steps, args.seed)
