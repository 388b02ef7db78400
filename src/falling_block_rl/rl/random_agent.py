from __future__ import annotations

import argparse
from typing import List, Optional

import gymnasium as gym

import falling_block_rl.env  # noqa: F401


def run_random(episodes: int = 5, max_steps: int = 2000, seed: Optional[int] = None) -> List[float]:
    env = gym.make("FallingBlock-10x20-v0", max_episode_steps=max_steps)
    returns: List[float] = []
    try:
        for ep in range(episodes):
            obs, info = env.reset(seed=None if seed is None else seed + ep)
            env.action_space.seed(None if seed is None else seed + ep)
            total_reward = 0.0
            done = False
            while not done:
                obs, reward, terminated, truncated, info = env.step(env.action_space.sample())
                total_reward += float(reward)
                done = terminated or truncated
            returns.append(total_reward)
            print(
                f"Episode {ep + 1}/{episodes} return={total_reward:.2f} "
                f"score={info['score']} lines={info['lines_cleared_total']} steps={info['steps']}"
            )
    finally:
        env.close()
    return returns


def main() -> None:
    p = argparse.ArgumentParser()
    p.add_argument("--episodes", type=int, default=5)
    p.add_argument("--max-steps", type=int, default=2000)
    p.add_argument("--seed", type=int, default=None)
    args = p.parse_args()

    returns = run_random(args.episodes, args.max_steps, args.seed)
    print(f"Random agent mean return: {sum(returns) / max(1, len(returns)):.2f}")


if __name__ == "__main__":  # pragma: no cover
    main()
