# src/snake_rl/run.py
from __future__ import annotations
import argparse
import csv
import logging
import os
from typing import List, Tuple

from snake_game.config import CFG, BoundaryPolicy
from snake_rl.env import SnakeRLEnv
from snake_rl.policies import POLICIES

logger = logging.getLogger(__name__)

MAX_STEPS = 10_000


# --------------------------
# Episode loop
# --------------------------
def run_episode(env: SnakeRLEnv, policy: str, epsilon: float) -> Tuple[int, float, int]:
    """
    Run a single episode with a scripted policy (random, greedy, eps-greedy).

    Returns:
        steps: number of steps taken
        total: total return (sum of rewards)
        score: food eaten before the episode ended
    """
    try:
        act = POLICIES[policy]
    except KeyError:
        raise ValueError(f"Unknown policy: {policy}") from None

    obs = env.reset()
    total = 0.0
    steps = 0
    info = {}

    while True:
        a = act(obs, env, epsilon)
        obs, r, done, info = env.step(a)
        total += r
        steps += 1

        if done or steps >= MAX_STEPS:
            break

    return steps, total, info.get("score", 0)


def run_episodes(env: SnakeRLEnv, episodes: int, policy: str, epsilon: float) -> List[tuple]:
    rows = [("ep", "steps", "return", "score")]
    for ep in range(1, episodes + 1):
        steps, ret, score = run_episode(env, policy, epsilon)
        logger.info("ep=%d steps=%d return=%.3f score=%d", ep, steps, ret, score)
        rows.append((ep, steps, float(f"{ret:.6f}"), score))
    return rows


# --------------------------
# Main
# --------------------------
def main(argv=None):
    parser = argparse.ArgumentParser(description="Run scripted policies on headless Snake.")
    parser.add_argument("--episodes", type=int, default=50)
    parser.add_argument(
        "--policy",
        type=str,
        default="random",
        choices=sorted(POLICIES),
    )
    parser.add_argument(
        "--epsilon",
        type=float,
        default=0.1,
        help="epsilon for eps-greedy",
    )
    parser.add_argument("--walls", action="store_true", help="leaving the arena ends the episode")
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument(
        "--outdir",
        type=str,
        default="data/runs",
        help="CSV will be saved here",
    )
    parser.add_argument("--log-level", type=str, default="INFO")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    cfg = CFG.replace(boundary=BoundaryPolicy.WALL if args.walls else BoundaryPolicy.WRAP)
    env = SnakeRLEnv(config=cfg, seed_value=args.seed)

    logger.info("Running %d episode(s) with policy=%s ε=%s", args.episodes, args.policy, args.epsilon)
    rows = run_episodes(env, args.episodes, args.policy, args.epsilon)

    os.makedirs(args.outdir, exist_ok=True)
    out_csv = os.path.join(args.outdir, f"rl_{args.policy}.csv")
    with open(out_csv, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerows(rows)

    logger.info("Saved results → %s", out_csv)


if __name__ == "__main__":
    main()
