"""
Evaluation script for scripted policies on the headless shooter
"""

import argparse
from typing import Callable, Dict, Optional

import numpy as np

from game.shooter import ShooterEnv
from rl.configs.shooter_config import (
    ENV_CONFIG,
    EVAL_CONFIG,
    TRACKER_POLICY_CONFIG,
    get_evaluation_matrix,
)

Policy = Callable[[np.ndarray, ShooterEnv], np.ndarray]


def random_policy(obs: np.ndarray, env: ShooterEnv) -> np.ndarray:
    return env.action_space.sample()


def tracker_policy(obs: np.ndarray, env: ShooterEnv) -> np.ndarray:
    """
    Hold fire and move vertically towards the nearest enemy.
    Observation layout: [px, py, hp, shield, spread, rapid, boss, (dx, dy, hp, boss) * k, ...]
    """
    cfg = TRACKER_POLICY_CONFIG
    px = obs[0]
    dy = obs[8]
    has_enemy = bool(obs[7] != 0.0 or obs[8] != 0.0)

    vertical = 0
    if has_enemy and abs(dy) > cfg["deadzone"]:
        vertical = 2 if dy > 0 else 1
    horizontal = 1 if px > cfg["min_player_x"] else 0
    return np.array([vertical, horizontal, 1], dtype=np.int64)


POLICIES: Dict[str, Policy] = {
    "random": random_policy,
    "tracker": tracker_policy,
}


def evaluate_policy(
    policy: str = "random",
    level: int = 1,
    n_episodes: int = 5,
    seed: Optional[int] = None,
    render: bool = False,
    verbose: bool = True,
):
    """
    Evaluate a scripted policy

    Args:
        policy: Policy name ('random' or 'tracker')
        level: Level to play (1-3)
        n_episodes: Number of episodes to evaluate
        seed: Base seed; episode i uses seed + i
        render: Whether to open an arcade window
    """
    if policy not in POLICIES:
        raise ValueError(f"Unknown policy: {policy}")
    act = POLICIES[policy]

    env_kwargs = dict(ENV_CONFIG, level=level)
    env = ShooterEnv(render_mode="human" if render else None, **env_kwargs)
    if seed is not None:
        env.action_space.seed(seed)

    episode_rewards = []
    episode_lengths = []
    episode_scores = []
    survived = []
    wins = []

    for episode in range(n_episodes):
        obs, info = env.reset(seed=seed + episode if seed is not None else None)

        terminated = False
        truncated = False
        total_reward = 0.0
        steps = 0

        while not (terminated or truncated):
            action = act(obs, env)
            obs, reward, terminated, truncated, info = env.step(action)
            total_reward += reward
            steps += 1

        episode_rewards.append(total_reward)
        episode_lengths.append(steps)
        episode_scores.append(info["score"])
        survived.append(not info["defeated"])
        wins.append(info["victorious"])

        if verbose:
            print(f"Episode {episode + 1}/{n_episodes}: "
                  f"Reward = {total_reward:.2f}, Score = {info['score']}, Length = {steps}")

    env.close()

    results = {
        "mean_reward": float(np.mean(episode_rewards)),
        "std_reward": float(np.std(episode_rewards)),
        "mean_length": float(np.mean(episode_lengths)),
        "mean_score": float(np.mean(episode_scores)),
        "survival_rate": float(np.mean(survived)),
        "win_rate": float(np.mean(wins)),
        "episode_rewards": episode_rewards,
    }

    if verbose:
        print("\n" + "=" * 50)
        print(f"{policy} policy on level {level} ({n_episodes} episodes):")
        print(f"Mean Reward: {results['mean_reward']:.2f} ± {results['std_reward']:.2f}")
        print(f"Mean Score: {results['mean_score']:.1f}")
        print(f"Survival Rate: {results['survival_rate']:.0%}  Win Rate: {results['win_rate']:.0%}")
        print("=" * 50)

    return results


def main():
    parser = argparse.ArgumentParser(description="Evaluate scripted policies on the shooter")
    parser.add_argument("--policy", type=str, default="all", choices=["all"] + list(POLICIES),
                        help="Policy to evaluate")
    parser.add_argument("--level", type=int, default=None, choices=[1, 2, 3],
                        help="Level to play (default: every level in EVAL_CONFIG)")
    parser.add_argument("--episodes", type=int, default=EVAL_CONFIG["n_episodes"],
                        help="Episodes per seed")
    parser.add_argument("--render", action="store_true", help="Render with arcade")
    args = parser.parse_args()

    policies = list(POLICIES) if args.policy == "all" else [args.policy]
    levels = [args.level] if args.level else EVAL_CONFIG["levels"]

    summary = []
    for run in get_evaluation_matrix():
        if run["policy"] not in policies or run["level"] not in levels:
            continue
        res = evaluate_policy(run["policy"], run["level"], args.episodes, run["seed"], args.render, verbose=False)
        summary.append((run["policy"], run["level"], run["seed"], res))

    print(f"{'policy':10} {'level':>5} {'seed':>6} {'score':>8} {'survive':>8} {'win':>6}")
    print("-" * 48)
    for policy, level, seed, res in summary:
        print(f"{policy:10} {level:>5} {seed:>6} {res['mean_score']:>8.1f} "
              f"{res['survival_rate']:>8.0%} {res['win_rate']:>6.0%}")


if __name__ == "__main__":
    main()
