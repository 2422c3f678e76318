"""
ShooterEnv - headless gymnasium wrapper around one shooter run
--------------------------------------------------------------
- Same World / Simulation the playable screen uses
- Gymnasium API, seeded through ``reset(seed=...)``
- MultiDiscrete action space: [vertical(3), horizontal(3), fire(2)]
- Vector observation: player state + top-K nearest enemies + top-M nearest pickups
- Episode ends on defeat or when the boss dies

Quick test:
    python -m game.shooter.shooter_env
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from . import config
from .entities import InputFlags, WeaponMode
from .simulation import Simulation, StepReport
from .utils import clamp
from .world import World


class ShooterEnv(gym.Env):
    """Side-scrolling shooter level as an RL environment"""

    metadata = {"render_modes": ["human"], "render_fps": config.FPS}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        level: int = 1,
        width: int = config.WIDTH,
        height: int = config.HEIGHT,
        fps: int = config.FPS,
        max_steps: int = 3600,  # 60s at 60 FPS
        k_enemies: int = 5,
        m_pickups: int = 2,
        score_scale: float = 50.0,
        damage_scale: float = 20.0,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"]
        if level not in config.BOSS_CONFIG:
            raise ValueError(f"level must be between 1 and {config.MAX_LEVEL}, got {level}")

        self.render_mode = render_mode
        self.level = level
        self.width = width
        self.height = height
        self.frame_ms = 1000.0 / fps
        self.max_steps = max_steps
        self.k_enemies = k_enemies
        self.m_pickups = m_pickups
        self.score_scale = score_scale
        self.damage_scale = damage_scale

        # vertical: 0 none, 1 up, 2 down
        # horizontal: 0 none, 1 left, 2 right
        # fire: 0/1
        self.action_space = spaces.MultiDiscrete([3, 3, 2])

        # Player: pos(2) hp(1) shielded(1) weapon(2) boss(1)
        # Each enemy: rel pos(2) hp(1) is_boss(1)
        # Each pickup: rel pos(2)
        obs_dim = 7 + (self.k_enemies * 4) + (self.m_pickups * 2)
        self.observation_space = spaces.Box(low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32)

        self.simulation = Simulation()
        self.world: World = None  # type: ignore
        self._step_count = 0
        self._last_report: Optional[StepReport] = None
        self._window = None

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        level = (options or {}).get("level", self.level)

        self.world = World.create(level, self.width, self.height, rng=self.np_random)
        self._step_count = 0
        self._last_report = None

        return self._get_obs(), self._get_info()

    def step(self, action):
        vertical, horizontal, fire = int(action[0]), int(action[1]), int(action[2])
        keys = InputFlags(
            up=vertical == 1,
            down=vertical == 2,
            left=horizontal == 1,
            right=horizontal == 2,
            fire=fire == 1,
        )

        prev_score = self.world.score
        now = self._step_count * self.frame_ms
        report = self.simulation.step(self.world, now, keys)
        self._last_report = report
        self._step_count += 1

        reward = (report.score - prev_score) / self.score_scale
        reward -= report.events.damage / self.damage_scale

        terminated = report.defeated or report.victorious
        truncated = self._step_count >= self.max_steps

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), float(reward), terminated, truncated, self._get_info()

    # ----------------------------
    # Observation / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        w = self.world
        p = w.player
        px, py = p.center_x, p.center_y

        obs_parts = [
            (px / w.width) * 2 - 1,
            (py / w.height) * 2 - 1,
            (p.hp / w.max_hp) * 2 - 1,
            1.0 if w.max_hp > config.PLAYER_CONFIG["max_hp"] else -1.0,
            1.0 if w.weapon_mode is WeaponMode.SPREAD else -1.0,
            1.0 if w.weapon_mode is WeaponMode.RAPID else -1.0,
            1.0 if w.boss_active else -1.0,
        ]

        enemies_sorted = sorted(
            w.enemies,
            key=lambda e: (e.center_x - px) ** 2 + (e.center_y - py) ** 2
        )
        for i in range(self.k_enemies):
            if i < len(enemies_sorted):
                e = enemies_sorted[i]
                hp_ref = e.max_hp or config.ENEMY_ARCHETYPES["tank"]["hp"] * w.difficulty
                obs_parts += [
                    clamp((e.center_x - px) / w.width, -1, 1),
                    clamp((e.center_y - py) / w.height, -1, 1),
                    clamp(e.hp / hp_ref, -1, 1),
                    1.0 if e.is_boss else -1.0,
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0]

        pickups_sorted = sorted(
            w.pickups,
            key=lambda e: (e.center_x - px) ** 2 + (e.center_y - py) ** 2
        )
        for i in range(self.m_pickups):
            if i < len(pickups_sorted):
                e = pickups_sorted[i]
                obs_parts += [
                    clamp((e.center_x - px) / w.width, -1, 1),
                    clamp((e.center_y - py) / w.height, -1, 1),
                ]
            else:
                obs_parts += [0.0, 0.0]

        return np.clip(np.array(obs_parts, dtype=np.float32), -1.0, 1.0)

    def _get_info(self) -> Dict[str, Any]:
        report = self._last_report
        return {
            "score": self.world.score,
            "hp": self.world.player.hp,
            "max_hp": self.world.max_hp,
            "boss_active": self.world.boss_active,
            "num_enemies": len(self.world.enemies),
            "num_projectiles": len(self.world.projectiles),
            "num_pickups": len(self.world.pickups),
            "num_particles": len(self.world.particles),
            "defeated": bool(report and report.defeated),
            "victorious": bool(report and report.victorious),
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            from .renderer import WorldWindow
            self._window = WorldWindow(lambda: self.world, self.width, self.height, "ShooterEnv")

        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = False, seed: int = 42, level: int = 1):
    """Run a random episode and return (total_reward, info)"""
    env = ShooterEnv(render_mode="human" if render else None, level=level)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

    env.close()
    return total, info


if __name__ == "__main__":
    total, info = run_random_episode(render=False)
    print(f"Random episode return: {total:.2f}  score={info['score']}  hp={info['hp']:.0f}")
