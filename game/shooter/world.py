"""
World state for one shooter run
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

import numpy as np

from . import config
from .entities import (
    Asteroid,
    Entity,
    EntityKind,
    InputFlags,
    Star,
    WeaponMode,
)
from .utils import make_rng


def make_player(height: float) -> Entity:
    p = config.PLAYER_CONFIG
    return Entity(
        x=p["x"],
        y=height / 2,
        width=p["width"],
        height=p["height"],
        kind=EntityKind.PLAYER,
        hp=p["max_hp"],
        max_hp=p["max_hp"],
        color=p["color"],
    )


@dataclass
class World:
    """
    Everything mutable about a single run.

    A World is created when a level starts and thrown away when the run ends;
    nothing carries over except the externally stored unlocked level.
    """
    level: int
    width: float
    height: float
    player: Entity
    rng: np.random.Generator
    difficulty: float = 1.0

    enemies: List[Entity] = field(default_factory=list)      # enemies, boss and boss shots
    projectiles: List[Entity] = field(default_factory=list)  # player shots
    particles: List[Entity] = field(default_factory=list)
    pickups: List[Entity] = field(default_factory=list)
    stars: List[Star] = field(default_factory=list)
    asteroids: List[Asteroid] = field(default_factory=list)

    keys: InputFlags = field(default_factory=InputFlags)
    last_shot: Optional[float] = None  # ms timestamp
    fire_rate: float = config.WEAPON_CONFIG["fire_rate"]
    weapon_mode: WeaponMode = WeaponMode.NORMAL
    score: int = 0
    frame_count: int = 0
    scenery_ready: bool = False
    reported: Optional[Tuple[int, float, float]] = None  # last (score, hp, max_hp) handed out

    @classmethod
    def create(
        cls,
        level: int,
        width: float = config.WIDTH,
        height: float = config.HEIGHT,
        rng: Optional[np.random.Generator] = None,
    ) -> "World":
        if level not in config.BOSS_CONFIG:
            raise ValueError(f"level must be between 1 and {config.MAX_LEVEL}, got {level}")
        return cls(
            level=level,
            width=width,
            height=height,
            player=make_player(height),
            rng=rng if rng is not None else make_rng(),
            difficulty=config.difficulty_multiplier(level),
        )

    @property
    def boss(self) -> Optional[Entity]:
        for e in self.enemies:
            if e.is_boss and not e.remove:
                return e
        return None

    @property
    def boss_active(self) -> bool:
        return self.boss is not None

    @property
    def max_hp(self) -> float:
        return self.player.max_hp or config.PLAYER_CONFIG["max_hp"]

    def live(self, entities: List[Entity]) -> Iterator[Entity]:
        """Entities not yet flagged for removal"""
        return (e for e in entities if not e.remove)

    def add_score(self, points: int):
        if points > 0:
            self.score += points

    def damage_player(self, amount: float):
        self.player.hp = max(0.0, self.player.hp - amount)

    def purge(self):
        """Drop everything flagged for removal"""
        self.enemies = [e for e in self.enemies if not e.remove]
        self.projectiles = [e for e in self.projectiles if not e.remove]
        self.pickups = [e for e in self.pickups if not e.remove]
        self.particles = [e for e in self.particles if not e.remove]

    # ----------------------------
    # Scenery
    # ----------------------------

    def init_scenery(self):
        rng = self.rng
        self.stars = [
            Star(
                x=float(rng.random() * self.width),
                y=float(rng.random() * self.height),
                size=float(rng.random() * 2 + 0.5),
                speed=float(rng.random() * 3 + 0.5),
            )
            for _ in range(config.STAR_COUNT)
        ]

        self.asteroids = []
        color = config.LEVEL_PALETTES[self.level]["asteroid"]
        for _ in range(config.ASTEROID_COUNTS.get(self.level, 0)):
            sides = 5 + int(rng.integers(0, 4))
            points = []
            for j in range(sides):
                angle = (j / sides) * math.pi * 2
                radius = 20 + rng.random() * 20
                points.append((math.cos(angle) * radius, math.sin(angle) * radius))
            self.asteroids.append(Asteroid(
                x=float(rng.random() * self.width),
                y=float(rng.random() * self.height),
                size=float(30 + rng.random() * 40),
                speed=float(rng.random() * 0.5 + 0.2),
                rotation=float(rng.random() * math.pi),
                rotation_speed=float((rng.random() - 0.5) * 0.02),
                color=color,
                points=points,
            ))
        self.scenery_ready = True

    def scroll_scenery(self):
        mult = config.BOSS_STAR_SPEED_MULT if self.boss_active else 1.0
        for s in self.stars:
            s.x -= s.speed * mult
            if s.x < 0:
                s.x = self.width
        for a in self.asteroids:
            a.x -= a.speed
            a.rotation += a.rotation_speed
            if a.x + 100 < 0:
                a.x = self.width + 100
                a.y = float(self.rng.random() * self.height)
