"""
Spawn director: enemy waves, the boss, boss shots, pickups and explosions.

All draws go through ``world.rng`` so a seeded generator replays a run exactly.
"""

from __future__ import annotations

import logging
from typing import List

from . import config
from .entities import (
    BossStyle,
    EnemyArchetype,
    Entity,
    EntityKind,
    PickupArchetype,
)
from .utils import weighted_pick
from .world import World

logger = logging.getLogger(__name__)


class SpawnDirector:
    """Decides what enters the world and when"""

    def __init__(
        self,
        wave_interval: int = config.WAVE_INTERVAL_FRAMES,
        boss_threshold: int = config.BOSS_SCORE_THRESHOLD,
        pickup_chance: float = config.PICKUP_DROP_CHANCE,
    ):
        self.wave_interval = wave_interval
        self.boss_threshold = boss_threshold
        self.pickup_chance = pickup_chance

    def update(self, world: World):
        """Per-frame spawning; called once per step after input"""
        world.frame_count += 1

        if world.boss_active:
            return

        if world.frame_count % self.wave_interval == 0:
            for _ in range(self.wave_size(world.score)):
                self.spawn_enemy(world)

        if world.score >= self.boss_threshold:
            self.spawn_boss(world)

    @staticmethod
    def wave_size(score: int) -> int:
        return min(1 + score // config.WAVE_SCORE_STEP, config.WAVE_MAX_SIZE)

    # ----------------------------
    # Enemies
    # ----------------------------

    def pick_archetype(self, world: World) -> EnemyArchetype:
        table = [
            (EnemyArchetype(name), spec["weight"])
            for name, spec in config.ENEMY_ARCHETYPES.items()
            if world.level >= spec["min_level"]
        ]
        return weighted_pick(float(world.rng.random()), table, EnemyArchetype.BASIC)

    def spawn_enemy(self, world: World) -> Entity:
        archetype = self.pick_archetype(world)
        spec = config.ENEMY_ARCHETYPES[archetype.value]
        mult = world.difficulty

        enemy = Entity(
            x=world.width + config.ENEMY_SPAWN_X_OFFSET,
            y=float(world.rng.random() * (world.height - spec["height"])),
            width=spec["width"],
            height=spec["height"],
            vx=-spec["speed"] * mult,
            vy=0.0,
            hp=spec["hp"] * mult,
            kind=EntityKind.ENEMY,
            sub_kind=archetype,
            color=spec["color"],
        )
        world.enemies.append(enemy)
        return enemy

    # ----------------------------
    # Boss
    # ----------------------------

    def spawn_boss(self, world: World) -> Entity:
        existing = world.boss
        if existing is not None:
            return existing

        spec = config.BOSS_CONFIG[world.level]
        w, h = spec["width"], spec["height"]
        vx, vy = config.BOSS_VELOCITY
        boss = Entity(
            x=world.width + config.BOSS_ENTRY_OFFSET,
            y=world.height / 2 - h / 2,
            width=w,
            height=h,
            vx=vx,
            vy=vy,
            hp=spec["hp"],
            max_hp=spec["hp"],
            kind=EntityKind.BOSS,
            sub_kind=BossStyle(spec["style"]),
            color=spec["color"],
        )
        world.enemies.append(boss)
        logger.debug("Boss spawned on level %d (hp=%s)", world.level, boss.hp)
        return boss

    def boss_fire(self, world: World, boss: Entity) -> List[Entity]:
        """Roll for a boss volley; returned shots are not yet in the world"""
        spec = config.BOSS_CONFIG[world.level]
        if world.rng.random() >= spec["fire_chance"] * world.difficulty:
            return []

        y = boss.y + boss.height / 2
        if spec["spread"]:
            shot = config.BOSS_SHOT_CONFIG["spread"]
            return [
                Entity(x=boss.x, y=y, width=shot["width"], height=shot["height"],
                       vx=shot["vx"], vy=vy, kind=EntityKind.OBSTACLE, color=shot["color"])
                for vy in shot["vy"]
            ]

        shot = config.BOSS_SHOT_CONFIG["single"]
        vy = (float(world.rng.random()) - 0.5) * shot["vy_spread"]
        return [Entity(x=boss.x, y=y, width=shot["width"], height=shot["height"],
                       vx=shot["vx"], vy=vy, kind=EntityKind.OBSTACLE, color=shot["color"])]

    # ----------------------------
    # Pickups / effects
    # ----------------------------

    def pick_pickup(self, world: World) -> PickupArchetype:
        table = [
            (PickupArchetype(name), spec["weight"])
            for name, spec in config.PICKUP_ARCHETYPES.items()
        ]
        return weighted_pick(float(world.rng.random()), table, PickupArchetype.HEALTH)

    def drop_pickup(self, world: World, x: float, y: float):
        if world.rng.random() >= self.pickup_chance:
            return None

        archetype = self.pick_pickup(world)
        pickup = Entity(
            x=x,
            y=y,
            width=config.PICKUP_SIZE,
            height=config.PICKUP_SIZE,
            vx=-config.PICKUP_SPEED,
            kind=EntityKind.PICKUP,
            sub_kind=archetype,
            color=config.PICKUP_ARCHETYPES[archetype.value]["color"],
        )
        world.pickups.append(pickup)
        return pickup

    def explode(self, world: World, x: float, y: float, color: str, count: int):
        rng = world.rng
        speed = config.PARTICLE_SPEED
        for _ in range(count):
            world.particles.append(Entity(
                x=x,
                y=y,
                width=config.PARTICLE_SIZE,
                height=config.PARTICLE_SIZE,
                vx=(float(rng.random()) - 0.5) * speed,
                vy=(float(rng.random()) - 0.5) * speed,
                kind=EntityKind.PARTICLE,
                color=color,
            ))
