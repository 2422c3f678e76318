"""
Per-frame simulation step.

Order matters and is fixed:
  scenery init -> movement input -> fire input -> spawning -> motion ->
  collisions -> particle decay -> purge -> stat sync
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from . import config
from .collisions import CollisionEvents, CollisionResolver
from .entities import EnemyArchetype, Entity, EntityKind, InputFlags, WeaponMode
from .spawner import SpawnDirector
from .utils import clamp
from .world import World


@dataclass
class StepReport:
    """Externally visible result of one frame"""
    score: int
    hp: float
    max_hp: float
    changed: bool = False      # stats differ from the previous report
    defeated: bool = False
    victorious: bool = False
    events: CollisionEvents = field(default_factory=CollisionEvents)


class Simulation:
    """Advances a World one frame at a time"""

    def __init__(
        self,
        director: Optional[SpawnDirector] = None,
        resolver: Optional[CollisionResolver] = None,
        player_speed: float = config.PLAYER_CONFIG["speed"],
    ):
        self.director = director or SpawnDirector()
        self.resolver = resolver or CollisionResolver(self.director)
        self.player_speed = player_speed

    def step(self, world: World, now: float, keys: Optional[InputFlags] = None) -> StepReport:
        """
        Advance ``world`` by exactly one frame.

        Args:
            world: the live run
            now: wall-clock timestamp in milliseconds
            keys: input flags for this frame; defaults to ``world.keys``
        """
        if keys is not None:
            world.keys = keys

        if not world.scenery_ready:
            world.init_scenery()

        self._apply_move(world)
        self._apply_fire(world, now)
        self.director.update(world)
        self._advance(world)
        events = self.resolver.resolve(world)
        self._decay_particles(world)
        world.purge()
        return self._sync(world, events)

    # ----------------------------
    # Input
    # ----------------------------

    def _apply_move(self, world: World):
        p, keys, speed = world.player, world.keys, self.player_speed
        dx = (speed if keys.right else 0.0) - (speed if keys.left else 0.0)
        dy = (speed if keys.down else 0.0) - (speed if keys.up else 0.0)
        p.x = clamp(p.x + dx, 0.0, world.width - p.width)
        p.y = clamp(p.y + dy, 0.0, world.height - p.height)

    def _apply_fire(self, world: World, now: float):
        if not world.keys.fire:
            return
        if world.last_shot is not None and now - world.last_shot < world.fire_rate:
            return
        world.last_shot = now

        offsets = [0.0]
        if world.weapon_mode is WeaponMode.SPREAD:
            offsets.extend(config.WEAPON_CONFIG["spread_offsets"])
        for vy in offsets:
            world.projectiles.append(self._make_projectile(world.player, vy))

    @staticmethod
    def _make_projectile(player: Entity, vy: float) -> Entity:
        w = config.WEAPON_CONFIG
        return Entity(
            x=player.x + player.width,
            y=player.y + player.height / 2 - w["projectile_height"] / 2,
            width=w["projectile_width"],
            height=w["projectile_height"],
            vx=w["projectile_speed"],
            vy=vy,
            kind=EntityKind.PROJECTILE,
            color=w["color"],
        )

    # ----------------------------
    # Motion
    # ----------------------------

    def _advance(self, world: World):
        world.scroll_scenery()

        for b in world.projectiles:
            b.advance()
            if b.x > world.width:
                b.remove = True

        boss_shots = []
        for e in world.enemies:
            e.advance()
            if e.sub_kind is EnemyArchetype.TRACKER:
                self._track(world, e)
            if e.is_boss:
                self._steer_boss(world, e)
                boss_shots.extend(self.director.boss_fire(world, e))
            if e.x + e.width < 0:
                e.remove = True
        # Shots fired this frame start moving next frame
        world.enemies.extend(boss_shots)

        for p in world.pickups:
            p.advance()
            if p.x + p.width < 0:
                p.remove = True

    @staticmethod
    def _track(world: World, e: Entity):
        target = world.player.center_y
        if abs(target - e.center_y) > config.TRACKER_DEADZONE:
            e.y += config.TRACKER_EASE_SPEED if target > e.center_y else -config.TRACKER_EASE_SPEED

    @staticmethod
    def _steer_boss(world: World, boss: Entity):
        if boss.x < world.width - config.BOSS_HOLD_DISTANCE:
            boss.vx = 0.0
        bottom = max(0.0, world.height - boss.height)
        if boss.y + boss.height >= world.height:
            boss.vy = -abs(boss.vy)
        elif boss.y <= 0:
            boss.vy = abs(boss.vy)
        boss.y = clamp(boss.y, 0.0, bottom)

    @staticmethod
    def _decay_particles(world: World):
        for p in world.particles:
            p.advance()
            p.width *= config.PARTICLE_DECAY
            p.height *= config.PARTICLE_DECAY
            if p.width < config.PARTICLE_MIN_SIZE:
                p.remove = True

    # ----------------------------
    # Stats
    # ----------------------------

    @staticmethod
    def _sync(world: World, events: CollisionEvents) -> StepReport:
        player = world.player
        player.hp = clamp(player.hp, 0.0, world.max_hp)
        stats = (world.score, player.hp, world.max_hp)
        changed = stats != world.reported
        world.reported = stats
        return StepReport(
            score=world.score,
            hp=player.hp,
            max_hp=world.max_hp,
            changed=changed,
            defeated=player.hp <= 0,
            victorious=events.boss_killed and player.hp > 0,
            events=events,
        )
