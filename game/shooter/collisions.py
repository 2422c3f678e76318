"""
Collision and damage resolution.

Overlaps are tested on bounding boxes only. Effects flag entities with
``remove`` instead of deleting them; the simulation purges once per frame.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from . import config
from .entities import Entity, PickupArchetype, WeaponMode
from .spawner import SpawnDirector
from .utils import rect_intersect
from .world import World


@dataclass
class CollisionEvents:
    """What happened during one resolution pass"""
    damage: float = 0.0
    hits: int = 0
    kills: int = 0
    pickups: int = 0
    boss_killed: bool = False


# ----------------------------
# Pickup effects
# ----------------------------

def _apply_spread(world: World):
    world.weapon_mode = WeaponMode.SPREAD
    world.fire_rate = config.WEAPON_CONFIG["fire_rate"]


def _apply_rapid(world: World):
    world.weapon_mode = WeaponMode.RAPID
    world.fire_rate = config.WEAPON_CONFIG["rapid_fire_rate"]


def _apply_shield(world: World):
    shielded = config.PLAYER_CONFIG["shielded_max_hp"]
    world.player.max_hp = shielded
    world.player.hp = shielded


def _apply_health(world: World):
    world.player.hp = world.max_hp


PICKUP_EFFECTS: Dict[PickupArchetype, Callable[[World], None]] = {
    PickupArchetype.SPREAD: _apply_spread,
    PickupArchetype.RAPID: _apply_rapid,
    PickupArchetype.SHIELD: _apply_shield,
    PickupArchetype.HEALTH: _apply_health,
}


def apply_pickup(world: World, archetype: PickupArchetype):
    PICKUP_EFFECTS[archetype](world)


class CollisionResolver:
    """Pairwise overlap tests and their effects, evaluated once per frame"""

    def __init__(self, director: SpawnDirector, contact_damage: float = config.CONTACT_DAMAGE):
        self.director = director
        self.contact_damage = contact_damage

    def resolve(self, world: World) -> CollisionEvents:
        events = CollisionEvents()
        self._player_vs_enemies(world, events)
        self._player_vs_pickups(world, events)
        self._projectiles_vs_enemies(world, events)
        return events

    def _player_vs_enemies(self, world: World, events: CollisionEvents):
        player = world.player
        for e in world.live(world.enemies):
            if not rect_intersect(player, e):
                continue
            # Re-applied every frame the overlap lasts (bosses are never removed)
            world.damage_player(self.contact_damage)
            events.damage += self.contact_damage
            self.director.explode(world, player.x, player.y, player.color,
                                  config.EXPLOSION_COUNTS["player_hit"])
            if not e.is_boss:
                e.remove = True
                self.director.explode(world, e.x, e.y, e.color, config.EXPLOSION_COUNTS["enemy"])

    def _player_vs_pickups(self, world: World, events: CollisionEvents):
        for p in world.live(world.pickups):
            if rect_intersect(world.player, p):
                p.remove = True
                apply_pickup(world, p.sub_kind)
                events.pickups += 1

    def _projectiles_vs_enemies(self, world: World, events: CollisionEvents):
        for b in world.projectiles:
            for e in world.enemies:
                if b.remove or e.remove or not rect_intersect(b, e):
                    continue
                b.remove = True
                e.hp -= 1
                events.hits += 1
                if e.hp <= 0:
                    self._kill(world, e, events)
                else:
                    self.director.explode(world, b.x, b.y, config.WEAPON_CONFIG["color"],
                                          config.EXPLOSION_COUNTS["hit"])

    def _kill(self, world: World, e: Entity, events: CollisionEvents):
        e.remove = True
        events.kills += 1
        world.add_score(config.BOSS_BONUS if e.is_boss else config.ENEMY_BONUS)
        self.director.drop_pickup(world, e.x, e.y)
        count = config.EXPLOSION_COUNTS["boss" if e.is_boss else "enemy"]
        self.director.explode(world, e.x, e.y, e.color, count)
        if e.is_boss:
            events.boss_killed = True
