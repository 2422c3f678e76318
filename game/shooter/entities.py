"""
Game entity dataclasses
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union


class EntityKind(str, Enum):
    """Top-level tag of a simulated object"""
    PLAYER = "player"
    ENEMY = "enemy"
    BOSS = "boss"
    PROJECTILE = "projectile"
    PARTICLE = "particle"
    PICKUP = "pickup"
    OBSTACLE = "obstacle"  # boss shots; live with the enemies


class EnemyArchetype(str, Enum):
    BASIC = "basic"
    FAST = "fast"
    TANK = "tank"
    TRACKER = "tracker"


class PickupArchetype(str, Enum):
    SPREAD = "spread"
    RAPID = "rapid"
    SHIELD = "shield"
    HEALTH = "health"


class BossStyle(str, Enum):
    TANK = "tank"
    SAUCER = "saucer"
    SPIKY = "spiky"


class WeaponMode(str, Enum):
    NORMAL = "normal"
    SPREAD = "spread"
    RAPID = "rapid"


SubKind = Union[EnemyArchetype, PickupArchetype, BossStyle]


@dataclass
class Entity:
    """Axis-aligned box with a velocity; the unit of simulation"""
    x: float
    y: float
    width: float
    height: float
    kind: EntityKind
    vx: float = 0.0
    vy: float = 0.0
    hp: float = 1.0
    max_hp: Optional[float] = None
    sub_kind: Optional[SubKind] = None
    color: str = "#ffffff"  # cosmetic
    remove: bool = False

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2

    @property
    def is_boss(self) -> bool:
        return self.kind is EntityKind.BOSS

    def advance(self):
        self.x += self.vx
        self.y += self.vy


@dataclass
class Star:
    """Background star, cosmetic"""
    x: float
    y: float
    size: float
    speed: float


@dataclass
class Asteroid:
    """Background asteroid, cosmetic; points are relative to (x, y)"""
    x: float
    y: float
    size: float
    speed: float
    rotation: float
    rotation_speed: float
    color: str
    points: List[Tuple[float, float]] = field(default_factory=list)


@dataclass
class InputFlags:
    """Held-down state of the player controls"""
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    fire: bool = False

    def clear(self):
        self.up = self.down = self.left = self.right = self.fire = False
