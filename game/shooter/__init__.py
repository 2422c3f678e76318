"""2D side-scrolling shooter - simulation core, run state machine, arcade front end"""

from .entities import (
    BossStyle,
    EnemyArchetype,
    Entity,
    EntityKind,
    InputFlags,
    PickupArchetype,
    WeaponMode,
)
from .world import World
from .spawner import SpawnDirector
from .collisions import CollisionResolver, CollisionEvents
from .simulation import Simulation, StepReport
from .progress import JsonProgressStore, MemoryProgressStore, ProgressStore
from .session import Command, LevelView, RunStatus, ShooterSession
from .shooter_env import ShooterEnv, run_random_episode

__all__ = [
    'BossStyle', 'EnemyArchetype', 'Entity', 'EntityKind', 'InputFlags',
    'PickupArchetype', 'WeaponMode', 'World', 'SpawnDirector',
    'CollisionResolver', 'CollisionEvents', 'Simulation', 'StepReport',
    'JsonProgressStore', 'MemoryProgressStore', 'ProgressStore',
    'Command', 'LevelView', 'RunStatus', 'ShooterSession',
    'ShooterEnv', 'run_random_episode',
]
