import pytest

from game.shooter import (
    BossStyle,
    EnemyArchetype,
    EntityKind,
    PickupArchetype,
    SpawnDirector,
    config,
)
from tests.helpers import ScriptedRng, count_kind


@pytest.fixture
def director():
    return SpawnDirector()


@pytest.mark.parametrize("score, size", [(0, 1), (799, 1), (800, 2), (1600, 3), (2400, 4), (99999, 4)])
def test_wave_size_grows_with_score_and_is_capped(score, size):
    assert SpawnDirector.wave_size(score) == size


def test_waves_only_on_interval(director, world):
    for _ in range(config.WAVE_INTERVAL_FRAMES - 1):
        director.update(world)
    assert world.enemies == []
    director.update(world)
    assert len(world.enemies) == 1
    assert world.enemies[0].x == world.width + config.ENEMY_SPAWN_X_OFFSET


def test_wave_batch_uses_score(director, world):
    world.score = 900
    world.frame_count = config.WAVE_INTERVAL_FRAMES - 1
    director.update(world)
    assert count_kind(world, EntityKind.ENEMY) == 2


@pytest.mark.parametrize("draw, expected", [
    (0.10, EnemyArchetype.BASIC),
    (0.60, EnemyArchetype.FAST),
    (0.75, EnemyArchetype.TANK),
    (0.90, EnemyArchetype.BASIC),  # no trackers on level 1
])
def test_archetype_draw_level_one(director, make_world, draw, expected):
    world = make_world(1, rng=ScriptedRng([draw, 0.5]))
    enemy = director.spawn_enemy(world)
    assert enemy.sub_kind is expected


def test_tracker_appears_from_level_two(director, make_world):
    world = make_world(2, rng=ScriptedRng([0.9, 0.0]))
    enemy = director.spawn_enemy(world)
    assert enemy.sub_kind is EnemyArchetype.TRACKER
    assert enemy.y == 0.0


def test_archetype_stats_scale_with_difficulty(director, make_world):
    world = make_world(2, rng=ScriptedRng([0.75, 0.5]))
    tank = director.spawn_enemy(world)
    spec = config.ENEMY_ARCHETYPES["tank"]
    assert (tank.width, tank.height) == (spec["width"], spec["height"])
    assert tank.hp == pytest.approx(spec["hp"] * 1.4)
    assert tank.vx == pytest.approx(-spec["speed"] * 1.4)
    assert tank.y == pytest.approx(0.5 * (world.height - spec["height"]))


def test_seeded_mix_has_no_trackers_on_level_one(director, make_world, seeded_rng):
    world = make_world(1, rng=seeded_rng)
    kinds = {director.spawn_enemy(world).sub_kind for _ in range(300)}
    assert EnemyArchetype.TRACKER not in kinds
    assert {EnemyArchetype.BASIC, EnemyArchetype.FAST, EnemyArchetype.TANK} <= kinds


@pytest.mark.parametrize("level, hp, style, size", [
    (1, 60, BossStyle.TANK, 150),
    (2, 100, BossStyle.SAUCER, 150),
    (3, 120, BossStyle.SPIKY, 180),
])
def test_boss_stats_per_level(director, make_world, level, hp, style, size):
    world = make_world(level)
    world.score = config.BOSS_SCORE_THRESHOLD
    director.update(world)

    assert count_kind(world, EntityKind.BOSS) == 1
    boss = world.boss
    assert boss.hp == hp and boss.max_hp == hp
    assert boss.sub_kind is style
    assert boss.width == size and boss.height == size
    assert boss.x == world.width + config.BOSS_ENTRY_OFFSET
    assert boss.y == world.height / 2 - size / 2
    assert world.boss_active


def test_boss_is_unique(director, world):
    world.score = 5000
    for _ in range(5):
        director.update(world)
    first = world.boss
    assert director.spawn_boss(world) is first
    assert count_kind(world, EntityKind.BOSS) == 1


def test_no_waves_while_boss_active(director, world):
    world.score = config.BOSS_SCORE_THRESHOLD
    director.update(world)
    before = count_kind(world, EntityKind.ENEMY)
    for _ in range(config.WAVE_INTERVAL_FRAMES * 3):
        director.update(world)
    assert count_kind(world, EntityKind.ENEMY) == before == 0


def test_boss_fire_single_shot(director, make_world):
    world = make_world(1, rng=ScriptedRng([0.0, 1.0]))
    boss = director.spawn_boss(world)
    shots = director.boss_fire(world, boss)
    assert len(shots) == 1
    shot = shots[0]
    assert shot.kind is EntityKind.OBSTACLE
    assert shot.vx == -4.0 and shot.vy == pytest.approx(3.0)
    assert shot.y == boss.y + boss.height / 2
    # not added by the director itself
    assert shot not in world.enemies


def test_boss_fire_spread_on_level_three(director, make_world):
    world = make_world(3, rng=ScriptedRng([0.0]))
    boss = director.spawn_boss(world)
    shots = director.boss_fire(world, boss)
    assert sorted(s.vy for s in shots) == [-2.0, 0.0, 2.0]
    assert all(s.vx == -5.0 and s.width == 15.0 for s in shots)


def test_boss_fire_chance_scales_with_difficulty(director, make_world):
    # level 2: 0.05 * 1.4 = 0.07
    world = make_world(2, rng=ScriptedRng([0.069, 0.5, 0.071]))
    boss = director.spawn_boss(world)
    assert len(director.boss_fire(world, boss)) == 1
    assert director.boss_fire(world, boss) == []


@pytest.mark.parametrize("draw, expected", [
    (0.10, PickupArchetype.SPREAD),
    (0.45, PickupArchetype.RAPID),
    (0.70, PickupArchetype.SHIELD),
    (0.95, PickupArchetype.HEALTH),
])
def test_pickup_drop_archetypes(director, make_world, draw, expected):
    world = make_world(1, rng=ScriptedRng([0.1, draw]))
    pickup = director.drop_pickup(world, 300, 200)
    assert pickup.sub_kind is expected
    assert pickup.kind is EntityKind.PICKUP
    assert (pickup.x, pickup.y) == (300, 200)
    assert world.pickups == [pickup]


def test_pickup_drop_chance(director, make_world):
    world = make_world(1, rng=ScriptedRng([0.3]))
    assert director.drop_pickup(world, 0, 0) is None
    assert world.pickups == []


def test_explosion_particles(director, world):
    director.explode(world, 10, 20, "#fff", 7)
    assert len(world.particles) == 7
    assert all(p.kind is EntityKind.PARTICLE and p.width == config.PARTICLE_SIZE for p in world.particles)
