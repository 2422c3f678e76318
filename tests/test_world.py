import pytest

from game.shooter import EntityKind, WeaponMode, World, config
from game.shooter.utils import clamp, rect_intersect, weighted_pick
from tests.helpers import ScriptedRng, enemy_at


def test_rect_intersect_is_inclusive():
    a = enemy_at(0, 0, width=10, height=10)
    assert rect_intersect(a, enemy_at(10, 10, width=5, height=5))   # corners touch
    assert not rect_intersect(a, enemy_at(10.1, 0, width=5, height=5))
    assert rect_intersect(a, enemy_at(-3, -3, width=20, height=20))  # containment


def test_weighted_pick_buckets():
    table = [("a", 0.5), ("b", 0.25)]
    assert weighted_pick(0.0, table, "z") == "a"
    assert weighted_pick(0.5, table, "z") == "b"
    assert weighted_pick(0.8, table, "z") == "z"


def test_clamp():
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0
    assert clamp(2, 0, 3) == 2


def test_create_fresh_world():
    world = World.create(2, width=800, height=600, rng=ScriptedRng())
    assert world.player.kind is EntityKind.PLAYER
    assert world.player.hp == 100 and world.max_hp == 100
    assert world.player.x == 100 and world.player.y == 300
    assert world.score == 0
    assert world.weapon_mode is WeaponMode.NORMAL
    assert world.fire_rate == 250
    assert world.difficulty == pytest.approx(1.4)
    assert not world.enemies and not world.projectiles and not world.pickups and not world.particles
    assert not world.boss_active


@pytest.mark.parametrize("level", [0, 4, -1])
def test_create_rejects_unknown_level(level):
    with pytest.raises(ValueError):
        World.create(level)


@pytest.mark.parametrize("level, asteroids", [(1, 0), (2, 5), (3, 12)])
def test_scenery_depends_on_level(make_world, level, asteroids):
    world = make_world(level)
    world.init_scenery()
    assert world.scenery_ready
    assert len(world.stars) == config.STAR_COUNT
    assert len(world.asteroids) == asteroids
    for a in world.asteroids:
        assert 5 <= len(a.points) <= 8
        assert a.color == config.LEVEL_PALETTES[level]["asteroid"]


def test_scenery_wraps_around(make_world):
    world = make_world(2)
    world.init_scenery()
    star = world.stars[0]
    star.x = 0.1
    star.speed = 1.0
    rock = world.asteroids[0]
    rock.x = -99.9
    rock.speed = 1.0
    world.scroll_scenery()
    assert star.x == world.width
    assert rock.x == world.width + 100


def test_stars_scroll_faster_during_boss(make_world):
    world = make_world(1)
    world.init_scenery()
    world.enemies.append(enemy_at(500, 100, kind=EntityKind.BOSS))
    star = world.stars[0]
    star.x, star.speed = 500.0, 1.0
    world.scroll_scenery()
    assert star.x == pytest.approx(500.0 - config.BOSS_STAR_SPEED_MULT)


def test_boss_active_tracks_boss_entity(world):
    boss = enemy_at(500, 100, kind=EntityKind.BOSS)
    world.enemies.append(boss)
    assert world.boss is boss and world.boss_active
    boss.remove = True
    assert not world.boss_active
    world.purge()
    assert world.enemies == []


def test_damage_never_goes_below_zero(world):
    world.damage_player(500)
    assert world.player.hp == 0


def test_score_never_decreases(world):
    world.add_score(50)
    world.add_score(-20)
    assert world.score == 50
