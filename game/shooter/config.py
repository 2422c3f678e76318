"""
Gameplay constants for the shooter
Tables are plain dicts keyed by archetype / level so they can be tweaked in one place.
"""

# Playfield defaults (the presentation layer may pass its own size)
WIDTH = 1000
HEIGHT = 700
FPS = 60

MAX_LEVEL = 3

# Player
PLAYER_CONFIG = {
    "x": 100.0,
    "width": 40.0,
    "height": 30.0,
    "speed": 6.0,        # px per frame, no acceleration
    "max_hp": 100,
    "shielded_max_hp": 200,
    "color": "#3b82f6",
}

# Player weapon
WEAPON_CONFIG = {
    "fire_rate": 250.0,        # ms between shots
    "rapid_fire_rate": 80.0,
    "projectile_width": 15.0,
    "projectile_height": 8.0,
    "projectile_speed": 10.0,
    "spread_offsets": (-2.0, 2.0),
    "color": "#fbbf24",
}

# Director
WAVE_INTERVAL_FRAMES = 60
WAVE_SCORE_STEP = 800      # one extra enemy per this many points
WAVE_MAX_SIZE = 4
BOSS_SCORE_THRESHOLD = 1000

# Scoring / damage
CONTACT_DAMAGE = 20
ENEMY_BONUS = 50
BOSS_BONUS = 1000

# Enemy archetypes, base values before the level multiplier.
# "weight" is the share of the [0, 1) draw, in declaration order.
ENEMY_ARCHETYPES = {
    "basic": {"weight": 0.55, "width": 30.0, "height": 30.0, "hp": 1.0, "speed": 3.0,
              "color": "#ef4444", "min_level": 1},
    "fast": {"weight": 0.15, "width": 20.0, "height": 15.0, "hp": 1.0, "speed": 6.0,
             "color": "#f97316", "min_level": 1},
    "tank": {"weight": 0.15, "width": 50.0, "height": 50.0, "hp": 5.0, "speed": 1.5,
             "color": "#a855f7", "min_level": 1},
    "tracker": {"weight": 0.15, "width": 25.0, "height": 25.0, "hp": 2.0, "speed": 4.0,
                "color": "#06b6d4", "min_level": 2},
}
ENEMY_SPAWN_X_OFFSET = 50.0
TRACKER_EASE_SPEED = 1.5
TRACKER_DEADZONE = 5.0

# Bosses, one per level
BOSS_CONFIG = {
    1: {"style": "tank", "width": 150.0, "height": 150.0, "hp": 60.0,
        "color": "#dc2626", "fire_chance": 0.02, "spread": False},
    2: {"style": "saucer", "width": 150.0, "height": 150.0, "hp": 100.0,
        "color": "#7e22ce", "fire_chance": 0.05, "spread": False},
    3: {"style": "spiky", "width": 180.0, "height": 180.0, "hp": 120.0,
        "color": "#f59e0b", "fire_chance": 0.02, "spread": True},
}
BOSS_ENTRY_OFFSET = 100.0
BOSS_VELOCITY = (-2.0, 2.0)
BOSS_HOLD_DISTANCE = 300.0   # stops once closer than this to the right edge

# Boss projectiles (obstacles)
BOSS_SHOT_CONFIG = {
    "single": {"width": 20.0, "height": 20.0, "vx": -4.0, "vy_spread": 6.0, "color": "#ef4444"},
    "spread": {"width": 15.0, "height": 15.0, "vx": -5.0, "vy": (0.0, 2.0, -2.0), "color": "#fbbf24"},
}

# Pickups
PICKUP_DROP_CHANCE = 0.3
PICKUP_ARCHETYPES = {
    "spread": {"weight": 0.3, "color": "#fde047"},
    "rapid": {"weight": 0.3, "color": "#22d3ee"},
    "shield": {"weight": 0.2, "color": "#60a5fa"},
    "health": {"weight": 0.2, "color": "#22c55e"},
}
PICKUP_SIZE = 20.0
PICKUP_SPEED = 2.0

# Particles
PARTICLE_SIZE = 4.0
PARTICLE_SPEED = 10.0
PARTICLE_DECAY = 0.95
PARTICLE_MIN_SIZE = 0.5
EXPLOSION_COUNTS = {
    "player_hit": 20,
    "enemy": 10,
    "boss": 50,
    "hit": 2,
}

# Scenery (cosmetic only)
STAR_COUNT = 100
BOSS_STAR_SPEED_MULT = 5.0
ASTEROID_COUNTS = {1: 0, 2: 5, 3: 12}

# Colours per level for the renderer
LEVEL_PALETTES = {
    1: {"top": "#020617", "bottom": "#0f172a", "asteroid": "#334155"},
    2: {"top": "#0f0524", "bottom": "#2e1065", "asteroid": "#4c1d95"},
    3: {"top": "#1c0505", "bottom": "#450a0a", "asteroid": "#7c2d12"},
}


def difficulty_multiplier(level: int) -> float:
    """Per-level scalar applied to enemy stats and boss fire rate"""
    return 1.0 + level * 0.2
