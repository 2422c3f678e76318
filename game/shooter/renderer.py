"""
Arcade front end for the shooter.

Draws World snapshots and forwards key events to a ShooterSession.
World coordinates have y growing downwards; arcade's grow upwards, so
every draw call flips through ``_sy``.
"""

from __future__ import annotations

import math
from typing import Callable, Optional, Tuple

import arcade

from . import config
from .entities import BossStyle, EnemyArchetype, Entity, EntityKind
from .session import Command, RunStatus, ShooterSession
from .world import World

Color = Tuple[int, int, int]

HUD_C = (220, 220, 220)
SHIELD_C = (96, 165, 250)
OVERLAY_C = (2, 6, 23)


def hex_to_rgb(value: str) -> Color:
    value = value.lstrip("#")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def _blend(a: Color, b: Color, t: float) -> Color:
    return tuple(int(a[i] + (b[i] - a[i]) * t) for i in range(3))


class WorldWindow(arcade.Window):
    """Window that paints whatever World ``get_world`` returns"""

    def __init__(self, get_world: Callable[[], Optional[World]], width: int, height: int,
                 title: str = "Shooter"):
        super().__init__(width, height, title)
        self.get_world = get_world

    def _sy(self, y: float, h: float = 0.0) -> float:
        return self.height - y - h

    def on_draw(self):
        self.clear()
        world = self.get_world()
        if world is None:
            return
        self.draw_world(world)

    # ----------------------------
    # World layers
    # ----------------------------

    def draw_world(self, world: World):
        self.draw_background(world)
        for e in world.pickups:
            self.draw_pickup(e)
        for e in world.enemies:
            if e.kind is EntityKind.BOSS:
                self.draw_boss(e)
            elif e.kind is EntityKind.OBSTACLE:
                arcade.draw_circle_filled(e.center_x, self._sy(e.center_y), e.width / 2, hex_to_rgb(e.color))
            else:
                self.draw_enemy(e)
        for b in world.projectiles:
            self._box(b, hex_to_rgb(b.color))
        for p in world.particles:
            self._box(p, hex_to_rgb(p.color))
        if world.player.hp > 0:
            self.draw_player(world)

    def draw_background(self, world: World):
        palette = config.LEVEL_PALETTES[world.level]
        top, bottom = hex_to_rgb(palette["top"]), hex_to_rgb(palette["bottom"])
        bands = 16
        band_h = self.height / bands
        for i in range(bands):
            y0 = self.height - (i + 1) * band_h
            arcade.draw_lrbt_rectangle_filled(0, self.width, y0, y0 + band_h,
                                              _blend(top, bottom, i / (bands - 1)))

        for s in world.stars:
            arcade.draw_lrbt_rectangle_filled(s.x, s.x + s.size, self._sy(s.y, s.size),
                                              self._sy(s.y), (255, 255, 255))

        for a in world.asteroids:
            cos_r, sin_r = math.cos(a.rotation), math.sin(a.rotation)
            points = [
                (a.x + px * cos_r - py * sin_r, self._sy(a.y + px * sin_r + py * cos_r))
                for px, py in a.points
            ]
            arcade.draw_polygon_filled(points, hex_to_rgb(a.color))

    def _box(self, e: Entity, color: Color):
        arcade.draw_lrbt_rectangle_filled(e.x, e.x + e.width, self._sy(e.y, e.height), self._sy(e.y), color)

    def draw_player(self, world: World):
        p = world.player
        color = hex_to_rgb(p.color)
        nose = (p.x + p.width, self._sy(p.center_y))
        arcade.draw_triangle_filled(p.x, self._sy(p.y), p.x, self._sy(p.y + p.height), nose[0], nose[1], color)
        if world.max_hp == config.PLAYER_CONFIG["shielded_max_hp"]:
            arcade.draw_circle_outline(p.center_x, self._sy(p.center_y), 40, SHIELD_C, 2)

    def draw_enemy(self, e: Entity):
        color = hex_to_rgb(e.color)
        if e.sub_kind is EnemyArchetype.TRACKER:
            cx, cy = e.center_x, self._sy(e.center_y)
            arcade.draw_polygon_filled(
                [(cx, cy + e.height / 2), (cx + e.width / 2, cy), (cx, cy - e.height / 2), (cx - e.width / 2, cy)],
                color,
            )
        elif e.sub_kind is EnemyArchetype.FAST:
            arcade.draw_triangle_filled(e.x, self._sy(e.center_y), e.x + e.width, self._sy(e.y),
                                        e.x + e.width, self._sy(e.y + e.height), color)
        else:
            self._box(e, color)

    def draw_boss(self, e: Entity):
        color = hex_to_rgb(e.color)
        cx, cy = e.center_x, self._sy(e.center_y)
        if e.sub_kind is BossStyle.SAUCER:
            arcade.draw_ellipse_filled(cx, cy, e.width, e.height / 2, color)
            arcade.draw_circle_filled(cx, cy + e.height / 6, e.width / 5, (165, 243, 252))
        elif e.sub_kind is BossStyle.SPIKY:
            spikes, outer, inner = 8, e.width / 2, e.width / 4
            points = []
            for i in range(spikes * 2):
                r = outer if i % 2 == 0 else inner
                ang = math.pi * i / spikes
                points.append((cx + math.cos(ang) * r, cy + math.sin(ang) * r))
            arcade.draw_polygon_filled(points, color)
        else:
            self._box(e, color)

        max_hp = e.max_hp or e.hp or 1
        frac = max(0.0, e.hp / max_hp)
        top = self._sy(e.y) + 10
        arcade.draw_lrbt_rectangle_filled(e.x, e.x + e.width, top, top + 6, (60, 60, 60))
        if frac > 0:
            arcade.draw_lrbt_rectangle_filled(e.x, e.x + e.width * frac, top, top + 6, (239, 68, 68))

    def draw_pickup(self, e: Entity):
        arcade.draw_circle_filled(e.center_x, self._sy(e.center_y), e.width / 2, hex_to_rgb(e.color))


class ShooterWindow(WorldWindow):
    """Playable window: keyboard in, session status and HUD out"""

    HELD_KEYS = {
        arcade.key.W: Command.UP,
        arcade.key.UP: Command.UP,
        arcade.key.S: Command.DOWN,
        arcade.key.DOWN: Command.DOWN,
        arcade.key.A: Command.LEFT,
        arcade.key.LEFT: Command.LEFT,
        arcade.key.D: Command.RIGHT,
        arcade.key.RIGHT: Command.RIGHT,
        arcade.key.SPACE: Command.FIRE,
    }
    LEVEL_KEYS = {arcade.key.KEY_1: 1, arcade.key.KEY_2: 2, arcade.key.KEY_3: 3}

    def __init__(self, session: ShooterSession):
        super().__init__(lambda: session.world, int(session.width), int(session.height), "Shooter")
        self.session = session
        self._clock_ms = 0.0

    def on_update(self, delta_time: float):
        self._clock_ms += delta_time * 1000.0
        self.session.tick(self._clock_ms)
        if self.session.status is RunStatus.EXITED:
            self.close()

    def on_resize(self, width: int, height: int):
        super().on_resize(width, height)
        self.session.resize(width, height)

    def on_key_press(self, symbol: int, modifiers: int):
        session = self.session
        if symbol == arcade.key.ESCAPE:
            if session.status is RunStatus.SELECTING:
                session.exit()
            else:
                session.press(Command.PAUSE)
        elif symbol in self.HELD_KEYS:
            session.press(self.HELD_KEYS[symbol])
        elif symbol in self.LEVEL_KEYS:
            session.select_level(self.LEVEL_KEYS[symbol])
        elif symbol == arcade.key.ENTER:
            session.continue_()
        elif symbol == arcade.key.R:
            session.retry()
        elif symbol == arcade.key.Q:
            session.abandon()

    def on_key_release(self, symbol: int, modifiers: int):
        if symbol in self.HELD_KEYS:
            self.session.release(self.HELD_KEYS[symbol])

    def on_draw(self):
        self.clear()
        session = self.session
        if session.world is not None:
            self.draw_world(session.world)
            self.draw_hud(session.world)

        status = session.status
        if status is RunStatus.SELECTING:
            self.draw_level_select()
        elif status is RunStatus.PAUSED:
            self._banner("PAUSED", "ESC resume  |  Q abandon")
        elif status is RunStatus.DEFEATED:
            self._banner("GAME OVER", "R retry  |  Q back to levels")
        elif status is RunStatus.VICTORIOUS:
            self._banner(f"LEVEL {session.selected_level} COMPLETE", "ENTER continue")

    def draw_hud(self, world: World):
        bar_w, bar_h = 180, 10
        x0, y0 = 12, self.height - 22
        arcade.draw_lrbt_rectangle_filled(x0, x0 + bar_w, y0, y0 + bar_h, (60, 60, 60))
        fill = bar_w * max(0.0, world.player.hp / world.max_hp)
        if fill > 0:
            arcade.draw_lrbt_rectangle_filled(x0, x0 + fill, y0, y0 + bar_h, (34, 197, 94))
        txt = (f"HP: {world.player.hp:.0f}/{world.max_hp:.0f}  "
               f"Score: {world.score}  "
               f"LVL {world.level}  "
               f"Weapon: {world.weapon_mode.value}")
        arcade.draw_text(txt, 12, self.height - 40, HUD_C, 14)

    def draw_level_select(self):
        arcade.draw_lrbt_rectangle_filled(0, self.width, 0, self.height, OVERLAY_C)
        arcade.draw_text("SELECT LEVEL", self.width / 2, self.height * 0.7, HUD_C, 28, anchor_x="center")
        for i, view in enumerate(self.session.level_views()):
            label = f"[{view.level}] Level {view.level}"
            if view.locked:
                label += "  (locked)"
            elif view.completed:
                label += "  (complete)"
            arcade.draw_text(label, self.width / 2, self.height * 0.55 - i * 40, HUD_C, 18, anchor_x="center")

    def _banner(self, title: str, hint: str):
        arcade.draw_text(title, self.width / 2, self.height / 2 + 20, HUD_C, 32, anchor_x="center")
        arcade.draw_text(hint, self.width / 2, self.height / 2 - 24, HUD_C, 14, anchor_x="center")
