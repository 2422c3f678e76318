"""
Level/run state machine for the shooter screen.

    selecting --select_level--> active <--toggle_pause--> paused
    active --(hp <= 0)--> defeated --retry--> active
                                   --abandon--> selecting
    active --(boss dies)--> victorious --continue--> selecting
    paused --abandon--> selecting
    paused/selecting --exit--> exited

Commands that do not apply to the current status are ignored and return False.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

import numpy as np

from . import config
from .progress import MemoryProgressStore, ProgressStore
from .simulation import Simulation, StepReport
from .world import World

logger = logging.getLogger(__name__)


class RunStatus(str, Enum):
    SELECTING = "selecting"
    ACTIVE = "active"
    PAUSED = "paused"
    DEFEATED = "defeated"
    VICTORIOUS = "victorious"
    EXITED = "exited"


class Command(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    FIRE = "fire"
    PAUSE = "pause"


_HELD = {
    Command.UP: "up",
    Command.DOWN: "down",
    Command.LEFT: "left",
    Command.RIGHT: "right",
    Command.FIRE: "fire",
}


@dataclass(frozen=True)
class LevelView:
    """How a level shows up on the selection screen"""
    level: int
    locked: bool
    completed: bool


class ShooterSession:
    """Owns the current World (if any) and gates the simulation by status"""

    def __init__(
        self,
        store: Optional[ProgressStore] = None,
        width: float = config.WIDTH,
        height: float = config.HEIGHT,
        simulation: Optional[Simulation] = None,
        rng_factory: Callable[[], np.random.Generator] = np.random.default_rng,
        on_stats: Optional[Callable[[StepReport], None]] = None,
    ):
        self.store = store if store is not None else MemoryProgressStore()
        self.width = width
        self.height = height
        self.simulation = simulation or Simulation()
        self.rng_factory = rng_factory
        self.on_stats = on_stats

        self.status = RunStatus.SELECTING
        self.selected_level = 1
        self.world: Optional[World] = None
        self.last_report: Optional[StepReport] = None
        self.unlocked_level = self._read_unlocked()

    # ----------------------------
    # Selection
    # ----------------------------

    def _read_unlocked(self) -> int:
        try:
            return self.store.get_unlocked()
        except Exception:
            logger.warning("Progress store unavailable; defaulting to level 1", exc_info=True)
            return 1

    def level_views(self) -> List[LevelView]:
        return [
            LevelView(level=lvl, locked=lvl > self.unlocked_level, completed=lvl < self.unlocked_level)
            for lvl in range(1, config.MAX_LEVEL + 1)
        ]

    def select_level(self, level: int) -> bool:
        if self.status is not RunStatus.SELECTING:
            return self._ignored("select_level")
        if not 1 <= level <= config.MAX_LEVEL or level > self.unlocked_level:
            logger.debug("Level %s is not available (unlocked=%d)", level, self.unlocked_level)
            return False
        self._start(level)
        return True

    def _start(self, level: int):
        self.selected_level = level
        self.world = World.create(level, self.width, self.height, rng=self.rng_factory())
        self.last_report = None
        self._set_status(RunStatus.ACTIVE)

    def resize(self, width: float, height: float):
        """New playfield size; applies to the live world and later runs"""
        self.width, self.height = width, height
        if self.world is not None:
            self.world.width, self.world.height = width, height

    # ----------------------------
    # Input
    # ----------------------------

    def press(self, command) -> bool:
        try:
            command = Command(command)
        except ValueError:
            return False
        if command is Command.PAUSE:
            return self.toggle_pause()
        if self.status is not RunStatus.ACTIVE or self.world is None:
            return False
        setattr(self.world.keys, _HELD[command], True)
        return True

    def release(self, command) -> bool:
        try:
            command = Command(command)
        except ValueError:
            return False
        if command not in _HELD or self.world is None:
            return False
        setattr(self.world.keys, _HELD[command], False)
        return True

    # ----------------------------
    # Flow commands
    # ----------------------------

    def toggle_pause(self) -> bool:
        if self.status is RunStatus.ACTIVE:
            self._set_status(RunStatus.PAUSED)
            return True
        if self.status is RunStatus.PAUSED:
            self._set_status(RunStatus.ACTIVE)
            return True
        return self._ignored("toggle_pause")

    def resume(self) -> bool:
        if self.status is not RunStatus.PAUSED:
            return self._ignored("resume")
        self._set_status(RunStatus.ACTIVE)
        return True

    def abandon(self) -> bool:
        if self.status not in (RunStatus.PAUSED, RunStatus.DEFEATED):
            return self._ignored("abandon")
        self._to_selection()
        return True

    def retry(self) -> bool:
        if self.status is not RunStatus.DEFEATED:
            return self._ignored("retry")
        self._start(self.selected_level)
        return True

    def continue_(self) -> bool:
        """Leave the victory screen, unlocking the next level when earned"""
        if self.status is not RunStatus.VICTORIOUS:
            return self._ignored("continue")
        completed = self.selected_level
        if completed == self.unlocked_level and self.unlocked_level <= config.MAX_LEVEL:
            self.unlocked_level += 1
            try:
                self.store.set_unlocked(self.unlocked_level)
            except Exception:
                logger.warning("Could not persist unlocked level %d", self.unlocked_level, exc_info=True)
            logger.info("Level %d complete; unlocked level %d", completed, self.unlocked_level)
        self._to_selection()
        return True

    def exit(self) -> bool:
        if self.status not in (RunStatus.SELECTING, RunStatus.PAUSED):
            return self._ignored("exit")
        self.world = None
        self._set_status(RunStatus.EXITED)
        return True

    def _to_selection(self):
        self.world = None
        self.unlocked_level = max(self.unlocked_level, self._read_unlocked())
        self._set_status(RunStatus.SELECTING)

    # ----------------------------
    # Frame
    # ----------------------------

    def tick(self, now: float) -> Optional[StepReport]:
        """Run one frame if a run is active; otherwise do nothing"""
        if self.status is not RunStatus.ACTIVE or self.world is None:
            return None

        report = self.simulation.step(self.world, now)
        self.last_report = report
        if report.changed and self.on_stats is not None:
            self.on_stats(report)

        if report.defeated:
            self._set_status(RunStatus.DEFEATED)
        elif report.victorious:
            self._set_status(RunStatus.VICTORIOUS)
        return report

    def _set_status(self, status: RunStatus):
        if status is not self.status:
            logger.info("Shooter status %s -> %s (level %d)", self.status.value, status.value, self.selected_level)
        self.status = status

    def _ignored(self, name: str) -> bool:
        logger.debug("Ignoring %s while %s", name, self.status.value)
        return False
