"""
Persistent "highest unlocked level" store
"""

from __future__ import annotations

import json
import logging
import os
from typing import Optional

from . import config
from .utils import clamp

logger = logging.getLogger(__name__)

DEFAULT_UNLOCKED = 1


def _sanitize(value) -> int:
    return int(clamp(int(value), DEFAULT_UNLOCKED, config.MAX_LEVEL + 1))


class ProgressStore:
    """Interface: read and write a single integer"""

    def get_unlocked(self) -> int:
        raise NotImplementedError

    def set_unlocked(self, level: int) -> None:
        raise NotImplementedError


class MemoryProgressStore(ProgressStore):
    """Keeps progress for the lifetime of the process"""

    def __init__(self, unlocked: Optional[int] = None):
        self._unlocked = unlocked
        self.writes = 0

    def get_unlocked(self) -> int:
        if self._unlocked is None:
            return DEFAULT_UNLOCKED
        return _sanitize(self._unlocked)

    def set_unlocked(self, level: int) -> None:
        self._unlocked = level
        self.writes += 1


class JsonProgressStore(ProgressStore):
    """
    Progress kept in a small JSON file: {"unlocked_level": n}

    Missing or broken files read as level 1; write failures are logged
    and otherwise ignored so a run never stops over them.
    """

    KEY = "unlocked_level"

    def __init__(self, path: str):
        self.path = path

    def get_unlocked(self) -> int:
        if not os.path.exists(self.path):
            return DEFAULT_UNLOCKED
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
            return _sanitize(data[self.KEY])
        except (OSError, ValueError, TypeError, KeyError) as exc:
            logger.warning("Could not read progress from %s (%s); starting at level 1", self.path, exc)
            return DEFAULT_UNLOCKED

    def set_unlocked(self, level: int) -> None:
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w") as f:
                json.dump({self.KEY: int(level)}, f, indent=2)
        except OSError as exc:
            logger.warning("Could not save progress to %s: %s", self.path, exc)
            return
        logger.info("Saved unlocked level %d to %s", level, self.path)
