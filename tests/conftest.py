import pytest

from game.shooter import MemoryProgressStore, World
from game.shooter.utils import make_rng
from tests.helpers import ScriptedRng


@pytest.fixture
def scripted():
    return ScriptedRng()


@pytest.fixture
def world(scripted):
    """Level 1 world whose random draws never spawn pickups or boss shots"""
    return World.create(1, rng=scripted)


@pytest.fixture
def make_world():
    def _make(level=1, rng=None, **kwargs):
        return World.create(level, rng=rng if rng is not None else ScriptedRng(), **kwargs)
    return _make


@pytest.fixture
def seeded_rng():
    return make_rng(1234)


@pytest.fixture
def store():
    return MemoryProgressStore()
