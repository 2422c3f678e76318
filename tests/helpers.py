from game.shooter import Entity, EntityKind


class ScriptedRng:
    """Random source that replays queued draws, then a fixed default"""

    def __init__(self, values=(), default=0.99):
        self.values = list(values)
        self.default = default

    def random(self):
        if self.values:
            return self.values.pop(0)
        return self.default

    def integers(self, low, high=None):
        return low


def enemy_at(x, y, width=30.0, height=30.0, hp=1.0, vx=0.0, kind=EntityKind.ENEMY, **kwargs):
    return Entity(x=x, y=y, width=width, height=height, hp=hp, vx=vx, kind=kind, **kwargs)


def projectile_at(x, y, vx=0.0):
    return Entity(x=x, y=y, width=15.0, height=8.0, vx=vx, kind=EntityKind.PROJECTILE)


def count_kind(world, kind):
    return sum(1 for e in world.enemies if e.kind is kind)
