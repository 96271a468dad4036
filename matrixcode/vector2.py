"""Two-dimensional vectors and rays."""

import math
from dataclasses import dataclass

ALMOST_ZERO = 0.000001


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector."""

    x: float
    y: float

    def __add__(self, other):
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vector2(self.x - other.x, self.y - other.y)

    def scaled(self, s):
        """Return the vector multiplied by ``s``."""
        return Vector2(self.x * s, self.y * s)

    def cross(self, other):
        """Return the z component of the cross product."""
        return self.x * other.y - self.y * other.x

    def dot(self, other):
        return self.x * other.x + self.y * other.y

    def mag(self):
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalized(self):
        """Return the unit vector with the same direction."""
        mag = self.mag()
        if mag <= ALMOST_ZERO:
            raise ValueError("cannot normalize a zero-length vector")
        return self.scaled(1 / mag)


def _require_unit(v):
    if abs(1.0 - v.mag()) > ALMOST_ZERO:
        raise ValueError("ray direction must be a unit vector")


@dataclass(frozen=True)
class Ray2:
    """A ray from point ``p`` along direction ``v``."""

    p: Vector2
    v: Vector2
    t_min: float = 0.0
    t_max: float = 0.0

    def distance_from(self, q):
        """Signed perpendicular distance of ``q`` from the ray line."""
        _require_unit(self.v)
        return self.v.cross(q - self.p)

    def distance_along(self, q):
        """Distance of ``q`` projected onto the ray direction."""
        return (q - self.p).dot(self.v)

    def point_at(self, t):
        """Return the point at parameter ``t`` along the ray."""
        _require_unit(self.v)
        return self.p + self.v.scaled(t)

    def intersect(self, other):
        """Return the point where this ray's line meets ``other``'s."""
        denom = other.v.cross(self.v)
        if abs(denom) <= ALMOST_ZERO:
            raise ValueError("rays are parallel")
        numer = other.v.cross(other.p - self.p)
        return self.point_at(numer / denom)