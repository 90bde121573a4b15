import math
from dataclasses import dataclass

@dataclass(frozen=True)
class Vector:
    """2D displacement or velocity."""
    vx: float
    vy: float

    def __add__(self, other: "Vector") -> "Vector":
        # Vector + Point falls through to Point.__radd__
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.vx + other.vx, self.vy + other.vy)

    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.vx - other.vx, self.vy - other.vy)

    def norm(self) -> "Vector":
        length = self.length()
        if length == 0.0:
            raise ValueError("Cannot normalize a zero-length vector")
        return Vector(self.vx / length, self.vy / length)

    def perpendicular(self) -> "Vector":
        # Fixed handedness: (dx, dy) -> (dy, -dx)
        return Vector(self.vy, -self.vx)

    def dot(self, other: "Vector") -> float:
        return self.vx * other.vx + self.vy * other.vy

    def times(self, f: float) -> "Vector":
        return Vector(self.vx * f, self.vy * f)

    def length(self) -> float:
        return math.sqrt(self.length2())

    def length2(self) -> float:
        return self.dot(self)

    def __str__(self):
        return f"{int(self.vx)} {int(self.vy)}"

@dataclass(frozen=True)
class Point:
    """2D position on the track."""
    x: float
    y: float

    def __add__(self, v: Vector) -> "Point":
        if not isinstance(v, Vector):
            return NotImplemented
        return Point(self.x + v.vx, self.y + v.vy)

    __radd__ = __add__

    def __sub__(self, other: "Point") -> Vector:
        if not isinstance(other, Point):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)

    def distance(self, p: "Point") -> float:
        return (p - self).length()

    def __str__(self):
        # Protocol form, truncated toward zero
        return f"{int(self.x)} {int(self.y)}"

ZERO = Vector(0.0, 0.0)
