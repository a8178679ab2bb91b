from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(x=self.x + other.x, y=self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(x=self.x - other.x, y=self.y - other.y)

    def __mul__(self, factor: float) -> Point:
        if isinstance(factor, bool) or not isinstance(factor, (int, float)):
            return NotImplemented
        return Point(x=self.x * factor, y=self.y * factor)

    __rmul__ = __mul__

    def scale(self, factor: float) -> Point:
        return self * factor


@dataclass(frozen=True)
class Polygon:
    vertices: tuple[Point, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Circle:
    x: float
    y: float
    radius: float


# Encoded without a discriminator; consumers tell the two apart by
# "vertices" versus "radius".
Shape = Polygon | Circle
