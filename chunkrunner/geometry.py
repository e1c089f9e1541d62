"""Vectors, rectangles and axis-aligned collision helpers."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntFlag
from typing import Protocol

COLLISION_TOLERANCE = 0.1
MOVE_STEP = 4.0


@dataclass(frozen=True, order=True)
class Vector2f:
    """An immutable 2D point, ordered by x and then by y."""

    x: float = 0.0
    y: float = 0.0

    def __str__(self) -> str:
        return f"{self.x:g}, {self.y:g}"


@dataclass
class Rect:
    """An axis-aligned rectangle with its origin at the top-left corner."""

    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def intersects(self, other: Rect) -> bool:
        """Return True if the two rectangles share a region of positive area."""
        if self.w < 0 or self.h < 0 or other.w < 0 or other.h < 0:
            return False
        overlap_x = max(self.x, other.x) < min(self.right, other.right)
        overlap_y = max(self.y, other.y) < min(self.bottom, other.bottom)
        return overlap_x and overlap_y


class CollisionSide(IntFlag):
    """The sides of a rectangle involved in a collision."""

    NONE = 0
    TOP = 1 << 0
    BOTTOM = 1 << 1
    LEFT = 1 << 2
    RIGHT = 1 << 3


class Terrain(Protocol):
    def colliding_with_terrain(self, rect: Rect) -> CollisionSide: ...


def check_collision(a: Rect, b: Rect) -> CollisionSide:
    """Return the sides of ``a`` with the smallest overlap against ``b``."""
    tol = COLLISION_TOLERANCE
    if (
        a.x >= b.right - tol
        or a.right <= b.x + tol
        or a.y >= b.bottom
        or a.bottom <= b.y
    ):
        return CollisionSide.NONE

    overlaps = {
        CollisionSide.LEFT: a.right - b.x,
        CollisionSide.RIGHT: b.right - a.x,
        CollisionSide.TOP: b.bottom - a.y,
        CollisionSide.BOTTOM: a.bottom - b.y,
    }
    smallest = min(overlaps.values())

    result = CollisionSide.NONE
    for side, overlap in overlaps.items():
        if abs(smallest - overlap) < tol:
            result |= side
    return result


def count_digit(number: int) -> int:
    """Return the number of decimal digits in ``number``; zero has none."""
    remaining = abs(number)
    count = 0
    while remaining:
        remaining //= 10
        count += 1
    return count


def move_and_collide(world: Terrain, aabb: Rect, delta: float, vertical: bool) -> Rect:
    """Move ``aabb`` by ``delta`` in small steps, stopping before terrain.

    Returns the rectangle at the last position that did not collide.
    """
    sign = 1.0 if delta > 0 else -1.0
    moved = 0.0
    current = aabb
    while abs(moved) < abs(delta):
        step = min(MOVE_STEP, abs(delta - moved)) * sign
        if vertical:
            candidate = replace(current, y=current.y + step)
        else:
            candidate = replace(current, x=current.x + step)
        if world.colliding_with_terrain(candidate):
            break
        current = candidate
        moved += step
    return current