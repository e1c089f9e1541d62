"""Seeded, gradient-based Perlin noise on an unbounded grid."""

from __future__ import annotations

import math
from dataclasses import dataclass

from chunkrunner.geometry import Vector2f

_MASK = 0xFFFFFFFF
_HALF_WORD = 16
_ANGLE_SCALE = 3.14159265 / 2147483648


def _rotate(value: int) -> int:
    return ((value << _HALF_WORD) | (value >> _HALF_WORD)) & _MASK


@dataclass
class PerlinNoise:
    """Perlin noise whose gradients are hashed from grid coordinates and a seed.

    All hashing happens in 32-bit unsigned arithmetic, so seeds that agree
    modulo 2**32 produce the same noise.
    """

    seed: int = 0

    def random_gradient(self, ix: int, iy: int) -> Vector2f:
        """Return the unit gradient vector at grid point (ix, iy)."""
        a = ix & _MASK
        b = iy & _MASK
        a = (a * (self.seed & _MASK)) & _MASK

        b ^= _rotate(a)
        b = (b * 1911520717) & _MASK

        a ^= _rotate(b)
        a = (a * 2048419325) & _MASK

        angle = a * _ANGLE_SCALE
        return Vector2f(math.sin(angle), math.cos(angle))

    def grid_gradient(self, ix: int, iy: int, x: float, y: float) -> float:
        """Dot product of the gradient at (ix, iy) with the offset to (x, y)."""
        gradient = self.random_gradient(ix, iy)
        dx = x - ix
        dy = y - iy
        return dx * gradient.x + dy * gradient.y

    def interpolate(self, a0: float, a1: float, w: float) -> float:
        """Cubic (smoothstep) interpolation between ``a0`` and ``a1``."""
        return (a1 - a0) * (3.0 - w * 2.0) * w * w + a0

    def perlin(self, x: float, y: float) -> float:
        """Sample the noise at (x, y)."""
        x0 = int(x)
        y0 = int(y)
        x1 = x0 + 1
        y1 = y0 + 1

        sx = x - x0
        sy = y - y0

        top = self.interpolate(
            self.grid_gradient(x0, y0, x, y), self.grid_gradient(x1, y0, x, y), sx
        )
        bottom = self.interpolate(
            self.grid_gradient(x0, y1, x, y), self.grid_gradient(x1, y1, x, y), sx
        )
        return self.interpolate(top, bottom, sy)