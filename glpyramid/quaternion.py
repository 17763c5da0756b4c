"""Unit quaternions for building rotation matrices."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Quaternion:
    """A quaternion ``w + xi + yj + zk``; the default is the identity rotation."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def from_axis_angle(cls, x: float, y: float, z: float, degrees: float) -> Quaternion:
        """Build the rotation of ``degrees`` about the axis ``(x, y, z)``."""
        half = math.radians(degrees) / 2.0
        s = math.sin(half)
        return cls(x * s, y * s, z * s, math.cos(half))

    def matrix(self) -> tuple[float, ...]:
        """Return the rotation as a 4x4 column-major matrix of 16 floats."""
        x, y, z, w = self.x, self.y, self.z, self.w
        return (
            1.0 - 2.0 * (y * y + z * z),
            2.0 * (x * y + z * w),
            2.0 * (x * z - y * w),
            0.0,
            2.0 * (x * y - z * w),
            1.0 - 2.0 * (x * x + z * z),
            2.0 * (z * y + x * w),
            0.0,
            2.0 * (x * z + y * w),
            2.0 * (y * z - x * w),
            1.0 - 2.0 * (x * x + y * y),
            0.0,
            0.0,
            0.0,
            0.0,
            1.0,
        )

    def __mul__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(
            x=self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
            y=self.w * other.y + self.y * other.w + self.z * other.x - self.x * other.z,
            z=self.w * other.z + self.z * other.w + self.x * other.y - self.y * other.x,
            w=self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
        )