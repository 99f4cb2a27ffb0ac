"""Vector and matrix primitives plus the base class for objects in the world."""

from __future__ import annotations

import logging
import math
from dataclasses import astuple, dataclass, field

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Vector2:
    """A point or direction on the ground plane."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Vector3:
    """A point or direction in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def scale(self, factor: float) -> Vector3:
        """Return this vector multiplied by a scalar."""
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    def dot(self, other: Vector3) -> float:
        """Return the dot product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def abs(self) -> Vector3:
        """Return the component-wise absolute value."""
        return Vector3(abs(self.x), abs(self.y), abs(self.z))


@dataclass
class Matrix:
    """A 4x4 transform; m12, m13 and m14 hold the translation."""

    m0: float = 0.0
    m1: float = 0.0
    m2: float = 0.0
    m3: float = 0.0
    m4: float = 0.0
    m5: float = 0.0
    m6: float = 0.0
    m7: float = 0.0
    m8: float = 0.0
    m9: float = 0.0
    m10: float = 0.0
    m11: float = 0.0
    m12: float = 0.0
    m13: float = 0.0
    m14: float = 0.0
    m15: float = 0.0

    @classmethod
    def identity(cls) -> Matrix:
        """Return the identity matrix."""
        return cls(m0=1.0, m5=1.0, m10=1.0, m15=1.0)

    @classmethod
    def translate(cls, x: float, y: float, z: float) -> Matrix:
        """Return a translation matrix."""
        matrix = cls.identity()
        matrix.m12, matrix.m13, matrix.m14 = x, y, z
        return matrix

    @classmethod
    def rotate_xyz(cls, angle: Vector3) -> Matrix:
        """Return a rotation matrix for Euler angles in radians, applied X, Y, Z."""
        cos_z, sin_z = math.cos(-angle.z), math.sin(-angle.z)
        cos_y, sin_y = math.cos(-angle.y), math.sin(-angle.y)
        cos_x, sin_x = math.cos(-angle.x), math.sin(-angle.x)
        matrix = cls.identity()
        matrix.m0 = cos_z * cos_y
        matrix.m1 = cos_z * sin_y * sin_x - sin_z * cos_x
        matrix.m2 = cos_z * sin_y * cos_x + sin_z * sin_x
        matrix.m4 = sin_z * cos_y
        matrix.m5 = sin_z * sin_y * sin_x + cos_z * cos_x
        matrix.m6 = sin_z * sin_y * cos_x - cos_z * sin_x
        matrix.m8 = -sin_y
        matrix.m9 = cos_y * sin_x
        matrix.m10 = cos_y * cos_x
        return matrix

    def __matmul__(self, other: Matrix) -> Matrix:
        left = astuple(self)
        right = astuple(other)
        values = [
            sum(left[row * 4 + k] * right[k * 4 + col] for k in range(4))
            for row in range(4)
            for col in range(4)
        ]
        return Matrix(*values)

    def transform_point(self, vector: Vector3) -> Vector3:
        """Apply this transform, translation included, to a point."""
        x, y, z = vector.x, vector.y, vector.z
        return Vector3(
            self.m0 * x + self.m4 * y + self.m8 * z + self.m12,
            self.m1 * x + self.m5 * y + self.m9 * z + self.m13,
            self.m2 * x + self.m6 * y + self.m10 * z + self.m14,
        )


@dataclass(eq=False)
class GameObject:
    """Base for everything placed in the game world."""

    texture_path: str = ""
    shader_path: str = ""
    model_path: str = ""
    transform: Matrix = field(default_factory=Matrix.identity)

    def render(self, renderer) -> None:
        logger.warning("Subclasses should implement their own render method")

    def update(self, delta_time: float) -> None:
        logger.warning("Subclasses should implement their own update method")

    def set_position(self, position: Vector2) -> None:
        logger.info("Subclasses should implement their own set_position method")