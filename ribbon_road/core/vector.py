# ==============================================================================
# Ribbon Road - Spline Road Surface Tools for Blender
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
#
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
# You should have received a copy of the GNU General Public License along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# Primary Author: Michael Yoder
# Company: Desert Springs Civil Engineering PLLC
# ==============================================================================

"""
3D Vector Utilities
===================

Provides a lightweight 3D vector class for road spline calculations.
This avoids dependency on mathutils so the core runs outside Blender.

Division never raises: dividing by zero yields inf/nan components, which
is how degenerate geometry (coincident control points) flows through the
curve math without interrupting generation.
"""

import math
import numbers


def safe_divide(numerator: float, denominator: float) -> float:
    """Divide like IEEE floats do instead of raising ZeroDivisionError.

    Args:
        numerator: Dividend
        denominator: Divisor

    Returns:
        numerator / denominator, or +/-inf (nan for 0/0) when the divisor is zero
    """
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


class Vector3:
    """Immutable 3D vector for control points, tangents and normals.

    Attributes:
        x: X coordinate
        y: Y coordinate
        z: Z coordinate (up in Blender)

    Example:
        >>> a = Vector3(1.0, 0.0, 0.0)
        >>> b = Vector3(0.0, 1.0, 0.0)
        >>> a.cross(b)
        Vector3(0.000, 0.000, 1.000)
    """

    __slots__ = ("_x", "_y", "_z")

    def __init__(self, x=0.0, y=0.0, z=0.0):
        """Initialize vector from coordinates or a 3-item sequence.

        Args:
            x: X coordinate, or any 3-item vector (tuple, list, Vector3,
                numpy array, mathutils.Vector)
            y: Y coordinate (ignored if x is a sequence)
            z: Z coordinate (ignored if x is a sequence)
        """
        if not isinstance(x, numbers.Real):
            x, y, z = x
        object.__setattr__(self, "_x", float(x))
        object.__setattr__(self, "_y", float(y))
        object.__setattr__(self, "_z", float(z))

    def __setattr__(self, name, value):
        raise AttributeError("Vector3 is immutable")

    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def up(cls) -> "Vector3":
        """Global up axis (Blender is Z-up)."""
        return cls(0.0, 0.0, 1.0)

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> float:
        return self._z

    def __iter__(self):
        yield self._x
        yield self._y
        yield self._z

    def __add__(self, other):
        """Add two vectors."""
        return Vector3(self._x + other.x, self._y + other.y, self._z + other.z)

    def __sub__(self, other):
        """Subtract two vectors."""
        return Vector3(self._x - other.x, self._y - other.y, self._z - other.z)

    def __mul__(self, scalar):
        """Multiply vector by scalar."""
        return Vector3(self._x * scalar, self._y * scalar, self._z * scalar)

    def __rmul__(self, scalar):
        """Multiply scalar by vector (reverse)."""
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        """Divide vector by scalar (inf/nan on zero, never raises)."""
        return Vector3(
            safe_divide(self._x, scalar),
            safe_divide(self._y, scalar),
            safe_divide(self._z, scalar),
        )

    def __neg__(self):
        """Negate vector."""
        return Vector3(-self._x, -self._y, -self._z)

    def __eq__(self, other):
        """Check equality with tolerance."""
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.is_close(other, 1e-9)

    __hash__ = None

    def __repr__(self):
        return f"Vector3({self._x:.3f}, {self._y:.3f}, {self._z:.3f})"

    def is_close(self, other: "Vector3", tol: float = 1e-6) -> bool:
        """Component-wise comparison within an absolute tolerance."""
        return (abs(self._x - other.x) < tol and
                abs(self._y - other.y) < tol and
                abs(self._z - other.z) < tol)

    def is_finite(self) -> bool:
        """True if no component is inf or nan."""
        return all(math.isfinite(c) for c in self)

    @property
    def length(self) -> float:
        """Vector magnitude (length)."""
        return math.sqrt(self.length_squared)

    @property
    def length_squared(self) -> float:
        """Squared length (avoids sqrt for comparisons)."""
        return self._x ** 2 + self._y ** 2 + self._z ** 2

    def normalized(self) -> "Vector3":
        """Return unit vector in same direction.

        Returns:
            Unit vector, or zero vector if length is zero.
        """
        length = self.length
        if length > 0:
            return Vector3(self._x / length, self._y / length, self._z / length)
        return Vector3.zero()

    def dot(self, other: "Vector3") -> float:
        """Dot product with another vector."""
        return self._x * other.x + self._y * other.y + self._z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        """Cross product (right-handed).

        Args:
            other: Vector to cross with

        Returns:
            Vector perpendicular to both operands
        """
        return Vector3(
            self._y * other.z - self._z * other.y,
            self._z * other.x - self._x * other.z,
            self._x * other.y - self._y * other.x,
        )

    def to_tuple(self) -> tuple:
        """Convert to (x, y, z) tuple."""
        return (self._x, self._y, self._z)

    def distance_to(self, other: "Vector3") -> float:
        """Distance to another point."""
        return (other - self).length


__all__ = ["Vector3", "safe_divide"]
