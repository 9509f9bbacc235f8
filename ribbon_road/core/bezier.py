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
Bezier Curve Evaluation
=======================

Bernstein-basis evaluation of quadratic and cubic Bezier curves.

The parameter t is not clamped. Values outside [0, 1] extrapolate along
the polynomial; road generation only ever passes t in [0, 1].
"""

from typing import List

from .vector import Vector3


def quadratic_point(p0: Vector3, p1: Vector3, p2: Vector3, t: float) -> Vector3:
    """Point on a quadratic Bezier curve.

    B(t) = (1-t)^2 P0 + 2t(1-t) P1 + t^2 P2
    """
    p = 1.0 - t
    return p * p * p0 + 2.0 * t * p * p1 + t * t * p2


def cubic_point(p0: Vector3, p1: Vector3, p2: Vector3, p3: Vector3, t: float) -> Vector3:
    """Point on a cubic Bezier curve.

    B(t) = (1-t)^3 P0 + 3t(1-t)^2 P1 + 3t^2(1-t) P2 + t^3 P3

    Args:
        p0: Start point
        p1: First control handle (absolute)
        p2: Second control handle (absolute)
        p3: End point
        t: Curve parameter

    Returns:
        Point on the curve
    """
    p = 1.0 - t
    return (p * p * p * p0 +
            3.0 * t * p * p * p1 +
            3.0 * t * t * p * p2 +
            t * t * t * p3)


def get_point(*points: Vector3, t: float) -> Vector3:
    """Evaluate a quadratic (3 points) or cubic (4 points) Bezier curve.

    Raises:
        ValueError: If the number of control points is not 3 or 4
    """
    if len(points) == 3:
        return quadratic_point(*points, t)
    if len(points) == 4:
        return cubic_point(*points, t)
    raise ValueError(f"Expected 3 or 4 control points, got {len(points)}")


def sample_cubic(p0: Vector3, p1: Vector3, p2: Vector3, p3: Vector3, steps: int) -> List[Vector3]:
    """Interior samples of a cubic curve at t = j/steps for j = 1..steps-1.

    The end points are excluded so consecutive segments can share them.
    """
    return [cubic_point(p0, p1, p2, p3, j / steps) for j in range(1, steps)]


__all__ = ["quadratic_point", "cubic_point", "get_point", "sample_cubic"]
