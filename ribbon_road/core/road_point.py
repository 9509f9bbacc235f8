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
Road Control Point
==================

A RoadPoint is one vertex of the road spline. Besides its position it
carries two tangent handles (incoming and outgoing), a continuity mode
that ties the handles together, a cross-section width and a normal that
defines the "up" side of the road surface.

Tangent handles are offsets relative to the position; the absolute handle
location is ``position + tangent``.

Continuity modes:
    FREE     - handles move independently
    ALIGNED  - handles stay colinear, each keeps its own length
    MIRRORED - handles are exact negatives of each other

All tangent writes go through the point so the mode constraint is
re-applied on every edit.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .vector import Vector3, safe_divide


class ContinuityMode(Enum):
    """How editing one tangent handle affects the other."""
    FREE = "FREE"
    ALIGNED = "ALIGNED"
    MIRRORED = "MIRRORED"


class TangentSide(Enum):
    """Selector for the incoming (0) or outgoing (1) tangent."""
    IN = 0
    OUT = 1

    @property
    def opposite(self) -> "TangentSide":
        return TangentSide.OUT if self is TangentSide.IN else TangentSide.IN


def _as_side(side: Union[TangentSide, int]) -> TangentSide:
    if isinstance(side, TangentSide):
        return side
    if isinstance(side, int) and not isinstance(side, bool) and side in (0, 1):
        return TangentSide(side)
    raise ValueError(f"Invalid tangent side: {side!r}")


@dataclass(frozen=True)
class RailHandles:
    """Scaled tangent handles for one rail of a segment.

    Attributes:
        prev: Outgoing handle of the segment's start point (relative)
        next: Incoming handle of the segment's end point (relative)
    """
    prev: Vector3
    next: Vector3


class RoadPoint:
    """Control point of the road spline.

    Attributes:
        position: Curve anchor in local space
        tangent_in: Incoming handle offset
        tangent_out: Outgoing handle offset
        mode: ContinuityMode tying the two handles together
        width: Cross-section width at this point
        normal: Unit "up" vector of the road surface

    Example:
        >>> p = RoadPoint(Vector3(0, 0, 0), Vector3(1, 0, 0))
        >>> p.tangent_in
        Vector3(-1.000, 0.000, 0.000)
        >>> p.tangent_out = Vector3(0, 2, 0)
        >>> p.tangent_in
        Vector3(0.000, -2.000, 0.000)
    """

    def __init__(self, position, direction, up: Optional[Vector3] = None):
        """Create a mirrored point whose incoming tangent opposes ``direction``.

        Args:
            position: Anchor position
            direction: Outgoing tangent
            up: Initial normal (defaults to the global Z-up axis)
        """
        self._position = Vector3(position)
        self._tangent_out = Vector3(direction)
        self._tangent_in = -self._tangent_out
        self._mode = ContinuityMode.MIRRORED
        self._width = 1.0
        self._normal = Vector3(up).normalized() if up is not None else Vector3.up()

    def __repr__(self):
        return (f"RoadPoint(position={self._position!r}, tangent_out={self._tangent_out!r}, "
                f"mode={self._mode.value}, width={self._width:.3f})")

    # -------------------------------------------------------------------------
    # Plain fields
    # -------------------------------------------------------------------------

    @property
    def position(self) -> Vector3:
        return self._position

    @position.setter
    def position(self, value) -> None:
        self._position = Vector3(value)

    @property
    def width(self) -> float:
        return self._width

    @width.setter
    def width(self, value: float) -> None:
        value = float(value)
        if value < 0:
            raise ValueError(f"Width must be non-negative, got {value}")
        self._width = value

    @property
    def normal(self) -> Vector3:
        """Unit normal. Assignments are normalized."""
        return self._normal

    @normal.setter
    def normal(self, value) -> None:
        self._normal = Vector3(value).normalized()

    # -------------------------------------------------------------------------
    # Constrained fields
    # -------------------------------------------------------------------------

    @property
    def mode(self) -> ContinuityMode:
        return self._mode

    @mode.setter
    def mode(self, value: Union[ContinuityMode, str]) -> None:
        self._mode = ContinuityMode(value)
        # Snap the incoming handle to the outgoing one, never the reverse
        self._update_tangent(TangentSide.IN)

    @property
    def tangent_in(self) -> Vector3:
        return self._tangent_in

    @tangent_in.setter
    def tangent_in(self, value) -> None:
        self.set_tangent(TangentSide.IN, value)

    @property
    def tangent_out(self) -> Vector3:
        return self._tangent_out

    @tangent_out.setter
    def tangent_out(self, value) -> None:
        self.set_tangent(TangentSide.OUT, value)

    def get_tangent(self, side: Union[TangentSide, int]) -> Vector3:
        """Read a tangent by selector.

        Raises:
            ValueError: If side is not TangentSide.IN/OUT (or 0/1)
        """
        if _as_side(side) is TangentSide.IN:
            return self._tangent_in
        return self._tangent_out

    def set_tangent(self, side: Union[TangentSide, int], value) -> None:
        """Write a tangent by selector and re-derive the opposite one.

        Raises:
            ValueError: If side is not TangentSide.IN/OUT (or 0/1)
        """
        side = _as_side(side)
        self._store_tangent(side, Vector3(value))
        self._update_tangent(side.opposite)

    def _store_tangent(self, side: TangentSide, value: Vector3) -> None:
        if side is TangentSide.IN:
            self._tangent_in = value
        else:
            self._tangent_out = value

    def _update_tangent(self, side: TangentSide) -> None:
        """Re-derive the tangent on ``side`` from the opposite one."""
        other = self.get_tangent(side.opposite)

        if self._mode is ContinuityMode.MIRRORED:
            self._store_tangent(side, -other)

        elif self._mode is ContinuityMode.ALIGNED:
            direction = other.normalized()
            current = self.get_tangent(side)
            # Keep the handle on the side it already was, default to opposing
            sign = 1.0 if direction.dot(current) > 0 else -1.0
            self._store_tangent(side, direction * (sign * current.length))

    # Operation-style aliases used by editors and scripts

    def set_position(self, value) -> None:
        self.position = value

    def set_tangent_in(self, value) -> None:
        self.tangent_in = value

    def set_tangent_out(self, value) -> None:
        self.tangent_out = value

    def set_mode(self, value: Union[ContinuityMode, str]) -> None:
        self.mode = value

    def set_normal(self, value) -> None:
        self.normal = value

    def set_width(self, value: float) -> None:
        self.width = value

    # -------------------------------------------------------------------------
    # Derived geometry
    # -------------------------------------------------------------------------

    @property
    def handle_in(self) -> Vector3:
        """Absolute location of the incoming handle."""
        return self._position + self._tangent_in

    @property
    def handle_out(self) -> Vector3:
        """Absolute location of the outgoing handle."""
        return self._position + self._tangent_out

    @property
    def offset_vector(self) -> Vector3:
        """Half-width offset from the centerline towards the right corner."""
        right = self._normal.cross(self._tangent_out - self._tangent_in)
        return right.normalized() * (self._width / 2)

    @property
    def right_corner(self) -> Vector3:
        return self._position + self.offset_vector

    @property
    def left_corner(self) -> Vector3:
        return self._position - self.offset_vector

    def corner(self, right: bool) -> Vector3:
        return self.right_corner if right else self.left_corner

    @staticmethod
    def rail_handles(prev: "RoadPoint", next_point: "RoadPoint", right: bool) -> RailHandles:
        """Tangent handles for one rail of the segment prev -> next_point.

        Rails on the outside of a bend are longer than the centerline, so
        the centerline handles are scaled by the ratio of the rail chord to
        the centerline chord. Coincident points give an inf/nan ratio.

        Args:
            prev: Segment start point
            next_point: Segment end point
            right: True for the right rail, False for the left rail

        Returns:
            RailHandles with the scaled prev/next handle offsets
        """
        center = (next_point.position - prev.position).length
        chord = (next_point.corner(right) - prev.corner(right)).length
        multiplier = safe_divide(chord, center)

        return RailHandles(
            prev=prev.tangent_out * multiplier,
            next=next_point.tangent_in * multiplier,
        )

    def copy(self) -> "RoadPoint":
        """Independent copy with identical fields (no constraint re-applied)."""
        clone = RoadPoint.__new__(RoadPoint)
        clone._position = self._position
        clone._tangent_in = self._tangent_in
        clone._tangent_out = self._tangent_out
        clone._mode = self._mode
        clone._width = self._width
        clone._normal = self._normal
        return clone


__all__ = ["ContinuityMode", "TangentSide", "RailHandles", "RoadPoint"]
