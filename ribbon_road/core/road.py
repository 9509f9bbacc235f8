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
Road Spline
===========

A Road is an ordered list of RoadPoints. Consecutive points form cubic
Bezier segments; the road surface is the ribbon between the right and
left rails, each rail being the segment curve offset by half the width
along the points' normals.

The Road owns its points exclusively. Points reference their neighbours
only through list indices, so inserting a point simply shifts indices.

Usage:
    road = Road()
    road.add_point()
    road.insert_point_after(0)
    road.recalculate_all()
    mesh = road.generate_geometry(steps_per_segment=8)
"""

import math
import numbers
import time
from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .bezier import sample_cubic
from .logging_config import get_logger
from .mesh_data import MeshBuffers, MeshStats, strip_indices
from .road_point import RoadPoint
from .settings import RoadSettings
from .vector import Vector3, safe_divide

logger = get_logger(__name__)

# Control polygon of one rail: (start, start handle, end handle, end)
RailControls = Tuple[Vector3, Vector3, Vector3, Vector3]


class HandleKind(Enum):
    """Editable handles of a point, as exposed to an editor."""
    POSITION = "POSITION"
    TANGENT_IN = "TANGENT_IN"
    TANGENT_OUT = "TANGENT_OUT"
    NORMAL = "NORMAL"


class Road:
    """Spline road made of RoadPoints.

    Attributes:
        settings: RoadSettings used for new points and geometry generation
        mesh: Last generated MeshBuffers, or None before the first generation
        last_stats: MeshStats of the last generation
    """

    def __init__(self, points: Optional[Sequence[RoadPoint]] = None,
                 settings: Optional[RoadSettings] = None):
        """
        Args:
            points: Initial points (at least two); defaults to a short
                straight road along +X
            settings: Road settings, defaults to RoadSettings()

        Raises:
            ValueError: If fewer than two points are supplied
        """
        self.settings = settings or RoadSettings()
        self._points: List[RoadPoint] = []
        self.mesh: Optional[MeshBuffers] = None
        self.last_stats: Optional[MeshStats] = None

        if points is None:
            self.reset()
        else:
            points = list(points)
            if len(points) < 2:
                raise ValueError(f"A road needs at least 2 points, got {len(points)}")
            for point in points:
                self._require_point(point)
            self._points = points

    def _default_points(self) -> List[RoadPoint]:
        points = [
            RoadPoint(Vector3(1, 0, 0), Vector3(0.33, 0, 0), up=self.settings.up_axis),
            RoadPoint(Vector3(2, 0, 0), Vector3(0.33, 0, 0), up=self.settings.up_axis),
        ]
        for point in points:
            point.width = self.settings.default_width
        return points

    def reset(self) -> None:
        """Restore the two default points and drop the generated mesh."""
        self._points = self._default_points()
        self.mesh = None
        self.last_stats = None

    @staticmethod
    def _require_point(point) -> None:
        if not isinstance(point, RoadPoint):
            raise TypeError(f"Expected RoadPoint, got {type(point).__name__}")

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._points):
            raise IndexError(f"Point index {index} out of range (road has {len(self._points)} points)")

    # -------------------------------------------------------------------------
    # Sequence access
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._points)

    def __getitem__(self, index: int) -> RoadPoint:
        return self._points[index]

    def __setitem__(self, index: int, point: RoadPoint) -> None:
        self._require_point(point)
        self._points[index] = point

    def __iter__(self) -> Iterator[RoadPoint]:
        return iter(self._points)

    @property
    def size(self) -> int:
        return len(self._points)

    @property
    def points(self) -> Tuple[RoadPoint, ...]:
        """Snapshot of the point order (the points themselves are live)."""
        return tuple(self._points)

    def point_count(self) -> int:
        return len(self._points)

    def has_next(self, index: int) -> bool:
        return index < len(self._points) - 1

    def has_previous(self, index: int) -> bool:
        return index > 0

    # -------------------------------------------------------------------------
    # Point management
    # -------------------------------------------------------------------------

    def add_point(self) -> int:
        """Append a point continuing the road along the last outgoing tangent.

        Returns:
            Index of the new point
        """
        last = self._points[-1]
        point = RoadPoint(
            last.position + last.tangent_out * self.settings.append_distance,
            last.tangent_out,
            up=self.settings.up_axis,
        )
        point.width = last.width
        self._points.append(point)

        logger.debug("Appended point %d at %s", len(self._points) - 1, point.position)
        return len(self._points) - 1

    def insert_point_after(self, index: int, recalculate_directions: bool = True) -> int:
        """Insert a point in the middle of the segment index -> index+1.

        On the last index there is no segment to split and the call
        behaves like add_point().

        The point is inserted before the tangents of the previous, new and
        next points are recalculated, so the recalculation sees the final
        neighbour positions.

        Args:
            index: Index of the point after which to insert
            recalculate_directions: Recalculate tangents around the new point

        Returns:
            Index of the new point

        Raises:
            IndexError: If index is out of range
        """
        self._check_index(index)

        if not self.has_next(index):
            return self.add_point()

        prev = self._points[index]
        next_point = self._points[index + 1]

        position = (0.5 * (next_point.position + prev.position) +
                    0.375 * (prev.tangent_out + next_point.tangent_in))
        point = RoadPoint(position, (next_point.position - prev.position) / 3,
                          up=self.settings.up_axis)
        point.width = 0.5 * (prev.width + next_point.width)

        self._points.insert(index + 1, point)

        if recalculate_directions:
            self.recalculate_tangents(index)
            self.recalculate_tangents(index + 1)
            self.recalculate_tangents(index + 2)

        logger.debug("Inserted point %d at %s", index + 1, point.position)
        return index + 1

    def remove_point(self, index: int) -> RoadPoint:
        """Remove and return the point at index.

        Raises:
            IndexError: If index is out of range
            ValueError: If the road would drop below two points
        """
        self._check_index(index)
        if len(self._points) <= 2:
            raise ValueError("A road needs at least 2 points")
        return self._points.pop(index)

    # -------------------------------------------------------------------------
    # Tangent recalculation
    # -------------------------------------------------------------------------

    def recalculate_tangents(self, index: int) -> None:
        """Derive the tangents and normal of a point from its neighbours.

        End points point their single free tangent a third of the way to
        the neighbour and inherit its normal. Interior points get a tangent
        direction that weights each neighbour by its inverse squared
        distance, a length of sqrt(|d_next| * |d_prev|) / 3, and a normal
        blended so the nearer neighbour dominates.

        Tangents are written through the point, so its continuity mode
        still applies.

        Raises:
            IndexError: If index is out of range
        """
        self._check_index(index)

        has_next = self.has_next(index)
        has_previous = self.has_previous(index)

        if not has_next and not has_previous:
            return

        point = self._points[index]

        if not has_next:
            prev = self._points[index - 1]
            point.tangent_in = (prev.position - point.position) / 3
            point.normal = prev.normal
            return

        if not has_previous:
            next_point = self._points[index + 1]
            point.tangent_out = (next_point.position - point.position) / 3
            point.normal = next_point.normal
            return

        prev = self._points[index - 1]
        next_point = self._points[index + 1]

        d_next = next_point.position - point.position
        d_prev = prev.position - point.position
        dist_next = d_next.length
        dist_prev = d_prev.length

        direction = (d_next / d_next.length_squared - d_prev / d_prev.length_squared).normalized()
        length = math.sqrt(dist_next * dist_prev) / 3

        point.tangent_out = direction * length
        point.tangent_in = -direction * length

        total = dist_next + dist_prev
        point.normal = (next_point.normal * safe_divide(dist_prev, total) +
                        prev.normal * safe_divide(dist_next, total))

    def recalculate_all(self) -> None:
        """Recalculate tangents of every point, first to last."""
        for index in range(len(self._points)):
            self.recalculate_tangents(index)
        logger.debug("Recalculated tangents of %d points", len(self._points))

    # -------------------------------------------------------------------------
    # Editor handles
    # -------------------------------------------------------------------------

    def handle_location(self, index: int, kind: HandleKind) -> Vector3:
        """Absolute location of a point's handle.

        Raises:
            ValueError: If kind is not a HandleKind
        """
        point = self._points[index]

        if kind is HandleKind.POSITION:
            return point.position
        if kind is HandleKind.TANGENT_IN:
            return point.handle_in
        if kind is HandleKind.TANGENT_OUT:
            return point.handle_out
        if kind is HandleKind.NORMAL:
            return point.position + point.normal
        raise ValueError(f"Unknown handle kind: {kind!r}")

    def move_handle(self, index: int, kind: HandleKind, location) -> None:
        """Move a point's handle to an absolute location.

        Tangent and normal handles are stored relative to the point's
        position. Moving the position handle recalculates the point's
        tangents when settings.auto_recalculate is on.

        Raises:
            ValueError: If kind is not a HandleKind
        """
        point = self._points[index]
        location = Vector3(location)

        if kind is HandleKind.POSITION:
            point.position = location
            if self.settings.auto_recalculate:
                self.recalculate_tangents(index)
        elif kind is HandleKind.TANGENT_IN:
            point.tangent_in = location - point.position
        elif kind is HandleKind.TANGENT_OUT:
            point.tangent_out = location - point.position
        elif kind is HandleKind.NORMAL:
            point.normal = location - point.position
        else:
            raise ValueError(f"Unknown handle kind: {kind!r}")

    # -------------------------------------------------------------------------
    # Geometry
    # -------------------------------------------------------------------------

    def segment_rails(self, index: int) -> Tuple[RailControls, RailControls]:
        """Cubic control polygons of the right and left rail of a segment.

        Args:
            index: Index of the segment's start point

        Returns:
            (right_controls, left_controls)

        Raises:
            IndexError: If index has no next point
        """
        if not 0 <= index < len(self._points) - 1:
            raise IndexError(f"No segment starts at index {index}")

        prev = self._points[index]
        next_point = self._points[index + 1]

        right = RoadPoint.rail_handles(prev, next_point, True)
        left = RoadPoint.rail_handles(prev, next_point, False)

        r0, r1 = prev.right_corner, next_point.right_corner
        l0, l1 = prev.left_corner, next_point.left_corner

        return (
            (r0, r0 + right.prev, r1 + right.next, r1),
            (l0, l0 + left.prev, l1 + left.next, l1),
        )

    def generate_geometry(self, steps_per_segment: Optional[int] = None) -> MeshBuffers:
        """Build the road surface as a triangle strip.

        Every segment contributes its start corners and the interior
        samples of both rails; the last point's corners close the strip.
        Segment boundaries are therefore shared and the strip has no seams.

        The previous mesh is replaced wholesale.

        Args:
            steps_per_segment: Samples per segment, defaults to
                settings.steps_per_segment

        Returns:
            The new MeshBuffers (also stored in self.mesh)

        Raises:
            ValueError: If steps_per_segment is not an integer of at least 1
        """
        steps = self.settings.steps_per_segment if steps_per_segment is None else steps_per_segment
        if isinstance(steps, bool) or not isinstance(steps, numbers.Integral):
            raise ValueError(f"steps_per_segment must be an integer, got {steps!r}")
        if steps < 1:
            raise ValueError(f"steps_per_segment must be at least 1, got {steps}")

        start_time = time.perf_counter()
        vertices = []

        for index in range(len(self._points) - 1):
            right, left = self.segment_rails(index)

            vertices.append(right[0].to_tuple())
            vertices.append(left[0].to_tuple())

            for right_sample, left_sample in zip(sample_cubic(*right, steps),
                                                 sample_cubic(*left, steps)):
                vertices.append(right_sample.to_tuple())
                vertices.append(left_sample.to_tuple())

        last = self._points[-1]
        vertices.append(last.right_corner.to_tuple())
        vertices.append(last.left_corner.to_tuple())

        indices = strip_indices(len(vertices) // 2)

        mesh = MeshBuffers(
            name=self.settings.mesh_name,
            vertices=np.array(vertices, dtype=np.float64),
            indices=indices,
        )

        if not mesh.is_finite():
            logger.warning("Road geometry contains non-finite vertices "
                           "(coincident control points?)")

        self.mesh = mesh
        self.last_stats = MeshStats(
            vertex_count=mesh.vertex_count,
            face_count=mesh.triangle_count,
            generation_time=time.perf_counter() - start_time,
            segment_count=len(self._points) - 1,
        )

        logger.debug("Generated road geometry: %d vertices, %d triangles",
                     mesh.vertex_count, mesh.triangle_count)
        return mesh


__all__ = ["HandleKind", "Road", "RailControls"]
