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
Mesh Buffers
============

Render-facing output of road generation: a flat vertex array, a flat
triangle index list and per-vertex normals derived from the triangles.

Vertices are stored as (right, left) pairs along the road, so vertex
2k is on the right rail and 2k+1 on the left rail.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, List

import numpy as np

# Two triangles per quad between consecutive (right, left) pairs
STRIP_PATTERN = np.array([0, 1, 2, 1, 3, 2], dtype=np.uint32)


def strip_indices(pair_count: int) -> np.ndarray:
    """Triangle list for a strip of ``pair_count`` (right, left) vertex pairs.

    Args:
        pair_count: Number of vertex pairs along the strip

    Returns:
        Flat uint32 index array of length 6 * (pair_count - 1)
    """
    quads = max(pair_count - 1, 0)
    offsets = np.arange(quads, dtype=np.uint32) * 2
    return (offsets[:, None] + STRIP_PATTERN[None, :]).reshape(-1)


def recalculate_normals(vertices, indices) -> np.ndarray:
    """Area-weighted vertex normals from triangle topology.

    Each triangle adds its unnormalized face normal (length = twice its
    area) to its three vertices; sums are then normalized. Vertices that
    touch no triangle, or only degenerate ones, get a zero normal.

    Args:
        vertices: (N, 3) vertex positions
        indices: Flat triangle index list

    Returns:
        (N, 3) float64 array of unit (or zero) normals
    """
    vertices = np.asarray(vertices, dtype=np.float64).reshape(-1, 3)
    triangles = np.asarray(indices, dtype=np.int64).reshape(-1, 3)
    normals = np.zeros_like(vertices)

    if len(triangles) == 0:
        return normals

    a = vertices[triangles[:, 0]]
    b = vertices[triangles[:, 1]]
    c = vertices[triangles[:, 2]]
    face_normals = np.cross(b - a, c - a)

    for corner in range(3):
        np.add.at(normals, triangles[:, corner], face_normals)

    lengths = np.linalg.norm(normals, axis=1, keepdims=True)
    with np.errstate(invalid="ignore", divide="ignore"):
        normals = np.where(lengths > 0, normals / lengths, 0.0)
    return normals


@dataclass
class MeshStats:
    """Statistics from mesh generation."""
    vertex_count: int
    face_count: int
    generation_time: float
    segment_count: int


@dataclass
class MeshBuffers:
    """Triangle-list mesh produced by road geometry generation.

    Attributes:
        name: Mesh name handed to the host
        vertices: (N, 3) float64 positions
        indices: Flat uint32 triangle indices
        normals: (N, 3) vertex normals, recalculated from the triangles
            when not supplied
    """
    name: str
    vertices: np.ndarray
    indices: np.ndarray
    normals: Optional[np.ndarray] = None

    def __post_init__(self):
        self.vertices = np.asarray(self.vertices, dtype=np.float64).reshape(-1, 3)
        self.indices = np.asarray(self.indices, dtype=np.uint32).reshape(-1)

        if len(self.indices) % 3:
            raise ValueError(
                f"Triangle list length must be a multiple of 3, got {len(self.indices)}"
            )

        if self.normals is None:
            self.recalculate_normals()
        else:
            self.normals = np.asarray(self.normals, dtype=np.float64).reshape(-1, 3)

    def recalculate_normals(self) -> None:
        """Recompute vertex normals from the current triangle topology."""
        self.normals = recalculate_normals(self.vertices, self.indices)

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    @property
    def triangles(self) -> np.ndarray:
        """(T, 3) view of the index list."""
        return self.indices.reshape(-1, 3)

    def is_finite(self) -> bool:
        """True if every vertex coordinate is finite."""
        return bool(np.isfinite(self.vertices).all())

    def as_lists(self) -> Tuple[List[List[float]], List[List[int]]]:
        """Plain Python (vertices, faces) lists for host mesh APIs."""
        return self.vertices.tolist(), self.triangles.tolist()


__all__ = [
    "STRIP_PATTERN",
    "strip_indices",
    "recalculate_normals",
    "MeshStats",
    "MeshBuffers",
]
