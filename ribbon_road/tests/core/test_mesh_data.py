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
Tests for mesh buffers, strip indexing and normal recalculation.
"""

import numpy as np
import pytest

from ribbon_road.core.mesh_data import MeshBuffers, recalculate_normals, strip_indices


@pytest.fixture
def flat_quad():
    """Unit quad in the XY plane as two (right, left) pairs."""
    vertices = [(0, 1, 0), (0, 0, 0), (1, 1, 0), (1, 0, 0)]
    return vertices, strip_indices(2)


class TestStripIndices:

    @pytest.mark.unit
    def test_two_quads(self):
        assert strip_indices(3).tolist() == [0, 1, 2, 1, 3, 2, 2, 3, 4, 3, 5, 4]

    @pytest.mark.unit
    def test_single_pair_has_no_triangles(self):
        assert len(strip_indices(1)) == 0

    @pytest.mark.unit
    def test_dtype(self):
        assert strip_indices(5).dtype == np.uint32


class TestRecalculateNormals:

    @pytest.mark.unit
    def test_flat_quad_points_up(self, flat_quad):
        normals = recalculate_normals(*flat_quad)
        assert np.allclose(normals, [0.0, 0.0, 1.0])

    @pytest.mark.unit
    def test_folded_strip_blends_at_crease(self):
        # Second quad folded up 90 degrees around x=1
        vertices = [(0, 1, 0), (0, 0, 0), (1, 1, 0), (1, 0, 0), (1, 1, 1), (1, 0, 1)]
        normals = recalculate_normals(vertices, strip_indices(3))
        crease = normals[2]
        assert np.isclose(np.linalg.norm(crease), 1.0)
        assert crease[0] < 0 and crease[2] > 0

    @pytest.mark.unit
    def test_unreferenced_vertex_has_zero_normal(self):
        vertices = [(0, 1, 0), (0, 0, 0), (1, 1, 0), (5, 5, 5)]
        normals = recalculate_normals(vertices, [0, 1, 2])
        assert np.allclose(normals[3], 0.0)

    @pytest.mark.unit
    def test_empty(self):
        assert recalculate_normals(np.zeros((0, 3)), []).shape == (0, 3)


class TestMeshBuffers:

    @pytest.mark.unit
    def test_normals_computed_on_creation(self, flat_quad):
        mesh = MeshBuffers("quad", *flat_quad)
        assert mesh.normals.shape == (4, 3)
        assert mesh.vertex_count == 4
        assert mesh.triangle_count == 2
        assert mesh.triangles.shape == (2, 3)

    @pytest.mark.unit
    def test_rejects_partial_triangles(self, flat_quad):
        with pytest.raises(ValueError):
            MeshBuffers("broken", flat_quad[0], [0, 1])

    @pytest.mark.unit
    def test_as_lists(self, flat_quad):
        vertices, faces = MeshBuffers("quad", *flat_quad).as_lists()
        assert vertices[3] == [1.0, 0.0, 0.0]
        assert faces == [[0, 1, 2], [1, 3, 2]]

    @pytest.mark.unit
    def test_is_finite(self, flat_quad):
        assert MeshBuffers("quad", *flat_quad).is_finite()
        vertices = list(flat_quad[0])
        vertices[2] = (float("nan"), 1, 0)
        assert not MeshBuffers("quad", vertices, flat_quad[1]).is_finite()
