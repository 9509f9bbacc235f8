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
Tests for the Blender mesh tool.

Only run inside Blender (or with the bpy module installed).
"""

import pytest

from ribbon_road.core.road_mesh import generate_road_mesh
from ribbon_road.tests.conftest import requires_blender


pytestmark = [pytest.mark.blender, requires_blender]

MESH_NAME = "test road"


@pytest.fixture
def blender_mesh():
    """Blender Mesh tool, removing the test mesh afterwards."""
    from ribbon_road.tool import Mesh

    yield Mesh
    Mesh.remove(MESH_NAME)


class TestBlenderMesh:

    def test_write_creates_object_in_collection(self, blender_mesh, straight_road):
        import bpy
        from ribbon_road.tool.mesh import ROAD_COLLECTION_NAME

        obj = blender_mesh.write(MESH_NAME, straight_road.generate_geometry(4))

        assert obj.name == MESH_NAME
        assert len(obj.data.vertices) == 10
        assert len(obj.data.polygons) == 8
        assert obj.name in bpy.data.collections[ROAD_COLLECTION_NAME].objects

    def test_rewrite_replaces_geometry(self, blender_mesh, straight_road):
        first, _ = generate_road_mesh(blender_mesh, straight_road, steps_per_segment=2, name=MESH_NAME)
        second, stats = generate_road_mesh(blender_mesh, straight_road, steps_per_segment=6, name=MESH_NAME)

        assert first == second
        assert len(second.data.vertices) == stats.vertex_count == 14

    def test_get_and_remove(self, blender_mesh, straight_road):
        import bpy

        blender_mesh.write(MESH_NAME, straight_road.generate_geometry())
        assert blender_mesh.get(MESH_NAME) is not None

        blender_mesh.remove(MESH_NAME)
        assert blender_mesh.get(MESH_NAME) is None
        assert bpy.data.meshes.get(MESH_NAME) is None
