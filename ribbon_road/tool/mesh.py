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
Mesh tool implementation - Blender-specific mesh output.

This module implements the Mesh interface from core.tool. This is where
ALL Blender imports (bpy) for road output live.

Usage:
    from ribbon_road.tool import Mesh

    obj = Mesh.write("procedural road", road.generate_geometry())
"""
from typing import TYPE_CHECKING, Optional

import bpy

from ..core import tool as core_tool
from ..core.logging_config import get_logger

if TYPE_CHECKING:
    from ..core.mesh_data import MeshBuffers

logger = get_logger(__name__)

# Collection that receives road objects
ROAD_COLLECTION_NAME = "Ribbon Roads"


class Mesh(core_tool.Mesh):
    """
    Blender mesh datablocks for generated roads.

    Each road mesh lives in a datablock and object of the same name inside
    the "Ribbon Roads" collection.
    """

    @classmethod
    def write(cls, name: str, buffers: "MeshBuffers") -> bpy.types.Object:
        """
        Replace the named mesh with new buffers, creating it if needed.

        Args:
            name: Mesh and object name
            buffers: Vertex/index buffers from Road.generate_geometry()

        Returns:
            The Blender object displaying the mesh
        """
        mesh = bpy.data.meshes.get(name)
        if mesh is None:
            mesh = bpy.data.meshes.new(name)
        else:
            mesh.clear_geometry()

        vertices, faces = buffers.as_lists()
        mesh.from_pydata(vertices, [], faces)
        # Rebuilds edges and lets Blender recompute normals from the faces
        mesh.update(calc_edges=True)

        obj = bpy.data.objects.get(name)
        if obj is None:
            obj = bpy.data.objects.new(name, mesh)
            cls._get_collection().objects.link(obj)
        elif obj.data is not mesh:
            obj.data = mesh

        logger.debug("Wrote mesh '%s': %d vertices, %d faces",
                     name, len(vertices), len(faces))
        return obj

    @classmethod
    def get(cls, name: str) -> Optional[bpy.types.Object]:
        """Get the object displaying a road mesh."""
        return bpy.data.objects.get(name)

    @classmethod
    def remove(cls, name: str) -> None:
        """Delete a road object and its mesh datablock."""
        obj = bpy.data.objects.get(name)
        if obj is not None:
            bpy.data.objects.remove(obj, do_unlink=True)

        mesh = bpy.data.meshes.get(name)
        if mesh is not None and mesh.users == 0:
            bpy.data.meshes.remove(mesh)

    @classmethod
    def _get_collection(cls) -> bpy.types.Collection:
        collection = bpy.data.collections.get(ROAD_COLLECTION_NAME)
        if collection is None:
            collection = bpy.data.collections.new(ROAD_COLLECTION_NAME)
            bpy.context.scene.collection.children.link(collection)
        return collection


__all__ = ["Mesh", "ROAD_COLLECTION_NAME"]
