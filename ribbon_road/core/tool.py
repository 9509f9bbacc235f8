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
Tool Interfaces
===============

Abstract interfaces the core uses to talk to the host application.

Core functions receive tool classes (not instances) as parameters and
call their class methods. The Blender implementations live in
ribbon_road.tool; tests pass mocks.

Usage:
    from typing import TYPE_CHECKING

    if TYPE_CHECKING:
        import ribbon_road.tool as tool

    def publish(mesh_tool: type[tool.Mesh], buffers):
        return mesh_tool.write(buffers.name, buffers)
"""
from typing import TYPE_CHECKING, Any, Optional
import abc

if TYPE_CHECKING:
    from .mesh_data import MeshBuffers


def interface(cls):
    """
    Decorator that converts all public methods to @classmethod @abstractmethod.

    Tool classes are passed as types to core functions, so every method is
    called on the class.

    Example:
        @interface
        class Mesh:
            def write(cls, name, buffers): pass

        class Mesh(core.tool.Mesh):
            @classmethod
            def write(cls, name, buffers):
                return actual_implementation()
    """
    for name, method in list(cls.__dict__.items()):
        if callable(method) and not name.startswith('_'):
            setattr(cls, name, classmethod(abc.abstractmethod(method)))
    cls.__original_qualname__ = cls.__qualname__
    return cls


@interface
class Mesh:
    """
    Interface for handing generated road meshes to the host.

    The host owns the mesh datablock; the core only ever replaces its
    whole contents.
    """

    def write(cls, name: str, buffers: "MeshBuffers") -> Any:
        """
        Replace the named host mesh with new buffers, creating it if needed.

        The host recomputes its vertex normals from the new triangles.

        Args:
            name: Mesh name
            buffers: Vertex/index buffers to write

        Returns:
            The host object displaying the mesh
        """
        pass

    def get(cls, name: str) -> Optional[Any]:
        """
        Get the host object for a mesh name.

        Returns:
            The host object, or None if no such mesh exists
        """
        pass

    def remove(cls, name: str) -> None:
        """
        Delete the named mesh and its object from the host.

        Args:
            name: Mesh name
        """
        pass


__all__ = ["interface", "Mesh"]
