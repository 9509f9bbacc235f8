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
Road mesh core module - Pure Python business logic.

Regenerates a road's surface and hands it to the host through an
injected mesh tool. NO Blender imports allowed here.

Usage:
    import ribbon_road.tool as tool
    from ribbon_road.core.road_mesh import generate_road_mesh

    obj, stats = generate_road_mesh(tool.Mesh, road, steps_per_segment=8)
"""
import time
from dataclasses import replace
from typing import TYPE_CHECKING, Any, Optional, Tuple

from .logging_config import get_logger
from .mesh_data import MeshStats
from .road import Road

if TYPE_CHECKING:
    import ribbon_road.tool as tool

logger = get_logger(__name__)


def generate_road_mesh(
    mesh_tool: "Optional[type[tool.Mesh]]",
    road: Road,
    steps_per_segment: Optional[int] = None,
    name: Optional[str] = None,
) -> Tuple[Any, MeshStats]:
    """
    Generate a road's surface and write it into the host mesh.

    Args:
        mesh_tool: Mesh tool class (dependency injection)
        road: Road to triangulate
        steps_per_segment: Samples per segment (defaults to road settings)
        name: Host mesh name (defaults to road.settings.mesh_name)

    Returns:
        Tuple of (host_object, MeshStats)

    Raises:
        RuntimeError: If no mesh tool is available
        ValueError: If steps_per_segment is not an integer of at least 1
    """
    if mesh_tool is None:
        raise RuntimeError("No mesh tool available to receive road geometry")

    start_time = time.perf_counter()

    buffers = road.generate_geometry(steps_per_segment)
    mesh_name = name or buffers.name
    host_object = mesh_tool.write(mesh_name, buffers)

    # Generation stats plus the time spent writing into the host
    stats = replace(road.last_stats, generation_time=time.perf_counter() - start_time)

    logger.info("Road mesh generated:")
    logger.info("  Name: %s", mesh_name)
    logger.info("  Vertices: %s", f"{stats.vertex_count:,}")
    logger.info("  Faces: %s", f"{stats.face_count:,}")
    logger.info("  Time: %.3fs", stats.generation_time)

    return host_object, stats


__all__ = ["generate_road_mesh"]
