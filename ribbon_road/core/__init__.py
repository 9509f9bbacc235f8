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
Ribbon Road Core Module

Pure Python data structures and algorithms for spline roads:
- Bezier evaluation (bezier.py)
- Control points with continuity-constrained tangents (road_point.py)
- The road aggregate and its triangulation (road.py)
- Mesh buffers and normal recalculation (mesh_data.py)
- Interface definitions (tool.py) for the host layer

Architecture:
    Layer 1: Core (this module) - Pure Python interfaces and business logic
    Layer 2: Tool (ribbon_road.tool) - Blender-specific implementations
"""

# Import logging configuration first (no dependencies)
from .logging_config import get_logger, setup_logging

from .vector import Vector3
from .bezier import quadratic_point, cubic_point, get_point, sample_cubic
from .settings import RoadSettings
from .road_point import ContinuityMode, TangentSide, RailHandles, RoadPoint
from .mesh_data import MeshBuffers, MeshStats, recalculate_normals, strip_indices
from .road import HandleKind, Road
from .tool import interface, Mesh
from .road_mesh import generate_road_mesh

__all__ = [
    "get_logger",
    "setup_logging",
    "Vector3",
    "quadratic_point",
    "cubic_point",
    "get_point",
    "sample_cubic",
    "RoadSettings",
    "ContinuityMode",
    "TangentSide",
    "RailHandles",
    "RoadPoint",
    "MeshBuffers",
    "MeshStats",
    "recalculate_normals",
    "strip_indices",
    "HandleKind",
    "Road",
    "interface",
    "Mesh",
    "generate_road_mesh",
]
