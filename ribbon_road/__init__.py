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
Ribbon Road
Version 0.1.0

Spline-authored road surfaces: control points with paired tangent
handles, automatic tangent recalculation and triangle-strip generation.

The core package runs in plain Python; the tool package writes meshes
into Blender.
"""

__version__ = "0.1.0"

from .core import (
    ContinuityMode,
    HandleKind,
    MeshBuffers,
    Road,
    RoadPoint,
    RoadSettings,
    Vector3,
    generate_road_mesh,
)

__all__ = [
    "__version__",
    "ContinuityMode",
    "HandleKind",
    "MeshBuffers",
    "Road",
    "RoadPoint",
    "RoadSettings",
    "Vector3",
    "generate_road_mesh",
]
