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
Pytest Configuration and Fixtures
==================================

Shared fixtures for the Ribbon Road test suite.
"""

import importlib.util
from unittest.mock import MagicMock

import pytest

from ribbon_road.core import Road, RoadPoint, Vector3


# =============================================================================
# Skip Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, no external deps)")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "blender: Requires Blender environment")
    config.addinivalue_line("markers", "slow: Slow running tests")


HAS_BLENDER = importlib.util.find_spec("bpy") is not None

requires_blender = pytest.mark.skipif(
    not HAS_BLENDER,
    reason="Blender environment not available"
)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def straight_road() -> Road:
    """Two points 3 units apart along +X with recalculated tangents."""
    road = Road([
        RoadPoint(Vector3(0, 0, 0), Vector3(1, 0, 0)),
        RoadPoint(Vector3(3, 0, 0), Vector3(1, 0, 0)),
    ])
    road.recalculate_all()
    return road


@pytest.fixture
def bent_road() -> Road:
    """Four-point road turning left, with recalculated tangents."""
    road = Road([
        RoadPoint(Vector3(0, 0, 0), Vector3(1, 0, 0)),
        RoadPoint(Vector3(4, 0, 0), Vector3(1, 0, 0)),
        RoadPoint(Vector3(7, 3, 0), Vector3(0, 1, 0)),
        RoadPoint(Vector3(7, 8, 0), Vector3(0, 1, 0)),
    ])
    road.recalculate_all()
    return road


@pytest.fixture
def mock_mesh_tool() -> MagicMock:
    """Mesh tool stand-in that records writes.

    Returns:
        MagicMock whose write() returns a sentinel host object
    """
    mock = MagicMock()
    mock.write.return_value = MagicMock(name="host_object")
    return mock


# =============================================================================
# Export fixtures for use in test files
# =============================================================================

__all__ = [
    "requires_blender",
    "straight_road",
    "bent_road",
    "mock_mesh_tool",
    "HAS_BLENDER",
]
