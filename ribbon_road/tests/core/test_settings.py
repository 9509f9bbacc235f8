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
Tests for RoadSettings.
"""

import pytest

from ribbon_road.core.road import Road
from ribbon_road.core.settings import RoadSettings
from ribbon_road.core.vector import Vector3


class TestRoadSettings:

    @pytest.mark.unit
    def test_defaults(self):
        settings = RoadSettings.default()
        assert settings.steps_per_segment == 4
        assert settings.append_distance == 3.0
        assert settings.default_width == 1.0
        assert settings.up_axis == (0.0, 0.0, 1.0)
        assert settings.mesh_name == "procedural road"
        assert settings.auto_recalculate is False

    @pytest.mark.unit
    @pytest.mark.parametrize("kwargs", [
        {"steps_per_segment": 0},
        {"default_width": -1.0},
        {"default_width": 6.0},
        {"up_axis": (0, 0, 0)},
        {"up_axis": (0, 1)},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            RoadSettings(**kwargs)

    @pytest.mark.unit
    def test_from_dict(self):
        settings = RoadSettings.from_dict({"steps_per_segment": 8, "mesh_name": "Main St"})
        assert settings.steps_per_segment == 8
        assert settings.mesh_name == "Main St"

    @pytest.mark.unit
    def test_from_dict_rejects_unknown_keys(self):
        with pytest.raises(ValueError, match="lod"):
            RoadSettings.from_dict({"lod": "high"})

    @pytest.mark.unit
    def test_dict_round_trip(self):
        settings = RoadSettings(append_distance=2.0, up_axis=(0, 1, 0))
        assert RoadSettings.from_dict(settings.to_dict()) == settings


class TestRoadUsesSettings:

    @pytest.mark.unit
    def test_up_axis_and_width_of_default_points(self):
        road = Road(settings=RoadSettings(up_axis=(0, 2, 0), default_width=2.0))
        assert road[0].normal == Vector3(0, 1, 0)
        assert road[1].width == 2.0

    @pytest.mark.unit
    def test_steps_and_name(self):
        road = Road(settings=RoadSettings(steps_per_segment=2, mesh_name="Lane"))
        mesh = road.generate_geometry()
        assert mesh.vertex_count == 6
        assert mesh.name == "Lane"

    @pytest.mark.unit
    def test_fractional_steps_rejected(self):
        with pytest.raises(ValueError, match="integer"):
            RoadSettings(steps_per_segment=2.5)
