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
Road Settings
=============

Tunable defaults for road authoring and geometry generation.
"""

import numbers
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Tuple


@dataclass
class RoadSettings:
    """Parameters shared by a road's point editing and mesh generation.

    Attributes:
        steps_per_segment: Curve samples per segment when generating geometry
        append_distance: How far add_point() places a new point along the
            last point's outgoing tangent
        default_width: Width of freshly created points
        max_width: Upper width bound offered by editors (not enforced here)
        up_axis: Initial normal of new points
        mesh_name: Name given to generated mesh buffers
        auto_recalculate: Recalculate a point's tangents whenever its
            position handle is moved
    """

    steps_per_segment: int = 4
    append_distance: float = 3.0
    default_width: float = 1.0
    max_width: float = 5.0
    up_axis: Tuple[float, float, float] = (0.0, 0.0, 1.0)
    mesh_name: str = "procedural road"
    auto_recalculate: bool = False

    def __post_init__(self):
        """Validate settings after initialization."""
        steps = self.steps_per_segment
        if isinstance(steps, bool) or not isinstance(steps, numbers.Integral):
            raise ValueError(f"steps_per_segment must be an integer, got {steps!r}")
        if self.steps_per_segment < 1:
            raise ValueError(
                f"steps_per_segment must be at least 1, got {self.steps_per_segment}"
            )

        if self.default_width < 0:
            raise ValueError(f"default_width must be non-negative, got {self.default_width}")

        if self.max_width < self.default_width:
            raise ValueError(
                f"max_width ({self.max_width}) is smaller than default_width ({self.default_width})"
            )

        self.up_axis = tuple(float(c) for c in self.up_axis)
        if len(self.up_axis) != 3:
            raise ValueError(f"up_axis must have 3 components, got {len(self.up_axis)}")
        if not any(self.up_axis):
            raise ValueError("up_axis must not be the zero vector")

    @classmethod
    def default(cls) -> "RoadSettings":
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoadSettings":
        """Build settings from a plain dictionary.

        Raises:
            ValueError: If the dictionary holds unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown road settings: {', '.join(sorted(unknown))}")
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["RoadSettings"]
