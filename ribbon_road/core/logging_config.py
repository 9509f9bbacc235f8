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
Logging Configuration Module
=============================

Centralized logging setup for Ribbon Road.

Usage:
    from ribbon_road.core.logging_config import get_logger

    logger = get_logger(__name__)
    logger.info("Geometry generated")
    logger.debug("Recalculated point %d", index)
    logger.warning("Degenerate segment")

Log Levels:
    DEBUG    - Per-point tangent recalculation, insertion details
    INFO     - Mesh generation summaries
    WARNING  - Degenerate geometry (non-finite vertices)
    ERROR    - Host mesh delivery failed
"""

import logging
import sys
from typing import Optional

# Package-wide logger name prefix
LOGGER_PREFIX = "ribbon_road"

# Default format for log messages
DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
DETAILED_FORMAT = "[%(levelname)s] %(asctime)s - %(name)s:%(lineno)d - %(message)s"

# Track if logging has been initialized
_initialized = False


def setup_logging(
    level: int = logging.INFO,
    detailed: bool = False,
    stream: Optional[object] = None
) -> logging.Logger:
    """Initialize logging for Ribbon Road.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        detailed: If True, use detailed format with timestamps and line numbers
        stream: Output stream (defaults to sys.stdout for Blender console)

    Returns:
        Root logger for ribbon_road
    """
    global _initialized

    root_logger = logging.getLogger(LOGGER_PREFIX)

    # Clear existing handlers if reinitializing
    if _initialized:
        root_logger.handlers.clear()

    root_logger.setLevel(level)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(level)

    fmt = DETAILED_FORMAT if detailed else DEFAULT_FORMAT
    handler.setFormatter(logging.Formatter(fmt))

    root_logger.addHandler(handler)

    # Prevent propagation to avoid duplicate messages
    root_logger.propagate = False

    _initialized = True

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a specific module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance under the ribbon_road namespace
    """
    if not _initialized:
        setup_logging()

    if not name.startswith(LOGGER_PREFIX):
        name = f"{LOGGER_PREFIX}.{name}"

    return logging.getLogger(name)


def set_log_level(level: int) -> None:
    """Change the logging level at runtime.

    Args:
        level: New logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    root_logger = logging.getLogger(LOGGER_PREFIX)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


__all__ = [
    "setup_logging",
    "get_logger",
    "set_log_level",
    "LOGGER_PREFIX",
]
