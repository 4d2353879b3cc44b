# SPDX-License-Identifier: LicenseRef-CubeAlarm-Custom-Attribution
# Copyright (c) 2025 Paul Shapiro
"""Decoder for the Xiaomi smart cube state frame."""

from .errors import CubeDataError, MalformedFrame, InvalidOrientation
from .cube_model import (
    FACE, COLOR, EDGE, CORNER, DIR, TurnDirection, Cubie, CubeTurn, CubeModel,
)
from .cube_colors import get_edge_colors, get_corner_colors
from .cube_render import get_color, get_face_colors, get_cube_colors, cube_net, format_cube

__all__ = [
    "CubeDataError", "MalformedFrame", "InvalidOrientation",
    "FACE", "COLOR", "EDGE", "CORNER", "DIR", "TurnDirection",
    "Cubie", "CubeTurn", "CubeModel",
    "get_edge_colors", "get_corner_colors",
    "get_color", "get_face_colors", "get_cube_colors", "cube_net", "format_cube",
]
