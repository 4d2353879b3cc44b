# SPDX-License-Identifier: LicenseRef-CubeAlarm-Custom-Attribution
# Copyright (c) 2025 Paul Shapiro
"""
Face color grids and the unfolded cube net.

Rows and columns are 0-indexed from the top-left corner of a face as seen
when looking straight at it. The net is laid out as:

          U
        L F R B
          D
"""

from __future__ import annotations
from typing import Dict, List, NamedTuple, Optional, Tuple, Union

import numpy as np

from .cube_model import COLOR, CORNER, EDGE, FACE, CubeModel
from .cube_colors import get_corner_colors, get_edge_colors

FaceGrid = Tuple[Tuple[COLOR, COLOR, COLOR], ...]

COLOR_LETTERS: Dict[COLOR, str] = {
    COLOR.WHITE: 'W',
    COLOR.YELLOW: 'Y',
    COLOR.GREEN: 'G',
    COLOR.BLUE: 'B',
    COLOR.RED: 'R',
    COLOR.ORANGE: 'O',
}

# Cell (row, col) of each face in the net
NET_ORIGINS: Dict[FACE, Tuple[int, int]] = {
    FACE.UP: (0, 3),
    FACE.LEFT: (3, 0),
    FACE.FRONT: (3, 3),
    FACE.RIGHT: (3, 6),
    FACE.BACK: (3, 9),
    FACE.DOWN: (6, 3),
}
NET_SHAPE = (9, 12)
NET_EMPTY = -1


class Sticker(NamedTuple):
    """A sticker: the edge or corner slot it belongs to and its index in that slot's colors."""
    piece: Union[EDGE, CORNER]
    index: int


def _e(edge: EDGE, index: int) -> Sticker:
    return Sticker(edge, index)


def _c(corner: CORNER, index: int) -> Sticker:
    return Sticker(corner, index)


# Non-center stickers of every face, row by row; None marks the center
FACE_STICKERS: Dict[FACE, Tuple[Tuple[Optional[Sticker], ...], ...]] = {
    FACE.UP: (
        (_c(CORNER.ULB, 0), _e(EDGE.UB, 0), _c(CORNER.URB, 0)),
        (_e(EDGE.UL, 0), None, _e(EDGE.UR, 0)),
        (_c(CORNER.ULF, 0), _e(EDGE.UF, 0), _c(CORNER.URF, 0)),
    ),
    FACE.LEFT: (
        (_c(CORNER.ULB, 1), _e(EDGE.UL, 1), _c(CORNER.ULF, 1)),
        (_e(EDGE.BL, 1), None, _e(EDGE.FL, 1)),
        (_c(CORNER.DLB, 1), _e(EDGE.DL, 1), _c(CORNER.DLF, 1)),
    ),
    FACE.FRONT: (
        (_c(CORNER.ULF, 2), _e(EDGE.UF, 1), _c(CORNER.URF, 2)),
        (_e(EDGE.FL, 0), None, _e(EDGE.FR, 0)),
        (_c(CORNER.DLF, 2), _e(EDGE.DF, 1), _c(CORNER.DRF, 2)),
    ),
    FACE.RIGHT: (
        (_c(CORNER.URF, 1), _e(EDGE.UR, 1), _c(CORNER.URB, 1)),
        (_e(EDGE.FR, 1), None, _e(EDGE.BR, 1)),
        (_c(CORNER.DRF, 1), _e(EDGE.DR, 1), _c(CORNER.DRB, 1)),
    ),
    FACE.BACK: (
        (_c(CORNER.URB, 2), _e(EDGE.UB, 1), _c(CORNER.ULB, 2)),
        (_e(EDGE.BR, 0), None, _e(EDGE.BL, 0)),
        (_c(CORNER.DRB, 2), _e(EDGE.DB, 1), _c(CORNER.DLB, 2)),
    ),
    FACE.DOWN: (
        (_c(CORNER.DLF, 0), _e(EDGE.DF, 0), _c(CORNER.DRF, 0)),
        (_e(EDGE.DL, 0), None, _e(EDGE.DR, 0)),
        (_c(CORNER.DLB, 0), _e(EDGE.DB, 0), _c(CORNER.DRB, 0)),
    ),
}


def color_letter(color: COLOR) -> str:
    return COLOR_LETTERS[color]


def get_color(cube: CubeModel, face: FACE, row: int, col: int) -> COLOR:
    """Return the color of one sticker on a face."""
    if not (0 <= row < 3 and 0 <= col < 3):
        raise IndexError(f"Sticker ({row}, {col}) is outside a 3x3 face")
    sticker = FACE_STICKERS[face][row][col]
    if sticker is None:
        return cube.center(face)
    if isinstance(sticker.piece, EDGE):
        return get_edge_colors(cube, sticker.piece)[sticker.index]
    return get_corner_colors(cube, sticker.piece)[sticker.index]


def get_face_colors(cube: CubeModel, face: FACE) -> FaceGrid:
    """Return the 3x3 color grid of a face."""
    return tuple(
        tuple(get_color(cube, face, row, col) for col in range(3))
        for row in range(3)
    )


def get_cube_colors(cube: CubeModel) -> Dict[FACE, FaceGrid]:
    """Return the color grid of every face."""
    return {face: get_face_colors(cube, face) for face in FACE}


def cube_net(cube: CubeModel) -> np.ndarray:
    """Unfold the cube into a 9x12 array of COLOR values, NET_EMPTY outside the net."""
    net = np.full(NET_SHAPE, NET_EMPTY, dtype=np.int8)
    for face, grid in get_cube_colors(cube).items():
        top, left = NET_ORIGINS[face]
        net[top:top + 3, left:left + 3] = np.array(grid, dtype=np.int8)
    return net


def format_cube(cube: CubeModel) -> str:
    """Render the net as text, one letter per sticker."""
    lines: List[str] = []
    for row in cube_net(cube):
        cells = ["  " if v == NET_EMPTY else color_letter(COLOR(int(v))) + " " for v in row]
        lines.append("".join(cells).rstrip())
    return "\n".join(lines)


def face_letters(cube: CubeModel) -> Dict[str, List[str]]:
    """Face grids as rows of color letters, keyed by face name."""
    return {
        face.name: ["".join(color_letter(c) for c in row) for row in grid]
        for face, grid in get_cube_colors(cube).items()
    }
