# SPDX-License-Identifier: LicenseRef-CubeAlarm-Custom-Attribution
# Copyright (c) 2025 Paul Shapiro
"""
Sticker colors of a single slot, derived from the piece in it.

Corner colors are kept along the Z (up/down), Y (left/right) and X
(front/back) axes, so ULB reads green, red, yellow. A twisted corner moves
its Z color onto another axis according to its orientation, and a corner
sitting in a slot of the other parity (odd home index + slot index) shows
its remaining two colors mirrored. Edges only need the flip.
"""

from __future__ import annotations
from typing import Dict, List, Tuple

from .cube_model import COLOR, CORNER, DIR, EDGE, CubeModel
from .errors import InvalidOrientation

G, R, B, O, W, Y = COLOR.GREEN, COLOR.RED, COLOR.BLUE, COLOR.ORANGE, COLOR.WHITE, COLOR.YELLOW

# Colors of each edge piece at home, indexed by EDGE
EDGE_COLORS: Tuple[Tuple[COLOR, COLOR], ...] = (
    (G, Y),  # UB
    (G, R),  # UL
    (G, W),  # UF
    (G, O),  # UR
    (Y, R),  # BL
    (W, R),  # FL
    (W, O),  # FR
    (Y, O),  # BR
    (B, Y),  # DB
    (B, R),  # DL
    (B, W),  # DF
    (B, O),  # DR
)

# Colors of each corner piece at home in Z, Y, X order, indexed by CORNER
CORNER_COLORS: Tuple[Tuple[COLOR, COLOR, COLOR], ...] = (
    (G, R, Y),  # ULB
    (G, R, W),  # ULF
    (G, O, W),  # URF
    (G, O, Y),  # URB
    (B, R, Y),  # DLB
    (B, R, W),  # DLF
    (B, O, W),  # DRF
    (B, O, Y),  # DRB
)

# Where the Z, Y and X colors land for each corner orientation
CORNER_POSITIONS: Dict[DIR, Tuple[int, int, int]] = {
    DIR.ORIENTED: (0, 1, 2),
    DIR.ROTATED: (2, 0, 1),
    DIR.ROTATED_TWICE: (1, 2, 0),
}

# Pair of positions exchanged when the parity check is odd
CORNER_PARITY_SWAPS: Dict[DIR, Tuple[int, int]] = {
    DIR.ORIENTED: (1, 2),
    DIR.ROTATED: (0, 2),
    DIR.ROTATED_TWICE: (0, 1),
}


def corner_parity(home_index: int, slot_index: int) -> int:
    return (home_index + slot_index) % 2


def get_edge_colors(cube: CubeModel, edge: EDGE) -> Tuple[COLOR, COLOR]:
    """Return the two colors showing at an edge slot."""
    cubie = cube.edges[edge]
    first, second = EDGE_COLORS[cubie.index]
    if cubie.orientation == DIR.FLIPPED:
        return second, first
    return first, second


def corner_color_positions(cube: CubeModel, corner: CORNER) -> Tuple[int, int, int]:
    """Return the result positions of the Z, Y and X colors for a corner slot.

    Raises InvalidOrientation if the cubie carries an edge orientation.
    """
    cubie = cube.corners[corner]
    orientation = cubie.orientation
    if orientation not in CORNER_POSITIONS:
        raise InvalidOrientation(f"Corner {CORNER(corner).name} has non-corner orientation {orientation!r}")

    positions: List[int] = list(CORNER_POSITIONS[orientation])
    a, b = CORNER_PARITY_SWAPS[orientation]
    swap = corner_parity(cubie.index, corner) == 1
    # Twice-rotated corners also swap on even parity unless the cube is solved.
    # Unverified against a physical cube.
    if orientation == DIR.ROTATED_TWICE and not swap and not cube.is_solved():
        swap = True
    if swap:
        positions[a], positions[b] = positions[b], positions[a]
    return positions[0], positions[1], positions[2]


def get_corner_colors(cube: CubeModel, corner: CORNER) -> Tuple[COLOR, COLOR, COLOR]:
    """Return the three colors showing at a corner slot, in Z, Y, X order."""
    z, y, x = CORNER_COLORS[cube.corners[corner].index]
    i0, i1, i2 = corner_color_positions(cube, corner)
    result: List[COLOR] = [z, z, z]
    result[i0] = z
    result[i1] = y
    result[i2] = x
    return result[0], result[1], result[2]
