# SPDX-License-Identifier: LicenseRef-CubeAlarm-Custom-Attribution
# Copyright (c) 2025 Paul Shapiro
"""
Cube state model for the Xiaomi smart cube.

Each of the 26 visible cubies is stored as the home slot of the piece that
currently occupies a slot plus its orientation, with the 12 edges and the 8
corners in separate tuples. Centers never move on this cube: green on top,
white in front, red left, orange right, yellow back, blue at the bottom.

Slot order follows the cube's own data protocol:

    EDGE    UB UL UF UR  BL FL FR BR  DB DL DF DR
    CORNER  ULB ULF URF URB  DLB DLF DRF DRB

Top and bottom layers are listed counter-clockwise as seen from above,
starting at the back (edges) or back-left (corners).
"""

from __future__ import annotations
import enum
import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence, Tuple

from . import cube_data
from .errors import MalformedFrame

logger = logging.getLogger(__name__)


class FACE(enum.IntEnum):
    UP = 0
    LEFT = 1
    FRONT = 2
    RIGHT = 3
    BACK = 4
    DOWN = 5


class COLOR(enum.IntEnum):
    BLUE = 0
    YELLOW = 1
    ORANGE = 2
    WHITE = 3
    RED = 4
    GREEN = 5


class EDGE(enum.IntEnum):
    UB = 0
    UL = 1
    UF = 2
    UR = 3
    BL = 4
    FL = 5
    FR = 6
    BR = 7
    DB = 8
    DL = 9
    DF = 10
    DR = 11


class CORNER(enum.IntEnum):
    ULB = 0
    ULF = 1
    URF = 2
    URB = 3
    DLB = 4
    DLF = 5
    DRF = 6
    DRB = 7


class DIR(enum.IntEnum):
    """Cubie orientation. Corner values match the wire orientation codes."""
    ROTATED_TWICE = 1
    ROTATED = 2
    ORIENTED = 3
    FLIPPED = 4


class TurnDirection(enum.IntEnum):
    CLOCKWISE = 0
    COUNTER_CLOCKWISE = 1


CENTER_COLORS: Tuple[COLOR, ...] = (
    COLOR.GREEN,   # UP
    COLOR.RED,     # LEFT
    COLOR.WHITE,   # FRONT
    COLOR.ORANGE,  # RIGHT
    COLOR.YELLOW,  # BACK
    COLOR.BLUE,    # DOWN
)

# The wire numbers faces by center color: 1 blue ... 6 green
WIRE_FACES: Dict[int, FACE] = {
    COLOR.BLUE + 1: FACE.DOWN,
    COLOR.YELLOW + 1: FACE.BACK,
    COLOR.ORANGE + 1: FACE.RIGHT,
    COLOR.WHITE + 1: FACE.FRONT,
    COLOR.RED + 1: FACE.LEFT,
    COLOR.GREEN + 1: FACE.UP,
}

FACE_LETTERS = "ULFRBD"

BACK_EDGES = (EDGE.UB, EDGE.BL, EDGE.BR, EDGE.DB)
FRONT_EDGES = (EDGE.UF, EDGE.FL, EDGE.FR, EDGE.DF)


def decode_face(value: int) -> Optional[FACE]:
    """Translate a wire face number. 0 means no move has been recorded."""
    if value == 0:
        return None
    try:
        return WIRE_FACES[value]
    except KeyError:
        raise MalformedFrame(f"Face index {value} out of range 0-{cube_data.MAX_WIRE_FACE}") from None


def decode_direction(value: int) -> TurnDirection:
    """Wire direction 1 is counter-clockwise, any other value clockwise."""
    if value == cube_data.COUNTER_CLOCKWISE_CODE:
        return TurnDirection.COUNTER_CLOCKWISE
    return TurnDirection.CLOCKWISE


@dataclass(frozen=True)
class Cubie:
    """A piece in a slot: its home slot index and its orientation."""
    index: int
    orientation: DIR = DIR.ORIENTED


@dataclass(frozen=True)
class CubeTurn:
    """A face turn reported by the cube."""
    face: FACE
    direction: TurnDirection

    @property
    def notation(self) -> str:
        prime = "'" if self.direction == TurnDirection.COUNTER_CLOCKWISE else ""
        return FACE_LETTERS[self.face] + prime

    def to_dict(self) -> Dict:
        return {
            'face': self.face.name,
            'direction': self.direction.name,
            'move': self.notation,
        }


def _solved_edges() -> Tuple[Cubie, ...]:
    return tuple(Cubie(i) for i in range(len(EDGE)))


def _solved_corners() -> Tuple[Cubie, ...]:
    return tuple(Cubie(i) for i in range(len(CORNER)))


@dataclass(frozen=True)
class CubeModel:
    """Permutation and orientation of every cubie, plus the fixed centers.

    Equality covers edges, corners and centers only. The move fields travel
    with a decoded frame but are not part of the mechanical state.
    """
    edges: Tuple[Cubie, ...] = field(default_factory=_solved_edges)
    corners: Tuple[Cubie, ...] = field(default_factory=_solved_corners)
    centers: Tuple[COLOR, ...] = CENTER_COLORS
    turned_face: Optional[FACE] = field(default=None, compare=False)
    turned_direction: TurnDirection = field(default=TurnDirection.CLOCKWISE, compare=False)
    last_turned_face: Optional[FACE] = field(default=None, compare=False)
    last_turned_direction: TurnDirection = field(default=TurnDirection.CLOCKWISE, compare=False)

    def __post_init__(self):
        # Accept any sequence, store tuples so copies never share state
        object.__setattr__(self, 'edges', tuple(self.edges))
        object.__setattr__(self, 'corners', tuple(self.corners))
        object.__setattr__(self, 'centers', tuple(self.centers))
        if len(self.edges) != len(EDGE) or len(self.corners) != len(CORNER):
            raise ValueError(f"Expected {len(EDGE)} edges and {len(CORNER)} corners, "
                             f"got {len(self.edges)} and {len(self.corners)}")

    @classmethod
    def solved(cls) -> 'CubeModel':
        """Return the solved cube."""
        return cls()

    @classmethod
    def from_cube_data(cls, data: Sequence[int]) -> 'CubeModel':
        """Decode the 36-cell buffer (already decrypted) into a cube state.

        Edge orientation is only reported per group: the flip marker in
        cells 28-30 flips the four back edges, the four front edges, or
        both groups at once. Every other edge stays oriented.
        """
        cells = cube_data.validate_cube_data(data)
        logger.debug("Decoding cube data:\n%s", cube_data.format_cube_data(cells))

        corners = [
            Cubie(cells[cube_data.CORNER_OFFSET + i] - 1,
                  DIR(cells[cube_data.CORNER_ORIENTATION_OFFSET + i]))
            for i in range(len(CORNER))
        ]

        orientations = [DIR.ORIENTED] * len(EDGE)
        if cube_data.is_back_flipped(cells):
            for edge in BACK_EDGES:
                orientations[edge] = DIR.FLIPPED
        if cube_data.is_front_flipped(cells):
            for edge in FRONT_EDGES:
                orientations[edge] = DIR.FLIPPED
        edges = [
            Cubie(cells[cube_data.EDGE_OFFSET + i] - 1, orientations[i])
            for i in range(len(EDGE))
        ]

        return cls(
            edges=tuple(edges),
            corners=tuple(corners),
            turned_face=decode_face(cells[cube_data.TURN_OFFSET]),
            turned_direction=decode_direction(cells[cube_data.TURN_OFFSET + 1]),
            last_turned_face=decode_face(cells[cube_data.LAST_TURN_OFFSET]),
            last_turned_direction=decode_direction(cells[cube_data.LAST_TURN_OFFSET + 1]),
        )

    @classmethod
    def from_payload(cls, payload: bytes) -> 'CubeModel':
        """Decode a decrypted 20-byte notification payload."""
        return cls.from_cube_data(cube_data.unpack_half_bytes(payload))

    @property
    def turn(self) -> Optional[CubeTurn]:
        if self.turned_face is None:
            return None
        return CubeTurn(self.turned_face, self.turned_direction)

    @property
    def last_turn(self) -> Optional[CubeTurn]:
        if self.last_turned_face is None:
            return None
        return CubeTurn(self.last_turned_face, self.last_turned_direction)

    def center(self, face: FACE) -> COLOR:
        return self.centers[face]

    def is_solved(self) -> bool:
        """Check if every cubie sits in its home slot, oriented."""
        for pieces in (self.edges, self.corners):
            for i, cubie in enumerate(pieces):
                if cubie.index != i or cubie.orientation != DIR.ORIENTED:
                    return False
        return True

    def to_dict(self) -> Dict:
        turn = self.turn
        last_turn = self.last_turn
        return {
            'edges': [{'slot': EDGE(i).name, 'index': c.index, 'orientation': c.orientation.name}
                      for i, c in enumerate(self.edges)],
            'corners': [{'slot': CORNER(i).name, 'index': c.index, 'orientation': c.orientation.name}
                        for i, c in enumerate(self.corners)],
            'centers': {FACE(i).name: color.name for i, color in enumerate(self.centers)},
            'solved': self.is_solved(),
            'turn': turn.to_dict() if turn else None,
            'last_turn': last_turn.to_dict() if last_turn else None,
        }
