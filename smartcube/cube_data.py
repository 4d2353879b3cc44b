# SPDX-License-Identifier: LicenseRef-CubeAlarm-Custom-Attribution
# Copyright (c) 2025 Paul Shapiro
"""
Wire-level helpers for the Xiaomi smart cube state frame.

The cube notifies a 20-byte payload. Once the additive cipher has been
removed by the transport, the first 36 half bytes of the payload form the
cube data cells decoded by CubeModel.from_cube_data():

    cells  0 -  7   corner occupant (1-8), ULB ULF URF URB DLB DLF DRF DRB
    cells  8 - 15   corner orientation (3 oriented, 2 rotated, 1 rotated twice)
    cells 16 - 27   edge occupant (1-12), UB UL UF UR BL FL FR BR DB DL DF DR
    cells 28 - 30   edge flip marker (8 9 8 back, 2 6 2 front, A F A both)
    cell  31        always 0
    cells 32 - 33   face and direction of this move
    cells 34 - 35   face and direction of the previous move
"""

from __future__ import annotations
import numbers
from typing import List, Sequence, Tuple

from .errors import MalformedFrame, InvalidOrientation

PAYLOAD_LENGTH = 20
CUBE_DATA_LENGTH = 36

CORNER_OFFSET = 0
CORNER_ORIENTATION_OFFSET = 8
EDGE_OFFSET = 16
FLIP_OFFSET = 28
TURN_OFFSET = 32
LAST_TURN_OFFSET = 34

CORNER_COUNT = 8
EDGE_COUNT = 12

# Orientation codes a corner may carry on the wire
CORNER_ORIENTATION_CODES = (1, 2, 3)

BOTH_FLIPPED_CODE = (0x0A, 0x0F, 0x0A)
BACK_FLIPPED_CODES = ((8, 9, 8), BOTH_FLIPPED_CODE)
FRONT_FLIPPED_CODES = ((2, 6, 2), BOTH_FLIPPED_CODE)

# 0 = no move recorded yet, 1-6 = face by center color
MAX_WIRE_FACE = 6
COUNTER_CLOCKWISE_CODE = 1


def get_half_byte(payload: bytes, i: int) -> int:
    """Return the i-th half byte of payload, high nibble first."""
    byte = payload[i // 2]
    return byte & 0x0F if i % 2 == 1 else byte >> 4


def unpack_half_bytes(payload: bytes) -> List[int]:
    """Split a decrypted radio payload into the 36 cube data cells."""
    needed = CUBE_DATA_LENGTH // 2
    if len(payload) < needed:
        raise MalformedFrame(f"Payload too short: {len(payload)} bytes, need at least {needed}")
    return [get_half_byte(payload, i) for i in range(CUBE_DATA_LENGTH)]


def _check_permutation(data: Sequence[int], offset: int, count: int, label: str) -> None:
    cells = list(data[offset:offset + count])
    for i, value in enumerate(cells):
        if not 1 <= value <= count:
            raise MalformedFrame(f"{label} piece number {value} out of range 1-{count}", offset + i)
    if len(set(cells)) != count:
        seen = set()
        for i, value in enumerate(cells):
            if value in seen:
                raise MalformedFrame(f"{label} piece number {value} occurs twice", offset + i)
            seen.add(value)


def validate_cube_data(data: Sequence[int]) -> List[int]:
    """Check a 36-cell buffer and return it as a list of ints.

    Raises MalformedFrame for length, range and permutation problems and
    InvalidOrientation for a corner orientation code outside 1-3.
    """
    if len(data) != CUBE_DATA_LENGTH:
        raise MalformedFrame(f"Cube data must be {CUBE_DATA_LENGTH} cells, got {len(data)}")

    for i, value in enumerate(data):
        if not isinstance(value, numbers.Integral):
            raise MalformedFrame(f"Cell value {value!r} is not an integer", i)
    cells = [int(v) for v in data]
    for i, value in enumerate(cells):
        if not 0 <= value <= 0x0F:
            raise MalformedFrame(f"Cell value 0x{value:x} is not a half byte", i)

    _check_permutation(cells, CORNER_OFFSET, CORNER_COUNT, "Corner")
    _check_permutation(cells, EDGE_OFFSET, EDGE_COUNT, "Edge")

    for i in range(CORNER_COUNT):
        offset = CORNER_ORIENTATION_OFFSET + i
        if cells[offset] not in CORNER_ORIENTATION_CODES:
            raise InvalidOrientation(f"Corner orientation code {cells[offset]} is not 1, 2 or 3", offset)

    for offset in (TURN_OFFSET, LAST_TURN_OFFSET):
        if cells[offset] > MAX_WIRE_FACE:
            raise MalformedFrame(f"Face index {cells[offset]} out of range 0-{MAX_WIRE_FACE}", offset)

    return cells


def flip_code(data: Sequence[int]) -> Tuple[int, int, int]:
    return data[FLIP_OFFSET], data[FLIP_OFFSET + 1], data[FLIP_OFFSET + 2]


def is_back_flipped(data: Sequence[int]) -> bool:
    return flip_code(data) in BACK_FLIPPED_CODES


def is_front_flipped(data: Sequence[int]) -> bool:
    return flip_code(data) in FRONT_FLIPPED_CODES


def format_cube_data(data: Sequence[int]) -> str:
    """Hex dump of the cells grouped as corners, orientations, edges, flips and moves."""
    groups = [(0, 8), (8, 16), (16, 28), (28, 32), (32, 36)]
    return "\n".join(" ".join(f"{v:X}" for v in data[start:end]) for start, end in groups)
