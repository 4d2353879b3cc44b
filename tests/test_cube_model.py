import dataclasses

import pytest

from smartcube.cube_model import (
    CENTER_COLORS, COLOR, CORNER, DIR, EDGE, FACE, CubeModel, CubeTurn, Cubie, TurnDirection,
    decode_direction, decode_face,
)
from smartcube.errors import InvalidOrientation, MalformedFrame

BACK_GROUP = {EDGE.UB, EDGE.BL, EDGE.BR, EDGE.DB}
FRONT_GROUP = {EDGE.UF, EDGE.FL, EDGE.FR, EDGE.DF}


def flipped_edges(cube):
    return {EDGE(i) for i, c in enumerate(cube.edges) if c.orientation == DIR.FLIPPED}


def test_solved_constructor():
    cube = CubeModel.solved()
    assert cube.is_solved()
    assert [c.index for c in cube.edges] == list(range(12))
    assert [c.index for c in cube.corners] == list(range(8))
    assert all(c.orientation == DIR.ORIENTED for c in cube.edges + cube.corners)
    assert cube.center(FACE.UP) == COLOR.GREEN
    assert cube.center(FACE.LEFT) == COLOR.RED
    assert cube.center(FACE.FRONT) == COLOR.WHITE
    assert cube.center(FACE.RIGHT) == COLOR.ORANGE
    assert cube.center(FACE.BACK) == COLOR.YELLOW
    assert cube.center(FACE.DOWN) == COLOR.BLUE
    assert cube.turn is None
    assert cube.last_turn is None


def test_decode_solved_frame(solved_data):
    cube = CubeModel.from_cube_data(solved_data)
    assert cube == CubeModel.solved()
    assert cube.is_solved()


def test_decode_is_zero_indexed(scrambled_data):
    cube = CubeModel.from_cube_data(scrambled_data)
    assert [c.index for c in cube.corners] == [1, 0, 3, 2, 5, 4, 7, 6]
    assert [c.index for c in cube.edges] == list(range(11, -1, -1))
    assert [c.orientation for c in cube.corners] == [
        DIR.ORIENTED, DIR.ROTATED, DIR.ROTATED_TWICE, DIR.ORIENTED,
        DIR.ROTATED, DIR.ROTATED_TWICE, DIR.ORIENTED, DIR.ORIENTED,
    ]
    assert not cube.is_solved()


@pytest.mark.parametrize("code, expected", [
    ((0, 0, 0), set()),
    ((8, 9, 8), BACK_GROUP),
    ((2, 6, 2), FRONT_GROUP),
    ((0x0A, 0x0F, 0x0A), BACK_GROUP | FRONT_GROUP),
    ((8, 9, 9), set()),
    ((2, 6, 8), set()),
])
def test_edge_flip_groups(make_data, code, expected):
    cube = CubeModel.from_cube_data(make_data(_28=code))
    assert flipped_edges(cube) == expected


def test_flip_marker_does_not_touch_corners(make_data):
    cube = CubeModel.from_cube_data(make_data(_28=(0x0A, 0x0F, 0x0A)))
    assert all(c.orientation == DIR.ORIENTED for c in cube.corners)
    assert [c.index for c in cube.edges] == list(range(12))


def test_move_fields(make_data):
    cube = CubeModel.from_cube_data(make_data(_32=(6, 1, 3, 0)))
    assert cube.turned_face == FACE.UP
    assert cube.turned_direction == TurnDirection.COUNTER_CLOCKWISE
    assert cube.last_turned_face == FACE.RIGHT
    assert cube.last_turned_direction == TurnDirection.CLOCKWISE
    assert cube.turn.notation == "U'"
    assert cube.last_turn.notation == "R"


def test_move_fields_do_not_affect_equality(make_data):
    a = CubeModel.from_cube_data(make_data(_32=(6, 1, 3, 0)))
    b = CubeModel.from_cube_data(make_data(_32=(2, 3, 4, 1)))
    assert a == b


def test_no_move_recorded(make_data):
    cube = CubeModel.from_cube_data(make_data(_32=(0, 0, 0, 0)))
    assert cube.turn is None
    assert cube.last_turn is None
    assert cube.is_solved()


@pytest.mark.parametrize("wire, face", [
    (1, FACE.DOWN), (2, FACE.BACK), (3, FACE.RIGHT),
    (4, FACE.FRONT), (5, FACE.LEFT), (6, FACE.UP),
])
def test_decode_face(wire, face):
    assert decode_face(wire) == face
    assert CENTER_COLORS[face] == COLOR(wire - 1)


def test_decode_face_out_of_range():
    with pytest.raises(MalformedFrame):
        decode_face(7)


@pytest.mark.parametrize("wire, direction", [
    (1, TurnDirection.COUNTER_CLOCKWISE),
    (3, TurnDirection.CLOCKWISE),
    (0, TurnDirection.CLOCKWISE),
    (15, TurnDirection.CLOCKWISE),
])
def test_decode_direction(wire, direction):
    assert decode_direction(wire) == direction


def test_from_payload(solved_data):
    payload = bytes.fromhex("12345678" "33333333" "123456789abc" "0000" "5351" "0000")
    cube = CubeModel.from_payload(payload)
    assert cube == CubeModel.from_cube_data(solved_data)
    assert cube.turn == CubeTurn(FACE.LEFT, TurnDirection.CLOCKWISE)
    assert cube.last_turn.notation == "L'"


def test_equality_is_component_wise():
    solved = CubeModel.solved()
    assert solved == solved
    assert solved == CubeModel.solved()

    edges = list(solved.edges)
    edges[EDGE.DR] = Cubie(EDGE.DR, DIR.FLIPPED)
    flipped = CubeModel(edges=edges)
    assert flipped != solved
    assert solved != flipped

    corners = list(solved.corners)
    corners[CORNER.ULB], corners[CORNER.ULF] = Cubie(1), Cubie(0)
    assert CubeModel(corners=corners) != solved

    centers = list(solved.centers)
    centers[FACE.UP] = COLOR.BLUE
    assert CubeModel(centers=centers) != solved


def test_is_solved_checks_every_corner():
    corners = list(CubeModel.solved().corners)
    corners[CORNER.DRB] = Cubie(CORNER.DRB, DIR.ROTATED)
    assert not CubeModel(corners=corners).is_solved()

    corners = list(CubeModel.solved().corners)
    corners[CORNER.DRF], corners[CORNER.DRB] = Cubie(7), Cubie(6)
    assert not CubeModel(corners=corners).is_solved()


def test_copies_are_independent():
    cube = CubeModel.solved()
    edges = list(cube.edges)
    edges[0] = Cubie(0, DIR.FLIPPED)
    other = dataclasses.replace(cube, edges=edges)
    assert cube.is_solved()
    assert not other.is_solved()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cube.edges = ()


def test_wrong_piece_count():
    with pytest.raises(ValueError):
        CubeModel(edges=[Cubie(i) for i in range(11)])


def test_to_dict(scrambled_data):
    doc = CubeModel.from_cube_data(scrambled_data).to_dict()
    assert doc['solved'] is False
    assert doc['corners'][0] == {'slot': 'ULB', 'index': 1, 'orientation': 'ORIENTED'}
    assert doc['edges'][0] == {'slot': 'UB', 'index': 11, 'orientation': 'FLIPPED'}
    assert doc['centers']['FRONT'] == 'WHITE'
    assert doc['turn'] == {'face': 'UP', 'direction': 'COUNTER_CLOCKWISE', 'move': "U'"}
    assert doc['last_turn']['move'] == "R"


@pytest.mark.parametrize("cells, error, offset", [
    ({'_8': 0}, InvalidOrientation, 8),
    ({'_15': 4}, InvalidOrientation, 15),
    ({'_0': 9}, MalformedFrame, 0),
    ({'_1': 1}, MalformedFrame, 1),
    ({'_27': 13}, MalformedFrame, 27),
    ({'_20': 0}, MalformedFrame, 20),
    ({'_32': 7}, MalformedFrame, 32),
    ({'_34': 9}, MalformedFrame, 34),
    ({'_31': 16}, MalformedFrame, 31),
])
def test_decode_rejects_bad_cells(make_data, cells, error, offset):
    with pytest.raises(error) as excinfo:
        CubeModel.from_cube_data(make_data(**cells))
    assert excinfo.value.offset == offset


def test_decode_rejects_wrong_length(solved_data):
    with pytest.raises(MalformedFrame):
        CubeModel.from_cube_data(solved_data[:35])
    with pytest.raises(MalformedFrame):
        CubeModel.from_cube_data(solved_data + [0])


def test_errors_are_value_errors(make_data):
    with pytest.raises(ValueError):
        CubeModel.from_cube_data(make_data(_8=0))
