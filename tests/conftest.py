import pytest

SOLVED_CUBE_DATA = (
    [1, 2, 3, 4, 5, 6, 7, 8]
    + [3] * 8
    + [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12]
    + [0, 0, 0, 0]
    + [5, 3, 5, 1]
)

# Corners swapped in pairs and twisted, edges reversed, both edge groups flipped
SCRAMBLED_CUBE_DATA = (
    [2, 1, 4, 3, 6, 5, 8, 7]
    + [3, 2, 1, 3, 2, 1, 3, 3]
    + [12, 11, 10, 9, 8, 7, 6, 5, 4, 3, 2, 1]
    + [0x0A, 0x0F, 0x0A, 0]
    + [6, 1, 3, 0]
)


@pytest.fixture
def solved_data():
    return list(SOLVED_CUBE_DATA)


@pytest.fixture
def scrambled_data():
    return list(SCRAMBLED_CUBE_DATA)


@pytest.fixture
def make_data():
    """Build a cube data buffer from the solved one with some cells replaced."""
    def _make(**cells):
        data = list(SOLVED_CUBE_DATA)
        for key, value in cells.items():
            offset = int(key.lstrip('_'))
            if isinstance(value, (list, tuple)):
                data[offset:offset + len(value)] = list(value)
            else:
                data[offset] = value
        return data
    return _make
