import numpy as np
import pytest

from cuberoll.core.cube import ROLL_TABLES
from cuberoll.core.geometry import RollDirection, opposite
from cuberoll.core.rotation import (
    ALL_ORIENTATIONS, RED_FACE_UP, RX90, RY90, Axis, RedFaceDirection, Sign,
    invert, red_face_is_on_top, rotate_about_x, rotate_about_y,
)

X_POS = RedFaceDirection(Axis.X, Sign.POSITIVE)
X_NEG = RedFaceDirection(Axis.X, Sign.NEGATIVE)
Y_POS = RedFaceDirection(Axis.Y, Sign.POSITIVE)
Y_NEG = RedFaceDirection(Axis.Y, Sign.NEGATIVE)
Z_POS = RedFaceDirection(Axis.Z, Sign.POSITIVE)
Z_NEG = RedFaceDirection(Axis.Z, Sign.NEGATIVE)


def test_six_orientations():
    assert len(ALL_ORIENTATIONS) == 6
    assert len(set(ALL_ORIENTATIONS)) == 6
    assert RED_FACE_UP == Z_POS


def test_rotation_matrices_are_proper_rotations():
    for m in (RX90, RY90):
        assert np.array_equal(m @ m.T, np.eye(3, dtype=int))
        assert round(np.linalg.det(m)) == 1


def test_vector_conversion():
    for o in ALL_ORIENTATIONS:
        assert RedFaceDirection.from_vector(o.to_vector()) == o
    assert Z_NEG.to_vector().tolist() == [0, 0, -1]
    with pytest.raises(ValueError):
        RedFaceDirection.from_vector(np.array([1, 1, 0]))


def test_invert():
    assert invert(Sign.POSITIVE) is Sign.NEGATIVE
    assert invert(Sign.NEGATIVE) is Sign.POSITIVE


def test_rotate_about_x_table():
    assert rotate_about_x(X_POS) == X_POS
    assert rotate_about_x(X_NEG) == X_NEG
    assert rotate_about_x(Y_POS) == Z_POS
    assert rotate_about_x(Y_NEG) == Z_NEG
    assert rotate_about_x(Z_POS) == Y_NEG
    assert rotate_about_x(Z_NEG) == Y_POS


def test_rotate_about_y_table():
    assert rotate_about_y(Y_POS) == Y_POS
    assert rotate_about_y(Y_NEG) == Y_NEG
    assert rotate_about_y(X_POS) == Z_NEG
    assert rotate_about_y(X_NEG) == Z_POS
    assert rotate_about_y(Z_POS) == X_POS
    assert rotate_about_y(Z_NEG) == X_NEG


@pytest.mark.parametrize("turn, axis", [(rotate_about_x, Axis.X), (rotate_about_y, Axis.Y)])
def test_quarter_turns_have_order_four(turn, axis):
    for o in ALL_ORIENTATIONS:
        assert turn(turn(turn(turn(o)))) == o
    # only the faces on the turning axis stay put
    assert {o for o in ALL_ORIENTATIONS if turn(o) == o} == {o for o in ALL_ORIENTATIONS if o.axis is axis}


@pytest.mark.parametrize("direction", list(RollDirection))
def test_roll_tables_are_bijections(direction):
    table = ROLL_TABLES[direction]
    assert set(table.keys()) == set(ALL_ORIENTATIONS)
    assert set(table.values()) == set(ALL_ORIENTATIONS)


@pytest.mark.parametrize("direction", list(RollDirection))
def test_opposite_rolls_cancel(direction):
    forward = ROLL_TABLES[direction]
    back = ROLL_TABLES[opposite(direction)]
    for o in ALL_ORIENTATIONS:
        assert back[forward[o]] == o


def test_roll_tables_from_red_face_up():
    assert ROLL_TABLES[RollDirection.RIGHT][Z_POS] == X_POS
    assert ROLL_TABLES[RollDirection.LEFT][Z_POS] == X_NEG
    assert ROLL_TABLES[RollDirection.DOWN][Z_POS] == Y_NEG
    assert ROLL_TABLES[RollDirection.UP][Z_POS] == Y_POS


def test_red_face_is_on_top():
    assert red_face_is_on_top(Z_POS)
    assert not any(red_face_is_on_top(o) for o in ALL_ORIENTATIONS if o != Z_POS)


def test_str():
    assert str(Z_POS) == "(Z, Positive)"
    assert str(X_NEG) == "(X, Negative)"
