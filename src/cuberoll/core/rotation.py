"""
Red-face orientations and the quarter-turn group acting on them.

The cube has a single marked ("red") face. Its orientation is the signed
world axis that face currently points along, so there are exactly 6
orientations. A roll is a 90 degree turn about the X axis (Up/Down) or the
Y axis (Left/Right); the permutation each turn induces on the 6
orientations is derived once from the integer rotation matrices below.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List

import numpy as np


class Axis(Enum):
    X = "X"
    Y = "Y"
    Z = "Z"


class Sign(Enum):
    POSITIVE = "Positive"
    NEGATIVE = "Negative"


def invert(sign: Sign) -> Sign:
    """Swap Positive and Negative."""
    return Sign.NEGATIVE if sign is Sign.POSITIVE else Sign.POSITIVE


@dataclass(frozen=True)
class RedFaceDirection:
    """Which signed world axis the red face points along."""
    axis: Axis
    sign: Sign

    def to_vector(self) -> np.ndarray:
        vec = np.zeros(3, dtype=int)
        vec[_AXIS_INDEX[self.axis]] = 1 if self.sign is Sign.POSITIVE else -1
        return vec

    @staticmethod
    def from_vector(vec: np.ndarray) -> "RedFaceDirection":
        nonzero = np.flatnonzero(vec)
        if len(nonzero) != 1 or abs(int(vec[nonzero[0]])) != 1:
            raise ValueError(f"Not a signed unit vector: {vec.tolist()}")
        index = int(nonzero[0])
        sign = Sign.POSITIVE if vec[index] > 0 else Sign.NEGATIVE
        return RedFaceDirection(_INDEX_AXIS[index], sign)

    def __str__(self) -> str:
        return f"({self.axis.value}, {self.sign.value})"


_AXIS_INDEX = {Axis.X: 0, Axis.Y: 1, Axis.Z: 2}
_INDEX_AXIS = {index: axis for axis, index in _AXIS_INDEX.items()}

RED_FACE_UP = RedFaceDirection(Axis.Z, Sign.POSITIVE)

ALL_ORIENTATIONS: List[RedFaceDirection] = [
    RedFaceDirection(axis, sign) for axis in Axis for sign in Sign
]

# 90 degree turns about X and Y
RX90 = np.array([
    [1, 0, 0],
    [0, 0, -1],
    [0, 1, 0]
], dtype=int)

RY90 = np.array([
    [0, 0, 1],
    [0, 1, 0],
    [-1, 0, 0]
], dtype=int)


def _permutation(matrix: np.ndarray) -> Dict[RedFaceDirection, RedFaceDirection]:
    """Tabulate the action of a rotation matrix on the 6 orientations."""
    return {
        o: RedFaceDirection.from_vector(matrix @ o.to_vector())
        for o in ALL_ORIENTATIONS
    }


_ABOUT_X = _permutation(RX90)
_ABOUT_Y = _permutation(RY90)


def rotate_about_x(orientation: RedFaceDirection) -> RedFaceDirection:
    """(X,s)->(X,s), (Y,s)->(Z,s), (Z,s)->(Y,-s)."""
    return _ABOUT_X[orientation]


def rotate_about_y(orientation: RedFaceDirection) -> RedFaceDirection:
    """(Y,s)->(Y,s), (X,s)->(Z,-s), (Z,s)->(X,s)."""
    return _ABOUT_Y[orientation]


def red_face_is_on_top(orientation: RedFaceDirection) -> bool:
    return orientation == RED_FACE_UP
