from __future__ import annotations

from enum import IntEnum
from typing import Dict, List, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .grid import FieldGrid


Offset = Tuple[int, int]
RotationState = Tuple[Offset, Offset, Offset, Offset]


class PieceKind(IntEnum):
    I = 1
    O = 2
    T = 3


# Offsets are (dx, dy) from the piece anchor; states cycle in list order.
ROTATION_STATES: Dict[PieceKind, Tuple[RotationState, ...]] = {
    PieceKind.I: (
        ((0, 1), (1, 1), (2, 1), (3, 1)),
        ((2, 0), (2, 1), (2, 2), (2, 3)),
    ),
    PieceKind.O: (
        ((1, 0), (2, 0), (1, 1), (2, 1)),
    ),
    PieceKind.T: (
        ((1, 0), (0, 1), (1, 1), (2, 1)),
        ((1, 0), (1, 1), (2, 1), (1, 2)),
        ((1, 1), (0, 2), (1, 2), (2, 2)),
        ((1, 0), (0, 1), (1, 1), (1, 2)),
    ),
}


def rotation_count(kind: PieceKind) -> int:
    return len(ROTATION_STATES[kind])


class ActivePiece:
    """The falling piece: a kind, a rotation index and an anchor on the field.

    Position and rotation only change through `attempt_translate` and
    `attempt_rotate`, which consult the grid and leave the piece untouched
    when the candidate placement is invalid.
    """

    def __init__(self, kind: PieceKind, x: int, y: int, rotation: int = 0) -> None:
        self._kind = PieceKind(kind)
        self._rotation = rotation % rotation_count(self._kind)
        self._x = int(x)
        self._y = int(y)

    def __repr__(self) -> str:
        return f"ActivePiece({self._kind.name}, rotation={self._rotation}, anchor=({self._x}, {self._y}))"

    @property
    def kind(self) -> PieceKind:
        return self._kind

    @property
    def rotation(self) -> int:
        return self._rotation

    @property
    def anchor(self) -> Tuple[int, int]:
        return self._x, self._y

    def cells_at(self, origin_x: int, origin_y: int, rotation: int) -> List[Tuple[int, int]]:
        state = ROTATION_STATES[self._kind][rotation % rotation_count(self._kind)]
        return [(origin_x + dx, origin_y + dy) for dx, dy in state]

    def cells(self) -> List[Tuple[int, int]]:
        return self.cells_at(self._x, self._y, self._rotation)

    def attempt_translate(self, grid: "FieldGrid", dx: int, dy: int) -> bool:
        new_x = self._x + dx
        new_y = self._y + dy
        if not grid.is_valid(self.cells_at(new_x, new_y, self._rotation)):
            return False
        self._x = new_x
        self._y = new_y
        return True

    def attempt_rotate(self, grid: "FieldGrid") -> bool:
        # A single-state kind maps back onto itself, so this never fails for O.
        new_rotation = (self._rotation + 1) % rotation_count(self._kind)
        if not grid.is_valid(self.cells_at(self._x, self._y, new_rotation)):
            return False
        self._rotation = new_rotation
        return True
