from __future__ import annotations

from typing import Iterable, Tuple

import numpy as np


Coordinate = Tuple[int, int]


class FieldGrid:
    """Occupancy matrix of locked cells.

    Rows grow downward and `grid[y, x]` is True for a locked cell. Negative
    rows are the space above the field: the falling piece may sit there, but
    nothing is ever locked there.
    """

    def __init__(self, width: int = 10, height: int = 20) -> None:
        self.width = int(width)
        self.height = int(height)
        self._cells = np.zeros((self.height, self.width), dtype=np.bool_)

    def reset(self) -> None:
        self._cells.fill(False)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_occupied(self, x: int, y: int) -> bool:
        if not self.is_inside(x, y):
            raise ValueError(f"cell ({x}, {y}) is outside a {self.width}x{self.height} field")
        return bool(self._cells[y, x])

    def is_valid(self, cells: Iterable[Coordinate]) -> bool:
        for x, y in cells:
            if x < 0 or x >= self.width or y >= self.height:
                return False
            if y < 0:
                continue
            if self._cells[y, x]:
                return False
        return True

    def lock(self, cells: Iterable[Coordinate]) -> int:
        """Mark `cells` as locked and return how many landed on the field.

        Cells above the top row are dropped; anything else outside the field
        is a caller bug.
        """
        cells = list(cells)
        for x, y in cells:
            if x < 0 or x >= self.width or y >= self.height:
                raise ValueError(f"cannot lock cell ({x}, {y}) outside a {self.width}x{self.height} field")
        placed = 0
        for x, y in cells:
            if y < 0:
                continue
            self._cells[y, x] = True
            placed += 1
        return placed

    def is_row_full(self, y: int) -> bool:
        return bool(np.all(self._cells[y, :]))

    def clear_full_rows(self) -> int:
        """Remove full rows bottom-up and return how many were removed.

        After a removal the same row index is checked again, since the row
        above has just been shifted into it.
        """
        cleared = 0
        y = self.height - 1
        while y >= 0:
            if self.is_row_full(y):
                self._cells[1 : y + 1, :] = self._cells[0:y, :].copy()
                self._cells[0, :] = False
                cleared += 1
            else:
                y -= 1
        return cleared

    def filled_count(self) -> int:
        return int(np.count_nonzero(self._cells))

    def occupancy(self) -> np.ndarray:
        view = self._cells.copy()
        view.setflags(write=False)
        return view
