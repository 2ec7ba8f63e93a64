"""Cursor grid over catalog rows with skip-readonly navigation and column memory."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from .field_catalog import CatalogRows, FieldSpec


class Direction(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class GridPosition:
    row: int
    col: int


class FieldGrid:
    """Jagged rows of fields plus a cursor that only rests on editable cells.

    Moves never wrap and never raise: a blocked move returns False and keeps
    the cursor where it was. ``preferred_column`` is the column the user last
    chose horizontally; vertical moves aim for it and keep it even when a
    narrower row forces the cursor elsewhere.
    """

    def __init__(self, rows: CatalogRows):
        self.rows: CatalogRows = tuple(tuple(row) for row in rows)
        self.cursor = GridPosition(0, 0)
        self.preferred_column = 0
        if not self.reset():
            raise ValueError("Field grid needs at least one editable field")

    def _editable(self, row: int, col: int) -> bool:
        cells = self.rows[row]
        return 0 <= col < len(cells) and cells[col].editable

    def reset(self) -> bool:
        """Move the cursor to the first editable field in row-major order."""
        for row_idx, row in enumerate(self.rows):
            for col_idx, spec in enumerate(row):
                if spec.editable:
                    self.cursor = GridPosition(row_idx, col_idx)
                    self.preferred_column = col_idx
                    return True
        return False

    def position(self) -> GridPosition:
        return self.cursor

    def current_field(self) -> Optional[FieldSpec]:
        row, col = self.cursor.row, self.cursor.col
        if 0 <= row < len(self.rows) and self._editable(row, col):
            return self.rows[row][col]
        return None

    def move(self, direction: Direction) -> bool:
        if direction is Direction.LEFT:
            return self.move_left()
        if direction is Direction.RIGHT:
            return self.move_right()
        if direction is Direction.UP:
            return self.move_up()
        if direction is Direction.DOWN:
            return self.move_down()
        return False

    def move_left(self) -> bool:
        return self._move_horizontal(-1)

    def move_right(self) -> bool:
        return self._move_horizontal(1)

    def move_up(self) -> bool:
        return self._move_vertical(-1)

    def move_down(self) -> bool:
        return self._move_vertical(1)

    def _move_horizontal(self, step: int) -> bool:
        row = self.cursor.row
        col = self.cursor.col + step
        while 0 <= col < len(self.rows[row]):
            if self.rows[row][col].editable:
                self.cursor = GridPosition(row, col)
                self.preferred_column = col
                return True
            col += step
        return False

    def _move_vertical(self, step: int) -> bool:
        row = self.cursor.row + step
        while 0 <= row < len(self.rows):
            col = self._best_column(self.rows[row], self.preferred_column)
            if col is not None:
                self.cursor = GridPosition(row, col)
                return True
            row += step
        return False

    @staticmethod
    def _best_column(cells: Sequence[FieldSpec], preferred: int) -> Optional[int]:
        """Closest editable column to ``preferred``, rightward first on ties."""
        width = len(cells)
        if width == 0:
            return None
        start = max(0, min(preferred, width - 1))
        for offset in range(width):
            for candidate in (start + offset, start - offset):
                if 0 <= candidate < width and cells[candidate].editable:
                    return candidate
        return None


__all__ = ["Direction", "GridPosition", "FieldGrid"]
