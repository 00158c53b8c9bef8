"""
Matrix transpose
================

Row/column swap for sequence-of-sequences and fixed-size grids.
Ragged input is rejected, never truncated or padded.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import assert_never

from kungfu import Error, Ok, Option, Result

from .._errors import ArrayShapeError, RaggedRowError
from .._helpers import to_option
from .._types import Grid, Matrix
from ..writer import Log, WriterResult, writer_error, writer_ok


# ============================================================================
# Configuration
# ============================================================================


@dataclass(frozen=True, slots=True)
class ArrayShape:
    """
    Declared dimensions of a fixed-size grid: `rows` rows of `cols` cells.
    """

    rows: int
    cols: int

    def __post_init__(self) -> None:
        if self.rows < 0:
            raise ValueError("ArrayShape.rows must be >= 0")
        if self.cols < 0:
            raise ValueError("ArrayShape.cols must be >= 0")

    @classmethod
    def of[T](cls, grid: Grid[T]) -> ArrayShape:
        """Infer the shape of a rectangular grid. Raises on a ragged one."""
        if not grid:
            return cls(rows=0, cols=0)
        cols = len(grid[0])
        for index, row in enumerate(grid):
            if len(row) != cols:
                raise ArrayShapeError(None, f"row {index} has {len(row)} cells, row 0 has {cols}")
        return cls(rows=len(grid), cols=cols)

    def transposed(self) -> ArrayShape:
        """Shape after a transpose."""
        return ArrayShape(rows=self.cols, cols=self.rows)

    def check[T](self, grid: Grid[T]) -> None:
        """Raise ArrayShapeError unless grid has exactly this shape."""
        if len(grid) != self.rows:
            raise ArrayShapeError(self, f"{len(grid)} rows")
        for index, row in enumerate(grid):
            if len(row) != self.cols:
                raise ArrayShapeError(self, f"row {index} has {len(row)} cells")


# ============================================================================
# Core
# ============================================================================


def _transpose_rows[T](rows: Matrix[T]) -> Result[list[list[T]], RaggedRowError]:
    """Column count comes from the first row; every other row must match it."""
    grid = [list(row) for row in rows]
    if not grid:
        return Ok([])

    width = len(grid[0])
    for index, row in enumerate(grid):
        if len(row) != width:
            return Error(RaggedRowError(index, width, len(row)))

    return Ok([list(column) for column in zip(*grid)])


# ============================================================================
# Sugar for Option
# ============================================================================


def transpose_matrix[T](rows: Matrix[T]) -> Option[list[list[T]]]:
    """
    Swap rows and columns: the cell at rows[i][j] ends up at result[j][i].

    Example:
        transpose_matrix([[1, 2, 3], [4, 5, 6]])  # Some([[1, 4], [2, 5], [3, 6]])
        transpose_matrix([[1, 2, 3], [4, 5]])     # Nothing()
        transpose_matrix([])                      # Some([])
        transpose_matrix([[], []])                # Some([])
    """
    return to_option(_transpose_rows(rows))


# ============================================================================
# Sugar for WriterResult
# ============================================================================


def transpose_matrix_w[T](
    rows: Matrix[T],
) -> WriterResult[list[list[T]], RaggedRowError, Log[str]]:
    """Matrix transpose that reports the dimensions it saw or the row it rejected."""
    grid = [list(row) for row in rows]
    match _transpose_rows(grid):
        case Ok(columns):
            width = len(columns)
            return writer_ok(columns, f"transpose_matrix: {len(grid)}x{width} -> {width}x{len(grid)}")
        case Error(err):
            return writer_error(err, f"transpose_matrix: rejected, {err}")
        case _ as unreachable:
            assert_never(unreachable)


# ============================================================================
# Fixed-size grids
# ============================================================================


def transpose_array[T](grid: Grid[T], *, shape: ArrayShape | None = None) -> Grid[T]:
    """
    Transpose a fixed-size grid: `rows x cols` in, `cols x rows` out.

    The shape is declared up front (or inferred from the grid when omitted),
    so raggedness is a contract violation and raises ArrayShapeError instead
    of being returned.

    Example:
        transpose_array(((1, 2, 3), (4, 5, 6)), shape=ArrayShape(rows=2, cols=3))
        # ((1, 4), (2, 5), (3, 6))
        transpose_array((), shape=ArrayShape(rows=0, cols=2))
        # ((), ())
    """
    if shape is None:
        shape = ArrayShape.of(grid)
    else:
        shape.check(grid)

    if shape.rows == 0:
        return tuple(() for _ in range(shape.cols))

    match _transpose_rows(grid):
        case Ok(columns):
            return tuple(tuple(column) for column in columns)
        case Error(err):
            raise ArrayShapeError(shape, str(err))
        case _ as unreachable:
            assert_never(unreachable)


__all__ = ("ArrayShape", "transpose_array", "transpose_matrix", "transpose_matrix_w")
