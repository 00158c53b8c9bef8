from __future__ import annotations

import typing

if typing.TYPE_CHECKING:
    from .dispatch import Shape
    from .transpose.matrix import ArrayShape

class RaggedRowError(Exception):
    """Matrix row length differs from the first row."""

    row: int
    expected: int
    actual: int

    def __init__(self, row: int, expected: int, actual: int) -> None:
        self.row = row
        self.expected = expected
        self.actual = actual
        super().__init__(f"Row {row} has {actual} cells, expected {expected}")

class RaggedKeyError(Exception):
    """Column for a key is not a contiguous prefix of the records."""

    key: object
    index: int
    length: int

    def __init__(self, key: object, index: int, length: int) -> None:
        self.key = key
        self.index = index
        self.length = length
        super().__init__(f"Key {key!r} has {length} values at index {index}")

class ArrayShapeError(Exception):
    """Fixed-size grid does not match its declared shape."""

    expected: ArrayShape | None
    actual: str

    def __init__(self, expected: ArrayShape | None, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        if expected is None:
            super().__init__(f"Grid is not rectangular: {actual}")
        else:
            super().__init__(f"Grid does not match {expected!r}: {actual}")

class UnsupportedShapeError(ValueError):
    """Shape tag has no operation in the requested family."""

    shape: Shape | object
    family: str

    def __init__(self, shape: Shape | object, family: str) -> None:
        self.shape = shape
        self.family = family
        super().__init__(f"{family}() does not support {getattr(shape, 'name', repr(shape))}")

__all__ = ("ArrayShapeError", "RaggedKeyError", "RaggedRowError", "UnsupportedShapeError")
