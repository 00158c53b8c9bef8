"""
Core type definitions for nestflip.

Shape aliases shared by the flatten and transpose families.
"""

from __future__ import annotations

import typing
from collections.abc import Iterable, Mapping

# ============================================================================
# Shape aliases
# ============================================================================

# Matrix = rows of cells, each row an iterable of the same cell type
type Matrix[T] = Iterable[Iterable[T]]

# Grid = fixed-size matrix; dimensions are declared by an ArrayShape
type Grid[T] = tuple[tuple[T, ...], ...]

# Table = doubly-keyed collection (sparse 2-D table)
type Table[K, L, V] = Mapping[K, Mapping[L, V]]

# Columns = key -> column of values
type Columns[K, V] = Mapping[K, Iterable[V]]

# Records = sequence of key -> value rows
type Records[K, V] = Iterable[Mapping[K, V]]

# NoError = the error type of an operation that never fails
type NoError = typing.Never

__all__ = (
    "Matrix",
    "Grid",
    "Table",
    "Columns",
    "Records",
    "NoError",
)
