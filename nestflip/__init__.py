"""
Shape transformations for two-level nested containers.

Flatten collapses one nesting level; transpose swaps two levels
(sequence/mapping levels, or Result/Option layers). Every operation is a
pure function: input consumed, fresh output produced.

Architecture:
- One named function per shape (flatten_seq_of_seqs, transpose_matrix, ...)
- Structural mismatch is returned as kungfu Option/Result, never raised
- Writer variants (*_w suffix) attach a diagnostic Log to the result
- flatten()/transpose() route by an explicit Shape tag
"""

# Core types
from ._types import Columns, Grid, Matrix, NoError, Records, Table

# Internal helpers (for custom layer types)
from . import _helpers

# Writer
from . import writer
from .writer import Log, WriterResult

# Flatten
from .flatten import (
    flatten_map_of_maps,
    flatten_map_of_seqs,
    flatten_seq_of_maps,
    flatten_seq_of_options,
    flatten_seq_of_seqs,
)

# Transpose
from .transpose import (
    ArrayShape,
    # Option / plain
    transpose_array,
    transpose_map_of_maps,
    transpose_map_of_seqs,
    transpose_matrix,
    transpose_option_of_option,
    transpose_option_of_seq,
    transpose_result_of_result,
    transpose_result_of_seq,
    transpose_seq_of_maps,
    transpose_seq_of_options,
    transpose_seq_of_results,
    # WriterResult
    transpose_matrix_w,
    transpose_seq_of_maps_w,
    # Generic
    collectM,
)

# Shape-tagged dispatch
from .dispatch import Shape, flatten, transpose

# Errors
from ._errors import ArrayShapeError, RaggedKeyError, RaggedRowError, UnsupportedShapeError

__all__ = (
    # Types
    "Columns",
    "Grid",
    "Matrix",
    "NoError",
    "Records",
    "Table",
    # Internal helpers (for custom layer types)
    "_helpers",
    # Writer
    "writer",
    "Log",
    "WriterResult",
    # Flatten
    "flatten_map_of_maps",
    "flatten_map_of_seqs",
    "flatten_seq_of_maps",
    "flatten_seq_of_options",
    "flatten_seq_of_seqs",
    # Transpose - config
    "ArrayShape",
    # Transpose - Option / plain
    "transpose_array",
    "transpose_map_of_maps",
    "transpose_map_of_seqs",
    "transpose_matrix",
    "transpose_option_of_option",
    "transpose_option_of_seq",
    "transpose_result_of_result",
    "transpose_result_of_seq",
    "transpose_seq_of_maps",
    "transpose_seq_of_options",
    "transpose_seq_of_results",
    # Transpose - WriterResult
    "transpose_matrix_w",
    "transpose_seq_of_maps_w",
    # Transpose - Generic
    "collectM",
    # Dispatch
    "Shape",
    "flatten",
    "transpose",
    # Errors
    "ArrayShapeError",
    "RaggedKeyError",
    "RaggedRowError",
    "UnsupportedShapeError",
)
