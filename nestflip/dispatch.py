"""
Shape-tagged dispatch
=====================

One generic entry point per family, routed by an explicit Shape tag
rather than by inspecting the value at runtime.

Example:
    from nestflip import Shape, flatten, transpose

    flatten([[1, 2], [3]], shape=Shape.SEQ_OF_SEQS)            # [1, 2, 3]
    transpose({"a": [1, 2]}, shape=Shape.MAP_OF_SEQS)         # [{"a": 1}, {"a": 2}]
    transpose(((1, 2),), shape=Shape.ARRAY)                   # ((1,), (2,))
"""

from __future__ import annotations

import enum
import typing
from collections.abc import Callable

from ._errors import UnsupportedShapeError
from .flatten import (
    flatten_map_of_maps,
    flatten_map_of_seqs,
    flatten_seq_of_maps,
    flatten_seq_of_options,
    flatten_seq_of_seqs,
)
from .transpose import (
    ArrayShape,
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
)


class Shape(enum.Enum):
    """Input shape of a flatten or transpose call (outer container first)."""

    SEQ_OF_SEQS = "seq_of_seqs"
    SEQ_OF_OPTIONS = "seq_of_options"
    SEQ_OF_RESULTS = "seq_of_results"
    SEQ_OF_MAPS = "seq_of_maps"
    MAP_OF_MAPS = "map_of_maps"
    MAP_OF_SEQS = "map_of_seqs"
    ARRAY = "array"
    RESULT_OF_RESULT = "result_of_result"
    RESULT_OF_SEQ = "result_of_seq"
    OPTION_OF_OPTION = "option_of_option"
    OPTION_OF_SEQ = "option_of_seq"


_FLATTEN: typing.Final[dict[Shape, Callable[[typing.Any], typing.Any]]] = {
    Shape.SEQ_OF_SEQS: flatten_seq_of_seqs,
    Shape.SEQ_OF_OPTIONS: flatten_seq_of_options,
    Shape.MAP_OF_MAPS: flatten_map_of_maps,
    Shape.MAP_OF_SEQS: flatten_map_of_seqs,
    Shape.SEQ_OF_MAPS: flatten_seq_of_maps,
}

_TRANSPOSE: typing.Final[dict[Shape, Callable[[typing.Any], typing.Any]]] = {
    Shape.SEQ_OF_SEQS: transpose_matrix,
    Shape.SEQ_OF_OPTIONS: transpose_seq_of_options,
    Shape.SEQ_OF_RESULTS: transpose_seq_of_results,
    Shape.SEQ_OF_MAPS: transpose_seq_of_maps,
    Shape.MAP_OF_MAPS: transpose_map_of_maps,
    Shape.MAP_OF_SEQS: transpose_map_of_seqs,
    Shape.RESULT_OF_RESULT: transpose_result_of_result,
    Shape.RESULT_OF_SEQ: transpose_result_of_seq,
    Shape.OPTION_OF_OPTION: transpose_option_of_option,
    Shape.OPTION_OF_SEQ: transpose_option_of_seq,
}


def flatten(value: typing.Any, *, shape: Shape) -> typing.Any:
    """Collapse one nesting level of a value tagged with its shape."""
    try:
        operation = _FLATTEN[shape]
    except (KeyError, TypeError):
        raise UnsupportedShapeError(shape, "flatten") from None
    return operation(value)


def transpose(
    value: typing.Any,
    *,
    shape: Shape,
    array_shape: ArrayShape | None = None,
) -> typing.Any:
    """
    Swap the two nesting levels of a value tagged with its shape.

    `array_shape` is only meaningful for Shape.ARRAY; when omitted the
    grid's shape is inferred.
    """
    if shape is Shape.ARRAY:
        return transpose_array(value, shape=array_shape)
    try:
        operation = _TRANSPOSE[shape]
    except (KeyError, TypeError):
        raise UnsupportedShapeError(shape, "transpose") from None
    if array_shape is not None:
        raise ValueError(f"transpose(): array_shape only applies to ARRAY, got {shape.name}")
    return operation(value)


__all__ = ("Shape", "flatten", "transpose")
