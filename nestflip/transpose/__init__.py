from .collect import (
    collectM,
    transpose_option_of_seq,
    transpose_result_of_seq,
    transpose_seq_of_options,
    transpose_seq_of_results,
)
from .keyed import (
    transpose_map_of_maps,
    transpose_map_of_seqs,
    transpose_seq_of_maps,
    transpose_seq_of_maps_w,
)
from .layers import transpose_option_of_option, transpose_result_of_result
from .matrix import ArrayShape, transpose_array, transpose_matrix, transpose_matrix_w

__all__ = (
    # Config
    "ArrayShape",
    # Option / plain
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
    # WriterResult
    "transpose_matrix_w",
    "transpose_seq_of_maps_w",
    # Generic
    "collectM",
)
