from .keyed import flatten_map_of_maps, flatten_map_of_seqs, flatten_seq_of_maps
from .sequence import flatten_seq_of_options, flatten_seq_of_seqs

__all__ = (
    # Sequence
    "flatten_seq_of_seqs",
    "flatten_seq_of_options",
    # Keyed
    "flatten_map_of_maps",
    "flatten_map_of_seqs",
    "flatten_seq_of_maps",
)
