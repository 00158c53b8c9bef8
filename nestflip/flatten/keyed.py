"""Keyed flatteners

Collapse one level of a keyed container into composite tuple keys.
Both key components are unique within their source, so composite
keys never collide."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

def flatten_map_of_maps[K, L, V](table: Mapping[K, Mapping[L, V]]) -> dict[tuple[K, L], V]:
    """{k: {l: v}} -> {(k, l): v}."""
    return {
        (outer, inner): value
        for outer, row in table.items()
        for inner, value in row.items()
    }

def flatten_map_of_seqs[K, V](columns: Mapping[K, Iterable[V]]) -> dict[tuple[K, int], V]:
    """{k: [v0, v1]} -> {(k, 0): v0, (k, 1): v1}."""
    return {
        (key, index): value
        for key, column in columns.items()
        for index, value in enumerate(column)
    }

def flatten_seq_of_maps[K, V](records: Iterable[Mapping[K, V]]) -> dict[tuple[int, K], V]:
    """[{k: v}, ...] -> {(0, k): v, ...}."""
    return {
        (index, key): value
        for index, record in enumerate(records)
        for key, value in record.items()
    }

__all__ = ("flatten_map_of_maps", "flatten_map_of_seqs", "flatten_seq_of_maps")
