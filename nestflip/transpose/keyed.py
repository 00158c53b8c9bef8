"""
Keyed transpose
===============

Pivot for mapping-of-mappings and the two directions between
mapping-of-sequences (columns) and sequence-of-mappings (records).

Columns -> records is a ragged zip and always succeeds.
Records -> columns is strict: every key must be present in every record.
"""

from __future__ import annotations

import typing
from typing import assert_never

from kungfu import Error, Ok, Option, Result

from .._errors import RaggedKeyError
from .._helpers import to_option
from .._types import Columns, Records, Table
from ..flatten import flatten_map_of_maps
from ..writer import Log, WriterResult, writer_error, writer_ok

# Marks an exhausted column cursor; None is a legal cell value.
_EXHAUSTED: typing.Final = object()


def transpose_map_of_maps[K, L, V](table: Table[K, L, V]) -> dict[L, dict[K, V]]:
    """
    Re-key a doubly-keyed table by its inner key.

    Collects every (outer, inner, value) triple first, then groups them
    by inner key. Never fails and never drops a triple; a missing
    (outer, inner) combination stays missing.

    Example:
        transpose_map_of_maps({"x": {"p": 1, "q": 2}, "y": {"q": 3}})
        # {"p": {"x": 1}, "q": {"x": 2, "y": 3}}
    """
    triples = flatten_map_of_maps(table)

    pivot: dict[L, dict[K, V]] = {}
    for (outer, inner), value in triples.items():
        pivot.setdefault(inner, {})[outer] = value
    return pivot


def transpose_map_of_seqs[K, V](columns: Columns[K, V]) -> list[dict[K, V]]:
    """
    Zip columns into records, tolerating columns of different length.

    Record i holds every key whose column has an element at index i.
    Stops at the first index where no column contributes.

    Example:
        transpose_map_of_seqs({"a": [1, 2], "b": [3]})
        # [{"a": 1, "b": 3}, {"a": 2}]
    """
    cursors = {key: iter(column) for key, column in columns.items()}

    records: list[dict[K, V]] = []
    while True:
        record: dict[K, V] = {}
        for key, cursor in cursors.items():
            value = next(cursor, _EXHAUSTED)
            if value is not _EXHAUSTED:
                record[key] = value
        if not record:
            return records
        records.append(record)


def _columns_from_records[K, V](
    records: Records[K, V],
) -> tuple[Result[dict[K, list[V]], RaggedKeyError], int]:
    """
    Build columns from records, returning the result and the record count seen.

    A key's column must be exactly as long as the current record index when
    a value is appended to it, so a key that skips a record and reappears
    later is rejected immediately. Keys that stop early are caught by the
    final length check.
    """
    columns: dict[K, list[V]] = {}
    count = 0
    for index, record in enumerate(records):
        count = index + 1
        for key, value in record.items():
            column = columns.setdefault(key, [])
            if len(column) != index:
                return Error(RaggedKeyError(key, index, len(column))), count
            column.append(value)

    for key, column in columns.items():
        if len(column) != count:
            return Error(RaggedKeyError(key, count, len(column))), count
    return Ok(columns), count


def transpose_seq_of_maps[K, V](records: Records[K, V]) -> Option[dict[K, list[V]]]:
    """
    Collect records into columns. Nothing() unless every record has every key.

    Example:
        transpose_seq_of_maps([{"a": 1, "b": 3}, {"a": 2, "b": 4}])
        # Some({"a": [1, 2], "b": [3, 4]})
        transpose_seq_of_maps([{"a": 1, "b": 3}, {"a": 2}])
        # Nothing()
        transpose_seq_of_maps([])
        # Some({})
    """
    result, _ = _columns_from_records(records)
    return to_option(result)


def transpose_seq_of_maps_w[K, V](
    records: Records[K, V],
) -> WriterResult[dict[K, list[V]], RaggedKeyError, Log[str]]:
    """Records-to-columns transpose that reports the keys it built or the key it rejected."""
    result, count = _columns_from_records(records)
    match result:
        case Ok(columns):
            return writer_ok(columns, f"transpose_seq_of_maps: {count} records -> {len(columns)} columns")
        case Error(err):
            return writer_error(err, f"transpose_seq_of_maps: rejected, {err}")
        case _ as unreachable:
            assert_never(unreachable)


__all__ = (
    "transpose_map_of_maps",
    "transpose_map_of_seqs",
    "transpose_seq_of_maps",
    "transpose_seq_of_maps_w",
)
