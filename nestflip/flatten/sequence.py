"""Sequence flatteners

Collapse a sequence of inner containers into one list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import assert_never

from kungfu import Nothing, Option, Some

def flatten_seq_of_seqs[T](rows: Iterable[Iterable[T]]) -> list[T]:
    """Concatenate inner sequences, outer-then-inner order."""
    return [item for row in rows for item in row]

def flatten_seq_of_options[T](items: Iterable[Option[T]]) -> list[T]:
    """Keep present values in order, drop Nothing."""
    flat: list[T] = []
    for item in items:
        match item:
            case Some(value):
                flat.append(value)
            case Nothing():
                continue
            case _ as unreachable:
                assert_never(unreachable)
    return flat

__all__ = ("flatten_seq_of_seqs", "flatten_seq_of_options")
