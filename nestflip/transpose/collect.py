"""Collect transposes

Swap a sequence level with a Result or Option layer, with extract + wrap
pattern. Sequence-outer -> layer-outer is all-or-nothing and stops at the
first failure; layer-outer -> sequence-outer wraps each element."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import assert_never

from kungfu import Error, Nothing, Ok, Option, Result, Some

from .._helpers import extract_option, extract_result

# Generic combinator (extract + wrap pattern)
def collectM[A, T, E, Out](
    items: Iterable[A],
    *,
    extract: Callable[[A], Result[T, E]],
    combine_ok: Callable[[list[T]], Out],
    combine_err: Callable[[E], Out],
) -> Out:
    """Generic collect combinator. Elements after the first failure are never inspected."""
    values: list[T] = []

    for item in items:
        match extract(item):
            case Ok(value):
                values.append(value)
            case Error(error):
                return combine_err(error)
            case _ as unreachable:
                assert_never(unreachable)

    return combine_ok(values)

# Sugar for Option
def transpose_seq_of_options[T](items: Iterable[Option[T]]) -> Option[list[T]]:
    """Some(values) if every element is present, else Nothing()."""
    def combine_ok(values: list[T]) -> Option[list[T]]:
        return Some(values)

    def combine_err(error: None) -> Option[list[T]]:
        _ = error
        return Nothing()

    return collectM(
        items,
        extract=extract_option,
        combine_ok=combine_ok,
        combine_err=combine_err,
    )

def transpose_option_of_seq[T](maybe: Option[Iterable[T]]) -> list[Option[T]]:
    """
    Some(xs) -> [Some(x), ...]; Nothing() -> [Nothing()].

    NOTE: Nothing() becomes a one-element list, not an empty one, so this
          is not the inverse of transpose_seq_of_options.
    """
    match maybe:
        case Some(values):
            return [Some(value) for value in values]
        case Nothing():
            return [Nothing()]
        case _ as unreachable:
            assert_never(unreachable)

# Sugar for Result
def transpose_seq_of_results[T, E](items: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Ok(values) if every element succeeded, else the first Error in order."""
    def combine_ok(values: list[T]) -> Result[list[T], E]:
        return Ok(values)

    def combine_err(error: E) -> Result[list[T], E]:
        return Error(error)

    return collectM(
        items,
        extract=extract_result,
        combine_ok=combine_ok,
        combine_err=combine_err,
    )

def transpose_result_of_seq[T, E](outcome: Result[Iterable[T], E]) -> list[Result[T, E]]:
    """Ok(xs) -> [Ok(x), ...]; Error(e) -> [Error(e)]."""
    match outcome:
        case Ok(values):
            return [Ok(value) for value in values]
        case Error(error):
            return [Error(error)]
        case _ as unreachable:
            assert_never(unreachable)

__all__ = (
    "collectM",
    "transpose_option_of_seq",
    "transpose_result_of_seq",
    "transpose_seq_of_options",
    "transpose_seq_of_results",
)
