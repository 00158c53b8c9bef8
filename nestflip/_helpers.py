"""Internal helpers for nestflip.

Common functions used across the flatten and transpose modules.
These are not part of the public API but can be used to build
collectM-style transposes for custom layer types."""

from __future__ import annotations

from collections.abc import Iterable
from typing import assert_never

from kungfu import Error, Nothing, Ok, Option, Result, Some

from .writer import Log

# Extract functions (Layer -> Result[T, E])
def extract_result[T, E](r: Result[T, E]) -> Result[T, E]:
    """Extract Result from Result (identity for the outcome layer)."""
    return r

def extract_option[T](o: Option[T]) -> Result[T, None]:
    """
    Extract Result from Option.

    Some(v) becomes Ok(v), Nothing() becomes Error(None), so absence
    short-circuits a collect exactly like a failure does.
    """
    match o:
        case Some(value):
            return Ok(value)
        case Nothing():
            return Error(None)
        case _ as unreachable:
            assert_never(unreachable)

# Result -> Option (structural mismatch collapses to absence)
def to_option[T, E](r: Result[T, E]) -> Option[T]:
    """Drop the error payload: Ok(v) -> Some(v), Error(_) -> Nothing()."""
    match r:
        case Ok(value):
            return Some(value)
        case Error(_):
            return Nothing()
        case _ as unreachable:
            assert_never(unreachable)

# Log merging helpers
def merge_logs[W](logs: Iterable[Log[W]]) -> Log[W]:
    """
    Merge multiple logs into one using monoidal combine.

    Usage:
        merged = merge_logs(wr.log for wr in writer_results)
    """
    result = Log[W]()
    for log in logs:
        result = result.combine(log)
    return result

__all__ = (
    # Extract functions
    "extract_result",
    "extract_option",
    # Result -> Option
    "to_option",
    # Log merging
    "merge_logs",
)
