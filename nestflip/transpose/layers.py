"""Layer swaps

Re-tag two stacked Result or Option layers. Every input state maps to
exactly one output state, so these never fail."""

from __future__ import annotations

from typing import assert_never

from kungfu import Error, Nothing, Ok, Option, Result, Some

def transpose_result_of_result[T, E, F](
    nested: Result[Result[T, E], F],
) -> Result[Result[T, F], E]:
    """
    Swap which failure is outer.

        Ok(Ok(v))     -> Ok(Ok(v))
        Ok(Error(e))  -> Error(e)
        Error(f)      -> Ok(Error(f))
    """
    match nested:
        case Ok(Ok(value)):
            return Ok(Ok(value))
        case Ok(Error(error)):
            return Error(error)
        case Error(error):
            return Ok(Error(error))
        case _ as unreachable:
            assert_never(unreachable)

def transpose_option_of_option[T](nested: Option[Option[T]]) -> Option[Option[T]]:
    """
    Swap presence layers.

        Some(Some(v))    -> Some(Some(v))
        Some(Nothing())  -> Nothing()
        Nothing()        -> Some(Nothing())
    """
    match nested:
        case Some(Some(value)):
            return Some(Some(value))
        case Some(Nothing()):
            return Nothing()
        case Nothing():
            return Some(Nothing())
        case _ as unreachable:
            assert_never(unreachable)

__all__ = ("transpose_option_of_option", "transpose_result_of_result")
