"""
WriterResult - Result with accumulated log
==========================================
"""

from __future__ import annotations

from kungfu import Error, Ok, Result

from .._types import NoError
from .log import Log


class WriterResult[T, E, W]:
    """
    Result paired with the log written while producing it.

    Matchable positionally:

        match transpose_matrix_w(rows):
            case WriterResult(Ok(columns), log): ...
            case WriterResult(Error(err), log): ...
    """

    __slots__ = ("_result", "_log")
    __match_args__ = ("result", "log")

    def __init__(self, result: Result[T, E], log: W) -> None:
        self._result = result
        self._log = log

    @property
    def result(self) -> Result[T, E]:
        """The underlying Result."""
        return self._result

    @property
    def log(self) -> W:
        """The accumulated log."""
        return self._log

    def __repr__(self) -> str:
        return f"WriterResult({self._result!r}, log={self._log!r})"


def writer_ok[T, W](value: T, *log_entries: W) -> WriterResult[T, NoError, Log[W]]:
    """Successful WriterResult with optional log entries."""
    return WriterResult(Ok(value), Log.of(*log_entries))


def writer_error[E, W](error: E, *log_entries: W) -> WriterResult[NoError, E, Log[W]]:
    """Failed WriterResult with optional log entries."""
    return WriterResult(Error(error), Log.of(*log_entries))


__all__ = ("WriterResult", "writer_error", "writer_ok")
