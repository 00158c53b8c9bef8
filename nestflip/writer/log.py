"""
Log - diagnostic entries written by the *_w transposes
=======================================================
"""

from __future__ import annotations


class Log[A](list[A]):
    """
    Ordered diagnostic entries attached to a WriterResult.

    Entries are never edited in place: tell() and combine() hand back a
    new Log, so a log already returned to a caller stays as it was.
    An empty Log combines with any other log without changing it.
    """

    @staticmethod
    def of[T](*entries: T) -> Log[T]:
        """Log holding the given entries in order."""
        return Log[T](entries)

    def combine(self, other: Log[A], /) -> Log[A]:
        """
        This log's entries followed by other's.

        Example:
            Log.of("transpose_matrix: 2x3 -> 3x2").combine(Log.of("transpose_seq_of_maps: rejected, ..."))
        """
        return Log([*self, *other])

    def tell(self, entry: A, /) -> Log[A]:
        """This log with one more entry at the end."""
        return Log([*self, entry])


__all__ = ("Log",)
