"""
Writer
======

Diagnostics that travel with a transpose result instead of going to a logger:
- Result[T, E] (success/structural mismatch)
- Log[W] (what the operation observed about the input's shape)

Built on top of kungfu library patterns.
"""

from .log import Log
from .result import WriterResult, writer_error, writer_ok

__all__ = (
    "Log",
    "WriterResult",
    "writer_ok",
    "writer_error",
)
