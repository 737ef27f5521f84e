"""Unit of work port.

A unit of work groups repository writes into one atomic commit. Used as
an async context manager: commits on normal exit, rolls back when the
block raises.
"""

from __future__ import annotations

from types import TracebackType
from typing import Optional, Protocol


class UnitOfWork(Protocol):
    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None: ...
