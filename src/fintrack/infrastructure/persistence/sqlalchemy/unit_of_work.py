"""SQLAlchemy unit of work."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


class SQLAlchemyUnitOfWork:
    """Commit the session on success, roll back when the block raises.

    Exceptions are never suppressed.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def __aenter__(self) -> SQLAlchemyUnitOfWork:
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if exc_type is None:
            await self._session.commit()
        else:
            logger.debug("Rolling back unit of work after %s", exc_type.__name__)
            await self._session.rollback()
