"""PostgreSQL transaction manager."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession

from campus.domain.repository import TransactionManager
from campus.persistence.errors import store_errors


class PostgresTransactionManager(TransactionManager):
    """Atomic scopes backed by savepoints on the request session.

    The request transaction itself is committed by the session provider;
    a failed scope only rolls back to its savepoint.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize transaction manager.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        """Open a savepoint that is released on success and rolled back on error."""
        with store_errors("transaction"):
            savepoint = await self.session.begin_nested()
        try:
            yield
        except BaseException:
            if savepoint.is_active:
                await savepoint.rollback()
            raise
        with store_errors("transaction"):
            await savepoint.commit()
