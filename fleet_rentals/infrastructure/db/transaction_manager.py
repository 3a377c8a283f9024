import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from fleet_rentals.application.interfaces.transaction_manager import TransactionManager
from fleet_rentals.infrastructure.db.errors import to_storage_error


class SQLAlchemyTransactionManager(TransactionManager):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @asynccontextmanager
    async def start(self) -> AsyncIterator[None]:
        try:
            if self._session.in_transaction():
                yield
            else:
                async with self._session.begin():
                    yield
        except (SQLAlchemyError, asyncio.TimeoutError) as exc:
            raise to_storage_error(exc) from exc
