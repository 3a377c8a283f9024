from contextlib import asynccontextmanager

from fleet_rentals.application.interfaces.transaction_manager import TransactionManager


class NoopTransactionManager(TransactionManager):
    """Los repositorios en memoria escriben de inmediato; no hay nada que confirmar."""

    @asynccontextmanager
    async def start(self):
        yield
