import logging

from fleet_rentals.application.interfaces.rental_repo import RentalRepo
from fleet_rentals.application.interfaces.transaction_manager import TransactionManager
from fleet_rentals.domain.entities.rental import Rental
from fleet_rentals.domain.errors import NotFoundError


class RentalQueriesUseCase:
    """Lectura, listado y baja administrativa de rentas."""

    def __init__(self, rental_repo: RentalRepo, transaction_manager: TransactionManager) -> None:
        self._rental_repo = rental_repo
        self._transaction_manager = transaction_manager
        self._logger = logging.getLogger(__name__)

    async def get(self, rental_id: int) -> Rental:
        rental = await self._rental_repo.get_by_id(rental_id)
        if not rental:
            raise NotFoundError("rental", rental_id)
        return rental

    async def list_page(self, page: int, limit: int) -> tuple[list[Rental], int]:
        return await self._rental_repo.list_page(page=page, limit=limit)

    async def delete(self, rental_id: int) -> None:
        async with self._transaction_manager.start():
            deleted = await self._rental_repo.delete(rental_id)
        if not deleted:
            raise NotFoundError("rental", rental_id)
        self._logger.info("Rental removed by administrator", extra={"rental_id": rental_id})
