"""Casos de uso CRUD para vehículos, clientes y empleados."""

import logging
from dataclasses import fields, replace
from typing import Any, Generic, Protocol, TypeVar

from fleet_rentals.application.interfaces.rental_repo import RentalRepo
from fleet_rentals.application.interfaces.transaction_manager import TransactionManager
from fleet_rentals.domain.entities.car import Car
from fleet_rentals.domain.errors import NotFoundError, RecordInUseError, ValidationError

T = TypeVar("T")

# Campos administrados por el almacenamiento
_READ_ONLY_FIELDS = frozenset({"id", "lock_version", "created_at", "updated_at"})


class DirectoryRepo(Protocol[T]):
    async def get_by_id(self, entity_id: int) -> T | None: ...

    async def list_page(self, page: int, limit: int) -> tuple[list[T], int]: ...

    async def create(self, entity: T) -> T: ...

    async def update(self, entity: T) -> T: ...

    async def delete(self, entity_id: int) -> bool: ...


class DirectoryUseCase(Generic[T]):
    """
    CRUD genérico sobre un repositorio de directorio.

    No participa en la evaluación de conflictos: poner un vehículo en
    mantenimiento no invalida sus rentas existentes.
    """

    def __init__(
        self,
        entity: str,
        repo: DirectoryRepo[T],
        transaction_manager: TransactionManager,
    ) -> None:
        self._entity = entity
        self._repo = repo
        self._transaction_manager = transaction_manager
        self._logger = logging.getLogger(__name__)

    async def get(self, entity_id: int) -> T:
        found = await self._repo.get_by_id(entity_id)
        if not found:
            raise NotFoundError(self._entity, entity_id)
        return found

    async def list_page(self, page: int, limit: int) -> tuple[list[T], int]:
        return await self._repo.list_page(page=page, limit=limit)

    async def create(self, entity: T) -> T:
        async with self._transaction_manager.start():
            created = await self._repo.create(entity)
        self._logger.info(
            "Directory record created",
            extra={"entity": self._entity, "entity_id": getattr(created, "id", None)},
        )
        return created

    async def update(self, entity_id: int, changes: dict[str, Any]) -> T:
        async with self._transaction_manager.start():
            current = await self.get(entity_id)
            allowed = {f.name for f in fields(current)} - _READ_ONLY_FIELDS
            unknown = set(changes) - allowed
            if unknown:
                raise ValidationError(sorted(unknown)[0], "field cannot be updated")
            if not changes:
                return current
            updated = await self._repo.update(replace(current, **changes))
        self._logger.info(
            "Directory record updated",
            extra={"entity": self._entity, "entity_id": entity_id, "fields": sorted(changes)},
        )
        return updated

    async def delete(self, entity_id: int) -> None:
        async with self._transaction_manager.start():
            deleted = await self._repo.delete(entity_id)
        if not deleted:
            raise NotFoundError(self._entity, entity_id)
        self._logger.info(
            "Directory record deleted",
            extra={"entity": self._entity, "entity_id": entity_id},
        )


class CarDirectoryUseCase(DirectoryUseCase[Car]):
    """
    CRUD de vehículos con guarda de borrado.

    Un vehículo con rentas ACTIVE no puede darse de baja: esas rentas
    quedarían sin vehículo y no podrían modificarse.
    """

    def __init__(
        self,
        repo: DirectoryRepo[Car],
        rental_repo: RentalRepo,
        transaction_manager: TransactionManager,
    ) -> None:
        super().__init__("car", repo, transaction_manager)
        self._rental_repo = rental_repo

    async def delete(self, entity_id: int) -> None:
        async with self._transaction_manager.start():
            active_ids = await self._rental_repo.active_rental_ids_for_car(entity_id)
            if active_ids:
                self._logger.warning(
                    "Car delete refused, active rentals exist",
                    extra={"car_id": entity_id, "rental_ids": active_ids},
                )
                raise RecordInUseError("car", entity_id, active_ids)
            deleted = await self._repo.delete(entity_id)
        if not deleted:
            raise NotFoundError(self._entity, entity_id)
        self._logger.info(
            "Directory record deleted",
            extra={"entity": self._entity, "entity_id": entity_id},
        )
