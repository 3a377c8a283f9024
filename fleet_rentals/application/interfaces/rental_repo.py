"""Interface RentalRepo - Puerto para el repositorio de rentas."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from datetime import date
from decimal import Decimal
from typing import Any, Sequence

from fleet_rentals.domain.entities.rental import Rental, RentalStatus
from fleet_rentals.domain.value_objects.rental_period import RentalPeriod


@dataclass
class RentalChanges:
    """Cambios parciales a aplicar sobre una renta. None = sin cambio."""

    car_id: int | None = None
    client_id: int | None = None
    employee_id: int | None = None
    start_date: date | None = None
    end_date: date | None = None
    total_cost: Decimal | None = None
    status: RentalStatus | None = None

    def as_dict(self) -> dict[str, Any]:
        """Solo los campos presentes."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def apply_to(self, rental: Rental) -> Rental:
        """Retorna una copia de la renta con los cambios aplicados (sin validar)."""
        values = {f.name: getattr(rental, f.name) for f in fields(rental)}
        values.update(self.as_dict())
        return Rental(**values)

    @property
    def touches_schedule(self) -> bool:
        """True si cambia el periodo o el vehículo."""
        return any(
            value is not None for value in (self.car_id, self.start_date, self.end_date)
        )

    def is_empty(self) -> bool:
        return not self.as_dict()


class RentalRepo(ABC):
    """
    Puerto para el repositorio de rentas.

    Las operaciones `*_if_no_conflict` son la única forma de escribir una
    renta activa: verifican superposición y escriben de forma atómica, así
    que un llamador no puede descomponerlas en "verificar y luego escribir".
    """

    @abstractmethod
    async def get_by_id(self, rental_id: int) -> Rental | None:
        """
        Obtiene una renta por su ID.

        Returns:
            Rental o None si no existe.
        """
        raise NotImplementedError

    @abstractmethod
    async def find_active_overlapping(
        self,
        car_id: int,
        period: RentalPeriod,
        exclude_rental_id: int | None = None,
    ) -> Sequence[Rental]:
        """
        Busca rentas ACTIVE del vehículo cuyo periodo se superpone.

        Args:
            car_id: Vehículo a revisar.
            period: Periodo candidato.
            exclude_rental_id: Renta a ignorar (la que se está editando).

        Returns:
            Rentas en conflicto, vacío si no hay.
        """
        raise NotImplementedError

    @abstractmethod
    async def create_if_no_conflict(self, rental: Rental) -> Rental:
        """
        Inserta la renta si ninguna renta ACTIVE del vehículo se superpone.

        Args:
            rental: Renta nueva (sin ID).

        Returns:
            Rental con ID, versión y timestamps asignados.

        Raises:
            RentalConflictError: si la verificación en el commit encuentra conflicto.
            StorageError: falla del almacenamiento.
        """
        raise NotImplementedError

    @abstractmethod
    async def update_if_no_conflict(
        self,
        rental_id: int,
        changes: RentalChanges,
        expected_lock_version: int,
    ) -> Rental:
        """
        Aplica los cambios si la renta resultante no entra en conflicto.

        La superposición se verifica (excluyendo la propia renta) solo cuando
        la renta resultante queda ACTIVE.

        Args:
            rental_id: Renta a modificar.
            changes: Cambios parciales.
            expected_lock_version: Versión leída por el llamador.

        Returns:
            Rental actualizada.

        Raises:
            NotFoundError: si la renta ya no existe.
            RentalConflictError: superposición o modificación concurrente.
            StorageError: falla del almacenamiento.
        """
        raise NotImplementedError

    @abstractmethod
    async def active_rental_ids_for_car(self, car_id: int) -> list[int]:
        """
        IDs de las rentas ACTIVE del vehículo, en cualquier periodo.

        Toma el mismo candado por vehículo que las escrituras, de modo que
        ninguna reserva nueva puede confirmarse entre esta consulta y el
        borrado del vehículo en la misma transacción.

        Returns:
            IDs ordenados, vacío si el vehículo no tiene rentas activas.
        """
        raise NotImplementedError

    @abstractmethod
    async def list_page(self, page: int, limit: int) -> tuple[list[Rental], int]:
        """
        Lista rentas paginadas, más recientes primero.

        Returns:
            (rentas de la página, total de rentas)
        """
        raise NotImplementedError

    @abstractmethod
    async def delete(self, rental_id: int) -> bool:
        """Baja administrativa. Retorna False si no existía."""
        raise NotImplementedError
