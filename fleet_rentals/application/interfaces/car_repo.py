"""Interface CarRepo - Puerto para repositorio de vehículos."""

from abc import ABC, abstractmethod

from fleet_rentals.domain.entities.car import Car


class CarRepo(ABC):
    """
    Puerto para el repositorio de vehículos.

    Desde el motor de reservaciones solo se lee; el alta, edición y el
    cambio de estado de mantenimiento llegan por el CRUD de la flota.
    """

    @abstractmethod
    async def get_by_id(self, car_id: int) -> Car | None:
        """
        Obtiene un vehículo por su ID.

        Args:
            car_id: ID del vehículo.

        Returns:
            Car o None si no existe.
        """
        raise NotImplementedError

    @abstractmethod
    async def list_page(self, page: int, limit: int) -> tuple[list[Car], int]:
        """
        Lista vehículos paginados.

        Returns:
            (vehículos de la página, total)
        """
        raise NotImplementedError

    @abstractmethod
    async def create(self, car: Car) -> Car:
        """
        Crea un vehículo.

        Raises:
            DuplicateValueError: si la placa ya existe.
        """
        raise NotImplementedError

    @abstractmethod
    async def update(self, car: Car) -> Car:
        """
        Guarda los cambios de un vehículo existente.

        Raises:
            NotFoundError: si el vehículo no existe.
            DuplicateValueError: si la placa ya existe.
        """
        raise NotImplementedError

    @abstractmethod
    async def delete(self, car_id: int) -> bool:
        """Elimina un vehículo. Retorna False si no existía."""
        raise NotImplementedError
