"""Interface EmployeeRepo - Puerto para repositorio de empleados."""

from abc import ABC, abstractmethod

from fleet_rentals.domain.entities.employee import Employee


class EmployeeRepo(ABC):
    """Puerto para el repositorio de empleados."""

    @abstractmethod
    async def get_by_id(self, employee_id: int) -> Employee | None:
        raise NotImplementedError

    @abstractmethod
    async def list_page(self, page: int, limit: int) -> tuple[list[Employee], int]:
        raise NotImplementedError

    @abstractmethod
    async def create(self, employee: Employee) -> Employee:
        raise NotImplementedError

    @abstractmethod
    async def update(self, employee: Employee) -> Employee:
        raise NotImplementedError

    @abstractmethod
    async def delete(self, employee_id: int) -> bool:
        raise NotImplementedError
