"""Interface ClientRepo - Puerto para repositorio de clientes."""

from abc import ABC, abstractmethod

from fleet_rentals.domain.entities.client import Client


class ClientRepo(ABC):
    """Puerto para el repositorio de clientes."""

    @abstractmethod
    async def get_by_id(self, client_id: int) -> Client | None:
        raise NotImplementedError

    @abstractmethod
    async def list_page(self, page: int, limit: int) -> tuple[list[Client], int]:
        raise NotImplementedError

    @abstractmethod
    async def create(self, client: Client) -> Client:
        """
        Crea un cliente.

        Raises:
            DuplicateValueError: email o licencia ya registrados.
        """
        raise NotImplementedError

    @abstractmethod
    async def update(self, client: Client) -> Client:
        raise NotImplementedError

    @abstractmethod
    async def delete(self, client_id: int) -> bool:
        raise NotImplementedError
