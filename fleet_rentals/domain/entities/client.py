"""Entidad Client - cliente que renta vehículos."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Client:
    """Cliente de la agencia."""

    first_name: str
    last_name: str
    email: str
    phone: str
    driver_license: str
    address: str = ""
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def full_name(self) -> str:
        """Retorna el nombre completo."""
        return f"{self.first_name} {self.last_name}".strip()
