"""Entidad Employee - empleado que registra rentas."""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass
class Employee:
    """Empleado de la agencia (solo atribución de rentas)."""

    first_name: str
    last_name: str
    email: str
    phone: str
    position: str
    hire_date: date | None = None
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
