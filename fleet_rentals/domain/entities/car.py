"""Entidad Car - vehículo rentable de la flota."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class CarStatus(str, Enum):
    """Disponibilidad del vehículo."""

    AVAILABLE = "AVAILABLE"
    MAINTENANCE = "MAINTENANCE"


@dataclass
class Car:
    """
    Vehículo de la flota.

    El motor solo lee `status`: un vehículo en MAINTENANCE no acepta rentas
    nuevas, pero sus rentas existentes no se ven afectadas.
    """

    brand: str
    model: str
    year: int
    color: str
    license_plate: str
    daily_rate: Decimal = Decimal("0")
    status: CarStatus = CarStatus.AVAILABLE
    id: int | None = None
    lock_version: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        self.license_plate = self.license_plate.strip().upper()

    @property
    def accepts_new_rentals(self) -> bool:
        return self.status is CarStatus.AVAILABLE
