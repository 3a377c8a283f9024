"""Comandos de entrada del motor de reservaciones."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from fleet_rentals.domain.entities.rental import RentalStatus

DateLike = date | datetime | str


@dataclass
class ReserveRentalCommand:
    """Solicitud de una renta nueva."""

    car_id: int
    client_id: int
    employee_id: int
    start_date: DateLike
    end_date: DateLike
    total_cost: Decimal


@dataclass
class AmendRentalCommand:
    """Parche parcial sobre una renta existente. None = sin cambio."""

    car_id: int | None = None
    client_id: int | None = None
    employee_id: int | None = None
    start_date: DateLike | None = None
    end_date: DateLike | None = None
    total_cost: Decimal | None = None
    status: RentalStatus | None = None
