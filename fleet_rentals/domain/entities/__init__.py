"""Entidades del dominio de rentas."""

from fleet_rentals.domain.entities.car import Car, CarStatus
from fleet_rentals.domain.entities.client import Client
from fleet_rentals.domain.entities.employee import Employee
from fleet_rentals.domain.entities.rental import (
    ALLOWED_TRANSITIONS,
    Rental,
    RentalStatus,
    ensure_transition,
)

__all__ = [
    # Car
    "Car",
    "CarStatus",
    # Client
    "Client",
    # Employee
    "Employee",
    # Rental
    "Rental",
    "RentalStatus",
    "ALLOWED_TRANSITIONS",
    "ensure_transition",
]
