"""DTOs de la capa de aplicación."""

from fleet_rentals.application.dtos.rental_commands import (
    AmendRentalCommand,
    ReserveRentalCommand,
)

__all__ = [
    "AmendRentalCommand",
    "ReserveRentalCommand",
]
