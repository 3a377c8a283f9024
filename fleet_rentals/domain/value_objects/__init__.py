"""Value Objects del dominio de rentas."""

from fleet_rentals.domain.value_objects.rental_period import RentalPeriod, to_calendar_day

__all__ = [
    "RentalPeriod",
    "to_calendar_day",
]
