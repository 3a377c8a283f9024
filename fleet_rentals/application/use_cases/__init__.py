"""Casos de uso de la capa de aplicación."""

from fleet_rentals.application.use_cases.directory import CarDirectoryUseCase, DirectoryUseCase
from fleet_rentals.application.use_cases.rental_queries import RentalQueriesUseCase
from fleet_rentals.application.use_cases.reservation_coordinator import ReservationCoordinator

__all__ = [
    "CarDirectoryUseCase",
    "DirectoryUseCase",
    "RentalQueriesUseCase",
    "ReservationCoordinator",
]
