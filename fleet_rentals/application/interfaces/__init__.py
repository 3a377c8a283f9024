"""Interfaces (Puertos) de la capa de aplicación."""

from fleet_rentals.application.interfaces.car_repo import CarRepo
from fleet_rentals.application.interfaces.client_repo import ClientRepo
from fleet_rentals.application.interfaces.clock import Clock, FakeClock, SystemClock
from fleet_rentals.application.interfaces.employee_repo import EmployeeRepo
from fleet_rentals.application.interfaces.rental_repo import RentalChanges, RentalRepo
from fleet_rentals.application.interfaces.transaction_manager import TransactionManager

__all__ = [
    # Repositories
    "CarRepo",
    "ClientRepo",
    "EmployeeRepo",
    "RentalRepo",
    "RentalChanges",
    # Infrastructure
    "TransactionManager",
    # Utilities
    "Clock",
    "SystemClock",
    "FakeClock",
]
