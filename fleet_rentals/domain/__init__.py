"""
Capa de Dominio - Motor de Rentas de Vehículos.

Esta capa contiene la lógica de negocio pura, sin dependencias de frameworks.

Estructura:
- entities/: Entidades del dominio (Car, Client, Employee, Rental)
- value_objects/: Objetos de valor inmutables (RentalPeriod)
- errors.py: Excepciones específicas del dominio
"""

from fleet_rentals.domain.entities import (
    Car,
    CarStatus,
    Client,
    Employee,
    Rental,
    RentalStatus,
    ensure_transition,
)
from fleet_rentals.domain.errors import (
    DomainError,
    DuplicateValueError,
    InvalidIntervalError,
    InvalidTransitionError,
    NotFoundError,
    RecordInUseError,
    RentalConflictError,
    ResourceUnavailableError,
    StorageError,
    ValidationError,
)
from fleet_rentals.domain.value_objects import RentalPeriod, to_calendar_day

__all__ = [
    # Entities
    "Car",
    "CarStatus",
    "Client",
    "Employee",
    "Rental",
    "RentalStatus",
    "ensure_transition",
    # Value Objects
    "RentalPeriod",
    "to_calendar_day",
    # Errors
    "DomainError",
    "DuplicateValueError",
    "InvalidIntervalError",
    "InvalidTransitionError",
    "NotFoundError",
    "RecordInUseError",
    "RentalConflictError",
    "ResourceUnavailableError",
    "StorageError",
    "ValidationError",
]
