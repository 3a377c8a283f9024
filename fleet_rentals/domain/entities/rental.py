"""Entidad Rental - Agregado raíz del motor de reservaciones."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum

from fleet_rentals.domain.errors import InvalidTransitionError
from fleet_rentals.domain.value_objects.rental_period import RentalPeriod


class RentalStatus(str, Enum):
    """Estados posibles de una renta."""

    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"

    @property
    def is_conflict_relevant(self) -> bool:
        """Solo las rentas activas bloquean el vehículo."""
        return self is RentalStatus.ACTIVE


ALLOWED_TRANSITIONS: dict[RentalStatus, frozenset[RentalStatus]] = {
    RentalStatus.ACTIVE: frozenset({RentalStatus.COMPLETED, RentalStatus.CANCELLED}),
    RentalStatus.COMPLETED: frozenset(),
    RentalStatus.CANCELLED: frozenset(),
}


def ensure_transition(current: RentalStatus, target: RentalStatus) -> None:
    """
    Valida un cambio de estado.

    Pedir el estado actual es un no-op. Cualquier salida de un estado
    terminal falla.

    Raises:
        InvalidTransitionError: si el cambio no está permitido.
    """
    if current is target:
        return
    if target not in ALLOWED_TRANSITIONS[current]:
        raise InvalidTransitionError(current.value, target.value)


@dataclass
class Rental:
    """
    Renta de un vehículo por un cliente, registrada por un empleado.

    Las referencias se guardan por identidad, nunca embebidas.
    """

    car_id: int
    client_id: int
    employee_id: int
    start_date: date
    end_date: date
    total_cost: Decimal = Decimal("0")
    status: RentalStatus = RentalStatus.ACTIVE
    id: int | None = None

    # Control de concurrencia
    lock_version: int = 0

    # Timestamps
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def period(self) -> RentalPeriod:
        """Retorna el periodo como Value Object."""
        return RentalPeriod(start=self.start_date, end=self.end_date)

    @property
    def is_active(self) -> bool:
        return self.status is RentalStatus.ACTIVE

    def transition_to(self, target: RentalStatus) -> None:
        """Aplica un cambio de estado validado."""
        ensure_transition(self.status, target)
        if target is not self.status:
            self.status = target
            self.lock_version += 1

    def complete(self) -> None:
        self.transition_to(RentalStatus.COMPLETED)

    def cancel(self) -> None:
        self.transition_to(RentalStatus.CANCELLED)
