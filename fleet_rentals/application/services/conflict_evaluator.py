"""Evaluación de conflictos de reservación por vehículo."""

from dataclasses import dataclass, field

from fleet_rentals.application.interfaces.rental_repo import RentalRepo
from fleet_rentals.domain.errors import RentalConflictError
from fleet_rentals.domain.value_objects.rental_period import RentalPeriod


@dataclass(frozen=True)
class ConflictDecision:
    """Resultado de evaluar un periodo candidato: ACCEPT o REJECT(conflictos)."""

    car_id: int
    period: RentalPeriod
    conflicting_ids: tuple[int, ...] = field(default_factory=tuple)

    @property
    def accepted(self) -> bool:
        return not self.conflicting_ids

    def raise_for_conflict(self) -> None:
        if not self.accepted:
            raise RentalConflictError(self.car_id, list(self.conflicting_ids))


class ConflictEvaluator:
    """
    Decide si un periodo puede aceptarse para un vehículo.

    Solo lee; toda escritura queda en el coordinador.
    """

    def __init__(self, rental_repo: RentalRepo) -> None:
        self._rental_repo = rental_repo

    async def evaluate(
        self,
        car_id: int,
        period: RentalPeriod,
        exclude_rental_id: int | None = None,
    ) -> ConflictDecision:
        overlapping = await self._rental_repo.find_active_overlapping(
            car_id=car_id,
            period=period,
            exclude_rental_id=exclude_rental_id,
        )
        return ConflictDecision(
            car_id=car_id,
            period=period,
            conflicting_ids=tuple(sorted(r.id for r in overlapping if r.id is not None)),
        )
