import logging
from decimal import Decimal

from fleet_rentals.application.dtos.rental_commands import (
    AmendRentalCommand,
    ReserveRentalCommand,
)
from fleet_rentals.application.interfaces.car_repo import CarRepo
from fleet_rentals.application.interfaces.client_repo import ClientRepo
from fleet_rentals.application.interfaces.clock import Clock
from fleet_rentals.application.interfaces.employee_repo import EmployeeRepo
from fleet_rentals.application.interfaces.rental_repo import RentalChanges, RentalRepo
from fleet_rentals.application.interfaces.transaction_manager import TransactionManager
from fleet_rentals.application.services.conflict_evaluator import ConflictEvaluator
from fleet_rentals.domain.entities.car import Car
from fleet_rentals.domain.entities.rental import Rental, RentalStatus, ensure_transition
from fleet_rentals.domain.errors import (
    InvalidIntervalError,
    NotFoundError,
    RentalConflictError,
    ResourceUnavailableError,
    ValidationError,
)
from fleet_rentals.domain.value_objects.rental_period import RentalPeriod, to_calendar_day


class ReservationCoordinator:
    """
    Punto de entrada del motor: crea y modifica rentas.

    Cada operación corre en una sola transacción; la escritura final pasa por
    las primitivas atómicas del repositorio, de modo que un conflicto que
    aparezca entre la evaluación y el commit se reporta igual que uno
    detectado en la evaluación.
    """

    def __init__(
        self,
        rental_repo: RentalRepo,
        car_repo: CarRepo,
        client_repo: ClientRepo,
        employee_repo: EmployeeRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> None:
        self._rental_repo = rental_repo
        self._car_repo = car_repo
        self._client_repo = client_repo
        self._employee_repo = employee_repo
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._evaluator = ConflictEvaluator(rental_repo)
        self._logger = logging.getLogger(__name__)

    async def reserve(self, command: ReserveRentalCommand) -> Rental:
        period = RentalPeriod.from_values(command.start_date, command.end_date)
        self._ensure_not_past(period)
        total_cost = self._ensure_cost(command.total_cost)

        async with self._transaction_manager.start():
            await self._load_bookable_car(command.car_id)
            await self._ensure_client(command.client_id)
            await self._ensure_employee(command.employee_id)

            decision = await self._evaluator.evaluate(command.car_id, period)
            if not decision.accepted:
                self._log_conflict(command.car_id, period, list(decision.conflicting_ids))
                decision.raise_for_conflict()

            try:
                rental = await self._rental_repo.create_if_no_conflict(
                    Rental(
                        car_id=command.car_id,
                        client_id=command.client_id,
                        employee_id=command.employee_id,
                        start_date=period.start,
                        end_date=period.end,
                        total_cost=total_cost,
                        status=RentalStatus.ACTIVE,
                    )
                )
            except RentalConflictError as exc:
                self._log_conflict(command.car_id, period, exc.conflicting_ids, at_commit=True)
                raise

        self._logger.info(
            "Rental reserved",
            extra={
                "rental_id": rental.id,
                "car_id": rental.car_id,
                "period": str(period),
            },
        )
        return rental

    async def amend(self, rental_id: int, command: AmendRentalCommand) -> Rental:
        async with self._transaction_manager.start():
            current = await self._rental_repo.get_by_id(rental_id)
            if not current:
                raise NotFoundError("rental", rental_id)

            changes = self._to_changes(command)
            if changes.is_empty():
                return current

            if changes.status is not None:
                ensure_transition(current.status, changes.status)
            if changes.total_cost is not None:
                changes.total_cost = self._ensure_cost(changes.total_cost)

            proposed = changes.apply_to(current)
            schedule_changed = (
                proposed.car_id != current.car_id
                or proposed.start_date != current.start_date
                or proposed.end_date != current.end_date
            )

            if changes.touches_schedule:
                period = RentalPeriod(start=proposed.start_date, end=proposed.end_date)
                # Rentas históricas (completadas o canceladas) no revalidan fechas pasadas
                if current.is_active and proposed.is_active:
                    self._ensure_not_past(period)
            if proposed.car_id != current.car_id:
                await self._load_bookable_car(proposed.car_id)
            if proposed.client_id != current.client_id:
                await self._ensure_client(proposed.client_id)
            if proposed.employee_id != current.employee_id:
                await self._ensure_employee(proposed.employee_id)

            if proposed.is_active and schedule_changed:
                decision = await self._evaluator.evaluate(
                    proposed.car_id, proposed.period, exclude_rental_id=rental_id
                )
                if not decision.accepted:
                    self._log_conflict(
                        proposed.car_id, proposed.period, list(decision.conflicting_ids)
                    )
                    decision.raise_for_conflict()

            try:
                updated = await self._rental_repo.update_if_no_conflict(
                    rental_id=rental_id,
                    changes=changes,
                    expected_lock_version=current.lock_version,
                )
            except RentalConflictError as exc:
                self._log_conflict(
                    proposed.car_id, proposed.period, exc.conflicting_ids, at_commit=True
                )
                raise

        self._logger.info(
            "Rental amended",
            extra={
                "rental_id": rental_id,
                "fields": sorted(changes.as_dict()),
                "status": updated.status.value,
            },
        )
        return updated

    def _to_changes(self, command: AmendRentalCommand) -> RentalChanges:
        return RentalChanges(
            car_id=command.car_id,
            client_id=command.client_id,
            employee_id=command.employee_id,
            start_date=(
                to_calendar_day(command.start_date, "start_date")
                if command.start_date is not None
                else None
            ),
            end_date=(
                to_calendar_day(command.end_date, "end_date")
                if command.end_date is not None
                else None
            ),
            total_cost=command.total_cost,
            status=RentalStatus(command.status) if command.status is not None else None,
        )

    def _ensure_not_past(self, period: RentalPeriod) -> None:
        if period.starts_before(self._clock.today()):
            raise InvalidIntervalError("Start date cannot be in the past", field="start_date")

    @staticmethod
    def _ensure_cost(total_cost: Decimal) -> Decimal:
        try:
            value = Decimal(str(total_cost))
        except ArithmeticError as exc:
            raise ValidationError("total_cost", "must be a number") from exc
        if not value.is_finite() or value < 0:
            raise ValidationError("total_cost", "must be zero or greater")
        return value

    async def _load_bookable_car(self, car_id: int) -> Car:
        car = await self._car_repo.get_by_id(car_id)
        if not car:
            raise NotFoundError("car", car_id)
        if not car.accepts_new_rentals:
            raise ResourceUnavailableError(car_id)
        return car

    async def _ensure_client(self, client_id: int) -> None:
        if not await self._client_repo.get_by_id(client_id):
            raise NotFoundError("client", client_id)

    async def _ensure_employee(self, employee_id: int) -> None:
        if not await self._employee_repo.get_by_id(employee_id):
            raise NotFoundError("employee", employee_id)

    def _log_conflict(
        self,
        car_id: int,
        period: RentalPeriod,
        conflicting_ids: list[int],
        at_commit: bool = False,
    ) -> None:
        self._logger.warning(
            "Rental conflict detected at commit" if at_commit else "Rental conflict detected",
            extra={
                "car_id": car_id,
                "period": str(period),
                "conflicting_rental_ids": conflicting_ids,
            },
        )
