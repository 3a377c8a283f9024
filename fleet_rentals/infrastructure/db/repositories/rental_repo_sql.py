from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Sequence

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from fleet_rentals.application.interfaces.rental_repo import RentalChanges, RentalRepo
from fleet_rentals.domain.entities.rental import Rental, RentalStatus
from fleet_rentals.domain.errors import NotFoundError, RentalConflictError
from fleet_rentals.domain.value_objects.rental_period import RentalPeriod
from fleet_rentals.infrastructure.db.errors import translate_storage_errors
from fleet_rentals.infrastructure.db.tables import cars, rentals


def _to_entity(row: Any) -> Rental:
    return Rental(
        id=row["id"],
        car_id=row["car_id"],
        client_id=row["client_id"],
        employee_id=row["employee_id"],
        start_date=row["start_date"],
        end_date=row["end_date"],
        total_cost=Decimal(row["total_cost"]),
        status=RentalStatus(row["status"]),
        lock_version=row["lock_version"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


class RentalRepoSQL(RentalRepo):
    """
    Rentas sobre SQLAlchemy Core.

    Las escrituras toman primero el candado de fila del vehículo con un
    UPDATE sobre `cars.lock_version`; dos transacciones que reservan el mismo
    vehículo quedan serializadas hasta el commit, mientras que vehículos
    distintos no se bloquean entre sí. Deben ejecutarse dentro de la
    transacción del TransactionManager.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def _lock_car(self, car_id: int, must_exist: bool = True) -> None:
        stmt = (
            update(cars)
            .where(cars.c.id == car_id)
            .values(lock_version=cars.c.lock_version + 1)
        )
        result = await self._session.execute(stmt)
        if must_exist and result.rowcount == 0:
            raise NotFoundError("car", car_id)

    async def _overlapping(
        self,
        car_id: int,
        period: RentalPeriod,
        exclude_rental_id: int | None,
        for_update: bool = False,
    ) -> list[Rental]:
        stmt = select(rentals).where(
            rentals.c.car_id == car_id,
            rentals.c.status == RentalStatus.ACTIVE.value,
            rentals.c.start_date < period.end,
            rentals.c.end_date > period.start,
        )
        if exclude_rental_id is not None:
            stmt = stmt.where(rentals.c.id != exclude_rental_id)
        stmt = stmt.order_by(rentals.c.id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self._session.execute(stmt)
        return [_to_entity(row) for row in result.mappings().all()]

    @translate_storage_errors
    async def get_by_id(self, rental_id: int) -> Rental | None:
        stmt = select(rentals).where(rentals.c.id == rental_id).limit(1)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        return _to_entity(row) if row else None

    @translate_storage_errors
    async def find_active_overlapping(
        self,
        car_id: int,
        period: RentalPeriod,
        exclude_rental_id: int | None = None,
    ) -> Sequence[Rental]:
        return await self._overlapping(car_id, period, exclude_rental_id)

    @translate_storage_errors
    async def create_if_no_conflict(self, rental: Rental) -> Rental:
        await self._lock_car(rental.car_id)
        if rental.status.is_conflict_relevant:
            conflicts = await self._overlapping(
                rental.car_id, rental.period, None, for_update=True
            )
            if conflicts:
                raise RentalConflictError(rental.car_id, [r.id for r in conflicts])

        now = datetime.now(timezone.utc)
        stmt = insert(rentals).values(
            car_id=rental.car_id,
            client_id=rental.client_id,
            employee_id=rental.employee_id,
            start_date=rental.start_date,
            end_date=rental.end_date,
            total_cost=rental.total_cost,
            status=rental.status.value,
            lock_version=0,
            created_at=now,
            updated_at=now,
        )
        result = await self._session.execute(stmt)
        return replace(
            rental,
            id=result.inserted_primary_key[0],
            lock_version=0,
            created_at=now,
            updated_at=now,
        )

    @translate_storage_errors
    async def update_if_no_conflict(
        self,
        rental_id: int,
        changes: RentalChanges,
        expected_lock_version: int,
    ) -> Rental:
        current = await self.get_by_id(rental_id)
        if not current:
            raise NotFoundError("rental", rental_id)
        proposed = changes.apply_to(current)

        # Una renta que se cierra no puede generar conflicto; su vehículo
        # incluso puede haber sido dado de baja
        if proposed.status.is_conflict_relevant:
            await self._lock_car(proposed.car_id)
            conflicts = await self._overlapping(
                proposed.car_id, proposed.period, rental_id, for_update=True
            )
            if conflicts:
                raise RentalConflictError(proposed.car_id, [r.id for r in conflicts])

        values = changes.as_dict()
        if "status" in values:
            values["status"] = values["status"].value
        now = datetime.now(timezone.utc)
        stmt = (
            update(rentals)
            .where(
                rentals.c.id == rental_id,
                rentals.c.lock_version == expected_lock_version,
            )
            .values(
                **values,
                updated_at=now,
                lock_version=rentals.c.lock_version + 1,
            )
        )
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            raise RentalConflictError(
                current.car_id,
                [rental_id],
                reason=f"Rental {rental_id} was modified concurrently, please retry",
            )
        return replace(
            proposed,
            lock_version=expected_lock_version + 1,
            updated_at=now,
        )

    @translate_storage_errors
    async def active_rental_ids_for_car(self, car_id: int) -> list[int]:
        await self._lock_car(car_id, must_exist=False)
        stmt = (
            select(rentals.c.id)
            .where(
                rentals.c.car_id == car_id,
                rentals.c.status == RentalStatus.ACTIVE.value,
            )
            .order_by(rentals.c.id)
            .with_for_update()
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    @translate_storage_errors
    async def list_page(self, page: int, limit: int) -> tuple[list[Rental], int]:
        stmt = (
            select(rentals)
            .order_by(rentals.c.id.desc())
            .limit(limit)
            .offset((page - 1) * limit)
        )
        result = await self._session.execute(stmt)
        total = await self._session.scalar(select(func.count()).select_from(rentals))
        return [_to_entity(row) for row in result.mappings().all()], total or 0

    @translate_storage_errors
    async def delete(self, rental_id: int) -> bool:
        result = await self._session.execute(
            delete(rentals).where(rentals.c.id == rental_id)
        )
        return result.rowcount > 0
