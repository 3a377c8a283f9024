import asyncio
from dataclasses import replace
from datetime import datetime, timezone
from typing import Sequence
from weakref import WeakValueDictionary

from fleet_rentals.application.interfaces.rental_repo import RentalChanges, RentalRepo
from fleet_rentals.domain.entities.rental import Rental
from fleet_rentals.domain.errors import NotFoundError, RentalConflictError
from fleet_rentals.domain.value_objects.rental_period import RentalPeriod


class InMemoryRentalRepo(RentalRepo):
    def __init__(self) -> None:
        self.rentals: dict[int, Rental] = {}
        self._next_id = 1
        # One lock per car, held only across check-and-write; dropped once unused
        self._car_locks: WeakValueDictionary[int, asyncio.Lock] = WeakValueDictionary()

    def _lock_for(self, car_id: int) -> asyncio.Lock:
        lock = self._car_locks.get(car_id)
        if lock is None:
            lock = asyncio.Lock()
            self._car_locks[car_id] = lock
        return lock

    def _overlapping(
        self,
        car_id: int,
        period: RentalPeriod,
        exclude_rental_id: int | None,
    ) -> list[Rental]:
        return [
            replace(rental)
            for rental in self.rentals.values()
            if rental.car_id == car_id
            and rental.status.is_conflict_relevant
            and rental.id != exclude_rental_id
            and rental.period.overlaps_with(period)
        ]

    async def get_by_id(self, rental_id: int) -> Rental | None:
        rental = self.rentals.get(rental_id)
        return replace(rental) if rental else None

    async def find_active_overlapping(
        self,
        car_id: int,
        period: RentalPeriod,
        exclude_rental_id: int | None = None,
    ) -> Sequence[Rental]:
        return self._overlapping(car_id, period, exclude_rental_id)

    async def create_if_no_conflict(self, rental: Rental) -> Rental:
        async with self._lock_for(rental.car_id):
            if rental.status.is_conflict_relevant:
                conflicts = self._overlapping(rental.car_id, rental.period, None)
                if conflicts:
                    raise RentalConflictError(rental.car_id, [r.id for r in conflicts])
            now = datetime.now(timezone.utc)
            stored = replace(
                rental,
                id=self._next_id,
                lock_version=0,
                created_at=now,
                updated_at=now,
            )
            self._next_id += 1
            self.rentals[stored.id] = stored
            return replace(stored)

    async def update_if_no_conflict(
        self,
        rental_id: int,
        changes: RentalChanges,
        expected_lock_version: int,
    ) -> Rental:
        current = self.rentals.get(rental_id)
        if not current:
            raise NotFoundError("rental", rental_id)
        # The lock of the destination car; a moved rental only frees the old one
        async with self._lock_for(changes.car_id or current.car_id):
            current = self.rentals.get(rental_id)
            if not current:
                raise NotFoundError("rental", rental_id)
            if current.lock_version != expected_lock_version:
                raise RentalConflictError(
                    current.car_id,
                    [rental_id],
                    reason=f"Rental {rental_id} was modified concurrently, please retry",
                )
            proposed = changes.apply_to(current)
            if proposed.status.is_conflict_relevant:
                conflicts = self._overlapping(proposed.car_id, proposed.period, rental_id)
                if conflicts:
                    raise RentalConflictError(proposed.car_id, [r.id for r in conflicts])
            proposed.lock_version = current.lock_version + 1
            proposed.updated_at = datetime.now(timezone.utc)
            self.rentals[rental_id] = proposed
            return replace(proposed)

    async def active_rental_ids_for_car(self, car_id: int) -> list[int]:
        return sorted(
            rental.id
            for rental in self.rentals.values()
            if rental.car_id == car_id and rental.status.is_conflict_relevant
        )

    async def list_page(self, page: int, limit: int) -> tuple[list[Rental], int]:
        ordered = sorted(self.rentals.values(), key=lambda r: r.id or 0, reverse=True)
        offset = (page - 1) * limit
        return [replace(r) for r in ordered[offset:offset + limit]], len(ordered)

    async def delete(self, rental_id: int) -> bool:
        return self.rentals.pop(rental_id, None) is not None
