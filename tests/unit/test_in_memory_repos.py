from datetime import date
from decimal import Decimal

import pytest

from fleet_rentals.application.interfaces.rental_repo import RentalChanges
from fleet_rentals.domain.entities.car import Car
from fleet_rentals.domain.entities.client import Client
from fleet_rentals.domain.entities.rental import Rental, RentalStatus
from fleet_rentals.domain.errors import DuplicateValueError, NotFoundError, RentalConflictError
from fleet_rentals.infrastructure.in_memory.car_repo import InMemoryCarRepo
from fleet_rentals.infrastructure.in_memory.client_repo import InMemoryClientRepo
from fleet_rentals.infrastructure.in_memory.rental_repo import InMemoryRentalRepo


def make_car(plate: str) -> Car:
    return Car(brand="Nissan", model="Versa", year=2023, color="White", license_plate=plate)


def make_rental(start: date, end: date, car_id: int = 1) -> Rental:
    return Rental(car_id=car_id, client_id=1, employee_id=1, start_date=start, end_date=end)


async def test_car_plate_is_unique_case_insensitively():
    repo = InMemoryCarRepo()
    await repo.create(make_car("abc-123"))

    with pytest.raises(DuplicateValueError) as exc_info:
        await repo.create(make_car(" ABC-123 "))

    assert exc_info.value.field == "license_plate"


async def test_client_unique_fields():
    repo = InMemoryClientRepo()
    await repo.create(
        Client(
            first_name="Jane",
            last_name="Roe",
            email="jane@example.com",
            phone="+15551234567",
            driver_license="DL-1",
        )
    )

    with pytest.raises(DuplicateValueError) as exc_info:
        await repo.create(
            Client(
                first_name="John",
                last_name="Roe",
                email="john@example.com",
                phone="+15551234567",
                driver_license="DL-1",
            )
        )

    assert exc_info.value.field == "driver_license"


async def test_update_bumps_car_version_and_keeps_own_plate():
    repo = InMemoryCarRepo()
    car = await repo.create(make_car("abc-123"))
    car.color = "Black"

    updated = await repo.update(car)

    assert updated.color == "Black"
    assert updated.lock_version == 1
    assert updated.updated_at >= car.created_at


async def test_update_missing_car_raises():
    with pytest.raises(NotFoundError):
        await InMemoryCarRepo().update(Car("Kia", "Rio", 2020, "Red", "ZZZ", id=7))


async def test_returned_entities_are_copies():
    repo = InMemoryCarRepo()
    car = await repo.create(make_car("abc-123"))
    car.color = "Green"

    stored = await repo.get_by_id(car.id)

    assert stored.color == "White"


async def test_directory_pagination():
    repo = InMemoryCarRepo()
    for index in range(5):
        await repo.create(make_car(f"PLATE-{index}"))

    page, total = await repo.list_page(page=2, limit=2)

    assert total == 5
    assert [car.license_plate for car in page] == ["PLATE-2", "PLATE-3"]


async def test_rental_pages_are_newest_first():
    repo = InMemoryRentalRepo()
    for day in (1, 10, 20):
        await repo.create_if_no_conflict(make_rental(date(2024, 6, day), date(2024, 6, day + 2)))

    page, total = await repo.list_page(page=1, limit=2)

    assert total == 3
    assert [r.id for r in page] == [3, 2]


async def test_commit_rejects_overlap():
    repo = InMemoryRentalRepo()
    first = await repo.create_if_no_conflict(make_rental(date(2024, 6, 1), date(2024, 6, 5)))

    with pytest.raises(RentalConflictError) as exc_info:
        await repo.create_if_no_conflict(make_rental(date(2024, 6, 4), date(2024, 6, 6)))

    assert exc_info.value.conflicting_ids == [first.id]


async def test_update_applies_changes_and_bumps_version():
    repo = InMemoryRentalRepo()
    rental = await repo.create_if_no_conflict(make_rental(date(2024, 6, 1), date(2024, 6, 5)))

    updated = await repo.update_if_no_conflict(
        rental.id,
        RentalChanges(total_cost=Decimal("99.90"), status=RentalStatus.COMPLETED),
        expected_lock_version=0,
    )

    assert updated.total_cost == Decimal("99.90")
    assert updated.status is RentalStatus.COMPLETED
    assert updated.lock_version == 1


async def test_update_unknown_rental_raises():
    with pytest.raises(NotFoundError):
        await InMemoryRentalRepo().update_if_no_conflict(
            1, RentalChanges(total_cost=Decimal("1")), expected_lock_version=0
        )


async def test_delete_reports_missing():
    repo = InMemoryRentalRepo()
    rental = await repo.create_if_no_conflict(make_rental(date(2024, 6, 1), date(2024, 6, 5)))

    assert await repo.delete(rental.id)
    assert not await repo.delete(rental.id)


async def test_active_rental_ids_ignore_closed_and_other_cars():
    repo = InMemoryRentalRepo()
    first = await repo.create_if_no_conflict(make_rental(date(2024, 6, 1), date(2024, 6, 5)))
    closed = await repo.create_if_no_conflict(make_rental(date(2024, 6, 10), date(2024, 6, 12)))
    await repo.update_if_no_conflict(
        closed.id, RentalChanges(status=RentalStatus.CANCELLED), expected_lock_version=0
    )
    await repo.create_if_no_conflict(make_rental(date(2024, 6, 1), date(2024, 6, 5), car_id=2))

    assert await repo.active_rental_ids_for_car(1) == [first.id]
    assert await repo.active_rental_ids_for_car(3) == []


async def test_car_locks_are_released_after_writes():
    repo = InMemoryRentalRepo()
    for car_id in range(1, 6):
        rental = await repo.create_if_no_conflict(
            make_rental(date(2024, 6, 1), date(2024, 6, 5), car_id=car_id)
        )
        await repo.update_if_no_conflict(
            rental.id, RentalChanges(total_cost=Decimal("10")), expected_lock_version=0
        )

    assert len(repo._car_locks) == 0
