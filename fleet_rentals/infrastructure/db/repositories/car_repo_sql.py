from decimal import Decimal
from typing import Any

from fleet_rentals.application.interfaces.car_repo import CarRepo
from fleet_rentals.domain.entities.car import Car, CarStatus
from fleet_rentals.infrastructure.db.repositories.base import SQLDirectoryRepo
from fleet_rentals.infrastructure.db.tables import cars


class CarRepoSQL(SQLDirectoryRepo[Car], CarRepo):
    table = cars
    entity_type = Car
    entity = "car"
    unique_fields = ("license_plate",)

    def _to_row(self, item: Car) -> dict[str, Any]:
        row = super()._to_row(item)
        row["status"] = item.status.value
        return row

    def _to_entity(self, row: Any) -> Car:
        values = dict(row)
        values["status"] = CarStatus(values["status"])
        values["daily_rate"] = Decimal(values["daily_rate"])
        return Car(**values)
