from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, condecimal

from fleet_rentals.application.dtos.rental_commands import (
    AmendRentalCommand,
    ReserveRentalCommand,
)
from fleet_rentals.domain.entities.rental import Rental, RentalStatus

Money = condecimal(max_digits=12, decimal_places=2)


class CreateRentalRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    car_id: int
    client_id: int
    employee_id: int
    start_date: date | datetime
    end_date: date | datetime
    total_cost: Money

    def to_command(self) -> ReserveRentalCommand:
        return ReserveRentalCommand(
            car_id=self.car_id,
            client_id=self.client_id,
            employee_id=self.employee_id,
            start_date=self.start_date,
            end_date=self.end_date,
            total_cost=self.total_cost,
        )


class UpdateRentalRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    car_id: int | None = None
    client_id: int | None = None
    employee_id: int | None = None
    start_date: date | datetime | None = None
    end_date: date | datetime | None = None
    total_cost: Money | None = None
    status: RentalStatus | None = None

    def to_command(self) -> AmendRentalCommand:
        return AmendRentalCommand(**self.model_dump(exclude_none=True))


class RentalResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    car_id: int
    client_id: int
    employee_id: int
    start_date: date
    end_date: date
    total_cost: Decimal
    status: RentalStatus
    lock_version: int
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, rental: Rental) -> "RentalResponse":
        return cls.model_validate(rental)


class RentalPageResponse(BaseModel):
    items: list[RentalResponse]
    total: int
    page: int
    limit: int
