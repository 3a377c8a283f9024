"""Esquemas de la flota y del directorio (vehículos, clientes, empleados)."""

from datetime import date, datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field, condecimal, constr

from fleet_rentals.domain.entities.car import Car, CarStatus
from fleet_rentals.domain.entities.client import Client
from fleet_rentals.domain.entities.employee import Employee

Money = condecimal(max_digits=12, decimal_places=2, ge=0)
Name = constr(strip_whitespace=True, min_length=1, max_length=150)
Phone = constr(strip_whitespace=True, min_length=7, max_length=50)


class _PatchModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    def changes(self) -> dict[str, Any]:
        """Solo los campos enviados por el cliente."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


# === Vehículos ===


class CarCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    brand: Name
    model: Name
    year: int = Field(ge=1900, le=2100)
    color: constr(strip_whitespace=True, min_length=1, max_length=50)
    license_plate: constr(strip_whitespace=True, min_length=1, max_length=20)
    daily_rate: Money = Field(default=Decimal("0"))
    status: CarStatus = CarStatus.AVAILABLE

    def to_entity(self) -> Car:
        return Car(**self.model_dump())


class CarUpdate(_PatchModel):
    brand: Name | None = None
    model: Name | None = None
    year: int | None = Field(default=None, ge=1900, le=2100)
    color: constr(strip_whitespace=True, min_length=1, max_length=50) | None = None
    license_plate: constr(strip_whitespace=True, min_length=1, max_length=20) | None = None
    daily_rate: Money | None = None
    status: CarStatus | None = None


class CarResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    brand: str
    model: str
    year: int
    color: str
    license_plate: str
    daily_rate: Decimal
    status: CarStatus
    created_at: datetime | None = None
    updated_at: datetime | None = None


# === Clientes ===


class ClientCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    first_name: Name
    last_name: Name
    email: EmailStr
    phone: Phone
    driver_license: constr(strip_whitespace=True, min_length=1, max_length=100)
    address: constr(strip_whitespace=True, max_length=500) = ""

    def to_entity(self) -> Client:
        return Client(**self.model_dump())


class ClientUpdate(_PatchModel):
    first_name: Name | None = None
    last_name: Name | None = None
    email: EmailStr | None = None
    phone: Phone | None = None
    driver_license: constr(strip_whitespace=True, min_length=1, max_length=100) | None = None
    address: constr(strip_whitespace=True, max_length=500) | None = None


class ClientResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    email: str
    phone: str
    driver_license: str
    address: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


# === Empleados ===


class EmployeeCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    first_name: Name
    last_name: Name
    email: EmailStr
    phone: Phone
    position: constr(strip_whitespace=True, min_length=1, max_length=100)
    hire_date: date | None = None

    def to_entity(self) -> Employee:
        return Employee(**self.model_dump())


class EmployeeUpdate(_PatchModel):
    first_name: Name | None = None
    last_name: Name | None = None
    email: EmailStr | None = None
    phone: Phone | None = None
    position: constr(strip_whitespace=True, min_length=1, max_length=100) | None = None
    hire_date: date | None = None


class EmployeeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    email: str
    phone: str
    position: str
    hire_date: date | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


# === Páginas ===


class CarPageResponse(BaseModel):
    items: list[CarResponse]
    total: int
    page: int
    limit: int


class ClientPageResponse(BaseModel):
    items: list[ClientResponse]
    total: int
    page: int
    limit: int


class EmployeePageResponse(BaseModel):
    items: list[EmployeeResponse]
    total: int
    page: int
    limit: int
