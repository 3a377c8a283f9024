from fleet_rentals.application.interfaces.car_repo import CarRepo
from fleet_rentals.domain.entities.car import Car
from fleet_rentals.infrastructure.in_memory.base import InMemoryDirectoryRepo


class InMemoryCarRepo(InMemoryDirectoryRepo[Car], CarRepo):
    entity = "car"
    unique_fields = ("license_plate",)
