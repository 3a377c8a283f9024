from fleet_rentals.application.interfaces.client_repo import ClientRepo
from fleet_rentals.domain.entities.client import Client
from fleet_rentals.infrastructure.in_memory.base import InMemoryDirectoryRepo


class InMemoryClientRepo(InMemoryDirectoryRepo[Client], ClientRepo):
    entity = "client"
    unique_fields = ("email", "driver_license")
