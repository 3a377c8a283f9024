from fleet_rentals.application.interfaces.client_repo import ClientRepo
from fleet_rentals.domain.entities.client import Client
from fleet_rentals.infrastructure.db.repositories.base import SQLDirectoryRepo
from fleet_rentals.infrastructure.db.tables import clients


class ClientRepoSQL(SQLDirectoryRepo[Client], ClientRepo):
    table = clients
    entity_type = Client
    entity = "client"
    unique_fields = ("email", "driver_license")
