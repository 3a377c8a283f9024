from fleet_rentals.infrastructure.db.repositories.car_repo_sql import CarRepoSQL
from fleet_rentals.infrastructure.db.repositories.client_repo_sql import ClientRepoSQL
from fleet_rentals.infrastructure.db.repositories.employee_repo_sql import EmployeeRepoSQL
from fleet_rentals.infrastructure.db.repositories.rental_repo_sql import RentalRepoSQL

__all__ = ["CarRepoSQL", "ClientRepoSQL", "EmployeeRepoSQL", "RentalRepoSQL"]
