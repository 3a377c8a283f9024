from fleet_rentals.application.interfaces.employee_repo import EmployeeRepo
from fleet_rentals.domain.entities.employee import Employee
from fleet_rentals.infrastructure.db.repositories.base import SQLDirectoryRepo
from fleet_rentals.infrastructure.db.tables import employees


class EmployeeRepoSQL(SQLDirectoryRepo[Employee], EmployeeRepo):
    table = employees
    entity_type = Employee
    entity = "employee"
    unique_fields = ("email",)
