from fleet_rentals.application.interfaces.employee_repo import EmployeeRepo
from fleet_rentals.domain.entities.employee import Employee
from fleet_rentals.infrastructure.in_memory.base import InMemoryDirectoryRepo


class InMemoryEmployeeRepo(InMemoryDirectoryRepo[Employee], EmployeeRepo):
    entity = "employee"
    unique_fields = ("email",)
