from fleet_rentals.infrastructure.in_memory.car_repo import InMemoryCarRepo
from fleet_rentals.infrastructure.in_memory.client_repo import InMemoryClientRepo
from fleet_rentals.infrastructure.in_memory.employee_repo import InMemoryEmployeeRepo
from fleet_rentals.infrastructure.in_memory.rental_repo import InMemoryRentalRepo
from fleet_rentals.infrastructure.in_memory.transaction_manager import NoopTransactionManager

__all__ = [
    "InMemoryCarRepo",
    "InMemoryClientRepo",
    "InMemoryEmployeeRepo",
    "InMemoryRentalRepo",
    "NoopTransactionManager",
]
