from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fleet_rentals.api.deps import get_sessionmaker
from fleet_rentals.application.interfaces.clock import Clock, SystemClock
from fleet_rentals.application.use_cases.directory import CarDirectoryUseCase, DirectoryUseCase
from fleet_rentals.application.use_cases.rental_queries import RentalQueriesUseCase
from fleet_rentals.application.use_cases.reservation_coordinator import ReservationCoordinator
from fleet_rentals.config import Settings, get_settings
from fleet_rentals.infrastructure.db.repositories.car_repo_sql import CarRepoSQL
from fleet_rentals.infrastructure.db.repositories.client_repo_sql import ClientRepoSQL
from fleet_rentals.infrastructure.db.repositories.employee_repo_sql import EmployeeRepoSQL
from fleet_rentals.infrastructure.db.repositories.rental_repo_sql import RentalRepoSQL
from fleet_rentals.infrastructure.db.transaction_manager import SQLAlchemyTransactionManager
from fleet_rentals.infrastructure.in_memory.car_repo import InMemoryCarRepo
from fleet_rentals.infrastructure.in_memory.client_repo import InMemoryClientRepo
from fleet_rentals.infrastructure.in_memory.employee_repo import InMemoryEmployeeRepo
from fleet_rentals.infrastructure.in_memory.rental_repo import InMemoryRentalRepo
from fleet_rentals.infrastructure.in_memory.transaction_manager import NoopTransactionManager


async def get_session(settings: Settings = Depends(get_settings)) -> AsyncSession | None:
    if settings.use_in_memory:
        yield None
        return
    async with get_sessionmaker()() as session:
        yield session


def get_clock() -> Clock:
    return SystemClock()


@lru_cache(maxsize=1)
def _in_memory_bundle():
    return {
        "rental_repo": InMemoryRentalRepo(),
        "car_repo": InMemoryCarRepo(),
        "client_repo": InMemoryClientRepo(),
        "employee_repo": InMemoryEmployeeRepo(),
        "tx_manager": NoopTransactionManager(),
    }


def _sql_bundle(session: AsyncSession):
    return {
        "rental_repo": RentalRepoSQL(session),
        "car_repo": CarRepoSQL(session),
        "client_repo": ClientRepoSQL(session),
        "employee_repo": EmployeeRepoSQL(session),
        "tx_manager": SQLAlchemyTransactionManager(session),
    }


def get_use_cases(
    settings: Settings = Depends(get_settings),
    session: AsyncSession | None = Depends(get_session),
    clock: Clock = Depends(get_clock),
):
    if settings.use_in_memory:
        bundle = _in_memory_bundle()
    elif session is None:
        raise RuntimeError("DB session not available")
    else:
        bundle = _sql_bundle(session)

    tx_manager = bundle["tx_manager"]
    return {
        "reserve": ReservationCoordinator(
            rental_repo=bundle["rental_repo"],
            car_repo=bundle["car_repo"],
            client_repo=bundle["client_repo"],
            employee_repo=bundle["employee_repo"],
            transaction_manager=tx_manager,
            clock=clock,
        ),
        "rentals": RentalQueriesUseCase(
            rental_repo=bundle["rental_repo"],
            transaction_manager=tx_manager,
        ),
        "cars": CarDirectoryUseCase(bundle["car_repo"], bundle["rental_repo"], tx_manager),
        "clients": DirectoryUseCase("client", bundle["client_repo"], tx_manager),
        "employees": DirectoryUseCase("employee", bundle["employee_repo"], tx_manager),
    }
