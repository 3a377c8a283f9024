"""
Pytest configuration and shared fixtures.

Este módulo provee fixtures reutilizables para:
- Reloj fijo (FakeClock) para la validación de fechas pasadas
- Repositorios en memoria y coordinador de reservaciones
- Base de datos SQLite (aiosqlite) en archivo temporal
- Cliente HTTP de prueba (FastAPI TestClient / httpx)
"""

from decimal import Decimal
from typing import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from fleet_rentals.api.dependencies import _in_memory_bundle, get_clock
from fleet_rentals.application.dtos.rental_commands import ReserveRentalCommand
from fleet_rentals.application.interfaces.clock import FakeClock
from fleet_rentals.application.use_cases.reservation_coordinator import ReservationCoordinator
from fleet_rentals.config import Settings, get_settings
from fleet_rentals.infrastructure.db.engine import build_sessionmaker
from fleet_rentals.infrastructure.db.tables import metadata
from fleet_rentals.infrastructure.in_memory.car_repo import InMemoryCarRepo
from fleet_rentals.infrastructure.in_memory.client_repo import InMemoryClientRepo
from fleet_rentals.infrastructure.in_memory.employee_repo import InMemoryEmployeeRepo
from fleet_rentals.infrastructure.in_memory.rental_repo import InMemoryRentalRepo
from fleet_rentals.infrastructure.in_memory.transaction_manager import NoopTransactionManager
from fleet_rentals.main import app
from tests.factories import TODAY, Fleet, seed_fleet

# ============================================================================
# FIXTURES DE DOMINIO
# ============================================================================

@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(TODAY)


@pytest.fixture
def repos():
    return {
        "rental_repo": InMemoryRentalRepo(),
        "car_repo": InMemoryCarRepo(),
        "client_repo": InMemoryClientRepo(),
        "employee_repo": InMemoryEmployeeRepo(),
        "tx_manager": NoopTransactionManager(),
    }


@pytest_asyncio.fixture
async def fleet(repos) -> Fleet:
    return await seed_fleet(repos["car_repo"], repos["client_repo"], repos["employee_repo"])


@pytest.fixture
def coordinator(repos, clock) -> ReservationCoordinator:
    return ReservationCoordinator(
        rental_repo=repos["rental_repo"],
        car_repo=repos["car_repo"],
        client_repo=repos["client_repo"],
        employee_repo=repos["employee_repo"],
        transaction_manager=repos["tx_manager"],
        clock=clock,
    )


@pytest.fixture
def reserve_command(fleet):
    """Construye comandos de reserva para V1 con el cliente y empleado sembrados."""

    def _build(start, end, car_id=None, total_cost=Decimal("500.00")) -> ReserveRentalCommand:
        return ReserveRentalCommand(
            car_id=car_id or fleet.car_id,
            client_id=fleet.client_id,
            employee_id=fleet.employee_id,
            start_date=start,
            end_date=end,
            total_cost=total_cost,
        )

    return _build


# ============================================================================
# FIXTURES DE BASE DE DATOS
# ============================================================================

@pytest_asyncio.fixture
async def sql_engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """
    Engine SQLite en archivo temporal con el esquema creado.
    Cada test obtiene una base limpia.
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'rentals.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def sql_sessionmaker(sql_engine):
    return build_sessionmaker(sql_engine)


# ============================================================================
# FIXTURES DE CLIENTE HTTP
# ============================================================================

@pytest.fixture
def api_overrides(clock):
    """
    Overrides de dependencias: almacenamiento en memoria limpio y reloj fijo.
    """
    _in_memory_bundle.cache_clear()
    app.dependency_overrides[get_settings] = lambda: Settings(use_in_memory=True)
    app.dependency_overrides[get_clock] = lambda: clock

    yield app

    app.dependency_overrides.clear()
    _in_memory_bundle.cache_clear()


@pytest.fixture
def client(api_overrides) -> Generator[TestClient, None, None]:
    with TestClient(api_overrides) as test_client:
        yield test_client


@pytest.fixture
def seeded_ids(client):
    """Da de alta la flota por la API y retorna sus IDs."""
    car = client.post(
        "/api/v1/cars",
        json={
            "brand": "Nissan",
            "model": "Versa",
            "year": 2023,
            "color": "White",
            "license_plate": "v1-abc",
            "daily_rate": "45.00",
        },
    )
    assert car.status_code == 201
    customer = client.post(
        "/api/v1/clients",
        json={
            "first_name": "Jane",
            "last_name": "Roe",
            "email": "jane@example.com",
            "phone": "+15551234567",
            "driver_license": "DL-0001",
        },
    )
    assert customer.status_code == 201
    employee = client.post(
        "/api/v1/employees",
        json={
            "first_name": "Luis",
            "last_name": "Pérez",
            "email": "luis@example.com",
            "phone": "+525511112222",
            "position": "Counter agent",
            "hire_date": "2022-03-01",
        },
    )
    assert employee.status_code == 201
    return {
        "car_id": car.json()["id"],
        "client_id": customer.json()["id"],
        "employee_id": employee.json()["id"],
    }


# ============================================================================
# MARKERS DE PYTEST
# ============================================================================

def pytest_configure(config):
    config.addinivalue_line(
        "markers",
        "integration: Tests contra un motor SQL real (aiosqlite)"
    )
