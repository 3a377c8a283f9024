import asyncio
import sys
from datetime import date
from decimal import Decimal
from pathlib import Path

# Add project root to sys.path
project_root = Path(__file__).resolve().parent.parent
sys.path.append(str(project_root))

from fleet_rentals.config import get_settings  # noqa: E402
from fleet_rentals.domain.entities.car import Car  # noqa: E402
from fleet_rentals.domain.entities.client import Client  # noqa: E402
from fleet_rentals.domain.entities.employee import Employee  # noqa: E402
from fleet_rentals.infrastructure.db.engine import (  # noqa: E402
    build_engine,
    build_sessionmaker,
    session_scope,
)
from fleet_rentals.infrastructure.db.repositories.car_repo_sql import CarRepoSQL  # noqa: E402
from fleet_rentals.infrastructure.db.repositories.client_repo_sql import ClientRepoSQL  # noqa: E402
from fleet_rentals.infrastructure.db.repositories.employee_repo_sql import (  # noqa: E402
    EmployeeRepoSQL,
)
from fleet_rentals.infrastructure.db.tables import metadata  # noqa: E402


async def seed():
    engine = build_engine(get_settings())
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
        print("Created missing tables.")

    async with session_scope(build_sessionmaker(engine)) as session:
        car = await CarRepoSQL(session).create(
            Car(
                brand="Nissan",
                model="Versa",
                year=2023,
                color="White",
                license_plate="abc-123",
                daily_rate=Decimal("45.00"),
            )
        )
        client = await ClientRepoSQL(session).create(
            Client(
                first_name="Jane",
                last_name="Roe",
                email="jane@example.com",
                phone="+15551234567",
                driver_license="DL-0001",
            )
        )
        employee = await EmployeeRepoSQL(session).create(
            Employee(
                first_name="Luis",
                last_name="Pérez",
                email="luis@example.com",
                phone="+525511112222",
                position="Counter agent",
                hire_date=date(2022, 3, 1),
            )
        )
        print(f"Seeded car={car.id} client={client.id} employee={employee.id}")

    await engine.dispose()

if __name__ == "__main__":
    asyncio.run(seed())
