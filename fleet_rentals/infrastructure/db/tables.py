from sqlalchemy import (
    Column,
    Date,
    DateTime,
    Index,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    UniqueConstraint,
)

metadata = MetaData()

cars = Table(
    "cars",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("brand", String(100), nullable=False),
    Column("model", String(100), nullable=False),
    Column("year", Integer, nullable=False),
    Column("color", String(50), nullable=False),
    Column("license_plate", String(20), nullable=False),
    Column("daily_rate", Numeric(12, 2), nullable=False),
    Column("status", String(32), nullable=False),
    # Se incrementa en cada escritura de rentas del vehículo (bloqueo de fila)
    Column("lock_version", Integer, nullable=False, default=0),
    Column("created_at", DateTime(timezone=True)),
    Column("updated_at", DateTime(timezone=True)),
    UniqueConstraint("license_plate", name="uq_cars_license_plate"),
)

clients = Table(
    "clients",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("first_name", String(150), nullable=False),
    Column("last_name", String(150), nullable=False),
    Column("email", String(255), nullable=False),
    Column("phone", String(50), nullable=False),
    Column("driver_license", String(100), nullable=False),
    Column("address", String(500), nullable=False, default=""),
    Column("created_at", DateTime(timezone=True)),
    Column("updated_at", DateTime(timezone=True)),
    UniqueConstraint("email", name="uq_clients_email"),
    UniqueConstraint("driver_license", name="uq_clients_driver_license"),
)

employees = Table(
    "employees",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("first_name", String(150), nullable=False),
    Column("last_name", String(150), nullable=False),
    Column("email", String(255), nullable=False),
    Column("phone", String(50), nullable=False),
    Column("position", String(100), nullable=False),
    Column("hire_date", Date),
    Column("created_at", DateTime(timezone=True)),
    Column("updated_at", DateTime(timezone=True)),
    UniqueConstraint("email", name="uq_employees_email"),
)

rentals = Table(
    "rentals",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("car_id", Integer, nullable=False),
    Column("client_id", Integer, nullable=False),
    Column("employee_id", Integer, nullable=False),
    Column("start_date", Date, nullable=False),
    Column("end_date", Date, nullable=False),
    Column("total_cost", Numeric(12, 2), nullable=False),
    Column("status", String(32), nullable=False),
    Column("lock_version", Integer, nullable=False, default=0),
    Column("created_at", DateTime(timezone=True)),
    Column("updated_at", DateTime(timezone=True)),
    Index("ix_rentals_car_id_status", "car_id", "status"),
)
