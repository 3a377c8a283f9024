from dataclasses import fields, replace
from datetime import datetime, timezone
from typing import Any, Generic, TypeVar

from sqlalchemy import Table, delete, func, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from fleet_rentals.domain.errors import NotFoundError
from fleet_rentals.infrastructure.db.errors import duplicate_value_from, translate_storage_errors

T = TypeVar("T")

_MANAGED_COLUMNS = ("id", "lock_version", "created_at", "updated_at")


class SQLDirectoryRepo(Generic[T]):
    """
    CRUD de registros de directorio (vehículos, clientes, empleados).

    Las subclases declaran la tabla, la entidad y los campos únicos; las
    violaciones de unicidad se reportan como DuplicateValueError.
    """

    table: Table
    entity_type: type
    entity: str = ""
    unique_fields: tuple[str, ...] = ()

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    def _to_row(self, item: T) -> dict[str, Any]:
        return {
            f.name: getattr(item, f.name)
            for f in fields(item)
            if f.name not in _MANAGED_COLUMNS
        }

    def _to_entity(self, row: Any) -> T:
        return self.entity_type(**dict(row))

    async def _execute_write(self, stmt):
        try:
            return await self._session.execute(stmt)
        except IntegrityError as exc:
            duplicate = duplicate_value_from(
                exc, self.entity, self.table.name, self.unique_fields
            )
            if duplicate is None:
                raise
            raise duplicate from exc

    @property
    def _has_lock_version(self) -> bool:
        return "lock_version" in self.table.c

    @translate_storage_errors
    async def get_by_id(self, entity_id: int) -> T | None:
        stmt = select(self.table).where(self.table.c.id == entity_id).limit(1)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        return self._to_entity(row) if row else None

    @translate_storage_errors
    async def list_page(self, page: int, limit: int) -> tuple[list[T], int]:
        stmt = (
            select(self.table)
            .order_by(self.table.c.id)
            .limit(limit)
            .offset((page - 1) * limit)
        )
        result = await self._session.execute(stmt)
        total = await self._session.scalar(select(func.count()).select_from(self.table))
        return [self._to_entity(row) for row in result.mappings().all()], total or 0

    @translate_storage_errors
    async def create(self, item: T) -> T:
        now = datetime.now(timezone.utc)
        values = {**self._to_row(item), "created_at": now, "updated_at": now}
        if self._has_lock_version:
            values["lock_version"] = 0
        result = await self._execute_write(insert(self.table).values(values))
        return replace(
            item,
            id=result.inserted_primary_key[0],
            created_at=now,
            updated_at=now,
        )

    @translate_storage_errors
    async def update(self, item: T) -> T:
        entity_id = getattr(item, "id")
        values = {**self._to_row(item), "updated_at": datetime.now(timezone.utc)}
        if self._has_lock_version:
            values["lock_version"] = self.table.c.lock_version + 1
        stmt = update(self.table).where(self.table.c.id == entity_id).values(values)
        result = await self._execute_write(stmt)
        if result.rowcount == 0:
            raise NotFoundError(self.entity, entity_id)
        updated = await self.get_by_id(entity_id)
        if updated is None:
            raise NotFoundError(self.entity, entity_id)
        return updated

    @translate_storage_errors
    async def delete(self, entity_id: int) -> bool:
        result = await self._session.execute(
            delete(self.table).where(self.table.c.id == entity_id)
        )
        return result.rowcount > 0
