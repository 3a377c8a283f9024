from dataclasses import replace
from datetime import datetime, timezone
from typing import Generic, TypeVar

from fleet_rentals.domain.errors import DuplicateValueError, NotFoundError

T = TypeVar("T")


class InMemoryDirectoryRepo(Generic[T]):
    """Almacén en memoria con restricciones de unicidad por campo."""

    entity: str = ""
    unique_fields: tuple[str, ...] = ()

    def __init__(self) -> None:
        self.items: dict[int, T] = {}
        self._next_id = 1

    def _ensure_unique(self, candidate: T, own_id: int | None) -> None:
        for field in self.unique_fields:
            value = getattr(candidate, field)
            for item_id, item in self.items.items():
                if item_id != own_id and getattr(item, field) == value:
                    raise DuplicateValueError(self.entity, field)

    async def get_by_id(self, entity_id: int) -> T | None:
        item = self.items.get(entity_id)
        return replace(item) if item else None

    async def list_page(self, page: int, limit: int) -> tuple[list[T], int]:
        ordered = [self.items[key] for key in sorted(self.items)]
        offset = (page - 1) * limit
        return [replace(item) for item in ordered[offset:offset + limit]], len(ordered)

    async def create(self, entity: T) -> T:
        self._ensure_unique(entity, None)
        now = datetime.now(timezone.utc)
        stored = replace(entity, id=self._next_id, created_at=now, updated_at=now)
        self._next_id += 1
        self.items[stored.id] = stored
        return replace(stored)

    async def update(self, entity: T) -> T:
        entity_id = getattr(entity, "id")
        current = self.items.get(entity_id)
        if current is None:
            raise NotFoundError(self.entity, entity_id)
        self._ensure_unique(entity, entity_id)
        changes = {"updated_at": datetime.now(timezone.utc)}
        if hasattr(entity, "lock_version"):
            changes["lock_version"] = getattr(current, "lock_version") + 1
        stored = replace(entity, **changes)
        self.items[entity_id] = stored
        return replace(stored)

    async def delete(self, entity_id: int) -> bool:
        return self.items.pop(entity_id, None) is not None
