"""
Traducción de fallas del almacenamiento a errores de dominio.

El motor no reintenta: deadlocks, esperas de candado agotadas y demás
fallas transitorias se reportan como StorageError y el llamador decide.
"""

import asyncio
import logging
import re
from functools import wraps
from typing import Awaitable, Callable, TypeVar

from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError, SQLAlchemyError

from fleet_rentals.domain.errors import DuplicateValueError, StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# MySQL error codes
MYSQL_DEADLOCK_ERROR = "1213"
MYSQL_LOCK_WAIT_TIMEOUT = "1205"
SQLITE_LOCKED = "database is locked"

# Nombre del índice violado; el valor rechazado aparece antes y se ignora
MYSQL_DUPLICATE_KEY = re.compile(r"for key '(?:[^'.]+\.)?([^']+)'")
SQLITE_UNIQUE_COLUMNS = re.compile(r"UNIQUE constraint failed: (.+)")


def is_lock_contention_error(error: Exception) -> bool:
    """
    Check if an exception comes from lock contention (deadlock or lock wait timeout).

    Args:
        error: The exception to check

    Returns:
        True if another transaction held the lock for too long
    """
    if isinstance(error, (OperationalError, DBAPIError)):
        error_str = str(error)
        return (
            MYSQL_DEADLOCK_ERROR in error_str
            or MYSQL_LOCK_WAIT_TIMEOUT in error_str
            or SQLITE_LOCKED in error_str
        )
    return False


def to_storage_error(error: Exception) -> StorageError:
    logger.error(
        "Storage operation failed",
        extra={
            "error": str(error),
            "lock_contention": is_lock_contention_error(error),
        },
    )
    return StorageError()


def violated_unique_keys(error: IntegrityError) -> set[str]:
    """
    Identificadores de la restricción única violada según el driver.

    MySQL reporta el nombre de la restricción (`uq_<tabla>_<campo>`) y SQLite
    las columnas (`<tabla>.<campo>`). Nunca se busca dentro del valor.
    """
    message = str(error.orig)
    keys = MYSQL_DUPLICATE_KEY.findall(message)
    if keys:
        return {keys[-1]}
    columns = SQLITE_UNIQUE_COLUMNS.search(message)
    if columns:
        return {column.strip() for column in columns.group(1).split(",")}
    return set()


def duplicate_value_from(
    error: IntegrityError,
    entity: str,
    table_name: str,
    unique_fields: tuple[str, ...],
) -> DuplicateValueError | None:
    """Traduce la violación de unicidad al campo de dominio correspondiente."""
    keys = violated_unique_keys(error)
    for field in unique_fields:
        if f"uq_{table_name}_{field}" in keys or f"{table_name}.{field}" in keys:
            return DuplicateValueError(entity, field)
    return None


def translate_storage_errors(
    func: Callable[..., Awaitable[T]],
) -> Callable[..., Awaitable[T]]:
    """
    Decorator that turns SQLAlchemy failures and timeouts into StorageError.

    Domain errors raised by the wrapped function pass through untouched.
    """

    @wraps(func)
    async def wrapper(*args, **kwargs) -> T:
        try:
            return await func(*args, **kwargs)
        except (SQLAlchemyError, asyncio.TimeoutError) as exc:
            raise to_storage_error(exc) from exc

    return wrapper
