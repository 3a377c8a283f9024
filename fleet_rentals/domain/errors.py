"""Excepciones de dominio para el motor de rentas."""

from typing import Any


class DomainError(Exception):
    """Clase base para todos los errores de dominio."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Payload estructurado para el cliente."""
        return {"detail": self.message, "code": self.code}


# === Errores de validación ===


class InvalidIntervalError(DomainError):
    """Rango de fechas mal formado, invertido o en el pasado."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message=message, code="INVALID_INTERVAL")
        self.field = field

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        if self.field:
            payload["field"] = self.field
        return payload


class ValidationError(DomainError):
    """Error de validación de datos de entrada."""

    def __init__(self, field: str, message: str):
        super().__init__(
            message=f"Validation failed for '{field}': {message}",
            code="VALIDATION_ERROR",
        )
        self.field = field

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "field": self.field}


class DuplicateValueError(DomainError):
    """Valor duplicado en un campo único."""

    def __init__(self, entity: str, field: str | None = None):
        target = f"{entity}.{field}" if field else entity
        super().__init__(
            message=f"Duplicate value for {target}",
            code="DUPLICATE_VALUE",
        )
        self.entity = entity
        self.field = field

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "field": self.field}


# === Errores de ciclo de vida ===


class InvalidTransitionError(DomainError):
    """El estado actual de la renta no permite el cambio solicitado."""

    def __init__(self, current_status: str, target_status: str):
        super().__init__(
            message=f"Cannot move rental from '{current_status}' to '{target_status}'",
            code="INVALID_TRANSITION",
        )
        self.current_status = current_status
        self.target_status = target_status

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "current_status": self.current_status,
            "target_status": self.target_status,
        }


# === Errores de disponibilidad ===


class ResourceUnavailableError(DomainError):
    """El vehículo está en mantenimiento y no acepta nuevas rentas."""

    def __init__(self, car_id: int):
        super().__init__(
            message=f"Car {car_id} is currently in maintenance",
            code="RESOURCE_UNAVAILABLE",
        )
        self.car_id = car_id

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "car_id": self.car_id}


class RentalConflictError(DomainError):
    """El periodo solicitado se superpone con rentas activas del mismo vehículo."""

    def __init__(
        self,
        car_id: int,
        conflicting_ids: list[int] | None = None,
        reason: str | None = None,
    ):
        super().__init__(
            message=reason or f"Car {car_id} is already booked for the selected dates",
            code="RENTAL_CONFLICT",
        )
        self.car_id = car_id
        self.conflicting_ids = list(conflicting_ids or [])

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "car_id": self.car_id,
            "conflicting_rental_ids": self.conflicting_ids,
        }


# === Errores de referencias ===


class NotFoundError(DomainError):
    """La entidad referenciada no existe."""

    def __init__(self, entity: str, entity_id: Any):
        super().__init__(
            message=f"{entity.capitalize()} not found: {entity_id}",
            code=f"{entity.upper()}_NOT_FOUND",
        )
        self.entity = entity
        self.entity_id = entity_id


class RecordInUseError(DomainError):
    """El registro tiene rentas activas que lo referencian y no puede borrarse."""

    def __init__(self, entity: str, entity_id: Any, rental_ids: list[int]):
        super().__init__(
            message=f"{entity.capitalize()} {entity_id} has active rentals",
            code="RECORD_IN_USE",
        )
        self.entity = entity
        self.entity_id = entity_id
        self.rental_ids = list(rental_ids)

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "active_rental_ids": self.rental_ids}


# === Errores de almacenamiento ===


class StorageError(DomainError):
    """Falla transitoria del almacenamiento; el cliente puede reintentar."""

    def __init__(self, message: str = "Storage backend unavailable, please retry"):
        super().__init__(message=message, code="STORAGE_ERROR")
