"""Value Object RentalPeriod - rango semiabierto [start, end) en días calendario."""

from dataclasses import dataclass
from datetime import date, datetime, timezone

from fleet_rentals.domain.errors import InvalidIntervalError


def to_calendar_day(value: date | datetime | str, field: str | None = None) -> date:
    """
    Normaliza un valor de fecha a día calendario (se descarta la hora).

    Los datetimes con zona horaria se convierten primero a UTC para que
    todas las instancias del servidor coincidan en el mismo día.

    Raises:
        InvalidIntervalError: si el valor no es una fecha reconocible.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return to_calendar_day(datetime.fromisoformat(value.strip()), field)
        except ValueError:
            pass
    raise InvalidIntervalError(f"Invalid date format: {value!r}", field=field)


@dataclass(frozen=True)
class RentalPeriod:
    """
    Value Object inmutable que representa el periodo de una renta.

    El fin es exclusivo: una renta 2024-06-01 -> 2024-06-05 ocupa las noches
    del 1 al 4, y otra renta puede empezar el 2024-06-05.

    Attributes:
        start: Primer día ocupado.
        end: Día de devolución (exclusivo).
    """

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise InvalidIntervalError(
                f"End date must be after start date: {self.start} >= {self.end}",
                field="end_date",
            )

    @classmethod
    def from_values(
        cls,
        start: date | datetime | str,
        end: date | datetime | str,
    ) -> "RentalPeriod":
        """Factory method que normaliza ambos extremos a día calendario."""
        return cls(
            start=to_calendar_day(start, "start_date"),
            end=to_calendar_day(end, "end_date"),
        )

    @property
    def days(self) -> int:
        """Número de días de renta."""
        return (self.end - self.start).days

    def overlaps_with(self, other: "RentalPeriod") -> bool:
        """Verifica si este periodo se superpone con otro."""
        return self.start < other.end and other.start < self.end

    def starts_before(self, today: date) -> bool:
        """True si el primer día es anterior a `today` (reloj del servidor)."""
        return self.start < today

    def __str__(self) -> str:
        return f"[{self.start.isoformat()}, {self.end.isoformat()})"
