"""Interface Clock - Puerto para abstracción de tiempo."""

from abc import ABC, abstractmethod
from datetime import date, datetime, timedelta, timezone


class Clock(ABC):
    """
    Puerto para abstracción del tiempo del sistema.

    El "hoy" que usa la validación de fechas pasadas sale siempre de aquí,
    nunca de un valor enviado por el cliente.
    """

    @abstractmethod
    def now(self) -> datetime:
        """
        Retorna la fecha/hora actual.

        Returns:
            datetime con la hora actual (timezone-aware UTC).
        """
        raise NotImplementedError

    @abstractmethod
    def today(self) -> date:
        """
        Retorna el día calendario actual del servidor.

        Returns:
            date en UTC.
        """
        raise NotImplementedError


class SystemClock(Clock):
    """Implementación real que usa el reloj del sistema."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def today(self) -> date:
        return self.now().date()


class FakeClock(Clock):
    """
    Implementación fake para testing.

    Permite fijar el tiempo para pruebas deterministas.
    """

    def __init__(self, fixed_time: datetime | None = None):
        """
        Inicializa el clock con un tiempo fijo opcional.

        Args:
            fixed_time: Tiempo fijo a retornar. Si es None, usa el tiempo real inicial.
        """
        fixed_time = fixed_time or datetime.now(timezone.utc)
        if fixed_time.tzinfo is None:
            fixed_time = fixed_time.replace(tzinfo=timezone.utc)
        self._fixed_time = fixed_time

    def now(self) -> datetime:
        return self._fixed_time

    def today(self) -> date:
        return self._fixed_time.date()

    def advance(self, days: int = 0, hours: int = 0) -> None:
        """
        Avanza el tiempo fijo.

        Args:
            days: Días a avanzar.
            hours: Horas a avanzar.
        """
        self._fixed_time = self._fixed_time + timedelta(days=days, hours=hours)
