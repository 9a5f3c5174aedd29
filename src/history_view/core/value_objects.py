# src/history_view/core/value_objects.py
"""
Timestamp Value Object.

Arquitectura: Modular Monolith
Componente: Value Object (Core)
Responsabilidad: Representar un instante UTC validado, ordenable e inmutable,
incluyendo el centinela "fin de los tiempos".
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Union

# === 🧭 Protocolos Arquitectónicos ===
# ✅ CORE: No depende de nada externo.
# 🔒 Inmutabilidad: frozen=True.

# Mayor valor representable (uint32). Ningún timestamp real lo alcanza.
END_OF_TIME_SECONDS = 2**32 - 1

_ISO_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})Z$")

TimestampLike = Union["Timestamp", int, str, datetime]


@dataclass(frozen=True, order=True)
class Timestamp:
    """
    Instante expresado en segundos desde la época Unix (UTC).

    Invariantes:
    1. seconds es un entero (no bool, no float)
    2. 0 <= seconds <= END_OF_TIME_SECONDS
    """

    seconds: int

    def __post_init__(self):
        """Validación de invariantes al instanciar."""
        if isinstance(self.seconds, bool) or not isinstance(self.seconds, int):
            raise ValueError(f"Los segundos deben ser un entero: {self.seconds!r}")
        if self.seconds < 0:
            raise ValueError(f"El timestamp no puede ser negativo: {self.seconds}")
        if self.seconds > END_OF_TIME_SECONDS:
            raise ValueError(
                f"El timestamp ({self.seconds}) supera el fin de los tiempos"
            )

    @classmethod
    def end_of_time(cls) -> Timestamp:
        """Centinela mayor que cualquier timestamp real."""
        return cls(END_OF_TIME_SECONDS)

    @classmethod
    def from_datetime(cls, moment: datetime) -> Timestamp:
        """Convierte un datetime. Los datetime naive se interpretan como UTC."""
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        return cls(int(moment.timestamp()))

    @classmethod
    def from_iso(cls, text: str) -> Timestamp:
        """
        Parsea el formato 'YYYY-MM-DDTHH:MM:SSZ'.
        Lanza ValueError si el texto no respeta el formato o la fecha no existe.
        """
        match = _ISO_PATTERN.match(text.strip())
        if match is None:
            raise ValueError(f"Formato ISO-8601 inválido: {text!r}")
        year, month, day, hour, minute, second = (int(g) for g in match.groups())
        moment = datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)
        return cls.from_datetime(moment)

    @classmethod
    def coerce(cls, value: TimestampLike) -> Timestamp:
        """Acepta Timestamp, int (segundos), str ISO-8601 o datetime."""
        if isinstance(value, Timestamp):
            return value
        if isinstance(value, datetime):
            return cls.from_datetime(value)
        if isinstance(value, str):
            return cls.from_iso(value)
        return cls(value)

    @property
    def is_end_of_time(self) -> bool:
        return self.seconds == END_OF_TIME_SECONDS

    def to_datetime(self) -> datetime:
        return datetime.fromtimestamp(self.seconds, tz=timezone.utc)

    def to_iso(self) -> str:
        return self.to_datetime().strftime("%Y-%m-%dT%H:%M:%SZ")

    def __int__(self) -> int:
        return self.seconds

    def __str__(self) -> str:
        return self.to_iso()
