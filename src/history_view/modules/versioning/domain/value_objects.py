# src/history_view/modules/versioning/domain/value_objects.py
"""
Value Objects del dominio de Versionado.

Arquitectura: Modular Monolith
Capa: Domain
Responsabilidad: Etiqueta de tipo de entidad e intervalo de validez semiabierto.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from history_view.core.value_objects import Timestamp, TimestampLike

# === 🧭 Protocolos Arquitectónicos ===
# ✅ PUREZA: Solo tipos nativos y lógica de validación pura.
# 🔒 Inmutabilidad: frozen=True.


class ItemType(Enum):
    """
    Discriminador de tipos de entidad.
    Las tres versiones de una ventana deben compartir el mismo ItemType.
    """

    NODE = "node"
    WAY = "way"
    RELATION = "relation"

    @property
    def char(self) -> str:
        """Abreviatura de una letra (n, w, r)."""
        return self.value[0]

    @classmethod
    def from_name(cls, name: str) -> ItemType:
        """Acepta el nombre completo o la abreviatura, sin distinguir mayúsculas."""
        key = name.strip().lower()
        for item_type in cls:
            if key in (item_type.value, item_type.char):
                return item_type
        raise ValueError(f"Tipo de entidad desconocido: {name!r}")


@dataclass(frozen=True)
class ValidityInterval:
    """
    Intervalo semiabierto [start, end) durante el cual una versión es la vigente.

    Notas:
    1. start == end representa una versión de duración cero (reemplazada
       en el mismo instante en que nació).
    2. end < start se acepta: historias con relojes desfasados producen
       sucesores con timestamp anterior. Las consultas siguen siendo totales
       (contains nunca es cierto) y duration_seconds sale negativa.
    """

    start: Timestamp
    end: Timestamp

    @property
    def is_inverted(self) -> bool:
        return self.end < self.start

    @property
    def is_degenerate(self) -> bool:
        return self.start == self.end

    @property
    def is_open_ended(self) -> bool:
        """True si no existe sucesor (end es el fin de los tiempos)."""
        return self.end.is_end_of_time

    @property
    def duration_seconds(self) -> Optional[int]:
        """Duración en segundos, o None si el intervalo no tiene fin."""
        if self.is_open_ended:
            return None
        return self.end.seconds - self.start.seconds

    def contains(self, moment: TimestampLike) -> bool:
        """start <= moment < end."""
        moment = Timestamp.coerce(moment)
        return self.start <= moment < self.end

    def overlaps(self, from_: TimestampLike, to: TimestampLike) -> bool:
        """
        Determina si el intervalo se cruza con la consulta semiabierta [from_, to).

        Un intervalo de medida cero solo cuenta si su único instante cae
        dentro de [from_, to): el límite inferior pasa a ser inclusivo.
        """
        from_ = Timestamp.coerce(from_)
        to = Timestamp.coerce(to)
        if self.is_degenerate:
            return self.start < to and self.end >= from_
        return self.start < to and self.end > from_
