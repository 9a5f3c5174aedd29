# src/history_view/modules/versioning/domain/ports/record.py
"""
Puerto para los registros versionados.

Arquitectura: Domain Port (Interface)
Responsabilidad: Definir el conjunto mínimo de accesos de solo lectura que una
VersionWindow necesita de cada versión de una entidad.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from history_view.core.value_objects import Timestamp
from history_view.modules.versioning.domain.value_objects import ItemType


@runtime_checkable
class VersionedRecord(Protocol):
    """
    Contrato abstracto de una versión inmutable de una entidad.

    Implementaciones esperadas:
    - Node, Way, Relation (Infraestructura)
    - Dobles de prueba en tests
    """

    def type_tag(self) -> ItemType:
        """Tipo de entidad (compartido por todas sus versiones)."""
        ...

    def identity(self) -> int:
        """Clave estable de la entidad lógica."""
        ...

    def version_number(self) -> int:
        """Número de versión, creciente dentro de la historia de la entidad."""
        ...

    def changeset_id(self) -> int:
        ...

    def timestamp(self) -> Timestamp:
        """Instante de creación de esta versión."""
        ...

    def is_visible(self) -> bool:
        """False si esta versión es una lápida (borrado)."""
        ...
