# src/history_view/modules/versioning/infrastructure/records.py
"""
Registros concretos de historia (Node, Way, Relation).

Arquitectura: Infrastructure Layer
Responsabilidad: Implementar el puerto VersionedRecord con tipos concretos y
construirlos a partir de diccionarios (DTO -> Entidad).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional

from history_view.core.value_objects import Timestamp
from history_view.modules.versioning.domain.exceptions import RecordFormatError
from history_view.modules.versioning.domain.value_objects import ItemType
from history_view.modules.versioning.domain.window import TypedVersionWindow

# === Guía de Organización ===
# ✅ INMUTABLES: frozen=True, igual que los registros que describe el puerto.
# ✅ IGUALDAD POR VALOR: dos versiones idénticas son ==, pero NO son `is`.


@dataclass(frozen=True)
class OsmObject:
    """
    Versión de una entidad de historia. Clase base: usar Node, Way o Relation.

    Invariantes:
    1. version >= 0 y changeset >= 0
    2. created_at es un Timestamp (se aceptan int, ISO-8601 o datetime)
    """

    item_type: ClassVar[ItemType]

    object_id: int
    version: int
    changeset: int
    created_at: Timestamp
    visible: bool = True
    user: str = ""
    tags: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        """Validación de invariantes al instanciar."""
        if not hasattr(type(self), "item_type"):
            raise TypeError("OsmObject es abstracta: usar Node, Way o Relation")
        if self.version < 0:
            raise ValueError(f"La versión no puede ser negativa: {self.version}")
        if self.changeset < 0:
            raise ValueError(f"El changeset no puede ser negativo: {self.changeset}")
        # Frozen: normalizamos vía object.__setattr__
        object.__setattr__(self, "created_at", Timestamp.coerce(self.created_at))

    # --- Puerto VersionedRecord ---

    def type_tag(self) -> ItemType:
        return self.item_type

    def identity(self) -> int:
        return self.object_id

    def version_number(self) -> int:
        return self.version

    def changeset_id(self) -> int:
        return self.changeset

    def timestamp(self) -> Timestamp:
        return self.created_at

    def is_visible(self) -> bool:
        return self.visible


@dataclass(frozen=True)
class Node(OsmObject):
    """Punto. Las coordenadas son opcionales (las lápidas no las tienen)."""

    item_type: ClassVar[ItemType] = ItemType.NODE

    lon: Optional[float] = None
    lat: Optional[float] = None

    def __post_init__(self):
        super().__post_init__()
        if (self.lon is None) != (self.lat is None):
            raise ValueError("lon y lat deben informarse juntas")
        if self.lon is not None and not -180.0 <= self.lon <= 180.0:
            raise ValueError(f"Longitud fuera de rango: {self.lon}")
        if self.lat is not None and not -90.0 <= self.lat <= 90.0:
            raise ValueError(f"Latitud fuera de rango: {self.lat}")


@dataclass(frozen=True)
class Way(OsmObject):
    """Secuencia ordenada de referencias a nodos."""

    item_type: ClassVar[ItemType] = ItemType.WAY

    node_refs: tuple[int, ...] = ()


@dataclass(frozen=True)
class Member:
    """Miembro de una relación."""

    member_type: ItemType
    ref: int
    role: str = ""


@dataclass(frozen=True)
class Relation(OsmObject):
    """Agrupación de miembros con rol."""

    item_type: ClassVar[ItemType] = ItemType.RELATION

    members: tuple[Member, ...] = ()


NodeWindow = TypedVersionWindow[Node]
WayWindow = TypedVersionWindow[Way]
RelationWindow = TypedVersionWindow[Relation]


def record_from_dict(data: Mapping[str, Any]) -> OsmObject:
    """
    Mapping: DTO (dict) -> Entidad.

    Formato esperado:
        {"type": "node", "id": 1, "version": 2, "changeset": 3,
         "timestamp": "2021-01-01T00:00:00Z", "visible": true,
         "user": "...", "tags": {...}, "lon": .., "lat": ..}

    Raises:
        RecordFormatError: Si falta un campo obligatorio o algún valor es inválido.
    """
    if not isinstance(data, Mapping):
        raise RecordFormatError(f"Se esperaba un objeto, se recibió: {type(data).__name__}")

    try:
        item_type = ItemType.from_name(str(data["type"]))
        visible = data.get("visible", True)
        if not isinstance(visible, bool):
            raise ValueError(f"'visible' debe ser booleano, no {visible!r}")
        common: dict[str, Any] = {
            "object_id": int(data["id"]),
            "version": int(data["version"]),
            "changeset": int(data.get("changeset", 0)),
            "created_at": Timestamp.coerce(data["timestamp"]),
            "visible": visible,
            "user": str(data.get("user", "")),
            "tags": dict(data.get("tags") or {}),
        }

        if item_type is ItemType.NODE:
            lon, lat = data.get("lon"), data.get("lat")
            return Node(
                **common,
                lon=None if lon is None else float(lon),
                lat=None if lat is None else float(lat),
            )
        if item_type is ItemType.WAY:
            return Way(**common, node_refs=tuple(int(r) for r in data.get("nodes", ())))

        members = tuple(
            Member(
                member_type=ItemType.from_name(str(m["type"])),
                ref=int(m["ref"]),
                role=str(m.get("role", "")),
            )
            for m in data.get("members", ())
        )
        return Relation(**common, members=members)

    except KeyError as e:
        raise RecordFormatError(f"Falta el campo obligatorio {e} en el registro") from e
    except (TypeError, ValueError) as e:
        raise RecordFormatError(f"Registro inválido: {e}") from e
