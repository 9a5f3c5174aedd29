# src/history_view/modules/versioning/__init__.py
"""
Módulo de Versionado: ventanas de validez temporal sobre historias de entidades.
"""

from __future__ import annotations

# Application
from .application.use_cases import WindowQueries
from .domain.exceptions import (
    HistoryViewError,
    RecordFormatError,
    WindowContractViolation,
)
from .domain.ports.record import VersionedRecord

# Domain
from .domain.value_objects import ItemType, ValidityInterval
from .domain.window import TypedVersionWindow, VersionWindow

# Infrastructure
from .infrastructure.adapters import JsonWindowLoader
from .infrastructure.records import (
    Member,
    Node,
    NodeWindow,
    OsmObject,
    Relation,
    RelationWindow,
    Way,
    WayWindow,
    record_from_dict,
)

__all__ = [
    "ItemType",
    "ValidityInterval",
    "VersionedRecord",
    "VersionWindow",
    "TypedVersionWindow",
    "HistoryViewError",
    "RecordFormatError",
    "WindowContractViolation",
    "WindowQueries",
    "JsonWindowLoader",
    "OsmObject",
    "Node",
    "Way",
    "Relation",
    "Member",
    "NodeWindow",
    "WayWindow",
    "RelationWindow",
    "record_from_dict",
]
