from dataclasses import dataclass

import pytest

from history_view.core.value_objects import Timestamp
from history_view.modules.versioning.domain.value_objects import ItemType


@dataclass(frozen=True)
class FakeRecord:
    """
    Doble de prueba: implementa SOLO el puerto VersionedRecord.
    Igualdad por valor (dataclass), para comprobar que la ventana usa `is`.
    """

    kind: ItemType
    key: int
    version: int
    at: int
    visible: bool = True
    changeset: int = 0

    def type_tag(self) -> ItemType:
        return self.kind

    def identity(self) -> int:
        return self.key

    def version_number(self) -> int:
        return self.version

    def changeset_id(self) -> int:
        return self.changeset

    def timestamp(self) -> Timestamp:
        return Timestamp(self.at)

    def is_visible(self) -> bool:
        return self.visible


@pytest.fixture
def make_record():
    """Factory de registros fake de la entidad 42 (NODE por defecto)."""

    def _make(version, at, visible=True, key=42, kind=ItemType.NODE):
        return FakeRecord(kind, key, version, at, visible, changeset=version * 100)

    return _make


@pytest.fixture
def history(make_record):
    """Entidad E: v1 en t=10, v2 en t=20, v3 lápida (borrado) en t=30."""
    return make_record(1, 10), make_record(2, 20), make_record(3, 30, visible=False)
