# src/history_view/modules/versioning/domain/window.py
"""
VersionWindow: vista de tres versiones consecutivas de una misma entidad.

Arquitectura: Modular Monolith
Capa: Domain
Responsabilidad: Enlazar (prev, curr, next) ya posicionados por un colaborador
y responder consultas de validez temporal sobre la versión actual.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, cast

from history_view.core.value_objects import Timestamp, TimestampLike
from history_view.modules.versioning.domain.exceptions import WindowContractViolation
from history_view.modules.versioning.domain.ports.record import VersionedRecord
from history_view.modules.versioning.domain.value_objects import (
    ItemType,
    ValidityInterval,
)

# === Guía de Organización ===
# ✅ VISTA: No copia ni modifica los registros, solo guarda referencias.
# ✅ CENTINELA: prev is curr => primera versión; curr is next => última versión.
#    La comparación es por identidad (is), nunca por valor (==).
# ❌ SIN I/O ni logging: la capa de dominio es pura.

K = TypeVar("K", bound=VersionedRecord)

_EMPTY_WINDOW = "Operación no permitida sobre una VersionWindow vacía"


@dataclass(frozen=True, eq=False, repr=False)
class VersionWindow:
    """
    Vista inmutable sobre la versión anterior, actual y siguiente de una entidad.

    Si la versión actual es la primera conocida, prev debe ser el MISMO objeto
    que curr. Si es la última, next debe ser el MISMO objeto que curr.

    Invariantes:
    1. Las tres referencias comparten tipo e identidad.
    2. Ventana completa (tres referencias) o vacía (ninguna).

    Cualquier violación lanza WindowContractViolation.
    """

    _prev: Optional[VersionedRecord] = None
    _curr: Optional[VersionedRecord] = None
    _next: Optional[VersionedRecord] = None

    def __post_init__(self):
        """Validación de invariantes al instanciar."""
        records = (self._prev, self._curr, self._next)
        if all(record is None for record in records):
            return
        if any(record is None for record in records):
            raise WindowContractViolation(
                "Una VersionWindow debe enlazar prev, curr y next, o ninguno"
            )

        prev, curr, nxt = self._bound()
        if not prev.type_tag() == curr.type_tag() == nxt.type_tag():
            raise WindowContractViolation(
                "Tipos distintos en la ventana: "
                f"{prev.type_tag()} / {curr.type_tag()} / {nxt.type_tag()}"
            )
        if not prev.identity() == curr.identity() == nxt.identity():
            raise WindowContractViolation(
                "Identidades distintas en la ventana: "
                f"{prev.identity()} / {curr.identity()} / {nxt.identity()}"
            )

    # --- Construcción ---------------------------------------------------------

    @classmethod
    def of(
        cls, prev: VersionedRecord, curr: VersionedRecord, next: VersionedRecord
    ) -> VersionWindow:
        """Factory method para una ventana enlazada."""
        return cls(prev, curr, next)

    @classmethod
    def empty(cls) -> VersionWindow:
        """Factory method para la ventana vacía (sin registros enlazados)."""
        return cls()

    def _bound(self) -> tuple[VersionedRecord, VersionedRecord, VersionedRecord]:
        if self._prev is None or self._curr is None or self._next is None:
            raise WindowContractViolation(_EMPTY_WINDOW)
        return self._prev, self._curr, self._next

    # --- Acceso a registros ---------------------------------------------------

    def is_empty(self) -> bool:
        return self._curr is None

    def prev(self) -> VersionedRecord:
        return self._bound()[0]

    def curr(self) -> VersionedRecord:
        return self._bound()[1]

    def next(self) -> VersionedRecord:
        return self._bound()[2]

    def predecessor(self) -> Optional[VersionedRecord]:
        """Versión anterior, o None si curr es la primera."""
        prev, curr, _ = self._bound()
        return None if prev is curr else prev

    def successor(self) -> Optional[VersionedRecord]:
        """Versión siguiente, o None si curr es la última."""
        _, curr, nxt = self._bound()
        return None if nxt is curr else nxt

    def is_first(self) -> bool:
        prev, curr, _ = self._bound()
        return prev is curr

    def is_last(self) -> bool:
        _, curr, nxt = self._bound()
        return curr is nxt

    # --- Delegación a la versión actual ---------------------------------------

    def type_tag(self) -> ItemType:
        return self.curr().type_tag()

    def identity(self) -> int:
        return self.curr().identity()

    def version_number(self) -> int:
        return self.curr().version_number()

    def changeset_id(self) -> int:
        return self.curr().changeset_id()

    # --- Validez temporal -----------------------------------------------------

    def start_time(self) -> Timestamp:
        """Instante en que la versión actual empezó a ser válida."""
        return self.curr().timestamp()

    def end_time(self) -> Timestamp:
        """
        Instante en que la versión actual dejó de ser válida, es decir, cuando
        la siguiente pasó a serlo. Para la última versión devuelve el
        centinela Timestamp.end_of_time().
        """
        if self.is_last():
            return Timestamp.end_of_time()
        return self.next().timestamp()

    def validity(self) -> ValidityInterval:
        return ValidityInterval(self.start_time(), self.end_time())

    def overlaps(self, from_: TimestampLike, to: TimestampLike) -> bool:
        """
        True si [start_time(), end_time()) se cruza con [from_, to).

        Cuando start_time() == end_time() la cota inferior es inclusiva, de
        modo que una versión de duración cero situada en from_ sí cuenta.
        """
        return self.validity().overlaps(from_, to)

    def is_visible_at(self, moment: TimestampLike) -> bool:
        """
        True si la versión actual es la vigente en `moment` y no es una lápida.
        """
        return self.validity().contains(moment) and self.curr().is_visible()

    # --- Representación -------------------------------------------------------

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __repr__(self) -> str:
        if self.is_empty():
            return "VersionWindow(empty)"
        end = self.end_time()
        end_label = "end-of-time" if end.is_end_of_time else end.to_iso()
        return (
            f"VersionWindow({self.type_tag().value} {self.identity()} "
            f"v{self.version_number()} [{self.start_time().to_iso()}, {end_label}))"
        )


@dataclass(frozen=True, eq=False)
class TypedVersionWindow(Generic[K]):
    """
    Envoltorio tipado sobre VersionWindow para un tipo concreto de registro K.

    prev(), curr() y next() devuelven K sin que el llamador tenga que hacer
    cast. El estrechamiento es seguro porque la ventana se construyó con
    registros K; no se vuelve a comprobar en cada llamada.
    """

    window: VersionWindow

    @classmethod
    def of(cls, prev: K, curr: K, next: K) -> TypedVersionWindow[K]:
        return cls(VersionWindow.of(prev, curr, next))

    @classmethod
    def empty(cls) -> TypedVersionWindow[K]:
        return cls(VersionWindow.empty())

    @classmethod
    def wrap(cls, window: VersionWindow) -> TypedVersionWindow[K]:
        """Envuelve una ventana ya construida con registros de tipo K."""
        return cls(window)

    def prev(self) -> K:
        return cast(K, self.window.prev())

    def curr(self) -> K:
        return cast(K, self.window.curr())

    def next(self) -> K:
        return cast(K, self.window.next())

    def predecessor(self) -> Optional[K]:
        return cast(Optional[K], self.window.predecessor())

    def successor(self) -> Optional[K]:
        return cast(Optional[K], self.window.successor())

    def is_empty(self) -> bool:
        return self.window.is_empty()

    def is_first(self) -> bool:
        return self.window.is_first()

    def is_last(self) -> bool:
        return self.window.is_last()

    def type_tag(self) -> ItemType:
        return self.window.type_tag()

    def identity(self) -> int:
        return self.window.identity()

    def version_number(self) -> int:
        return self.window.version_number()

    def changeset_id(self) -> int:
        return self.window.changeset_id()

    def start_time(self) -> Timestamp:
        return self.window.start_time()

    def end_time(self) -> Timestamp:
        return self.window.end_time()

    def validity(self) -> ValidityInterval:
        return self.window.validity()

    def overlaps(self, from_: TimestampLike, to: TimestampLike) -> bool:
        return self.window.overlaps(from_, to)

    def is_visible_at(self, moment: TimestampLike) -> bool:
        return self.window.is_visible_at(moment)

    def __bool__(self) -> bool:
        return bool(self.window)
