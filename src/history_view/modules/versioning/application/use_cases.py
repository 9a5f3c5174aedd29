# src/history_view/modules/versioning/application/use_cases.py
"""
Casos de Uso de consulta sobre ventanas de versiones.

Arquitectura: Application Layer
Responsabilidad: Responder preguntas de análisis ("¿qué versiones estaban vivas
en el intervalo X?") usando VersionWindow como oráculo de solo lectura.
No recorre historias: recibe ventanas ya construidas por un colaborador.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, TypeVar, Union

from history_view.core.value_objects import Timestamp, TimestampLike
from history_view.modules.versioning.domain.window import (
    TypedVersionWindow,
    VersionWindow,
)
from history_view.modules.versioning.infrastructure.observability import (
    ObservabilityService,
)

logger = logging.getLogger("history_view.app")

W = TypeVar("W", bound=Union[VersionWindow, TypedVersionWindow[Any]])


class WindowQueries:
    """
    Caso de Uso: filtrar y describir ventanas de versiones.

    Las ventanas vacías no son válidas aquí: consultarlas lanza
    WindowContractViolation, que se propaga al llamador.
    """

    @ObservabilityService.measure_latency(operation_name="live_during")
    def live_during(
        self, windows: Iterable[W], from_: TimestampLike, to: TimestampLike
    ) -> list[W]:
        """
        Devuelve las ventanas cuya validez se cruza con [from_, to).

        Args:
            windows: Ventanas ya posicionadas (tipadas o no).
            from_: Inicio inclusivo de la consulta.
            to: Fin exclusivo de la consulta.
        """
        from_ = Timestamp.coerce(from_)
        to = Timestamp.coerce(to)
        selected = [w for w in windows if w.overlaps(from_, to)]
        logger.info(f"Ventanas vivas en [{from_}, {to}): {len(selected)}")
        return selected

    @ObservabilityService.measure_latency(operation_name="visible_at")
    def visible_at(self, windows: Iterable[W], moment: TimestampLike) -> list[W]:
        """Devuelve las ventanas cuya versión actual es visible en `moment`."""
        moment = Timestamp.coerce(moment)
        selected = [w for w in windows if w.is_visible_at(moment)]
        logger.info(f"Ventanas visibles en {moment}: {len(selected)}")
        return selected

    @ObservabilityService.measure_latency(operation_name="describe")
    def describe(self, window: Union[VersionWindow, TypedVersionWindow[Any]]) -> dict[str, Any]:
        """Resumen plano (serializable a JSON) de una ventana no vacía."""
        end = window.end_time()
        logger.debug(f"Describiendo {window!r}")
        return {
            "type": window.type_tag().value,
            "id": window.identity(),
            "version": window.version_number(),
            "changeset": window.changeset_id(),
            "start_time": window.start_time().to_iso(),
            "end_time": None if end.is_end_of_time else end.to_iso(),
            "is_first": window.is_first(),
            "is_last": window.is_last(),
            "visible": window.curr().is_visible(),
        }
