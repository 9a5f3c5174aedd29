# src/history_view/modules/versioning/infrastructure/adapters.py
"""
Adaptadores de Infraestructura para Versionado.

Arquitectura: Modular Monolith
Capa: Infrastructure (Adapters)
Responsabilidad: Construir una VersionWindow ya posicionada a partir de un
documento JSON. Es el colaborador externo que localiza las versiones.
"""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from history_view.modules.versioning.domain.exceptions import RecordFormatError
from history_view.modules.versioning.domain.window import VersionWindow
from history_view.modules.versioning.infrastructure.observability import measure_time
from history_view.modules.versioning.infrastructure.records import record_from_dict

logger = logging.getLogger(__name__)


class JsonWindowLoader:
    """
    Carga una ventana desde un documento con la forma:

        {"prev": {...} | null, "curr": {...}, "next": {...} | null}

    Un prev/next ausente o null se enlaza al MISMO objeto que curr, que es la
    forma de expresar "sin predecesor" / "sin sucesor".
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    @measure_time(metric_name="window_load_latency")
    def load(self, path: Path) -> VersionWindow:
        logger.debug(f"Cargando ventana desde: {path}")

        try:
            with open(path, encoding=self.encoding) as f:
                document = json.load(f)
        except FileNotFoundError as e:
            logger.error(f"Archivo no encontrado: {path}")
            raise RecordFormatError(f"El archivo no existe: {path}") from e
        except json.JSONDecodeError as e:
            logger.error(f"JSON corrupto en {path}: {e}")
            raise RecordFormatError(f"JSON inválido en {path}: {e}") from e
        except UnicodeDecodeError as e:
            logger.error(f"Codificación inválida en {path}: {e}")
            raise RecordFormatError(
                f"El archivo {path} no es texto {self.encoding} válido: {e}"
            ) from e
        except OSError as e:
            # Directorios, permisos denegados, errores de disco
            logger.error(f"No se pudo leer {path}: {e}")
            raise RecordFormatError(f"No se pudo leer {path}: {e}") from e

        return self.from_document(document)

    def from_document(self, document: Any) -> VersionWindow:
        """
        Mapping: DTO (dict) -> VersionWindow.

        Raises:
            RecordFormatError: Si el documento no tiene la forma esperada.
            WindowContractViolation: Si los registros no son de la misma entidad.
        """
        if not isinstance(document, Mapping) or document.get("curr") is None:
            raise RecordFormatError("El documento debe contener un objeto 'curr'")

        curr = record_from_dict(document["curr"])
        prev = curr if document.get("prev") is None else record_from_dict(document["prev"])
        nxt = curr if document.get("next") is None else record_from_dict(document["next"])

        window = VersionWindow.of(prev, curr, nxt)
        logger.info(f"Ventana cargada: {window!r}")
        return window
