# src/history_view/modules/versioning/infrastructure/observability.py
"""
Servicio de Observabilidad SRE: Logs, Latency & Saturation (RAM).

Principios:
1. Logs estructurados (JSON) para máquinas.
2. Logs legibles para humanos (Consola) y forenses (Archivo).
3. Correlation ID en cada evento de una misma operación.

Configuración (variables de entorno):
- LOG_FORMAT=PRETTY          → eventos JSON indentados (vista vertical)
- HISTORY_VIEW_LOG_FILE      → ruta del log persistente (default: history_view.log)
- HISTORY_VIEW_LOG_LEVEL     → nivel de consola (default: INFO)
"""

from __future__ import annotations

import functools
import json
import logging
import os
import sys
import time
import uuid
from pathlib import Path
from typing import Any, Callable, Optional, Union

import psutil

from history_view.modules.versioning.domain.window import (
    TypedVersionWindow,
    VersionWindow,
)

DEFAULT_LOG_FILE = "history_view.log"

logger = logging.getLogger("history_view")


def configure_logging(
    level: Optional[Union[int, str]] = None, log_file: Optional[str] = None
) -> None:
    """
    Configura el sistema de logging con doble destino (File + Console).
    """
    level = level or os.getenv("HISTORY_VIEW_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    log_file = log_file or os.getenv("HISTORY_VIEW_LOG_FILE", DEFAULT_LOG_FILE)

    # Formateador simple para consola
    console_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s", datefmt="%H:%M:%S"
    )

    # Formateador detallado para archivo (Forensics)
    file_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(level)

    file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    file_handler.setFormatter(file_formatter)
    file_handler.setLevel(logging.DEBUG)  # Siempre capturamos todo en disco

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Limpiar handlers previos para evitar duplicados
    if root_logger.hasHandlers():
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
            handler.close()

    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)

    logging.getLogger(__name__).debug(f"Observabilidad iniciada. Logs en: {log_file}")


class ObservabilityService:

    # 🌍 CONFIGURACIÓN GLOBAL
    PRETTY_PRINT = os.getenv("LOG_FORMAT") == "PRETTY"

    @staticmethod
    def get_correlation_id() -> str:
        return str(uuid.uuid4())[:8]

    @staticmethod
    def _get_ram_usage_mb() -> float:
        try:
            process = psutil.Process(os.getpid())
            return round(process.memory_info().rss / 1024 / 1024, 2)
        except (psutil.Error, OSError):
            return 0.0

    @staticmethod
    def _describe_target(args: tuple[Any, ...]) -> str:
        """Primer argumento reconocible: un Path o una ventana."""
        for arg in args:
            if isinstance(arg, Path):
                return arg.name
            if isinstance(arg, (VersionWindow, TypedVersionWindow)):
                return repr(arg)
            if isinstance(arg, (list, tuple)):
                return f"{len(arg)} windows"
        return "unknown"

    @staticmethod
    def log_event(
        event_name: str,
        correlation_id: str,
        payload: dict[str, Any],
        level: str = "INFO",
    ):
        """Emite un log estructurado en JSON (Horizontal o Vertical)."""

        log_entry = {
            "timestamp": time.time(),
            "level": level,
            "event": event_name,
            "correlation_id": correlation_id,
            "data": payload,
        }

        if ObservabilityService.PRETTY_PRINT:
            msg = json.dumps(log_entry, indent=4, default=str)
        else:
            msg = json.dumps(log_entry, default=str)

        if level == "ERROR":
            logger.error(msg)
        else:
            logger.info(msg)

    @staticmethod
    def measure_latency(operation_name: str):
        def decorator(func: Callable):
            @functools.wraps(func)
            def wrapper(*args, **kwargs):
                start_time = time.perf_counter()
                start_ram = ObservabilityService._get_ram_usage_mb()
                correlation_id = ObservabilityService.get_correlation_id()
                target = ObservabilityService._describe_target(args)

                ObservabilityService.log_event(
                    event_name=f"{operation_name}.started",
                    correlation_id=correlation_id,
                    payload={"target": target, "start_ram_mb": start_ram},
                )

                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    crash_ram = ObservabilityService._get_ram_usage_mb()
                    ObservabilityService.log_event(
                        event_name=f"{operation_name}.failed",
                        correlation_id=correlation_id,
                        payload={
                            "duration_sec": round(time.perf_counter() - start_time, 6),
                            "crash_ram_mb": crash_ram,
                            "target": target,
                            "error_type": type(e).__name__,
                            "error_msg": str(e),
                        },
                        level="ERROR",
                    )
                    raise

                end_ram = ObservabilityService._get_ram_usage_mb()
                ObservabilityService.log_event(
                    event_name=f"{operation_name}.completed",
                    correlation_id=correlation_id,
                    payload={
                        "duration_sec": round(time.perf_counter() - start_time, 6),
                        "end_ram_mb": end_ram,
                        "ram_delta_mb": round(end_ram - start_ram, 2),
                        "target": target,
                        "status": "success",
                    },
                )
                return result

            return wrapper

        return decorator


def measure_time(metric_name: str):
    """
    Decorador ligero para medir latencia de funciones críticas (sin RAM).
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            start_time = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                duration = time.perf_counter() - start_time
                logging.getLogger("metrics").info(
                    f"[METRIC] {metric_name} duration={duration:.4f}s"
                )

        return wrapper

    return decorator
