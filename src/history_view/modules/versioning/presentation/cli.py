# src/history_view/modules/versioning/presentation/cli.py
"""
Interfaz de Línea de Comandos (CLI) para inspeccionar ventanas de versiones.

Arquitectura: Presentation Layer (Interface Adapter)
Responsabilidad:
    1. Parsear argumentos (argv).
    2. Instanciar el Composition Root.
    3. Formatear la salida (JSON/Tabla).
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from history_view.core.value_objects import Timestamp
from history_view.modules.versioning.application.use_cases import WindowQueries
from history_view.modules.versioning.domain.exceptions import (
    HistoryViewError,
    WindowContractViolation,
)
from history_view.modules.versioning.infrastructure.adapters import JsonWindowLoader
from history_view.modules.versioning.infrastructure.observability import (
    configure_logging,
)

EXIT_MISSING_INPUT = 1
EXIT_DOMAIN_ERROR = 2
EXIT_CONTRACT_VIOLATION = 3
EXIT_INTERRUPTED = 130


def parse_moment(text: str) -> Timestamp:
    """Segundos desde la época o ISO-8601 ('2021-01-01T00:00:00Z')."""
    try:
        if text.isdigit():
            return Timestamp(int(text))
        return Timestamp.from_iso(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def setup_parser() -> argparse.ArgumentParser:
    """Configura los argumentos aceptados por la herramienta."""
    parser = argparse.ArgumentParser(
        prog="history-view",
        description="History View - Inspector de ventanas de versiones",
        epilog="Ejemplo: history-view inspect window.json --at 2021-01-01T00:00:00Z",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    inspect_parser = subparsers.add_parser(
        "inspect", help="Muestra la validez temporal de una ventana (prev, curr, next)"
    )
    inspect_parser.add_argument("input_file", type=Path, help="Documento JSON de la ventana")
    inspect_parser.add_argument(
        "--at", type=parse_moment, help="Instante a evaluar con is_visible_at"
    )
    inspect_parser.add_argument(
        "--between",
        nargs=2,
        type=parse_moment,
        metavar=("FROM", "TO"),
        help="Intervalo semiabierto [FROM, TO) a evaluar con overlaps",
    )
    inspect_parser.add_argument(
        "--json",
        action="store_true",
        help="Salida en formato JSON (útil para tuberías/pipes)",
    )
    inspect_parser.add_argument(
        "--verbose", "-v", action="store_true", help="Muestra logs detallados"
    )

    return parser


def build_report(args: argparse.Namespace) -> dict[str, Any]:
    """Composition Root: Infraestructura -> Aplicación."""
    loader = JsonWindowLoader()
    queries = WindowQueries()

    window = loader.load(args.input_file)
    report = queries.describe(window)

    if args.at is not None:
        report["at"] = args.at.to_iso()
        report["is_visible_at"] = window.is_visible_at(args.at)
    if args.between is not None:
        from_, to = args.between
        report["between"] = [from_.to_iso(), to.to_iso()]
        report["overlaps"] = window.overlaps(from_, to)
    return report


def format_output_text(report: dict[str, Any], console: Console) -> None:
    """Presentación amigable para humanos."""
    table = Table(
        title=f"Ventana {report['type']} {report['id']} v{report['version']}",
        box=box.SIMPLE,
    )
    table.add_column("Campo", style="bold")
    table.add_column("Valor")

    for key, value in report.items():
        if key == "end_time" and value is None:
            value = "end-of-time"
        table.add_row(key, str(value))

    console.print(table)


def format_output_json(report: dict[str, Any]) -> None:
    """Presentación para máquinas (Machine Readable)."""
    print(json.dumps(report, indent=2))


def main(argv: Optional[list[str]] = None) -> None:
    parser = setup_parser()
    args = parser.parse_args(argv)
    console = Console(stderr=True)

    configure_logging(level=logging.DEBUG if args.verbose else logging.WARNING)

    # 1. Validación de Presentación
    if not args.input_file.exists():
        console.print(f"❌ Error: El archivo '{args.input_file}' no existe.")
        sys.exit(EXIT_MISSING_INPUT)

    try:
        report = build_report(args)

        if args.json:
            format_output_json(report)
        else:
            format_output_text(report, Console())

    except HistoryViewError as e:
        console.print(f"❌ Error de Historia: {e}")
        sys.exit(EXIT_DOMAIN_ERROR)
    except WindowContractViolation as e:
        # Bug del colaborador que generó el documento
        console.print(f"❌ Ventana inconsistente: {e}")
        sys.exit(EXIT_CONTRACT_VIOLATION)
    except KeyboardInterrupt:
        console.print("\n⚠️  Operación cancelada por el usuario.")
        sys.exit(EXIT_INTERRUPTED)


if __name__ == "__main__":
    main()
