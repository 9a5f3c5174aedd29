#!/usr/bin/env python3
"""
Pipeline de CI Local para History View.

Pasos: lint (no bloqueante), tipos del dominio, tests por capa y un smoke
test de la CLI contra una ventana de ejemplo generada al vuelo.

Uso: python scripts/ci_pipeline.py [--fast]
     --fast  Solo lint + tests unitarios.
"""

import json
import subprocess
import sys
import tempfile
import time
from datetime import datetime
from pathlib import Path
from typing import NamedTuple


class Colors:
    HEADER = "\033[95m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


class Step(NamedTuple):
    title: str
    command: str
    description: str
    blocking: bool = True
    fast: bool = False


VERSIONING = "src/history_view/modules/versioning"
TESTS = "tests/modules/versioning"

STEPS = [
    Step(
        "1. ANÁLISIS ESTÁTICO (RUFF)",
        "ruff check src/ tests/ scripts/",
        "Estilo y errores comunes",
        blocking=False,
        fast=True,
    ),
    Step(
        "2. TIPOS DEL NÚCLEO (MYPY)",
        f"mypy src/history_view/core {VERSIONING}/domain --ignore-missing-imports",
        "Timestamp, ValidityInterval y VersionWindow",
    ),
    Step(
        "3. TESTS UNITARIOS (CORE, DOMAIN & APP)",
        f"pytest tests/core {TESTS}/domain {TESTS}/application -q",
        "Semántica de ventanas y consultas",
        fast=True,
    ),
    Step(
        "4. TESTS ADAPTADORES & CLI",
        f"pytest {TESTS}/infrastructure {TESTS}/presentation tests/e2e -q",
        "Carga JSON, registros OSM, observabilidad y flujo completo",
    ),
]

SAMPLE_WINDOW = {
    "prev": {"type": "node", "id": 1, "version": 1, "timestamp": "2020-01-01T00:00:00Z"},
    "curr": {"type": "node", "id": 1, "version": 2, "timestamp": "2021-01-01T00:00:00Z"},
    "next": None,
}


def run_command(command: str, description: str) -> bool:
    print(f"⏳ {description}...")
    start = time.time()
    result = subprocess.run(command, shell=True, capture_output=True, text=True)
    duration = time.time() - start

    if result.returncode == 0:
        print(f"{Colors.OKGREEN}✅ PASÓ ({duration:.2f}s){Colors.ENDC}")
        return True

    print(f"{Colors.FAIL}❌ FALLÓ ({duration:.2f}s){Colors.ENDC}")
    print(f"{Colors.WARNING}--- STDERR ---\n{result.stderr}{Colors.ENDC}")
    print(f"{Colors.WARNING}--- STDOUT ---\n{result.stdout}{Colors.ENDC}")
    return False


def smoke_test_cli() -> bool:
    """La CLI debe cargar una ventana real y reportarla como última versión."""
    with tempfile.TemporaryDirectory() as tmp:
        sample = Path(tmp) / "window.json"
        sample.write_text(json.dumps(SAMPLE_WINDOW), encoding="utf-8")
        result = subprocess.run(
            [
                sys.executable,
                "-m",
                "history_view.modules.versioning.presentation.cli",
                "inspect",
                str(sample),
                "--json",
            ],
            capture_output=True,
            text=True,
        )

    if result.returncode != 0:
        print(f"{Colors.FAIL}❌ La CLI terminó con código {result.returncode}{Colors.ENDC}")
        print(result.stderr)
        return False

    report = json.loads(result.stdout)
    if not (report["is_last"] and report["end_time"] is None):
        print(f"{Colors.FAIL}❌ Informe inesperado: {report}{Colors.ENDC}")
        return False

    print(f"{Colors.OKGREEN}✅ CLI operativa: {report['type']} {report['id']} "
          f"v{report['version']}{Colors.ENDC}")
    return True


def main():
    fast = "--fast" in sys.argv[1:]
    start_total = time.time()
    print(f"{Colors.BOLD}🚀 PIPELINE CI - HISTORY VIEW{Colors.ENDC}")
    print(f"📅 Fecha: {datetime.now()}  |  Modo: {'rápido' if fast else 'completo'}")

    for step in STEPS:
        if fast and not step.fast:
            continue
        print(f"\n{Colors.HEADER}=== {step.title} ==={Colors.ENDC}")
        if run_command(step.command, step.description):
            continue
        if not step.blocking:
            print(f"{Colors.WARNING}⚠️  No bloqueante, se continúa{Colors.ENDC}")
            continue
        sys.exit(1)

    if not fast:
        print(f"\n{Colors.HEADER}=== 5. SMOKE TEST CLI ==={Colors.ENDC}")
        if not smoke_test_cli():
            sys.exit(1)

    total_duration = time.time() - start_total
    print(f"\n{Colors.OKGREEN}{'=' * 50}{Colors.ENDC}")
    print(f"{Colors.OKGREEN}🎉  BUILD SUCCESSFUL{Colors.ENDC}")
    print(f"{Colors.OKGREEN}{'=' * 50}{Colors.ENDC}")
    print(f"⏱️ Tiempo Total: {total_duration:.2f}s")


if __name__ == "__main__":
    main()
