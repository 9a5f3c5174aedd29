# src/history_view/modules/versioning/domain/exceptions.py
"""
Excepciones del dominio de Versionado.

Arquitectura: Domain Layer
Responsabilidad: Definir errores semánticos independientes de la infraestructura.
"""


class HistoryViewError(Exception):
    """Clase base para errores recuperables del módulo de versionado."""

    pass


class RecordFormatError(HistoryViewError):
    """El documento de entrada no describe registros válidos (campos, tipos, JSON)."""

    pass


class WindowContractViolation(AssertionError):
    """
    Violación de contrato de una VersionWindow (bug del colaborador).

    Casos: consultar una ventana vacía, construirla con registros de distinto
    tipo o identidad, o enlazarla de forma parcial.
    No hereda de HistoryViewError: el código de producción no debe capturarla.
    """

    pass
