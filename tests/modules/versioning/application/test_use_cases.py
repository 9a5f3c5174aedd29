# tests/modules/versioning/application/test_use_cases.py
"""
Tests para: WindowQueries (Use Case)
Tipo: Unitario (Application)
"""
import json
from unittest.mock import patch

import pytest

from history_view.core.value_objects import Timestamp
from history_view.modules.versioning.application.use_cases import WindowQueries
from history_view.modules.versioning.domain.exceptions import WindowContractViolation
from history_view.modules.versioning.domain.window import (
    TypedVersionWindow,
    VersionWindow,
)

# === Fixtures ===


@pytest.fixture
def use_case():
    return WindowQueries()


@pytest.fixture
def windows(history):
    """Las tres ventanas de la historia de E: [10,20), [20,30), [30, ∞) lápida."""
    v1, v2, v3 = history
    return [
        VersionWindow.of(v1, v1, v2),
        VersionWindow.of(v1, v2, v3),
        VersionWindow.of(v2, v3, v3),
    ]


# === Casos de Prueba ===


def test_live_during_selects_overlapping_versions(use_case, windows):
    """
    Given: Las ventanas de todas las versiones de E
    When: Se pregunta qué versiones estaban vivas en [15, 25)
    Then: Devuelve v1 y v2, en el orden recibido
    """
    # Act
    result = use_case.live_during(windows, 15, 25)

    # Assert
    assert [w.version_number() for w in result] == [1, 2]


def test_live_during_includes_open_ended_tombstone(use_case, windows):
    result = use_case.live_during(windows, "1970-01-01T00:01:00Z", Timestamp(120))

    assert [w.version_number() for w in result] == [3]


def test_visible_at_skips_tombstones(use_case, windows):
    assert [w.version_number() for w in use_case.visible_at(windows, 20)] == [2]
    assert use_case.visible_at(windows, 35) == []


def test_use_case_accepts_typed_windows(use_case, windows):
    typed = [TypedVersionWindow.wrap(w) for w in windows]

    result = use_case.visible_at(typed, 10)

    assert result == [typed[0]]


def test_empty_window_propagates_contract_violation(use_case, windows):
    """
    Given: Una ventana vacía mezclada en la entrada
    When: Se ejecuta el caso de uso
    Then: La violación de contrato sube hasta el caller
    """
    with pytest.raises(WindowContractViolation):
        use_case.live_during(windows + [VersionWindow.empty()], 0, 100)


def test_describe_returns_plain_summary(use_case, windows):
    first = use_case.describe(windows[0])
    last = use_case.describe(windows[2])

    assert first == {
        "type": "node",
        "id": 42,
        "version": 1,
        "changeset": 100,
        "start_time": "1970-01-01T00:00:10Z",
        "end_time": "1970-01-01T00:00:20Z",
        "is_first": True,
        "is_last": False,
        "visible": True,
    }
    assert last["end_time"] is None
    assert last["visible"] is False


@patch("history_view.modules.versioning.infrastructure.observability.logger")
def test_describe_is_instrumented(mock_logger, use_case, windows):
    """
    Given: Una ventana válida
    When: Se describe
    Then: Se emiten los eventos describe.started / describe.completed
    """
    use_case.describe(windows[1])

    events = [json.loads(c[0][0])["event"] for c in mock_logger.info.call_args_list]
    assert events == ["describe.started", "describe.completed"]
    assert "node 42 v2" in json.loads(mock_logger.info.call_args_list[0][0][0])["data"]["target"]
