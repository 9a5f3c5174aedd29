# tests/modules/versioning/presentation/test_cli.py
"""
Tests para: CLI `history-view inspect`
Tipo: Integración (Presentation -> Application -> Infrastructure)
"""
import argparse
import json

import pytest

from history_view.core.value_objects import Timestamp
from history_view.modules.versioning.presentation import cli


def _node(node_id, version, timestamp, visible=True):
    return {
        "type": "node",
        "id": node_id,
        "version": version,
        "changeset": version,
        "timestamp": timestamp,
        "visible": visible,
    }


@pytest.fixture
def window_file(tmp_path):
    path = tmp_path / "window.json"
    path.write_text(
        json.dumps(
            {
                "prev": _node(1, 1, "2020-01-01T00:00:00Z"),
                "curr": _node(1, 2, "2021-01-01T00:00:00Z"),
                "next": _node(1, 3, "2022-01-01T00:00:00Z", visible=False),
            }
        ),
        encoding="utf-8",
    )
    return path


def test_parse_moment_accepts_seconds_and_iso():
    assert cli.parse_moment("60") == Timestamp(60)
    assert cli.parse_moment("1970-01-01T00:01:00Z") == Timestamp(60)
    with pytest.raises(argparse.ArgumentTypeError):
        cli.parse_moment("ayer")


def test_inspect_json_output(window_file, capsys, isolated_logging):
    cli.main(
        [
            "inspect",
            str(window_file),
            "--json",
            "--at",
            "2021-06-01T00:00:00Z",
            "--between",
            "2019-01-01T00:00:00Z",
            "2021-01-01T00:00:00Z",
        ]
    )

    report = json.loads(capsys.readouterr().out)
    assert report["version"] == 2
    assert report["end_time"] == "2022-01-01T00:00:00Z"
    assert report["is_visible_at"] is True
    assert report["overlaps"] is False  # Empieza justo donde termina la consulta


def test_inspect_text_output(window_file, capsys, isolated_logging):
    cli.main(["inspect", str(window_file)])

    out = capsys.readouterr().out
    assert "Ventana node 1 v2" in out
    assert "is_first" in out


def test_missing_input_exits_with_code_1(tmp_path, isolated_logging):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["inspect", str(tmp_path / "ghost.json")])

    assert exc_info.value.code == cli.EXIT_MISSING_INPUT


def test_malformed_document_exits_with_code_2(tmp_path, isolated_logging):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"curr": {"type": "node"}}), encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        cli.main(["inspect", str(path)])

    assert exc_info.value.code == cli.EXIT_DOMAIN_ERROR


def test_inconsistent_window_exits_with_code_3(tmp_path, isolated_logging):
    path = tmp_path / "mixed.json"
    path.write_text(
        json.dumps({"prev": _node(9, 1, 0), "curr": _node(1, 2, 10)}), encoding="utf-8"
    )

    with pytest.raises(SystemExit) as exc_info:
        cli.main(["inspect", str(path)])

    assert exc_info.value.code == cli.EXIT_CONTRACT_VIOLATION


def test_directory_input_exits_with_code_2(tmp_path, isolated_logging):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["inspect", str(tmp_path)])

    assert exc_info.value.code == cli.EXIT_DOMAIN_ERROR


def test_non_utf8_input_exits_with_code_2(tmp_path, isolated_logging):
    path = tmp_path / "latin.json"
    path.write_bytes(b"\xff\xfe{}")

    with pytest.raises(SystemExit) as exc_info:
        cli.main(["inspect", str(path)])

    assert exc_info.value.code == cli.EXIT_DOMAIN_ERROR


def test_successor_with_earlier_timestamp_is_reported(tmp_path, capsys, isolated_logging):
    """
    Given: Un sucesor con reloj desfasado (t=40 tras t=50)
    When: Se inspecciona con --at y --between
    Then: El informe sale sin error y aplica las fórmulas
    """
    path = tmp_path / "skewed.json"
    path.write_text(
        json.dumps({"curr": _node(1, 1, 50), "next": _node(1, 2, 40)}), encoding="utf-8"
    )

    cli.main(["inspect", str(path), "--json", "--at", "45", "--between", "0", "100"])

    report = json.loads(capsys.readouterr().out)
    assert report["is_visible_at"] is False
    assert report["overlaps"] is True
