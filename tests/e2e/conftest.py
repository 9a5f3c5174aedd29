import json

import pytest


@pytest.fixture
def window_file_factory(tmp_path):
    """
    Factory que escribe, para cada versión de una historia, el documento JSON
    de su ventana (prev, curr, next) ya posicionada, como lo haría el
    colaborador externo que recorre la historia.
    """

    def _create_window_files(versions: list[dict]):
        paths = []
        for i, curr in enumerate(versions):
            document = {
                "prev": versions[i - 1] if i > 0 else None,
                "curr": curr,
                "next": versions[i + 1] if i + 1 < len(versions) else None,
            }
            path = tmp_path / f"{curr['type']}_{curr['id']}_v{curr['version']}.json"
            path.write_text(json.dumps(document), encoding="utf-8")
            paths.append(path)
        return paths

    return _create_window_files
