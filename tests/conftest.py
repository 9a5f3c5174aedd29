import logging

import pytest


@pytest.fixture
def isolated_logging(tmp_path, monkeypatch):
    """
    Aísla configure_logging: log persistente en tmp_path y limpieza de los
    handlers que instala sobre el root logger.
    """
    monkeypatch.setenv("HISTORY_VIEW_LOG_FILE", str(tmp_path / "history_view.log"))
    root = logging.getLogger()
    level = root.level

    yield root

    for handler in list(root.handlers):
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
