import logging

import pytest


@pytest.fixture(autouse=True)
def reset_msvcfilt_logger():
    """setup_logging() detaches the package logger from root; undo that between tests."""
    yield
    logger = logging.getLogger("msvcfilt")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Point ConfigManager at a throwaway directory."""
    path = tmp_path / ".msvcfilt"
    monkeypatch.setenv("MSVCFILT_CONFIG_DIR", str(path))
    return path
