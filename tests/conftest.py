"""Test configuration and fixtures for xmind-outline.

This module provides shared fixtures for parsing, generation and packaging
tests.  Every test runs with an isolated user config directory and a fresh
configuration singleton.
"""

import io
import logging
import sys
import zipfile
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from xmind_outline.config import ConfigManager


SPEC_OUTLINE = "Root\n\tChild1 [L1, L2]\n\tChild2"


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point user overrides at an empty folder and reset the singleton."""
    config_dir = tmp_path / "user_config"
    config_dir.mkdir()
    monkeypatch.setenv("XMIND_OUTLINE_CONFIG_DIR", str(config_dir))
    monkeypatch.setenv("XMIND_OUTLINE_LOG_DIR", str(tmp_path / "logs"))
    ConfigManager._instance = None
    yield config_dir
    ConfigManager._instance = None


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo logging changes made by setup_logging() during a test."""
    saved = []
    for logger in (logging.getLogger(), logging.getLogger("xmind_outline")):
        saved.append((logger, list(logger.handlers), logger.level, logger.propagate))
    yield
    for logger, handlers, level, propagate in saved:
        for handler in list(logger.handlers):
            if handler not in handlers:
                logger.removeHandler(handler)
                handler.close()
        for handler in handlers:
            if handler not in logger.handlers:
                logger.addHandler(handler)
        logger.setLevel(level)
        logger.propagate = propagate


@pytest.fixture
def config_manager():
    return ConfigManager()


@pytest.fixture
def spec_outline():
    return SPEC_OUTLINE


@pytest.fixture
def open_archive():
    """Return a helper that opens archive bytes as a ``ZipFile``."""
    def _open(data: bytes) -> zipfile.ZipFile:
        return zipfile.ZipFile(io.BytesIO(data))
    return _open
