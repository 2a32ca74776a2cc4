from __future__ import annotations

"""Configuration loading and access helpers.

This module centralises the declarative settings of the compiler (logging
setup, file naming, styles document values).  It loads YAML files packaged
with *xmind_outline* and optionally merges them with user overrides.

User overrides are read from ``$XMIND_OUTLINE_CONFIG_DIR`` when set, otherwise
from ``~/.xmind_outline/*.yml``.
"""

import copy
import importlib.resources as pkg_resources
import logging
import os
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)

__all__ = ["ConfigManager"]


def _get_user_config_dir() -> Path:
    """Return the directory searched for user override files."""
    override = os.environ.get("XMIND_OUTLINE_CONFIG_DIR")
    if override:
        return Path(override)
    return Path.home() / ".xmind_outline"


def _deep_merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Merge *overrides* into *base* recursively (nested mappings only)."""
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


class _Singleton(type):
    _instance: "ConfigManager" | None = None

    def __call__(cls, *args, **kwargs):  # type: ignore[no-self-use]
        if cls._instance is None:
            cls._instance = super().__call__(*args, **kwargs)
        return cls._instance


class ConfigManager(metaclass=_Singleton):
    """Lazy-loads and exposes configuration sections as dictionaries."""

    _DEFAULT_FILENAMES = {
        "logging": "logging.yml",
        "xmind_format": "xmind_format.yml",
    }

    def __init__(self) -> None:
        self._data: Dict[str, Dict[str, Any]] = {}
        self._ensure_loaded()

    # ------------------------------------------------------------------
    # Public helpers
    # ------------------------------------------------------------------
    def get_logging_config(self) -> Dict[str, Any]:
        return copy.deepcopy(self._data.get("logging", {}))

    def get_xmind_format(self) -> Dict[str, Any]:
        return self._data.get("xmind_format", {})

    def get_style_properties(self) -> Dict[str, Dict[str, str]]:
        """Return the ``topic``/``text`` property mappings of the default style."""
        return self.get_xmind_format().get("style", {})

    # ------------------------------------------------------------------
    # Internal loading logic
    # ------------------------------------------------------------------
    def _ensure_loaded(self) -> None:
        if self._data:
            return  # already loaded

        startup_summary = []
        defaults = self._builtin_defaults()
        user_config_dir = _get_user_config_dir()

        for key, filename in self._DEFAULT_FILENAMES.items():
            merged_cfg: Dict[str, Any] = copy.deepcopy(defaults.get(key, {}))
            status = "builtin"

            # 1. load packaged default
            try:
                text = pkg_resources.files(__package__).joinpath(filename).read_text(encoding="utf-8")
                packaged_data = yaml.safe_load(text) or {}
                _deep_merge(merged_cfg, packaged_data)
                status = "loaded"
            except (FileNotFoundError, OSError):
                logger.error("Missing packaged config for %s (%s)", key, filename)
            except yaml.YAMLError as exc:
                logger.error("Invalid packaged config for %s (%s): %s", key, filename, exc)
                status = "invalid"

            # 2. load user overrides
            user_path = user_config_dir / filename
            if user_path.exists():
                try:
                    user_data = yaml.safe_load(user_path.read_text(encoding="utf-8")) or {}
                    _deep_merge(merged_cfg, user_data)
                    if status == "loaded":
                        status = "loaded+overrides"
                except (OSError, yaml.YAMLError) as exc:
                    logger.error("Could not parse user config %s: %s", user_path, exc)

            self._data[key] = merged_cfg
            startup_summary.append(f"{key}: {status}")

        logger.debug("Config startup: %s", " | ".join(startup_summary))

    @staticmethod
    def _builtin_defaults() -> Dict[str, Dict[str, Any]]:
        """Return the values used when a packaged file is missing or broken."""
        return {
            "logging": {},
            "xmind_format": {
                "file_extension": ".xmind",
                "default_basename": "bedrock-output",
                "untitled_title": "Untitled",
                "sheet_title": "Sheet 1",
                "style": {
                    "topic": {
                        "background-color": "#FFFFFF",
                        "border-line-color": "#000000",
                        "border-line-width": "1pt",
                        "line-color": "#000000",
                        "shape-class": "org.xmind.topicShape.roundedRect",
                    },
                    "text": {
                        "color": "#000000",
                        "font-family": "Arial",
                        "font-size": "12pt",
                    },
                },
            },
        }
