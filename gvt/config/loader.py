"""Configuration loader for gvt.

Handles loading and merging configuration from multiple sources.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..utils.env import get_global_gvt_dir
from ..utils.fs import safe_json_load
from ..utils.log import log_debug
from .types import GvtConfig


PROJECT_CONFIG_NAME = "config.json"


class ConfigLoader:
    """Loads and manages gvt configuration."""

    def __init__(self, project_root: Path | None = None, metadata_dir_name: str = ".gvt"):
        """Initialize config loader.

        Args:
            project_root: Project root directory (for project-local config)
            metadata_dir_name: Name of the repository metadata directory
        """
        self.project_root = project_root
        self.metadata_dir_name = metadata_dir_name
        self._config: GvtConfig | None = None

    @property
    def config(self) -> GvtConfig:
        """Get loaded configuration, loading if necessary."""
        if self._config is None:
            self._config = self.load()
        return self._config

    def load(self) -> GvtConfig:
        """Load configuration from all sources.

        Priority (highest to lowest):
        1. Project-local config (.gvt/config.json)
        2. Global config (~/.gvt/config.json)
        3. Default values

        Returns:
            Merged GvtConfig
        """
        merged: dict[str, Any] = {}

        global_config_path = get_global_gvt_dir() / PROJECT_CONFIG_NAME
        if global_config_path.exists():
            merged = self._deep_merge(merged, self._read(global_config_path))

        if self.project_root:
            project_config_path = self.project_root / self.metadata_dir_name / PROJECT_CONFIG_NAME
            if project_config_path.exists():
                merged = self._deep_merge(merged, self._read(project_config_path))

        return GvtConfig.from_dict(merged)

    @staticmethod
    def _read(path: Path) -> dict[str, Any]:
        data = safe_json_load(path, {})
        if not isinstance(data, dict):
            log_debug(f"Ignoring config that is not a JSON object: {path}")
            return {}
        log_debug(f"Loaded config: {path}")
        return data

    @staticmethod
    def _deep_merge(base: dict, override: dict) -> dict:
        """Deep merge two dictionaries.

        Args:
            base: Base dictionary
            override: Dictionary to merge (takes precedence)

        Returns:
            Merged dictionary
        """
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = ConfigLoader._deep_merge(result[key], value)
            else:
                result[key] = value
        return result
