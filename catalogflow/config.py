"""
YAML configuration for catalogflow.

Example `config.yaml`::

    catalog:
      dirs: [src/product-catalog, public/data]
      pattern: "*.json"
    output:
      dir: csv-output
      combined_file: all-products-complete.csv
      per_document: false

Environment variables override the file: `CATALOGFLOW_CATALOG_DIRS`
(separated by `os.pathsep`) and `CATALOGFLOW_OUTPUT_DIR`.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Dict[str, Any]] = {
    "catalog": {
        "dirs": ["src/product-catalog", "public/data", "public/product-catalog"],
        "pattern": "*.json",
    },
    "output": {
        "dir": "csv-output",
        "combined_file": "all-products-complete.csv",
        "per_document": False,
    },
}


class ConfigLoader:
    """Load the YAML configuration and layer environment overrides on top."""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = Path(config_path) if config_path else None
        self.config = self._load_config()
        self._apply_environment()

    def _load_config(self) -> Dict[str, Dict[str, Any]]:
        config = {section: dict(values) for section, values in DEFAULT_CONFIG.items()}
        if self.config_path is None:
            return config
        if not self.config_path.exists():
            logger.warning("Configuration file not found: %s; using defaults", self.config_path)
            return config
        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Failed to parse YAML configuration {self.config_path}: {exc}") from exc
        if not isinstance(loaded, dict):
            raise ConfigError(f"{self.config_path} must contain a mapping at the top level")
        for section, values in loaded.items():
            if section not in config:
                logger.warning("Ignoring unknown configuration section: %s", section)
                continue
            if not isinstance(values, dict):
                raise ConfigError(f"Section {section!r} must be a mapping")
            config[section].update(values)
        logger.info("Loaded configuration from %s", self.config_path)
        return config

    def _apply_environment(self) -> None:
        dirs = os.getenv("CATALOGFLOW_CATALOG_DIRS")
        if dirs:
            self.config["catalog"]["dirs"] = [d for d in dirs.split(os.pathsep) if d]
        out_dir = os.getenv("CATALOGFLOW_OUTPUT_DIR")
        if out_dir:
            self.config["output"]["dir"] = out_dir

    def get(self, section: str, key: str = None, default: Any = None) -> Any:
        if key is None:
            return self.config.get(section, default)
        return self.config.get(section, {}).get(key, default)

    @property
    def catalog_dirs(self) -> List[str]:
        dirs = self.get("catalog", "dirs", [])
        if isinstance(dirs, str):
            return [dirs]
        return [str(d) for d in dirs]

    @property
    def combined_path(self) -> Path:
        return Path(self.get("output", "dir")) / self.get("output", "combined_file")
