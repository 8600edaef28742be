"""Logic for loading and merging resolver configuration files."""

import logging
from pathlib import Path
from typing import Any

import yaml

from src.deep_merge import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "package_base_uri": None,
    "pinned_dependency_version": None,
    "pinned_package": "react",
    "pinned_package_variants": ["-dom"],
    "bundle_mode": False,
    "bundled_modules": [],
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = DEFAULT_CONFIG.copy()
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
            logger.info("Resolver config loaded from %s", p)
        else:
            logger.warning("Config file %s not found, using defaults", p)
    return config
