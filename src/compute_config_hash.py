"""Stable fingerprint of a resolver configuration."""

import hashlib
import json
from typing import Any


def compute_config_hash(config: dict[str, Any]) -> str:
    """Hash the config via sorted-key JSON so key order never matters."""
    config_json = json.dumps(config, sort_keys=True, ensure_ascii=True, default=sorted)
    return hashlib.sha256(config_json.encode("utf-8")).hexdigest()
