"""JSON report of the dependencies recorded per processed file."""

import json
import time
from collections.abc import Iterable
from typing import Any

from src.dependency_descriptor import DependencyDescriptor
from src.is_remote_url import is_remote_url


class DependencyReport:
    """Collects dependency lists of resolution sessions and writes them out."""

    def __init__(self, config_hash: str) -> None:
        """Start an empty report stamped with the resolver config hash."""
        self.config_hash = config_hash
        self.files: dict[str, list[DependencyDescriptor]] = {}
        self.start_time = time.time()

    def add_file(
        self, specifier: str, dependencies: Iterable[DependencyDescriptor]
    ) -> None:
        """Record the dependencies of one processed file."""
        self.files.setdefault(specifier, []).extend(dependencies)

    def to_dict(self) -> dict[str, Any]:
        """Build the report document."""
        return {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "total_files": len(self.files),
            },
            "files": {
                specifier: [dep.to_dict() for dep in deps]
                for specifier, deps in self.files.items()
            },
            "stats": self._compute_stats(),
        }

    def generate_report(self, path: str) -> None:
        """Write the report as indented JSON to `path`."""
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)

    def _compute_stats(self) -> dict[str, int]:
        stats = {"static": 0, "dynamic": 0, "remote": 0, "local": 0}
        for deps in self.files.values():
            for dep in deps:
                stats["dynamic" if dep.is_dynamic else "static"] += 1
                stats["remote" if is_remote_url(dep.specifier) else "local"] += 1
        return stats
