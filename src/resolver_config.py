"""Immutable configuration shared by every resolution session of a build."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ResolverConfig:
    """Static settings for specifier resolution.

    Built once per build and handed to each per-file session by reference.
    """

    package_base_uri: str | None = None
    pinned_dependency_version: str | None = None
    bundle_mode: bool = False
    bundled_module_ids: frozenset[str] = field(default_factory=frozenset)
    pinned_package: str = "react"
    pinned_package_variants: tuple[str, ...] = ("-dom",)

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> "ResolverConfig":
        """Build a config from a mapping such as the output of `load_config`."""
        return cls(
            package_base_uri=config.get("package_base_uri") or None,
            pinned_dependency_version=_optional_str(
                config.get("pinned_dependency_version")
            ),
            bundle_mode=bool(config.get("bundle_mode", False)),
            bundled_module_ids=frozenset(config.get("bundled_modules") or []),
            pinned_package=config.get("pinned_package") or "react",
            pinned_package_variants=_as_tuple(
                config.get("pinned_package_variants", ("-dom",))
            ),
        )


def _optional_str(value: object) -> str | None:
    # YAML reads `17.0` as a float
    if value is None or value == "":
        return None
    return str(value)


def _as_tuple(values: Iterable[str] | None) -> tuple[str, ...]:
    return tuple(values or ())
