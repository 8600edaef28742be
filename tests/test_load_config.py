"""Tests for configuration loading and merging."""

from pathlib import Path

import yaml

from src.compute_config_hash import compute_config_hash
from src.deep_merge import deep_merge
from src.load_config import DEFAULT_CONFIG, load_config
from src.resolver_config import ResolverConfig


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries and scalar replacement."""
    base = {"a": 1, "nested": {"x": 1, "y": 2}}
    update = {"a": 2, "nested": {"y": 3, "z": 4}}
    merged = deep_merge(base, update)
    assert merged == {"a": 2, "nested": {"x": 1, "y": 3, "z": 4}}


def test_deep_merge_arrays_replace() -> None:
    """Verify that arrays are replaced by default."""
    merged = deep_merge({"pinned_package_variants": ["-dom"]}, {"pinned_package_variants": []})
    assert merged == {"pinned_package_variants": []}


def test_deep_merge_bundled_modules_additive() -> None:
    """Verify that bundled module lists are merged additively."""
    base = {"bundled_modules": ["/b.ts", "/a.ts"]}
    update = {"bundled_modules": ["/a.ts", "/c.ts"]}
    merged = deep_merge(base, update)
    assert merged["bundled_modules"] == ["/a.ts", "/b.ts", "/c.ts"]


def test_compute_config_hash_stability() -> None:
    """Verify that config hash is stable regardless of key order."""
    config1 = {"bundle_mode": True, "pinned_dependency_version": "17.0.1"}
    config2 = {"pinned_dependency_version": "17.0.1", "bundle_mode": True}
    assert compute_config_hash(config1) == compute_config_hash(config2)
    assert compute_config_hash(config1) != compute_config_hash(DEFAULT_CONFIG)


def test_load_config_defaults() -> None:
    """Verify that defaults are used without a file."""
    config = load_config(None)
    assert config == DEFAULT_CONFIG
    assert load_config("/nonexistent/resolver.yml") == DEFAULT_CONFIG


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "resolver.yml"
    config_data = {
        "pinned_dependency_version": "17.0.1",
        "bundle_mode": True,
        "bundled_modules": ["/components/logo.tsx"],
    }
    config_file.write_text(yaml.dump(config_data))

    loaded = load_config(str(config_file))
    assert loaded["pinned_dependency_version"] == "17.0.1"
    assert loaded["bundle_mode"] is True
    assert loaded["bundled_modules"] == ["/components/logo.tsx"]
    assert loaded["pinned_package"] == "react"


def test_resolver_config_from_dict() -> None:
    """Verify conversion of a loaded mapping into an immutable config."""
    config = ResolverConfig.from_dict(
        {
            **DEFAULT_CONFIG,
            "pinned_dependency_version": 17.0,
            "bundled_modules": ["/a.ts", "/a.ts"],
            "package_base_uri": "http://localhost:2020",
        }
    )
    assert config.pinned_dependency_version == "17.0"
    assert config.bundled_module_ids == frozenset({"/a.ts"})
    assert config.package_base_uri == "http://localhost:2020"
    assert config.pinned_package_variants == ("-dom",)


def test_resolver_config_defaults() -> None:
    """Verify that the default mapping yields the default config."""
    assert ResolverConfig.from_dict(DEFAULT_CONFIG) == ResolverConfig()
