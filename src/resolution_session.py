"""Per-file resolution of import/export specifiers.

A session belongs to exactly one file being transformed. It turns every
specifier found in that file into the path the transformed output should
import, plus the fully-qualified URL used for the dependency graph.
"""

from __future__ import annotations

import logging
import posixpath
from typing import TYPE_CHECKING

from src.apply_output_extension import apply_output_extension
from src.canonicalize_specifier import canonicalize_specifier
from src.dependency_descriptor import DependencyDescriptor
from src.is_remote_url import is_remote_url
from src.pin_dependency_version import pin_dependency_version
from src.qualify_specifier import qualify_specifier
from src.relative_path_between import relative_path_between
from src.resolver_config import ResolverConfig
from src.substitute_package_origin import (
    DEFAULT_PACKAGE_BASE_URI,
    substitute_package_origin,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from src.import_map import ImportMap

logger = logging.getLogger(__name__)

# Relation hint marking a self reference that must not be recorded
SELF_RELATION = "."


class ResolutionSession:
    """Resolves specifiers for one file and records its dependencies."""

    def __init__(
        self,
        specifier: str,
        import_map: ImportMap,
        config: ResolverConfig | None = None,
    ) -> None:
        """Start a session for the file identified by `specifier`.

        `import_map` may be any object with a `resolve(importer, specifier)`
        method.
        """
        self.specifier = specifier
        self.specifier_is_remote = is_remote_url(specifier)
        self.import_map = import_map
        self.config = config or ResolverConfig()
        self._dependencies: list[DependencyDescriptor] = []

    @property
    def dependencies(self) -> Sequence[DependencyDescriptor]:
        """Dependencies recorded so far, in call order."""
        return tuple(self._dependencies)

    @property
    def package_base_uri(self) -> str:
        """The configured package origin, or the built-in default."""
        return self.config.package_base_uri or DEFAULT_PACKAGE_BASE_URI

    def resolve(
        self, url: str, is_dynamic: bool = False, rel: str | None = None
    ) -> tuple[str, str]:
        """Resolve an import/export specifier of the current file.

        Returns `(output_path, fixed_url)`.

        [/pages/index.tsx]
        - `https://esm.sh/swr`     -> `../-/esm.sh/swr.js`
        - `https://esm.sh/react`   -> `../-/esm.sh/react@{PINNED}.js`
        - `../components/logo.tsx` -> `../components/logo.{HASH}.js`
        - `../styles/app.css`      -> `../styles/app.css.{HASH}.js`
        - `@/components/logo.tsx`  -> `../components/logo.{HASH}.js`

        Raises MalformedSpecifierError if a URL cannot be parsed; nothing is
        recorded in that case.
        """
        mapped = self.import_map.resolve(self.specifier, url)
        fixed_url = qualify_specifier(self.specifier, self.specifier_is_remote, mapped)
        fixed_url = self._apply_policies(fixed_url)

        target_is_remote = is_remote_url(fixed_url)
        resolved_path = self._relative_output_path(fixed_url, target_is_remote)
        resolved_path = apply_output_extension(
            resolved_path,
            add_hash_placeholder=not target_is_remote and not self.specifier_is_remote,
        )

        if rel != SELF_RELATION:
            self._dependencies.append(DependencyDescriptor(fixed_url, is_dynamic))

        if not resolved_path.startswith(("./", "../", "/")):
            resolved_path = f"./{resolved_path}"

        logger.debug(
            "%s: resolved %r -> %s (%s)", self.specifier, url, resolved_path, fixed_url
        )
        return resolved_path, fixed_url

    def is_bundled(self, specifier: str) -> bool:
        """Return True if `specifier` is inlined into the bundle."""
        return self.config.bundle_mode and specifier in self.config.bundled_module_ids

    def pending_dependencies(self) -> list[DependencyDescriptor]:
        """Dependencies the build still has to compile for this file.

        In bundle mode remote modules and bundled modules are skipped.
        """
        if not self.config.bundle_mode:
            return list(self._dependencies)
        return [
            dep
            for dep in self._dependencies
            if not is_remote_url(dep.specifier) and not self.is_bundled(dep.specifier)
        ]

    def _apply_policies(self, fixed_url: str) -> str:
        fixed_url = substitute_package_origin(fixed_url, self.config.package_base_uri)
        version = self.config.pinned_dependency_version
        if version:
            fixed_url = pin_dependency_version(
                fixed_url,
                version,
                self.config.pinned_package,
                self.config.pinned_package_variants,
            )
        return fixed_url

    def _relative_output_path(self, fixed_url: str, target_is_remote: bool) -> str:
        if not target_is_remote and not fixed_url.startswith("/"):
            return fixed_url

        if self.specifier_is_remote:
            base_dir = posixpath.dirname(canonicalize_specifier(self.specifier))
        else:
            base_dir = posixpath.dirname(self.specifier)
        return relative_path_between(canonicalize_specifier(fixed_url), base_dir)
