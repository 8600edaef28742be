"""Default import-map collaborator for the resolution session.

Any object with a `resolve(importer, specifier) -> str` method can stand in
for this class. It only matches entries; reading and validating
import-map files is left to the caller.
"""

from src.is_remote_url import is_remote_url
from src.normalize_segments import normalize_segments


def _anchor(address: str) -> str:
    """Anchor `./` and `../` addresses at the project root."""
    if is_remote_url(address) or not address.startswith(("./", "../")):
        return address
    anchored = "/" + normalize_segments(address)
    if address.endswith("/") and not anchored.endswith("/"):
        anchored += "/"
    return anchored


def _match(imports: dict[str, str], specifier: str) -> str | None:
    if specifier in imports:
        return imports[specifier]
    best = ""
    for key in imports:
        if key.endswith("/") and specifier.startswith(key) and len(key) > len(best):
            best = key
    if best:
        return imports[best] + specifier[len(best) :]
    return None


class ImportMap:
    """Maps specifiers by exact key or longest `/`-terminated prefix."""

    def __init__(
        self,
        imports: dict[str, str] | None = None,
        scopes: dict[str, dict[str, str]] | None = None,
    ) -> None:
        """Build the map from `imports` and optional per-scope tables."""
        self.imports = {k: _anchor(v) for k, v in (imports or {}).items()}
        self.scopes = {
            scope: {k: _anchor(v) for k, v in table.items()}
            for scope, table in (scopes or {}).items()
        }

    def resolve(self, importer: str, specifier: str) -> str:
        """Return the mapped specifier, or `specifier` if nothing matches."""
        for scope in sorted(self.scopes, key=len, reverse=True):
            if importer.startswith(scope):
                mapped = _match(self.scopes[scope], specifier)
                if mapped is not None:
                    return mapped
        mapped = _match(self.imports, specifier)
        return specifier if mapped is None else mapped
