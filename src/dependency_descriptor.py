"""Data model for a dependency recorded while resolving a file."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DependencyDescriptor:
    """A fully-qualified dependency of the file being processed."""

    specifier: str  # post-policy URL or root-absolute path, never the raw text
    is_dynamic: bool = False

    def to_dict(self) -> dict[str, object]:
        """Serialize using the camelCase keys the build pipeline expects."""
        return {"specifier": self.specifier, "isDynamic": self.is_dynamic}
