"""Utility for telling remote module specifiers from local ones."""

REMOTE_PREFIXES = ("https://", "http://")


def is_remote_url(specifier: str) -> bool:
    """Return True if the specifier is an http(s) URL."""
    return specifier.startswith(REMOTE_PREFIXES)
