"""Mapping of fully-qualified specifiers to unique cache paths.

Examples:
    https://esm.sh/react                          -> /-/esm.sh/react.js
    https://esm.sh/react@17.0.1?target=es2015&dev -> /-/esm.sh/react@17.0.1_target=es2015&dev.js
    http://localhost:8080/mod                     -> /-/http_localhost_8080/mod.js
    /components/foo/../logo.tsx                   -> /components/logo.tsx
    ../components/logo.tsx                        -> ../components/logo.tsx
    ./button.tsx                                  -> ./button.tsx
"""

import posixpath
import re

from src.is_remote_url import is_remote_url
from src.normalize_segments import normalize_segments
from src.parse_remote_url import parse_remote_url

# Versioned package URLs (`react@17.0.1`) are served as generated modules
ENDS_WITH_VERSION_RE = re.compile(r"@\d+(\.\d+){0,2}(-[a-z0-9]+(\.[a-z0-9]+)?)?$")

DEFAULT_EXT = "js"


def canonicalize_specifier(specifier: str) -> str:
    """Return the cache path for a local path or remote URL."""
    if not is_remote_url(specifier):
        return _canonicalize_local(specifier)
    return _canonicalize_remote(specifier)


def _canonicalize_local(path: str) -> str:
    if path.startswith("./"):
        return "./" + normalize_segments(path[1:])
    if path.startswith("../"):
        return "../" + normalize_segments(path[2:])
    normalized = normalize_segments(path)
    if path.startswith("/"):
        return "/" + normalized
    return normalized


def _canonicalize_remote(url: str) -> str:
    parsed = parse_remote_url(url)
    path = parsed.path

    dirname, filename = posixpath.split(path)
    if filename:
        ext = _pick_extension(path, filename)
        stem = filename.removesuffix(f".{ext}")
        if parsed.query:
            stem += f"_{parsed.query}"
        path = posixpath.join(dirname, f"{stem}.{ext}")
    elif parsed.query:
        # Host root with a query
        path = f"/_{parsed.query}.{DEFAULT_EXT}"

    prefix = "/-/"
    if parsed.scheme == "http":
        prefix += "http_"
    prefix += parsed.host
    if parsed.port is not None:
        prefix += f"_{parsed.port}"
    return prefix + path


def _pick_extension(path: str, filename: str) -> str:
    if ENDS_WITH_VERSION_RE.search(path):
        return DEFAULT_EXT
    _, ext = posixpath.splitext(filename)
    return ext[1:] or DEFAULT_EXT
