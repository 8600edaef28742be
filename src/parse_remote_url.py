"""Parsing of remote specifiers into their cache-relevant parts."""

from dataclasses import dataclass
from urllib.parse import urlsplit

from src.malformed_specifier_error import MalformedSpecifierError
from src.normalize_segments import normalize_segments

DEFAULT_PORTS = {"http": 80, "https": 443}


@dataclass(frozen=True)
class RemoteUrl:
    """The parts of an http(s) URL that identify a cached resource."""

    scheme: str
    host: str  # IPv6 literals keep their brackets
    port: int | None  # None when absent or the scheme default
    path: str  # dot segments collapsed, no trailing slash
    query: str

    @property
    def origin(self) -> str:
        """Return `scheme://host[:port]`."""
        netloc = self.host if self.port is None else f"{self.host}:{self.port}"
        return f"{self.scheme}://{netloc}"


def parse_remote_url(url: str) -> RemoteUrl:
    """Split an http(s) URL, raising MalformedSpecifierError if it is unusable."""
    try:
        parts = urlsplit(url)
        port = parts.port
    except ValueError as e:
        raise MalformedSpecifierError(url, str(e)) from e

    scheme = parts.scheme.lower()
    if scheme not in DEFAULT_PORTS:
        raise MalformedSpecifierError(url, f"unsupported scheme {parts.scheme!r}")
    host = parts.hostname
    if not host:
        raise MalformedSpecifierError(url, "missing host")
    if ":" in host:
        host = f"[{host}]"
    if port == DEFAULT_PORTS[scheme]:
        port = None

    return RemoteUrl(
        scheme=scheme,
        host=host,
        port=port,
        path="/" + normalize_segments(parts.path, clamp_at_root=True),
        query=parts.query,
    )
