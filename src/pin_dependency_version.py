"""Policy rewrite pinning a CDN-served dependency to one version."""

import logging

from src.cdn_hosts import PRIMARY_CDN_HOST, match_cdn_dependency

logger = logging.getLogger(__name__)


def pin_dependency_version(
    url: str,
    version: str,
    package: str = "react",
    variants: tuple[str, ...] = ("-dom",),
) -> str:
    """Rewrite a CDN URL of `package` (or a variant) to `version`.

    - `https://esm.sh/react` -> `https://esm.sh/react@17.0.1`
    - `https://cdn.skypack.dev/react-dom@16/server` -> `https://esm.sh/react-dom@17.0.1/server`
    - `https://esm.sh/react@17.0.1` is returned unchanged.
    """
    m = match_cdn_dependency(url, package, variants)
    if m is None:
        return url
    if m.first_class and m.version == version:
        return url

    host = m.host if m.first_class else PRIMARY_CDN_HOST
    pinned = f"https://{host}{package}{m.variant}@{version}{m.suffix}"
    logger.debug("Pinned %s -> %s", url, pinned)
    return pinned
