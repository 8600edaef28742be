"""Policy rewrite pointing framework package URLs at a configured origin."""

import logging

logger = logging.getLogger(__name__)

DEFAULT_PACKAGE_BASE_URI = "https://deno.land/x/aleph"
PACKAGE_ORIGIN_PREFIX = DEFAULT_PACKAGE_BASE_URI + "/"


def substitute_package_origin(url: str, package_base_uri: str | None) -> str:
    """Swap the canonical package origin for `package_base_uri` if one is set."""
    if not package_base_uri or not url.startswith(PACKAGE_ORIGIN_PREFIX):
        return url
    rest = url[len(PACKAGE_ORIGIN_PREFIX) :]
    substituted = f"{package_base_uri.rstrip('/')}/{rest}"
    logger.debug("Package origin %s -> %s", url, substituted)
    return substituted
