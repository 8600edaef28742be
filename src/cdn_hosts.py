"""Known CDN hosts and the matcher for package URLs served from them."""

import re
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class CdnHost:
    """A CDN host prefix (regex fragment, ends with the path separator)."""

    pattern: str
    first_class: bool = False  # pinned rewrites keep first-class hosts as is


CDN_HOSTS: tuple[CdnHost, ...] = (
    CdnHost(r"esm\.sh/", first_class=True),
    CdnHost(r"cdn\.esm\.sh/v\d+/", first_class=True),
    CdnHost(r"esm\.x-static\.io/v\d+/", first_class=True),
    CdnHost(r"jspm\.dev/"),
    CdnHost(r"cdn\.skypack\.dev/"),
    CdnHost(r"jspm\.dev/npm:"),
    CdnHost(r"esm\.run/"),
)

PRIMARY_CDN_HOST = "esm.sh/"


@dataclass(frozen=True)
class CdnMatch:
    """The pieces of a package URL on a known CDN."""

    host: str  # e.g. "cdn.esm.sh/v41/"
    first_class: bool
    variant: str  # "" or e.g. "-dom"
    version: str  # without the leading "@", "" when absent
    suffix: str  # trailing path and/or query, kept verbatim


@lru_cache(maxsize=None)
def _package_url_re(package: str, variants: tuple[str, ...]) -> re.Pattern[str]:
    hosts = "|".join(f"(?:{h.pattern})" for h in CDN_HOSTS)
    variant_alts = "|".join(re.escape(v) for v in variants)
    variant = f"(?P<variant>{variant_alts})?" if variants else "(?P<variant>)"
    return re.compile(
        rf"^https?://(?P<host>{hosts}){re.escape(package)}{variant}"
        r"(?:@(?P<version>[\^~]?[0-9a-z.\-]+))?"
        r"(?P<suffix>[/?].*)?$"
    )


def _is_first_class(host: str) -> bool:
    return any(re.fullmatch(h.pattern, host) for h in CDN_HOSTS if h.first_class)


def match_cdn_dependency(
    url: str, package: str, variants: tuple[str, ...] = ()
) -> CdnMatch | None:
    """Match `url` against the package on any known CDN host."""
    m = _package_url_re(package, tuple(variants)).match(url)
    if not m:
        return None
    host = m.group("host")
    return CdnMatch(
        host=host,
        first_class=_is_first_class(host),
        variant=m.group("variant") or "",
        version=m.group("version") or "",
        suffix=m.group("suffix") or "",
    )
