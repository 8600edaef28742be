"""Turning an import-mapped specifier into a fully-qualified one."""

import posixpath

from src.is_remote_url import is_remote_url
from src.normalize_segments import normalize_segments
from src.parse_remote_url import parse_remote_url

ROOT_ALIASES = ("@/", "~/")


def qualify_specifier(importer: str, importer_is_remote: bool, target: str) -> str:
    """Resolve `target` against the file that imports it.

    [https://esm.sh/preact/hooks]
    - `../preact` -> `https://esm.sh/preact`
    - `/preact`   -> `https://esm.sh/preact`

    [/pages/index.tsx]
    - `../components/logo.tsx` -> `/components/logo.tsx`
    - `@/components/logo.tsx`  -> `/components/logo.tsx`
    - `/components/logo.tsx`   -> `/components/logo.tsx`
    """
    if is_remote_url(target):
        return target
    if importer_is_remote:
        return _qualify_against_url(importer, target)
    if target.startswith("/"):
        return target
    if target.startswith(ROOT_ALIASES):
        return target[1:]
    joined = f"{posixpath.dirname(importer)}/{target}"
    return "/" + normalize_segments(joined)


def _qualify_against_url(importer: str, target: str) -> str:
    base = parse_remote_url(importer)
    path, sep, query = target.partition("?")
    if not path.startswith("/"):
        # URL paths cannot climb above the host root
        joined = f"{posixpath.dirname(base.path)}/{path}"
        path = "/" + normalize_segments(joined, clamp_at_root=True)
    if sep:
        path += f"?{query}"
    return base.origin + path
