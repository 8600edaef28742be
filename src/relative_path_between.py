"""Utility for computing a lexical relative path between two paths."""


def _segments(path: str) -> list[str]:
    return [s for s in path.split("/") if s not in ("", ".")]


def relative_path_between(path: str, base: str) -> str:
    """Return `path` expressed relative to the directory `base`.

    Both arguments are expected to be normalized already. A rooted `path`
    against an unrooted `base` cannot be related and is returned as is.
    """
    if path.startswith("/") and not base.startswith("/"):
        return path

    path_parts = _segments(path)
    base_parts = _segments(base)

    common = 0
    for a, b in zip(path_parts, base_parts):
        if a != b:
            break
        common += 1

    parts = [".."] * (len(base_parts) - common) + path_parts[common:]
    return "/".join(parts)
