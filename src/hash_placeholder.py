"""The fixed-length placeholder reserved for content hashes in output paths.

A later build stage swaps the placeholder for the real hash by exact-length
text replacement, so its length must never change.
"""

HASH_SHORT = 9
HASH_PLACEHOLDER = "x" * HASH_SHORT


def fill_hash_placeholder(path: str, content_hash: str) -> str:
    """Replace the placeholder in `path` with the leading chars of `content_hash`."""
    if len(content_hash) < HASH_SHORT:
        msg = f"Content hash must be at least {HASH_SHORT} characters: {content_hash!r}"
        raise ValueError(msg)
    return path.replace(HASH_PLACEHOLDER, content_hash[:HASH_SHORT])
