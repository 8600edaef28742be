"""Extension and hash placeholder policy for emitted module paths."""

import posixpath

from src.hash_placeholder import HASH_PLACEHOLDER

SCRIPT_EXTS = frozenset({"js", "jsx", "ts", "tsx", "mjs"})


def apply_output_extension(path: str, *, add_hash_placeholder: bool) -> str:
    """Give the emitted path its `.js` filename.

    With the placeholder (both sides local):
    - `../components/logo.tsx` -> `../components/logo.xxxxxxxxx.js`
    - `../styles/app.css`      -> `../styles/app.css.xxxxxxxxx.js`

    Without it only script extensions are rewritten to `js`.
    """
    dirname, filename = posixpath.split(path)
    stem, dot_ext = posixpath.splitext(filename)
    ext = dot_ext[1:]

    if ext in SCRIPT_EXTS:
        filename = stem + "."
        if add_hash_placeholder:
            filename += HASH_PLACEHOLDER + "."
        filename += "js"
    elif add_hash_placeholder:
        filename = f"{filename}.{HASH_PLACEHOLDER}.js"

    return posixpath.join(dirname, filename) if dirname else filename
