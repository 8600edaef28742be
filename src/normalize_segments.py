"""Lexical normalization of slash-separated paths."""


def normalize_segments(path: str, *, clamp_at_root: bool = False) -> str:
    """Collapse `.` and `..` segments without touching the filesystem.

    The result never has a leading slash. Leading `..` segments that have
    nothing left to cancel are kept, e.g. `a/../../b` -> `../b`, unless
    `clamp_at_root` is set, in which case they are dropped (`a/../../b` -> `b`).
    """
    stack: list[str] = []
    for seg in path.split("/"):
        if seg in ("", "."):
            continue
        if seg == "..":
            if stack and stack[-1] != "..":
                stack.pop()
            elif not clamp_at_root:
                stack.append(seg)
            continue
        stack.append(seg)
    return "/".join(stack)
