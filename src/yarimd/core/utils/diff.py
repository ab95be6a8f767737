"""Pure utility for generating unified diffs between two text strings"""

import difflib


def diff_summary(old: str, new: str) -> dict[str, int]:
    """Return added/deleted line counts for a compact per-file change note."""
    added = deleted = 0
    for tag, i1, i2, j1, j2 in difflib.SequenceMatcher(None, old.splitlines(), new.splitlines()).get_opcodes():
        if tag in ("replace", "delete"):
            deleted += i2 - i1
        if tag in ("replace", "insert"):
            added += j2 - j1
    return {"added": added, "deleted": deleted}


def unified_diff(old: str, new: str, path: str, context: int = 3) -> list[str]:
    """Return a/ b/ style unified diff lines for path. Empty list if identical."""
    return list(difflib.unified_diff(
        old.splitlines(keepends=True),
        new.splitlines(keepends=True),
        fromfile=f"a/{path}",
        tofile=f"b/{path}",
        n=context,
    ))
