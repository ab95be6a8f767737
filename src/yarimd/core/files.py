"""File discovery, content-root relative paths, and atomic writes"""

import os
import tempfile
from pathlib import Path, PurePath


MD_EXTENSIONS = {'.md', '.mdx'}


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.mdx files under path, or [path] if a single file."""
    if path.is_dir():
        return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix.lower() in MD_EXTENSIONS)
    # A single file is taken as given, extension or not; a missing one fails on read.
    return [path]


def content_path(path: Path, content_root: Path) -> PurePath:
    """Path of a file relative to the content root; falls back to path as given when outside it."""
    try:
        return Path(path).resolve().relative_to(Path(content_root).resolve())
    except ValueError:
        return PurePath(path)


def write_atomic(path: Path, text: str) -> None:
    """Write text next to path and swap it in, so readers never see a partial file."""
    fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        if path.exists():
            os.chmod(tmp, path.stat().st_mode & 0o7777)
        os.replace(tmp, path)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise
