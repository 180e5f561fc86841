"""Resolution of local file-system paths found in links."""

from __future__ import annotations

import functools
import os
from pathlib import Path


class InvalidFileError(ValueError):
    """Raised when a path cannot be used to resolve a linked file."""

    def __init__(self, path: os.PathLike | str) -> None:
        self.path = Path(path)
        super().__init__(f"Cannot find file: {self.path}")


@functools.lru_cache(maxsize=1)
def _current_dir() -> Path:
    return Path.cwd()


def _clean(path: Path) -> Path:
    cleaned = os.path.normpath(str(path))
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return Path(cleaned)


@functools.lru_cache(maxsize=None)
def _absolute(path: Path) -> Path:
    joined = path if path.is_absolute() else _current_dir() / path
    return _clean(joined)


def absolute_path(path: os.PathLike | str) -> Path:
    """Return an absolute, lexically cleaned version of ``path``.

    Relative paths are taken relative to the working directory at the time of
    the first call. ``.`` and ``..`` components are collapsed without touching
    the file system.
    """
    return _absolute(Path(path))


def resolve(
    src: os.PathLike | str,
    dst: os.PathLike | str,
    ignore_absolute_local_links: bool,
) -> Path | None:
    """Resolve ``dst`` as linked to from within the file ``src``.

    Relative destinations are looked up next to ``src``. Absolute destinations
    yield ``None`` when ``ignore_absolute_local_links`` is set.

    Raises InvalidFileError if ``src`` has no parent directory.
    """
    src_path = Path(src)
    dst_path = Path(dst)
    if dst_path.is_absolute():
        if ignore_absolute_local_links:
            return None
        resolved = dst_path
    else:
        if src_path.anchor and src_path == Path(src_path.anchor):
            raise InvalidFileError(dst_path)
        resolved = src_path.parent / dst_path
    return absolute_path(resolved)


def contains(parent: os.PathLike | str, child: os.PathLike | str) -> bool:
    """Tell whether ``child`` lies inside ``parent`` (a path contains itself).

    Both paths must exist; symlinks and ``..`` are resolved first.
    Raises FileNotFoundError or another OSError if either cannot be resolved.
    """
    parent_real = Path(parent).resolve(strict=True)
    child_real = Path(child).resolve(strict=True)
    return child_real.is_relative_to(parent_real)