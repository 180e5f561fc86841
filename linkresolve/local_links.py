"""Turning links found in local files into ``file://`` URLs."""

from __future__ import annotations

import os
from pathlib import Path
from urllib.parse import unquote

from linkresolve.paths import InvalidFileError, resolve
from linkresolve.urltext import remove_get_params_and_separate_fragment

_FRAGMENT_ESCAPES = frozenset(' "<>`')
_PATH_SEGMENT_ESCAPES = _FRAGMENT_ESCAPES | frozenset("#?{}/%")


class InvalidPathToUriError(ValueError):
    """Raised when a linked path cannot be turned into a URI."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Invalid path to URL conversion: {path}")


class InvalidUrlFromPathError(ValueError):
    """Raised when a resolved file path cannot be expressed as a URL."""

    def __init__(self, path: os.PathLike | str) -> None:
        self.path = Path(path)
        super().__init__(f"Cannot convert path '{self.path}' to a URI")


def _percent_encode(text: str, escapes: frozenset[str]) -> str:
    def encode(char: str) -> str:
        if char in escapes or ord(char) < 0x20 or ord(char) >= 0x7F:
            return "".join(f"%{byte:02X}" for byte in char.encode("utf-8"))
        return char

    return "".join(encode(char) for char in text)


def _file_url(path: Path) -> str:
    if not path.is_absolute():
        raise InvalidUrlFromPathError(path)
    segments = (_percent_encode(part, _PATH_SEGMENT_ESCAPES) for part in path.parts[1:])
    return "file:///" + "/".join(segments)


def is_anchor(text: str) -> bool:
    """Tell whether a link is a bare anchor such as ``#section``."""
    return text.startswith("#")


def prepend_root_dir_if_absolute_local_link(
    text: str, root_dir: os.PathLike | str | None
) -> str:
    """Prefix an absolute local link (one starting with ``/``) with ``root_dir``."""
    if text.startswith("/") and root_dir is not None:
        return f"{os.fspath(root_dir)}{text}"
    return text


def resolve_and_create_url(
    src_path: os.PathLike | str,
    dest_path: str,
    ignore_absolute_local_links: bool,
) -> str:
    """Build a ``file://`` URL for ``dest_path`` as linked to from ``src_path``.

    Query parameters are dropped, the fragment is kept, and the path is
    percent-decoded before resolution so it is not encoded twice.

    Raises UnicodeDecodeError if the decoded path is not valid UTF-8,
    InvalidPathToUriError if the path cannot be resolved, and
    InvalidUrlFromPathError if the resolved path is not a valid file URL.
    """
    path_part, fragment = remove_get_params_and_separate_fragment(dest_path)
    decoded = unquote(path_part, encoding="utf-8", errors="strict")

    try:
        resolved = resolve(src_path, decoded, ignore_absolute_local_links)
    except InvalidFileError as error:
        raise InvalidPathToUriError(decoded) from error
    if resolved is None:
        raise InvalidPathToUriError(decoded)

    url = _file_url(resolved)
    if fragment is not None:
        url += "#" + _percent_encode(fragment, _FRAGMENT_ESCAPES)
    return url


def create_uri_from_file_path(
    file_path: os.PathLike | str,
    link_text: str,
    ignore_absolute_local_links: bool,
) -> str:
    """Create a ``file://`` URL for a link found in the file ``file_path``.

    Anchors are attached to the name of the file they appear in.

    Raises InvalidFileError if an anchor's file has no name, and
    InvalidPathToUriError if the link cannot be resolved to a URL.
    """
    source = Path(file_path)
    if is_anchor(link_text):
        if not source.name or source.name == "..":
            raise InvalidFileError(source)
        target = f"{source.name}{link_text}"
    else:
        target = link_text

    try:
        return resolve_and_create_url(source, target, ignore_absolute_local_links)
    except ValueError as error:
        raise InvalidPathToUriError(target) from error