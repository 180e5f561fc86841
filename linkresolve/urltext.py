"""Helpers for pulling apart link text and error messages."""

from __future__ import annotations

_CONNECT_ERROR_MARKER = "error trying to connect:"


def remove_get_params_and_separate_fragment(url: str) -> tuple[str, str | None]:
    """Strip query parameters from a link and split off its fragment.

    The link need not be a full URL; it may be a bare path without a host.
    Returns the path part and the fragment, or ``None`` if there is no ``#``.
    """
    path, sep, fragment = url.partition("#")
    path = path.partition("?")[0]
    return path, (fragment if sep else None)


def trim_error_output(text: str) -> str:
    """Reduce a verbose HTTP client error message to its meaningful part.

    Everything after ``"error trying to connect:"`` is kept, trimmed of
    surrounding whitespace; any other message is returned unchanged.
    """
    _before, sep, after = text.partition(_CONNECT_ERROR_MARKER)
    if sep:
        return after.strip()
    return text