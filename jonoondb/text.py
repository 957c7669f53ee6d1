"""String splitting and path normalisation helpers."""

from __future__ import annotations

import os
from itertools import groupby

from .exceptions import InvalidArgumentException

__all__ = ["split", "normalize_path"]


def split(text: str, separators: str) -> list[str]:
    """Split on any of the separator characters, dropping empty tokens."""
    if not separators:
        return [text] if text else []
    seps = set(separators)
    return ["".join(run) for is_sep, run in groupby(text, key=seps.__contains__) if not is_sep]


def normalize_path(path: str) -> str:
    """Return the path with forward slashes and a trailing slash."""
    if not path:
        raise InvalidArgumentException("Argument path is empty.", __file__, "normalize_path", 0)
    normalized = path.replace("\\", "/") if os.sep == "\\" else path
    if not normalized.endswith("/"):
        normalized += "/"
    return normalized