"""Process memory statistics."""

from __future__ import annotations

from dataclasses import dataclass

import psutil

from .exceptions import JonoonDBException

__all__ = ["ProcessMemStat", "get_process_memory_stats"]


@dataclass(frozen=True)
class ProcessMemStat:
    """Memory used by the current process."""

    memory_used_in_bytes: int


def get_process_memory_stats() -> ProcessMemStat:
    """Return the resident memory size of the current process."""
    try:
        rss = psutil.Process().memory_info().rss
    except psutil.Error as exc:
        raise JonoonDBException(
            f"Unable to determine memory usage. {exc}",
            __file__,
            "get_process_memory_stats",
            0,
        ) from exc
    return ProcessMemStat(memory_used_in_bytes=rss)