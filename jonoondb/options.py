"""Database and write options."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "DEFAULT_MAX_DATA_FILE_SIZE",
    "DEFAULT_MEMORY_CLEANUP_THRESHOLD",
    "Options",
    "WriteOptions",
]

DEFAULT_MAX_DATA_FILE_SIZE = 1024 * 1024 * 1024
DEFAULT_MEMORY_CLEANUP_THRESHOLD = 1024 * 1024 * 1024 * 4


@dataclass
class Options:
    """Settings used when opening a database."""

    create_db_if_missing: bool = True
    max_data_file_size: int = DEFAULT_MAX_DATA_FILE_SIZE
    memory_cleanup_threshold: int = DEFAULT_MEMORY_CLEANUP_THRESHOLD


@dataclass
class WriteOptions:
    """Settings applied to document writes."""

    compress: bool = False
    verify_documents: bool = True