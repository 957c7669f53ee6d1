"""Building blocks of a document database engine: vector indexers, bitmaps, varints and storage helpers."""

__version__ = "0.1.0"