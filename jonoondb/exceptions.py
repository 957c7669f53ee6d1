"""Exception hierarchy used throughout the database engine."""

from __future__ import annotations

__all__ = [
    "JonoonDBException",
    "InvalidArgumentException",
    "MissingDatabaseFileException",
    "MissingDatabaseFolderException",
    "OutOfMemoryException",
    "DuplicateKeyException",
    "CollectionAlreadyExistException",
    "IndexAlreadyExistException",
    "CollectionNotFoundException",
    "InvalidSchemaException",
    "IndexOutOfBoundException",
    "SQLException",
    "FileIOException",
    "MissingDocumentException",
    "ApiMisuseException",
]


class JonoonDBException(Exception):
    """Base error carrying the message and where it was raised."""

    def __init__(
        self,
        message: str = "",
        source_file: str = "",
        function: str = "",
        line: int = 0,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.source_file = source_file
        self.function = function
        self.line = line

    def __str__(self) -> str:
        return self.message

    def describe(self) -> str:
        """Return a one-line description naming the type and origin."""
        return (
            f"ExceptionType: {type(self).__name__}, Message: {self.message}, "
            f"SourceFile: {self.source_file}, Function: {self.function}, "
            f"Line: {self.line}."
        )


class InvalidArgumentException(JonoonDBException):
    """An argument had an invalid value."""


class MissingDatabaseFileException(JonoonDBException):
    """The database file does not exist."""


class MissingDatabaseFolderException(JonoonDBException):
    """The database folder does not exist."""


class OutOfMemoryException(JonoonDBException):
    """Memory could not be obtained."""


class DuplicateKeyException(JonoonDBException):
    """A key was inserted twice."""


class CollectionAlreadyExistException(JonoonDBException):
    """A collection with that name already exists."""


class IndexAlreadyExistException(JonoonDBException):
    """An index with that name already exists."""


class CollectionNotFoundException(JonoonDBException):
    """The named collection does not exist."""


class InvalidSchemaException(JonoonDBException):
    """A schema could not be parsed or is not valid."""


class IndexOutOfBoundException(JonoonDBException):
    """An index lies outside the valid range."""


class SQLException(JonoonDBException):
    """The SQL engine reported an error."""


class FileIOException(JonoonDBException):
    """A file operation failed."""


class MissingDocumentException(JonoonDBException):
    """A requested document does not exist."""


class ApiMisuseException(JonoonDBException):
    """The API was used in a way it does not support."""