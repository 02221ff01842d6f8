# chroma_client/errors.py
from __future__ import annotations

"""
Exception taxonomy raised by ChromaApiClient.

Every failed API call surfaces as exactly one ChromaError subclass built
from the ClassifiedError produced by
chroma_client.services.diagnostics.error_classifier.
"""

from typing import NoReturn

from chroma_client.services.diagnostics.error_classifier import (
    UNKNOWN_ERROR_TYPE,
    ClassifiedError,
    ErrorKind,
)


class ChromaError(Exception):
    """Base exception for all Chroma client errors.

    Also raised as-is for failures that could not be classified further;
    ``message`` then holds the raw server text.
    """

    kind: ErrorKind = ErrorKind.GENERIC

    def __init__(
        self,
        message: str,
        *,
        code: int | None = None,
        error_type: str = UNKNOWN_ERROR_TYPE,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.error_type = error_type

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"code={self.code!r}, error_type={self.error_type!r})"
        )


class ChromaConnectionError(ChromaError):
    """The server could not be reached."""

    kind = ErrorKind.CONNECTION


class ChromaNotFoundError(ChromaError):
    kind = ErrorKind.NOT_FOUND


class ChromaValidationError(ChromaError):
    kind = ErrorKind.VALIDATION


class ChromaValueError(ChromaError):
    kind = ErrorKind.VALUE


class ChromaTypeError(ChromaError):
    kind = ErrorKind.TYPE


class ChromaUniqueConstraintError(ChromaError):
    """A tenant, database or collection with that name already exists."""

    kind = ErrorKind.UNIQUE_CONSTRAINT


class ChromaAuthorizationError(ChromaError):
    kind = ErrorKind.AUTHORIZATION


class ChromaDimensionalityError(ChromaError):
    """Embedding dimension does not match the collection."""

    kind = ErrorKind.DIMENSIONALITY


class ChromaInvalidCollectionError(ChromaError):
    kind = ErrorKind.INVALID_COLLECTION


EXCEPTION_CLASSES: dict[ErrorKind, type[ChromaError]] = {
    ErrorKind.CONNECTION: ChromaConnectionError,
    ErrorKind.NOT_FOUND: ChromaNotFoundError,
    ErrorKind.VALIDATION: ChromaValidationError,
    ErrorKind.VALUE: ChromaValueError,
    ErrorKind.TYPE: ChromaTypeError,
    ErrorKind.UNIQUE_CONSTRAINT: ChromaUniqueConstraintError,
    ErrorKind.AUTHORIZATION: ChromaAuthorizationError,
    ErrorKind.DIMENSIONALITY: ChromaDimensionalityError,
    ErrorKind.INVALID_COLLECTION: ChromaInvalidCollectionError,
    ErrorKind.GENERIC: ChromaError,
}


def exception_for(classified: ClassifiedError) -> ChromaError:
    exc_class = EXCEPTION_CLASSES.get(classified.kind, ChromaError)
    return exc_class(
        classified.message,
        code=classified.code,
        error_type=classified.error_type,
    )


def raise_classified(classified: ClassifiedError) -> NoReturn:
    raise exception_for(classified)
