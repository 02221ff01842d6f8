# chroma_client/__init__.py
from __future__ import annotations

"""
Python client for the Chroma vector database v2 REST API.

Typical usage:

    from chroma_client import ChromaApiClient, schemas
    from chroma_client.errors import ChromaNotFoundError
"""

from chroma_client import schemas  # noqa: F401
from chroma_client.api import ChromaApiClient  # noqa: F401
from chroma_client.errors import (  # noqa: F401
    ChromaAuthorizationError,
    ChromaConnectionError,
    ChromaDimensionalityError,
    ChromaError,
    ChromaInvalidCollectionError,
    ChromaNotFoundError,
    ChromaTypeError,
    ChromaUniqueConstraintError,
    ChromaValidationError,
    ChromaValueError,
)

__version__ = "0.2.0"
