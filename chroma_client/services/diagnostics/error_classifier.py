from __future__ import annotations

"""chroma_client/services/diagnostics/error_classifier.py

Centralized error classification for Chroma API calls.

This module looks at a failed request (either a transport-level
ConnectionFailure or an HttpFailure carrying the status code and raw body)
and assigns exactly one ClassifiedError describing what went wrong.

The classification is:
- deterministic (no randomness, no I/O, no logging)
- total (malformed or unexpected bodies degrade to GENERIC, never raise)
- table-driven (server error identifiers and message substrings are looked
  up in ERROR_TYPE_KINDS / MESSAGE_KIND_RULES)

Error body shapes understood, in priority order:
- {"error": "NotFoundError('Collection abc not found')"}
- {"detail": "Collection abc does not exist"}
- {"error": "InvalidArgumentError", "message": "id is required"}
- {"error": "Collection abc not found"}
"""

import enum
import json
import re
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union


class ErrorKind(str, enum.Enum):
    CONNECTION = "ConnectionError"
    NOT_FOUND = "NotFoundError"
    VALIDATION = "ValidationError"
    VALUE = "ValueError"
    TYPE = "TypeError"
    UNIQUE_CONSTRAINT = "UniqueConstraintError"
    AUTHORIZATION = "AuthorizationError"
    DIMENSIONALITY = "DimensionalityError"
    INVALID_COLLECTION = "InvalidCollectionError"
    GENERIC = "GenericError"


UNKNOWN_ERROR_TYPE = "UnknownError"


@dataclass(frozen=True)
class ConnectionFailure:
    """The transport never got a response (DNS, refused, reset, timeout)."""

    message: str
    code: int | None = None
    # Machine-level details from the transport handler ("error", "errno").
    handler_context: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class HttpFailure:
    """A response arrived but signals an application-level error."""

    status_code: int
    raw_body: str


Failure = Union[ConnectionFailure, HttpFailure]


@dataclass(frozen=True)
class ClassifiedError:
    kind: ErrorKind
    message: str
    code: int | None = None
    # Identifier reported by the server, kept verbatim for diagnostics.
    error_type: str = UNKNOWN_ERROR_TYPE


# Server-side error identifiers -> kind. Unknown identifiers are GENERIC.
ERROR_TYPE_KINDS: dict[str, ErrorKind] = {
    "NotFoundError": ErrorKind.NOT_FOUND,
    "InvalidArgumentError": ErrorKind.VALIDATION,
    "InvalidUUID": ErrorKind.VALIDATION,
    "InvalidHTTPVersion": ErrorKind.VALIDATION,
    "ValueError": ErrorKind.VALUE,
    "TypeError": ErrorKind.TYPE,
    "ChromaAuthError": ErrorKind.AUTHORIZATION,
    "AuthorizationError": ErrorKind.AUTHORIZATION,
    "UniqueConstraintError": ErrorKind.UNIQUE_CONSTRAINT,
    "DimensionalityError": ErrorKind.DIMENSIONALITY,
    "InvalidDimension": ErrorKind.DIMENSIONALITY,
    "InvalidCollection": ErrorKind.INVALID_COLLECTION,
}

# Ordered, case-sensitive (substring, kind) rules; first match wins.
MESSAGE_KIND_RULES: tuple[tuple[str, ErrorKind], ...] = (
    ("NotFoundError", ErrorKind.NOT_FOUND),
    ("AuthorizationError", ErrorKind.AUTHORIZATION),
    ("ChromaAuthError", ErrorKind.AUTHORIZATION),
    ("UniqueConstraintError", ErrorKind.UNIQUE_CONSTRAINT),
    ("InvalidArgumentError", ErrorKind.VALIDATION),
    ("InvalidCollection", ErrorKind.INVALID_COLLECTION),
    ("DimensionalityError", ErrorKind.DIMENSIONALITY),
    ("dimensionality", ErrorKind.DIMENSIONALITY),
    ("ValueError", ErrorKind.VALUE),
    ("TypeError", ErrorKind.TYPE),
    ("not found", ErrorKind.NOT_FOUND),
    ("does not exist", ErrorKind.NOT_FOUND),
    ("already exists", ErrorKind.UNIQUE_CONSTRAINT),
    ("invalid", ErrorKind.VALIDATION),
    ("must be", ErrorKind.VALIDATION),
)

# "error":"<text>" anywhere in a body that is not well-formed JSON.
_LENIENT_ERROR_RE = re.compile(r'"error"\s*:\s*"((?:[^"\\]|\\.)*)"')

# IDENTIFIER(payload), e.g. NotFoundError('Collection abc not found')
_TYPED_ERROR_RE = re.compile(r"(?P<error_type>\w+)\((?P<message>.*)\)\s*", re.DOTALL)


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, sort_keys=True, default=str)


def _loads(text: str) -> Any:
    try:
        return json.loads(text)
    except (ValueError, RecursionError):
        return None


def _strip_quotes(message: str) -> str:
    if len(message) >= 2 and message.startswith("'") and message.endswith("'"):
        return message[1:-1]
    return message


def infer_kind_from_message(message: str) -> ErrorKind:
    """Return the first kind whose substring occurs in ``message``.

    Falls back to GENERIC when no rule matches.
    """
    for needle, kind in MESSAGE_KIND_RULES:
        if needle in message:
            return kind
    return ErrorKind.GENERIC


def kind_for_error_type(error_type: str) -> ErrorKind:
    return ERROR_TYPE_KINDS.get(error_type, ErrorKind.GENERIC)


def _from_message(message: str, code: int | None) -> ClassifiedError:
    kind = infer_kind_from_message(message)
    error_type = UNKNOWN_ERROR_TYPE if kind is ErrorKind.GENERIC else kind.value
    return ClassifiedError(kind=kind, message=message, code=code, error_type=error_type)


def _from_error_type(error_type: str, message: str, code: int | None) -> ClassifiedError:
    return ClassifiedError(
        kind=kind_for_error_type(error_type),
        message=message,
        code=code,
        error_type=error_type,
    )


def _generic(message: str, code: int | None) -> ClassifiedError:
    return ClassifiedError(kind=ErrorKind.GENERIC, message=message, code=code)


def extract_error_payload(raw_body: str) -> Optional[Mapping[str, Any]]:
    """Parse an error body into a mapping, or None when nothing usable.

    Well-formed JSON is used as-is. Otherwise the body is scanned for an
    embedded ``"error":"<text>"`` pair (truncated or wrapped responses); the
    extracted text is parsed as JSON when it is a JSON object and treated as
    the plain error string when it is not.
    """
    parsed = _loads(raw_body)
    if parsed is not None:
        return parsed if isinstance(parsed, Mapping) else None

    match = _LENIENT_ERROR_RE.search(raw_body)
    if not match:
        return None

    text = _loads(f'"{match.group(1)}"')
    if not isinstance(text, str):
        text = match.group(1)

    nested = _loads(text)
    if isinstance(nested, Mapping):
        return nested
    return {"error": text}


def _classify_payload(payload: Mapping[str, Any], code: int) -> Optional[ClassifiedError]:
    error = payload.get("error")

    # 'error' => "NotFoundError('Collection not found')"
    if isinstance(error, str):
        match = _TYPED_ERROR_RE.fullmatch(error)
        if match:
            message = _strip_quotes(match.group("message"))
            return _from_error_type(match.group("error_type"), message, code)

    # 'detail' => 'Collection not found'
    detail = payload.get("detail")
    if detail is not None:
        return _from_message(_as_text(detail), code)

    # {'error': 'ErrorType', 'message': 'Error message'}
    message = payload.get("message")
    if error is not None and message is not None:
        return _from_error_type(_as_text(error), _as_text(message), code)

    # 'error' => 'Collection not found'
    if error is not None:
        return _from_message(_as_text(error), code)

    return None


def classify(failure: Failure) -> ClassifiedError:
    """Classify a failed request into a single ClassifiedError.

    This function assumes the request did *not* succeed.
    It never returns None and never raises; at minimum it returns GENERIC
    carrying the raw diagnostic text.
    """
    # 1) Transport never reached the server
    if isinstance(failure, ConnectionFailure):
        context = failure.handler_context or {}
        message = context.get("error")
        code = context.get("errno")
        return ClassifiedError(
            kind=ErrorKind.CONNECTION,
            message=_as_text(message) if message is not None else failure.message,
            code=code if code is not None else failure.code,
            error_type=ErrorKind.CONNECTION.value,
        )

    status = failure.status_code
    raw_body = failure.raw_body

    # 2) Missing resource, whatever the body says
    if status == 404:
        return ClassifiedError(
            kind=ErrorKind.NOT_FOUND,
            message=raw_body,
            code=status,
            error_type=ErrorKind.NOT_FOUND.value,
        )

    # 3) Structured error bodies
    payload = extract_error_payload(raw_body)
    if payload is None:
        return _generic(raw_body, status)

    classified = _classify_payload(payload, status)
    if classified is not None:
        return classified

    # 4) Nothing recognizable
    return _generic(raw_body, status)
