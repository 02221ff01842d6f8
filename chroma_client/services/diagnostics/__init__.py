from __future__ import annotations

"""
Diagnostics and error classification utilities.

This package currently provides:
- error_classifier: classify failed Chroma API calls (connection failures
  and non-2xx responses) into stable, typed ClassifiedError values that the
  transport turns into exceptions.

The goal is to keep error handling logic centralized and deterministic.
"""

from .error_classifier import (  # noqa: F401
    ClassifiedError,
    ConnectionFailure,
    ErrorKind,
    Failure,
    HttpFailure,
    classify,
)
