"""Diagnostic records produced by load, validation and directory scans."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class DiagnosticCode(str, Enum):
    """Enumeration of diagnostic codes.

    ``JSON`` is never emitted by this package, since a malformed docs.json
    raises ``ConfigurationParseError``. It is reserved for callers that
    record their own parse failures.
    """

    JSON = "JSON"
    VALIDATION = "VALIDATION"
    NAVIGATION_JSON = "NAVIGATION_JSON"
    MD_FILE_WARNING = "MD_FILE_WARNING"
    NULL_GROUP = "NULL_GROUP"
    EMPTY_GROUP = "EMPTY_GROUP"


class Diagnostic(BaseModel):
    """A recoverable anomaly found while processing a configuration.

    Attributes:
        location: File path (or ``"string"`` for in-memory content).
        code: Diagnostic code.
        message: Human readable description.
        is_warning: True for warnings, False for errors.
    """

    location: str
    code: DiagnosticCode
    message: str
    is_warning: bool = False
