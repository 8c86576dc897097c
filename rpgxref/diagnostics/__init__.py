"""Diagnostics."""

from rpgxref.diagnostics.codes import (
    DECODE_COMMAND_MISSING_CODE,
    DECODE_COMMAND_MISSING_PARAMETERS,
    DECODE_COMMON_EVENT_INVALID_FIELD,
    DECODE_COMMON_EVENT_UNKNOWN_TRIGGER,
    DECODE_CONDITION_INVALID_FIELD,
    DECODE_EVENT_INVALID_FIELD,
    DECODE_PAGE_MISSING_FIELD,
    LOAD_COMMON_EVENTS_MISSING,
    LOAD_MAP_FILE_MISSING,
    LOAD_MAP_FILE_UNREADABLE,
    LOAD_MAP_MISSING_EVENTS,
    DiagnosticSpec,
)
from rpgxref.diagnostics.diagnostic import Diagnostic, Severity
from rpgxref.diagnostics.report import count_by_severity, has_errors

__all__ = [
    "DECODE_COMMAND_MISSING_CODE",
    "DECODE_COMMAND_MISSING_PARAMETERS",
    "DECODE_COMMON_EVENT_INVALID_FIELD",
    "DECODE_COMMON_EVENT_UNKNOWN_TRIGGER",
    "DECODE_CONDITION_INVALID_FIELD",
    "DECODE_EVENT_INVALID_FIELD",
    "DECODE_PAGE_MISSING_FIELD",
    "LOAD_COMMON_EVENTS_MISSING",
    "LOAD_MAP_FILE_MISSING",
    "LOAD_MAP_FILE_UNREADABLE",
    "LOAD_MAP_MISSING_EVENTS",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "count_by_severity",
    "has_errors",
]
