"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

from rpgxref.diagnostics.diagnostic import Diagnostic

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None

    def at(self, path: str, *, detail: str | None = None) -> Diagnostic:
        message = self.message if detail is None else f"{self.message} {detail}"
        return Diagnostic(
            code=self.code,
            message=message,
            path=path,
            severity=self.severity,
            hint=self.hint,
            category=self.category,
        )


DECODE_COMMAND_MISSING_CODE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DECODE_COMMAND_MISSING_CODE",
    message="Command doesn't have a code or it's not an integer.",
    severity="warning",
    category="decode",
)

DECODE_COMMAND_MISSING_PARAMETERS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DECODE_COMMAND_MISSING_PARAMETERS",
    message="Command doesn't have a parameter list.",
    severity="warning",
    category="decode",
)

DECODE_CONDITION_INVALID_FIELD: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DECODE_CONDITION_INVALID_FIELD",
    message="Page condition field is missing or has the wrong type.",
    hint="The page is still scanned; its conditions are treated as unused.",
    severity="warning",
    category="decode",
)

DECODE_PAGE_MISSING_FIELD: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DECODE_PAGE_MISSING_FIELD",
    message="Event page doesn't have conditions or a command list.",
    hint="The page keeps its number but is scanned as empty.",
    severity="warning",
    category="decode",
)

DECODE_EVENT_INVALID_FIELD: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DECODE_EVENT_INVALID_FIELD",
    message="Event field is missing or has the wrong type.",
    hint="The event is skipped.",
    severity="warning",
    category="decode",
)

DECODE_COMMON_EVENT_INVALID_FIELD: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DECODE_COMMON_EVENT_INVALID_FIELD",
    message="Common event field is missing or has the wrong type.",
    hint="The common event is skipped.",
    severity="warning",
    category="decode",
)

DECODE_COMMON_EVENT_UNKNOWN_TRIGGER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DECODE_COMMON_EVENT_UNKNOWN_TRIGGER",
    message="Common event trigger is not one of none/autorun/parallel.",
    hint="The trigger is treated as none.",
    severity="warning",
    category="decode",
)

LOAD_MAP_FILE_MISSING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LOAD_MAP_FILE_MISSING",
    message="Map id is listed in MapInfos.json but its map file couldn't be found.",
    severity="warning",
    category="load",
)

LOAD_MAP_FILE_UNREADABLE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LOAD_MAP_FILE_UNREADABLE",
    message="Map file couldn't be read or isn't valid JSON.",
    severity="error",
    category="load",
)

LOAD_MAP_MISSING_EVENTS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LOAD_MAP_MISSING_EVENTS",
    message="Map file doesn't contain an event list.",
    severity="warning",
    category="load",
)

LOAD_COMMON_EVENTS_MISSING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LOAD_COMMON_EVENTS_MISSING",
    message="CommonEvents.json is missing or unreadable; common events are not scanned.",
    severity="warning",
    category="load",
)
