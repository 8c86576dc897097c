"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by decoders and project loaders.

    `path` points at the offending JSON node, e.g. `Map003.json/events/4/pages/0/list/7`.
    """

    code: str
    message: str
    path: str
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    def render(self) -> str:
        rendered = f"{self.severity.upper()} {self.code} at {self.path or '<root>'}: {self.message}"
        if self.hint:
            rendered += f" ({self.hint})"
        return rendered
