"""Query and match result types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag, StrEnum


class QueryKind(StrEnum):
    VARIABLE = "variable"
    SWITCH = "switch"


class AccessKind(IntFlag):
    """How a site touches the queried id. The integer value is the export code."""

    NONE = 0
    READ = 1
    WRITE = 2
    READ_WRITE = 3

    @property
    def label(self) -> str:
        if self == AccessKind.READ_WRITE:
            return "READ/WRITE"
        return self.name or "NONE"


class ScriptMatchMode(StrEnum):
    """How script call signatures are searched for in script text.

    `BOUNDARY` requires that the id is not followed by another digit, so
    `$gameVariables.setValue(1` does not match `$gameVariables.setValue(12, 0)`.
    `SUBSTRING` is a plain substring search.
    """

    BOUNDARY = "boundary"
    SUBSTRING = "substring"


@dataclass(frozen=True, slots=True)
class Query:
    kind: QueryKind
    id: int

    def __post_init__(self) -> None:
        if self.id < 0:
            raise ValueError(f"Query id must be non-negative, got {self.id}")

    @staticmethod
    def variable(query_id: int) -> Query:
        return Query(QueryKind.VARIABLE, query_id)

    @staticmethod
    def switch(query_id: int) -> Query:
        return Query(QueryKind.SWITCH, query_id)


@dataclass(frozen=True, slots=True)
class AccessMatch:
    """One classified reference to the queried id at a single candidate site."""

    access: AccessKind
    active: bool
    description: str
