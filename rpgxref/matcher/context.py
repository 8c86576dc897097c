"""Per-kind tables threaded through the matcher entries."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Final

from rpgxref.matcher.query import Query, QueryKind, ScriptMatchMode
from rpgxref.model import IfIdType

# RPG Maker initialises every new page condition to id 1 with the clause disabled.
DEFAULT_CONDITION_ID: Final[int] = 1


@dataclass(frozen=True, slots=True)
class QueryKindProfile:
    """Everything that differs between variable and switch scraping."""

    kind: QueryKind
    label: str
    if_id_type: IfIdType
    script_target: str
    unknown_name_suffix: str


VARIABLE_PROFILE: Final[QueryKindProfile] = QueryKindProfile(
    kind=QueryKind.VARIABLE,
    label="variable",
    if_id_type=IfIdType.VARIABLE,
    script_target="$gameVariables",
    unknown_name_suffix="",
)

SWITCH_PROFILE: Final[QueryKindProfile] = QueryKindProfile(
    kind=QueryKind.SWITCH,
    label="switch",
    if_id_type=IfIdType.SWITCH,
    script_target="$gameSwitches",
    unknown_name_suffix=" ?",
)


def profile_for(kind: QueryKind) -> QueryKindProfile:
    if kind == QueryKind.VARIABLE:
        return VARIABLE_PROFILE
    return SWITCH_PROFILE


@dataclass(frozen=True, slots=True)
class NameTable:
    """Id to display-name table for one query kind (from `System.json`)."""

    names: Mapping[int, str] = field(default_factory=lambda: MappingProxyType({}))
    unknown_suffix: str = ""

    def __contains__(self, item_id: object) -> bool:
        return isinstance(item_id, int) and item_id != 0 and item_id in self.names

    def label(self, item_id: int) -> str:
        if item_id not in self:
            return f"#{item_id}{self.unknown_suffix}"
        name = self.names[item_id]
        return name if name else f"#{item_id}"

    def braced(self, item_id: int) -> str:
        return "{" + self.label(item_id) + "}"


@dataclass(frozen=True, slots=True)
class MatchContext:
    """Query plus the tables the matcher entries consult."""

    query: Query
    names: NameTable
    profile: QueryKindProfile
    script_match: ScriptMatchMode = ScriptMatchMode.BOUNDARY

    @property
    def query_id(self) -> int:
        return self.query.id

    def name(self, item_id: int) -> str:
        return self.names.braced(item_id)


def build_match_context(
    query: Query,
    names: Mapping[int, str],
    *,
    script_match: ScriptMatchMode = ScriptMatchMode.BOUNDARY,
) -> MatchContext:
    profile = profile_for(query.kind)
    return MatchContext(
        query=query,
        names=NameTable(names=MappingProxyType(dict(names)), unknown_suffix=profile.unknown_name_suffix),
        profile=profile,
        script_match=script_match,
    )
