"""Access records and grouped scrape results."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TypeAlias

from rpgxref.diagnostics import Diagnostic
from rpgxref.matcher import AccessKind, AccessMatch, Query
from rpgxref.model import Event


@dataclass(frozen=True, slots=True)
class MapAccessRecord:
    """A reference found on a map event page."""

    map_id: int
    event: Event
    page: int
    line: int | None
    access: AccessKind
    active: bool
    description: str

    @property
    def owner_id(self) -> int:
        return self.event.id

    @staticmethod
    def from_match(
        match: AccessMatch,
        *,
        map_id: int,
        event: Event,
        page: int,
        line: int | None = None,
    ) -> MapAccessRecord:
        return MapAccessRecord(
            map_id=map_id,
            event=event,
            page=page,
            line=line,
            access=match.access,
            active=match.active,
            description=match.description,
        )


@dataclass(frozen=True, slots=True)
class CommonEventAccessRecord:
    """A reference found in a common event; `line` is `None` for the trigger switch."""

    common_event_id: int
    common_event_name: str
    line: int | None
    access: AccessKind
    active: bool
    description: str

    @property
    def owner_id(self) -> int:
        return self.common_event_id

    @staticmethod
    def from_match(
        match: AccessMatch,
        *,
        common_event_id: int,
        common_event_name: str,
        line: int | None = None,
    ) -> CommonEventAccessRecord:
        return CommonEventAccessRecord(
            common_event_id=common_event_id,
            common_event_name=common_event_name,
            line=line,
            access=match.access,
            active=match.active,
            description=match.description,
        )


AccessRecord: TypeAlias = MapAccessRecord | CommonEventAccessRecord


@dataclass(frozen=True, slots=True)
class ScrapeResult:
    """Grouped results of one scrape.

    Map groups are keyed by ascending map id and common-event groups follow
    file order; records inside a group keep scan order.
    """

    query: Query
    query_name: str
    map_results: Mapping[int, tuple[MapAccessRecord, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    common_event_results: Mapping[int, tuple[CommonEventAccessRecord, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    map_names: Mapping[int, str] = field(default_factory=lambda: MappingProxyType({}))
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def total_instance_count(self) -> int:
        return sum(len(group) for group in self.map_results.values()) + sum(
            len(group) for group in self.common_event_results.values()
        )

    @property
    def has_results(self) -> bool:
        return bool(self.map_results) or bool(self.common_event_results)

    def map_records(self) -> tuple[MapAccessRecord, ...]:
        return tuple(record for group in self.map_results.values() for record in group)

    def common_event_records(self) -> tuple[CommonEventAccessRecord, ...]:
        return tuple(record for group in self.common_event_results.values() for record in group)

    def map_name(self, map_id: int) -> str | None:
        return self.map_names.get(map_id)
