"""Decoded project data handed to the scraper."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from rpgxref.diagnostics import Diagnostic
from rpgxref.matcher import QueryKind
from rpgxref.model import CommonEvent, Event


def _empty_mapping() -> Mapping:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class ProjectData:
    """Everything the scraper reads, already decoded from the project's JSON files."""

    map_names: Mapping[int, str] = field(default_factory=_empty_mapping)
    events_by_map: Mapping[int, tuple[Event, ...]] = field(default_factory=_empty_mapping)
    common_events: tuple[CommonEvent, ...] = ()
    variable_names: Mapping[int, str] = field(default_factory=_empty_mapping)
    switch_names: Mapping[int, str] = field(default_factory=_empty_mapping)
    diagnostics: tuple[Diagnostic, ...] = ()
    data_dir: Path | None = None

    def names_for(self, kind: QueryKind) -> Mapping[int, str]:
        if kind == QueryKind.VARIABLE:
            return self.variable_names
        return self.switch_names

    def map_name(self, map_id: int) -> str | None:
        return self.map_names.get(map_id)


def format_map_file_name(map_id: int) -> str:
    return f"Map{map_id:03d}.json"
