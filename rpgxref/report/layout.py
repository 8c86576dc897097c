"""Line formats shared by the text and console reports."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Final

from rpgxref.matcher import AccessKind
from rpgxref.project import format_map_file_name
from rpgxref.scrape import AccessRecord, MapAccessRecord, ScrapeResult

HEAVY_RULE: Final[str] = "=" * 41
LIGHT_RULE: Final[str] = "-" * 50
COMMON_EVENTS_TITLE: Final[str] = "CommonEvents.json"


def group_by_owner(records: Iterable[AccessRecord]) -> list[tuple[AccessRecord, ...]]:
    """Fold records into runs that share an owner (event or common event).

    Only consecutive records are merged; a later record of an earlier owner
    starts a new run.
    """
    groups: list[list[AccessRecord]] = []
    for record in records:
        if groups and groups[-1][-1].owner_id == record.owner_id:
            groups[-1].append(record)
        else:
            groups.append([record])
    return [tuple(group) for group in groups]


def pluralize(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def summary_parts(result: ScrapeResult) -> tuple[str, ...]:
    """Counts of the summary line: maps, optional common events, instances."""
    parts = [pluralize(len(result.map_results), "map")]
    if result.common_event_results:
        parts.append(pluralize(len(result.common_event_results), "common event"))
    parts.append(pluralize(result.total_instance_count, "instance"))
    return tuple(parts)


def query_label(result: ScrapeResult) -> str:
    return f"{result.query.kind} #{result.query.id:03d} ('{result.query_name}')"


def summary_line(result: ScrapeResult) -> str:
    *owners, instances = summary_parts(result)
    return f"Found {' and '.join(owners)} yielding {instances} using {query_label(result)}"


def no_results_line(result: ScrapeResult) -> str:
    return f"Couldn't locate any references to {result.query.kind} #{result.query.id:03d}"


def map_title(result: ScrapeResult, map_id: int) -> str:
    return f"{format_map_file_name(map_id)} ('{result.map_name(map_id) or ''}')"


def status_text(record: AccessRecord) -> str:
    return "ON" if record.active else "OFF"


def access_text(access: AccessKind) -> str:
    return f"[{access.label}]"


def location_line(record: AccessRecord) -> str:
    if isinstance(record, MapAccessRecord):
        event = record.event
        return (
            f"\t@ [{event.x}, {event.y}] on Event #{event.id:03d} ('{event.name}') "
            f"on Event Page #{record.page:02d}:"
        )
    return f"\ton Common Event #{record.common_event_id:03d} ('{record.common_event_name}'):"


def line_prefix(record: AccessRecord) -> str | None:
    if record.line is None:
        return None
    return f"Line {record.line:03d}"


def detail_line(record: AccessRecord) -> str:
    prefix = line_prefix(record)
    if prefix is None:
        return f"\t\t{record.description}"
    return f"\t\t{prefix} | {record.description}"


def sections(result: ScrapeResult) -> list[tuple[str, Sequence[tuple[AccessRecord, ...]]]]:
    """Titled sections in report order: maps by ascending id, then common events."""
    ordered: list[tuple[str, Sequence[tuple[AccessRecord, ...]]]] = [
        (map_title(result, map_id), group_by_owner(records))
        for map_id, records in result.map_results.items()
    ]
    if result.common_event_results:
        ordered.append((COMMON_EVENTS_TITLE, group_by_owner(result.common_event_records())))
    return ordered
