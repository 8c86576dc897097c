"""Result aggregator: walks every candidate site of a project for one query."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from rpgxref.errors import UnknownQueryIdError
from rpgxref.matcher import (
    MatchContext,
    Query,
    build_match_context,
    match_command,
    match_common_event_trigger,
    match_page_condition,
)
from rpgxref.model import CommonEvent, Event
from rpgxref.project import LoadOptions, ProjectData, load_project
from rpgxref.scrape.options import ScrapeOptions
from rpgxref.scrape.results import (
    CommonEventAccessRecord,
    MapAccessRecord,
    ScrapeResult,
)


def run_scrape(
    query: Query,
    *,
    project: ProjectData | None = None,
    root: str | Path | None = None,
    options: ScrapeOptions | None = None,
    load_options: LoadOptions | None = None,
) -> ScrapeResult:
    """Load (or reuse) a project and scrape it for one query."""
    resolved_project = _resolve_project(project=project, root=root, load_options=load_options)
    return scrape_project(resolved_project, query, options=options)


def scrape_project(
    project: ProjectData,
    query: Query,
    *,
    options: ScrapeOptions | None = None,
) -> ScrapeResult:
    """Scan maps (ascending id) then common events (file order) for `query`.

    Raises `UnknownQueryIdError` before scanning when the id has no entry in
    the project's variable/switch table.
    """
    resolved_options = options or ScrapeOptions()
    ctx = build_match_context(
        query,
        project.names_for(query.kind),
        script_match=resolved_options.script_match,
    )
    if query.id not in ctx.names:
        raise UnknownQueryIdError(ctx.profile.label, query.id)

    map_results: dict[int, tuple[MapAccessRecord, ...]] = {}
    for map_id in sorted(project.events_by_map):
        records = [
            record
            for event in project.events_by_map[map_id]
            for record in _scan_event(ctx, map_id, event)
            if resolved_options.include_inactive or record.active
        ]
        if records:
            map_results[map_id] = tuple(records)

    common_event_results: dict[int, tuple[CommonEventAccessRecord, ...]] = {}
    for common_event in project.common_events:
        records = [
            record
            for record in _scan_common_event(ctx, common_event)
            if resolved_options.include_inactive or record.active
        ]
        if records:
            common_event_results[common_event.id] = tuple(records)

    return ScrapeResult(
        query=query,
        query_name=ctx.names.label(query.id),
        map_results=map_results,
        common_event_results=common_event_results,
        map_names=project.map_names,
        diagnostics=project.diagnostics,
    )


def _scan_event(ctx: MatchContext, map_id: int, event: Event) -> Iterator[MapAccessRecord]:
    for page_number, page in enumerate(event.pages, start=1):
        condition_match = match_page_condition(ctx, page.conditions)
        if condition_match is not None:
            yield MapAccessRecord.from_match(condition_match, map_id=map_id, event=event, page=page_number)
        for line_number, command in enumerate(page.commands, start=1):
            command_match = match_command(ctx, command)
            if command_match is None:
                continue
            yield MapAccessRecord.from_match(
                command_match,
                map_id=map_id,
                event=event,
                page=page_number,
                line=line_number,
            )


def _scan_common_event(ctx: MatchContext, common_event: CommonEvent) -> Iterator[CommonEventAccessRecord]:
    trigger_match = match_common_event_trigger(ctx, common_event)
    if trigger_match is not None:
        yield CommonEventAccessRecord.from_match(
            trigger_match,
            common_event_id=common_event.id,
            common_event_name=common_event.name,
        )
    for line_number, command in enumerate(common_event.commands, start=1):
        command_match = match_command(ctx, command)
        if command_match is None:
            continue
        yield CommonEventAccessRecord.from_match(
            command_match,
            common_event_id=common_event.id,
            common_event_name=common_event.name,
            line=line_number,
        )


def _resolve_project(
    *,
    project: ProjectData | None,
    root: str | Path | None,
    load_options: LoadOptions | None,
) -> ProjectData:
    if project is not None:
        if root is not None or load_options is not None:
            raise ValueError("Pass either project or root/load_options, not both")
        return project
    if root is None:
        raise ValueError("Pass a decoded project or a project root")
    return load_project(root, options=load_options)
