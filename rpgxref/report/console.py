"""Colored terminal report."""

from __future__ import annotations

from typing import Final

from rich.console import Console
from rich.text import Text

from rpgxref.matcher import AccessKind
from rpgxref.report.layout import (
    HEAVY_RULE,
    LIGHT_RULE,
    access_text,
    line_prefix,
    location_line,
    no_results_line,
    query_label,
    sections,
    status_text,
    summary_parts,
)
from rpgxref.scrape import AccessRecord, ScrapeResult

ACCESS_STYLES: Final[dict[AccessKind, str]] = {
    AccessKind.READ: "blue",
    AccessKind.WRITE: "red",
    AccessKind.READ_WRITE: "magenta",
}


def print_report(result: ScrapeResult, console: Console | None = None) -> None:
    out_console = console or Console()
    if not result.has_results:
        out_console.print(Text(no_results_line(result), style="red"))
        return

    out_console.print(HEAVY_RULE)
    out_console.print(_summary_text(result))
    out_console.print(HEAVY_RULE)
    for title, groups in sections(result):
        out_console.print()
        out_console.print(Text(title, style="cyan"))
        out_console.print(LIGHT_RULE)
        for index, group in enumerate(groups):
            if index:
                out_console.print()
            for record in group:
                _print_record(out_console, record)
    out_console.print(HEAVY_RULE)


def _summary_text(result: ScrapeResult) -> Text:
    *owners, instances = summary_parts(result)
    text = Text("Found ")
    for index, owner in enumerate(owners):
        if index:
            text.append(" and ")
        text.append(owner, style="green")
    text.append(" yielding ")
    text.append(instances, style="green")
    text.append(f" using {query_label(result)}")
    return text


def _print_record(out_console: Console, record: AccessRecord) -> None:
    heading = Text()
    heading.append(status_text(record), style="green" if record.active else "grey50")
    heading.append(" ")
    heading.append(access_text(record.access), style=ACCESS_STYLES.get(record.access, ""))
    out_console.print(heading)
    out_console.print(Text(location_line(record)))

    detail = Text("\t\t")
    prefix = line_prefix(record)
    if prefix is not None:
        detail.append(prefix, style="dim")
        detail.append(" | ")
    detail.append(record.description)
    out_console.print(detail)
