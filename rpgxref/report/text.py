"""Plain-text report, written to the OUTPUT file."""

from __future__ import annotations

from pathlib import Path

from rpgxref.report.layout import (
    HEAVY_RULE,
    LIGHT_RULE,
    access_text,
    detail_line,
    location_line,
    no_results_line,
    sections,
    status_text,
    summary_line,
)
from rpgxref.scrape import ScrapeResult


def render_text_report(result: ScrapeResult) -> str:
    if not result.has_results:
        return no_results_line(result) + "\n"

    lines = [HEAVY_RULE, summary_line(result), HEAVY_RULE]
    for title, groups in sections(result):
        lines.extend(["", title, LIGHT_RULE])
        for index, group in enumerate(groups):
            if index:
                lines.append("")
            for record in group:
                lines.append(f"{status_text(record)} {access_text(record.access)}")
                lines.append(location_line(record))
                lines.append(detail_line(record))
    lines.append(HEAVY_RULE)
    return "\n".join(lines) + "\n"


def write_text_report(result: ScrapeResult, path: str | Path) -> Path:
    output_path = Path(path)
    output_path.write_text(render_text_report(result), encoding="utf-8")
    return output_path
