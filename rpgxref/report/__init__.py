"""Text, console and JSON renderings of scrape results."""

from rpgxref.report.console import print_report
from rpgxref.report.export import render_json_export, to_export_dict, write_json_export
from rpgxref.report.layout import group_by_owner, summary_line
from rpgxref.report.text import render_text_report, write_text_report

__all__ = [
    "group_by_owner",
    "print_report",
    "render_json_export",
    "render_text_report",
    "summary_line",
    "to_export_dict",
    "write_json_export",
    "write_text_report",
]
