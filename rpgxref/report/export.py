"""JSON export of scrape results."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from rpgxref.diagnostics import Diagnostic
from rpgxref.project import format_map_file_name
from rpgxref.scrape import CommonEventAccessRecord, MapAccessRecord, ScrapeResult


def to_export_dict(result: ScrapeResult) -> dict[str, Any]:
    """Plain-JSON view of a result; `access` is the integer access code."""
    return {
        "query": {
            "kind": str(result.query.kind),
            "id": result.query.id,
            "name": result.query_name,
        },
        "total_instance_count": result.total_instance_count,
        "maps": [
            {
                "map_id": map_id,
                "map_file": format_map_file_name(map_id),
                "map_name": result.map_name(map_id),
                "records": [_map_record_dict(record) for record in records],
            }
            for map_id, records in result.map_results.items()
        ],
        "common_events": [
            {
                "common_event_id": common_event_id,
                "common_event_name": records[0].common_event_name,
                "records": [_common_event_record_dict(record) for record in records],
            }
            for common_event_id, records in result.common_event_results.items()
        ],
        "diagnostics": [_diagnostic_dict(diagnostic) for diagnostic in result.diagnostics],
    }


def render_json_export(result: ScrapeResult) -> str:
    return json.dumps(to_export_dict(result), indent=2, ensure_ascii=False)


def write_json_export(result: ScrapeResult, path: str | Path) -> Path:
    output_path = Path(path)
    output_path.write_text(render_json_export(result) + "\n", encoding="utf-8")
    return output_path


def _map_record_dict(record: MapAccessRecord) -> dict[str, Any]:
    return {
        "access": int(record.access),
        "access_name": record.access.label,
        "active": record.active,
        "map_id": record.map_id,
        "event": {
            "id": record.event.id,
            "name": record.event.name,
            "note": record.event.note,
            "x": record.event.x,
            "y": record.event.y,
        },
        "page": record.page,
        "line": record.line,
        "description": record.description,
    }


def _common_event_record_dict(record: CommonEventAccessRecord) -> dict[str, Any]:
    return {
        "access": int(record.access),
        "access_name": record.access.label,
        "active": record.active,
        "common_event_id": record.common_event_id,
        "line": record.line,
        "description": record.description,
    }


def _diagnostic_dict(diagnostic: Diagnostic) -> dict[str, Any]:
    return {
        "code": diagnostic.code,
        "severity": diagnostic.severity,
        "path": diagnostic.path,
        "message": diagnostic.message,
    }
