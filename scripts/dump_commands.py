#!/usr/bin/env python
"""Print the decoded commands of one map (or of CommonEvents.json)."""

from __future__ import annotations

import argparse
from pathlib import Path

from rpgxref.diagnostics import Diagnostic
from rpgxref.model import Command, decode_common_events, decode_map_events
from rpgxref.project import (
    COMMON_EVENTS_FILE,
    format_map_file_name,
    locate_data_dir,
    read_project_json,
)


def format_command(line: int, command: Command) -> str:
    if not command.is_valid:
        return f"[{line:03d}] <invalid>"
    parameters = ", ".join(f"{p.kind.name}:{p.value!r}" for p in command.parameters)
    return f"[{line:03d}] code={command.opcode} family={command.family.name} arity={command.arity} params=({parameters})"


def dump_map(data_dir: Path, map_id: int) -> list[str]:
    file_name = format_map_file_name(map_id)
    raw = read_project_json(data_dir / file_name)
    diagnostics: list[Diagnostic] = []
    events = decode_map_events(raw.get("events", []), path=f"{file_name}/events", diagnostics=diagnostics)

    lines: list[str] = []
    for event in events:
        lines.append(f"Event #{event.id:03d} ('{event.name}') @ [{event.x}, {event.y}]")
        for page_number, page in enumerate(event.pages, start=1):
            lines.append(f"  Page #{page_number:02d} conditions={page.conditions}")
            lines.extend(f"    {format_command(i, c)}" for i, c in enumerate(page.commands, start=1))
    lines.extend(d.render() for d in diagnostics)
    return lines


def dump_common_events(data_dir: Path) -> list[str]:
    diagnostics: list[Diagnostic] = []
    common_events = decode_common_events(
        read_project_json(data_dir / COMMON_EVENTS_FILE),
        path=COMMON_EVENTS_FILE,
        diagnostics=diagnostics,
    )

    lines: list[str] = []
    for common_event in common_events:
        lines.append(
            f"Common Event #{common_event.id:03d} ('{common_event.name}') "
            f"trigger={common_event.trigger.name} switch={common_event.switch_id}"
        )
        lines.extend(f"  {format_command(i, c)}" for i, c in enumerate(common_event.commands, start=1))
    lines.extend(d.render() for d in diagnostics)
    return lines


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump decoded RPG Maker event commands")
    parser.add_argument("--project", type=Path, default=Path.cwd(), help="Project root (default: cwd)")
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--map", type=int, dest="map_id", help="Map id to dump")
    target.add_argument("--common-events", action="store_true", help="Dump CommonEvents.json")
    parser.add_argument("--output", type=Path, default=None, help="Write to a file instead of stdout")
    args = parser.parse_args()

    data_dir = locate_data_dir(args.project)
    lines = dump_common_events(data_dir) if args.common_events else dump_map(data_dir, args.map_id)

    if args.output is None:
        print("\n".join(lines))
        return 0

    args.output.parent.mkdir(parents=True, exist_ok=True)
    with args.output.open("w", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")
    print(f"Wrote {len(lines)} lines to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
