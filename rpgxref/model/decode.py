"""Decoders from parsed JSON trees to the typed bytecode model.

Every decoder is total: a malformed node yields a placeholder (or `None` for
events that cannot be identified) plus a diagnostic, never an exception.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from rpgxref.diagnostics import (
    DECODE_COMMAND_MISSING_CODE,
    DECODE_COMMAND_MISSING_PARAMETERS,
    DECODE_COMMON_EVENT_INVALID_FIELD,
    DECODE_COMMON_EVENT_UNKNOWN_TRIGGER,
    DECODE_CONDITION_INVALID_FIELD,
    DECODE_EVENT_INVALID_FIELD,
    DECODE_PAGE_MISSING_FIELD,
    Diagnostic,
)
from rpgxref.model.commands import Command
from rpgxref.model.events import (
    CommonEvent,
    CommonEventTrigger,
    Condition,
    Event,
    EventPage,
)
from rpgxref.model.parameters import decode_parameters

_CONDITION_FIELDS: tuple[tuple[str, type], ...] = (
    ("switch1Id", int),
    ("switch1Valid", bool),
    ("switch2Id", int),
    ("switch2Valid", bool),
    ("variableId", int),
    ("variableValid", bool),
    ("variableValue", int),
)

_EVENT_FIELDS: tuple[tuple[str, type], ...] = (
    ("x", int),
    ("y", int),
    ("name", str),
    ("id", int),
    ("pages", list),
)

_COMMON_EVENT_FIELDS: tuple[tuple[str, type], ...] = (
    ("id", int),
    ("name", str),
    ("list", list),
    ("switchId", int),
    ("trigger", int),
)


def decode_command(
    node: object,
    *,
    path: str = "",
    diagnostics: list[Diagnostic] | None = None,
) -> Command:
    if not isinstance(node, Mapping) or not _is_json_type(node.get("code"), int):
        _report(diagnostics, DECODE_COMMAND_MISSING_CODE.at(path))
        return Command.invalid()
    raw_parameters = node.get("parameters")
    if not isinstance(raw_parameters, list):
        _report(diagnostics, DECODE_COMMAND_MISSING_PARAMETERS.at(path))
        return Command.invalid()
    return Command(opcode=node["code"], parameters=decode_parameters(raw_parameters))


def decode_commands(
    nodes: list[object],
    *,
    path: str = "",
    diagnostics: list[Diagnostic] | None = None,
) -> tuple[Command, ...]:
    return tuple(
        decode_command(node, path=f"{path}/{index}", diagnostics=diagnostics)
        for index, node in enumerate(nodes)
    )


def decode_condition(
    node: object,
    *,
    path: str = "",
    diagnostics: list[Diagnostic] | None = None,
) -> Condition:
    missing = _first_invalid_field(node, _CONDITION_FIELDS)
    if missing is not None:
        _report(diagnostics, DECODE_CONDITION_INVALID_FIELD.at(path, detail=f"Field `{missing}`."))
        return Condition()
    fields = cast(Mapping[str, Any], node)
    return Condition(
        switch1_id=fields["switch1Id"],
        switch1_valid=fields["switch1Valid"],
        switch2_id=fields["switch2Id"],
        switch2_valid=fields["switch2Valid"],
        variable_id=fields["variableId"],
        variable_valid=fields["variableValid"],
        variable_value=fields["variableValue"],
    )


def decode_event_page(
    node: object,
    *,
    path: str = "",
    diagnostics: list[Diagnostic] | None = None,
) -> EventPage:
    if not isinstance(node, Mapping) or "conditions" not in node or not isinstance(node.get("list"), list):
        _report(diagnostics, DECODE_PAGE_MISSING_FIELD.at(path))
        return EventPage()
    return EventPage(
        conditions=decode_condition(node["conditions"], path=f"{path}/conditions", diagnostics=diagnostics),
        commands=decode_commands(node["list"], path=f"{path}/list", diagnostics=diagnostics),
    )


def decode_event(
    node: object,
    *,
    path: str = "",
    diagnostics: list[Diagnostic] | None = None,
) -> Event | None:
    missing = _first_invalid_field(node, _EVENT_FIELDS)
    if missing is not None:
        _report(diagnostics, DECODE_EVENT_INVALID_FIELD.at(path, detail=f"Field `{missing}`."))
        return None
    fields = cast(Mapping[str, Any], node)
    note = fields.get("note")
    pages = tuple(
        decode_event_page(page, path=f"{path}/pages/{index}", diagnostics=diagnostics)
        for index, page in enumerate(fields["pages"])
    )
    return Event(
        id=fields["id"],
        name=fields["name"],
        x=fields["x"],
        y=fields["y"],
        note=note if isinstance(note, str) else "",
        pages=pages,
    )


def decode_map_events(
    nodes: list[object],
    *,
    path: str = "",
    diagnostics: list[Diagnostic] | None = None,
) -> tuple[Event, ...]:
    """Decode a map's `events` array; null and empty slots are skipped silently."""
    events: list[Event] = []
    for index, node in enumerate(nodes):
        if not node:
            continue
        event = decode_event(node, path=f"{path}/{index}", diagnostics=diagnostics)
        if event is not None:
            events.append(event)
    return tuple(events)


def decode_common_event(
    node: object,
    *,
    path: str = "",
    diagnostics: list[Diagnostic] | None = None,
) -> CommonEvent | None:
    missing = _first_invalid_field(node, _COMMON_EVENT_FIELDS)
    if missing is not None:
        _report(diagnostics, DECODE_COMMON_EVENT_INVALID_FIELD.at(path, detail=f"Field `{missing}`."))
        return None
    fields = cast(Mapping[str, Any], node)
    try:
        trigger = CommonEventTrigger(fields["trigger"])
    except ValueError:
        _report(
            diagnostics,
            DECODE_COMMON_EVENT_UNKNOWN_TRIGGER.at(path, detail=f"Got `{fields['trigger']}`."),
        )
        trigger = CommonEventTrigger.NONE
    return CommonEvent(
        id=fields["id"],
        name=fields["name"],
        switch_id=fields["switchId"],
        trigger=trigger,
        commands=decode_commands(fields["list"], path=f"{path}/list", diagnostics=diagnostics),
    )


def decode_common_events(
    nodes: list[object],
    *,
    path: str = "",
    diagnostics: list[Diagnostic] | None = None,
) -> tuple[CommonEvent, ...]:
    common_events: list[CommonEvent] = []
    for index, node in enumerate(nodes):
        if not node:
            continue
        common_event = decode_common_event(node, path=f"{path}/{index}", diagnostics=diagnostics)
        if common_event is not None:
            common_events.append(common_event)
    return tuple(common_events)


def _is_json_type(value: object, expected: type) -> bool:
    if expected is int:
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, expected)


def _first_invalid_field(node: object, fields: tuple[tuple[str, type], ...]) -> str | None:
    if not isinstance(node, Mapping):
        return "<node>"
    for name, expected in fields:
        if not _is_json_type(node.get(name), expected):
            return name
    return None


def _report(diagnostics: list[Diagnostic] | None, diagnostic: Diagnostic) -> None:
    if diagnostics is not None:
        diagnostics.append(diagnostic)
