"""Typed model of RPG Maker event bytecode decoded from JSON trees."""

from rpgxref.model.commands import (
    Command,
    CommandFamily,
    CompareType,
    ControlOperand,
    IfIdType,
    Opcode,
    classify_opcode,
)
from rpgxref.model.decode import (
    decode_command,
    decode_commands,
    decode_common_event,
    decode_common_events,
    decode_condition,
    decode_event,
    decode_event_page,
    decode_map_events,
)
from rpgxref.model.events import (
    CommonEvent,
    CommonEventTrigger,
    Condition,
    Event,
    EventPage,
)
from rpgxref.model.parameters import (
    Parameter,
    ParameterKind,
    ParameterValue,
    decode_parameter,
    decode_parameters,
)

__all__ = [
    "Command",
    "CommandFamily",
    "CommonEvent",
    "CommonEventTrigger",
    "CompareType",
    "Condition",
    "ControlOperand",
    "Event",
    "EventPage",
    "IfIdType",
    "Opcode",
    "Parameter",
    "ParameterKind",
    "ParameterValue",
    "classify_opcode",
    "decode_command",
    "decode_commands",
    "decode_common_event",
    "decode_common_events",
    "decode_condition",
    "decode_event",
    "decode_event_page",
    "decode_map_events",
    "decode_parameter",
    "decode_parameters",
]
