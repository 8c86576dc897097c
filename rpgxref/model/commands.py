"""Event commands, opcodes and opcode families."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, StrEnum

from rpgxref.model.parameters import Parameter


class Opcode(IntEnum):
    IF = 111
    CONTROL_SWITCHES = 121
    CONTROL_VARIABLES = 122
    SCRIPT = 355
    SCRIPT_CONTINUATION = 655


class CommandFamily(StrEnum):
    BRANCH = "branch"
    CONTROL_VARIABLE = "control_variable"
    CONTROL_SWITCH = "control_switch"
    SCRIPT = "script"
    OTHER = "other"
    INVALID = "invalid"


class IfIdType(IntEnum):
    """Parameter 0 of an If command."""

    SWITCH = 0
    VARIABLE = 1
    SCRIPT = 12


class CompareType(IntEnum):
    """Parameter 2 of a variable If command."""

    CONSTANT = 0
    VARIABLE = 1


class ControlOperand(IntEnum):
    """Parameter 3 of a Control Variables command."""

    CONSTANT = 0
    VARIABLE = 1
    RANDOM = 2
    GAME_DATA = 3
    SCRIPT = 4


_FAMILY_BY_OPCODE: dict[int, CommandFamily] = {
    Opcode.IF: CommandFamily.BRANCH,
    Opcode.CONTROL_SWITCHES: CommandFamily.CONTROL_SWITCH,
    Opcode.CONTROL_VARIABLES: CommandFamily.CONTROL_VARIABLE,
    Opcode.SCRIPT: CommandFamily.SCRIPT,
    Opcode.SCRIPT_CONTINUATION: CommandFamily.SCRIPT,
}


def classify_opcode(opcode: int | None) -> CommandFamily:
    if opcode is None:
        return CommandFamily.INVALID
    return _FAMILY_BY_OPCODE.get(opcode, CommandFamily.OTHER)


@dataclass(frozen=True, slots=True)
class Command:
    """One decoded event command.

    A command whose node failed to decode keeps its slot in the list with
    `opcode=None` so that line numbers stay aligned with the source.
    """

    opcode: int | None
    parameters: tuple[Parameter, ...] = ()
    family: CommandFamily = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "family", classify_opcode(self.opcode))

    @staticmethod
    def invalid() -> Command:
        return Command(opcode=None)

    @property
    def is_valid(self) -> bool:
        return self.opcode is not None

    @property
    def arity(self) -> int:
        return len(self.parameters)

    def parameter_at(self, index: int) -> Parameter | None:
        if index < 0 or index >= len(self.parameters):
            return None
        return self.parameters[index]

    def integer_at(self, index: int) -> int | None:
        parameter = self.parameter_at(index)
        return None if parameter is None else parameter.as_integer()

    def text_at(self, index: int) -> str | None:
        parameter = self.parameter_at(index)
        return None if parameter is None else parameter.as_text()

    def integers(self, *indices: int) -> tuple[int, ...] | None:
        """Project several integer positions at once; `None` if any projection fails."""
        values: list[int] = []
        for index in indices:
            value = self.integer_at(index)
            if value is None:
                return None
            values.append(value)
        return tuple(values)


__all__ = [
    "Command",
    "CommandFamily",
    "CompareType",
    "ControlOperand",
    "IfIdType",
    "Opcode",
    "classify_opcode",
]
