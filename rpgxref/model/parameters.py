"""Positional command parameters as a closed tagged union."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias

ParameterValue: TypeAlias = int | float | bool | str


class ParameterKind(StrEnum):
    INTEGER = "integer"
    FLOAT = "float"
    BOOL = "bool"
    CHAR = "char"
    TEXT = "text"


@dataclass(frozen=True, slots=True)
class Parameter:
    """One decoded command parameter; `value` always agrees with `kind`."""

    kind: ParameterKind
    value: ParameterValue

    @staticmethod
    def integer(value: int) -> Parameter:
        return Parameter(ParameterKind.INTEGER, value)

    @staticmethod
    def text(value: str) -> Parameter:
        return Parameter(ParameterKind.TEXT, value)

    def as_integer(self) -> int | None:
        if self.kind != ParameterKind.INTEGER:
            return None
        return int(self.value)

    def as_float(self) -> float | None:
        if self.kind != ParameterKind.FLOAT:
            return None
        return float(self.value)

    def as_bool(self) -> bool | None:
        if self.kind != ParameterKind.BOOL:
            return None
        return bool(self.value)

    def as_char(self) -> str | None:
        if self.kind != ParameterKind.CHAR:
            return None
        return str(self.value)

    def as_text(self) -> str | None:
        if self.kind != ParameterKind.TEXT:
            return None
        return str(self.value)


def decode_parameter(raw: object) -> Parameter | None:
    """Decode one raw JSON parameter, or `None` for shapes outside the union.

    JSON booleans are checked before integers since `bool` subclasses `int`.
    """
    if isinstance(raw, bool):
        return Parameter(ParameterKind.BOOL, raw)
    if isinstance(raw, int):
        return Parameter(ParameterKind.INTEGER, raw)
    if isinstance(raw, float):
        return Parameter(ParameterKind.FLOAT, raw)
    if isinstance(raw, str):
        if len(raw) == 1:
            return Parameter(ParameterKind.CHAR, raw)
        return Parameter(ParameterKind.TEXT, raw)
    return None


def decode_parameters(raw_parameters: list[object]) -> tuple[Parameter, ...]:
    decoded: list[Parameter] = []
    for raw in raw_parameters:
        parameter = decode_parameter(raw)
        if parameter is None:
            continue
        decoded.append(parameter)
    return tuple(decoded)


__all__ = [
    "Parameter",
    "ParameterKind",
    "ParameterValue",
    "decode_parameter",
    "decode_parameters",
]
