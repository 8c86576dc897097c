"""Event pages, map events and common events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from rpgxref.model.commands import Command


class CommonEventTrigger(IntEnum):
    NONE = 0
    AUTORUN = 1
    PARALLEL = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True, slots=True)
class Condition:
    """Page gate. A `*_valid` flag says the editor has that clause enabled."""

    switch1_id: int = 0
    switch1_valid: bool = False
    switch2_id: int = 0
    switch2_valid: bool = False
    variable_id: int = 0
    variable_valid: bool = False
    variable_value: int = 0


@dataclass(frozen=True, slots=True)
class EventPage:
    conditions: Condition = Condition()
    commands: tuple[Command, ...] = ()


@dataclass(frozen=True, slots=True)
class Event:
    id: int
    name: str
    x: int
    y: int
    note: str = ""
    pages: tuple[EventPage, ...] = ()


@dataclass(frozen=True, slots=True)
class CommonEvent:
    id: int
    name: str
    switch_id: int = 0
    trigger: CommonEventTrigger = CommonEventTrigger.NONE
    commands: tuple[Command, ...] = ()

    @property
    def has_trigger(self) -> bool:
        return self.trigger != CommonEventTrigger.NONE


__all__ = [
    "CommonEvent",
    "CommonEventTrigger",
    "Condition",
    "Event",
    "EventPage",
]
