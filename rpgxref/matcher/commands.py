"""Matching of If, Control Variables, Control Switches and Script commands.

Every entry checks exact arity and the variant of each position it reads
before interpreting anything. A failed check is a no-match, never an error.
An out-of-range operator index inside an otherwise matching command still
registers the hit, with a degraded description.
"""

from __future__ import annotations

import logging
from typing import Final, assert_never

from rpgxref.matcher.context import MatchContext
from rpgxref.matcher.query import AccessKind, AccessMatch, QueryKind
from rpgxref.matcher.script import match_script_text
from rpgxref.model import (
    Command,
    CommandFamily,
    CompareType,
    ControlOperand,
    IfIdType,
)

logger = logging.getLogger(__name__)

COMPARISON_OPERATORS: Final[tuple[str, ...]] = ("=", ">=", "<=", ">", "<", "!=")
ASSIGNMENT_OPERATORS: Final[tuple[str, ...]] = ("=", "+=", "-=", "*=", "/=", "%=")

MALFORMED_OPERATOR: Final[str] = "malformed operator"
MALFORMED_OPERATION: Final[str] = "malformed operation"

_IF_SCRIPT_ARITY: Final[int] = 2
_IF_SWITCH_ARITY: Final[int] = 3
_IF_VARIABLE_ARITY: Final[int] = 5
_CONTROL_SWITCH_ARITY: Final[int] = 3
_CONTROL_VARIABLE_ARITY: Final[dict[int, int]] = {
    ControlOperand.CONSTANT: 5,
    ControlOperand.VARIABLE: 5,
    ControlOperand.RANDOM: 6,
    ControlOperand.SCRIPT: 5,
}
_SCRIPT_ARITY: Final[int] = 1


def match_command(ctx: MatchContext, command: Command) -> AccessMatch | None:
    match command.family:
        case CommandFamily.BRANCH:
            return match_if_command(ctx, command)
        case CommandFamily.CONTROL_VARIABLE:
            return match_control_variable(ctx, command)
        case CommandFamily.CONTROL_SWITCH:
            return match_control_switch(ctx, command)
        case CommandFamily.SCRIPT:
            return match_script_command(ctx, command)
        case CommandFamily.OTHER | CommandFamily.INVALID:
            return None
        case unreachable:
            assert_never(unreachable)


def match_if_command(ctx: MatchContext, command: Command) -> AccessMatch | None:
    id_type = command.integer_at(0)
    if id_type is None:
        return None
    if id_type == IfIdType.SCRIPT:
        if command.arity != _IF_SCRIPT_ARITY:
            return None
        script = command.text_at(1)
        return None if script is None else match_script_text(ctx, script)
    if id_type != ctx.profile.if_id_type:
        return None
    if id_type == IfIdType.VARIABLE:
        return _match_if_variable(ctx, command)
    return _match_if_switch(ctx, command)


def match_control_variable(ctx: MatchContext, command: Command) -> AccessMatch | None:
    if ctx.query.kind != QueryKind.VARIABLE:
        return None
    header = command.integers(0, 1, 2, 3)
    if header is None:
        return None
    start, end, operation, operand = header
    expected_arity = _CONTROL_VARIABLE_ARITY.get(operand)
    if expected_arity is None or command.arity != expected_arity:
        # game data never touches variables or switches
        return None

    if operand == ControlOperand.SCRIPT:
        script = command.text_at(4)
        return None if script is None else match_script_text(ctx, script)

    query_id = ctx.query_id
    destination_hit = _range_contains(start, end, query_id)
    if operand == ControlOperand.VARIABLE:
        source = command.integer_at(4)
        if source is None:
            return None
        access = AccessKind.NONE
        if source == query_id:
            access |= AccessKind.READ
        if destination_hit:
            access |= AccessKind.WRITE
        if access == AccessKind.NONE:
            return None
        rendered_source = ctx.name(source)
    elif operand == ControlOperand.RANDOM:
        bounds = command.integers(4, 5)
        if bounds is None or not destination_hit:
            return None
        access = AccessKind.WRITE
        rendered_source = f"Random {bounds[0]} .. {bounds[1]}"
    else:
        constant = command.integer_at(4)
        if constant is None or not destination_hit:
            return None
        access = AccessKind.WRITE
        rendered_source = str(constant)

    return AccessMatch(
        access=access,
        active=True,
        description=_describe_assignment(ctx, start, end, operation, rendered_source),
    )


def match_control_switch(ctx: MatchContext, command: Command) -> AccessMatch | None:
    if ctx.query.kind != QueryKind.SWITCH or command.arity != _CONTROL_SWITCH_ARITY:
        return None
    values = command.integers(0, 1, 2)
    if values is None:
        return None
    start, end, polarity = values
    if not _range_contains(start, end, ctx.query_id):
        return None
    return AccessMatch(
        access=AccessKind.WRITE,
        active=True,
        description=f"{_render_range(ctx, start, end)} = {_polarity(polarity)}",
    )


def match_script_command(ctx: MatchContext, command: Command) -> AccessMatch | None:
    if command.arity != _SCRIPT_ARITY:
        return None
    script = command.text_at(0)
    if script is None:
        return None
    return match_script_text(ctx, script)


def _match_if_variable(ctx: MatchContext, command: Command) -> AccessMatch | None:
    if command.arity != _IF_VARIABLE_ARITY:
        return None
    values = command.integers(1, 2, 3, 4)
    if values is None:
        return None
    primary, compare_type, operand, comparator = values
    query_id = ctx.query_id
    if compare_type == CompareType.CONSTANT:
        primary_hit = primary == query_id
        secondary_hit = False
    elif compare_type == CompareType.VARIABLE:
        primary_hit = primary == query_id
        secondary_hit = operand == query_id
    else:
        return None
    if not primary_hit and not secondary_hit:
        return None

    if not 0 <= comparator < len(COMPARISON_OPERATORS):
        logger.warning("If comparator %d is out of range", comparator)
        description = MALFORMED_OPERATOR
    elif primary_hit:
        other = str(operand) if compare_type == CompareType.CONSTANT else ctx.name(operand)
        description = f"If: {ctx.name(query_id)} {COMPARISON_OPERATORS[comparator]} {other}:"
    else:
        description = f"If: {{#{primary}}} {COMPARISON_OPERATORS[comparator]} {ctx.name(query_id)}:"
    return AccessMatch(access=AccessKind.READ, active=True, description=description)


def _match_if_switch(ctx: MatchContext, command: Command) -> AccessMatch | None:
    if command.arity != _IF_SWITCH_ARITY:
        return None
    values = command.integers(1, 2)
    if values is None:
        return None
    switch_id, polarity = values
    if switch_id != ctx.query_id:
        return None
    return AccessMatch(
        access=AccessKind.READ,
        active=True,
        description=f"If: {ctx.name(switch_id)} is {_polarity(polarity)}",
    )


def _describe_assignment(
    ctx: MatchContext,
    start: int,
    end: int,
    operation: int,
    rendered_source: str,
) -> str:
    if not 0 <= operation < len(ASSIGNMENT_OPERATORS):
        logger.warning("Control Variables operation %d is out of range", operation)
        return MALFORMED_OPERATION
    return f"{_render_range(ctx, start, end)} {ASSIGNMENT_OPERATORS[operation]} {rendered_source}"


def _range_contains(start: int, end: int, query_id: int) -> bool:
    if start == end:
        return start == query_id
    return start <= query_id <= end


def _render_range(ctx: MatchContext, start: int, end: int) -> str:
    if start == end:
        return ctx.name(start)
    return f"{ctx.name(start)} .. {ctx.name(end)}"


def _polarity(value: int) -> str:
    return "ON" if value == 0 else "OFF"
