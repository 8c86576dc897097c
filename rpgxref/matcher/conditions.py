"""Matching of page conditions and common-event triggers."""

from __future__ import annotations

from typing import assert_never

from rpgxref.matcher.context import DEFAULT_CONDITION_ID, MatchContext
from rpgxref.matcher.query import AccessKind, AccessMatch, QueryKind
from rpgxref.model import CommonEvent, Condition


def match_page_condition(ctx: MatchContext, condition: Condition) -> AccessMatch | None:
    match ctx.query.kind:
        case QueryKind.VARIABLE:
            return _match_variable_condition(ctx, condition)
        case QueryKind.SWITCH:
            return _match_switch_condition(ctx, condition)
        case unreachable:
            assert_never(unreachable)


def match_common_event_trigger(ctx: MatchContext, common_event: CommonEvent) -> AccessMatch | None:
    """A switch-started common event reads its trigger switch."""
    if ctx.query.kind != QueryKind.SWITCH:
        return None
    if not common_event.has_trigger or common_event.switch_id != ctx.query_id:
        return None
    return AccessMatch(
        access=AccessKind.READ,
        active=True,
        description=f"{common_event.trigger.label} while {ctx.name(ctx.query_id)} is ON",
    )


def _match_variable_condition(ctx: MatchContext, condition: Condition) -> AccessMatch | None:
    query_id = ctx.query_id
    if condition.variable_id != query_id:
        return None
    if query_id == DEFAULT_CONDITION_ID and not condition.variable_valid:
        return None
    return AccessMatch(
        access=AccessKind.READ,
        active=condition.variable_valid,
        description=f"IF {ctx.name(query_id)} >= {condition.variable_value}:",
    )


def _match_switch_condition(ctx: MatchContext, condition: Condition) -> AccessMatch | None:
    query_id = ctx.query_id
    slots = (
        (condition.switch1_id, condition.switch1_valid),
        (condition.switch2_id, condition.switch2_valid),
    )
    matched = [(switch_id, valid) for switch_id, valid in slots if switch_id == query_id]
    if not matched:
        return None
    active = any(valid for _, valid in matched)
    if query_id == DEFAULT_CONDITION_ID and not active:
        return None

    shown = [switch_id for switch_id, valid in slots if valid]
    if not shown:
        shown = [switch_id for switch_id, _ in matched]
    rendered = " && ".join(ctx.name(switch_id) for switch_id in shown)
    return AccessMatch(access=AccessKind.READ, active=active, description=f"IF {rendered}:")
