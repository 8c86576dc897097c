from rpgxref.matcher import AccessKind, match_common_event_trigger, match_page_condition
from rpgxref.model import CommonEvent, CommonEventTrigger, Condition
from tests._shared_cases import switch_context, variable_context


def test_variable_condition_enabled_is_active_read() -> None:
    ctx = variable_context(7)

    match = match_page_condition(ctx, Condition(variable_id=7, variable_valid=True, variable_value=2))

    assert match is not None
    assert match.access == AccessKind.READ
    assert match.active is True
    assert match.description == "IF {Quest Stage} >= 2:"


def test_variable_condition_disabled_is_inactive() -> None:
    ctx = variable_context(7)

    match = match_page_condition(ctx, Condition(variable_id=7, variable_valid=False, variable_value=2))

    assert match is not None
    assert match.active is False


def test_default_variable_condition_is_suppressed_unless_enabled() -> None:
    ctx = variable_context(1)

    assert match_page_condition(ctx, Condition(variable_id=1, variable_valid=False)) is None
    enabled = match_page_condition(ctx, Condition(variable_id=1, variable_valid=True, variable_value=4))
    assert enabled is not None
    assert enabled.description == "IF {Default} >= 4:"


def test_switch_condition_single_slot() -> None:
    ctx = switch_context(3)

    match = match_page_condition(ctx, Condition(switch1_id=3, switch1_valid=True, switch2_id=1))

    assert match is not None
    assert match.access == AccessKind.READ
    assert match.active is True
    assert match.description == "IF {Door Open}:"


def test_switch_condition_both_slots_enabled_are_joined() -> None:
    ctx = switch_context(4)

    match = match_page_condition(
        ctx,
        Condition(switch1_id=3, switch1_valid=True, switch2_id=4, switch2_valid=True),
    )

    assert match is not None
    assert match.description == "IF {Door Open} && {Boss Beaten}:"


def test_switch_condition_disabled_slot_is_inactive() -> None:
    ctx = switch_context(4)

    match = match_page_condition(ctx, Condition(switch1_id=1, switch2_id=4, switch2_valid=False))

    assert match is not None
    assert match.active is False
    assert match.description == "IF {Boss Beaten}:"


def test_default_switch_condition_is_suppressed_unless_enabled() -> None:
    ctx = switch_context(1)

    assert match_page_condition(ctx, Condition(switch1_id=1, switch2_id=1)) is None
    assert match_page_condition(ctx, Condition(switch1_id=1, switch1_valid=True, switch2_id=1)) is not None


def test_variable_condition_ignored_in_switch_mode() -> None:
    ctx = switch_context(7)

    assert match_page_condition(ctx, Condition(variable_id=7, variable_valid=True)) is None


def test_common_event_trigger_switch_is_read() -> None:
    ctx = switch_context(7)
    common_event = CommonEvent(id=2, name="Night", switch_id=7, trigger=CommonEventTrigger.PARALLEL)

    match = match_common_event_trigger(ctx, common_event)

    assert match is not None
    assert match.access == AccessKind.READ
    assert match.description == "Parallel while {Lights} is ON"


def test_common_event_without_trigger_does_not_read_switch() -> None:
    ctx = switch_context(7)
    common_event = CommonEvent(id=2, name="Night", switch_id=7, trigger=CommonEventTrigger.NONE)

    assert match_common_event_trigger(ctx, common_event) is None
    assert match_common_event_trigger(variable_context(7), common_event) is None
