import pytest

from rpgxref.matcher import (
    AccessKind,
    MatchContext,
    Query,
    ScriptMatchMode,
    build_match_context,
    match_script_text,
    script_signatures,
)
from tests._shared_cases import SWITCH_NAMES, VARIABLE_NAMES, switch_context, variable_context


def _substring_context(query_id: int) -> MatchContext:
    return build_match_context(
        Query.variable(query_id),
        VARIABLE_NAMES,
        script_match=ScriptMatchMode.SUBSTRING,
    )


def test_read_signature_matches_exact_id() -> None:
    match = match_script_text(variable_context(1), "if ($gameVariables.value(1) > 0) {}")

    assert match is not None
    assert match.access == AccessKind.READ
    assert match.active is True


def test_read_signature_does_not_match_longer_id() -> None:
    assert match_script_text(variable_context(1), "$gameVariables.value(11)") is None
    assert match_script_text(variable_context(1), "$gameVariables.value(12)") is None


def test_write_signature_respects_id_boundary() -> None:
    assert match_script_text(variable_context(1), "$gameVariables.setValue(12, 0);") is None

    match = match_script_text(variable_context(1), "$gameVariables.setValue(1, 0);")
    assert match is not None
    assert match.access == AccessKind.WRITE


def test_substring_mode_keeps_loose_write_matching() -> None:
    match = match_script_text(_substring_context(1), "$gameVariables.setValue(12, 0);")

    assert match is not None
    assert match.access == AccessKind.WRITE


def test_read_wins_when_both_signatures_present() -> None:
    text = "$gameVariables.setValue(7, $gameVariables.value(7) + 1);"

    match = match_script_text(variable_context(7), text)

    assert match is not None
    assert match.access == AccessKind.READ
    assert match.description == text


def test_switch_signatures_use_game_switches() -> None:
    ctx = switch_context(3)

    assert match_script_text(ctx, "$gameSwitches.setValue(3, true);") is not None
    assert match_script_text(ctx, "$gameVariables.setValue(3, true);") is None


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("$gameVariables.value( 7 )", True),
        ("$gameVariables.value(70)", False),
        ("$gameVariables.setValue( 7,1)", True),
        ("$gameVariables.setValue(77,1)", False),
    ],
)
def test_boundary_patterns_tolerate_whitespace(text: str, expected: bool) -> None:
    read, write = script_signatures("$gameVariables", 7)

    assert (read.found_in(text, ScriptMatchMode.BOUNDARY) or write.found_in(text, ScriptMatchMode.BOUNDARY)) is expected


def test_unrelated_script_has_no_match() -> None:
    assert match_script_text(switch_context(7, SWITCH_NAMES), "console.log('hi');") is None
