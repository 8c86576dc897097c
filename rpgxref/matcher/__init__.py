"""Mode-aware reference matcher over decoded bytecode sites."""

from rpgxref.matcher.commands import (
    ASSIGNMENT_OPERATORS,
    COMPARISON_OPERATORS,
    MALFORMED_OPERATION,
    MALFORMED_OPERATOR,
    match_command,
    match_control_switch,
    match_control_variable,
    match_if_command,
    match_script_command,
)
from rpgxref.matcher.conditions import match_common_event_trigger, match_page_condition
from rpgxref.matcher.context import (
    DEFAULT_CONDITION_ID,
    SWITCH_PROFILE,
    VARIABLE_PROFILE,
    MatchContext,
    NameTable,
    QueryKindProfile,
    build_match_context,
    profile_for,
)
from rpgxref.matcher.query import (
    AccessKind,
    AccessMatch,
    Query,
    QueryKind,
    ScriptMatchMode,
)
from rpgxref.matcher.script import ScriptSignature, match_script_text, script_signatures

__all__ = [
    "ASSIGNMENT_OPERATORS",
    "COMPARISON_OPERATORS",
    "DEFAULT_CONDITION_ID",
    "MALFORMED_OPERATION",
    "MALFORMED_OPERATOR",
    "SWITCH_PROFILE",
    "VARIABLE_PROFILE",
    "AccessKind",
    "AccessMatch",
    "MatchContext",
    "NameTable",
    "Query",
    "QueryKind",
    "QueryKindProfile",
    "ScriptMatchMode",
    "ScriptSignature",
    "build_match_context",
    "match_command",
    "match_common_event_trigger",
    "match_control_switch",
    "match_control_variable",
    "match_if_command",
    "match_page_condition",
    "match_script_command",
    "match_script_text",
    "profile_for",
    "script_signatures",
]
