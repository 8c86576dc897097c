"""Heuristic matching of script call signatures inside free-form script text."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import re

from rpgxref.matcher.context import MatchContext
from rpgxref.matcher.query import AccessKind, AccessMatch, ScriptMatchMode


@dataclass(frozen=True, slots=True)
class ScriptSignature:
    """One fixed call shape, e.g. `$gameVariables.value(12)`."""

    access: AccessKind
    rendered: str
    pattern: re.Pattern[str]

    def found_in(self, text: str, mode: ScriptMatchMode) -> bool:
        if mode == ScriptMatchMode.SUBSTRING:
            return self.rendered in text
        return self.pattern.search(text) is not None


@lru_cache(maxsize=64)
def script_signatures(script_target: str, query_id: int) -> tuple[ScriptSignature, ScriptSignature]:
    """Read signature first, then write; the first one found wins."""
    target = re.escape(script_target)
    read = ScriptSignature(
        access=AccessKind.READ,
        rendered=f"{script_target}.value({query_id})",
        pattern=re.compile(rf"{target}\.value\(\s*{query_id}\s*\)"),
    )
    write = ScriptSignature(
        access=AccessKind.WRITE,
        rendered=f"{script_target}.setValue({query_id}",
        pattern=re.compile(rf"{target}\.setValue\(\s*{query_id}(?!\d)"),
    )
    return read, write


def match_script_text(ctx: MatchContext, text: str) -> AccessMatch | None:
    for signature in script_signatures(ctx.profile.script_target, ctx.query_id):
        if signature.found_in(text, ctx.script_match):
            return AccessMatch(access=signature.access, active=True, description=text)
    return None
