"""Scrape configuration."""

from dataclasses import dataclass

from rpgxref.matcher import ScriptMatchMode


@dataclass(frozen=True, slots=True)
class ScrapeOptions:
    """Flags controlling matching heuristics and result filtering."""

    script_match: ScriptMatchMode = ScriptMatchMode.BOUNDARY
    include_inactive: bool = True

    @staticmethod
    def for_mode(mode: ScriptMatchMode) -> "ScrapeOptions":
        return ScrapeOptions(script_match=mode)
