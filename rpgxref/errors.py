"""Fatal errors surfaced by the scraper; everything else is a diagnostic."""

from __future__ import annotations


class RpgxrefError(Exception):
    """Base class for failures that abort a scrape before it starts."""


class ProjectRootError(RpgxrefError):
    """The project root or its data directory doesn't exist."""


class ProjectLoadError(RpgxrefError):
    """A project file required for every scrape is missing or unreadable."""


class UnknownQueryIdError(RpgxrefError):
    """The queried id isn't a predefined variable/switch in this project."""

    def __init__(self, kind: str, query_id: int) -> None:
        super().__init__(f"{kind} #{query_id:03d} doesn't exist as a predefined {kind} in this game")
        self.kind = kind
        self.query_id = query_id
