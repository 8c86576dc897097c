"""Scrape entrypoints and result carriers."""

from rpgxref.scrape.options import ScrapeOptions
from rpgxref.scrape.results import (
    AccessRecord,
    CommonEventAccessRecord,
    MapAccessRecord,
    ScrapeResult,
)
from rpgxref.scrape.runner import run_scrape, scrape_project

__all__ = [
    "AccessRecord",
    "CommonEventAccessRecord",
    "MapAccessRecord",
    "ScrapeOptions",
    "ScrapeResult",
    "run_scrape",
    "scrape_project",
]
