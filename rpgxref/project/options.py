"""Project loading configuration."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LoadOptions:
    """Where project files live and how loading reports progress."""

    data_dir_name: str = "data"
    show_progress: bool = False
