"""RPG Maker project loading APIs."""

from rpgxref.project.load import (
    COMMON_EVENTS_FILE,
    MAP_INFOS_FILE,
    SYSTEM_FILE,
    load_common_events,
    load_map_events,
    load_map_names,
    load_project,
    load_system_names,
    locate_data_dir,
    read_project_json,
)
from rpgxref.project.model import ProjectData, format_map_file_name
from rpgxref.project.options import LoadOptions

__all__ = [
    "COMMON_EVENTS_FILE",
    "MAP_INFOS_FILE",
    "SYSTEM_FILE",
    "LoadOptions",
    "ProjectData",
    "format_map_file_name",
    "load_common_events",
    "load_map_events",
    "load_map_names",
    "load_project",
    "load_system_names",
    "locate_data_dir",
    "read_project_json",
]
