"""Filesystem loaders for RPG Maker MV/MZ project data."""

from __future__ import annotations

from collections.abc import Mapping
import json
import logging
from pathlib import Path
from types import MappingProxyType

from tqdm import tqdm

from rpgxref.diagnostics import (
    LOAD_COMMON_EVENTS_MISSING,
    LOAD_MAP_FILE_MISSING,
    LOAD_MAP_FILE_UNREADABLE,
    LOAD_MAP_MISSING_EVENTS,
    Diagnostic,
)
from rpgxref.errors import ProjectLoadError, ProjectRootError
from rpgxref.model import CommonEvent, Event, decode_common_events, decode_map_events
from rpgxref.project.model import ProjectData, format_map_file_name
from rpgxref.project.options import LoadOptions

logger = logging.getLogger(__name__)

MAP_INFOS_FILE = "MapInfos.json"
SYSTEM_FILE = "System.json"
COMMON_EVENTS_FILE = "CommonEvents.json"


def load_project(root: str | Path, *, options: LoadOptions | None = None) -> ProjectData:
    """Load and decode everything under `<root>/data` that the scraper reads."""
    resolved_options = options or LoadOptions()
    data_dir = locate_data_dir(root, data_dir_name=resolved_options.data_dir_name)
    diagnostics: list[Diagnostic] = []

    logger.info("populating all the map names...")
    map_names = load_map_names(data_dir)

    logger.info("populating all the variable and switch names...")
    variable_names, switch_names = load_system_names(data_dir)

    logger.info("loading %d maps...", len(map_names))
    events_by_map = load_map_events(
        data_dir,
        map_names,
        diagnostics=diagnostics,
        show_progress=resolved_options.show_progress,
    )

    logger.info("loading common events...")
    common_events = load_common_events(data_dir, diagnostics=diagnostics)

    return ProjectData(
        map_names=MappingProxyType(map_names),
        events_by_map=MappingProxyType(events_by_map),
        common_events=common_events,
        variable_names=MappingProxyType(variable_names),
        switch_names=MappingProxyType(switch_names),
        diagnostics=tuple(diagnostics),
        data_dir=data_dir,
    )


def locate_data_dir(root: str | Path, *, data_dir_name: str = "data") -> Path:
    root_path = Path(root)
    if not root_path.is_dir():
        raise ProjectRootError(f"project root `{root_path}` doesn't exist")
    data_dir = root_path / data_dir_name
    if not data_dir.is_dir():
        raise ProjectRootError(
            f"`{data_dir_name}/` folder doesn't exist under `{root_path}`; "
            "point at the root directory of your RPG Maker project"
        )
    return data_dir


def load_map_names(data_dir: Path) -> dict[int, str]:
    """Map id to display name from `MapInfos.json`; malformed entries are skipped."""
    map_infos = _read_required_json(data_dir / MAP_INFOS_FILE)
    if not isinstance(map_infos, list):
        raise ProjectLoadError(f"{MAP_INFOS_FILE} isn't a JSON array")

    names: dict[int, str] = {}
    for entry in map_infos:
        if not isinstance(entry, Mapping):
            continue
        map_id = entry.get("id")
        name = entry.get("name")
        if not _is_int(map_id) or not isinstance(name, str):
            continue
        names[map_id] = name
    return names


def load_system_names(data_dir: Path) -> tuple[dict[int, str], dict[int, str]]:
    """Variable and switch name tables from `System.json`, indexed by id."""
    system = _read_required_json(data_dir / SYSTEM_FILE)
    if not isinstance(system, Mapping):
        raise ProjectLoadError(f"{SYSTEM_FILE} isn't a JSON object")
    if "variables" not in system and "switches" not in system:
        raise ProjectLoadError(f"{SYSTEM_FILE} doesn't contain variables or switches")
    return _index_names(system.get("variables")), _index_names(system.get("switches"))


def load_map_events(
    data_dir: Path,
    map_names: Mapping[int, str],
    *,
    diagnostics: list[Diagnostic],
    show_progress: bool = False,
) -> dict[int, tuple[Event, ...]]:
    map_ids = sorted(map_names)
    iterator = (
        tqdm(map_ids, desc="scraping maps", unit="map")
        if show_progress
        else map_ids
    )

    events_by_map: dict[int, tuple[Event, ...]] = {}
    for map_id in iterator:
        file_name = format_map_file_name(map_id)
        map_path = data_dir / file_name
        if not map_path.is_file():
            _record(
                diagnostics,
                LOAD_MAP_FILE_MISSING.at(file_name, detail=f"Map id {map_id:03d} expects `{map_path}`."),
            )
            continue
        try:
            map_json = read_project_json(map_path)
        except (OSError, ValueError) as exc:
            _record(diagnostics, LOAD_MAP_FILE_UNREADABLE.at(file_name, detail=str(exc)))
            continue
        raw_events = map_json.get("events") if isinstance(map_json, Mapping) else None
        if not isinstance(raw_events, list):
            _record(diagnostics, LOAD_MAP_MISSING_EVENTS.at(file_name))
            continue

        decode_diagnostics: list[Diagnostic] = []
        events_by_map[map_id] = decode_map_events(
            raw_events,
            path=f"{file_name}/events",
            diagnostics=decode_diagnostics,
        )
        for diagnostic in decode_diagnostics:
            _record(diagnostics, diagnostic)
    return events_by_map


def load_common_events(data_dir: Path, *, diagnostics: list[Diagnostic]) -> tuple[CommonEvent, ...]:
    path = data_dir / COMMON_EVENTS_FILE
    try:
        raw_common_events = read_project_json(path)
    except (OSError, ValueError) as exc:
        _record(diagnostics, LOAD_COMMON_EVENTS_MISSING.at(COMMON_EVENTS_FILE, detail=str(exc)))
        return ()
    if not isinstance(raw_common_events, list):
        _record(diagnostics, LOAD_COMMON_EVENTS_MISSING.at(COMMON_EVENTS_FILE, detail="Not a JSON array."))
        return ()

    decode_diagnostics: list[Diagnostic] = []
    common_events = decode_common_events(
        raw_common_events,
        path=COMMON_EVENTS_FILE,
        diagnostics=decode_diagnostics,
    )
    for diagnostic in decode_diagnostics:
        _record(diagnostics, diagnostic)
    return common_events


def _index_names(raw_names: object) -> dict[int, str]:
    if not isinstance(raw_names, list):
        return {}
    return {
        item_id: name
        for item_id, name in enumerate(raw_names)
        if isinstance(name, str)
    }


def read_project_json(path: Path) -> object:
    """Decode a project JSON file; RPG Maker writes UTF-8, sometimes with a BOM."""
    return json.loads(path.read_bytes().decode("utf-8-sig"))


def _read_required_json(path: Path) -> object:
    if not path.is_file():
        raise ProjectLoadError(f"{path.name} doesn't exist inside `{path.parent}`")
    try:
        return read_project_json(path)
    except (OSError, ValueError) as exc:
        raise ProjectLoadError(f"unable to read {path.name}: {exc}") from exc


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _record(diagnostics: list[Diagnostic], diagnostic: Diagnostic) -> None:
    diagnostics.append(diagnostic)
    if diagnostic.severity == "error":
        logger.error("%s", diagnostic.render())
    else:
        logger.warning("%s", diagnostic.render())
