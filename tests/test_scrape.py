from pathlib import Path
from types import MappingProxyType

import pytest

from rpgxref.errors import UnknownQueryIdError
from rpgxref.matcher import AccessKind, Query, ScriptMatchMode
from rpgxref.model import Opcode, decode_common_events, decode_map_events
from rpgxref.project import ProjectData
from rpgxref.scrape import (
    CommonEventAccessRecord,
    MapAccessRecord,
    ScrapeOptions,
    run_scrape,
    scrape_project,
)
from tests._shared_cases import (
    SWITCH_NAMES,
    VARIABLE_NAMES,
    raw_command,
    raw_common_event,
    raw_condition,
    raw_event,
    raw_page,
    write_project,
)

FIELD_EVENTS = [
    raw_event(
        3,
        "Sign",
        [
            raw_page(
                [
                    raw_command(Opcode.CONTROL_VARIABLES, 7, 7, 1, 0, 1),
                    raw_command(101, "", 0, 0, 2),
                    raw_command(Opcode.IF, 1, 7, 0, 3, 1),
                ],
                conditions=raw_condition(variable_id=7, variable_valid=True, variable_value=2),
            ),
            raw_page([raw_command(Opcode.SCRIPT, "$gameVariables.value(7);")]),
        ],
        x=2,
        y=5,
    ),
    raw_event(4, "Guard", [raw_page([raw_command(Opcode.CONTROL_VARIABLES, 5, 10, 0, 0, 0)])]),
]

TOWN_EVENTS = [raw_event(1, "Idle", [raw_page([raw_command(Opcode.CONTROL_VARIABLES, 8, 8, 0, 0, 1)])])]

COMMON_EVENTS = [
    raw_common_event(1, "Setup", [raw_command(Opcode.CONTROL_VARIABLES, 7, 7, 0, 0, 0)]),
    raw_common_event(2, "Lights Loop", [raw_command(Opcode.CONTROL_SWITCHES, 7, 7, 1)], switch_id=7, trigger=2),
]


def _project() -> ProjectData:
    return ProjectData(
        map_names=MappingProxyType({2: "Town", 1: "Field"}),
        events_by_map=MappingProxyType(
            {
                2: decode_map_events(TOWN_EVENTS),
                1: decode_map_events(FIELD_EVENTS),
            }
        ),
        common_events=decode_common_events([None, *COMMON_EVENTS]),
        variable_names=MappingProxyType(VARIABLE_NAMES),
        switch_names=MappingProxyType(SWITCH_NAMES),
    )


def _summary(record: MapAccessRecord) -> tuple[int, int, int | None, AccessKind, str]:
    return (record.event.id, record.page, record.line, record.access, record.description)


def test_scrape_walks_pages_then_commands_in_order() -> None:
    result = scrape_project(_project(), Query.variable(7))

    assert list(result.map_results) == [1]
    assert [_summary(record) for record in result.map_results[1]] == [
        (3, 1, None, AccessKind.READ, "IF {Quest Stage} >= 2:"),
        (3, 1, 1, AccessKind.WRITE, "{Quest Stage} += 1"),
        (3, 1, 3, AccessKind.READ, "If: {Quest Stage} >= 3:"),
        (3, 2, 1, AccessKind.READ, "$gameVariables.value(7);"),
        (4, 1, 1, AccessKind.WRITE, "{Gold} .. {Score} = 0"),
    ]
    assert [record.common_event_id for record in result.common_event_records()] == [1]


def test_scrape_totals_cover_maps_and_common_events() -> None:
    result = scrape_project(_project(), Query.variable(7))

    assert result.total_instance_count == 6
    assert result.total_instance_count == len(result.map_records()) + len(result.common_event_records())
    assert result.query_name == "Quest Stage"
    assert result.has_results is True


def _generated_project(*, maps: int, events_per_map: int, common_events: int, writes: int) -> ProjectData:
    commands = [raw_command(Opcode.CONTROL_VARIABLES, 7, 7, 0, 0, n) for n in range(writes)]
    events = [raw_event(event_id, f"E{event_id}", [raw_page(commands)]) for event_id in range(1, events_per_map + 1)]
    return ProjectData(
        map_names=MappingProxyType({map_id: f"Map {map_id}" for map_id in range(1, maps + 1)}),
        events_by_map=MappingProxyType({map_id: decode_map_events(events) for map_id in range(1, maps + 1)}),
        common_events=decode_common_events(
            [None, *(raw_common_event(ce_id, f"CE{ce_id}", commands) for ce_id in range(1, common_events + 1))]
        ),
        variable_names=MappingProxyType(VARIABLE_NAMES),
    )


@pytest.mark.parametrize(
    ("maps", "events_per_map", "common_events", "writes", "expected"),
    [
        (0, 0, 0, 3, 0),
        (3, 2, 0, 2, 12),
        (0, 0, 4, 3, 12),
        (5, 3, 6, 2, 42),
        (2, 2, 2, 0, 0),
    ],
)
def test_total_instance_count_is_sum_of_group_sizes(
    maps: int,
    events_per_map: int,
    common_events: int,
    writes: int,
    expected: int,
) -> None:
    project = _generated_project(
        maps=maps,
        events_per_map=events_per_map,
        common_events=common_events,
        writes=writes,
    )

    result = scrape_project(project, Query.variable(7))

    group_sizes = [len(group) for group in result.map_results.values()]
    group_sizes += [len(group) for group in result.common_event_results.values()]
    assert result.total_instance_count == sum(group_sizes) == expected
    assert result.has_results is (expected > 0)


def test_map_groups_are_ascending_by_map_id() -> None:
    result = scrape_project(_project(), Query.variable(8))

    assert list(result.map_results) == [1, 2]
    assert result.map_name(2) == "Town"


def test_condition_only_page_yields_single_active_read(tmp_path: Path) -> None:
    write_project(
        tmp_path,
        maps={
            1: (
                "Field",
                [
                    raw_event(
                        1,
                        "Gate",
                        [raw_page(conditions=raw_condition(variable_id=7, variable_valid=True, variable_value=3))],
                    )
                ],
            )
        },
    )

    result = run_scrape(Query.variable(7), root=tmp_path)

    records = result.map_records()
    assert len(records) == 1
    record = records[0]
    assert record.access == AccessKind.READ
    assert record.active is True
    assert record.page == 1
    assert record.line is None
    assert record.description == "IF {Quest Stage} >= 3:"


def test_switch_mode_scrapes_triggers_and_control_switches() -> None:
    result = scrape_project(_project(), Query.switch(7))

    records = result.common_event_records()
    assert [(r.line, r.access, r.description) for r in records] == [
        (None, AccessKind.READ, "Parallel while {Lights} is ON"),
        (1, AccessKind.WRITE, "{Lights} = OFF"),
    ]
    assert all(isinstance(r, CommonEventAccessRecord) for r in records)
    assert result.map_results == {}


def test_active_only_drops_disabled_conditions() -> None:
    project = ProjectData(
        map_names=MappingProxyType({1: "Field"}),
        events_by_map=MappingProxyType(
            {
                1: decode_map_events(
                    [raw_event(1, "Gate", [raw_page(conditions=raw_condition(variable_id=7, variable_value=3))])]
                )
            }
        ),
        variable_names=MappingProxyType(VARIABLE_NAMES),
    )

    everything = scrape_project(project, Query.variable(7))
    active_only = scrape_project(project, Query.variable(7), options=ScrapeOptions(include_inactive=False))

    assert [r.active for r in everything.map_records()] == [False]
    assert active_only.has_results is False


def test_script_match_mode_is_configurable() -> None:
    project = ProjectData(
        map_names=MappingProxyType({1: "Field"}),
        events_by_map=MappingProxyType(
            {1: decode_map_events([raw_event(1, "A", [raw_page([raw_command(355, "$gameVariables.setValue(12, 0);")])])])}
        ),
        variable_names=MappingProxyType({1: "One", 12: "Twelve"}),
    )

    boundary = scrape_project(project, Query.variable(1))
    substring = scrape_project(project, Query.variable(1), options=ScrapeOptions.for_mode(ScriptMatchMode.SUBSTRING))

    assert boundary.total_instance_count == 0
    assert substring.total_instance_count == 1


def test_unknown_query_id_fails_before_scanning() -> None:
    for query in (Query.variable(99), Query.variable(0), Query.switch(2)):
        try:
            scrape_project(_project(), query)
        except UnknownQueryIdError as exc:
            assert exc.query_id == query.id
            assert "doesn't exist as a predefined" in str(exc)
        else:
            raise AssertionError(f"Expected UnknownQueryIdError for {query}")


def test_run_scrape_rejects_project_with_root(tmp_path: Path) -> None:
    try:
        run_scrape(Query.variable(7), project=_project(), root=tmp_path)
    except ValueError as exc:
        assert "Pass either project or root/load_options, not both" in str(exc)
    else:
        raise AssertionError("Expected ValueError when passing project and root together")


def test_run_scrape_requires_a_source() -> None:
    try:
        run_scrape(Query.variable(7))
    except ValueError as exc:
        assert "Pass a decoded project or a project root" in str(exc)
    else:
        raise AssertionError("Expected ValueError without project or root")
