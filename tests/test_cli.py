import json

import pytest
import yaml

from hostprobe.cli import (
    collect_all,
    get_collectors,
    main,
    parse_filter,
    render,
    should_collect,
)

NAMES = {
    "cpu",
    "memory",
    "disk",
    "gpu",
    "network",
    "os",
    "command",
    "port",
    "sysctl",
    "ulimit",
}


def test_get_collectors_names():
    collectors = get_collectors()
    assert set(collectors) == NAMES
    assert all(callable(fn) for fn in collectors.values())


def test_should_collect_without_filters():
    assert should_collect("cpu", set()) is True


def test_should_collect_with_filters():
    assert should_collect("cpu", {"cpu", "disk"}) is True
    assert should_collect("memory", {"cpu", "disk"}) is False


def test_parse_filter_empty():
    assert parse_filter("") == set()


def test_parse_filter_trims():
    assert parse_filter(" cpu , disk,os") == {"cpu", "disk", "os"}


def test_collect_all_unknown_filter_collects_nothing():
    assert collect_all({"nothing-here"}) == {}


def test_render_json_round_trip():
    data = {"b": [1, 2], "a": {"x": "y"}, "c": None}
    text = render(data, "json")
    assert json.loads(text) == data
    assert text.index('"a"') < text.index('"b"')


def test_render_json_case_insensitive():
    data = {"k": "v"}
    assert json.loads(render(data, "JSON")) == data


def test_render_yaml_round_trip():
    data = {"sysctl": {"vm.swappiness": "60"}, "cpu": {"cores": 4, "flags": ["fpu"]}}
    assert yaml.safe_load(render(data, "yaml")) == data


def test_render_unsupported_format():
    with pytest.raises(ValueError):
        render({}, "xml")


def test_main_list(capsys):
    assert main(["-l"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert {line.removeprefix("- ") for line in lines} == NAMES
    assert all(line.startswith("- ") for line in lines)


def test_main_json_empty(capsys):
    assert main(["-f", "nothing-here"]) == 0
    assert json.loads(capsys.readouterr().out) == {}


def test_main_yaml_empty(capsys):
    assert main(["-f", "nothing-here", "-o", "yaml"]) == 0
    assert yaml.safe_load(capsys.readouterr().out) == {}


def test_main_unsupported_format(capsys):
    assert main(["-f", "nothing-here", "-o", "xml"]) == 1
    assert capsys.readouterr().out == ""