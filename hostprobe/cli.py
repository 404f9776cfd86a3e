"""Command-line entry point: run the collectors and print the result."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys

import yaml

from hostprobe.cmd import collect_common_cmd_info
from hostprobe.common import CollectionError, is_debug_mode, set_debug_mode
from hostprobe.cpu import collect_cpu_info
from hostprobe.disk import collect_disk_info
from hostprobe.gpu import collect_gpu_info
from hostprobe.memory import collect_memory_info
from hostprobe.network import collect_network_info
from hostprobe.ports import collect_ports_info
from hostprobe.sysctl import collect_sysctl_info
from hostprobe.system import collect_os_info
from hostprobe.ulimit import collect_ulimit_info

BUILD_VERSION = "0.0.1-dev"

_log = logging.getLogger(__name__)


def get_collectors():
    """Map each collector name to the function that gathers its data."""
    return {
        "cpu": collect_cpu_info,
        "memory": collect_memory_info,
        "disk": collect_disk_info,
        "gpu": collect_gpu_info,
        "network": collect_network_info,
        "os": collect_os_info,
        "command": collect_common_cmd_info,
        "port": collect_ports_info,
        "sysctl": collect_sysctl_info,
        "ulimit": collect_ulimit_info,
    }


def should_collect(name, filters) -> bool:
    """Whether a collector runs: always when no filter is given, else if named."""
    filters = set(filters)
    return not filters or name in filters


def parse_filter(value: str) -> set[str]:
    """Split a comma-separated filter into trimmed names; '' means no filter."""
    return {part.strip() for part in value.split(",")} if value else set()


def _plain(value):
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def collect_all(filters) -> dict:
    """Run the selected collectors; a failed collector yields None."""
    filters = set(filters)
    data = {}
    for name, collect in get_collectors().items():
        if not should_collect(name, filters):
            continue
        try:
            data[name] = _plain(collect())
        except (CollectionError, OSError, ValueError) as exc:
            if is_debug_mode():
                _log.warning("Collection failed: %s", exc)
            data[name] = None
    return data


def render(data: dict, fmt: str) -> str:
    """Serialise data as 'json' or 'yaml' (case-insensitive); keys are sorted."""
    kind = fmt.lower()
    ordered = dict(sorted(data.items()))
    if kind == "yaml":
        return yaml.safe_dump(ordered, sort_keys=False, allow_unicode=True)
    if kind == "json":
        return json.dumps(ordered, indent=2, ensure_ascii=False)
    raise ValueError(f"Unsupported output format: {fmt}")


def main(argv=None) -> int:
    """Parse arguments, collect host information and print it."""
    parser = argparse.ArgumentParser(description="System Resource Collector")
    parser.add_argument("-o", "--output", default="json", help="Output format: json or yaml")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("-l", "--list", action="store_true", help="List all supported collector fields")
    parser.add_argument("-f", "--filter", default="", help="Only collect specific info (e.g. all)")
    parser.add_argument("--version", action="version", version=BUILD_VERSION)
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
        set_debug_mode(True)
        _log.info("Debug mode enabled")

    if args.list:
        for name in get_collectors():
            print("- " + name)
        return 0

    if args.output.lower() not in ("json", "yaml"):
        _log.error("Unsupported output format: %s", args.output)
        return 1
    data = collect_all(parse_filter(args.filter))
    try:
        text = render(data, args.output)
    except (TypeError, ValueError, yaml.YAMLError) as exc:
        _log.error("%s encoding failed: %s", args.output.upper(), exc)
        return 1
    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())