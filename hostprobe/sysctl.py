"""Kernel parameters as reported by sysctl."""

from __future__ import annotations

from hostprobe.common import run_cmd


def parse_sysctl(text: str) -> dict[str, str]:
    """Parse 'key = value' lines; lines without '=' are skipped."""
    result: dict[str, str] = {}
    for line in text.split("\n"):
        key, sep, value = line.partition("=")
        if sep:
            result[key.strip()] = value.strip()
    return result


def collect_sysctl_info() -> dict[str, str]:
    """Run 'sysctl -a' and return all parameters."""
    return dict(parse_sysctl(run_cmd("sysctl", "-a")))