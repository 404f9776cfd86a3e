"""Small helpers for parsing values, strings and paths."""

from __future__ import annotations

import os
import re
from pathlib import Path

import yaml

_MOUNTINFO = Path("/proc/self/mountinfo")
_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)
_PROTOCOLS = ("http://", "https://", "tcp://", "udp://", "s3://")


def read_yaml(filename) -> dict:
    """Load a YAML file whose top level is a mapping; an empty file gives {}."""
    with open(filename, encoding="utf-8") as handle:
        data = yaml.safe_load(handle)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{filename}: top level of YAML document is not a mapping")
    return data


def truncate_string(s: str, max_len: int, enable: bool) -> str:
    """Cut s to max_len characters ending in '...' when enabled and too long."""
    if not enable or len(s) <= max_len:
        return s
    if max_len < 3:
        raise ValueError("max_len must be at least 3 to truncate")
    return s[: max_len - 3] + "..."


def _parse_float(s: str) -> float | None:
    if not s or s != s.strip() or "_" in s:
        return None
    try:
        return float(s)
    except ValueError:
        return None


def to_float(value) -> float:
    """Convert an int, float or numeric string to float; anything else gives 0."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    if isinstance(value, str):
        return _parse_float(value) or 0.0
    return 0.0


def is_numeric(s: str) -> bool:
    """Whether s parses as a floating-point number."""
    return _parse_float(s) is not None


def is_version(s: str) -> bool:
    """Whether s looks like a version: optional 'v', digits and at least one dot."""
    if s[:1].lower() == "v":
        s = s[1:]
    return "." in s and all(ch == "." or "0" <= ch <= "9" for ch in s)


def get_int_part(parts: list[str], i: int) -> int:
    """Return parts[i] as an int, or 0 if out of range or not an integer."""
    if not 0 <= i < len(parts) or not _INT_RE.fullmatch(parts[i]):
        return 0
    return int(parts[i])


def split_key(s: str, idx: int) -> str:
    """Split 'category.item.sub': idx 0 gives the category, otherwise the rest."""
    head, _, rest = s.partition(".")
    return head if idx == 0 else rest


def _mount_points() -> list[str]:
    with _MOUNTINFO.open(encoding="utf-8", errors="replace") as handle:
        return [
            re.sub(r"\\([0-7]{3})", lambda m: chr(int(m.group(1), 8)), fields[4])
            for fields in map(str.split, handle)
            if len(fields) >= 5
        ]


def get_dir_mount_point(path) -> str:
    """Return the mount point for path, walking up parent directories."""
    current = os.path.abspath(path)
    if current == "/":
        return "/"
    try:
        points = _mount_points()
    except OSError as exc:
        raise OSError(f"failed to get mount info: {exc}") from exc
    while current != "/":
        for point in points:
            if (point + "/").startswith(current + "/"):
                return point
        current = os.path.dirname(current)
    return "/"


def trim_protocol(endpoint: str) -> str:
    """Strip a leading http, https, tcp, udp or s3 scheme."""
    for proto in _PROTOCOLS:
        if endpoint.startswith(proto):
            return endpoint[len(proto):]
    return endpoint