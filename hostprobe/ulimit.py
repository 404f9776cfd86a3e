"""Shell resource limits as reported by 'ulimit -a'."""

from __future__ import annotations

import re

from hostprobe.common import CollectionError, CommandError, run_cmd

_PAREN_RE = re.compile(r"\([^)]*\)")


def parse_ulimit_line(line: str) -> tuple[str, str] | None:
    """Turn one 'ulimit -a' line into (key, value), or None if it has no value.

    Parenthesised parts are dropped, the remaining words but the last form the
    key joined with underscores, and the last word is the value.
    """
    fields = _PAREN_RE.sub("", line).split()
    if len(fields) < 2:
        return None
    return "_".join(fields[:-1]), fields[-1]


def parse_ulimit(text: str) -> dict[str, str]:
    """Parse the full output of 'ulimit -a'."""
    result: dict[str, str] = {}
    for line in text.split("\n"):
        line = line.strip()
        if len(line.split()) < 2:
            continue
        parsed = parse_ulimit_line(line)
        if parsed is not None:
            key, value = parsed
            result[key] = value
    return result


def collect_ulimit_info() -> dict[str, str]:
    """Run 'ulimit -a' in a shell and return its limits."""
    try:
        out = run_cmd("sh", "-c", "ulimit -a")
    except CommandError as exc:
        raise CollectionError(f"failed to run ulimit -a: {exc}") from exc
    return parse_ulimit(out)