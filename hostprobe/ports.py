"""Listening TCP and UDP ports as reported by 'ss -tunlp'."""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass, field

from hostprobe.common import run_cmd

_PORT_RE = re.compile(r"(?:[\d\.]+|\[.+\])(?:%\w+)?:(\d+)", re.ASCII)
_USERS_MARK = 'users:(("'
_USERS_PREFIX = "users:(("


@dataclass
class PortUsage:
    """A listening port and the process information ss gave for it."""

    port: str
    process: str


@dataclass
class PortUsageGroup:
    """Listening ports grouped by protocol."""

    tcp: list[PortUsage] = field(default_factory=list)
    udp: list[PortUsage] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


def _process_info(line: str) -> str:
    index = line.find(_USERS_MARK)
    if index <= 0:
        return ""
    info = line[index + len(_USERS_PREFIX):]
    return info.removesuffix("))")


def parse_ss_output(text: str) -> PortUsageGroup:
    """Parse 'ss -tunlp' output, keeping the first entry per protocol and port."""
    result = PortUsageGroup()
    seen: set[str] = set()
    for line in text.split("\n"):
        line = line.strip()
        fields = line.split()
        if len(fields) < 5:
            continue
        protocol = fields[0].lower()
        match = _PORT_RE.search(fields[4])
        if match is None:
            continue
        port = match.group(1)

        key = f"{protocol}:{port}"
        if key in seen:
            continue
        seen.add(key)

        usage = PortUsage(port=port, process=_process_info(line))
        if protocol in ("tcp", "tcp6"):
            result.tcp.append(usage)
        elif protocol in ("udp", "udp6"):
            result.udp.append(usage)
    return result


def collect_ports_info() -> PortUsageGroup:
    """Run 'ss -tunlp' and return the listening ports."""
    return parse_ss_output(run_cmd("ss", "-tunlp"))