"""CPU model, core count, clock and feature flags."""

from __future__ import annotations

import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path

import psutil

from hostprobe.common import CollectionError

_CPUINFO_PATH = Path("/proc/cpuinfo")


@dataclass
class CPUInfo:
    """Summary of the host CPU, taken from the first processor entry."""

    cores: int
    model: str
    hz: int
    flags: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


def parse_cpuinfo(text: str) -> list[dict]:
    """Parse /proc/cpuinfo text into dicts with "model", "mhz" and "flags"."""
    entries: list[dict] = []
    for line in text.splitlines():
        key, sep, value = line.partition(":")
        key, value = key.strip().lower(), value.strip()
        if not sep:
            continue
        if key == "processor":
            entries.append({"model": "", "mhz": 0.0, "flags": []})
        elif not entries:
            continue
        elif key == "model name":
            entries[-1]["model"] = value
        elif key == "cpu mhz":
            try:
                entries[-1]["mhz"] = float(value)
            except ValueError:
                entries[-1]["mhz"] = 0.0
        elif key in ("flags", "features"):
            entries[-1]["flags"] = value.split()
    return entries


def _fallback_mhz() -> float:
    try:
        freq = psutil.cpu_freq()
    except (OSError, RuntimeError, NotImplementedError):
        return 0.0
    return (freq.max or freq.current or 0.0) if freq else 0.0


def collect_cpu_info() -> CPUInfo:
    """Collect CPU information for this host."""
    try:
        entries = parse_cpuinfo(_CPUINFO_PATH.read_text(errors="replace"))
    except OSError:
        entries = []

    if entries:
        model, mhz, flags = entries[0]["model"], entries[0]["mhz"], entries[0]["flags"]
        mhz = mhz or _fallback_mhz()
    else:
        model, mhz, flags = platform.processor(), _fallback_mhz(), []
        if not model and not mhz:
            raise CollectionError("no CPU information available")

    return CPUInfo(cores=os.cpu_count() or 0, model=model, hz=int(mhz) % 65536, flags=list(flags))