"""Physical and swap memory totals."""

from __future__ import annotations

from dataclasses import asdict, dataclass

import psutil

from hostprobe.common import CollectionError, bytes_to_mb


@dataclass
class MemoryInfo:
    """Memory sizes in mebibytes."""

    total: int
    available: int
    swap_total: int

    def to_dict(self) -> dict:
        return asdict(self)


def collect_memory_info() -> MemoryInfo:
    """Collect total and available RAM and total swap, in MiB."""
    try:
        virtual = psutil.virtual_memory()
    except (OSError, RuntimeError) as exc:
        raise CollectionError(f"failed to collect memory stats: {exc}") from exc
    try:
        swap = psutil.swap_memory()
    except (OSError, RuntimeError) as exc:
        raise CollectionError(f"failed to collect swap memory stats: {exc}") from exc
    return MemoryInfo(
        total=bytes_to_mb(virtual.total),
        available=bytes_to_mb(virtual.available),
        swap_total=bytes_to_mb(swap.total),
    )