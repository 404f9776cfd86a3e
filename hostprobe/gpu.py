"""GPU vendor, model, driver and per-card memory."""

from __future__ import annotations

import csv
import io
import re
from dataclasses import asdict, dataclass, field

from hostprobe.common import CollectionError, run_cmd

_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)


@dataclass
class GPUCardInfo:
    """One GPU card: index, UUID and memory figures as reported."""

    id: int
    uuid: str
    memory_total: str
    memory_free: str


@dataclass
class GPUInfo:
    """GPU summary for the host."""

    vendor: str
    model: str
    driver_version: str
    cuda_version: str
    cards: list[GPUCardInfo] = field(default_factory=list)
    count: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


def _to_int16(value: int) -> int:
    return ((value + 0x8000) % 0x10000) - 0x8000


def parse_nvidia_cards(text: str) -> list[GPUCardInfo]:
    """Parse 'index,uuid,memory.total,memory.free' CSV rows from nvidia-smi.

    Rows with fewer than four fields are skipped; a non-integer index raises
    CollectionError, as do rows whose field count differs from the first row.
    """
    try:
        rows = [row for row in csv.reader(io.StringIO(text)) if row]
    except csv.Error as exc:
        raise CollectionError(f"invalid nvidia-smi output: {exc}") from exc
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise CollectionError("invalid nvidia-smi output: wrong number of fields")

    cards: list[GPUCardInfo] = []
    for row in rows:
        if len(row) < 4:
            continue
        raw_id = row[0].strip()
        if not _INT_RE.fullmatch(raw_id):
            raise CollectionError(f"invalid GPU ID '{row[0]}'")
        cards.append(
            GPUCardInfo(
                id=_to_int16(int(raw_id)),
                uuid=row[1].strip(),
                memory_total=row[2].strip(),
                memory_free=row[3].strip(),
            )
        )
    return cards


def parse_driver_output(text: str) -> tuple[str, str]:
    """Return (model, driver_version) from the first 'name,driver_version' line."""
    first = text.strip().split("\n")[0]
    fields = first.split(",")
    if len(fields) < 2:
        raise CollectionError(f"unexpected driver output: {first}")
    return fields[0].strip(), fields[1].strip()


def parse_cuda_version(text: str) -> str:
    """Return the CUDA version from 'nvidia-smi --version' output, or 'unknown'."""
    for line in text.split("\n"):
        if "CUDA Version" in line:
            parts = line.split(":")
            if len(parts) > 1:
                return parts[1].strip()
            break
    return "unknown"


def _nvidia_info() -> GPUInfo:
    cards = parse_nvidia_cards(
        run_cmd(
            "nvidia-smi",
            "--query-gpu=index,uuid,memory.total,memory.free",
            "--format=csv,noheader,nounits",
        )
    )
    model, driver = parse_driver_output(
        run_cmd(
            "nvidia-smi",
            "--query-gpu=name,driver_version",
            "--format=csv,noheader,nounits",
        )
    )
    cuda = parse_cuda_version(run_cmd("nvidia-smi", "--version"))
    return GPUInfo(
        vendor="NVIDIA",
        model=model,
        driver_version=driver,
        cuda_version=cuda,
        cards=cards,
        count=len(cards),
    )


def _hygon_info() -> GPUInfo:
    return GPUInfo(
        vendor="Hygon",
        model="Hygon GPU",
        driver_version="unknown",
        cuda_version="unknown",
        cards=[],
    )


def collect_gpu_info() -> GPUInfo:
    """Detect the GPU vendor via lspci and collect its details."""
    listing = run_cmd("lspci").lower()
    if "nvidia" in listing:
        return _nvidia_info()
    if "hygon" in listing:
        return _hygon_info()
    raise CollectionError("no supported GPU (NVIDIA/Hygon) found")