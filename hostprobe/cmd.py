"""Presence and version of common container and cluster tools."""

from __future__ import annotations

import re
import shutil
from dataclasses import asdict, dataclass

from hostprobe.common import CommandError, run_cmd

_VERSION_RE = re.compile(r"v?(\d+\.\d+\.\d+)", re.ASCII)

_COMMANDS: dict[str, tuple[str, ...]] = {
    "docker": ("docker", "--version"),
    "nerdctl": ("nerdctl", "version", "-f", "{{.Client.Version}}"),
    "helm": ("helm", "version", "--short"),
    "kubelet": ("kubelet", "--version"),
    "kubeadm": ("kubeadm", "version", "-o", "short"),
}


@dataclass
class CommonCmdInfo:
    """Whether a tool exists, what it printed and the version found in it."""

    name: str
    output: str
    exist: bool
    version: str

    def to_dict(self) -> dict:
        return asdict(self)


def extract_version(output: str) -> str:
    """Return the first x.y.z version (with optional leading 'v') in output, or ''."""
    match = _VERSION_RE.search(output)
    return match.group(0) if match else ""


def _probe(name: str, argv: tuple[str, ...]) -> CommonCmdInfo:
    program, *args = argv
    if shutil.which(program) is None:
        return CommonCmdInfo(name=name, output="not found", exist=False, version="")
    try:
        out = run_cmd(program, *args)
    except CommandError:
        return CommonCmdInfo(name=name, output="", exist=True, version="")
    return CommonCmdInfo(
        name=name, output=out.strip(), exist=True, version=extract_version(out)
    )


def collect_common_cmd_info() -> list[CommonCmdInfo]:
    """Probe each known tool and report its presence and version."""
    return [_probe(name, argv) for name, argv in _COMMANDS.items()]