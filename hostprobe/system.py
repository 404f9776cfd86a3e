"""Operating system identity, security settings and private IPv4 addresses."""

from __future__ import annotations

import ipaddress
import platform
import re
import socket
import time
from collections.abc import Iterable
from dataclasses import asdict, dataclass, field
from pathlib import Path

import psutil

from hostprobe.common import CommandError, run_cmd

_SELINUX_CONFIG = Path("/etc/selinux/config")

_KERNEL_RE = re.compile(r"v?(\d+\.\d+\.\d+)", re.ASCII)

_EXCLUDE_PREFIXES = (
    "docker",
    "br-",
    "veth",
    "lo",
    "tun",
    "virbr",
    "flannel",
    "cni",
    "nerdctl",
    "kube-",
)

_PRIVATE_V4 = (
    ipaddress.ip_network("10.0.0.0/8"),
    ipaddress.ip_network("172.16.0.0/12"),
    ipaddress.ip_network("192.168.0.0/16"),
)


@dataclass
class SystemInfo:
    """Operating system summary."""

    firewall: str
    selinux: str
    os_name: str
    os_version: str
    kernel: str
    current_time: str
    hostname: str
    arch: str
    ip_addrs: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


def is_excluded_interface(name: str) -> bool:
    """Whether an interface belongs to containers, bridges or loopback."""
    return name.startswith(_EXCLUDE_PREFIXES)


def private_ipv4_addresses(addresses: Iterable[str]) -> list[str]:
    """Keep the private, non-loopback IPv4 addresses, in order.

    Addresses may carry a '/prefix' or '%zone' suffix; unparsable ones are
    skipped, and IPv4-mapped IPv6 addresses count as IPv4.
    """
    result: list[str] = []
    for text in addresses:
        bare = text.split("/", 1)[0].split("%", 1)[0]
        try:
            ip = ipaddress.ip_address(bare)
        except ValueError:
            continue
        if isinstance(ip, ipaddress.IPv6Address):
            if ip.ipv4_mapped is None:
                continue
            ip = ip.ipv4_mapped
        if ip.is_loopback:
            continue
        if any(ip in net for net in _PRIVATE_V4):
            result.append(str(ip))
    return result


def extract_kernel_version(release: str) -> str:
    """Return the first x.y.z version in a kernel release string, or ''."""
    match = _KERNEL_RE.search(release)
    return match.group(0) if match else ""


def _service_active(service: str) -> bool:
    try:
        out = run_cmd("systemctl", "is-active", service)
    except CommandError:
        return False
    return out.strip() == "active"


def detect_firewall(platform: str) -> str:
    """Return 'active' if the distribution's firewall service runs, else 'inactive'."""
    name = platform.lower()
    if "centos" in name or "rhel" in name:
        service = "firewalld"
    elif "ubuntu" in name or "debian" in name:
        service = "ufw"
    else:
        return "inactive"
    return "active" if _service_active(service) else "inactive"


def detect_selinux() -> str:
    """Return 'enabled' or 'disabled' from getenforce or the SELinux config."""
    try:
        if run_cmd("getenforce").strip() != "Disabled":
            return "enabled"
    except CommandError:
        pass
    try:
        config = _SELINUX_CONFIG.read_text(errors="replace")
    except OSError:
        return "disabled"
    for line in config.split("\n"):
        lowered = line.lower()
        if lowered.startswith("selinux=") and "disabled" not in lowered:
            return "enabled"
    return "disabled"


def _os_release() -> tuple[str, str]:
    try:
        info = platform.freedesktop_os_release()
    except OSError:
        return "", ""
    return info.get("ID", ""), info.get("VERSION_ID", "")


def _host_addresses() -> list[str]:
    try:
        all_addrs = psutil.net_if_addrs()
    except OSError:
        return []
    addresses: list[str] = []
    for name, addrs in all_addrs.items():
        if is_excluded_interface(name):
            continue
        addresses.extend(
            a.address for a in addrs if a.family in (socket.AF_INET, socket.AF_INET6)
        )
    return addresses


def collect_os_info() -> SystemInfo:
    """Collect operating system details for this host."""
    os_name, os_version = _os_release()
    uname = platform.uname()
    return SystemInfo(
        firewall=detect_firewall(os_name),
        selinux=detect_selinux(),
        os_name=os_name,
        os_version=os_version,
        kernel=extract_kernel_version(uname.release),
        current_time=str(int(time.time())),
        hostname=uname.node,
        arch=uname.machine,
        ip_addrs=private_ipv4_addresses(_host_addresses()),
    )