"""Physical network interfaces with their addresses and traffic counters."""

from __future__ import annotations

import enum
import ipaddress
import socket
from dataclasses import asdict, dataclass, field

import psutil

from hostprobe.common import CollectionError

_VIRTUAL_PREFIXES = (
    "lo", "br-", "veth", "virbr", "vmnet", "tun", "utun",
    "tap", "flannel", "wg", "kube", "zt", "tailscale",
)


class InterfaceFlag(enum.Flag):
    """Interface state flags that are reported."""

    NONE = 0
    UP = enum.auto()
    LOOPBACK = enum.auto()
    BROADCAST = enum.auto()
    MULTICAST = enum.auto()


@dataclass
class NetInterfaceStats:
    """One interface: name, addresses in CIDR form, flags and byte counters."""

    name: str
    ip_addresses: list[str] = field(default_factory=list)
    flags: list[str] = field(default_factory=list)
    bytes_sent: int = 0
    bytes_recv: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


def is_virtual_interface(name: str) -> bool:
    """Whether the interface name looks like a loopback, bridge or tunnel."""
    return name.startswith(_VIRTUAL_PREFIXES)


def flags_to_strings(flags: InterfaceFlag) -> list[str]:
    """Names of the set flags in the order up, loopback, broadcast, multicast."""
    order = (InterfaceFlag.UP, InterfaceFlag.LOOPBACK, InterfaceFlag.BROADCAST, InterfaceFlag.MULTICAST)
    return [flag.name.lower() for flag in order if flag in flags]


def _interface_flags(stats) -> InterfaceFlag:
    words = set(getattr(stats, "flags", "").split(","))
    result = InterfaceFlag.UP if stats.isup else InterfaceFlag.NONE
    for flag in InterfaceFlag.UP, InterfaceFlag.LOOPBACK, InterfaceFlag.BROADCAST, InterfaceFlag.MULTICAST:
        if flag.name.lower() in words:
            result |= flag
    return result


def _format_address(addr) -> str | None:
    if addr.family not in (socket.AF_INET, socket.AF_INET6):
        return None
    ip = addr.address.split("%", 1)[0]
    try:
        prefix = bin(int(ipaddress.ip_address(addr.netmask))).count("1") if addr.netmask else None
    except ValueError:
        prefix = None
    return ip if prefix is None else f"{ip}/{prefix}"


def collect_network_info() -> list[NetInterfaceStats]:
    """Report interfaces that are up and not virtual."""
    try:
        all_stats = psutil.net_if_stats()
        all_addrs = psutil.net_if_addrs()
        counters = psutil.net_io_counters(pernic=True)
    except OSError as exc:
        raise CollectionError(f"failed to read network interfaces: {exc}") from exc

    result: list[NetInterfaceStats] = []
    for name, stats in all_stats.items():
        flags = _interface_flags(stats)
        if InterfaceFlag.UP not in flags or is_virtual_interface(name):
            continue
        addresses = [_format_address(addr) for addr in all_addrs.get(name, [])]
        entry = NetInterfaceStats(
            name=name,
            ip_addresses=[text for text in addresses if text is not None],
            flags=flags_to_strings(flags),
        )
        counter = counters.get(name)
        if counter is not None:
            entry.bytes_sent, entry.bytes_recv = counter.bytes_sent, counter.bytes_recv
        result.append(entry)
    return result