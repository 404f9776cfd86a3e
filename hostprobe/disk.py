"""Mounted filesystems, their usage and the kind of disk behind them."""

from __future__ import annotations

import logging
import os
import struct
from pathlib import Path

import psutil

from hostprobe.common import CollectionError, bytes_to_mb

_log = logging.getLogger(__name__)

_SYS_BLOCK = Path("/sys/block")

_IGNORED_FSTYPES = frozenset(
    {"tmpfs", "devtmpfs", "overlay", "shm", "squashfs", "proc", "sysfs", "cgroup", "devfs"}
)
_IGNORED_MOUNT_PREFIXES = (
    "/dev", "/run", "/var/run", "/boot",
    "/var/lib/docker", "/var/lib/kubelet", "/var/lib/containerd",
)


def is_ignored_mount(fstype: str, mount: str) -> bool:
    """Whether a mount is a pseudo or container filesystem not worth reporting."""
    return fstype.lower() in _IGNORED_FSTYPES or mount.startswith(_IGNORED_MOUNT_PREFIXES)


def block_device_name(device: str) -> str:
    """Block device name of a device path; sd*/hd* lose the partition number."""
    trimmed = device.rstrip("/")
    base = trimmed.rsplit("/", 1)[-1] if trimmed else ("/" if device else ".")
    if base.startswith(("sd", "hd")):
        base = base.rstrip("0123456789")
    return base


def get_disk_type(device: str) -> str:
    """Return 'ssd', 'hdd' or 'unknown' from the kernel's rotational flag."""
    try:
        data = (_SYS_BLOCK / block_device_name(device) / "queue" / "rotational").read_text()
    except OSError:
        return "unknown"
    return "ssd" if data.strip() == "0" else "hdd"


def get_disk_usage(path: str) -> dict:
    """Space (bytes) and inode usage of the filesystem holding path."""
    try:
        st = os.statvfs(path)
    except OSError as exc:
        _log.info("failed to get usage for %s : %s", path, exc)
        raise CollectionError(f"failed to get usage for {path}: {exc}") from exc

    free = st.f_bavail * st.f_frsize
    used = (st.f_blocks - st.f_bfree) * st.f_frsize
    return {
        "path": path,
        "total": st.f_blocks * st.f_frsize,
        "free": free,
        "used": used,
        "used_percent": used / (used + free) * 100 if used + free else 0.0,
        "inodes_total": st.f_files,
        "inodes_used": st.f_files - st.f_ffree,
        "inodes_free": st.f_ffree,
    }


def collect_disk_info() -> list[dict]:
    """Report every real mounted filesystem with sizes in MiB."""
    try:
        partitions = psutil.disk_partitions(all=False)
    except OSError as exc:
        raise CollectionError(f"failed to list partitions: {exc}") from exc

    result: list[dict] = []
    for part in partitions:
        if is_ignored_mount(part.fstype, part.mountpoint):
            continue
        try:
            usage = get_disk_usage(part.mountpoint)
        except CollectionError:
            continue
        free_percent = struct.unpack("f", struct.pack("f", 100 - usage["used_percent"]))[0]
        result.append(
            {
                "device": part.device,
                "mount_path": usage["path"],
                "disk_type": get_disk_type(part.device),
                "total": bytes_to_mb(usage["total"]),
                "free": bytes_to_mb(usage["free"]),
                "used": bytes_to_mb(usage["used"]),
                "fstype": part.fstype,
                "inodes_total": usage["inodes_total"],
                "inodes_used": usage["inodes_used"],
                "inodes_free": usage["inodes_free"],
                "free_percent": f"{free_percent:.0f}",
            }
        )
    return result