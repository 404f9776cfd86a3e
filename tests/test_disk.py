import pytest

import hostprobe.disk as disk
from hostprobe.common import CollectionError
from hostprobe.disk import (
    block_device_name,
    collect_disk_info,
    get_disk_type,
    get_disk_usage,
    is_ignored_mount,
)


@pytest.mark.parametrize("fstype", ["tmpfs", "OVERLAY", "proc", "squashfs"])
def test_ignored_fstypes(fstype):
    assert is_ignored_mount(fstype, "/data") is True


@pytest.mark.parametrize(
    "mount", ["/dev/shm", "/run/user/1000", "/boot/efi", "/var/lib/docker/x"]
)
def test_ignored_prefixes(mount):
    assert is_ignored_mount("ext4", mount) is True


def test_real_mount_not_ignored():
    assert is_ignored_mount("xfs", "/data") is False
    assert is_ignored_mount("ext4", "/") is False


def test_block_device_name():
    assert block_device_name("/dev/sda1") == "sda"
    assert block_device_name("/dev/hdb12") == "hdb"
    assert block_device_name("/dev/nvme0n1p1") == "nvme0n1p1"
    assert block_device_name("/dev/vda") == "vda"


def _rotational(root, name, value):
    queue = root / name / "queue"
    queue.mkdir(parents=True)
    (queue / "rotational").write_text(value)


def test_get_disk_type(tmp_path, monkeypatch):
    monkeypatch.setattr(disk, "_SYS_BLOCK", tmp_path)
    _rotational(tmp_path, "sda", "0\n")
    _rotational(tmp_path, "sdb", "1\n")
    assert get_disk_type("/dev/sda1") == "ssd"
    assert get_disk_type("/dev/sdb") == "hdd"
    assert get_disk_type("/dev/sdc1") == "unknown"


def test_get_disk_usage_invariants(tmp_path):
    usage = get_disk_usage(str(tmp_path))
    assert usage["path"] == str(tmp_path)
    assert usage["total"] >= usage["free"] >= 0
    assert 0 <= usage["used_percent"] <= 100
    assert usage["inodes_used"] + usage["inodes_free"] == usage["inodes_total"]


def test_get_disk_usage_missing(tmp_path):
    with pytest.raises(CollectionError):
        get_disk_usage(str(tmp_path / "missing"))


def test_collect_disk_info_entries():
    info = collect_disk_info()
    assert all(not is_ignored_mount(d["fstype"], d["mount_path"]) for d in info)
    assert all(d["disk_type"] in {"ssd", "hdd", "unknown"} for d in info)
    assert all(d["free_percent"].lstrip("-").isdigit() for d in info)