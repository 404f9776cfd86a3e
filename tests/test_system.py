import subprocess
from unittest import mock

import pytest

import hostprobe.system as system
from hostprobe.system import (
    SystemInfo,
    collect_os_info,
    detect_firewall,
    detect_selinux,
    extract_kernel_version,
    is_excluded_interface,
    private_ipv4_addresses,
)


def _returning(stdout, code=0):
    def run(argv, **kwargs):
        return subprocess.CompletedProcess(argv, code, stdout, "")

    return run


def _missing(argv, **kwargs):
    raise FileNotFoundError(argv[0])


@pytest.mark.parametrize("name", ["docker0", "br-1a2b", "lo", "cni0", "kube-ipvs0"])
def test_excluded_interfaces(name):
    assert is_excluded_interface(name) is True


def test_not_excluded_interface():
    assert is_excluded_interface("eth0") is False


def test_private_ipv4_addresses():
    given = ["10.0.0.1", "8.8.8.8", "127.0.0.1", "192.168.1.5/24", "fe80::1", "bogus"]
    assert private_ipv4_addresses(given) == ["10.0.0.1", "192.168.1.5"]


def test_private_ipv4_range_edges():
    assert private_ipv4_addresses(["172.16.0.1", "172.32.0.1"]) == ["172.16.0.1"]


def test_private_ipv4_mapped():
    assert private_ipv4_addresses(["::ffff:10.1.2.3"]) == ["10.1.2.3"]


def test_extract_kernel_version():
    assert extract_kernel_version("5.15.0-91-generic") == "5.15.0"
    assert extract_kernel_version("unknown") == ""


def test_detect_firewall_unknown_platform():
    assert detect_firewall("arch") == "inactive"


def test_detect_firewall_active():
    with mock.patch("subprocess.run", _returning("active\n")):
        assert detect_firewall("Ubuntu") == "active"


def test_detect_firewall_stopped():
    with mock.patch("subprocess.run", _returning("inactive\n", 3)):
        assert detect_firewall("centos") == "inactive"


def test_detect_selinux_getenforce():
    with mock.patch("subprocess.run", _returning("Enforcing\n")):
        assert detect_selinux() == "enabled"


def test_detect_selinux_config(tmp_path, monkeypatch):
    config = tmp_path / "config"
    config.write_text("# comment\nSELINUX=permissive\n")
    monkeypatch.setattr(system, "_SELINUX_CONFIG", config)
    with mock.patch("subprocess.run", _missing):
        assert detect_selinux() == "enabled"
    config.write_text("SELINUX=disabled\n")
    with mock.patch("subprocess.run", _returning("Disabled\n")):
        assert detect_selinux() == "disabled"


def test_detect_selinux_no_config(tmp_path, monkeypatch):
    monkeypatch.setattr(system, "_SELINUX_CONFIG", tmp_path / "absent")
    with mock.patch("subprocess.run", _missing):
        assert detect_selinux() == "disabled"


def test_collect_os_info():
    info = collect_os_info()
    assert info.firewall in {"active", "inactive"}
    assert info.selinux in {"enabled", "disabled"}
    assert info.current_time.isdigit()
    assert private_ipv4_addresses(info.ip_addrs) == info.ip_addrs


def test_system_info_to_dict():
    info = SystemInfo("inactive", "disabled", "ubuntu", "22.04", "5.15.0", "1", "h", "x86_64")
    data = info.to_dict()
    assert data["os_name"] == "ubuntu"
    assert data["ip_addrs"] == []
    assert len(data) == 9