# hostprobe

hostprobe takes a snapshot of a Linux host and prints it as JSON or YAML.
It is meant as a check before deployment. Run it on a machine and you get one
document with the machine's CPU, memory, disks, GPUs, network interfaces, OS
details, installed tools, listening ports, kernel parameters and resource
limits.

## Installation

```
pip install .
```

## Usage

To collect everything and print it as JSON:

```
hostprobe
```

To print YAML instead (the format name is case-insensitive):

```
hostprobe -o yaml
```

To collect only some sections, give their names separated by commas:

```
hostprobe -f cpu,memory,disk
```

To list the available sections:

```
hostprobe -l
```

To turn on debug logging on standard error:

```
hostprobe -d
```

In debug mode each external command is logged with its output and exit status, and every collector that fails is logged as a warning.

To print the version:

```
hostprobe --version
```

The top-level keys of the output are sorted.

If `-o` names a format other than `json` or `yaml`, hostprobe logs an error and exits with status 1.

### Sections

| Name      | Contents                                                                     |
|-----------|------------------------------------------------------------------------------|
| `cpu`     | core count, model, clock speed (MHz), CPU flags                              |
| `memory`  | total and available memory, swap total (MiB)                                 |
| `disk`    | real mounted filesystems: size in MiB, free percentage, inodes, `ssd`/`hdd`  |
| `gpu`     | NVIDIA GPUs: model, driver, CUDA version, per-card memory; or a Hygon entry  |
| `network` | interfaces that are up and not virtual, with CIDR addresses and byte counts  |
| `os`      | OS name and version, kernel, hostname, arch, firewall, SELinux, private IPv4 |
| `command` | presence, output and version of docker, nerdctl, helm, kubelet, kubeadm      |
| `port`    | listening TCP and UDP ports with the process information from `ss -tunlp`   |
| `sysctl`  | every key reported by `sysctl -a`                                            |
| `ulimit`  | limits reported by `ulimit -a`, with keys joined by underscores              |

A section that cannot be collected is reported as `null`. This happens, for example, when there is no supported GPU or when `ss`, `sysctl` or `lspci` is missing.

In the `command` section a missing tool is not `null`. It appears with `"exist": false` and `"output": "not found"`.

## Using it as a library

```python
from hostprobe.cli import collect_all, parse_filter, render

data = collect_all(parse_filter("cpu,memory"))
print(render(data, "yaml"))
```

Each collector can also be called on its own. Examples are `hostprobe.memory.collect_memory_info()` and `hostprobe.disk.collect_disk_info()`. Collectors raise `hostprobe.common.CollectionError` when they fail. When an external command fails they raise its subclass `CommandError`.

The parsers work on output you already have:

- `hostprobe.ports.parse_ss_output(text)`
- `hostprobe.sysctl.parse_sysctl(text)`
- `hostprobe.ulimit.parse_ulimit(text)`
- `hostprobe.cpu.parse_cpuinfo(text)`
- `hostprobe.gpu.parse_nvidia_cards(text)`
- `hostprobe.gpu.parse_driver_output(text)`
- `hostprobe.gpu.parse_cuda_version(text)`

Other helpers:

- `hostprobe.util.tools` has `read_yaml`, `truncate_string`, `to_float`, `is_numeric`, `is_version`, `get_int_part`, `split_key`, `get_dir_mount_point` and `trim_protocol`.
- `hostprobe.util.flag` formats aligned help lines for `Flag` objects, through `format_flag`, `print_flag` and `print_flags`.
- `hostprobe.logger` has `debug_log` and `error_log`, which write prefixed log messages. `set_debug` switches them off or on.

## What it does not do

hostprobe reports once and exits. It does not run as a service, does not watch values over time, does not store results and does not collect from remote hosts.

It reads `/proc`, `/sys` and standard Linux commands, so on other systems most sections come out `null` or empty.

For Hygon GPUs it reports only the vendor and a fixed model name. The driver and CUDA versions are `unknown`, and it lists no cards.

## Running the tests

```
pip install ".[test]"
pytest
```