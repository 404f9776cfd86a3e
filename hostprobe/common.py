"""Shared helpers: command execution, debug switch and unit conversion."""

from __future__ import annotations

import logging
import subprocess

_log = logging.getLogger(__name__)

_debug_mode = False


class CollectionError(Exception):
    """Raised when a piece of host information cannot be collected."""


class CommandError(CollectionError):
    """Raised when an external command cannot be started or exits non-zero."""

    def __init__(self, command, args, reason, stderr="", returncode=None):
        self.command = command
        self.args_list = tuple(args)
        self.reason = reason
        self.stderr = stderr
        self.returncode = returncode
        joined = " ".join(self.args_list)
        super().__init__(f"command '{command} {joined}' failed: {reason}\nstderr: {stderr}")


def set_debug_mode(enabled: bool) -> None:
    """Switch verbose logging of commands and collection failures on or off."""
    global _debug_mode
    _debug_mode = bool(enabled)


def is_debug_mode() -> bool:
    """Return whether debug mode is on."""
    return _debug_mode


def run_cmd(command: str, *args: str) -> str:
    """Run a command and return its standard output; raise CommandError on failure."""
    stdout = stderr = ""
    returncode = None
    try:
        proc = subprocess.run(
            [command, *args], capture_output=True, text=True, errors="replace", check=False
        )
    except FileNotFoundError:
        status = f'exec: "{command}": executable file not found in $PATH'
    except OSError as exc:
        status = str(exc)
    else:
        stdout, stderr, returncode = proc.stdout, proc.stderr, proc.returncode
        status = None if returncode == 0 else f"exit status {returncode}"

    if _debug_mode:
        _log.debug("Command: %s %s", command, " ".join(args))
        _log.debug("Stdout: %s", stdout.strip())
        _log.debug("Stderr: %s", stderr.strip())
        _log.debug("Status: %s", status)

    if status is not None:
        raise CommandError(command, args, status, stderr, returncode)
    return stdout


def bytes_to_mb(value: int) -> int:
    """Convert a byte count to whole mebibytes, rounding down."""
    return int(value) // (1024 * 1024)