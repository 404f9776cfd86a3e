"""Aligned help lines for command-line flags."""

from dataclasses import dataclass


@dataclass
class Flag:
    """A command-line flag as shown in help output."""

    name: str
    usage: str = ""
    shorthand: str = ""
    default: str = ""


def format_flag(flag):
    """One help line: shorthand, padded long name, usage and notable default."""
    short = f"-{flag.shorthand}, " if flag.shorthand else ""
    default = "" if flag.default in ("", "[]", "false") else f" (default: {flag.default})"
    return f"{short:>5}--{flag.name:<10} {flag.usage}{default}"


def print_flag(flag):
    """Print the help line of one flag."""
    print(format_flag(flag))


def print_flags(flags):
    """Print help lines for all flags, sorted by name."""
    for flag in sorted(flags, key=lambda f: f.name):
        print_flag(flag)