"""Prefixed debug and error logging that can be silenced."""

import logging

_log = logging.getLogger(__name__)
_enabled = True


def set_debug(enabled):
    """Enable or disable output from debug_log and error_log."""
    global _enabled
    _enabled = bool(enabled)


def debug_log(fmt, *args):
    """Log a debug message, %-formatted with args, when enabled."""
    if _enabled:
        _log.debug("[DEBUG] " + fmt, *args)


def error_log(fmt, *args):
    """Log an error message, %-formatted with args, when enabled."""
    if _enabled:
        _log.error("[ERROR] " + fmt, *args)