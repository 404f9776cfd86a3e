"""Collect a snapshot of host resources and settings and print it as JSON or YAML."""

__version__ = "0.0.1"