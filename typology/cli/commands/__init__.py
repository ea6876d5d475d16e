"""CLI commands for typology."""

from . import (
    profile,
    types_cmd,
    config_cmd,
)

__all__ = [
    "profile",
    "types_cmd",
    "config_cmd",
]
