"""Command-line interface for typology."""

from .app import app

__all__ = ["app"]
