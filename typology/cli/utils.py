"""CLI utilities for dual-mode output (human-friendly + machine-readable).

This module provides utilities for CLI commands to support both:
- Human mode (default): Rich formatting with colors and tables
- Machine mode (--json): Structured JSON output for scripts and tools

Example:
    from ..utils import Output, ExitCode

    @app.command()
    def my_command():
        out = Output(console=console, json_mode=get_json_mode())
        out.set_data("code", "INTP")
        out.table("Stack", ["Position", "Function"], [["dominant", "Ni"]])
        raise typer.Exit(out.finish())
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel, PrivateAttr, ConfigDict
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..core.models import AttitudeFunction, FunctionStack


class ExitCode:
    """Standardized exit codes for CLI commands.

    Scripts can check $? and know exactly what failed:
        0 = Success
        1 = Validation error (invalid type code, unknown attribute)
        4 = Derivation error (internal consistency defect)
    """

    SUCCESS = 0
    VALIDATION_ERROR = 1
    DERIVATION_ERROR = 4


class Output(BaseModel):
    """Dual-mode output handler for CLI commands.

    In human mode: Uses Rich for pretty terminal output with colors and formatting.
    In JSON mode: Collects structured data and outputs JSON at the end.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    console: Console
    json_mode: bool = False

    _data: dict[str, Any] = PrivateAttr()
    _exit_code: int = PrivateAttr(default=ExitCode.SUCCESS)

    def model_post_init(self, __context: Any) -> None:
        # Ensure _data is a fresh dict for each instance
        self._data = {
            "status": "success",
            "warnings": [],
            "errors": [],
        }

    def error(
        self,
        message: str,
        *,
        suggestion: str | None = None,
        exit_code: int = ExitCode.VALIDATION_ERROR,
    ) -> None:
        """Output an error message and set exit code."""
        self._exit_code = exit_code
        self._data["status"] = "error"

        if self.json_mode:
            error_obj: dict[str, Any] = {"message": message}
            if suggestion:
                error_obj["suggestion"] = suggestion
            self._data["errors"].append(error_obj)
        else:
            self.console.print(f"[red]✗[/red] {message}")
            if suggestion:
                self.console.print(f"  [dim]→ {suggestion}[/dim]")

    def header(self, title: str) -> None:
        """Output a section header."""
        if not self.json_mode:
            self.console.print()
            self.console.print("┌" + "─" * 58 + "┐")
            self.console.print("│" + f" {title}".ljust(58) + "│")
            self.console.print("└" + "─" * 58 + "┘")
            self.console.print()

    def table(
        self,
        title: str,
        columns: list[str],
        rows: list[list[str]],
        *,
        data_key: str | None = None,
    ) -> None:
        """Output a formatted table.

        Args:
            title: Table title
            columns: Column headers
            rows: Table rows (list of lists)
            data_key: Key to use in JSON output (defaults to snake_case of title)
        """
        key = data_key or title.lower().replace(" ", "_")

        if self.json_mode:
            self._data[key] = [dict(zip(columns, row)) for row in rows]
        else:
            table = Table(title=title, show_header=True, header_style="bold")
            for col in columns:
                table.add_column(col)
            for row in rows:
                table.add_row(*row)
            self.console.print(table)

    def set_data(self, key: str, value: Any) -> None:
        """Set arbitrary data in JSON output."""
        self._data[key] = value

    def finish(self) -> int:
        """Finalize output and return exit code.

        In JSON mode, prints the accumulated data as JSON to stdout.
        """
        if self.json_mode:
            self._data["exit_code"] = self._exit_code
            print(json.dumps(self._data, indent=2, default=str))

        return self._exit_code


def format_value(value: Any) -> str:
    """Render a derived attribute value for terminal output."""
    if isinstance(value, FunctionStack):
        return " / ".join(value.notation)
    if isinstance(value, AttitudeFunction):
        return value.notation
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, BaseModel):
        return json.dumps(value.model_dump(mode="json"))
    return str(value)


def setup_logging(console: Console, verbose: bool = False, debug: bool = False):
    """Configure logging for CLI commands."""
    level = logging.WARNING
    if verbose:
        level = logging.INFO
    if debug:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False, markup=True)],
        force=True,
    )
    logging.getLogger("typology").setLevel(level)
