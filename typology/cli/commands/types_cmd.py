"""Types command listing every type code with its stack and temperament."""

import typer

from ..app import app, console, get_json_mode, is_agent_mode
from ..utils import Output, format_value


@app.command("types")
def types_command():
    """
    List the 16 type codes with their function stack, temperament and ratio.

    Example:
        typology types
        typology --json types
    """
    from ...core.dichotomies import all_type_codes
    from ...engine import derive_profile

    out = Output(console=console, json_mode=get_json_mode() or is_agent_mode())

    rows = []
    for code in all_type_codes():
        profile = derive_profile(
            code, select=["function_stack", "temperament", "ratio"]
        )
        rows.append(
            [
                code,
                format_value(profile["function_stack"]),
                format_value(profile["temperament"]),
                format_value(profile["ratio"]),
            ]
        )

    out.table("Types", ["Code", "Stack", "Temperament", "Ratio"], rows)
    raise typer.Exit(out.finish())
