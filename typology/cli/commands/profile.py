"""Profile command for deriving type dynamics from a type code."""

import logging

import typer
import yaml

from ..app import app, console, get_json_mode, is_agent_mode
from ..utils import ExitCode, Output, format_value, setup_logging

logger = logging.getLogger(__name__)


@app.command("profile")
def profile_command(
    code: str = typer.Argument(..., help="Four-letter type code (e.g. INTP)"),
    all_attributes: bool = typer.Option(
        False, "--all", "-a", help="Show every derived attribute"
    ),
    attributes: str | None = typer.Option(
        None,
        "--attributes",
        help="Comma-separated attribute names (overrides config cli.attributes)",
    ),
    as_yaml: bool = typer.Option(False, "--yaml", help="Print the profile as YAML"),
    lazy: bool = typer.Option(
        False, "--lazy", help="Resolve only the requested attributes"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed logs"),
    debug: bool = typer.Option(
        False, "--debug", help="Show debug-level logs (very verbose)"
    ),
):
    """
    Derive the function stack, temperament and preferences for a type code.

    Example:
        typology profile INTP
        typology profile ESTJ --all
        typology profile ENFP --attributes dominant,inferior --lazy
        typology --json profile ISFP
    """
    from ...config import get_config, parse_attribute_list
    from ...core.errors import DerivationError, InvalidTypeCodeError
    from ...engine import TYPE_GRAPH, derive_profile

    if verbose or debug:
        setup_logging(console, verbose=verbose, debug=debug)

    out = Output(console=console, json_mode=get_json_mode() or is_agent_mode())
    config = get_config()

    if all_attributes:
        select = None
    elif attributes:
        select = parse_attribute_list(attributes)
    else:
        select = list(config.cli.attributes)

    if select is not None:
        unknown = [name for name in select if name not in TYPE_GRAPH]
        if unknown:
            out.error(
                f"Unknown attribute(s): {', '.join(unknown)}",
                suggestion=f"Available: {', '.join(TYPE_GRAPH.order)}",
            )
            raise typer.Exit(out.finish())

    try:
        profile = derive_profile(code, mode="lazy" if lazy else None, select=select)
    except InvalidTypeCodeError as e:
        out.error(
            str(e),
            suggestion="Use one letter from each pair in order: E/I, S/N, T/F, J/P",
        )
        raise typer.Exit(out.finish())
    except DerivationError as e:
        logger.error("Derivation failed for %s: %s", code, e)
        out.error(f"Derivation failed: {e}", exit_code=ExitCode.DERIVATION_ERROR)
        raise typer.Exit(out.finish())

    if as_yaml:
        typer.echo(
            yaml.safe_dump(
                {"code": profile.code, "attributes": profile.to_dict()},
                sort_keys=False,
            ),
            nl=False,
        )
        return

    if out.json_mode:
        out.set_data("code", profile.code)
        out.set_data("attributes", profile.to_dict())
    else:
        out.header(f"Type {profile.code}")
        rows = [[name, format_value(value)] for name, value in profile.items()]
        out.table("Attributes", ["Attribute", "Value"], rows)

    raise typer.Exit(out.finish())
