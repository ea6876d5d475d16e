"""Config command for viewing and managing typology configuration."""

import typer

from ..app import app, console
from ...config import (
    CLI_MODES,
    CONFIG_FILE,
    RESOLUTION_MODES,
    get_config,
    parse_attribute_list,
    reset_config,
)


VALID_KEYS = {
    "resolver.mode",
    "cli.mode",
    "cli.attributes",
}

CHOICE_FIELDS = {
    "resolver.mode": RESOLUTION_MODES,
    "cli.mode": CLI_MODES,
}


@app.command("config")
def config_command(
    action: str = typer.Argument(
        ...,
        help="Action: show, set, reset",
    ),
    key: str | None = typer.Argument(
        None,
        help="Config key (e.g. resolver.mode, cli.attributes)",
    ),
    value: str | None = typer.Argument(
        None,
        help="Value to set",
    ),
):
    """View or modify typology configuration.

    Examples:
        typology config show
        typology config set resolver.mode lazy
        typology config set cli.attributes dominant,auxiliary,temperament
        typology config reset
    """
    if action == "show":
        _show_config()
    elif action == "set":
        if not key or value is None:
            console.print("[red]Usage:[/red] typology config set <key> <value>")
            console.print()
            console.print("Available keys:")
            for k in sorted(VALID_KEYS):
                console.print(f"  {k}")
            raise typer.Exit(1)
        _set_config(key, value)
    elif action == "reset":
        _reset_config()
    else:
        console.print(f"[red]Unknown action:[/red] {action}")
        console.print("Valid actions: show, set, reset")
        raise typer.Exit(1)


def _show_config():
    """Display current resolved configuration."""
    config = get_config()

    console.print()
    console.print("[bold]Typology Configuration[/bold]")
    console.print("─" * 40)

    console.print()
    console.print("[bold cyan]Resolver[/bold cyan] (rule graph evaluation)")
    console.print(f"  mode       = {config.resolver.mode}")

    console.print()
    console.print("[bold cyan]CLI[/bold cyan]")
    console.print(f"  mode       = {config.cli.mode}")
    console.print(f"  attributes = {', '.join(config.cli.attributes)}")

    console.print()
    if CONFIG_FILE.exists():
        console.print(f"Config file: {CONFIG_FILE}")
    else:
        console.print(f"Config file: [dim]not created yet[/dim] ({CONFIG_FILE})")
    console.print()


def _set_config(key: str, value: str):
    """Set a config value and save."""
    if key not in VALID_KEYS:
        console.print(f"[red]Unknown key:[/red] {key}")
        console.print()
        console.print("Available keys:")
        for k in sorted(VALID_KEYS):
            console.print(f"  {k}")
        raise typer.Exit(1)

    choices = CHOICE_FIELDS.get(key)
    if choices and value not in choices:
        console.print(f"[red]Invalid value:[/red] {value}")
        console.print(f"Expected one of: {', '.join(choices)}")
        raise typer.Exit(1)

    config = get_config()
    section, field_name = key.split(".", 1)
    target = config.resolver if section == "resolver" else config.cli

    if key == "cli.attributes":
        from ...engine import TYPE_GRAPH

        names = parse_attribute_list(value)
        unknown = [name for name in names if name not in TYPE_GRAPH]
        if not names or unknown:
            console.print(f"[red]Unknown attribute(s):[/red] {', '.join(unknown)}")
            raise typer.Exit(1)
        setattr(target, field_name, names)
    else:
        setattr(target, field_name, value)

    config.save()
    reset_config()  # Clear cached singleton so next get_config() reloads

    console.print(f"[green]✓[/green] Set {key} = {value}")
    console.print(f"  Saved to {CONFIG_FILE}")


def _reset_config():
    """Reset config to defaults."""
    if CONFIG_FILE.exists():
        CONFIG_FILE.unlink()
        reset_config()
        console.print("[green]✓[/green] Config reset to defaults")
        console.print(f"  Removed {CONFIG_FILE}")
    else:
        console.print("Config already at defaults (no config file exists)")
