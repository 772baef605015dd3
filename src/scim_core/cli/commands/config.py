"""Configuration inspection commands."""

import click

from ...config import load_config
from ...config_paths import describe_config_sources
from ..formatters import create_console, format_json, format_key_values_table
from ..utils import ExitCode, handle_error


@click.group()
def config() -> None:
    """Inspect the operator configuration."""
    pass


@config.command()
@click.pass_context
def paths(ctx: click.Context) -> None:
    """Show configuration sources and which one is in effect."""
    sources = describe_config_sources()
    if ctx.obj.get("config_path"):
        sources["cli_value"] = ctx.obj["config_path"]
        sources["resolved"] = ctx.obj["config_path"]

    if ctx.obj["format"] == "json":
        format_json(sources)
    else:
        console = create_console(no_color=ctx.obj["no_color"])
        format_key_values_table("Configuration Sources", sources, console)
        console.print("\n[bold]Precedence:[/bold] --config > $SCIM_CORE_CONFIG_PATH > user config dir > defaults")


@config.command()
@click.pass_context
def show(ctx: click.Context) -> None:
    """Print the effective configuration."""
    result = load_config(ctx.obj.get("config_path"))
    if not result.success or result.config is None:
        handle_error(click.ClickException(result.error or "Unknown configuration error"), ExitCode.CONFIG_ERROR)
        return

    data = result.config.to_dict()
    data["path"] = result.path
    format_json(data)
