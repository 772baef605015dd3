"""Main CLI application for the SCIM core."""

from typing import Optional

import click
import rich_click as rich_click

from ..logging import get_logger
from .utils import resolve_format, resolve_log_level

# Configure rich-click
rich_click.rich_click.USE_RICH_MARKUP = True
rich_click.rich_click.USE_MARKDOWN = True
rich_click.rich_click.SHOW_ARGUMENTS = True
rich_click.rich_click.GROUP_ARGUMENTS_OPTIONS = True


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    help="Configuration file. Takes precedence over SCIM_CORE_CONFIG_PATH.",
)
@click.option(
    "--format",
    type=click.Choice(["table", "json"], case_sensitive=False),
    help="Output format. Defaults to 'table' for TTY, 'json' for non-TTY.",
)
@click.option("--verbose", "-v", count=True, help="Increase verbosity (can be used multiple times).")
@click.option("--no-color", is_flag=True, help="Disable color output.")
@click.version_option(package_name="scim-core", message="%(prog)s %(version)s")
@click.pass_context
def app(
    ctx: click.Context,
    config_path: Optional[str] = None,
    format: Optional[str] = None,
    verbose: int = 0,
    no_color: bool = False,
) -> None:
    """SCIM core CLI - inspect codec and endpoint registration.

    Builds the registries exactly as a server would at startup from the
    operator configuration, then reports on them.

    Examples:
      # Formats the server can encode and decode
      scim-core formats

      # URL of the User endpoint
      scim-core endpoints User

      # Response sent for a 404
      scim-core render-error 404 "User not found"
    """
    ctx.ensure_object(dict)

    log_level = resolve_log_level(verbose)
    get_logger().setLevel(log_level)

    ctx.obj.update(
        {
            "config_path": config_path,
            "format": resolve_format(format),
            "verbose": verbose,
            "no_color": no_color,
            "log_level": log_level,
        }
    )


# Import and register subcommands
from .commands import config, endpoints, errors, formats  # noqa: E402

app.add_command(formats.formats)
app.add_command(endpoints.endpoints)
app.add_command(errors.render_error)
app.add_command(config.config)


if __name__ == "__main__":
    app()
