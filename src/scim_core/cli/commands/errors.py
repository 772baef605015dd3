"""Render the response the server would send for a protocol error."""

import click

from ...constants import DEFAULT_FORMAT
from ...errors import AbstractSCIMException, SCIMCoreError
from ...resource_endpoint import ResourceEndpoint
from ..formatters import create_console, format_json, format_response_json, format_response_table
from ..utils import ExitCode, build_registries, handle_error


@click.command("render-error")
@click.argument("code", type=click.IntRange(100, 599))
@click.argument("description", required=False)
@click.option(
    "--as",
    "wire_format",
    default=DEFAULT_FORMAT,
    show_default=True,
    help="Wire format to encode the error in. Unsupported formats fall back to the default.",
)
@click.pass_context
def render_error(ctx: click.Context, code: int, description: str, wire_format: str) -> None:
    """Show the response produced for an error with CODE and DESCRIPTION."""
    try:
        codec_registry, endpoint_registry = build_registries(ctx.obj)
    except SCIMCoreError as e:
        handle_error(e, ExitCode.CONFIG_ERROR)
        return

    endpoint = ResourceEndpoint(codec_registry, endpoint_registry)
    response = endpoint.error_response(wire_format, AbstractSCIMException(description, code=code))

    if ctx.obj["format"] == "json":
        format_json(format_response_json(response))
    else:
        format_response_table(response, create_console(no_color=ctx.obj["no_color"]))
