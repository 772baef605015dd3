"""Resource endpoint URL inspection command."""

from typing import Optional

import click

from ...errors import SCIMCoreError
from ..formatters import create_console, format_endpoints_json, format_endpoints_table, format_json
from ..utils import ExitCode, build_registries, handle_error


@click.command()
@click.argument("resource_type", required=False)
@click.pass_context
def endpoints(ctx: click.Context, resource_type: Optional[str] = None) -> None:
    """List configured endpoint URLs, or print the URL of RESOURCE_TYPE."""
    try:
        _, endpoint_registry = build_registries(ctx.obj)
    except SCIMCoreError as e:
        handle_error(e, ExitCode.CONFIG_ERROR)
        return

    if resource_type is not None:
        url = endpoint_registry.get_resource_endpoint_url(resource_type)
        if url is None:
            handle_error(click.ClickException(f"No endpoint URL registered for '{resource_type}'"), ExitCode.NOT_FOUND)
            return
        if ctx.obj["format"] == "json":
            format_json({"resource_type": resource_type, "url": url})
        else:
            click.echo(url)
        return

    urls = {name: endpoint_registry.get_resource_endpoint_url(name) or "" for name in endpoint_registry.resource_types()}
    if ctx.obj["format"] == "json":
        format_json(format_endpoints_json(urls))
    else:
        format_endpoints_table(urls, create_console(no_color=ctx.obj["no_color"]))
