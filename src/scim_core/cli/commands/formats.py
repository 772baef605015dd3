"""Codec format inspection command."""

from typing import Any, Dict, List

import click

from ...codec_registry import CodecRegistry
from ...constants import identify_content_type
from ...errors import CodecKind, SCIMCoreError
from ..formatters import create_console, format_formats_json, format_formats_table, format_json
from ..utils import ExitCode, build_registries, handle_error


def collect_format_rows(registry: CodecRegistry) -> List[Dict[str, Any]]:
    """Codec availability for every format the registry resolves."""
    encoders = set(registry.supported_formats(CodecKind.ENCODER))
    decoders = set(registry.supported_formats(CodecKind.DECODER))
    return [
        {
            "format": fmt,
            "content_type": identify_content_type(fmt),
            "encoder": fmt in encoders,
            "decoder": fmt in decoders,
        }
        for fmt in sorted(encoders | decoders)
    ]


@click.command()
@click.pass_context
def formats(ctx: click.Context) -> None:
    """List formats with an encoder and/or decoder after applying the configuration."""
    try:
        codec_registry, _ = build_registries(ctx.obj)
    except SCIMCoreError as e:
        handle_error(e, ExitCode.CONFIG_ERROR)
        return

    rows = collect_format_rows(codec_registry)
    if ctx.obj["format"] == "json":
        format_json(format_formats_json(rows))
    else:
        format_formats_table(rows, create_console(no_color=ctx.obj["no_color"]))
