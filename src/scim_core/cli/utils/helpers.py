"""Helper functions for CLI operations."""

import sys
from typing import Any, Dict, Optional, Tuple

import click

from ...codec_registry import CodecRegistry
from ...config import bootstrap, load_config
from ...endpoints import EndpointURLRegistry
from ...errors import ConfigurationError


class ExitCode:
    """Standard exit codes for the CLI."""

    SUCCESS = 0
    GENERIC_ERROR = 1
    INVALID_USAGE = 2
    NOT_FOUND = 3
    CONFIG_ERROR = 4


def resolve_format(cli_format: Optional[str] = None, default_tty: str = "table", default_non_tty: str = "json") -> str:
    """Resolve output format with TTY detection.

    Args:
        cli_format: Format specified via CLI flag
        default_tty: Default format for TTY output
        default_non_tty: Default format for non-TTY output

    Returns:
        Resolved format name
    """
    if cli_format:
        return cli_format.lower()

    # Auto-detect based on TTY
    if sys.stdout.isatty():
        return default_tty
    else:
        return default_non_tty


def resolve_log_level(verbose: int = 0) -> str:
    """Map the ``-v`` count to a logging level name."""
    if verbose >= 2:
        return "DEBUG"
    if verbose == 1:
        return "INFO"
    return "WARNING"


def handle_error(error: Exception, exit_code: int = ExitCode.GENERIC_ERROR) -> None:
    """Handle CLI errors with consistent formatting.

    Args:
        error: Exception to handle
        exit_code: Exit code to use
    """
    click.echo(f"Error: {str(error)}", err=True)
    sys.exit(exit_code)


def build_registries(ctx_obj: Dict[str, Any]) -> Tuple[CodecRegistry, EndpointURLRegistry]:
    """Build fresh registries from the configuration selected on the command line.

    Raises:
        ConfigurationError: If the configuration cannot be loaded
        SCIMCoreError: If applying it fails (e.g. a registration conflict)
    """
    result = load_config(ctx_obj.get("config_path"))
    if not result.success or result.config is None:
        raise ConfigurationError(result.error or "Unknown configuration error", path=result.path)
    return bootstrap(result.config, CodecRegistry(), EndpointURLRegistry())
