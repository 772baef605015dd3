"""CLI utilities package."""

from .helpers import (
    ExitCode,
    build_registries,
    handle_error,
    resolve_format,
    resolve_log_level,
)

__all__ = [
    "ExitCode",
    "build_registries",
    "handle_error",
    "resolve_format",
    "resolve_log_level",
]
