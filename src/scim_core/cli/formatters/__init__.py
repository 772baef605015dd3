"""CLI formatters package."""

from .json import (
    format_endpoints_json,
    format_formats_json,
    format_json,
    format_response_json,
)
from .table import (
    create_console,
    format_endpoints_table,
    format_formats_table,
    format_key_values_table,
    format_response_table,
)

__all__ = [
    "format_json",
    "format_formats_json",
    "format_endpoints_json",
    "format_response_json",
    "create_console",
    "format_formats_table",
    "format_endpoints_table",
    "format_response_table",
    "format_key_values_table",
]
