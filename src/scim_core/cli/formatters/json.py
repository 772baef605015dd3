"""JSON output formatter for CLI."""

import json
import sys
from enum import Enum as _Enum
from typing import Any, Dict, List, Mapping, Optional, TextIO

from ...response import SCIMResponse


def _default_serializer(obj: Any) -> Any:
    """Serialize otherwise non-JSON-serializable objects.

    - Enum -> value (fallback to name)
    - Mapping -> dict
    - Fallback -> str(obj)
    """
    if isinstance(obj, _Enum):
        return getattr(obj, "value", obj.name)
    if isinstance(obj, Mapping):
        return dict(obj)
    return str(obj)


def format_json(data: Any, output: Optional[TextIO] = None, indent: int = 2) -> None:
    """Format data as JSON and write to output.

    Args:
        data: Data to format
        output: Output stream (defaults to stdout)
        indent: JSON indentation level
    """
    if output is None:
        output = sys.stdout

    json.dump(
        data,
        output,
        indent=indent,
        ensure_ascii=False,
        sort_keys=True,
        default=_default_serializer,
    )
    output.write("\n")


def format_formats_json(rows: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Format the codec availability listing for JSON output."""
    return {"formats": rows, "count": len(rows)}


def format_endpoints_json(endpoints: Mapping[str, str]) -> Dict[str, Any]:
    """Format registered endpoint URLs for JSON output."""
    return {"endpoints": dict(sorted(endpoints.items())), "count": len(endpoints)}


def format_response_json(response: SCIMResponse) -> Dict[str, Any]:
    """Format a protocol response for JSON output."""
    return {"code": response.code, "headers": dict(response.headers), "body": response.body}
