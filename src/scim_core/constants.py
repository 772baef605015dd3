"""Shared protocol constants.

Format identifiers, MIME types, header names and the protocol response codes
used by the codec registry and the exception translator.
"""

from typing import Dict

# Format identifiers (case-sensitive registry keys)
JSON = "json"
XML = "xml"
YAML = "yaml"

# Default format used when nothing else resolves
DEFAULT_FORMAT = JSON

# MIME types
APPLICATION_JSON = "application/json"
APPLICATION_XML = "application/xml"
APPLICATION_YAML = "application/yaml"

# Header names
CONTENT_TYPE_HEADER = "Content-Type"
LOCATION_HEADER = "Location"

_CONTENT_TYPES: Dict[str, str] = {
    JSON: APPLICATION_JSON,
    XML: APPLICATION_XML,
    YAML: APPLICATION_YAML,
}


def identify_content_type(format: str) -> str:
    """Map a format identifier to the value of the Content-Type header.

    Unknown formats are assumed to already be a MIME type and are returned
    unchanged.

    Args:
        format: Format identifier (e.g. ``"json"``)

    Returns:
        Header value (e.g. ``"application/json"``)
    """
    return _CONTENT_TYPES.get(format, format)


class ResponseCode:
    """Protocol response codes and their default descriptions."""

    OK = 200
    CREATED = 201
    NO_CONTENT = 204

    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    RESOURCE_NOT_FOUND = 404
    FORMAT_NOT_SUPPORTED = 406
    RESOURCE_CONFLICT = 409
    INTERNAL_SERVER_ERROR = 500

    DESCRIPTIONS: Dict[int, str] = {
        BAD_REQUEST: "Bad request.",
        UNAUTHORIZED: "Unauthorized.",
        RESOURCE_NOT_FOUND: "Requested resource is not found.",
        FORMAT_NOT_SUPPORTED: "Requested format is not supported.",
        RESOURCE_CONFLICT: "Resource already exists in the service provider.",
        INTERNAL_SERVER_ERROR: "Internal server error.",
    }

    @classmethod
    def describe(cls, code: int) -> str:
        """Return the default description for ``code`` (empty if unknown)."""
        return cls.DESCRIPTIONS.get(code, "")
