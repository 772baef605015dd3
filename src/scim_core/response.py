"""Protocol response value object and exception translation."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from .codecs import Encoder
from .constants import CONTENT_TYPE_HEADER, identify_content_type
from .errors import AbstractSCIMException
from .logging import LogEvent, log_debug


@dataclass(frozen=True)
class SCIMResponse:
    """Uniform response shape for both success and failure paths.

    Attributes:
        code: Protocol response code
        body: Serialized body
        headers: Read-only mapping of header name to value
    """

    code: int
    body: str
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    def header(self, name: str) -> Optional[str]:
        """Case-insensitive header lookup."""
        lower = name.lower()
        for k, v in self.headers.items():
            if k.lower() == lower:
                return v
        return None


def encode_scim_exception(encoder: Encoder, exception: AbstractSCIMException) -> SCIMResponse:
    """Build the response for a protocol exception.

    The caller must have resolved ``encoder`` already; the default JSON
    encoder is the usual choice when the requested format is the failure.

    Args:
        encoder: Encoder used for the error body
        exception: The raised protocol exception

    Returns:
        Response carrying the exception's code, the encoded body and a single
        Content-Type header
    """
    headers = {CONTENT_TYPE_HEADER: identify_content_type(encoder.get_format())}
    log_debug(
        LogEvent.EXCEPTION_TRANSLATION,
        "Encoding protocol exception",
        code=exception.code,
        format=encoder.get_format(),
    )
    return SCIMResponse(exception.code, encoder.encode_scim_exception(exception), headers)
