"""Base class for resource endpoints.

Concrete endpoints (users, groups, ...) subclass :class:`ResourceEndpoint`
and get codec resolution, endpoint URLs and exception translation from the
registries injected at construction time.
"""

from typing import Optional

from .codec_registry import CodecRegistry
from .codecs import Decoder, Encoder
from .endpoints import EndpointURLRegistry
from .errors import AbstractSCIMException, FormatNotSupportedError
from .logging import LogEvent, log_warning
from .response import SCIMResponse, encode_scim_exception


class ResourceEndpoint:
    """Common operations shared by all resource endpoints."""

    #: Resource type served by the endpoint, used for URL lookups.
    resource_type: Optional[str] = None

    def __init__(
        self,
        codec_registry: Optional[CodecRegistry] = None,
        endpoint_registry: Optional[EndpointURLRegistry] = None,
    ) -> None:
        """Initialize the endpoint.

        Args:
            codec_registry: Registry to resolve codecs from. Defaults to the
                            process-wide instance.
            endpoint_registry: Registry to resolve URLs from. Defaults to the
                               process-wide instance.
        """
        self.codec_registry = codec_registry or CodecRegistry.get_default()
        self.endpoint_registry = endpoint_registry or EndpointURLRegistry.get_default()

    def get_encoder(self, format: str) -> Encoder:
        return self.codec_registry.get_encoder(format)

    def get_decoder(self, format: str) -> Decoder:
        return self.codec_registry.get_decoder(format)

    def get_resource_endpoint_url(self, resource_type: Optional[str] = None) -> Optional[str]:
        """URL of ``resource_type`` (defaults to this endpoint's type)."""
        resource_type = resource_type or self.resource_type
        if resource_type is None:
            return None
        return self.endpoint_registry.get_resource_endpoint_url(resource_type)

    def build_location(self, resource_id: str) -> Optional[str]:
        """Location header value for a resource served by this endpoint."""
        if self.resource_type is None:
            return None
        return self.endpoint_registry.build_location(self.resource_type, resource_id)

    @staticmethod
    def encode_scim_exception(encoder: Encoder, exception: AbstractSCIMException) -> SCIMResponse:
        return encode_scim_exception(encoder, exception)

    def error_response(self, format: str, exception: AbstractSCIMException) -> SCIMResponse:
        """Translate ``exception`` using the encoder for ``format``.

        Falls back to the default format when ``format`` itself has no
        encoder, so reporting an error never fails for lack of a format.
        """
        try:
            encoder = self.codec_registry.get_encoder(format)
        except FormatNotSupportedError:
            log_warning(
                LogEvent.EXCEPTION_TRANSLATION,
                f"No encoder for '{format}', reporting error as '{self.codec_registry.default_format}'",
                format=format,
            )
            encoder = self.codec_registry.get_encoder(self.codec_registry.default_format)
        return encode_scim_exception(encoder, exception)
