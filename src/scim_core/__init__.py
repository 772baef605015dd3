"""Codec and endpoint registries for SCIM provisioning servers.

This package lets a server support multiple wire formats without each
endpoint knowing which one is in use, keeps track of the externally reachable
URL of every resource type, and turns protocol exceptions raised anywhere in
request processing into uniform responses.
"""

# Version of the package
try:
    from importlib.metadata import version as _version

    __version__ = _version("scim-core")
except ImportError:
    raise ImportError(
        "Failed to determine package version. This package requires Python 3.8+ "
        "where importlib.metadata is available, or must be installed as a package."
    )

# Import main components for easier access
from .codec_registry import CodecRegistry, CodecResult, CodecStatus
from .codecs import Decoder, Encoder, JSONDecoder, JSONEncoder, YAMLDecoder, YAMLEncoder
from .config import CoreConfig, bootstrap, load_config
from .endpoints import EndpointURLRegistry
from .errors import (
    AbstractSCIMException,
    BadRequestError,
    CodecKind,
    ConfigurationError,
    DuplicateResourceError,
    FormatNotSupportedError,
    RegistrationConflictError,
    ResourceNotFoundError,
    SCIMCoreError,
    SCIMInternalError,
    UnauthorizedError,
)
from .resource_endpoint import ResourceEndpoint
from .response import SCIMResponse, encode_scim_exception

# Define public API
__all__ = [
    # Registries
    "CodecRegistry",
    "CodecResult",
    "CodecStatus",
    "EndpointURLRegistry",
    "ResourceEndpoint",
    # Codecs
    "Encoder",
    "Decoder",
    "JSONEncoder",
    "JSONDecoder",
    "YAMLEncoder",
    "YAMLDecoder",
    # Responses
    "SCIMResponse",
    "encode_scim_exception",
    # Configuration
    "CoreConfig",
    "bootstrap",
    "load_config",
    # Errors
    "SCIMCoreError",
    "AbstractSCIMException",
    "SCIMInternalError",
    "FormatNotSupportedError",
    "RegistrationConflictError",
    "CodecKind",
    "BadRequestError",
    "UnauthorizedError",
    "ResourceNotFoundError",
    "DuplicateResourceError",
    "ConfigurationError",
]
