"""Error types for the SCIM core.

Protocol exceptions carry a protocol response code and a human readable
description, so they can be turned into a response by
:func:`scim_core.response.encode_scim_exception`. Configuration errors are
raised while loading operator configuration and carry no response code.
"""

from enum import Enum
from typing import Optional

from .constants import ResponseCode


class SCIMCoreError(Exception):
    """Base class for all errors raised by the core.

    This is the parent class for all package-specific exceptions.
    """

    pass


class AbstractSCIMException(SCIMCoreError):
    """Base class for protocol exceptions.

    Every instance exposes ``code`` (protocol response code) and
    ``description``.
    """

    default_code: int = ResponseCode.INTERNAL_SERVER_ERROR

    def __init__(self, description: Optional[str] = None, code: Optional[int] = None) -> None:
        """Initialize protocol exception.

        Args:
            description: Human readable description. Defaults to the standard
                         description for the response code.
            code: Protocol response code. Defaults to the class default.
        """
        self.code = code if code is not None else self.default_code
        self.description = description if description is not None else ResponseCode.describe(self.code)
        super().__init__(self.description)

    def __str__(self) -> str:
        """Return the description."""
        return self.description


class SCIMInternalError(AbstractSCIMException):
    """Opaque internal failure, fatal to the current request only.

    Examples:
        >>> try:
        ...     handle_request()
        ... except SCIMInternalError as e:
        ...     print(e.code, e.cause)
    """

    def __init__(
        self,
        description: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        """Initialize internal error.

        Args:
            description: Human readable description
            cause: Underlying exception, if any
        """
        super().__init__(description)
        self.cause = cause


class FormatNotSupportedError(AbstractSCIMException):
    """Raised when no codec is registered for the requested format.

    Examples:
        >>> try:
        ...     registry.get_encoder("xml")
        ... except FormatNotSupportedError as e:
        ...     print(f"Format {e.format} is not supported")
    """

    default_code = ResponseCode.FORMAT_NOT_SUPPORTED

    def __init__(self, format: str, description: Optional[str] = None) -> None:
        """Initialize format not supported error.

        Args:
            format: The requested format identifier
            description: Optional description override
        """
        super().__init__(description)
        self.format = format


class CodecKind(str, Enum):
    """Kind of codec capability."""

    ENCODER = "Encoder"
    DECODER = "Decoder"


class RegistrationConflictError(AbstractSCIMException):
    """Raised when a codec is registered for a format that already has one.

    The codec registered first stays in effect.
    """

    def __init__(self, kind: CodecKind, format: str) -> None:
        """Initialize registration conflict error.

        Args:
            kind: Whether an encoder or a decoder was being registered
            format: The conflicting format identifier
        """
        super().__init__(f"{kind.value} for the given format is already registered.")
        self.kind = kind
        self.format = format


class BadRequestError(AbstractSCIMException):
    """Raised when a request body cannot be understood."""

    default_code = ResponseCode.BAD_REQUEST


class UnauthorizedError(AbstractSCIMException):
    """Raised when a request lacks valid credentials."""

    default_code = ResponseCode.UNAUTHORIZED


class ResourceNotFoundError(AbstractSCIMException):
    """Raised when the requested resource does not exist."""

    default_code = ResponseCode.RESOURCE_NOT_FOUND


class DuplicateResourceError(AbstractSCIMException):
    """Raised when creating a resource that already exists."""

    default_code = ResponseCode.RESOURCE_CONFLICT


class ConfigurationError(SCIMCoreError):
    """Base class for configuration-related errors.

    This is raised for errors related to configuration loading, parsing,
    or applying it to the registries.
    """

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        """Initialize configuration error.

        Args:
            message: Error message
            path: Optional path to the configuration file that caused the error
        """
        super().__init__(message)
        self.message = message
        self.path = path


class ConfigFileNotFoundError(ConfigurationError):
    """Raised when a configuration file is not found.

    Examples:
        >>> try:
        ...     CoreConfig.from_file("missing.yml")
        ... except ConfigFileNotFoundError as e:
        ...     print(f"Config file not found: {e.path}")
    """

    pass


class InvalidConfigFormatError(ConfigurationError):
    """Raised when a configuration file has an invalid format."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        expected_type: str = "dict",
    ) -> None:
        """Initialize invalid format error.

        Args:
            message: Error message
            path: Optional path to the configuration file
            expected_type: Expected type of the offending section
        """
        super().__init__(message, path)
        self.expected_type = expected_type


class CodecImportError(ConfigurationError):
    """Raised when a configured codec class cannot be imported or built."""

    def __init__(self, message: str, target: str, path: Optional[str] = None) -> None:
        """Initialize codec import error.

        Args:
            message: Error message
            target: The dotted import path that failed
            path: Optional path to the configuration file
        """
        super().__init__(message, path)
        self.target = target
