"""Abstract codec capabilities.

An encoder or decoder is bound to exactly one format identifier. The codec
registry stores references to instances and never touches their state.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from ..errors import AbstractSCIMException


class Encoder(ABC):
    """Serializes resources and protocol exceptions for one format."""

    @abstractmethod
    def get_format(self) -> str:
        """Return the format identifier this encoder produces."""

    @abstractmethod
    def encode(self, resource: Any) -> str:
        """Serialize a resource representation."""

    @abstractmethod
    def encode_scim_exception(self, exception: AbstractSCIMException) -> str:
        """Serialize a protocol exception into an error body."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(format={self.get_format()!r})"


class Decoder(ABC):
    """Deserializes request bodies of one format."""

    @abstractmethod
    def get_format(self) -> str:
        """Return the format identifier this decoder accepts."""

    @abstractmethod
    def decode(self, body: str) -> Any:
        """Parse a request body into a resource representation."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(format={self.get_format()!r})"


def exception_envelope(exception: AbstractSCIMException) -> Dict[str, Any]:
    """Build the error envelope shared by the bundled encoders.

    The code is rendered as a string, as protocol clients expect.
    """
    return {
        "Errors": [
            {
                "description": exception.description,
                "code": str(exception.code),
            }
        ]
    }
