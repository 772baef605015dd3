"""Default JSON codec pair."""

import json
from typing import Any

from ..constants import JSON
from ..errors import AbstractSCIMException, BadRequestError
from .base import Decoder, Encoder, exception_envelope


class JSONEncoder(Encoder):
    """Encoder for the canonical JSON format."""

    def get_format(self) -> str:
        return JSON

    def encode(self, resource: Any) -> str:
        return json.dumps(resource, ensure_ascii=False)

    def encode_scim_exception(self, exception: AbstractSCIMException) -> str:
        return json.dumps(exception_envelope(exception), ensure_ascii=False)


class JSONDecoder(Decoder):
    """Decoder for the canonical JSON format."""

    def get_format(self) -> str:
        return JSON

    def decode(self, body: str) -> Any:
        """Parse a JSON body.

        Raises:
            BadRequestError: If the body is not valid JSON
        """
        try:
            return json.loads(body)
        except (TypeError, ValueError) as e:
            raise BadRequestError(f"Malformed JSON payload: {e}") from e
