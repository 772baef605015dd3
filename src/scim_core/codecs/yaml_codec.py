"""YAML codec pair.

Not registered by default; operators plug it in through
:meth:`CodecRegistry.register_encoder` / ``register_decoder`` or the
``codecs`` section of the configuration file.
"""

from typing import Any

import yaml

from ..constants import YAML
from ..errors import AbstractSCIMException, BadRequestError
from .base import Decoder, Encoder, exception_envelope


class YAMLEncoder(Encoder):
    """Encoder producing block-style YAML."""

    def get_format(self) -> str:
        return YAML

    def encode(self, resource: Any) -> str:
        return yaml.safe_dump(resource, default_flow_style=False, sort_keys=False, allow_unicode=True)

    def encode_scim_exception(self, exception: AbstractSCIMException) -> str:
        return yaml.safe_dump(exception_envelope(exception), default_flow_style=False, sort_keys=False)


class YAMLDecoder(Decoder):
    """Decoder accepting YAML (and therefore JSON) bodies."""

    def get_format(self) -> str:
        return YAML

    def decode(self, body: str) -> Any:
        try:
            return yaml.safe_load(body)
        except yaml.YAMLError as e:
            raise BadRequestError(f"Malformed YAML payload: {e}") from e
