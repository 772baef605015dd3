"""Codec capabilities: abstract encoder/decoder and bundled implementations."""

from .base import Decoder, Encoder
from .json_codec import JSONDecoder, JSONEncoder
from .yaml_codec import YAMLDecoder, YAMLEncoder

__all__ = [
    "Encoder",
    "Decoder",
    "JSONEncoder",
    "JSONDecoder",
    "YAMLEncoder",
    "YAMLDecoder",
]
