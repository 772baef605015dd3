"""Registry of encoders and decoders keyed by format identifier.

This module provides the CodecRegistry class, which resolves a format
identifier to the codec needed to encode or decode protocol payloads, with
exactly-once registration per format.

Typical usage:

    from scim_core import CodecRegistry

    registry = CodecRegistry.get_default()  # process-wide instance
    encoder = registry.get_encoder("json")  # always available

    registry.register_encoder("yaml", YAMLEncoder())
    registry.register_encoder("yaml", YAMLEncoder())  # RegistrationConflictError

The default JSON pair is seeded lazily on the first lookup with an atomic
insert-if-absent, so concurrent first callers all observe the same default
instance and a lookup never raises a registration conflict.
"""

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, List, Optional, TypeVar, Union

from .codecs import Decoder, Encoder, JSONDecoder, JSONEncoder
from .concurrent_map import ConcurrentMap
from .constants import DEFAULT_FORMAT
from .errors import (
    AbstractSCIMException,
    CodecKind,
    FormatNotSupportedError,
    RegistrationConflictError,
    SCIMInternalError,
)
from .logging import LogEvent, get_logger, log_debug, log_error, log_info

logger = get_logger(__name__)

T = TypeVar("T")
Codec = Union[Encoder, Decoder]


class CodecStatus(Enum):
    """Outcome of a codec lookup or registration."""

    OK = "ok"
    FORMAT_NOT_SUPPORTED = "format_not_supported"
    REGISTRATION_CONFLICT = "registration_conflict"
    INTERNAL = "internal"


@dataclass(frozen=True)
class CodecResult(Generic[T]):
    """Result of a codec operation in result-variant form.

    ``value`` is set only for successful lookups; ``error`` holds the protocol
    exception describing any failure, with its response code and description.
    """

    status: CodecStatus
    value: Optional[T] = None
    error: Optional[AbstractSCIMException] = None

    @property
    def success(self) -> bool:
        return self.status is CodecStatus.OK


def _as_result(operation: Callable[[], T]) -> CodecResult[T]:
    try:
        return CodecResult(CodecStatus.OK, value=operation())
    except FormatNotSupportedError as e:
        return CodecResult(CodecStatus.FORMAT_NOT_SUPPORTED, error=e)
    except RegistrationConflictError as e:
        return CodecResult(CodecStatus.REGISTRATION_CONFLICT, error=e)
    except Exception as e:
        log_error(
            LogEvent.CODEC_REGISTRY,
            f"Unexpected codec failure: {e}",
            error=str(e),
        )
        return CodecResult(CodecStatus.INTERNAL, error=SCIMInternalError(cause=e))


class CodecRegistry:
    """Registry of encoders and decoders supported by the server."""

    _default_instance: Optional["CodecRegistry"] = None
    _instance_lock = threading.RLock()

    @classmethod
    def get_default(cls) -> "CodecRegistry":
        """Get the process-wide registry instance.

        Returns:
            The shared CodecRegistry instance
        """
        with cls._instance_lock:
            if cls._default_instance is None:
                cls._default_instance = cls()
            return cls._default_instance

    @staticmethod
    def cleanup() -> None:
        """Drop the process-wide instance."""
        with CodecRegistry._instance_lock:
            CodecRegistry._default_instance = None

    def __init__(
        self,
        default_format: str = DEFAULT_FORMAT,
        default_encoder: Callable[[], Encoder] = JSONEncoder,
        default_decoder: Callable[[], Decoder] = JSONDecoder,
    ) -> None:
        """Initialize an empty registry.

        Args:
            default_format: Format seeded lazily on first lookup.
            default_encoder: Factory for the default encoder.
            default_decoder: Factory for the default decoder.
        """
        self.default_format = default_format
        self._default_encoder = default_encoder
        self._default_decoder = default_decoder
        self._encoders: ConcurrentMap[str, Encoder] = ConcurrentMap()
        self._decoders: ConcurrentMap[str, Decoder] = ConcurrentMap()
        self._encoder_seeded = False
        self._decoder_seeded = False

    def _seed_encoder(self) -> None:
        if self._encoder_seeded:
            return
        _, inserted = self._encoders.insert_if_absent(self.default_format, self._default_encoder)
        if inserted:
            log_debug(LogEvent.CODEC_REGISTRY, "Seeded default encoder", format=self.default_format)
        self._encoder_seeded = True

    def _seed_decoder(self) -> None:
        if self._decoder_seeded:
            return
        _, inserted = self._decoders.insert_if_absent(self.default_format, self._default_decoder)
        if inserted:
            log_debug(LogEvent.CODEC_REGISTRY, "Seeded default decoder", format=self.default_format)
        self._decoder_seeded = True

    def get_encoder(self, format: str) -> Encoder:
        """Return the encoder registered for ``format``.

        The default encoder is seeded first if it has never been.

        Args:
            format: Format identifier

        Returns:
            The registered encoder

        Raises:
            FormatNotSupportedError: If no encoder is registered for the format
        """
        self._seed_encoder()
        encoder = self._encoders.get(format)
        if encoder is None:
            # Reported by the caller
            log_debug(LogEvent.CODEC_REGISTRY, "No encoder for format", format=format)
            raise FormatNotSupportedError(format)
        return encoder

    def get_decoder(self, format: str) -> Decoder:
        """Return the decoder registered for ``format``.

        Raises:
            FormatNotSupportedError: If no decoder is registered for the format
        """
        self._seed_decoder()
        decoder = self._decoders.get(format)
        if decoder is None:
            log_debug(LogEvent.CODEC_REGISTRY, "No decoder for format", format=format)
            raise FormatNotSupportedError(format)
        return decoder

    def register_encoder(self, format: str, encoder: Encoder) -> None:
        """Register an encoder for ``format``.

        Args:
            format: Format the encoder supports
            encoder: Encoder instance

        Raises:
            RegistrationConflictError: If an encoder is already registered
        """
        self._register(self._encoders, CodecKind.ENCODER, format, encoder)

    def register_decoder(self, format: str, decoder: Decoder) -> None:
        """Register a decoder for ``format``.

        Raises:
            RegistrationConflictError: If a decoder is already registered
        """
        self._register(self._decoders, CodecKind.DECODER, format, decoder)

    def _register(self, codecs: ConcurrentMap, kind: CodecKind, format: str, codec: Codec) -> None:
        _, inserted = codecs.insert_if_absent(format, lambda: codec)
        if not inserted:
            log_error(
                LogEvent.CODEC_REGISTRY,
                f"{kind.value} for format '{format}' is already registered",
                format=format,
                kind=kind.value,
            )
            raise RegistrationConflictError(kind, format)
        log_info(
            LogEvent.CODEC_REGISTRY,
            f"Registered {kind.value.lower()} for format '{format}'",
            format=format,
            codec=type(codec).__name__,
        )

    def lookup_encoder(self, format: str) -> CodecResult[Encoder]:
        """Result-variant form of :meth:`get_encoder`."""
        return _as_result(lambda: self.get_encoder(format))

    def lookup_decoder(self, format: str) -> CodecResult[Decoder]:
        """Result-variant form of :meth:`get_decoder`."""
        return _as_result(lambda: self.get_decoder(format))

    def try_register_encoder(self, format: str, encoder: Encoder) -> CodecResult[None]:
        """Result-variant form of :meth:`register_encoder`."""
        return _as_result(lambda: self.register_encoder(format, encoder))

    def try_register_decoder(self, format: str, decoder: Decoder) -> CodecResult[None]:
        """Result-variant form of :meth:`register_decoder`."""
        return _as_result(lambda: self.register_decoder(format, decoder))

    def supported_formats(self, kind: Optional[CodecKind] = None) -> List[str]:
        """List formats that currently resolve.

        Args:
            kind: Restrict to encoders or decoders. ``None`` lists formats
                  with either.

        Returns:
            Sorted list of format identifiers
        """
        formats = set()
        if kind in (None, CodecKind.ENCODER):
            self._seed_encoder()
            formats.update(self._encoders.snapshot())
        if kind in (None, CodecKind.DECODER):
            self._seed_decoder()
            formats.update(self._decoders.snapshot())
        return sorted(formats)
