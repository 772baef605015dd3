"""Operator configuration for the SCIM core.

The configuration file is YAML:

    endpoints:
      User: https://scim.example.com/Users
      Group: https://scim.example.com/Groups
    codecs:
      encoders:
        yaml: scim_core.codecs:YAMLEncoder
      decoders:
        yaml: scim_core.codecs:YAMLDecoder

:func:`bootstrap` applies a :class:`CoreConfig` to the registries at startup.
"""

import importlib
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

from .codec_registry import CodecRegistry
from .config_paths import get_config_path
from .config_result import ConfigResult
from .endpoints import EndpointURLRegistry
from .errors import (
    CodecImportError,
    ConfigFileNotFoundError,
    ConfigurationError,
    InvalidConfigFormatError,
)
from .logging import LogEvent, get_logger, log_error, log_info, log_warning

logger = get_logger(__name__)


class CoreConfig:
    """Configuration for the registries."""

    def __init__(
        self,
        config_path: Optional[str] = None,
        endpoint_urls: Optional[Mapping[str, str]] = None,
        encoders: Optional[Mapping[str, str]] = None,
        decoders: Optional[Mapping[str, str]] = None,
    ):
        """Initialize configuration.

        Args:
            config_path: File the configuration was read from, if any.
            endpoint_urls: Resource type name to base URL.
            encoders: Format to dotted path of an encoder class.
            decoders: Format to dotted path of a decoder class.
        """
        self.config_path = config_path
        self.endpoint_urls: Dict[str, str] = dict(endpoint_urls or {})
        self.encoders: Dict[str, str] = dict(encoders or {})
        self.decoders: Dict[str, str] = dict(decoders or {})

    @classmethod
    def from_dict(cls, data: Any, path: Optional[str] = None) -> "CoreConfig":
        """Build a configuration from parsed YAML data.

        Raises:
            InvalidConfigFormatError: If a section has the wrong shape
        """
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise InvalidConfigFormatError("Configuration must be a mapping", path=path)

        endpoints = _string_mapping(data.get("endpoints"), "endpoints", path)
        codecs = data.get("codecs") or {}
        if not isinstance(codecs, dict):
            raise InvalidConfigFormatError("'codecs' must be a mapping", path=path)

        return cls(
            config_path=path,
            endpoint_urls=endpoints,
            encoders=_string_mapping(codecs.get("encoders"), "codecs.encoders", path),
            decoders=_string_mapping(codecs.get("decoders"), "codecs.decoders", path),
        )

    @classmethod
    def from_file(cls, path: str) -> "CoreConfig":
        """Read a configuration file.

        Raises:
            ConfigFileNotFoundError: If the file does not exist
            InvalidConfigFormatError: If the file is not valid configuration
        """
        config_file = Path(path)
        if not config_file.is_file():
            raise ConfigFileNotFoundError(f"Configuration file not found: {path}", path=path)
        try:
            data = yaml.safe_load(config_file.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise InvalidConfigFormatError(f"Invalid YAML in configuration: {e}", path=path) from e
        return cls.from_dict(data, path=path)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "endpoints": dict(self.endpoint_urls),
            "codecs": {"encoders": dict(self.encoders), "decoders": dict(self.decoders)},
        }


def _string_mapping(section: Any, name: str, path: Optional[str]) -> Dict[str, str]:
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise InvalidConfigFormatError(f"'{name}' must be a mapping", path=path)
    for key, value in section.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise InvalidConfigFormatError(
                f"'{name}' entries must map strings to strings, got {key!r}: {value!r}",
                path=path,
                expected_type="Dict[str, str]",
            )
    return dict(section)


def load_config(path: Optional[str] = None) -> ConfigResult:
    """Load configuration without raising.

    Args:
        path: Explicit file path. If None, the resolved config path is used
              and a missing file yields an empty default configuration.

    Returns:
        ConfigResult: Result of the configuration loading operation
    """
    resolved = path or get_config_path()
    if resolved is None:
        return ConfigResult(success=True, config=CoreConfig())

    try:
        config = CoreConfig.from_file(resolved)
    except ConfigurationError as e:
        log_error(LogEvent.CONFIG, e.message, path=resolved)
        return ConfigResult(success=False, error=e.message, exception=e, path=resolved)

    log_info(LogEvent.CONFIG, "Loaded configuration", path=resolved)
    return ConfigResult(success=True, config=config, path=resolved)


def import_codec(target: str, path: Optional[str] = None) -> Any:
    """Import and instantiate a codec class from a dotted path.

    Accepts ``package.module:ClassName`` or ``package.module.ClassName``.

    Raises:
        CodecImportError: If the class cannot be imported or instantiated
    """
    if ":" in target:
        module_name, _, attr = target.partition(":")
    else:
        module_name, _, attr = target.rpartition(".")
    if not module_name or not attr:
        raise CodecImportError(f"Invalid codec path '{target}'", target=target, path=path)

    try:
        codec_cls = getattr(importlib.import_module(module_name), attr)
    except (ImportError, AttributeError) as e:
        raise CodecImportError(f"Cannot import codec '{target}': {e}", target=target, path=path) from e

    try:
        return codec_cls()
    except Exception as e:
        raise CodecImportError(f"Cannot instantiate codec '{target}': {e}", target=target, path=path) from e


def bootstrap(
    config: CoreConfig,
    codec_registry: Optional[CodecRegistry] = None,
    endpoint_registry: Optional[EndpointURLRegistry] = None,
) -> Tuple[CodecRegistry, EndpointURLRegistry]:
    """Apply configuration to the registries.

    Registration conflicts propagate to the caller; a misconfigured server
    should not start.

    Args:
        config: Configuration to apply
        codec_registry: Target codec registry (default: process-wide)
        endpoint_registry: Target URL registry (default: process-wide)

    Returns:
        The codec registry and endpoint registry that were configured
    """
    codec_registry = codec_registry or CodecRegistry.get_default()
    endpoint_registry = endpoint_registry or EndpointURLRegistry.get_default()

    for format, target in config.encoders.items():
        encoder = import_codec(target, config.config_path)
        if encoder.get_format() != format:
            log_warning(
                LogEvent.CONFIG,
                f"Encoder '{target}' reports format '{encoder.get_format()}' but is registered as '{format}'",
                format=format,
            )
        codec_registry.register_encoder(format, encoder)

    for format, target in config.decoders.items():
        decoder = import_codec(target, config.config_path)
        if decoder.get_format() != format:
            log_warning(
                LogEvent.CONFIG,
                f"Decoder '{target}' reports format '{decoder.get_format()}' but is registered as '{format}'",
                format=format,
            )
        codec_registry.register_decoder(format, decoder)

    if config.endpoint_urls:
        endpoint_registry.register_resource_endpoint_urls(config.endpoint_urls)

    return codec_registry, endpoint_registry
