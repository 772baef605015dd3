"""Tests for the logging helpers."""

import logging
from unittest.mock import patch

import pytest

from scim_core.codec_registry import CodecRegistry
from scim_core.logging import LogEvent, LogLevel, _log, get_logger, log_info, log_warning


@pytest.mark.parametrize(
    "name, expected",
    [
        ("", "scim_core"),
        ("scim_core", "scim_core"),
        ("scim_core.codec_registry", "scim_core.codec_registry"),
        ("config", "scim_core.config"),
    ],
)
def test_get_logger_names(name: str, expected: str) -> None:
    assert get_logger(name).name == expected


def test_log_helpers_emit_tagged_records(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="scim_core"):
        log_info(LogEvent.ENDPOINT_REGISTRY, "Registered URLs", count=2)

    record = caplog.records[-1]
    assert record.levelno == logging.INFO
    assert record.getMessage() == "[endpoint_registry] Registered URLs"
    assert record.event == "endpoint_registry"  # type: ignore[attr-defined]
    assert record.event_data == {"count": 2}  # type: ignore[attr-defined]


def test_registration_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    registry = CodecRegistry()
    with caplog.at_level(logging.INFO, logger="scim_core"):
        registry.register_encoder("xml", registry.get_encoder("json"))

    assert any("Registered encoder for format 'xml'" in r.getMessage() for r in caplog.records)


def test_failing_callback_falls_back_to_root_logger(caplog: pytest.LogCaptureFixture) -> None:
    def _broken(level: int, event: str, data: dict) -> None:
        raise RuntimeError("callback down")

    with caplog.at_level(logging.ERROR):
        _log(_broken, LogLevel.WARNING, LogEvent.CONFIG, {"message": "hello"})

    assert any("Logging callback failed" in r.getMessage() for r in caplog.records)


def test_disabled_level_is_skipped() -> None:
    logger = get_logger()
    with patch.object(logger, "isEnabledFor", return_value=False), patch.object(logger, "log") as mock_log:
        log_warning(LogEvent.CONFIG, "quiet")
    mock_log.assert_not_called()
