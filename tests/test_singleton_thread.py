"""Thread-safety tests for the registries and their process-wide instances."""

from __future__ import annotations

import threading
from typing import Generator, List

import pytest

from scim_core import CodecRegistry, EndpointURLRegistry
from scim_core.codecs import Encoder, YAMLEncoder
from scim_core.constants import JSON

THREADS = 50


@pytest.fixture(autouse=True)
def _reset_defaults() -> Generator[None, None, None]:
    CodecRegistry.cleanup()
    EndpointURLRegistry.cleanup()
    yield
    CodecRegistry.cleanup()
    EndpointURLRegistry.cleanup()


def _run_concurrently(target, count: int = THREADS) -> None:  # noqa: ANN001
    barrier = threading.Barrier(count)

    def _wrapped() -> None:  # noqa: WPS430
        barrier.wait()
        target()

    threads = [threading.Thread(target=_wrapped) for _ in range(count)]
    for th in threads:
        th.start()
    for th in threads:
        th.join()


def test_singleton_thread_safety() -> None:  # noqa: D401
    """Ensure multiple threads receive the exact same registry instance."""
    codec_ids: List[int] = []
    endpoint_ids: List[int] = []

    def _get_instances() -> None:  # noqa: WPS430
        codec_ids.append(id(CodecRegistry.get_default()))
        endpoint_ids.append(id(EndpointURLRegistry.get_default()))

    _run_concurrently(_get_instances)

    assert len(codec_ids) == THREADS
    assert len(set(codec_ids)) == 1, "CodecRegistry is not thread-safe singleton"
    assert len(set(endpoint_ids)) == 1, "EndpointURLRegistry is not thread-safe singleton"


def test_concurrent_first_lookup_sees_one_default_encoder() -> None:
    """All threads hitting a fresh registry get the same seeded encoder, with no errors."""
    registry = CodecRegistry()
    encoders: List[Encoder] = []
    errors: List[BaseException] = []

    def _lookup() -> None:  # noqa: WPS430
        try:
            encoders.append(registry.get_encoder(JSON))
        except BaseException as e:  # pragma: no cover - failure path
            errors.append(e)

    _run_concurrently(_lookup)

    assert errors == []
    assert len(encoders) == THREADS
    assert len({id(encoder) for encoder in encoders}) == 1


def test_concurrent_registration_has_single_winner() -> None:
    """Exactly one of many racing registrations for a format succeeds."""
    registry = CodecRegistry()
    results = []
    lock = threading.Lock()

    def _register() -> None:  # noqa: WPS430
        result = registry.try_register_encoder("yaml", YAMLEncoder())
        with lock:
            results.append(result)

    _run_concurrently(_register)

    winners = [r for r in results if r.success]
    assert len(winners) == 1
    assert len(results) == THREADS


def test_concurrent_endpoint_reads_during_replacement() -> None:
    """Readers only ever observe a complete mapping."""
    registry = EndpointURLRegistry()
    first = {"User": "https://a/Users", "Group": "https://a/Groups"}
    second = {"User": "https://b/Users", "Group": "https://b/Groups"}
    registry.register_resource_endpoint_urls(first)
    seen = []

    def _work() -> None:  # noqa: WPS430
        for i in range(100):
            if i % 10 == 0:
                registry.register_resource_endpoint_urls(second if i % 20 else first)
            user = registry.get_resource_endpoint_url("User")
            seen.append(user)

    _run_concurrently(_work, count=8)

    assert None not in seen
    assert set(seen) <= {"https://a/Users", "https://b/Users"}
