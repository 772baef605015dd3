"""Tests for the ResourceEndpoint base class."""

import json
from typing import Generator

import pytest

from scim_core import CodecRegistry, EndpointURLRegistry, ResourceEndpoint
from scim_core.codecs import JSONEncoder, YAMLEncoder
from scim_core.constants import APPLICATION_JSON, APPLICATION_YAML, CONTENT_TYPE_HEADER, JSON, YAML
from scim_core.errors import FormatNotSupportedError, ResourceNotFoundError


class UserEndpoint(ResourceEndpoint):
    resource_type = "User"


@pytest.fixture
def codec_registry() -> CodecRegistry:
    return CodecRegistry()


@pytest.fixture
def endpoint_registry() -> EndpointURLRegistry:
    registry = EndpointURLRegistry()
    registry.register_resource_endpoint_urls({"User": "https://host/Users", "Group": "https://host/Groups"})
    return registry


@pytest.fixture
def endpoint(codec_registry: CodecRegistry, endpoint_registry: EndpointURLRegistry) -> UserEndpoint:
    return UserEndpoint(codec_registry, endpoint_registry)


@pytest.fixture
def _reset_defaults() -> Generator[None, None, None]:
    CodecRegistry.cleanup()
    EndpointURLRegistry.cleanup()
    yield
    CodecRegistry.cleanup()
    EndpointURLRegistry.cleanup()


@pytest.mark.usefixtures("_reset_defaults")
def test_defaults_to_process_wide_registries() -> None:
    endpoint = ResourceEndpoint()
    assert endpoint.codec_registry is CodecRegistry.get_default()
    assert endpoint.endpoint_registry is EndpointURLRegistry.get_default()


def test_injected_registries_are_used(endpoint: UserEndpoint, codec_registry: CodecRegistry) -> None:
    codec_registry.register_encoder(YAML, YAMLEncoder())
    assert isinstance(endpoint.get_encoder(YAML), YAMLEncoder)
    assert isinstance(endpoint.get_encoder(JSON), JSONEncoder)
    with pytest.raises(FormatNotSupportedError):
        endpoint.get_decoder(YAML)


def test_endpoint_urls(endpoint: UserEndpoint) -> None:
    assert endpoint.get_resource_endpoint_url() == "https://host/Users"
    assert endpoint.get_resource_endpoint_url("Group") == "https://host/Groups"
    assert endpoint.get_resource_endpoint_url("Role") is None
    assert endpoint.build_location("42") == "https://host/Users/42"


def test_untyped_endpoint_has_no_url(codec_registry: CodecRegistry, endpoint_registry: EndpointURLRegistry) -> None:
    endpoint = ResourceEndpoint(codec_registry, endpoint_registry)
    assert endpoint.get_resource_endpoint_url() is None
    assert endpoint.build_location("42") is None


def test_error_response_uses_requested_format(endpoint: UserEndpoint, codec_registry: CodecRegistry) -> None:
    codec_registry.register_encoder(YAML, YAMLEncoder())
    response = endpoint.error_response(YAML, ResourceNotFoundError())
    assert response.code == 404
    assert response.headers[CONTENT_TYPE_HEADER] == APPLICATION_YAML


def test_error_response_falls_back_to_default_format(endpoint: UserEndpoint) -> None:
    response = endpoint.error_response("xml", FormatNotSupportedError("xml"))
    assert response.code == 406
    assert response.headers[CONTENT_TYPE_HEADER] == APPLICATION_JSON
    assert json.loads(response.body)["Errors"][0]["code"] == "406"


def test_static_translation(endpoint: UserEndpoint) -> None:
    response = endpoint.encode_scim_exception(JSONEncoder(), ResourceNotFoundError("gone"))
    assert response.code == 404
    assert json.loads(response.body)["Errors"][0]["description"] == "gone"
