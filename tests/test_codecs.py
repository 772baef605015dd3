"""Tests for the bundled codecs."""

import json

import pytest

from scim_core.codecs import Decoder, Encoder, JSONDecoder, JSONEncoder, YAMLDecoder, YAMLEncoder
from scim_core.constants import JSON, YAML
from scim_core.errors import BadRequestError, ResourceNotFoundError

USER = {
    "schemas": ["urn:scim:schemas:core:1.0"],
    "userName": "bjensen",
    "name": {"givenName": "Barbara", "familyName": "Jensen"},
}


def test_abstract_codecs_cannot_be_instantiated() -> None:
    with pytest.raises(TypeError):
        Encoder()  # type: ignore[abstract]
    with pytest.raises(TypeError):
        Decoder()  # type: ignore[abstract]


class TestJSON:
    def test_formats(self) -> None:
        assert JSONEncoder().get_format() == JSON
        assert JSONDecoder().get_format() == JSON

    def test_encode_resource(self) -> None:
        assert json.loads(JSONEncoder().encode(USER)) == USER

    def test_decode_resource(self) -> None:
        body = '{"userName": "bjensen", "active": true}'
        assert JSONDecoder().decode(body) == {"userName": "bjensen", "active": True}

    def test_decode_malformed(self) -> None:
        with pytest.raises(BadRequestError) as exc_info:
            JSONDecoder().decode("{not json")
        assert exc_info.value.code == 400
        assert "Malformed JSON" in exc_info.value.description

    def test_encode_exception(self) -> None:
        body = JSONEncoder().encode_scim_exception(ResourceNotFoundError("User 42 not found"))
        assert json.loads(body) == {"Errors": [{"description": "User 42 not found", "code": "404"}]}

    def test_repr(self) -> None:
        assert repr(JSONEncoder()) == "JSONEncoder(format='json')"


class TestYAML:
    def test_formats(self) -> None:
        assert YAMLEncoder().get_format() == YAML
        assert YAMLDecoder().get_format() == YAML

    def test_encode_preserves_key_order(self) -> None:
        body = YAMLEncoder().encode(USER)
        assert body.index("schemas") < body.index("userName") < body.index("name:")

    def test_decode_resource(self) -> None:
        assert YAMLDecoder().decode("userName: bjensen\nactive: true\n") == {"userName": "bjensen", "active": True}

    def test_decode_malformed(self) -> None:
        with pytest.raises(BadRequestError):
            YAMLDecoder().decode("userName: [unclosed")
