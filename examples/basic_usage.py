#!/usr/bin/env python3
"""Example of wiring the registries into a resource endpoint."""

import uuid

from scim_core import (
    CodecRegistry,
    EndpointURLRegistry,
    FormatNotSupportedError,
    ResourceEndpoint,
    SCIMResponse,
    YAMLDecoder,
    YAMLEncoder,
)
from scim_core.errors import AbstractSCIMException, BadRequestError

_users = {}


class UserEndpoint(ResourceEndpoint):
    """Toy user endpoint storing users in memory."""

    resource_type = "User"

    def create(self, body, input_format, output_format):
        """Create a user and return the response for the client.

        Args:
            body: Request body
            input_format: Format of the request body
            output_format: Format requested for the response
        """
        try:
            decoder = self.get_decoder(input_format)
            encoder = self.get_encoder(output_format)
            user = decoder.decode(body)
            if not isinstance(user, dict) or "userName" not in user:
                raise BadRequestError("userName is required")
            user["id"] = str(uuid.uuid4())
            _users[user["id"]] = user

            headers = {}
            location = self.build_location(user["id"])
            if location is not None:
                headers["Location"] = location
            return SCIMResponse(201, encoder.encode(user), headers)
        except AbstractSCIMException as e:
            return self.error_response(output_format, e)


def main():
    """Run the example."""
    codecs = CodecRegistry()
    codecs.register_encoder("yaml", YAMLEncoder())
    codecs.register_decoder("yaml", YAMLDecoder())

    endpoints = EndpointURLRegistry()
    endpoints.register_resource_endpoint_urls({"User": "https://scim.example.com/Users"})

    endpoint = UserEndpoint(codecs, endpoints)

    for body, fmt_in, fmt_out in [
        ('{"userName": "bjensen"}', "json", "json"),
        ("userName: jsmith\n", "yaml", "yaml"),
        ('{"displayName": "no user name"}', "json", "json"),
        ('{"userName": "x"}', "xml", "json"),
    ]:
        response = endpoint.create(body, fmt_in, fmt_out)
        print(f"{fmt_in} -> {fmt_out}: {response.code}")
        for name, value in response.headers.items():
            print(f"  {name}: {value}")
        print(f"  {response.body.strip()}")
        print()

    try:
        codecs.get_encoder("xml")
    except FormatNotSupportedError as e:
        print(f"xml: {e.code} {e.description}")


if __name__ == "__main__":
    main()
