from typing import Callable

import pytest
import requests

from osm_node_import import NodeFetcher, OsmApiConfiguration

ResponseFactory = Callable[[int, bytes, str | None], requests.Response]


@pytest.fixture
def node_xml() -> bytes:
    return """<?xml version="1.0" encoding="UTF-8"?>
<osm version="0.6" generator="openstreetmap-cgimap" copyright="OpenStreetMap and contributors">
    <node id="5589879349" visible="true" version="8" changeset="1" timestamp="2023-01-01T00:00:00Z" user="user" uid="1" lat="49.4096754" lon="8.6848214">
        <tag k="amenity" v="cafe"/>
        <tag k="cuisine" v="coffee_shop"/>
        <tag k="name" v="Café X"/>
    </node>
</osm>
""".encode()


@pytest.fixture
def osm_api_configuration() -> OsmApiConfiguration:
    return OsmApiConfiguration(
        base_url="https://osm.example.org/api/0.6",
        user_agent="OsmNodeImportTests/1.0",
        timeout=5.0,
    )


@pytest.fixture
def node_fetcher(osm_api_configuration: OsmApiConfiguration) -> NodeFetcher:
    return NodeFetcher(osm_api_configuration, session=requests.Session())


@pytest.fixture
def response_factory() -> ResponseFactory:
    def create_response(
        status_code: int, body: bytes, content_type: str | None
    ) -> requests.Response:
        response = requests.Response()
        response.status_code = status_code
        response._content = body
        response.encoding = "utf-8"
        if content_type is not None:
            response.headers["Content-Type"] = content_type

        return response

    return create_response
