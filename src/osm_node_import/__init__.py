from .exceptions import (
    MalformedPayload,
    NodeFetchError,
    NodeNotFound,
    TransportFailure,
    UnexpectedContentType,
    UnexpectedStatus,
)
from .node_fetcher import NodeFetcher
from .node_xml_decoder import NodeXmlDecoder
from .osm_api_configuration import OsmApiConfiguration
from .osm_node import OsmNode

__all__ = [
    "NodeFetcher",
    "NodeXmlDecoder",
    "OsmNode",
    "OsmApiConfiguration",
    "NodeNotFound",
    "NodeFetchError",
    "TransportFailure",
    "UnexpectedStatus",
    "UnexpectedContentType",
    "MalformedPayload",
]
