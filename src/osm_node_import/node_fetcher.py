import logging
from types import TracebackType
from typing import ClassVar, Self

import requests

from osm_node_import.exceptions import (
    MalformedPayload,
    NodeFetchError,
    NodeNotFound,
    TransportFailure,
    UnexpectedContentType,
    UnexpectedStatus,
)
from osm_node_import.node_xml_decoder import NodeXmlDecoder
from osm_node_import.osm_api_configuration import OsmApiConfiguration
from osm_node_import.osm_node import OsmNode

logger = logging.getLogger(__name__)


class NodeFetcher:
    """
    Fetches single nodes from the OSM API.

    Every failure (missing node, non-XML response, unexpected status,
    transport error, undecodable payload) is logged and raised to the caller
    as NodeNotFound.
    """

    ACCEPT_HEADER: ClassVar[str] = "application/xml, text/xml, */*"
    XML_CONTENT_TYPES: ClassVar[set[str]] = {"application/xml", "text/xml", "*/*"}

    STATUS_BODY_EXCERPT_LENGTH: ClassVar[int] = 1000
    ERROR_BODY_EXCERPT_LENGTH: ClassVar[int] = 200

    def __init__(
        self,
        configuration: OsmApiConfiguration | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.configuration = configuration or OsmApiConfiguration.from_environment()

        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "User-Agent": self.configuration.user_agent,
                "Accept": self.ACCEPT_HEADER,
            }
        )

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    @classmethod
    def _is_xml_content_type(cls, content_type: str | None) -> bool:
        if content_type is None:
            return True

        media_type = content_type.split(";", 1)[0].strip().lower()
        return media_type in cls.XML_CONTENT_TYPES or media_type.endswith("+xml")

    def _get(self, node_id: int, url: str) -> requests.Response:
        try:
            return self.session.get(url, timeout=self.configuration.timeout)
        except requests.RequestException as exc:
            raise TransportFailure(node_id, exc) from exc

    def _classify(self, node_id: int, response: requests.Response) -> OsmNode:
        if response.status_code == requests.codes.not_found:
            logger.info("OSM node %s does not exist", node_id)
            raise UnexpectedStatus(node_id, response.status_code)

        if response.status_code != requests.codes.ok:
            logger.error(
                "Unexpected response when fetching OSM node %s: %s",
                node_id,
                response.status_code,
            )
            logger.error(
                "Response body (start): %s",
                response.text[: self.STATUS_BODY_EXCERPT_LENGTH],
            )
            raise UnexpectedStatus(node_id, response.status_code)

        content_type = response.headers.get("Content-Type")
        logger.debug("OSM response content-type: %s", content_type)

        if not self._is_xml_content_type(content_type):
            logger.error(
                "Unexpected non-XML response when fetching OSM node %s: content-type=%s",
                node_id,
                content_type,
            )
            logger.error(
                "Response body (start): %s",
                response.text[: self.STATUS_BODY_EXCERPT_LENGTH],
            )
            raise UnexpectedContentType(node_id, str(content_type))

        return NodeXmlDecoder.decode(node_id, response.content)

    def fetch_node(self, node_id: int) -> OsmNode:
        url = self.configuration.node_url(node_id)
        logger.info("Fetching OSM node %s from %s", node_id, url)

        response: requests.Response | None = None
        try:
            response = self._get(node_id, url)
            return self._classify(node_id, response)
        except TransportFailure as exc:
            logger.error("Request for OSM node %s failed: %s", node_id, exc.cause)
            raise NodeNotFound(node_id) from exc
        except MalformedPayload as exc:
            logger.error(
                "Error parsing OSM node %s: %s - response body starts with: %s",
                node_id,
                exc.message,
                self._body_excerpt(response),
            )
            raise NodeNotFound(node_id) from exc
        except NodeFetchError as exc:
            # status and content-type failures are logged while classifying
            raise NodeNotFound(node_id) from exc
        except Exception as exc:
            logger.exception(
                "Error fetching or parsing OSM node %s - response body starts with: %s",
                node_id,
                self._body_excerpt(response),
                exc_info=exc,
            )
            raise NodeNotFound(node_id) from exc

    @classmethod
    def _body_excerpt(cls, response: requests.Response | None) -> str | None:
        if response is None:
            return None

        return response.text[: cls.ERROR_BODY_EXCERPT_LENGTH]
