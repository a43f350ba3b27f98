import math
import xml.etree.ElementTree as ET

from osm_node_import.exceptions import MalformedPayload
from osm_node_import.osm_node import OsmNode


class NodeXmlDecoder:
    """
    Decodes OSM API XML payloads into OsmNode records.

    Only the first <node> element is read. Tags are collected from every
    <tag> element in the document, not only the ones nested in that node.
    """

    @staticmethod
    def _parse_coordinate(
        node_id: int, element: ET.Element, attribute: str
    ) -> float | None:
        if (value := element.get(attribute)) is None:
            return None

        # float() also accepts digit separators, which OSM never emits
        if "_" in value:
            raise MalformedPayload(
                node_id, f"attribute {attribute}={value!r} is not a number"
            )

        try:
            coordinate = float(value)
        except ValueError as exc:
            raise MalformedPayload(
                node_id, f"attribute {attribute}={value!r} is not a number"
            ) from exc

        if not math.isfinite(coordinate):
            raise MalformedPayload(
                node_id, f"attribute {attribute}={value!r} is not a finite number"
            )

        return coordinate

    @staticmethod
    def _collect_tags(root: ET.Element) -> dict[str, str]:
        return {
            key: value
            for tag in root.iter("tag")
            if (key := tag.get("k")) is not None
            and (value := tag.get("v")) is not None
        }

    @classmethod
    def decode(cls, node_id: int, xml: str | bytes) -> OsmNode:
        try:
            root = ET.fromstring(xml)
        except (ET.ParseError, LookupError, ValueError) as exc:
            # unknown or unsupported declared encodings surface as LookupError/ValueError
            raise MalformedPayload(node_id, f"invalid XML: {exc}") from exc

        if (node_element := next(root.iter("node"), None)) is None:
            raise MalformedPayload(node_id, "no node element in payload")

        return OsmNode(
            id=node_id,
            latitude=cls._parse_coordinate(node_id, node_element, "lat"),
            longitude=cls._parse_coordinate(node_id, node_element, "lon"),
            tags=cls._collect_tags(root),
        )
