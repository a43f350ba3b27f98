import pytest
from pydantic import ValidationError

from osm_node_import import OsmNode


class TestOsmNode:
    EXAMPLE_NODE = OsmNode(
        id=1234, latitude=49.5, longitude=8.6, tags={"amenity": "cafe"}
    )

    def test_defaults(self) -> None:
        # Act
        node = OsmNode(id=1234)

        # Assert
        assert node.latitude is None
        assert node.longitude is None
        assert node.tags == {}

    def test_coordinates(self) -> None:
        # Act
        coordinates = self.EXAMPLE_NODE.coordinates

        # Assert
        assert coordinates == (49.5, 8.6)

    @pytest.mark.parametrize(
        ("latitude", "longitude"),
        [
            pytest.param(None, 8.6, id="missing latitude"),
            pytest.param(49.5, None, id="missing longitude"),
            pytest.param(None, None, id="missing both"),
        ],
    )
    def test_coordinates_incomplete(
        self, latitude: float | None, longitude: float | None
    ) -> None:
        # Arrange
        node = OsmNode(id=1234, latitude=latitude, longitude=longitude)

        # Act
        coordinates = node.coordinates

        # Assert
        assert coordinates is None

    def test_frozen(self) -> None:
        # Act
        with pytest.raises(ValidationError):
            self.EXAMPLE_NODE.latitude = 50.0  # type: ignore[misc]

        # Assert
        assert self.EXAMPLE_NODE.latitude == 49.5

    def test_tags_read_only(self) -> None:
        # Arrange
        source_tags = {"amenity": "cafe"}
        node = OsmNode(id=1234, tags=source_tags)

        # Act
        with pytest.raises(TypeError):
            node.tags["amenity"] = "bar"  # type: ignore[index]
        source_tags["amenity"] = "bar"

        # Assert
        assert node.tags == {"amenity": "cafe"}

    def test_default_tags_read_only(self) -> None:
        # Arrange
        node = OsmNode(id=1234)

        # Act
        with pytest.raises(TypeError):
            node.tags["amenity"] = "bar"  # type: ignore[index]

        # Assert
        assert node.tags == {}

    def test_hash(self) -> None:
        # Arrange
        other = OsmNode(
            id=1234, latitude=49.5, longitude=8.6, tags={"amenity": "cafe"}
        )

        # Assert
        assert hash(self.EXAMPLE_NODE) == hash(other)
        assert len({self.EXAMPLE_NODE, other}) == 1

    def test_model_dump(self) -> None:
        # Act
        dumped = self.EXAMPLE_NODE.model_dump()

        # Assert
        assert dumped == {
            "id": 1234,
            "latitude": 49.5,
            "longitude": 8.6,
            "tags": {"amenity": "cafe"},
        }
        assert type(dumped["tags"]) is dict

    def test_eq(self) -> None:
        # Arrange
        other = OsmNode(
            id=1234, latitude=49.5, longitude=8.6, tags={"amenity": "cafe"}
        )

        # Assert
        assert self.EXAMPLE_NODE == other
        assert self.EXAMPLE_NODE != other.model_copy(update={"tags": {}})
