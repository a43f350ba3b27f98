from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class OsmNode(BaseModel):
    """
    OpenStreetMap node as imported from the OSM API.
    Attributes:
        id (int): Node identifier, always the one that was requested.
        latitude (float | None): Geographic latitude, None if the payload had none.
        longitude (float | None): Geographic longitude, None if the payload had none.
        tags (Mapping[str, str]): Read-only OSM tags of the node (k -> v).
    """

    model_config = ConfigDict(frozen=True)

    id: int
    latitude: float | None = None
    longitude: float | None = None
    tags: Mapping[str, str] = Field(default_factory=dict, validate_default=True)

    @field_validator("tags")
    @classmethod
    def freeze_tags(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_serializer("tags")
    def serialize_tags(self, tags: Mapping[str, str]) -> dict[str, str]:
        return dict(tags)

    @property
    def coordinates(self) -> tuple[float, float] | None:
        if self.latitude is None or self.longitude is None:
            return None

        return (self.latitude, self.longitude)

    def __hash__(self) -> int:
        return hash(
            (self.id, self.latitude, self.longitude, frozenset(self.tags.items()))
        )
