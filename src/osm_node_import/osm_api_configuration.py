import logging
import os
from typing import ClassVar, Self

from pydantic import BaseModel, ConfigDict, field_validator, ValidationError

logger = logging.getLogger(__name__)


class OsmApiConfiguration(BaseModel):
    DEFAULT_BASE_URL: ClassVar[str] = "https://api.openstreetmap.org/api/0.6"
    DEFAULT_USER_AGENT: ClassVar[str] = "OsmNodeImport/0.1.0 (import-script)"
    DEFAULT_TIMEOUT: ClassVar[float] = 10.0

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float | None = DEFAULT_TIMEOUT

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("user_agent")
    @classmethod
    def validate_user_agent(cls, value: str) -> str:
        # OSM rejects or redirects requests that look anonymous
        if not value.strip():
            raise ValueError("User agent must not be blank")

        return value

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, value: float | None) -> float | None:
        if value is not None and value <= 0:
            raise ValueError(f"Timeout must be positive, got {value}")

        return value

    @classmethod
    def from_environment(cls) -> Self:
        """
        Reads OSM_API_BASE_URL, OSM_API_USER_AGENT and OSM_API_TIMEOUT,
        falling back to defaults for unset variables. An empty OSM_API_TIMEOUT
        disables the timeout.
        """
        values: dict[str, str | None] = {
            "base_url": os.environ.get("OSM_API_BASE_URL", cls.DEFAULT_BASE_URL),
            "user_agent": os.environ.get("OSM_API_USER_AGENT", cls.DEFAULT_USER_AGENT),
            "timeout": os.environ.get("OSM_API_TIMEOUT", str(cls.DEFAULT_TIMEOUT)),
        }
        if values["timeout"] == "":
            values["timeout"] = None

        try:
            return cls.model_validate(values)
        except ValidationError as exc:
            logger.exception("Invalid OSM API configuration", exc_info=exc)
            raise

    def node_url(self, node_id: int) -> str:
        return f"{self.base_url}/node/{node_id}"
