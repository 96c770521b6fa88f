from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENDPOINT_URL = "https://gisco-services.ec.europa.eu/api?q={query}&limit={limit}"


class Settings(BaseSettings):
    endpoint_url: str = DEFAULT_ENDPOINT_URL
    referer: Optional[str] = None
    user_agent: Optional[str] = "webtools-geocoding/1.0"
    timeout: float = Field(10.0, gt=0)

    # which historical response layout to expect (see geocode.shapes)
    response_shape: str = "features"
    default_limit: int = Field(5, ge=1)

    model_config = SettingsConfigDict(
        env_prefix="WEBTOOLS_GEOCODING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

settings = Settings()
