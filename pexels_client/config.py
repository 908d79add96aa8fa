import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from pexels_client.errors import ConfigError

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PEXELS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # PEXELS_API_KEY takes precedence over the JSON config file when set.
    api_key: str = ""
    config_file: str = ".apiConfig"
    log_file: str = "pexels_client.log"
    request_timeout: float = 30.0


class ApiConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    api_key: str = Field(alias="pexelApiKey", min_length=1)


def load_config(path: str | Path) -> ApiConfig:
    logger.info("Loading config file: %s", path)
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError("opening config file", e) from e

    try:
        config = ApiConfig.model_validate_json(raw)
    except ValidationError as e:
        raise ConfigError("decoding config file", e) from e

    logger.info("Config file decoded and validated successfully.")
    return config


settings = Settings()
